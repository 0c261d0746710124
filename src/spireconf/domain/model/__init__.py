"""Public domain model surface."""

from __future__ import annotations

from spireconf.domain.model.entry import Entry
from spireconf.domain.model.identity import SPIFFE_SCHEME, Identity
from spireconf.domain.model.selector import Selector, selector_set

__all__ = [
    "SPIFFE_SCHEME",
    "Entry",
    "Identity",
    "Selector",
    "selector_set",
]
