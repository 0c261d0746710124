"""Registration entry record."""

from __future__ import annotations

from dataclasses import dataclass

from .identity import Identity  # noqa: TC001
from .selector import Selector, selector_set


@dataclass(frozen=True, slots=True, kw_only=True)
class Entry:
    """Binds a workload identity to a parent identity and a selector set.

    ``id`` stays empty until the registry assigns one. ``parent_identity`` is
    absent on read-only lookups unless the registry returned it.
    """

    subject_identity: Identity
    parent_identity: Identity | None = None
    selectors: tuple[Selector, ...] = ()
    id: str = ""

    @property
    def is_persisted(self) -> bool:
        return bool(self.id)

    @property
    def selector_set(self) -> frozenset[Selector]:
        return selector_set(self.selectors)

    def same_selectors(self, other: Entry) -> bool:
        return self.selector_set == other.selector_set
