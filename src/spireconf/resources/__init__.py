"""Host-facing declarative boundary for registration entries."""

from __future__ import annotations

from .diagnostics import Diagnostic, Diagnostics, Severity
from .entry import EntryDataSource, EntryResource, OperationResult
from .models import EntryDataSourceModel, EntryResourceModel, IdentityModel, SelectorModel

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "EntryDataSource",
    "EntryDataSourceModel",
    "EntryResource",
    "EntryResourceModel",
    "IdentityModel",
    "OperationResult",
    "SelectorModel",
    "Severity",
]
