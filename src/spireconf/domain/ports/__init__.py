"""Domain port definitions for adapters."""

from __future__ import annotations

from .registry import DeleteResult, EntryRegistry, EntryResult, ItemOutcome, OutcomeCode

__all__ = [
    "DeleteResult",
    "EntryRegistry",
    "EntryResult",
    "ItemOutcome",
    "OutcomeCode",
]
