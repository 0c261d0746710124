"""Port for the remote registration entry registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from spireconf.domain.model import Entry, Identity


class OutcomeCode(StrEnum):
    """Per-item status the registry reports inside a batch response."""

    OK = "OK"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class ItemOutcome:
    code: OutcomeCode = OutcomeCode.OK
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.code is OutcomeCode.OK

    @property
    def reason(self) -> str:
        """Registry-supplied reason, falling back to the code name."""
        return self.message or self.code.value


@dataclass(frozen=True, slots=True)
class EntryResult:
    """One item of a batch create/update response."""

    entry: Entry | None
    outcome: ItemOutcome


@dataclass(frozen=True, slots=True)
class DeleteResult:
    """One item of a batch delete response."""

    entry_id: str
    outcome: ItemOutcome


@runtime_checkable
class EntryRegistry(Protocol):
    """Synchronous access to the registry.

    ``timeout`` is the per-call deadline in seconds and is handed to the
    transport as-is. Implementations never retry.
    """

    def list_by_identity(
        self, identity: Identity, *, timeout: float | None = None
    ) -> list[Entry]: ...

    def get(self, entry_id: str, *, timeout: float | None = None) -> Entry: ...

    def batch_create(
        self, entries: Sequence[Entry], *, timeout: float | None = None
    ) -> list[EntryResult]: ...

    def batch_update(
        self, entries: Sequence[Entry], *, timeout: float | None = None
    ) -> list[EntryResult]: ...

    def batch_delete(
        self, entry_ids: Sequence[str], *, timeout: float | None = None
    ) -> list[DeleteResult]: ...


__all__ = [
    "DeleteResult",
    "EntryRegistry",
    "EntryResult",
    "ItemOutcome",
    "OutcomeCode",
]
