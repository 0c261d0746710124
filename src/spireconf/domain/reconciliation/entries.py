"""Lifecycle reconciliation of registration entries against the registry.

Each operation issues its RPCs synchronously, derives the observed entry from
the registry's answer and returns it. Nothing is cached between calls.

Observed-state policy shared by create and update: the entry echoed in the
batch result is authoritative (id, identities and selectors). When the echo
carries no selectors the desired selectors are kept, and when the result
carries no entry at all the desired entry is returned as submitted.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from spireconf.domain.errors import (
    ConflictError,
    CreateFailedError,
    DeleteFailedError,
    NotFoundError,
    OperationFailedError,
    RegistryError,
    UpdateFailedError,
    ValidationError,
)
from spireconf.domain.ports.registry import OutcomeCode

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from spireconf.domain.model import Entry, Identity
    from spireconf.domain.ports.registry import EntryRegistry, EntryResult, ItemOutcome

log = getLogger(__name__)


class EntryOperation(StrEnum):
    LOOKUP = "lookup"
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    IMPORT = "import"


@contextmanager
def _operation(operation: EntryOperation, entry_id: str | None = None) -> Iterator[None]:
    try:
        yield
    except RegistryError as exc:
        exc.annotate(operation=operation.value, entry_id=entry_id)
        raise


@dataclass(slots=True)
class EntryReconciler:
    """Maps desired entries to registry calls and back to observed entries."""

    registry: EntryRegistry
    timeout: float | None = None

    def lookup(self, subject_identity: Identity) -> Entry:
        """Return the single registry entry for ``subject_identity``.

        Zero or several matches raise ``ValidationError`` with ``count`` set.
        """

        with _operation(EntryOperation.LOOKUP):
            entries = self.registry.list_by_identity(subject_identity, timeout=self.timeout)
            if len(entries) != 1:
                raise ValidationError(
                    f"Expected exactly one entry for {subject_identity}, got {len(entries)}",
                    count=len(entries),
                )
            entry = entries[0]
            log.info("Looked up entry %s for %s", entry.id, subject_identity)
            return entry

    def create(self, desired: Entry) -> Entry:
        entry_id = desired.id or None
        with _operation(EntryOperation.CREATE, entry_id):
            if desired.parent_identity is None:
                raise ValidationError("Creating an entry requires a parent identity")
            if not desired.selectors:
                raise ValidationError("Creating an entry requires at least one selector")

            results = self.registry.batch_create([desired], timeout=self.timeout)
            result = _first_result(results, error=CreateFailedError)
            if not result.outcome.succeeded:
                error = (
                    ConflictError
                    if result.outcome.code is OutcomeCode.ALREADY_EXISTS
                    else CreateFailedError
                )
                raise _outcome_error(error, "Failed to create entry", result.outcome)

            observed = _observed(desired, result)
            log.info("Created entry %s for %s", observed.id, observed.subject_identity)
            return observed

    def read(self, entry_id: str) -> Entry:
        with _operation(EntryOperation.READ, entry_id):
            return self._get(entry_id)

    def update(self, desired: Entry) -> Entry:
        with _operation(EntryOperation.UPDATE, desired.id or None):
            if not desired.is_persisted:
                raise ValidationError("Updating an entry requires its id")
            if not desired.selectors:
                raise ValidationError("Updating an entry requires at least one selector")

            results = self.registry.batch_update([desired], timeout=self.timeout)
            result = _first_result(results, error=UpdateFailedError)
            if result.outcome.code is OutcomeCode.NOT_FOUND:
                raise NotFoundError(f"Entry {desired.id} does not exist")
            if not result.outcome.succeeded:
                raise _outcome_error(UpdateFailedError, "Failed to update entry", result.outcome)

            observed = _observed(desired, result)
            log.info("Updated entry %s", observed.id)
            return observed

    def delete(self, entry_id: str) -> None:
        """Delete ``entry_id``; an entry already gone counts as deleted."""

        with _operation(EntryOperation.DELETE, entry_id):
            results = self.registry.batch_delete([entry_id], timeout=self.timeout)
            if not results:
                raise DeleteFailedError("Registry returned no result for delete")
            outcome = results[0].outcome
            if outcome.code is OutcomeCode.NOT_FOUND:
                log.info("Entry %s already absent; nothing to delete", entry_id)
                return
            if not outcome.succeeded:
                raise _outcome_error(DeleteFailedError, "Failed to delete entry", outcome)
            log.info("Deleted entry %s", entry_id)

    def import_entry(self, entry_id: str) -> Entry:
        """Resolve a bare entry id into a full entry."""

        with _operation(EntryOperation.IMPORT, entry_id):
            return self._get(entry_id)

    def _get(self, entry_id: str) -> Entry:
        entry = self.registry.get(entry_id, timeout=self.timeout)
        log.info("Read entry %s", entry.id)
        return entry


def _first_result(
    results: Sequence[EntryResult],
    *,
    error: type[OperationFailedError],
) -> EntryResult:
    # one-item batches: only the first result is meaningful
    if not results:
        raise error("Registry returned no result for the submitted entry")
    return results[0]


def _outcome_error[E: OperationFailedError](
    error: type[E],
    message: str,
    outcome: ItemOutcome,
) -> E:
    return error(
        f"{message}: {outcome.reason}",
        reason=outcome.message,
        code=outcome.code.value,
    )


def _observed(desired: Entry, result: EntryResult) -> Entry:
    echoed = result.entry
    if echoed is None:
        return desired
    return replace(
        echoed,
        id=echoed.id or desired.id,
        parent_identity=echoed.parent_identity or desired.parent_identity,
        selectors=echoed.selectors or desired.selectors,
    )


__all__ = ["EntryOperation", "EntryReconciler"]
