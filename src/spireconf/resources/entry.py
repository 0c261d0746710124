"""Entry resource and data source: host-facing lifecycle with diagnostics.

Every failure is reported as an error diagnostic on the returned result; the
host decides whether to halt. A read that finds the entry gone yields an
empty state so the host can plan a re-create.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel

from spireconf.domain.errors import NotFoundError, RegistryError

from .diagnostics import Diagnostics
from .models import EntryDataSourceModel, EntryResourceModel

if TYPE_CHECKING:
    from collections.abc import Callable

    from spireconf.domain.reconciliation import EntryReconciler

log = getLogger(__name__)


@dataclass
class OperationResult[S: BaseModel]:
    state: S | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_error


def _attempt[T](diagnostics: Diagnostics, summary: str, action: Callable[[], T]) -> T | None:
    try:
        return action()
    except (RegistryError, ValueError) as exc:
        log.debug("%s: %s", summary, exc)
        diagnostics.add_error(summary, str(exc))
        return None


@dataclass(slots=True)
class EntryResource:
    """Managed ``entry`` resource backed by the shared reconciler."""

    reconciler: EntryReconciler

    def create(self, plan: EntryResourceModel) -> OperationResult[EntryResourceModel]:
        result = OperationResult[EntryResourceModel]()
        observed = _attempt(
            result.diagnostics,
            "Failed to create entry",
            lambda: EntryResourceModel.from_entry(self.reconciler.create(plan.to_entry())),
        )
        result.state = observed
        return result

    def read(self, state: EntryResourceModel) -> OperationResult[EntryResourceModel]:
        result = OperationResult[EntryResourceModel]()
        if not state.id:
            result.diagnostics.add_error("Failed to read entry", "State carries no entry id")
            return result
        entry_id = state.id
        try:
            observed = self.reconciler.read(entry_id)
        except NotFoundError:
            result.diagnostics.add_warning(
                "Entry no longer exists",
                f"Entry {entry_id} was removed from the registry and will be re-created",
            )
            return result
        except RegistryError as exc:
            result.diagnostics.add_error("Failed to read entry", str(exc))
            result.state = state
            return result
        result.state = _attempt(
            result.diagnostics,
            "Failed to read entry",
            lambda: EntryResourceModel.from_entry(observed),
        )
        return result

    def update(
        self,
        plan: EntryResourceModel,
        state: EntryResourceModel | None = None,
    ) -> OperationResult[EntryResourceModel]:
        """Push ``plan`` to the registry; the id comes from prior state if absent."""

        result = OperationResult[EntryResourceModel]()
        entry_id = plan.id or (state.id if state is not None else None)
        result.state = _attempt(
            result.diagnostics,
            "Failed to update entry",
            lambda: EntryResourceModel.from_entry(
                self.reconciler.update(plan.to_entry(entry_id=entry_id))
            ),
        )
        return result

    def delete(self, state: EntryResourceModel) -> OperationResult[EntryResourceModel]:
        result = OperationResult[EntryResourceModel]()
        if not state.id:
            result.diagnostics.add_error("Failed to delete entry", "State carries no entry id")
            return result
        entry_id = state.id
        try:
            self.reconciler.delete(entry_id)
        except RegistryError as exc:
            result.diagnostics.add_error("Failed to delete entry", str(exc))
            result.state = state
        return result

    def import_state(self, entry_id: str) -> OperationResult[EntryResourceModel]:
        result = OperationResult[EntryResourceModel]()
        result.state = _attempt(
            result.diagnostics,
            "Failed to import entry",
            lambda: EntryResourceModel.from_entry(self.reconciler.import_entry(entry_id)),
        )
        return result


@dataclass(slots=True)
class EntryDataSource:
    """Read-only ``entry`` data source: exactly one match by subject identity."""

    reconciler: EntryReconciler

    def read(self, config: EntryDataSourceModel) -> OperationResult[EntryDataSourceModel]:
        result = OperationResult[EntryDataSourceModel]()
        result.state = _attempt(
            result.diagnostics,
            "Failed to find entry matching data source filter",
            lambda: EntryDataSourceModel.from_entry(
                self.reconciler.lookup(config.subject_identity.to_identity())
            ),
        )
        return result
