"""Error taxonomy for registry reconciliation.

Adapters raise these; the reconciler annotates them with the lifecycle step
and entry id and re-raises them unchanged in type.
"""

from __future__ import annotations


class RegistryError(RuntimeError):
    """Base class for failures talking to or reconciling with the registry."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        entry_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.entry_id = entry_id

    def annotate(self, *, operation: str, entry_id: str | None = None) -> None:
        """Attach operation context without overriding context already set."""

        if self.operation is None:
            self.operation = operation
        if self.entry_id is None and entry_id:
            self.entry_id = entry_id

    def __str__(self) -> str:
        context = [
            part
            for part in (
                self.operation,
                f"entry {self.entry_id}" if self.entry_id else None,
            )
            if part
        ]
        if not context:
            return self.message
        return f"{' '.join(context)}: {self.message}"


class TransportError(RegistryError):
    """Raised when the channel to the registry fails."""


class NotFoundError(RegistryError):
    """Raised when the requested entry id is unknown to the registry."""


class ValidationError(RegistryError):
    """Raised when desired state is invalid or a lookup is not unique."""

    def __init__(self, message: str, *, count: int | None = None, **context: str | None) -> None:
        super().__init__(message, **context)
        self.count = count


class OperationFailedError(RegistryError):
    """Raised when the registry reports a non-success outcome."""

    def __init__(
        self,
        message: str,
        *,
        reason: str = "",
        code: str | None = None,
        **context: str | None,
    ) -> None:
        super().__init__(message, **context)
        self.reason = reason
        self.code = code


class CreateFailedError(OperationFailedError):
    """Raised when the registry rejects a create."""


class ConflictError(CreateFailedError):
    """Raised when the entry being created already exists."""


class UpdateFailedError(OperationFailedError):
    """Raised when the registry rejects an update."""


class DeleteFailedError(OperationFailedError):
    """Raised when the registry rejects a delete."""


__all__ = [
    "ConflictError",
    "CreateFailedError",
    "DeleteFailedError",
    "NotFoundError",
    "OperationFailedError",
    "RegistryError",
    "TransportError",
    "UpdateFailedError",
    "ValidationError",
]
