"""SPIRE Entry API client implementing the registry port."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

import grpc

from spireconf.domain.errors import (
    ConflictError,
    NotFoundError,
    OperationFailedError,
    RegistryError,
    TransportError,
)

from .schema import (
    BatchDeleteEntryRequest,
    BatchDeleteEntryResponse,
    BatchEntryRequest,
    BatchEntryResponse,
    BatchUpdateEntryRequest,
    EntryMaskPayload,
    EntryPayload,
    GetEntryRequest,
    ListEntriesFilter,
    ListEntriesRequest,
    ListEntriesResponse,
)
from .translator import (
    entry_payload,
    identity_payload,
    translate_delete_result,
    translate_entry,
    translate_entry_result,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from spireconf.domain.model import Entry, Identity
    from spireconf.domain.ports.registry import DeleteResult, EntryResult

    from .proto import Payload
    from .schema import SpireBaseModel
    from .stub import EntryServiceStub

log = getLogger(__name__)

_MANAGED_FIELDS: Final[EntryMaskPayload] = EntryMaskPayload(
    spiffe_id=True, parent_id=True, selectors=True
)

_TRANSPORT_CODES: Final[frozenset[grpc.StatusCode]] = frozenset(
    {
        grpc.StatusCode.UNAVAILABLE,
        grpc.StatusCode.DEADLINE_EXCEEDED,
        grpc.StatusCode.CANCELLED,
        grpc.StatusCode.UNAUTHENTICATED,
    }
)


class SpireEntryClient:
    """Shape translation between domain entries and the Entry service.

    No retries and no decisions: every RPC either returns the registry's answer
    or raises a ``RegistryError``.
    """

    def __init__(self, stub: EntryServiceStub, *, page_size: int = 0) -> None:
        self._stub = stub
        self._page_size = page_size

    def list_by_identity(self, identity: Identity, *, timeout: float | None = None) -> list[Entry]:
        entries: list[Entry] = []
        page_token = ""
        while True:
            request = ListEntriesRequest(
                filter=ListEntriesFilter(by_spiffe_id=identity_payload(identity)),
                page_size=self._page_size,
                page_token=page_token,
            )
            raw_payload = _invoke("ListEntries", self._stub.list_entries, request, timeout)
            page, page_token = _decode("ListEntries", raw_payload, _parse_entries_page)
            entries.extend(page)
            if not page_token:
                return entries

    def get(self, entry_id: str, *, timeout: float | None = None) -> Entry:
        request = GetEntryRequest(id=entry_id)
        raw_payload = _invoke("GetEntry", self._stub.get_entry, request, timeout)
        return _decode("GetEntry", raw_payload, _parse_entry)

    def batch_create(
        self, entries: Sequence[Entry], *, timeout: float | None = None
    ) -> list[EntryResult]:
        request = BatchEntryRequest(entries=[entry_payload(entry) for entry in entries])
        raw_payload = _invoke("BatchCreateEntry", self._stub.batch_create_entry, request, timeout)
        return _decode("BatchCreateEntry", raw_payload, _parse_entry_results)

    def batch_update(
        self, entries: Sequence[Entry], *, timeout: float | None = None
    ) -> list[EntryResult]:
        request = BatchUpdateEntryRequest(
            entries=[entry_payload(entry) for entry in entries], input_mask=_MANAGED_FIELDS
        )
        raw_payload = _invoke("BatchUpdateEntry", self._stub.batch_update_entry, request, timeout)
        return _decode("BatchUpdateEntry", raw_payload, _parse_entry_results)

    def batch_delete(
        self, entry_ids: Sequence[str], *, timeout: float | None = None
    ) -> list[DeleteResult]:
        request = BatchDeleteEntryRequest(ids=list(entry_ids))
        raw_payload = _invoke("BatchDeleteEntry", self._stub.batch_delete_entry, request, timeout)
        return _decode("BatchDeleteEntry", raw_payload, _parse_delete_results)


def _parse_entries_page(raw_payload: Payload) -> tuple[list[Entry], str]:
    payload = ListEntriesResponse.model_validate(raw_payload)
    return [translate_entry(item) for item in payload.entries], payload.next_page_token


def _parse_entry(raw_payload: Payload) -> Entry:
    return translate_entry(EntryPayload.model_validate(raw_payload))


def _parse_entry_results(raw_payload: Payload) -> list[EntryResult]:
    payload = BatchEntryResponse.model_validate(raw_payload)
    return [translate_entry_result(result) for result in payload.results]


def _parse_delete_results(raw_payload: Payload) -> list[DeleteResult]:
    payload = BatchDeleteEntryResponse.model_validate(raw_payload)
    return [translate_delete_result(result) for result in payload.results]


def _invoke(
    method: str,
    call: Callable[..., Payload],
    request: SpireBaseModel,
    timeout: float | None,
) -> Payload:
    try:
        return call(request.model_dump(exclude_none=True), timeout=timeout)
    except grpc.RpcError as exc:
        log.debug("%s failed: %s", method, exc)
        raise _translate_rpc_error(method, exc) from exc


def _decode[T](method: str, raw_payload: Payload, parser: Callable[[Payload], T]) -> T:
    try:
        return parser(raw_payload)
    except ValueError as exc:
        # pydantic.ValidationError is a ValueError too
        raise OperationFailedError(
            f"{method} returned a malformed response: {exc}",
            reason=str(exc),
        ) from exc


def _translate_rpc_error(method: str, exc: grpc.RpcError) -> RegistryError:
    code_getter = getattr(exc, "code", None)
    details_getter = getattr(exc, "details", None)
    code = code_getter() if callable(code_getter) else grpc.StatusCode.UNKNOWN
    details = (details_getter() if callable(details_getter) else None) or str(exc)

    if code is grpc.StatusCode.NOT_FOUND:
        return NotFoundError(details)
    if code is grpc.StatusCode.ALREADY_EXISTS:
        return ConflictError(details, reason=details, code=code.name)
    if code in _TRANSPORT_CODES:
        return TransportError(f"{method} failed ({code.name}): {details}")
    return OperationFailedError(
        f"{method} failed ({code.name}): {details}",
        reason=details,
        code=code.name,
    )
