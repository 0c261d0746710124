"""Translate between SPIRE Entry API payloads and domain entries."""

from __future__ import annotations

from typing import Final

import grpc

from spireconf.domain.model import Entry, Identity, Selector
from spireconf.domain.ports.registry import DeleteResult, EntryResult, ItemOutcome, OutcomeCode

from .schema import (
    DeleteResultPayload,
    EntryPayload,
    EntryResultPayload,
    SelectorPayload,
    SPIFFEIDPayload,
    StatusPayload,
)

_OUTCOME_BY_STATUS: Final[dict[int, OutcomeCode]] = {
    grpc.StatusCode.OK.value[0]: OutcomeCode.OK,
    grpc.StatusCode.INVALID_ARGUMENT.value[0]: OutcomeCode.INVALID_ARGUMENT,
    grpc.StatusCode.NOT_FOUND.value[0]: OutcomeCode.NOT_FOUND,
    grpc.StatusCode.ALREADY_EXISTS.value[0]: OutcomeCode.ALREADY_EXISTS,
    grpc.StatusCode.PERMISSION_DENIED.value[0]: OutcomeCode.PERMISSION_DENIED,
    grpc.StatusCode.INTERNAL.value[0]: OutcomeCode.INTERNAL,
}


def identity_payload(identity: Identity) -> SPIFFEIDPayload:
    return SPIFFEIDPayload(trust_domain=identity.authority, path=identity.path)


def entry_payload(entry: Entry) -> EntryPayload:
    return EntryPayload(
        id=entry.id,
        spiffe_id=identity_payload(entry.subject_identity),
        parent_id=(
            identity_payload(entry.parent_identity) if entry.parent_identity is not None else None
        ),
        selectors=[
            SelectorPayload(type=selector.type, value=selector.value)
            for selector in entry.selectors
        ],
    )


def translate_entry(payload: EntryPayload) -> Entry:
    """Build an observed entry; selectors keep the order the registry sent."""

    if payload.spiffe_id is None:
        raise ValueError(f"Registry entry {payload.id or '<unknown>'} has no SPIFFE ID")
    return Entry(
        id=payload.id,
        subject_identity=_translate_identity(payload.spiffe_id),
        parent_identity=(
            _translate_identity(payload.parent_id) if payload.parent_id is not None else None
        ),
        selectors=tuple(
            Selector(type=selector.type, value=selector.value) for selector in payload.selectors
        ),
    )


def translate_outcome(status: StatusPayload) -> ItemOutcome:
    code = _OUTCOME_BY_STATUS.get(status.code, OutcomeCode.UNKNOWN)
    message = status.message
    if code is OutcomeCode.UNKNOWN and not message:
        message = f"status code {status.code}"
    return ItemOutcome(code=code, message=message)


def translate_entry_result(result: EntryResultPayload) -> EntryResult:
    outcome = translate_outcome(result.status)
    # failed items may echo a partial entry; only trust the echo on success
    entry = None
    if outcome.succeeded and result.entry is not None:
        entry = translate_entry(result.entry)
    return EntryResult(entry=entry, outcome=outcome)


def translate_delete_result(result: DeleteResultPayload) -> DeleteResult:
    return DeleteResult(entry_id=result.id, outcome=translate_outcome(result.status))


def _translate_identity(payload: SPIFFEIDPayload) -> Identity:
    return Identity(authority=payload.trust_domain, path=payload.path)
