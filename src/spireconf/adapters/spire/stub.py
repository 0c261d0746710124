"""Dict-level gRPC stub for the SPIRE Entry service."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from .proto import (
    BATCH_CREATE_ENTRY,
    BATCH_DELETE_ENTRY,
    BATCH_UPDATE_ENTRY,
    ENTRY_METHODS,
    GET_ENTRY,
    LIST_ENTRIES,
    RpcMethod,
    decode,
    encode,
)

if TYPE_CHECKING:
    import grpc

    from .proto import Payload


class EntryServiceStub:
    """Unary calls against ``spire.api.server.entry.v1.Entry``.

    Requests and responses are plain dicts keyed by proto field name; the
    protobuf encoding happens in the channel serializers.
    """

    def __init__(self, channel: grpc.Channel) -> None:
        self._calls = {
            method.name: channel.unary_unary(
                method.path,
                request_serializer=partial(encode, method.request_type),
                response_deserializer=partial(decode, method.response_type),
            )
            for method in ENTRY_METHODS
        }

    def list_entries(self, request: Payload, *, timeout: float | None = None) -> Payload:
        return self._call(LIST_ENTRIES, request, timeout)

    def get_entry(self, request: Payload, *, timeout: float | None = None) -> Payload:
        return self._call(GET_ENTRY, request, timeout)

    def batch_create_entry(self, request: Payload, *, timeout: float | None = None) -> Payload:
        return self._call(BATCH_CREATE_ENTRY, request, timeout)

    def batch_update_entry(self, request: Payload, *, timeout: float | None = None) -> Payload:
        return self._call(BATCH_UPDATE_ENTRY, request, timeout)

    def batch_delete_entry(self, request: Payload, *, timeout: float | None = None) -> Payload:
        return self._call(BATCH_DELETE_ENTRY, request, timeout)

    def _call(self, method: RpcMethod, request: Payload, timeout: float | None) -> Payload:
        return self._calls[method.name](request, timeout=timeout)
