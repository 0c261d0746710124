"""Protobuf descriptors for the slice of the SPIRE Entry API we call.

The messages are declared at import time into a private descriptor pool so no
generated ``_pb2`` modules are required. Field numbers match the SPIRE API
definitions; fields we never send or read are left out and are skipped as
unknown fields on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from google.protobuf import descriptor_pb2, descriptor_pool, json_format, message_factory
from google.protobuf.message import Message

type Payload = dict[str, Any]

TYPES_PACKAGE: Final[str] = "spire.api.types"
ENTRY_PACKAGE: Final[str] = "spire.api.server.entry.v1"
ENTRY_SERVICE: Final[str] = f"{ENTRY_PACKAGE}.Entry"

_Field = descriptor_pb2.FieldDescriptorProto


def _field(
    name: str,
    number: int,
    kind: int,
    *,
    type_name: str | None = None,
    repeated: bool = False,
) -> descriptor_pb2.FieldDescriptorProto:
    field = _Field(
        name=name,
        number=number,
        type=kind,  # pyright: ignore[reportArgumentType]
        label=_Field.LABEL_REPEATED if repeated else _Field.LABEL_OPTIONAL,
    )
    if type_name is not None:
        field.type_name = type_name
    return field


def _string(
    name: str, number: int, *, repeated: bool = False
) -> descriptor_pb2.FieldDescriptorProto:
    return _field(name, number, _Field.TYPE_STRING, repeated=repeated)


def _int32(name: str, number: int) -> descriptor_pb2.FieldDescriptorProto:
    return _field(name, number, _Field.TYPE_INT32)


def _bool(name: str, number: int) -> descriptor_pb2.FieldDescriptorProto:
    return _field(name, number, _Field.TYPE_BOOL)


def _nested(
    name: str, number: int, type_name: str, *, repeated: bool = False
) -> descriptor_pb2.FieldDescriptorProto:
    return _field(name, number, _Field.TYPE_MESSAGE, type_name=f".{type_name}", repeated=repeated)


def _message(
    name: str,
    *fields: descriptor_pb2.FieldDescriptorProto,
    nested: tuple[descriptor_pb2.DescriptorProto, ...] = (),
) -> descriptor_pb2.DescriptorProto:
    message = descriptor_pb2.DescriptorProto(name=name)
    message.field.extend(fields)
    message.nested_type.extend(nested)
    return message


def _types_file() -> descriptor_pb2.FileDescriptorProto:
    spiffe_id = f"{TYPES_PACKAGE}.SPIFFEID"
    file = descriptor_pb2.FileDescriptorProto(
        name="spire/api/types/entry.proto",
        package=TYPES_PACKAGE,
        syntax="proto3",
    )
    file.message_type.extend(
        [
            _message("SPIFFEID", _string("trust_domain", 1), _string("path", 2)),
            _message("Selector", _string("type", 1), _string("value", 2)),
            _message("Status", _int32("code", 1), _string("message", 2)),
            _message(
                "Entry",
                _string("id", 1),
                _nested("spiffe_id", 2, spiffe_id),
                _nested("parent_id", 3, spiffe_id),
                _nested("selectors", 4, f"{TYPES_PACKAGE}.Selector", repeated=True),
            ),
            _message(
                "EntryMask",
                _bool("spiffe_id", 1),
                _bool("parent_id", 2),
                _bool("selectors", 3),
            ),
        ]
    )
    return file


def _batch_response(
    name: str, item_field: descriptor_pb2.FieldDescriptorProto
) -> descriptor_pb2.DescriptorProto:
    result = _message("Result", _nested("status", 1, f"{TYPES_PACKAGE}.Status"), item_field)
    return _message(
        name,
        _nested("results", 1, f"{ENTRY_PACKAGE}.{name}.Result", repeated=True),
        nested=(result,),
    )


def _entry_service_file(dependency: str) -> descriptor_pb2.FileDescriptorProto:
    entry = f"{TYPES_PACKAGE}.Entry"
    file = descriptor_pb2.FileDescriptorProto(
        name="spire/api/server/entry/v1/entry.proto",
        package=ENTRY_PACKAGE,
        syntax="proto3",
        dependency=[dependency],
    )
    file.message_type.extend(
        [
            _message(
                "ListEntriesRequest",
                _nested("filter", 1, f"{ENTRY_PACKAGE}.ListEntriesRequest.Filter"),
                _int32("page_size", 3),
                _string("page_token", 4),
                nested=(
                    _message(
                        "Filter",
                        _nested("by_spiffe_id", 1, f"{TYPES_PACKAGE}.SPIFFEID"),
                        _nested("by_parent_id", 2, f"{TYPES_PACKAGE}.SPIFFEID"),
                    ),
                ),
            ),
            _message(
                "ListEntriesResponse",
                _nested("entries", 1, entry, repeated=True),
                _string("next_page_token", 2),
            ),
            _message("GetEntryRequest", _string("id", 1)),
            _message("BatchCreateEntryRequest", _nested("entries", 1, entry, repeated=True)),
            _batch_response("BatchCreateEntryResponse", _nested("entry", 2, entry)),
            _message(
                "BatchUpdateEntryRequest",
                _nested("entries", 1, entry, repeated=True),
                _nested("input_mask", 2, f"{TYPES_PACKAGE}.EntryMask"),
            ),
            _batch_response("BatchUpdateEntryResponse", _nested("entry", 2, entry)),
            _message("BatchDeleteEntryRequest", _string("ids", 1, repeated=True)),
            _batch_response("BatchDeleteEntryResponse", _string("id", 2)),
        ]
    )
    return file


def _build_pool() -> descriptor_pool.DescriptorPool:
    pool = descriptor_pool.DescriptorPool()
    types_file = _types_file()
    pool.AddSerializedFile(types_file.SerializeToString())
    pool.AddSerializedFile(_entry_service_file(types_file.name).SerializeToString())
    return pool


_POOL: Final = _build_pool()


def message_class(type_name: str) -> type[Message]:
    """Return the message class for a fully qualified type name."""

    return message_factory.GetMessageClass(_POOL.FindMessageTypeByName(type_name))


def encode(type_name: str, payload: Payload) -> bytes:
    """Serialize a dict payload as the given message type."""

    message = json_format.ParseDict(payload, message_class(type_name)(), ignore_unknown_fields=True)
    return message.SerializeToString()


def decode(type_name: str, data: bytes) -> Payload:
    """Parse wire bytes of the given message type into a dict payload.

    Keys use the proto field names; fields left at their default are omitted.
    """

    message = message_class(type_name).FromString(data)
    return json_format.MessageToDict(message, preserving_proto_field_name=True)


@dataclass(frozen=True, slots=True)
class RpcMethod:
    name: str
    request_type: str
    response_type: str

    @property
    def path(self) -> str:
        return f"/{ENTRY_SERVICE}/{self.name}"


LIST_ENTRIES: Final = RpcMethod(
    "ListEntries",
    f"{ENTRY_PACKAGE}.ListEntriesRequest",
    f"{ENTRY_PACKAGE}.ListEntriesResponse",
)
GET_ENTRY: Final = RpcMethod(
    "GetEntry",
    f"{ENTRY_PACKAGE}.GetEntryRequest",
    f"{TYPES_PACKAGE}.Entry",
)
BATCH_CREATE_ENTRY: Final = RpcMethod(
    "BatchCreateEntry",
    f"{ENTRY_PACKAGE}.BatchCreateEntryRequest",
    f"{ENTRY_PACKAGE}.BatchCreateEntryResponse",
)
BATCH_UPDATE_ENTRY: Final = RpcMethod(
    "BatchUpdateEntry",
    f"{ENTRY_PACKAGE}.BatchUpdateEntryRequest",
    f"{ENTRY_PACKAGE}.BatchUpdateEntryResponse",
)
BATCH_DELETE_ENTRY: Final = RpcMethod(
    "BatchDeleteEntry",
    f"{ENTRY_PACKAGE}.BatchDeleteEntryRequest",
    f"{ENTRY_PACKAGE}.BatchDeleteEntryResponse",
)

ENTRY_METHODS: Final[tuple[RpcMethod, ...]] = (
    LIST_ENTRIES,
    GET_ENTRY,
    BATCH_CREATE_ENTRY,
    BATCH_UPDATE_ENTRY,
    BATCH_DELETE_ENTRY,
)
