from __future__ import annotations

from spireconf.adapters.spire.proto import (
    BATCH_DELETE_ENTRY,
    BATCH_UPDATE_ENTRY,
    ENTRY_METHODS,
    GET_ENTRY,
    LIST_ENTRIES,
    decode,
    encode,
    message_class,
)
from tests.support.spire_stub import SPIFFE_ID, entry_payload


def test_method_paths_target_entry_service() -> None:
    assert [method.path for method in ENTRY_METHODS] == [
        "/spire.api.server.entry.v1.Entry/ListEntries",
        "/spire.api.server.entry.v1.Entry/GetEntry",
        "/spire.api.server.entry.v1.Entry/BatchCreateEntry",
        "/spire.api.server.entry.v1.Entry/BatchUpdateEntry",
        "/spire.api.server.entry.v1.Entry/BatchDeleteEntry",
    ]


def test_get_entry_returns_plain_entry_type() -> None:
    assert GET_ENTRY.response_type == "spire.api.types.Entry"


def test_entry_field_numbers_match_spire_types() -> None:
    fields = message_class("spire.api.types.Entry").DESCRIPTOR.fields_by_name

    assert fields["id"].number == 1
    assert fields["spiffe_id"].number == 2
    assert fields["parent_id"].number == 3
    assert fields["selectors"].number == 4


def test_list_request_field_numbers() -> None:
    fields = message_class(LIST_ENTRIES.request_type).DESCRIPTOR.fields_by_name

    assert fields["filter"].number == 1
    assert fields["page_size"].number == 3
    assert fields["page_token"].number == 4


def test_entry_survives_the_wire() -> None:
    payload = entry_payload("entry-1", ("unix", "uid:501"), ("unix", "gid:20"))

    data = encode("spire.api.types.Entry", payload)

    assert decode("spire.api.types.Entry", data) == payload


def test_decode_omits_default_fields() -> None:
    data = encode(GET_ENTRY.request_type, {"id": ""})

    assert data == b""
    assert decode(GET_ENTRY.request_type, data) == {}


def test_encode_ignores_unknown_fields() -> None:
    data = encode(
        "spire.api.types.Entry",
        {"id": "entry-1", "spiffe_id": SPIFFE_ID, "ttl": 3600, "admin": True},
    )

    assert decode("spire.api.types.Entry", data) == {"id": "entry-1", "spiffe_id": SPIFFE_ID}


def test_delete_response_status_codes_are_ints() -> None:
    payload = {"results": [{"status": {"code": 5, "message": "missing"}, "id": "entry-1"}]}
    message_type = BATCH_DELETE_ENTRY.response_type

    decoded = decode(message_type, encode(message_type, payload))

    assert decoded == payload


def test_update_request_carries_entry_mask() -> None:
    fields = message_class(BATCH_UPDATE_ENTRY.request_type).DESCRIPTOR.fields_by_name
    mask_fields = message_class("spire.api.types.EntryMask").DESCRIPTOR.fields_by_name

    assert fields["input_mask"].number == 2
    assert fields["input_mask"].message_type.full_name == "spire.api.types.EntryMask"
    assert {name: field.number for name, field in mask_fields.items()} == {
        "spiffe_id": 1,
        "parent_id": 2,
        "selectors": 3,
    }


def test_update_mask_survives_the_wire() -> None:
    payload = {
        "entries": [entry_payload("entry-1", ("unix", "uid:1000"))],
        "input_mask": {"spiffe_id": True, "parent_id": True, "selectors": True},
    }
    message_type = BATCH_UPDATE_ENTRY.request_type

    assert decode(message_type, encode(message_type, payload)) == payload
