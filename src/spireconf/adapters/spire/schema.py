"""Minimal Pydantic models for SPIRE Entry API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SpireBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SPIFFEIDPayload(SpireBaseModel):
    trust_domain: str = ""
    path: str = ""


class SelectorPayload(SpireBaseModel):
    type: str = ""
    value: str = ""


class EntryPayload(SpireBaseModel):
    id: str = ""
    spiffe_id: SPIFFEIDPayload | None = None
    parent_id: SPIFFEIDPayload | None = None
    selectors: list[SelectorPayload] = Field(default_factory=list["SelectorPayload"])


class StatusPayload(SpireBaseModel):
    """Per-item status; ``code`` is the numeric gRPC status code."""

    code: int = 0
    message: str = ""


class ListEntriesFilter(SpireBaseModel):
    by_spiffe_id: SPIFFEIDPayload | None = None
    by_parent_id: SPIFFEIDPayload | None = None


class ListEntriesRequest(SpireBaseModel):
    filter: ListEntriesFilter = Field(default_factory=ListEntriesFilter)
    page_size: int = 0
    page_token: str = ""


class ListEntriesResponse(SpireBaseModel):
    entries: list[EntryPayload] = Field(default_factory=list["EntryPayload"])
    next_page_token: str = ""


class GetEntryRequest(SpireBaseModel):
    id: str


class EntryMaskPayload(SpireBaseModel):
    """Fields of an entry that BatchUpdateEntry is allowed to overwrite."""

    spiffe_id: bool = False
    parent_id: bool = False
    selectors: bool = False


class BatchEntryRequest(SpireBaseModel):
    """Body of BatchCreateEntry."""

    entries: list[EntryPayload] = Field(default_factory=list["EntryPayload"])


class BatchUpdateEntryRequest(BatchEntryRequest):
    # SPIRE treats a missing mask as "every field", resetting ones we do not model
    input_mask: EntryMaskPayload | None = None


class EntryResultPayload(SpireBaseModel):
    status: StatusPayload = Field(default_factory=StatusPayload)
    entry: EntryPayload | None = None


class BatchEntryResponse(SpireBaseModel):
    results: list[EntryResultPayload] = Field(default_factory=list["EntryResultPayload"])


class BatchDeleteEntryRequest(SpireBaseModel):
    ids: list[str] = Field(default_factory=list)


class DeleteResultPayload(SpireBaseModel):
    status: StatusPayload = Field(default_factory=StatusPayload)
    id: str = ""


class BatchDeleteEntryResponse(SpireBaseModel):
    results: list[DeleteResultPayload] = Field(default_factory=list["DeleteResultPayload"])
