"""Declarative records exchanged with the host: configuration in, state out."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from spireconf.domain.model import Entry, Identity, Selector


class RecordBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class IdentityModel(RecordBaseModel):
    authority: str = Field(
        min_length=1,
        validation_alias=AliasChoices("authority", "trust_domain"),
    )
    path: str = ""

    def to_identity(self) -> Identity:
        return Identity(authority=self.authority, path=self.path)

    @classmethod
    def from_identity(cls, identity: Identity) -> IdentityModel:
        return cls(authority=identity.authority, path=identity.path)


class SelectorModel(RecordBaseModel):
    type: str = Field(min_length=1)
    value: str

    def to_selector(self) -> Selector:
        return Selector(type=self.type, value=self.value)

    @classmethod
    def from_selector(cls, selector: Selector) -> SelectorModel:
        return cls(type=selector.type, value=selector.value)


def _unique_selectors(selectors: list[SelectorModel] | None) -> list[SelectorModel] | None:
    if selectors is None:
        return None
    seen: set[tuple[str, str]] = set()
    unique: list[SelectorModel] = []
    for selector in selectors:
        key = (selector.type, selector.value)
        if key in seen:
            continue
        seen.add(key)
        unique.append(selector)
    return unique


def _selector_models(entry: Entry) -> list[SelectorModel]:
    return [SelectorModel.from_selector(selector) for selector in entry.selectors]


class EntryResourceModel(RecordBaseModel):
    """Managed registration entry.

    ``id`` is computed by the registry; ``selectors`` form a set and are
    required when the entry is created.
    """

    id: str | None = None
    subject_identity: IdentityModel = Field(
        validation_alias=AliasChoices("subject_identity", "spiffe_id"),
    )
    parent_identity: IdentityModel = Field(
        validation_alias=AliasChoices("parent_identity", "parent_id"),
    )
    selectors: list[SelectorModel] | None = None

    @field_validator("selectors")
    @classmethod
    def _dedupe_selectors(cls, selectors: list[SelectorModel] | None) -> list[SelectorModel] | None:
        return _unique_selectors(selectors)

    def to_entry(self, *, entry_id: str | None = None) -> Entry:
        return Entry(
            id=entry_id or self.id or "",
            subject_identity=self.subject_identity.to_identity(),
            parent_identity=self.parent_identity.to_identity(),
            selectors=tuple(selector.to_selector() for selector in self.selectors or ()),
        )

    @classmethod
    def from_entry(cls, entry: Entry) -> EntryResourceModel:
        if entry.parent_identity is None:
            raise ValueError(f"Entry {entry.id} has no parent identity")
        return cls(
            id=entry.id or None,
            subject_identity=IdentityModel.from_identity(entry.subject_identity),
            parent_identity=IdentityModel.from_identity(entry.parent_identity),
            selectors=_selector_models(entry),
        )


class EntryDataSourceModel(RecordBaseModel):
    """Read-only lookup of an entry by its subject identity."""

    subject_identity: IdentityModel = Field(
        validation_alias=AliasChoices("subject_identity", "spiffe_id"),
    )
    id: str | None = None
    parent_identity: IdentityModel | None = Field(
        default=None,
        validation_alias=AliasChoices("parent_identity", "parent_id"),
    )
    selectors: list[SelectorModel] | None = None

    @classmethod
    def from_entry(cls, entry: Entry) -> EntryDataSourceModel:
        return cls(
            id=entry.id or None,
            subject_identity=IdentityModel.from_identity(entry.subject_identity),
            parent_identity=(
                IdentityModel.from_identity(entry.parent_identity)
                if entry.parent_identity is not None
                else None
            ),
            selectors=_selector_models(entry),
        )
