from __future__ import annotations

import pytest

from spireconf.domain.model import Identity
from spireconf.domain.reconciliation import EntryReconciler
from spireconf.resources import EntryDataSource, EntryDataSourceModel
from tests.support.entries import PARENT, SUBJECT, make_entry
from tests.support.registry import InMemoryRegistry


@pytest.fixture
def data_source(reconciler: EntryReconciler) -> EntryDataSource:
    return EntryDataSource(reconciler=reconciler)


def _config(identity: Identity = SUBJECT) -> EntryDataSourceModel:
    return EntryDataSourceModel.model_validate(
        {"spiffe_id": {"trust_domain": identity.authority, "path": identity.path}}
    )


def test_lookup_fills_computed_fields(
    data_source: EntryDataSource, registry: InMemoryRegistry
) -> None:
    stored = registry.add(make_entry("unix:uid:501"))

    result = data_source.read(_config())

    assert result.ok
    assert result.state is not None
    assert result.state.id == stored.id
    assert result.state.parent_identity is not None
    assert result.state.parent_identity.to_identity() == PARENT
    assert [selector.value for selector in result.state.selectors or []] == ["uid:501"]


def test_lookup_without_parent_in_registry(
    data_source: EntryDataSource, registry: InMemoryRegistry
) -> None:
    registry.add(make_entry("unix:uid:501", parent=None))

    result = data_source.read(_config())

    assert result.ok
    assert result.state is not None
    assert result.state.parent_identity is None


def test_lookup_without_match_is_an_error(data_source: EntryDataSource) -> None:
    result = data_source.read(_config())

    assert not result.ok
    assert result.state is None
    [diagnostic] = result.diagnostics.errors
    assert diagnostic.summary == "Failed to find entry matching data source filter"
    assert "got 0" in diagnostic.detail


def test_ambiguous_lookup_is_an_error(
    data_source: EntryDataSource, registry: InMemoryRegistry
) -> None:
    registry.add(make_entry("unix:uid:501"))
    registry.add(make_entry("unix:uid:502"))

    result = data_source.read(_config())

    assert not result.ok
    assert "got 2" in result.diagnostics.errors[0].detail


def test_config_accepts_authority_names() -> None:
    config = EntryDataSourceModel.model_validate(
        {"subject_identity": {"authority": "example.org", "path": "/svc"}}
    )

    assert config.subject_identity.to_identity() == Identity("example.org", "/svc")
