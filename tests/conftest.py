from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from spireconf.config.registry import ENDPOINT_ENV_VAR, TIMEOUT_ENV_VAR
from spireconf.domain.reconciliation import EntryReconciler
from tests.support.registry import InMemoryRegistry
from tests.support.spire_server import FakeEntryService, start_server

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clean_registry_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENDPOINT_ENV_VAR, raising=False)
    monkeypatch.delenv(TIMEOUT_ENV_VAR, raising=False)


@pytest.fixture
def registry() -> InMemoryRegistry:
    return InMemoryRegistry()


@pytest.fixture
def reconciler(registry: InMemoryRegistry) -> EntryReconciler:
    return EntryReconciler(registry=registry)


@pytest.fixture
def entry_service() -> FakeEntryService:
    return FakeEntryService()


@pytest.fixture
def spire_target(entry_service: FakeEntryService) -> Iterator[str]:
    """Target of an in-process Entry service on an ephemeral port."""

    server, target = start_server(entry_service)
    try:
        yield target
    finally:
        server.stop(None)
