from __future__ import annotations

from typing import Any

import pytest

from spireconf import app as app_module
from spireconf.adapters.spire import SpireEntryClient
from spireconf.app import RegistryProvider, build_provider
from spireconf.config import DEFAULT_ENDPOINT, RegistryConfig
from tests.support.registry import InMemoryRegistry


class FakeChannel:
    def __init__(self) -> None:
        self.paths: list[str] = []
        self.closed = False

    def unary_unary(self, path: str, **_: Any) -> object:
        self.paths.append(path)
        return object()

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def dialed(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, FakeChannel]]:
    channels: list[tuple[str, FakeChannel]] = []

    def fake_open_channel(endpoint: str) -> FakeChannel:
        channel = FakeChannel()
        channels.append((endpoint, channel))
        return channel

    monkeypatch.setattr(app_module, "open_channel", fake_open_channel)
    return channels


def test_configure_dials_once(dialed: list[tuple[str, FakeChannel]]) -> None:
    provider = RegistryProvider(config=RegistryConfig(endpoint="dns:///spire:8081"))

    first = provider.configure()
    second = provider.configure()

    assert first is second
    assert isinstance(first.registry, SpireEntryClient)
    assert [endpoint for endpoint, _ in dialed] == ["dns:///spire:8081"]


def test_resources_share_the_configured_reconciler(
    dialed: list[tuple[str, FakeChannel]],
) -> None:
    provider = RegistryProvider(config=RegistryConfig())

    resource = provider.entry_resource()
    data_source = provider.entry_data_source()

    assert resource.reconciler is data_source.reconciler
    assert len(dialed) == 1


@pytest.mark.usefixtures("dialed")
def test_reconciler_uses_configured_timeout() -> None:
    provider = RegistryProvider(config=RegistryConfig(timeout_seconds=3.0))

    assert provider.configure().timeout == 3.0


def test_zero_timeout_disables_deadline(registry: InMemoryRegistry) -> None:
    provider = RegistryProvider(config=RegistryConfig(timeout_seconds=0), registry=registry)

    assert provider.configure().timeout is None


def test_context_manager_closes_channel(dialed: list[tuple[str, FakeChannel]]) -> None:
    with RegistryProvider(config=RegistryConfig()) as provider:
        provider.entry_resource()

    [(_, channel)] = dialed
    assert channel.closed
    assert channel.paths[0] == "/spire.api.server.entry.v1.Entry/ListEntries"


def test_injected_registry_skips_dialing(
    dialed: list[tuple[str, FakeChannel]], registry: InMemoryRegistry
) -> None:
    provider = RegistryProvider(config=RegistryConfig(), registry=registry)

    assert provider.configure().registry is registry
    assert dialed == []


def test_build_provider_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPIRE_SERVER_ENDPOINT", "unix:/run/spire/api.sock")

    provider = build_provider(timeout_seconds=1.0)

    assert provider.config == RegistryConfig(
        endpoint="unix:/run/spire/api.sock", timeout_seconds=1.0
    )


def test_build_provider_defaults() -> None:
    assert build_provider().config.endpoint == DEFAULT_ENDPOINT
