"""Shared fixtures for SPIRE adapter tests."""

from __future__ import annotations

import pytest

from spireconf.adapters.spire import SpireEntryClient
from tests.support.spire_stub import FakeEntryStub


@pytest.fixture
def fake_stub() -> FakeEntryStub:
    return FakeEntryStub()


@pytest.fixture
def spire_client(fake_stub: FakeEntryStub) -> SpireEntryClient:
    return SpireEntryClient(fake_stub)  # type: ignore[arg-type]
