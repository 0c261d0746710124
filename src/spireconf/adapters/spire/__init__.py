"""SPIRE server Entry API adapter package."""

from __future__ import annotations

from .channel import open_channel
from .client import SpireEntryClient
from .schema import EntryPayload, SelectorPayload, SPIFFEIDPayload, StatusPayload
from .stub import EntryServiceStub
from .translator import entry_payload, translate_entry, translate_outcome

__all__ = [
    "EntryPayload",
    "EntryServiceStub",
    "SPIFFEIDPayload",
    "SelectorPayload",
    "SpireEntryClient",
    "StatusPayload",
    "entry_payload",
    "open_channel",
    "translate_entry",
    "translate_outcome",
]
