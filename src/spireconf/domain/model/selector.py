"""Attestation selectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True, order=True)
class Selector:
    """A ``(type, value)`` criterion matched by an attestor plugin."""

    type: str
    value: str

    def __post_init__(self) -> None:
        if not self.type.strip():
            raise ValueError("Selector type must not be empty")

    @classmethod
    def parse(cls, raw: str) -> Selector:
        """Parse the ``type:value`` form, e.g. ``unix:uid:501``."""

        selector_type, separator, value = raw.partition(":")
        if not separator:
            raise ValueError(f"Invalid selector (expected type:value): {raw}")
        return cls(type=selector_type, value=value)

    def __str__(self) -> str:
        return f"{self.type}:{self.value}"


def selector_set(selectors: Iterable[Selector]) -> frozenset[Selector]:
    """Order-independent view of a selector collection."""

    return frozenset(selectors)
