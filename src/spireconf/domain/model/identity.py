"""SPIFFE identity value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

SPIFFE_SCHEME: Final[str] = "spiffe://"


@dataclass(frozen=True, slots=True)
class Identity:
    """Two-part identifier: trust domain (authority) plus hierarchical path."""

    authority: str
    path: str = ""

    def __post_init__(self) -> None:
        if not self.authority.strip():
            raise ValueError("Identity authority must not be empty")

    @classmethod
    def parse(cls, uri: str) -> Identity:
        """Parse ``spiffe://trust-domain/path`` into an identity.

        The path keeps its leading slash; an ID without a path yields ``""``.
        """

        if not uri.startswith(SPIFFE_SCHEME):
            raise ValueError(f"Invalid SPIFFE ID: {uri}")
        authority, separator, path = uri[len(SPIFFE_SCHEME) :].partition("/")
        return cls(authority=authority, path=f"/{path}" if separator else "")

    def __str__(self) -> str:
        return f"{SPIFFE_SCHEME}{self.authority}{self.path}"
