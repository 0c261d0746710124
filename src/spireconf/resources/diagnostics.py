"""Structured diagnostics reported back to the host instead of raising."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    severity: Severity
    summary: str
    detail: str = ""

    def __str__(self) -> str:
        if not self.detail:
            return f"{self.severity}: {self.summary}"
        return f"{self.severity}: {self.summary}: {self.detail}"


@dataclass(slots=True)
class Diagnostics:
    items: list[Diagnostic] = field(default_factory=list["Diagnostic"])

    def add_error(self, summary: str, detail: str = "") -> None:
        self.items.append(Diagnostic(Severity.ERROR, summary, detail))

    def add_warning(self, summary: str, detail: str = "") -> None:
        self.items.append(Diagnostic(Severity.WARNING, summary, detail))

    @property
    def has_error(self) -> bool:
        return any(item.severity is Severity.ERROR for item in self.items)

    @property
    def errors(self) -> list[Diagnostic]:
        return [item for item in self.items if item.severity is Severity.ERROR]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
