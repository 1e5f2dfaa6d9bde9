"""
Core data models for keytrans.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Comment:
    """A line whose first non-space character is the comment marker."""
    text: str


@dataclass(frozen=True)
class Blank:
    """An empty line, or one that carries no ``key: value`` pair."""
    text: str = ""


@dataclass(frozen=True)
class KeyValue:
    """A parsed ``key: value`` line; both sides are trimmed."""
    key: str
    value: str


Line = Union[Comment, Blank, KeyValue]


@dataclass
class LocaleOutput:
    """Formatted output lines for one target locale, in source order."""
    locale: str
    lines: list[str] = field(default_factory=list)
    translated: int = 0

    @property
    def content(self) -> str:
        return "\n".join(self.lines)

    @property
    def is_empty(self) -> bool:
        return self.content.strip() == ""
