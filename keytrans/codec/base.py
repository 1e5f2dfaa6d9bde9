"""
Base line codec interface.

A codec knows how one localization format spells a ``key: value`` entry:
- is_comment(): Whether a raw line is a comment
- split(): Extract the key and value from a line
- format(): Render a key and value back into a line
- parse_catalog(): Read every key of an existing locale file

``classify()`` builds on those hooks and is shared by all formats, so the
pipeline never needs to know which format is active.

Design Philosophy:
- Codecs are stateless; per-locale state lives in ``KeyCatalog``
- A format that leaves an operation unimplemented fails loudly with a
  ConfigurationError the first time it is used
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from keytrans.errors import ConfigurationError
from keytrans.models import Blank, Comment, KeyValue, Line


class LineCodec(ABC):
    """Abstract base class for all line formats."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the codec name (e.g., 'yaml')."""
        pass

    def is_comment(self, line: str) -> bool:
        raise ConfigurationError(f"{self.name} codec does not implement is_comment()")

    def split(self, line: str) -> tuple[Optional[str], Optional[str]]:
        """Return ``(key, value)`` or ``(None, None)`` when the line has no key."""
        raise ConfigurationError(f"{self.name} codec does not implement split()")

    def format(self, key: str, value: str) -> str:
        raise ConfigurationError(f"{self.name} codec does not implement format()")

    def parse_catalog(self, path: Path, root: Optional[str] = None) -> set[str]:
        """Return the dotted key paths defined in an existing locale file."""
        raise ConfigurationError(f"{self.name} codec does not implement parse_catalog()")

    def classify(self, raw_line: str) -> Line:
        """Classify a raw source line as Comment, Blank or KeyValue.

        The trailing line break is ignored. Lines without a usable key are
        Blank rather than an error.
        """
        line = raw_line.rstrip("\r\n")
        if self.is_comment(line):
            return Comment(line)
        if line.strip() == "":
            return Blank(line)

        key, value = self.split(line)
        if not key:
            return Blank(line)
        return KeyValue(key, value or "")
