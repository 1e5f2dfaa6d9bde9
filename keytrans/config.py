"""
Project-wide configuration and defaults.

This module defines the constants used throughout keytrans and the
``TranslatorConfig`` dataclass the CLI builds for a run.

Module Contents:
    APP_NAME: Application name for display purposes
    BASE_LOCALE: Locale treated as the already-translated reference
    SOURCE_LANGUAGE: Language name sent to the translation service
    ENGLISH_PREFIX: Prefix shared by every English locale
    COMMENT_MARKER: First non-space character of a comment line
    HEADER_KEY: Source key rewritten to the target locale's own header row
    DEFAULT_BACKEND: Translation backend used when none is given
    DEFAULT_FORMAT: Line codec used when none is given
    CATALOG_GLOB: Pattern of existing locale files read into a key catalog

Example:
    >>> from keytrans.config import TranslatorConfig
    >>> config = TranslatorConfig(source=Path("en.yml"), destination=Path("out.yml"))
    >>> config.to_dict()["backend"]
    'google'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Application name for display and identification
APP_NAME = "keytrans"

# Locale whose file is the source of every translation
BASE_LOCALE = "en-US"

# The service is always asked to translate from English
SOURCE_LANGUAGE = "ENGLISH"

# Locales starting with this prefix are English variants
ENGLISH_PREFIX = "en"

COMMENT_MARKER = "#"

# Root key of the source file ("en:"), emitted as "<locale>: " per target
HEADER_KEY = "en"

DEFAULT_BACKEND = "google"

DEFAULT_FORMAT = "yaml"

# Files merged into a locale's key catalog: <catalog_dir>/<locale>/*.yml
CATALOG_GLOB = "*.yml"


@dataclass
class TranslatorConfig:
    """Configuration for one translation run.

    Attributes:
        source: Source file in the base language
        destination: File the locale blocks are appended to
        backend: Translation backend name (see ``create_translator``)
        backend_kwargs: Extra arguments for the backend factory
        format: Line codec name (see ``create_codec``)
        locales: Explicit target locales; ``None`` means every non-base locale
        catalog_dir: Directory of existing locale files whose keys are skipped
    """
    source: Path
    destination: Path
    backend: str = DEFAULT_BACKEND
    backend_kwargs: dict = field(default_factory=dict)
    format: str = DEFAULT_FORMAT
    locales: Optional[list[str]] = None
    catalog_dir: Optional[Path] = None

    def to_dict(self) -> dict:
        """Serialize config for logging/debugging."""
        return {
            "source": str(self.source),
            "destination": str(self.destination),
            "backend": self.backend,
            "format": self.format,
            "locales": list(self.locales) if self.locales else None,
            "catalog_dir": str(self.catalog_dir) if self.catalog_dir else None,
        }
