"""
Exception classes for keytrans.

Configuration problems are fatal and abort the whole run. Failures of the
translation service propagate unchanged in meaning; nothing here retries.
Malformed source lines are not errors at all: the codec treats them as blank.
"""

from __future__ import annotations


class KeytransError(Exception):
    """Base exception class for keytrans specific errors."""


class ConfigurationError(KeytransError):
    """Invalid setup: unknown locale, backend or codec, or a codec operation
    that the active format does not implement."""


class UnknownLocaleError(ConfigurationError):
    """A locale that is not part of the locale table."""

    def __init__(self, locale: str) -> None:
        super().__init__(f"Unknown locale: {locale!r}")
        self.locale: str = locale


class TranslationServiceError(KeytransError):
    """The external translation call failed."""

    def __init__(self, message: str, backend: str | None = None) -> None:
        super().__init__(message)
        self.backend: str | None = backend
