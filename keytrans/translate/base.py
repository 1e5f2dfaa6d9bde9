"""
Base translator interface and implementations.

This module defines:
- TranslationRequest, one call to the translation service
- Abstract Translator interface that all backends implement
- DummyTranslator for testing and dry runs (no network)
- create_translator() factory

Design Philosophy:
- The pipeline depends only on ``translate(text, source_language, target_code)``
- Backends raise TranslationServiceError and never retry
- Easy to add new backends (DeepL, Microsoft, etc.)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from keytrans.config import SOURCE_LANGUAGE
from keytrans.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationRequest:
    """A single value to translate.

    Attributes:
        text: Source value, exactly as read from the source line
        target_code: Service code of the target language (e.g. 'fr', 'zh-CN')
        source_language: Always English for this tool
    """
    text: str
    target_code: str
    source_language: str = SOURCE_LANGUAGE


class Translator(ABC):
    """Abstract base class for all translation backends.

    All translators must implement:
    - name: Short backend name used in logs and errors
    - translate(): Translate one value into one language
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the translator name (e.g., 'google', 'dummy')."""
        pass

    @abstractmethod
    def translate(self, text: str, source_language: str, target_code: str) -> str:
        """Translate a single value.

        Args:
            text: Source text to translate
            source_language: Source language name or code ('ENGLISH')
            target_code: Service code of the target language

        Returns:
            The translated text

        Raises:
            TranslationServiceError: If the service call fails
        """
        pass

    def translate_request(self, request: TranslationRequest) -> str:
        logger.debug(
            "%s: %s -> %s: %r", self.name, request.source_language, request.target_code, request.text
        )
        return self.translate(request.text, request.source_language, request.target_code)


class DummyTranslator(Translator):
    """A dummy translator for testing.

    Modes:
    - 'echo': Return the input unchanged
    - 'upper': Return uppercase version
    - 'prefix': Add [<code>] prefix

    Every request is kept in ``requests`` so callers can check what was sent.
    """

    def __init__(self, mode: str = "prefix"):
        if mode not in ("echo", "upper", "prefix"):
            raise ConfigurationError(f"Unknown dummy mode: {mode}")
        self.mode = mode
        self.requests: list[TranslationRequest] = []

    @property
    def name(self) -> str:
        return f"dummy-{self.mode}"

    def translate(self, text: str, source_language: str, target_code: str) -> str:
        self.requests.append(TranslationRequest(text, target_code, source_language))
        if self.mode == "echo":
            return text
        if self.mode == "upper":
            return text.upper()
        return f"[{target_code}] {text}"


def create_translator(backend: str, **kwargs) -> Translator:
    """Factory function to create a translator by name.

    Args:
        backend: Translator backend name
        **kwargs: Backend-specific arguments

    Returns:
        Configured Translator instance

    Supported backends and aliases:
        - google, googlefree: Google Translate via deep-translator (no key)
        - dummy, echo, test: Offline test translator
    """
    backend_lower = backend.lower().replace("_", "-")

    if backend_lower in ("google", "googlefree", "google-free"):
        from keytrans.translate.google import GoogleTranslator
        return GoogleTranslator(**kwargs)

    elif backend_lower in ("dummy", "echo", "test"):
        mode = kwargs.get("mode", "echo" if backend_lower == "echo" else "prefix")
        return DummyTranslator(mode=mode)

    else:
        available = ["google", "dummy"]
        raise ConfigurationError(
            f"Unknown translator backend: {backend}. "
            f"Available backends: {', '.join(available)}"
        )
