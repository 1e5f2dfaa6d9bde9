"""
Google Translate backend using the deep-translator library.

No API key is required. The service is called once per value, synchronously;
a hang in the service hangs the run.
"""

from __future__ import annotations

import logging
from typing import Optional

from keytrans.errors import TranslationServiceError
from keytrans.translate.base import Translator

logger = logging.getLogger(__name__)


class GoogleTranslator(Translator):
    """Free Google Translate via deep-translator.

    Usage:
        translator = GoogleTranslator()
        translator.translate("Hello world", "ENGLISH", "fr")
    """

    def __init__(self, proxies: Optional[dict] = None):
        try:
            from deep_translator import GoogleTranslator as _GoogleTranslator
        except ImportError:
            raise ImportError(
                "deep-translator required. Install with: pip install deep-translator"
            )
        self._translator_cls = _GoogleTranslator
        self.proxies = proxies

    @property
    def name(self) -> str:
        return "google"

    def translate(self, text: str, source_language: str, target_code: str) -> str:
        source = self._normalize_lang(source_language)
        target = self._normalize_lang(target_code)

        try:
            translator = self._translator_cls(source=source, target=target, proxies=self.proxies)
            translated = translator.translate(text)
        except Exception as e:
            raise TranslationServiceError(
                f"Google translation {source}->{target} failed: {e}", backend=self.name
            ) from e

        if translated is None:
            # deep-translator returns None for input it considers empty
            raise TranslationServiceError(
                f"Google translation {source}->{target} returned nothing for {text!r}",
                backend=self.name,
            )
        return translated

    @staticmethod
    def _normalize_lang(lang: str) -> str:
        """Normalize a language for deep-translator.

        Full names such as 'ENGLISH' or 'PORTUGUESE' are accepted in lower
        case; codes ('fr', 'zh-CN') are passed through untouched.
        """
        if lang.isalpha() and lang.isupper() and len(lang) > 3:
            return lang.lower()
        return lang
