"""
Translation backends.

The Google backend is imported lazily so that the dummy backend works
without deep-translator installed.
"""

from keytrans.translate.base import (
    Translator,
    TranslationRequest,
    DummyTranslator,
    create_translator,
)

__all__ = [
    "Translator",
    "TranslationRequest",
    "DummyTranslator",
    "create_translator",
]


def __getattr__(name):
    if name == "GoogleTranslator":
        from keytrans.translate import google
        return google.GoogleTranslator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
