"""
keytrans: machine translation of localization keys

Reads a ``key: value`` localization file in the base language, translates
each value into every target locale through an external translation service,
repairs the translated text and appends one block per locale to an output
file.

License: MIT
"""

__version__ = "0.1.0"

from keytrans.locales import LocaleTable, LocaleEntry
from keytrans.normalize import normalize
from keytrans.pipeline import TranslationPipeline, KeyCatalog

__all__ = [
    "LocaleTable",
    "LocaleEntry",
    "KeyCatalog",
    "TranslationPipeline",
    "normalize",
]
