"""
Locale table for keytrans.

Maps the locale identifiers used by the mail platform's localization files
to the language codes the translation service expects. Several locales may
share a service code (every regional English variant maps to ``en``).

Usage:
    from keytrans.locales import LocaleTable

    table = LocaleTable()
    table.service_code_for("fr-FR")   # 'fr'
    [e.source_locale for e in table.non_base_locales()]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from keytrans.config import BASE_LOCALE, ENGLISH_PREFIX
from keytrans.errors import ConfigurationError, UnknownLocaleError


# Source locale -> service code. Order is the processing order of a run.
LOCALES = {
    "de-DE": "de",
    "en-MY": "en",
    "en-SG": "en",
    "es-MX": "es",
    "it-IT": "it",
    "vi-VN": "vi",
    "zh-Hant-TW": "zh-TW",
    "en-AA": "en",
    "en-NZ": "en",
    "en-US": "en",
    "fr-FR": "fr",
    "ko-KR": "ko",
    "zh-Hans-CN": "zh-CN",
    "en-AU": "en",
    "en-PH": "en",
    "es-ES": "es",
    "id-ID": "id",
    "pt-BR": "PORTUGUESE",
    "zh-Hant-HK": "zh-CN",
}


@dataclass(frozen=True)
class LocaleEntry:
    """One row of the locale table."""
    source_locale: str
    service_code: str


def is_chinese(locale: str) -> bool:
    """Whether the locale belongs to the Chinese family (zh-Hans-CN, zh-Hant-TW...)."""
    return "zh" in locale


class LocaleTable:
    """Read-only view over the fixed locale mapping.

    Args:
        mapping: Locale -> service code; defaults to ``LOCALES``
        base_locale: Locale that is never a translation target
    """

    def __init__(
        self,
        mapping: Optional[dict[str, str]] = None,
        base_locale: str = BASE_LOCALE,
    ):
        source = LOCALES if mapping is None else mapping
        self._entries = tuple(LocaleEntry(lang, code) for lang, code in source.items())
        self._codes = dict(source)
        self.base_locale = base_locale

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, locale: object) -> bool:
        return locale in self._codes

    @property
    def entries(self) -> tuple[LocaleEntry, ...]:
        return self._entries

    def service_code_for(self, locale: str) -> str:
        """Return the service code for a source locale.

        Raises:
            UnknownLocaleError: If the locale is not in the table
        """
        try:
            return self._codes[locale]
        except KeyError:
            raise UnknownLocaleError(locale) from None

    def non_english_locales(self) -> list[LocaleEntry]:
        """Entries whose locale is not an English variant."""
        return [e for e in self._entries if not e.source_locale.startswith(ENGLISH_PREFIX)]

    def non_base_locales(self) -> list[LocaleEntry]:
        """Every entry except the base locale."""
        return [e for e in self._entries if e.source_locale != self.base_locale]

    def select(self, locales: Iterable[str]) -> list[LocaleEntry]:
        """Entries for an explicit list of locales, in the order given.

        Raises:
            ConfigurationError: If the base locale is among them
            UnknownLocaleError: On the first locale not in the table
        """
        entries = []
        for lang in locales:
            if lang == self.base_locale:
                raise ConfigurationError(f"{lang} is the base locale and cannot be a translation target")
            entries.append(LocaleEntry(lang, self.service_code_for(lang)))
        return entries
