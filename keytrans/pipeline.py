"""
Main translation pipeline for keytrans.

This module orchestrates the per-locale workflow:
1. Resolve the locale's service code
2. Read the source file line by line, in order
3. Classify each line (comment, blank, key/value)
4. Translate non-empty values and normalize the result
5. Hand the locale's block to the writer

Locales are processed strictly one after another. The only per-locale state,
the catalog of keys the locale already has, is built fresh for each locale
and discarded afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional

from keytrans.codec import LineCodec, create_codec
from keytrans.config import CATALOG_GLOB, HEADER_KEY, TranslatorConfig
from keytrans.locales import LocaleTable
from keytrans.models import KeyValue, LocaleOutput
from keytrans.normalize import normalize
from keytrans.translate.base import TranslationRequest, Translator, create_translator
from keytrans.writer import OutputWriter

logger = logging.getLogger(__name__)

# Type alias for progress callbacks
ProgressCallback = Callable[[str, float], None]


@dataclass(frozen=True)
class KeyCatalog:
    """Dotted key paths a target locale already defines; these are not re-translated."""
    locale: str
    keys: frozenset[str] = field(default_factory=frozenset)

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    @classmethod
    def load(cls, codec: LineCodec, catalog_dir: Optional[Path], locale: str) -> "KeyCatalog":
        """Merge the keys of ``<catalog_dir>/<locale>/*.yml``.

        Returns an empty catalog when no directory is configured or the
        locale has no files yet.
        """
        if catalog_dir is None:
            return cls(locale)

        keys: set[str] = set()
        for path in sorted((Path(catalog_dir) / locale).glob(CATALOG_GLOB)):
            keys |= codec.parse_catalog(path, root=locale)
        logger.debug("Catalog for %s: %d existing keys", locale, len(keys))
        return cls(locale, frozenset(keys))


class KeyPathTracker:
    """Dotted path of each source key, derived from indentation.

    A top-level ``en:`` root is left out, matching catalog paths, which
    leave out the locale root. One tracker follows one pass over a file.

    Usage:
        tracker = KeyPathTracker()
        tracker.path_for("en:", "en")                  # 'en'
        tracker.path_for("  about:", "about")          # 'about'
        tracker.path_for("    title: About", "title")  # 'about.title'
    """

    def __init__(self):
        self._parents: list[tuple[int, Optional[str]]] = []

    def path_for(self, raw_line: str, key: str) -> str:
        line = raw_line.rstrip("\r\n")
        indent = len(line) - len(line.lstrip(" \t"))
        while self._parents and self._parents[-1][0] >= indent:
            self._parents.pop()

        parts = [k for _, k in self._parents if k is not None]
        is_root = key == HEADER_KEY and not self._parents
        self._parents.append((indent, None if is_root else key))
        return ".".join(parts + [key])


class TranslationPipeline:
    """Translate a source file into every target locale.

    Usage:
        pipeline = TranslationPipeline(
            source=Path("en.yml"),
            translator=create_translator("google"),
            writer=OutputWriter(Path("translated.yml")),
        )
        outputs = pipeline.run()
    """

    def __init__(
        self,
        source: Path,
        translator: Translator,
        codec: LineCodec | None = None,
        locale_table: LocaleTable | None = None,
        writer: OutputWriter | None = None,
        catalog_dir: Path | None = None,
        progress_callback: ProgressCallback | None = None,
    ):
        self.source = Path(source)
        self.translator = translator
        self.codec = codec or create_codec("yaml")
        self.locale_table = locale_table or LocaleTable()
        self.writer = writer
        self.catalog_dir = catalog_dir
        self.progress_callback = progress_callback or (lambda msg, pct: None)

    @classmethod
    def from_config(
        cls,
        config: TranslatorConfig,
        progress_callback: ProgressCallback | None = None,
    ) -> "TranslationPipeline":
        """Build a pipeline (translator, codec, writer) from a TranslatorConfig."""
        logger.debug("Pipeline config: %s", config.to_dict())
        return cls(
            source=config.source,
            translator=create_translator(config.backend, **config.backend_kwargs),
            codec=create_codec(config.format),
            writer=OutputWriter(config.destination),
            catalog_dir=config.catalog_dir,
            progress_callback=progress_callback,
        )

    def translate_line(
        self,
        raw_line: str,
        locale: str,
        catalog: KeyCatalog | None = None,
        tracker: KeyPathTracker | None = None,
    ) -> Optional[str]:
        """Translate one source line for a locale.

        Returns the formatted output line, or None when the line produces
        no output (comment, blank, malformed, or key already in the catalog).
        Without a tracker the line is taken to be at the top level.
        """
        code = self.locale_table.service_code_for(locale)
        new_line, _ = self._translate_line(raw_line, locale, code, catalog, tracker or KeyPathTracker())
        return new_line

    def _translate_line(
        self,
        raw_line: str,
        locale: str,
        code: str,
        catalog: KeyCatalog | None,
        tracker: KeyPathTracker,
    ) -> tuple[Optional[str], bool]:
        """Return the output line and whether the service was called."""
        line = self.codec.classify(raw_line)
        if not isinstance(line, KeyValue):
            return None, False

        path = tracker.path_for(raw_line, line.key)
        if line.key == HEADER_KEY:
            return self.codec.format(locale, ""), False
        if catalog is not None and path in catalog:
            return None, False
        if line.value.strip() == "":
            return self.codec.format(line.key, ""), False

        request = TranslationRequest(text=line.value, target_code=code)
        translated = self.translator.translate_request(request)
        return self.codec.format(line.key, normalize(translated, locale)), True

    def translate_locale(self, locale: str, catalog: KeyCatalog | None = None) -> LocaleOutput:
        """Run one full pass over the source file for a locale.

        Raises:
            UnknownLocaleError: Before reading anything, for an unknown locale
            TranslationServiceError: From the first failed service call
        """
        code = self.locale_table.service_code_for(locale)
        output = LocaleOutput(locale=locale)
        tracker = KeyPathTracker()

        with open(self.source, "r", encoding="utf-8") as f:
            for raw_line in f:
                new_line, translated = self._translate_line(raw_line, locale, code, catalog, tracker)
                if new_line is None:
                    continue
                output.lines.append(new_line)
                output.translated += translated

        logger.info("%s (%s): %d lines, %d translated", locale, code, len(output.lines), output.translated)
        return output

    def run(self, locales: Iterable[str] | None = None) -> list[LocaleOutput]:
        """Translate every non-base locale (or the given ones) and write each block.

        An unknown locale aborts before any translation. A service failure
        aborts the run; blocks of completed locales stay in the destination.
        """
        if locales:
            entries = self.locale_table.select(locales)
        else:
            entries = self.locale_table.non_base_locales()

        outputs = []
        total = len(entries)
        for i, entry in enumerate(entries):
            locale = entry.source_locale
            self.progress_callback(f"Translating {locale} ({i+1}/{total})...", i / max(total, 1))

            catalog = KeyCatalog.load(self.codec, self.catalog_dir, locale)
            output = self.translate_locale(locale, catalog)
            if self.writer is not None:
                self.writer.write_block(output)
            outputs.append(output)

        self.progress_callback("Complete!", 1.0)
        return outputs
