"""
YAML line codec.

Treats a YAML localization file as plain lines of ``key: value``. Nesting
is ignored when reading lines (an indented ``greeting: Hello`` yields the
key ``greeting``); existing locale files are read with PyYAML to collect
their dotted key paths.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import yaml

from keytrans.codec.base import LineCodec
from keytrans.config import COMMENT_MARKER
from keytrans.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Key is everything up to the first colon
KEY_VALUE_PATTERN = re.compile(r"^([^:]+):(.*)$")


def _leaf_paths(node, prefix: str, paths: set[str]) -> set[str]:
    if isinstance(node, dict):
        for key, value in node.items():
            path = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                _leaf_paths(value, path, paths)
            else:
                paths.add(path)
    return paths


class YamlCodec(LineCodec):
    """Line-delimited ``key: value`` format.

    Usage:
        codec = YamlCodec()
        codec.classify("greeting: Hello")   # KeyValue('greeting', 'Hello')
        codec.format("greeting", "Bonjour")  # 'greeting: Bonjour'
    """

    @property
    def name(self) -> str:
        return "yaml"

    def is_comment(self, line: str) -> bool:
        return line.lstrip().startswith(COMMENT_MARKER)

    def split(self, line: str) -> tuple[Optional[str], Optional[str]]:
        match = KEY_VALUE_PATTERN.match(line)
        if not match:
            return None, None
        return match.group(1).strip(), match.group(2).strip()

    def format(self, key: str, value: str) -> str:
        return f"{key}: {value}"

    def parse_catalog(self, path: Path, root: Optional[str] = None) -> set[str]:
        """Collect the dotted paths of the leaf keys of a YAML document.

        Rails-style files nest everything under the locale root
        (``fr-FR: {home: {title: ...}}``); passing that root as ``root``
        leaves it out of the paths (``home.title``). Keys are loaded with
        ``yaml.BaseLoader`` so ``yes:`` or ``1:`` stay as written.

        Raises:
            ConfigurationError: If the file is not valid YAML
        """
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.load(f, Loader=yaml.BaseLoader)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in catalog file {path}: {e}") from e

        paths: set[str] = set()
        if isinstance(data, dict):
            for key, node in data.items():
                if key == root and isinstance(node, dict):
                    _leaf_paths(node, "", paths)
                else:
                    _leaf_paths({key: node}, "", paths)
        logger.debug("Loaded %d keys from %s", len(paths), path)
        return paths
