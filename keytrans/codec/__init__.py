"""
Line codecs for localization formats.

Only the YAML line format ships today; new formats implement ``LineCodec``
and register a name in ``create_codec``.
"""

from keytrans.codec.base import LineCodec
from keytrans.codec.yaml_codec import YamlCodec
from keytrans.errors import ConfigurationError

__all__ = [
    "LineCodec",
    "YamlCodec",
    "create_codec",
]


def create_codec(name: str) -> LineCodec:
    """Factory function to create a codec by format name.

    Raises:
        ConfigurationError: For an unknown format
    """
    name_lower = name.lower()
    if name_lower in ("yaml", "yml"):
        return YamlCodec()
    raise ConfigurationError(
        f"Unknown file format: {name}. Available formats: yaml"
    )
