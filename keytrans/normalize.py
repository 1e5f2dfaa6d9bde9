"""
Post-processing of machine-translated values.

The translation service returns text with artifacts of its own (leading
non-breaking spaces, guillemets, curly quotes, HTML entities, spaces inside
tags) and mangles the source conventions (``{0}`` placeholders come back as
``(0)``). ``normalize`` repairs them with a fixed chain of rules.

The order of ``RULES`` is significant: quote handling in particular first
funnels every quote style into ``"``, then downgrades all of them to ``'``
and finally re-wraps the whole value in ``"``.

Example:
    >>> normalize("« Bonjour (0) »", "fr-FR")
    '" Bonjour {0} "'
"""

from __future__ import annotations

import re
from typing import Callable

from keytrans.locales import is_chinese

Rule = Callable[[str], str]

# Anchored patterns match per line, like the rest of the chain
NBSP_PREFIX = re.compile(r"^\u00a0", re.MULTILINE)
QUOTE_THEN_PERIOD = re.compile(r'"\.$', re.MULTILINE)
LEADING_SINGLE_QUOTE = re.compile(r"^'", re.MULTILINE)
TRAILING_SINGLE_QUOTE = re.compile(r"'$", re.MULTILINE)
LEADING_DOUBLE_QUOTE = re.compile(r'^"', re.MULTILINE)
TRAILING_DOUBLE_QUOTE = re.compile(r'"$', re.MULTILINE)

PLACEHOLDERS = (
    ("(0)", "{0}"),
    ("(1)", "{1}"),
    ("(2)", "{2}"),
    ("（0）", "{0}"),  # full-width parentheses
)


def strip_strong_tags(text: str) -> str:
    """Drop <strong> markup entirely (Chinese locales only)."""
    return text.replace("<strong>", "").replace("</strong>", "")


def strip_leading_nbsp(text: str) -> str:
    return NBSP_PREFIX.sub("", text)


def collapse_space_before_bracket(text: str) -> str:
    return text.replace(" ]", "]")


def replace_guillemets(text: str) -> str:
    return text.replace("«", '"').replace("»", '"')


def move_period_inside_quote(text: str) -> str:
    return QUOTE_THEN_PERIOD.sub('."', text)


def fix_escaped_space_quote(text: str) -> str:
    return text.replace('\\ "', '\\"')


def fix_closing_tag_space(text: str) -> str:
    return text.replace("</ ", "</")


def replace_curly_quotes(text: str) -> str:
    return text.replace("“", '"').replace("”", '"')


def trim_strong_tag_spaces(text: str) -> str:
    return text.replace("<strong> ", "<strong>").replace(" </strong>", "</strong>")


def decode_quote_entities(text: str) -> str:
    # &#39; is an apostrophe in HTML, but every quote ends up as ' below anyway
    return text.replace("&quot;", '"').replace("&#39;", '"')


def collapse_gt_entity(text: str) -> str:
    return text.replace("&gt; ", ">")


def downgrade_double_quotes(text: str) -> str:
    """Double quotes are reserved for wrapping the whole value."""
    return text.replace('"', "'")


def rewrap_outer_quotes(text: str) -> str:
    text = LEADING_SINGLE_QUOTE.sub('"', text)
    return TRAILING_SINGLE_QUOTE.sub('"', text)


def escape_quote_before_o(text: str) -> str:
    return text.replace(' "O', ' \\"O')


def restore_placeholders(text: str) -> str:
    """Turn ``(0)`` back into the ``{0}`` template placeholder."""
    for mangled, placeholder in PLACEHOLDERS:
        text = text.replace(mangled, placeholder)
    return text


def ensure_wrapped(text: str) -> str:
    if not TRAILING_DOUBLE_QUOTE.search(text):
        text = f'{text}"'
    if not LEADING_DOUBLE_QUOTE.search(text):
        text = f'"{text}'
    return text


def strip_whitespace(text: str) -> str:
    return text.strip()


RULES: tuple[Rule, ...] = (
    strip_leading_nbsp,
    collapse_space_before_bracket,
    replace_guillemets,
    move_period_inside_quote,
    fix_escaped_space_quote,
    fix_closing_tag_space,
    replace_curly_quotes,
    trim_strong_tag_spaces,
    decode_quote_entities,
    collapse_gt_entity,
    downgrade_double_quotes,
    rewrap_outer_quotes,
    escape_quote_before_o,
    restore_placeholders,
    ensure_wrapped,
    strip_whitespace,
)


def rules_for(target_locale: str) -> tuple[Rule, ...]:
    """Return the ordered rules applied for a target locale."""
    if is_chinese(target_locale):
        return (strip_strong_tags,) + RULES
    return RULES


def normalize(translated: str, target_locale: str) -> str:
    """Repair a translated value for the given target locale.

    Args:
        translated: Raw text returned by the translation service
        target_locale: Source-platform locale (e.g. 'zh-Hans-CN')

    Returns:
        The value wrapped in double quotes, ready to be written back
    """
    text = translated
    for rule in rules_for(target_locale):
        text = rule(text)
    return text
