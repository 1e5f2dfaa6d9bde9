"""
Tests for normalization of translated values.

Tests cover:
- Each repair rule on its own
- Rule ordering through the full chain
- Chinese-only <strong> removal
- Stability of already-normalized values
"""

import pytest

from keytrans.normalize import (
    RULES,
    collapse_gt_entity,
    collapse_space_before_bracket,
    decode_quote_entities,
    downgrade_double_quotes,
    ensure_wrapped,
    escape_quote_before_o,
    fix_closing_tag_space,
    fix_escaped_space_quote,
    move_period_inside_quote,
    normalize,
    replace_curly_quotes,
    replace_guillemets,
    restore_placeholders,
    rewrap_outer_quotes,
    rules_for,
    strip_leading_nbsp,
    strip_strong_tags,
    trim_strong_tag_spaces,
)


class TestRules:
    """Individual rules are total string functions."""

    def test_strip_strong_tags(self):
        assert strip_strong_tags("a <strong>b</strong> c") == "a b c"

    def test_strip_leading_nbsp(self):
        assert strip_leading_nbsp("\u00a0Bonjour") == "Bonjour"
        assert strip_leading_nbsp("Bon\u00a0jour") == "Bon\u00a0jour"

    def test_collapse_space_before_bracket(self):
        assert collapse_space_before_bracket("[lien ]") == "[lien]"

    def test_replace_guillemets(self):
        assert replace_guillemets("«oui»") == '"oui"'

    def test_move_period_inside_quote(self):
        assert move_period_inside_quote('dit "oui".') == 'dit "oui."'
        assert move_period_inside_quote('"oui". fin') == '"oui". fin'

    def test_fix_escaped_space_quote(self):
        assert fix_escaped_space_quote('a\\ "b') == 'a\\"b'

    def test_fix_closing_tag_space(self):
        assert fix_closing_tag_space("<b>x</ b>") == "<b>x</b>"

    def test_replace_curly_quotes(self):
        assert replace_curly_quotes("“Salut”") == '"Salut"'

    def test_trim_strong_tag_spaces(self):
        assert trim_strong_tag_spaces("<strong> gras </strong>") == "<strong>gras</strong>"

    def test_decode_quote_entities(self):
        assert decode_quote_entities("&quot;a&#39;") == '"a"'

    def test_collapse_gt_entity(self):
        assert collapse_gt_entity("a &gt; b") == "a >b"

    def test_downgrade_double_quotes(self):
        assert downgrade_double_quotes('"a" "b"') == "'a' 'b'"

    def test_rewrap_outer_quotes(self):
        assert rewrap_outer_quotes("'a' l'homme 'b'") == "\"a' l'homme 'b\""

    def test_escape_quote_before_o(self):
        assert escape_quote_before_o('dit "Oui') == 'dit \\"Oui'

    def test_restore_placeholders(self):
        assert restore_placeholders("(0) (1) (2) （0） (3)") == "{0} {1} {2} {0} (3)"

    def test_ensure_wrapped(self):
        assert ensure_wrapped("abc") == '"abc"'
        assert ensure_wrapped('"abc') == '"abc"'
        assert ensure_wrapped('abc"') == '"abc"'
        assert ensure_wrapped('"abc"') == '"abc"'

    @pytest.mark.parametrize("rule", RULES)
    def test_rules_are_no_ops_on_plain_text(self, rule):
        if rule is ensure_wrapped:
            pytest.skip("wrapping always applies")
        assert rule("plain text") == "plain text"


class TestChain:
    """The full normalization chain."""

    def test_placeholder_restored_and_wrapped(self):
        assert normalize("Bonjour (0), bienvenue !", "fr-FR") == '"Bonjour {0}, bienvenue !"'

    def test_already_quoted_value(self):
        assert normalize('"Bonjour"', "fr-FR") == '"Bonjour"'

    def test_inner_quotes_become_single(self):
        assert normalize('"Il a dit "oui" hier"', "fr-FR") == "\"Il a dit 'oui' hier\""

    def test_period_moves_before_outer_quote(self):
        # the period moves first, then inner quotes downgrade, then re-wrap
        assert normalize('Il a dit "oui".', "fr-FR") == "\"Il a dit 'oui.\""

    def test_guillemets(self):
        assert normalize("« Bonjour (0) »", "fr-FR") == '" Bonjour {0} "'

    def test_html_entities(self):
        assert normalize("&quot;Salut&quot;", "fr-FR") == '"Salut"'

    def test_leading_nbsp(self):
        assert normalize("\u00a0Hallo", "de-DE") == '"Hallo"'

    def test_contraction_kept(self):
        assert normalize("l'homme", "fr-FR") == "\"l'homme\""

    def test_leading_single_quote_rewrapped(self):
        assert normalize("'Bonjour'", "fr-FR") == '"Bonjour"'

    def test_full_width_placeholder(self):
        assert normalize("你好（0）", "zh-Hans-CN") == '"你好{0}"'


class TestStrongTags:
    """<strong> handling depends on the locale family."""

    @pytest.mark.parametrize("locale", ["zh-Hans-CN", "zh-Hant-TW", "zh-Hant-HK"])
    def test_chinese_strips_tags(self, locale):
        result = normalize("<strong>重要</strong>消息", locale)
        assert result == '"重要消息"'
        assert "<strong>" not in result

    def test_other_locales_keep_tags(self):
        result = normalize("<strong> Important </strong> message", "fr-FR")
        assert result == '"<strong>Important</strong> message"'

    def test_rules_for(self):
        assert rules_for("zh-Hans-CN") == (strip_strong_tags,) + RULES
        assert rules_for("fr-FR") == RULES
        assert len(rules_for("zh-Hant-TW")) == 17


class TestStability:
    """Re-applying the chain to normalized output."""

    @pytest.mark.parametrize("value", [
        '"Bonjour {0}, bienvenue !"',
        '"<strong>Important</strong> [lien]"',
        "\"l'homme\"",
    ])
    def test_second_pass_keeps_value(self, value):
        assert normalize(normalize(value, "fr-FR"), "fr-FR") == normalize(value, "fr-FR")

    def test_inner_rules_idempotent(self):
        text = '«a» [b ] \\ "h </ c> “d” <strong> e </strong> &quot;f&quot; &gt; g (0) "i".'
        for rule in (
            collapse_space_before_bracket,
            replace_guillemets,
            move_period_inside_quote,
            fix_escaped_space_quote,
            fix_closing_tag_space,
            replace_curly_quotes,
            trim_strong_tag_spaces,
            decode_quote_entities,
            collapse_gt_entity,
            restore_placeholders,
        ):
            once = rule(text)
            assert rule(once) == once
