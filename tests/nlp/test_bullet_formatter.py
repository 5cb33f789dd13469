"""Tests for bullet normalization of model replies."""

import pytest

from app.nlp.bullet_formatter import EMPTY_RESPONSE_TEXT, format_as_bullets, strip_marker


class TestEmptyInput:
    @pytest.mark.parametrize("text", ["", "   \n  ", None, "\r\n\r\n"])
    def test_returns_placeholder(self, text):
        assert format_as_bullets(text) == [EMPTY_RESPONSE_TEXT]

    def test_placeholder_text(self):
        assert format_as_bullets("") == ["No response received"]


class TestMarkers:
    def test_numbered_lines(self):
        assert format_as_bullets("1. Do X\n2. Do Y") == ["Do X", "Do Y"]

    def test_mixed_bullet_glyphs(self):
        text = "- Item one\n* Item two\n• Item three"
        assert format_as_bullets(text) == ["Item one", "Item two", "Item three"]

    @pytest.mark.parametrize("glyph", ["➤", "▪", "▫", "◦", "‣", "⁃"])
    def test_unicode_glyphs(self, glyph):
        assert format_as_bullets(f"{glyph} Water early") == ["Water early"]

    def test_glyph_without_space(self):
        assert format_as_bullets("-Mulch the beds") == ["Mulch the beds"]

    def test_letter_enumeration(self):
        assert format_as_bullets("a. First\nB. Second") == ["First", "Second"]

    def test_cascade_numeric_then_letter(self):
        assert strip_marker("1. a. Use copper spray") == "Use copper spray"

    def test_cascade_bullet_then_number(self):
        assert strip_marker("- 3. Rotate crops") == "Rotate crops"

    def test_residual_asterisk_after_number(self):
        assert strip_marker("2. * Avoid overhead watering") == "Avoid overhead watering"

    def test_bold_markdown_is_kept(self):
        assert strip_marker("**Prevention:** rotate crops") == "*Prevention:** rotate crops"

    def test_each_rule_applies_once(self):
        assert strip_marker("- - nested") == "- nested"

    def test_decimal_numbers_are_not_markers(self):
        assert strip_marker("1.5 kg per hectare") == "1.5 kg per hectare"

    @pytest.mark.parametrize("line", ["1.Do X", "a.Do X", "e.g. prune early"])
    def test_enumeration_without_space_is_kept(self, line):
        assert format_as_bullets(line) == [line]

    def test_plain_line_unchanged(self):
        assert strip_marker("Remove infected leaves") == "Remove infected leaves"


class TestLineHandling:
    def test_crlf_and_blank_lines(self):
        text = "\r\n1. Wear gloves\r\n\r\n   \n2. Remove leaves  \n"
        assert format_as_bullets(text) == ["Wear gloves", "Remove leaves"]

    def test_one_bullet_per_non_empty_line(self):
        text = "Intro line\n\n- a\n-\n  * b  "
        result = format_as_bullets(text)
        assert len(result) == 4
        assert result == ["Intro line", "a", "", "b"]

    def test_order_preserved(self):
        text = "3. third\n1. first\n2. second"
        assert format_as_bullets(text) == ["third", "first", "second"]

    def test_idempotent_on_clean_output(self):
        text = "1. Wear gloves\n- Remove leaves\n• Spray neem oil"
        once = format_as_bullets(text)
        assert format_as_bullets("\n".join(once)) == once
