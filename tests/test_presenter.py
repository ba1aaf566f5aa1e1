"""
Tests for terminal rendering
"""

import pytest

from hikma.config import HADITH_LABEL, WISDOM_LABEL
from hikma.models import Content
from hikma.presenter import render, terminal_width

QUOTE = Content(text="الصبر مفتاح الفرج", author="مثل عربي", sub=WISDOM_LABEL)
HADITH = Content(text="الدين النصيحة", author="الإمام مسلم", sub=HADITH_LABEL)


class TestTerminalWidth:
    """Tests for width clamping."""

    @pytest.mark.parametrize("width,expected", [
        (20, 40),
        (40, 40),
        (60, 60),
        (80, 80),
        (200, 80),
    ])
    def test_clamped(self, record_console, width, expected):
        assert terminal_width(record_console(width=width)) == expected


class TestRender:
    """Tests for the rendered layout."""

    def test_nothing_to_render(self, record_console):
        console = record_console()
        render(None, console)
        assert console.file.getvalue() == ""

    def test_layout(self, record_console):
        console = record_console(width=60)
        render(QUOTE, console)
        lines = console.file.getvalue().split("\n")

        assert lines == [
            "",
            "    " + "▀" * 52,
            "      الصبر مفتاح الفرج",
            "",
            "      مثل عربي | Wisdom",
            "    " + "▄" * 52,
            "",
            "",
        ]

    def test_rules_capped_on_wide_terminal(self, record_console):
        console = record_console(width=200)
        render(QUOTE, console)
        assert "▀" * 72 in console.file.getvalue()
        assert "▀" * 73 not in console.file.getvalue()

    def test_long_text_not_wrapped(self, record_console):
        long_quote = Content(text="حكمة " * 30, author="مثل عربي", sub=WISDOM_LABEL)
        console = record_console(width=40)
        render(long_quote, console)
        assert ("  " + "حكمة " * 30).rstrip() in console.file.getvalue()

    def test_brackets_are_not_markup(self, record_console):
        content = Content(text="[bold]نص[/bold]", author="[x]", sub=WISDOM_LABEL)
        console = record_console()
        render(content, console)
        assert "[bold]نص[/bold]" in console.file.getvalue()
        assert "[x] | Wisdom" in console.file.getvalue()

    def test_hadith_attribution_is_green(self, record_console):
        console = record_console(color=True)
        render(HADITH, console)
        assert "\x1b[1;92m  الإمام مسلم | حديث نبوي" in console.file.getvalue()

    def test_wisdom_attribution_is_grey(self, record_console):
        console = record_console(color=True)
        render(QUOTE, console)
        output = console.file.getvalue()
        assert "\x1b[90m  مثل عربي | Wisdom" in output
        assert "\x1b[1;92m" not in output

    def test_english_hadith_label_is_green(self, record_console):
        content = Content(text="text", author="author", sub="Hadith")
        console = record_console(color=True)
        render(content, console)
        assert "\x1b[1;92m  author | Hadith" in console.file.getvalue()
