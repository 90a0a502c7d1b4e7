"""Unit coverage for the ``.properties`` bundle parser."""

from __future__ import annotations

import pytest

from propstrings.catalog import parse_properties
from propstrings.errors import TemplateLoadError


def test_parses_separators_and_skips_comments() -> None:
    source = "\n".join(
        [
            "# comment",
            "! another comment",
            "",
            "equals=one",
            "colon: two",
            "space three",
            "   indented = four  ",
            "empty=",
        ]
    )

    assert parse_properties(source) == {
        "equals": "one",
        "colon": "two",
        "space": "three",
        "indented": "four  ",
        "empty": "",
    }


def test_value_keeps_later_separators() -> None:
    assert parse_properties("url=http://example.com/?a=b") == {"url": "http://example.com/?a=b"}


def test_escaped_separator_belongs_to_key() -> None:
    assert parse_properties(r"a\=b=c") == {"a=b": "c"}


def test_line_continuations_are_joined() -> None:
    source = "message=Hello \\\n    world\nnext=value"

    assert parse_properties(source) == {"message": "Hello world", "next": "value"}


def test_escaped_backslash_does_not_continue() -> None:
    source = "path=C:\\\\\nnext=value"

    assert parse_properties(source) == {"path": "C:\\", "next": "value"}


def test_unicode_and_control_escapes() -> None:
    source = r"greeting=caf\u00e9\tbar\nbaz"

    assert parse_properties(source) == {"greeting": "café\tbar\nbaz"}


def test_plural_and_placeholder_text_is_preserved() -> None:
    source = "money=one dollar;%S dollars\nhereHave=Here, %1$S, have %2$S."

    assert parse_properties(source) == {
        "money": "one dollar;%S dollars",
        "hereHave": "Here, %1$S, have %2$S.",
    }


def test_later_duplicates_win() -> None:
    assert parse_properties("key=first\nkey=second") == {"key": "second"}


@pytest.mark.parametrize("source", [r"bad=\u12", r"bad=\u12zz", "=value"])
def test_malformed_entries_raise(source: str) -> None:
    with pytest.raises(TemplateLoadError):
        parse_properties(source)


def test_form_feed_separates_key_from_value() -> None:
    assert parse_properties("key\fvalue") == {"key": "value"}


@pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x85", "\x0b", "\x1c"])
def test_unicode_line_separators_stay_inside_values(separator: str) -> None:
    source = f"poem=line one{separator}line two\nnext=value"

    assert parse_properties(source) == {"poem": f"line one{separator}line two", "next": "value"}


def test_crlf_and_cr_line_endings() -> None:
    assert parse_properties("a=1\r\nb=2\rc=3") == {"a": "1", "b": "2", "c": "3"}
