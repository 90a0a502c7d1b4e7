"""Parser for ``.properties`` string bundles."""

from __future__ import annotations

import re
from typing import Iterator

from propstrings.errors import TemplateLoadError

_COMMENT_MARKERS = ("#", "!")
_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _ends_with_continuation(line: str) -> bool:
    backslashes = len(line) - len(line.rstrip("\\"))
    return backslashes % 2 == 1


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, logical_line)`` pairs, joining continuations."""

    buffer: list[str] = []
    start = 0
    for number, raw_line in enumerate(_LINE_BREAK.split(text), start=1):
        line = raw_line.lstrip(_WHITESPACE) if buffer else raw_line
        if not buffer:
            start = number
            stripped = line.lstrip(_WHITESPACE)
            if not stripped or stripped.startswith(_COMMENT_MARKERS):
                continue

        if _ends_with_continuation(line):
            buffer.append(line[:-1])
            continue

        buffer.append(line)
        yield start, "".join(buffer)
        buffer = []

    if buffer:
        yield start, "".join(buffer)


def _unescape(value: str, line_number: int) -> str:
    chars: list[str] = []
    index = 0
    length = len(value)
    while index < length:
        char = value[index]
        if char != "\\":
            chars.append(char)
            index += 1
            continue

        index += 1
        if index >= length:
            break
        escaped = value[index]
        if escaped == "u":
            digits = value[index + 1 : index + 5]
            if len(digits) != 4:
                raise TemplateLoadError(f"line {line_number}: truncated \\u escape")
            try:
                chars.append(chr(int(digits, 16)))
            except ValueError as exc:
                raise TemplateLoadError(
                    f"line {line_number}: invalid \\u escape '\\u{digits}'"
                ) from exc
            index += 5
            continue

        chars.append(_ESCAPES.get(escaped, escaped))
        index += 1

    return "".join(chars)


def _split_entry(line: str) -> tuple[str, str]:
    stripped = line.lstrip(_WHITESPACE)
    index = 0
    length = len(stripped)
    while index < length:
        char = stripped[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key = stripped[:index]
    rest = stripped[index:].lstrip(_WHITESPACE)
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``.properties`` source into a key-to-template mapping.

    Supports ``=``, ``:`` and whitespace separators, ``#``/``!`` comments,
    backslash line continuations and ``\\uXXXX`` escapes. Later duplicates win.
    """

    entries: dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, line_number)
        if not key:
            raise TemplateLoadError(f"line {line_number}: entry has an empty key")
        entries[key] = _unescape(raw_value, line_number)
    return entries


__all__ = ["parse_properties"]
