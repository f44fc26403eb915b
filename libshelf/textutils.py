"""Small text helpers for console input and fixed-width fields."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_SPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def trim(word: str) -> str:
    """Drop every leading and trailing character that is not an ASCII letter."""
    start = next((i for i, ch in enumerate(word) if _is_alpha(ch)), None)
    if start is None:
        return ""
    end = next(i for i in range(len(word), 0, -1) if _is_alpha(word[i - 1]))
    return word[start:end]


def truncate(text: str, length: int) -> str:
    """The first ``length`` characters of ``text``."""
    if length < 0:
        raise ValueError("length must not be negative")
    return text[:length]


def read_field(stream: TextIO | None = None, max_size: int = 255, delimiter: str = "\n") -> str:
    """Read up to ``max_size`` characters, stopping at ``delimiter``.

    Leading whitespace is skipped. The delimiter, when reached, is consumed
    but not returned; when the size limit is reached nothing more is read.
    """
    source = sys.stdin if stream is None else stream
    ch = source.read(1)
    while ch and ch in _SPACE:
        ch = source.read(1)
    chars: list[str] = []
    while ch and len(chars) < max_size and ch != delimiter:
        chars.append(ch)
        if len(chars) < max_size:
            ch = source.read(1)
    return "".join(chars)


def read_line(stream: TextIO | None = None) -> str | None:
    """Read one line without its newline; None at end of input or for an empty line."""
    source = sys.stdin if stream is None else stream
    line = source.readline()
    if not line:
        return None
    text = line[:-1] if line.endswith("\n") else line
    return text or None


def get_int(
    stream: TextIO | None = None,
    prompt: str | None = None,
    output: TextIO | None = None,
) -> int:
    """Show ``prompt``, read an integer and discard the rest of its line.

    Raises :class:`EOFError` when the input ends first and
    :class:`ValueError` when the text does not start with an integer.
    """
    source = sys.stdin if stream is None else stream
    out = sys.stdout if output is None else output
    if prompt:
        out.write(prompt)
    while True:
        line = source.readline()
        if not line:
            raise EOFError("no integer entered")
        if line.strip():
            break
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"integer expected, got {line.strip()!r}")
    return int(match.group(1))