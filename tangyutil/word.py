"""Small helpers for pulling words off the front of a string.

Each ``draw_*`` function returns the word it took together with the rest
of the string, so callers can walk a line word by word.
"""

from __future__ import annotations

import re
from typing import Optional

_WHITE_WORD = re.compile(r"[^ \t\n]*")


def skip_white(text: str) -> str:
    """Return ``text`` without its leading spaces and tabs."""
    return text.lstrip(" \t")


def chomp(line: str) -> str:
    """Remove one trailing ``"\\n"`` or ``"\\r\\n"`` from ``line``."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def strip_last_char(text: str, ch: str) -> str:
    """Drop the last character of ``text`` if it is ``ch``."""
    if text and text[-1] == ch:
        return text[:-1]
    return text


def _clip(end: int, limit: Optional[int]) -> int:
    if limit is not None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        return min(end, limit)
    return end


def draw_quoted(src: str, limit: Optional[int] = None) -> tuple[str, str]:
    """Take a double-quoted word from the front of ``src``.

    The closing quote, when reached, is consumed.  Raises ``ValueError`` if
    ``src`` does not start with a double quote.
    """
    if not src.startswith('"'):
        raise ValueError("string does not start with a double quote")
    body = src[1:]
    end = body.find('"')
    if end < 0:
        end = len(body)
    end = _clip(end, limit)
    word, rest = body[:end], body[end:]
    if rest.startswith('"'):
        rest = rest[1:]
    return word, rest


def draw_whitespace_word(src: str, limit: Optional[int] = None) -> tuple[str, str]:
    """Take a word ended by blank, tab or newline; skip the blanks after it."""
    match = _WHITE_WORD.match(src)
    end = _clip(match.end(), limit)
    return src[:end], src[end:].lstrip(" \t\n")


def draw_word(src: str, sep: str, limit: Optional[int] = None) -> tuple[str, str]:
    """Take a word ended by the one-character separator ``sep``.

    One separator after the word, when present, is consumed.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    end = src.find(sep)
    if end < 0:
        end = len(src)
    end = _clip(end, limit)
    word, rest = src[:end], src[end:]
    if rest.startswith(sep):
        rest = rest[1:]
    return word, rest