"""Operations on separator-delimited lists held in a single string.

A list such as ``"b1;b2;f3;"`` holds its items one after another, each
followed by the separator character.  These helpers count, search, extend
and normalise such lists.
"""

from __future__ import annotations

from typing import Optional

from tangyutil.word import draw_word


class ListOverflowError(ValueError):
    """Raised when an item does not fit within a list's length limit."""


def _check_sep(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError("separator must be a single character")


def _fields(text: str, sep: str):
    """Yield ``(offset, field)`` for each field up to the first empty one."""
    rest = text
    while True:
        offset = len(text) - len(rest)
        token, rest = draw_word(rest, sep)
        if not token:
            return
        yield offset, token


def list_count(text: str, sep: str) -> int:
    """Count the fields of ``text``.

    A leading field counts when the text does not start with ``sep``; every
    separator that is followed by more text starts another field.
    """
    _check_sep(sep)
    count = 1 if text and text[0] != sep else 0
    count += sum(
        1 for pos, ch in enumerate(text[:-1]) if ch == sep
    )
    return count


def list_find(text: str, name: str, sep: str) -> bool:
    """Return whether ``name`` is one of the fields before any empty field."""
    _check_sep(sep)
    return any(token == name for _, token in _fields(text, sep))


def list_find_pos(text: str, name: str, sep: str) -> Optional[int]:
    """Return the offset in ``text`` where field ``name`` starts, or ``None``."""
    _check_sep(sep)
    for offset, token in _fields(text, sep):
        if token == name:
            return offset
    return None


def list_add(text: str, item: str, sep: str, limit: Optional[int] = None) -> str:
    """Return ``text`` with ``item`` appended, followed by ``sep``.

    A separator is inserted first when a non-empty list does not already end
    with one.  With ``limit`` given, raise :class:`ListOverflowError` when the
    list is already at the limit or the item would not fit.
    """
    _check_sep(sep)
    length = len(text)
    if limit is not None:
        if length >= limit:
            raise ListOverflowError("list already fills its limit")
        if length + len(item) + 1 >= limit:
            raise ListOverflowError(f"no room for {item!r}")
    if text and not text.endswith(sep):
        text += sep
    return text + item + sep


def list_uniq_add(text: str, item: str, sep: str, limit: Optional[int] = None) -> str:
    """Append ``item`` like :func:`list_add` unless it is already present."""
    if list_find(text, item, sep):
        return text
    return list_add(text, item, sep, limit)


def _leading_int(text: str) -> int:
    """Parse a leading integer the way ``atoi`` does; 0 when there is none."""
    stripped = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = ""
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    return sign * int(digits) if digits else 0


def list_sort_uniq(text: str, sep: str, numeric: bool = False) -> str:
    """Sort the fields of ``text`` and drop duplicates.

    Trailing separators are trimmed first; a list of at most one field is
    returned in that trimmed form.  Otherwise empty fields are skipped, the
    rest are sorted (by leading integer when ``numeric``) and the result is
    rebuilt with a separator after every item.
    """
    _check_sep(sep)
    trimmed = text.rstrip(sep)
    if list_count(trimmed, sep) <= 1:
        return trimmed
    items = [field for field in trimmed.split(sep) if field]
    if numeric:
        items.sort(key=_leading_int)
    else:
        items.sort()
    result = ""
    for item in items:
        result = list_uniq_add(result, item, sep)
    return result