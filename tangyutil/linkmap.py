"""Expansion of link maps between two groups of objects.

The objects behind a link are named ``b1``, ``b2``, ... on the back side
and ``f1``, ``f2``, ... on the fore side.  A link map lists which back
names connect to which fore names.  Maps are strings such as
``"b1:f1,f2,;b2:f3,;"``: entries are separated by ``;``, the source and
its destinations by ``:`` and destinations by ``,``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Collection, Iterator, Optional

from tangyutil.listops import list_sort_uniq
from tangyutil.vdict import VDict
from tangyutil.word import draw_word

CHILD = "."
RANGE = "-"
SEQ = ","
SEP = ";"
SRC_DST = ":"


@dataclass
class LinkEnd:
    """An object taking part in links, with its link counters.

    ``sn``/``si``/``sc`` count and index the links leaving the object,
    ``dn``/``di``/``dc`` those arriving at it.
    """

    body: Any = None
    sn: int = 0
    si: int = -1
    sc: int = 0
    dn: int = 0
    di: int = -1
    dc: int = 0

    def describe(self) -> str:
        """Return ``oid si/sn di/dn`` in fixed-width columns."""
        if self.body is None:
            raise ValueError("link end has no body")
        return (
            f"{self.body.oid:3d} {self.si:3d}/{self.sn:<3d} "
            f"{self.di:3d}/{self.dn:<3d}"
        )


def _tokens(text: str, sep: str) -> Iterator[str]:
    """Yield fields of ``text`` split by ``sep`` up to the first empty one."""
    rest = text
    while True:
        token, rest = draw_word(rest, sep)
        if not token:
            return
        yield token


def _leading_digits(text: str) -> tuple[int, str]:
    end = 0
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    value = int(text[:end]) if end else 0
    return value, text[end:]


def parse_range(text: str) -> tuple[int, int]:
    """Parse ``"N"`` or ``"N-M"`` into ``(begin, end)``.

    Missing numbers read as 0.  Raises ``ValueError`` when something other
    than the range mark follows the first number.
    """
    begin, rest = _leading_digits(text)
    if not rest:
        return begin, begin
    if rest[0] != RANGE:
        raise ValueError(f"range mark expected in {text!r}")
    end, _ = _leading_digits(rest[1:])
    return begin, end


def expand_full(back_seq: str, fore_seq: str) -> str:
    """Link every name of ``back_seq`` to every name of ``fore_seq``.

    Both sequences are ``;``-separated lists of names.
    """
    fore_block = "".join(name + SEQ for name in _tokens(fore_seq, SEP))
    return "".join(
        f"{name}{SRC_DST}{fore_block}{SEP}" for name in _tokens(back_seq, SEP)
    )


def expand_pattern(back: VDict, fore: VDict, pattern: str) -> str:
    """Expand a name pattern such as ``"b1-3,5"`` or ``"f*"``.

    The leading letters give the base letter (the last one counts); the
    rest is a ``,``-separated list of numbers, ranges or ``*``.  A ``*``
    adds every name held in the ``b`` or ``f`` dictionary and the whole
    result is then sorted with duplicates removed.  Each name in the
    result is followed by ``;``.
    """
    pos = 0
    while pos < len(pattern) and pattern[pos].isascii() and pattern[pos].isalpha():
        pos += 1
    if pos == 0:
        raise ValueError(f"pattern {pattern!r} has no base letter")
    base = pattern[pos - 1]

    out = ""
    for token in _tokens(pattern[pos:], SEQ):
        if token.startswith("*"):
            if base == "f":
                source = fore
            elif base == "b":
                source = back
            else:
                return out
            out += "".join(key + SEP for key, _ in source.items())
            return list_sort_uniq(out, SEP)
        if RANGE in token:
            try:
                begin, end = parse_range(token)
            except ValueError:
                continue
            out += "".join(f"{base}{n}{SEP}" for n in range(begin, end + 1))
        else:
            out += f"{base}{token}{SEP}"
    return out


def expand_sd_patterns(
    back: VDict,
    fore: VDict,
    patterns: str,
    styles: Optional[Collection[str]] = None,
) -> str:
    """Expand a ``;``-separated list of ``src:dst`` patterns into a link map.

    Entries naming a link style (one of ``styles``) are passed through
    unchanged so that they apply to the links after them.
    """
    style_names = styles if styles is not None else ()
    out = ""
    for entry in _tokens(patterns, SEP):
        if entry in style_names:
            out += entry + SEP
            continue
        src_pat, rest = draw_word(entry, SRC_DST)
        dst_pat, _ = draw_word(rest, SRC_DST)
        src_seq = expand_pattern(back, fore, src_pat)
        dst_seq = expand_pattern(back, fore, dst_pat)
        out += expand_full(src_seq, dst_seq)
    return out