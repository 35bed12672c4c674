"""Text dumps of a :class:`~tangyutil.vdict.VDict`."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from tangyutil.vdict import Option, VDict


def _address(obj: Any) -> str:
    return "(nil)" if obj is None else f"0x{id(obj):x}"


def _render(vdict: VDict, value: Any) -> str:
    formatter = vdict.format_value if vdict.format_value is not None else str
    try:
        text = formatter(value)
    except Exception:
        return "*error*"
    return text if text else "*empty*"


def _out(fp: Optional[TextIO]) -> TextIO:
    return sys.stdout if fp is None else fp


def show_head(vdict: VDict, fp: Optional[TextIO] = None) -> None:
    """Write a one-line summary of ``vdict``."""
    out = _out(fp)
    u1, u2, u3 = vdict.user_ints
    out.write(
        f"dict {_address(vdict)} {vdict.ctime} {vdict.use}/{vdict.capacity()} "
        f"{vdict.mode.label} 0x{int(vdict.options):08x}; "
        f"u {u1},{u2},{u3} {_address(vdict.user_data)}\n"
    )
    out.flush()


def show(vdict: VDict, fp: Optional[TextIO] = None, key: Optional[str] = None) -> None:
    """Write the head line and one line per live slot.

    With ``key`` given, only that entry is listed, or a not-found line.
    """
    out = _out(fp)
    show_head(vdict, out)
    count = 0
    for pos, entry in enumerate(vdict.slots()):
        if entry is None or not entry[0]:
            continue
        name, value = entry
        if key is not None and name != key:
            continue
        parts = [f"{pos:5d} "]
        if Option.PRINT_ADDR in vdict.options:
            parts.append(f"{_address(entry)} ")
        if Option.PRINT_HASH in vdict.options:
            digest = vdict.hash_func(name, vdict.capacity(), vdict.hash_seed)
            parts.append(f"{digest:5d} ")
        parts.append(f"{name:<16s}")
        if Option.PRINT_ADDR in vdict.options:
            parts.append(f"{_address(value)} ")
        parts.append("*null*" if value is None else _render(vdict, value))
        out.write("".join(parts) + "\n")
        count += 1
    if key is not None and count == 0:
        out.write(f"*not-found* {key or '*empty*'}\n")
    out.flush()


def print_table(vdict: VDict, fp: Optional[TextIO] = None) -> None:
    """Write ``slot count key value`` for every live entry."""
    out = _out(fp)
    count = 0
    for pos, entry in enumerate(vdict.slots()):
        if entry is None or not entry[0]:
            continue
        name, value = entry
        out.write(f"{pos} {count} {name} {_render(vdict, value)}\n")
        count += 1
    out.flush()


def print_table_tex(vdict: VDict, fp: Optional[TextIO] = None) -> None:
    """Write the first ``use`` slots as a LaTeX document holding a table."""
    out = _out(fp)
    out.write("\\documentclass[a4j]{jarticle}\n")
    out.write("\\begin{document}\n")
    out.write("\\begin{tabular}{rrl}\n")
    out.write("\\multicolumn{1}{c}{count} &\n")
    out.write("\\multicolumn{1}{c}{pos} &\n")
    out.write("\\multicolumn{1}{c}{key} & \n")
    out.write("\\multicolumn{1}{c}{value} \\\\\n")
    count = 0
    for pos, entry in enumerate(vdict.slots()[: vdict.use]):
        if entry is None:
            continue
        name, value = entry
        out.write(f"{count} & {pos} & {name} & {_render(vdict, value)} \\\\\n")
        count += 1
    out.write("\\end{tabular}\n")
    out.write("\\end{document}\n")
    out.flush()