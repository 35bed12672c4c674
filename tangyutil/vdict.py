"""A string-keyed dictionary with selectable storage strategies.

Entries live in a table of slots.  Three layouts are supported: an open
hash table with linear probing, a sorted array searched by bisection and a
plain array searched linearly.  Deleted entries leave a tombstone (an empty
key) behind, which keeps probe chains intact.
"""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

SLOT_BASE_LEN = 32


class Mode(str, enum.Enum):
    """Storage layout of a :class:`VDict`."""

    OHASH = "o"
    SARRAY = "s"
    NARRAY = "n"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]


_MODE_LABELS = {
    Mode.OHASH: "openhash",
    Mode.SARRAY: "sortedarray",
    Mode.NARRAY: "normalarray",
}


class Option(enum.IntFlag):
    """Behaviour flags of a :class:`VDict`."""

    NONE = 0
    PRINT_ADDR = 0x0001
    PRINT_HASH = 0x0002
    EXPAND_DOUBLE = 0x0100
    EXPAND_THREE_HALVES = 0x0200
    EXPAND_SQUARE = 0x0400
    EXPAND_ALLOW = 0x0800


class DuplicateKeyError(KeyError):
    """Raised when adding a key that is already present without swapping."""


class DictFullError(RuntimeError):
    """Raised when no free slot is left and expansion is not allowed."""


def default_hash(key: str, radix: int, seed: int) -> int:
    """Hash ``key`` into ``range(radix)`` using 32-bit unsigned arithmetic."""
    total = (1027 + seed) & 0xFFFFFFFF
    weight = 1
    for byte in key.encode("utf-8"):
        total = ((total << 1) + byte * weight) & 0xFFFFFFFF
        weight += 2
    return total % radix


@dataclass
class _Cell:
    key: str
    value: Any


HashFunc = Callable[[str, int, int], int]


class VDict:
    """Dictionary of string keys over a slot table."""

    def __init__(
        self,
        mode: Mode = Mode.OHASH,
        options: Option = Option.EXPAND_ALLOW,
        usage_hiwater: int = 80,
        hash_func: HashFunc = default_hash,
        hash_seed: int = 0,
        format_value: Optional[Callable[[Any], str]] = None,
        on_purge: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        self.mode = Mode(mode)
        self.options = Option(options)
        self.usage_hiwater = 80
        self.set_usage_hiwater(usage_hiwater)
        self.hash_func = hash_func
        self.hash_seed = hash_seed
        self.format_value = format_value
        self.on_purge = on_purge
        self.ctime = int(time.time())
        self.user_ints = [0, 0, 0]
        self.user_data: Any = None
        self._slots: list[Optional[_Cell]] = [None] * SLOT_BASE_LEN
        self.use = 0

    # -- container protocol -------------------------------------------------

    def __len__(self) -> int:
        return sum(1 for cell in self._slots if cell is not None and cell.key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._locate(key) is not None

    def __getitem__(self, key: str) -> Any:
        cell = self._locate(key)
        if cell is None:
            raise KeyError(key)
        return cell.value

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items())

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield live ``(key, value)`` pairs in slot order."""
        for cell in self._slots:
            if cell is not None and cell.key:
                yield cell.key, cell.value

    def slots(self) -> list[Optional[tuple[str, Any]]]:
        """Return a snapshot of every slot: ``None`` or ``(key, value)``.

        Tombstones appear with an empty key.
        """
        return [None if cell is None else (cell.key, cell.value) for cell in self._slots]

    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._slots)

    # -- configuration ------------------------------------------------------

    def set_usage_hiwater(self, percent: int) -> None:
        """Set the fill percentage at which the table expands."""
        if percent > 100:
            raise ValueError("usage_hiwater must be less than or equal to 100")
        self.usage_hiwater = percent

    def enable(self, options: Option) -> None:
        self.options |= Option(options)

    def disable(self, options: Option) -> None:
        self.options &= ~Option(options)

    # -- lookup -------------------------------------------------------------

    def _locate(self, key: str) -> Optional[_Cell]:
        if self.mode is Mode.OHASH:
            size = len(self._slots)
            pos = self.hash_func(key, size, self.hash_seed)
            for _ in range(size + 2):
                cell = self._slots[pos]
                if cell is not None and cell.key == key:
                    return cell
                pos = (pos + 1) % size
            return None
        if self.mode is Mode.SARRAY:
            return self._bisect(key)
        for cell in self._slots[: self.use]:
            if cell is not None and cell.key == key:
                return cell
        return None

    def _bisect(self, key: str) -> Optional[_Cell]:
        low, high = 0, self.use
        while low < high:
            mid = (low + high) // 2
            cell = self._slots[mid]
            if cell is None or key < cell.key:
                high = mid
            elif key > cell.key:
                low = mid + 1
            else:
                return cell
        return None

    def find(self, key: str) -> Any:
        """Return the value stored under ``key``, or ``None`` if absent."""
        cell = self._locate(key)
        return None if cell is None else cell.value

    def find_by_value(self, text: str) -> Optional[tuple[str, Any]]:
        """Return the first ``(key, value)`` whose formatted value equals ``text``.

        Every occupied slot is examined, whatever the mode.
        """
        if self.format_value is None:
            raise ValueError("no value formatter set")
        for cell in self._slots:
            if cell is None:
                continue
            try:
                shown = self.format_value(cell.value)
            except Exception:
                continue
            if shown == text:
                return cell.key, cell.value
        return None

    # -- mutation -----------------------------------------------------------

    def add(self, key: str, value: Any) -> None:
        """Add a new entry; raise :class:`DuplicateKeyError` if it exists."""
        self._add(key, value, swap=False)

    def add_or_swap(self, key: str, value: Any) -> None:
        """Add an entry, replacing (and purging) any existing value."""
        self._add(key, value, swap=True)

    def _add(self, key: str, value: Any, swap: bool) -> None:
        if not key:
            raise ValueError("null or empty key")
        if Option.EXPAND_ALLOW in self.options:
            if self.use >= len(self._slots) * self.usage_hiwater // 100 - 1:
                self.expand()
        if self.use + 1 >= len(self._slots):
            raise DictFullError("no more slot")
        self._insert(key, value, swap)

    def _replace(self, cell: _Cell, value: Any, swap: bool) -> None:
        if not swap:
            raise DuplicateKeyError(cell.key)
        if self.on_purge is not None:
            self.on_purge(cell.value)
            cell.value = None
        cell.value = value

    def _insert(self, key: str, value: Any, swap: bool) -> None:
        if self.mode is Mode.OHASH:
            size = len(self._slots)
            pos = self.hash_func(key, size, self.hash_seed)
            while (cell := self._slots[pos]) is not None and cell.key:
                if cell.key == key:
                    self._replace(cell, value, swap)
                    return
                pos = (pos + 1) % size
            if cell is None:
                self._slots[pos] = _Cell(key, value)
                self.use += 1
            else:
                cell.key = key
                cell.value = value
            return

        for cell in self._slots:
            if cell is not None and cell.key == key:
                self._replace(cell, value, swap)
                return
        self._slots[self.use] = _Cell(key, value)
        self.use += 1
        if self.mode is Mode.SARRAY:
            self._slots[: self.use] = sorted(self._slots[: self.use], key=_key_order)

    def delete(self, key: str) -> None:
        """Remove ``key``, leaving a tombstone; raise ``KeyError`` if absent."""
        cell = self._locate(key)
        if cell is None:
            raise KeyError(key)
        cell.key = ""
        if self.on_purge is not None:
            self.on_purge(cell.value)
            cell.value = None

    def expand(self) -> None:
        """Grow the slot table and re-insert the live entries."""
        size = len(self._slots)
        if Option.EXPAND_SQUARE in self.options:
            new_size = size * size
        elif Option.EXPAND_THREE_HALVES in self.options:
            new_size = 3 * size // 2
        else:
            new_size = size * 2
        old = self._slots
        self._slots = [None] * new_size
        self.use = 0
        for cell in old:
            if cell is not None and cell.key:
                self._insert(cell.key, cell.value, swap=False)

    def sort_by_key(self) -> None:
        """Sort the whole table by key and switch to sorted-array mode."""
        self._slots.sort(key=_key_order)
        self.mode = Mode.SARRAY

    def sort_by_value(self, key: Callable[[Any], Any]) -> None:
        """Sort the whole table by ``key(value)``; empty slots go last."""
        self._slots.sort(key=lambda cell: (1,) if cell is None else (0, key(cell.value)))


def _key_order(cell: Optional[_Cell]) -> tuple:
    return (1,) if cell is None else (0, cell.key)