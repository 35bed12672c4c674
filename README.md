# tangyutil

Small building blocks for laying out diagrams: a string-keyed slot
dictionary, word splitting, separator-delimited lists, link-map expansion
and Bézier curve control points.

## Modules

- `tangyutil.vdict`: `VDict`, a dictionary of string keys kept in a table of
  slots. Its `Mode` chooses an open hash with linear probing (`Mode.OHASH`,
  the default), a sorted array (`Mode.SARRAY`) or a plain array
  (`Mode.NARRAY`). With `Option.EXPAND_ALLOW` set (the default) the table
  grows when its fill reaches the high-water percentage; `EXPAND_SQUARE` and
  `EXPAND_THREE_HALVES` change how much it grows, otherwise it doubles.
  Without room left, `add` raises `DictFullError`. Adding a key that is
  already present raises `DuplicateKeyError`; `add_or_swap` replaces the value
  instead, calling `on_purge` on the old one if set. `delete` leaves a
  tombstone and raises `KeyError` for a missing key. `find`, `find_by_value`,
  `sort_by_key` and `sort_by_value` are also available. `default_hash` is the
  hash used unless another `hash_func` is given.
- `tangyutil.vdict_show`: `show_head`, `show`, `print_table` and
  `print_table_tex` write a `VDict` as text (to standard output unless a file
  is given). `Option.PRINT_ADDR` and `Option.PRINT_HASH` add columns to `show`.
- `tangyutil.word`: `skip_white`, `chomp`, `strip_last_char`, `draw_word`,
  `draw_quoted` and `draw_whitespace_word`. Each draw function cuts the next
  word off a string and returns `(word, rest)`.
- `tangyutil.listops`: lists held in one string with a separator
  (`"a;b;c;"`): `list_count`, `list_find`, `list_find_pos`, `list_add`,
  `list_uniq_add` and `list_sort_uniq`. Given a `limit`, `list_add` raises
  `ListOverflowError` when the item would not fit.
- `tangyutil.linkmap`: expands link maps between a "back" group (`b1`,
  `b2`, ...) and a "fore" group (`f1`, `f2`, ...) of objects: `parse_range`,
  `expand_full`, `expand_pattern` and `expand_sd_patterns`. Maps look like
  `"b1:f1,f2,;b2:f3,;"`. `LinkEnd` holds an object with counters for the
  links leaving and arriving at it.
- `tangyutil.curve`: `solve_curve_points` and `solve_self_curve_points`
  compute the four control points of a bulging Bézier curve and return
  `CurvePoints`. Input angles are in degrees, returned angles in radians.

## Example

```python
from tangyutil.vdict import VDict
from tangyutil.word import draw_word
from tangyutil.linkmap import expand_full
from tangyutil.curve import solve_curve_points

d = VDict()
d.add("b1", "first")
d.add_or_swap("b1", "second")
print(d["b1"])                          # second

word, rest = draw_word("b1;b2;", ";")
print(word, rest)                       # b1 b2;

print(expand_full("b1;b2;", "f1;"))     # b1:f1,;b2:f1,;

pts = solve_curve_points((0, 0), (100, 0), 30)
print(pts.p1, pts.p4)                   # (0, 0) (100, 0)
```

## What it does not do

The package works out names, maps and coordinates only. It does not parse
diagram descriptions, draw anything or write PostScript or image files, and
it has no command-line program.

## Tests

```
pip install -e .[test]
pytest
```