from types import SimpleNamespace

import pytest

from tangyutil.linkmap import (
    LinkEnd,
    expand_full,
    expand_pattern,
    expand_sd_patterns,
    parse_range,
)
from tangyutil.vdict import VDict


def _dict(*keys):
    d = VDict()
    for key in keys:
        d.add(key, LinkEnd(body=SimpleNamespace(oid=len(d) + 1)))
    return d


def test_link_end_defaults_and_describe():
    end = LinkEnd(body=SimpleNamespace(oid=7))
    assert (end.si, end.di, end.sn, end.dn) == (-1, -1, 0, 0)
    assert end.describe() == "  7  -1/0    -1/0  "


def test_describe_without_body_raises():
    with pytest.raises(ValueError):
        LinkEnd().describe()


def test_parse_range_single():
    assert parse_range("3") == (3, 3)


def test_parse_range_pair():
    assert parse_range("2-5") == (2, 5)


def test_parse_range_missing_start():
    assert parse_range("-4") == (0, 4)


def test_parse_range_bad_char():
    with pytest.raises(ValueError):
        parse_range("x")


def test_expand_full_cross_product():
    assert expand_full("b1;b2;", "f1;f2;") == "b1:f1,f2,;b2:f1,f2,;"


def test_expand_full_empty_back():
    assert expand_full("", "f1;") == ""


def test_expand_pattern_range_and_list():
    back, fore = _dict("b1"), _dict("f1")
    assert expand_pattern(back, fore, "b1-3") == "b1;b2;b3;"
    assert expand_pattern(back, fore, "f2,5") == "f2;f5;"


def test_expand_pattern_star_sorts_keys():
    back = _dict("b3", "b1", "b2")
    fore = _dict("f1")
    assert expand_pattern(back, fore, "b*") == "b1;b2;b3;"


def test_expand_pattern_star_on_fore():
    back = _dict("b1")
    fore = _dict("f2", "f1")
    result = expand_pattern(back, fore, "f*")
    assert result.split(";")[:-1] == sorted(fore)


def test_expand_pattern_without_letter():
    with pytest.raises(ValueError):
        expand_pattern(_dict(), _dict(), "12")


def test_expand_sd_patterns_builds_map():
    back, fore = _dict("b1", "b2"), _dict("f1")
    result = expand_sd_patterns(back, fore, "b1-2:f1")
    assert result == expand_full("b1;b2;", "f1;")


def test_expand_sd_patterns_passes_styles():
    back, fore = _dict("b1"), _dict("f1")
    result = expand_sd_patterns(back, fore, "curve;b1:f1;", styles={"curve"})
    assert result.startswith("curve;")
    assert result[len("curve;"):] == expand_full("b1;", "f1;")