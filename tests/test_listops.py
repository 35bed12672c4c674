import pytest

from tangyutil.listops import (
    ListOverflowError,
    list_add,
    list_count,
    list_find,
    list_find_pos,
    list_sort_uniq,
    list_uniq_add,
)

ITEMS = ["b1", "b2", "f3"]


@pytest.mark.parametrize("trailing", ["", ";"])
def test_count_matches_number_of_items(trailing):
    text = ";".join(ITEMS) + trailing
    assert list_count(text, ";") == len(ITEMS)


def test_count_empty_is_zero():
    assert list_count("", ";") == 0


def test_count_leading_separator_not_a_field():
    text = ";" + ";".join(ITEMS)
    assert list_count(text, ";") == len(ITEMS)


def test_count_rejects_long_separator():
    with pytest.raises(ValueError):
        list_count("a;b", ";;")


def test_find_each_item():
    text = ";".join(ITEMS) + ";"
    assert all(list_find(text, item, ";") for item in ITEMS)
    assert list_find(text, "zz", ";") is False


def test_find_stops_at_empty_field():
    assert list_find("a;;b;", "b", ";") is False
    assert list_find("a;;b;", "a", ";") is True


def test_find_pos_points_at_item():
    text = ";".join(ITEMS) + ";"
    for item in ITEMS:
        pos = list_find_pos(text, item, ";")
        assert text[pos:].startswith(item + ";")
    assert list_find_pos(text, "missing", ";") is None


def test_find_pos_first_item_at_start():
    assert list_find_pos("x;y;", "x", ";") == 0


def test_add_to_empty_list():
    assert list_add("", "b1", ";") == "b1" + ";"


def test_add_appends_item_and_separator():
    text = "a;b;"
    result = list_add(text, "c", ";")
    assert result == text + "c" + ";"
    assert list_find(result, "c", ";")


def test_add_inserts_missing_separator():
    assert list_add("a", "b", ";") == "a" + ";" + "b" + ";"


def test_add_overflow_when_full():
    with pytest.raises(ListOverflowError):
        list_add("abc;", "d", ";", limit=len("abc;"))


def test_add_overflow_when_item_does_not_fit():
    with pytest.raises(ListOverflowError):
        list_add("a;", "bcdef", ";", limit=len("a;") + len("bcdef"))


def test_uniq_add_keeps_existing():
    text = "a;b;"
    assert list_uniq_add(text, "a", ";") == text
    assert list_uniq_add(text, "c", ";") == list_add(text, "c", ";")


def test_sort_uniq_text():
    assert list_sort_uniq("c;a;b;a;", ";") == "a;b;c;"


def test_sort_uniq_numeric():
    assert list_sort_uniq("10;9;1;", ";", numeric=True) == "1;9;10;"


def test_sort_uniq_single_field_trimmed():
    assert list_sort_uniq("b1;;;", ";") == "b1"


def test_sort_uniq_is_sorted_and_unique():
    result = list_sort_uniq("z;y;z;x;y;", ";")
    fields = result.rstrip(";").split(";")
    assert fields == sorted(set(fields))
    assert list_sort_uniq(result, ";") == result