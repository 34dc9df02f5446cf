import pytest

from frontierkit.ordering import Entry, Ordering, locate, search_first, search_last


def _entries(priorities):
    return [Entry(p, f"item{i}") for i, p in enumerate(priorities)]


def test_locate_on_empty_sequence_is_insertion_point_zero():
    for p in (-5, 0, 3.5):
        assert locate([], Entry(p, "x")) == range(0, 0)
        assert locate([], Entry(p, "x"), Ordering.DESCENDING) == range(0, 0)


def test_locate_returns_full_equal_run():
    v = _entries([1, 3, 5, 5, 5, 8])
    assert locate(v, Entry(5, "x")) == range(2, 5)
    assert locate(v, Entry(1, "x")) == range(0, 1)
    assert locate(v, Entry(8, "x")) == range(5, 6)


def test_locate_missing_priority_gives_empty_range_at_insertion_point():
    v = _entries([1, 3, 5, 8])
    assert locate(v, Entry(0, "x")) == range(0, 0)
    assert locate(v, Entry(4, "x")) == range(2, 2)
    assert locate(v, Entry(9, "x")) == range(4, 4)


def test_locate_descending():
    v = _entries([9, 7, 7, 2])
    assert locate(v, Entry(7, "x"), Ordering.DESCENDING) == range(1, 3)
    assert locate(v, Entry(8, "x"), Ordering.DESCENDING) == range(1, 1)
    assert locate(v, Entry(1, "x"), Ordering.DESCENDING) == range(4, 4)


def test_search_first_and_last_bounds():
    v = _entries([1, 2, 2, 2, 4])
    assert search_first(v, Entry(2, None)) == 1
    assert search_last(v, Entry(2, None)) == 3
    assert search_first(v, Entry(5, None)) == 5
    assert search_last(v, Entry(0, None)) == -1
    # restricted window
    assert search_first(v, Entry(2, None), 2, 5) == 2
    assert search_last(v, Entry(2, None), 0, 2) == 1


def test_ordering_coerce():
    assert Ordering.coerce("ascending") is Ordering.ASCENDING
    assert Ordering.coerce("MAX") is Ordering.DESCENDING
    assert Ordering.coerce(Ordering.DESCENDING) is Ordering.DESCENDING
    with pytest.raises(ValueError):
        Ordering.coerce("sideways")
    assert Ordering.ASCENDING.lt(1, 2)
    assert Ordering.DESCENDING.lt(2, 1)
