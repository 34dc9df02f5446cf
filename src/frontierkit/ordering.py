from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple, Sequence


class Entry(NamedTuple):
    priority: Any
    item: Any


class Ordering(str, Enum):
    """Ordering policy of a priority container.

    ASCENDING pops the minimum priority first, DESCENDING the maximum.
    """

    ASCENDING = "ascending"
    DESCENDING = "descending"

    def lt(self, a: Any, b: Any) -> bool:
        """True when priority `a` is ordered strictly before `b`."""
        if self is Ordering.ASCENDING:
            return a < b
        return b < a

    @classmethod
    def coerce(cls, value: "Ordering | str") -> "Ordering":
        if isinstance(value, Ordering):
            return value
        key = str(value).strip().lower()
        aliases = {
            "ascending": cls.ASCENDING,
            "asc": cls.ASCENDING,
            "min": cls.ASCENDING,
            "forward": cls.ASCENDING,
            "descending": cls.DESCENDING,
            "desc": cls.DESCENDING,
            "max": cls.DESCENDING,
            "reverse": cls.DESCENDING,
        }
        if key not in aliases:
            raise ValueError(f"Unknown ordering: {value!r}")
        return aliases[key]


def _priority(entry: Any) -> Any:
    return entry[0]


def search_first(
    entries: Sequence[Any],
    target: Any,
    lo: int = 0,
    hi: int | None = None,
    ordering: Ordering = Ordering.ASCENDING,
) -> int:
    """Smallest index in [lo, hi) whose priority is not ordered before the target's.

    Returns `hi` when every entry in the window comes before the target.
    """
    if hi is None:
        hi = len(entries)
    key = _priority(target)
    while lo < hi:
        mid = (lo + hi) // 2
        if ordering.lt(_priority(entries[mid]), key):
            lo = mid + 1
        else:
            hi = mid
    return lo


def search_last(
    entries: Sequence[Any],
    target: Any,
    lo: int = 0,
    hi: int | None = None,
    ordering: Ordering = Ordering.ASCENDING,
) -> int:
    """Largest index in [lo, hi) such that the target is not ordered before it.

    Returns `lo - 1` when the target comes before every entry in the window.
    """
    if hi is None:
        hi = len(entries)
    key = _priority(target)
    while lo < hi:
        mid = (lo + hi) // 2
        if ordering.lt(key, _priority(entries[mid])):
            hi = mid
        else:
            lo = mid + 1
    return lo - 1


def locate(entries: Sequence[Any], target: Any, ordering: Ordering = Ordering.ASCENDING) -> range:
    """Locate the target's priority in a sequence sorted under `ordering`.

    On a match the full run of equal priorities is returned as a range.
    Otherwise the result is the empty range at the insertion point, so
    `locate(...).stop` is always a valid index to insert after the run.
    """
    key = _priority(target)
    lo = -1
    hi = len(entries)
    while lo < hi - 1:
        mid = (lo + hi) // 2
        current = _priority(entries[mid])
        if ordering.lt(current, key):
            lo = mid
        elif ordering.lt(key, current):
            hi = mid
        else:
            first = search_first(entries, target, lo + 1, mid, ordering)
            last = search_last(entries, target, mid + 1, hi, ordering)
            return range(first, last + 1)
    return range(lo + 1, hi)
