from __future__ import annotations

import itertools
from collections.abc import Iterable as IterableABC
from typing import Any, Iterable, List, Sequence


def combinations(items: Iterable[Any], k: int) -> List[List[Any]]:
    """All length-k subsequences of `items`, in lexicographic index order.

    k == 0 yields a single empty combination; k larger than the input
    yields none.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    pool = list(items)
    return [list(c) for c in itertools.combinations(pool, k)]


def iterable_cartesian_product(iterables: Sequence[Iterable[Any]]) -> List[List[Any]]:
    """Cartesian product of the given collections as a list of lists."""
    pools = []
    for i, pool in enumerate(iterables):
        if isinstance(pool, (str, bytes)) or not isinstance(pool, IterableABC):
            raise TypeError(f"iterables[{i}] is not an iterable collection")
        pools.append(list(pool))
    return [list(p) for p in itertools.product(*pools)]
