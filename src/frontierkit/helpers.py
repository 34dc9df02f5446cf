from __future__ import annotations

import math
from collections import Counter
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Sequence, Tuple, TypeVar

import numpy as np

from .randomization import resolve_rng

T = TypeVar("T")

ORIENTATIONS: List[Tuple[int, int]] = [(1, 0), (0, 1), (-1, 0), (0, -1)]


def _non_empty(seq: Iterable[T], name: str) -> List[T]:
    items = list(seq)
    if not items:
        raise ValueError(f"{name}() arg is an empty sequence")
    return items


def argmin(seq: Iterable[T], fn: Callable[[T], Any]) -> T:
    """Element of `seq` with the lowest fn() value; the first one wins ties."""
    items = _non_empty(seq, "argmin")
    best = items[0]
    best_score = fn(best)
    for element in items[1:]:
        score = fn(element)
        if score < best_score:
            best, best_score = element, score
    return best


def argmax(seq: Iterable[T], fn: Callable[[T], Any]) -> T:
    """Element of `seq` with the highest fn() value; the first one wins ties."""
    items = _non_empty(seq, "argmax")
    best = items[0]
    best_score = fn(best)
    for element in items[1:]:
        score = fn(element)
        if score > best_score:
            best, best_score = element, score
    return best


def _random_tie(items: List[T], fn: Callable[[T], Any], better: Callable[[Any, Any], bool], rng: Any) -> T:
    # reservoir sampling over the tied best elements
    gen = resolve_rng(rng)
    best = items[0]
    best_score = fn(best)
    ties = 1
    for element in items[1:]:
        score = fn(element)
        if better(score, best_score):
            best, best_score, ties = element, score, 1
        elif score == best_score:
            ties += 1
            if gen.integers(ties) == 0:
                best = element
    return best


def argmin_random_tie(seq: Iterable[T], fn: Callable[[T], Any], rng: np.random.Generator | int | None = None) -> T:
    """argmin() breaking ties uniformly at random."""
    return _random_tie(_non_empty(seq, "argmin_random_tie"), fn, lambda a, b: a < b, rng)


def argmax_random_tie(seq: Iterable[T], fn: Callable[[T], Any], rng: np.random.Generator | int | None = None) -> T:
    """argmax() breaking ties uniformly at random."""
    return _random_tie(_non_empty(seq, "argmax_random_tie"), fn, lambda a, b: a > b, rng)


def normalize_probability_distribution(dist: Mapping[Hashable, float] | Sequence[float]) -> Dict[Hashable, float] | List[float]:
    """Scale values so they sum to 1. Mappings keep their keys."""
    if isinstance(dist, Mapping):
        keys = list(dist.keys())
        values = np.asarray([float(dist[k]) for k in keys], dtype=float)
    else:
        keys = None
        values = np.asarray(list(dist), dtype=float)
    total = float(values.sum())
    if values.size == 0 or total == 0.0 or not np.isfinite(total):
        raise ValueError("cannot normalize a distribution with zero or non-finite total")
    probs = values / total
    bad = (probs < 0.0) | (probs > 1.0)
    if bad.any():
        raise ValueError(f"{float(probs[np.argmax(bad)])} is not a valid probability")
    if keys is None:
        return probs.tolist()
    return {k: float(p) for k, p in zip(keys, probs)}


def mode(values: Iterable[T]) -> T:
    """Most common value; ties go to the value seen first."""
    counts = Counter(values)
    if not counts:
        raise ValueError("There is no mode for an empty sequence")
    return counts.most_common(1)[0][0]


def sigmoid(x: Any) -> Any:
    return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=float)))


def sigmoid_derivative(value: Any) -> Any:
    """Derivative of the sigmoid expressed through its output value."""
    v = np.asarray(value, dtype=float)
    return v * (1.0 - v)


def distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return math.hypot(float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def distance2(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Squared Euclidean distance."""
    return (float(a[0]) - float(b[0])) ** 2 + (float(a[1]) - float(b[1])) ** 2


def removeall(seq: str | Sequence[T], item: Any) -> str | List[T]:
    """Copy of `seq` without any occurrence of `item`."""
    if isinstance(seq, str):
        return seq.replace(item, "")
    return [x for x in seq if x != item]


def vector_add(a: Tuple[float, ...], b: Tuple[float, ...]) -> Tuple[float, ...]:
    return tuple(x + y for x, y in zip(a, b))


def turn_heading(heading: Tuple[int, int], inc: int) -> Tuple[int, int]:
    """Rotate a unit heading by `inc` quarter turns through ORIENTATIONS."""
    return ORIENTATIONS[(ORIENTATIONS.index(heading) + inc) % len(ORIENTATIONS)]
