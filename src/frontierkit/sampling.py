from __future__ import annotations

from typing import Any, Dict, Generic, Iterable, List, Sequence, Tuple, TypeVar

import numpy as np
from scipy.stats import chisquare

from .errors import DegenerateDistributionError, InvalidWeightError
from .randomization import resolve_rng

T = TypeVar("T")


def _validate_weights(weights: np.ndarray) -> np.ndarray:
    """Checked weights scaled by their maximum, so large finite weights cannot overflow a sum."""
    if weights.ndim != 1:
        raise ValueError("weights must be one-dimensional")
    if weights.size == 0:
        raise DegenerateDistributionError("cannot sample from an empty sequence")
    bad = ~np.isfinite(weights)
    if bad.any():
        raise InvalidWeightError(f"Non-finite weight at index {int(np.argmax(bad))}")
    neg = weights < 0
    if neg.any():
        i = int(np.argmax(neg))
        raise InvalidWeightError(f"Negative weight {float(weights[i])} at index {i}")
    peak = float(weights.max())
    if peak <= 0.0:
        raise DegenerateDistributionError("all weights are zero")
    return weights / peak


class WeightedSampler(Generic[T]):
    """Draws items with probability proportional to their weights.

    The cumulative-weight table is built once; later changes to the source
    sequence or weights are not seen (build a new sampler instead).
    """

    def __init__(self, items: Sequence[T], weights: Sequence[float], rng: np.random.Generator | int | None = None) -> None:
        self.items: List[T] = list(items)
        w = np.asarray(list(weights), dtype=float)
        if len(self.items) != w.shape[0]:
            raise ValueError(f"items and weights differ in length: {len(self.items)} != {w.shape[0]}")
        scaled = _validate_weights(w)
        self.weights = w
        self.shares = scaled
        self.totals = np.cumsum(scaled)
        self._last_positive = int(np.flatnonzero(scaled)[-1])
        self.rng = resolve_rng(rng)

    @property
    def total(self) -> float:
        """Sum of the weights in the units of the cumulative table (max weight == 1)."""
        return float(self.totals[-1])

    def draw_index(self) -> int:
        r = self.rng.random() * self.totals[-1]
        i = int(np.searchsorted(self.totals, r, side="right"))
        # float rounding can push r onto the last boundary
        return min(i, self._last_positive)

    def draw(self) -> T:
        return self.items[self.draw_index()]

    __call__ = draw

    def draw_with_replacement(self, n: int) -> List[T]:
        if n < 0:
            raise ValueError("n must be non-negative")
        return [self.draw() for _ in range(n)]

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"WeightedSampler(n={len(self.items)}, total={self.total:g})"


def weighted_sampler(seq: Sequence[T], weights: Sequence[float], rng: np.random.Generator | int | None = None) -> WeightedSampler[T]:
    """Sampler choosing from `seq` by the matching weights (strings sample per character)."""
    return WeightedSampler(seq, weights, rng=rng)


def weighted_sample_with_replacement(
    seq: Sequence[T],
    weights: Sequence[float],
    n: int,
    rng: np.random.Generator | int | None = None,
) -> List[T]:
    """Return `n` independent weighted draws from `seq`."""
    return weighted_sampler(seq, weights, rng=rng).draw_with_replacement(n)


def weighted_choice(choices: Iterable[Tuple[T, float]], rng: np.random.Generator | int | None = None) -> Tuple[T, float]:
    """Pick one (item, weight) pair by a single accumulate-and-compare scan."""
    pairs = list(choices)
    w = np.asarray([float(weight) for _, weight in pairs], dtype=float)
    scaled = _validate_weights(w)

    r = resolve_rng(rng).random() * float(scaled.sum())
    upto = 0.0
    last_positive = None
    for (item, weight), share in zip(pairs, scaled):
        if share > 0:
            last_positive = (item, weight)
            if r < upto + share:
                return (item, weight)
        upto += share
    # r fell past the accumulated total through rounding
    return last_positive


def audit_sampler_frequencies(
    sampler: WeightedSampler[Any],
    *,
    n: int = 3000,
    alpha: float = 0.001,
) -> Dict[str, Any]:
    """Compare empirical draw frequencies with the sampler's weights.

    Uses a chi-square goodness-of-fit test over positive-weight candidates.
    Any draw of a zero-weight candidate marks the sampler inconsistent.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    k = len(sampler)
    counts = np.zeros(k, dtype=int)
    for _ in range(n):
        counts[sampler.draw_index()] += 1

    expected_freq = sampler.shares / float(sampler.shares.sum())
    observed_freq = counts / float(n)
    positive = sampler.shares > 0
    zero_weight_hits = int(counts[~positive].sum())

    if int(positive.sum()) > 1 and zero_weight_hits == 0:
        res = chisquare(counts[positive], f_exp=expected_freq[positive] * n)
        chi2 = float(res.statistic)
        p_value = float(res.pvalue)
    else:
        chi2 = 0.0
        p_value = 1.0 if zero_weight_hits == 0 else 0.0

    return {
        "n": int(n),
        "counts": counts.tolist(),
        "observed_freq": observed_freq.tolist(),
        "expected_freq": expected_freq.tolist(),
        "max_abs_freq_error": float(np.max(np.abs(observed_freq - expected_freq))),
        "zero_weight_hits": zero_weight_hits,
        "chi2": chi2,
        "p_value": p_value,
        "consistent": bool(p_value >= alpha and zero_weight_hits == 0),
    }
