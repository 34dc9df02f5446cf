import math
from collections import Counter

import numpy as np
import pytest

from frontierkit.combinatorics import combinations, iterable_cartesian_product
from frontierkit.helpers import (
    argmax,
    argmax_random_tie,
    argmin,
    argmin_random_tie,
    distance,
    distance2,
    mode,
    normalize_probability_distribution,
    removeall,
    sigmoid,
    sigmoid_derivative,
    turn_heading,
    vector_add,
)


def test_argmin_argmax_first_best():
    words = ["bb", "a", "cc", "d"]
    assert argmin(words, len) == "a"
    assert argmax(words, len) == "bb"
    with pytest.raises(ValueError):
        argmax([], len)


def test_random_tie_covers_every_tied_element():
    rng = np.random.default_rng(3)
    seq = [("a", 2), ("b", 5), ("c", 5), ("d", 1), ("e", 5)]
    picks = Counter(argmax_random_tie(seq, lambda x: x[1], rng=rng)[0] for _ in range(3000))
    assert set(picks) == {"b", "c", "e"}
    for name in "bce":
        assert abs(picks[name] / 3000 - 1 / 3) < 0.05

    lows = Counter(argmin_random_tie([3, 1, 2, 1], lambda x: x, rng=rng) for _ in range(100))
    assert set(lows) == {1}


def test_argmin_random_tie_prefers_strictly_better():
    assert argmin_random_tie([4, 2, 9], lambda x: x, rng=0) == 2


def test_normalize_probability_distribution():
    assert normalize_probability_distribution([1, 1, 2]) == [0.25, 0.25, 0.5]
    d = normalize_probability_distribution({"x": 3.0, "y": 1.0})
    assert d == {"x": 0.75, "y": 0.25}
    with pytest.raises(ValueError):
        normalize_probability_distribution([0, 0])
    with pytest.raises(ValueError):
        normalize_probability_distribution([2, -1])


def test_mode():
    assert mode([1, 2, 2, 3]) == 2
    assert mode("abcab") == "a"
    with pytest.raises(ValueError):
        mode([])


def test_numeric_helpers():
    assert sigmoid(0) == pytest.approx(0.5)
    np.testing.assert_allclose(sigmoid_derivative(np.array([0.5, 1.0])), [0.25, 0.0])
    assert distance((0, 0), (3, 4)) == pytest.approx(5.0)
    assert distance2((1, 1), (4, 5)) == pytest.approx(25.0)
    assert math.isclose(distance((1.5, 0), (1.5, 2)), 2.0)


def test_sequence_helpers():
    assert removeall("banana", "a") == "bnn"
    assert removeall([1, 2, 1, 3], 1) == [2, 3]
    assert vector_add((1, 2), (3, -1)) == (4, 1)
    assert turn_heading((1, 0), 1) == (0, 1)
    assert turn_heading((1, 0), -1) == (0, -1)
    assert turn_heading((0, -1), 1) == (1, 0)


def test_combinations():
    assert combinations([1, 2, 3], 2) == [[1, 2], [1, 3], [2, 3]]
    assert combinations((1, 2), 0) == [[]]
    assert combinations([1, 2], 3) == []
    with pytest.raises(ValueError):
        combinations([1], -1)


def test_iterable_cartesian_product():
    assert iterable_cartesian_product([[1, 2], ("a", "b")]) == [[1, "a"], [1, "b"], [2, "a"], [2, "b"]]
    assert iterable_cartesian_product([]) == [[]]
    with pytest.raises(TypeError):
        iterable_cartesian_product([[1], 5])
