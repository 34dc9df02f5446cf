from __future__ import annotations

from typing import List

import numpy as np


def resolve_rng(rng: np.random.Generator | int | None = None) -> np.random.Generator:
    """Normalize an injectable random source.

    - None: fresh OS-seeded generator
    - int: seeded generator (reproducible)
    - Generator: used as is
    """
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    raise TypeError(f"Unsupported random source: {type(rng).__name__}")


class RandomizationEngine:
    """Deterministic source of seeds and generators for reproducible runs.

    It provides:
    - child seed generation
    - independent generators spawned from one master seed
    """

    def __init__(self, master_seed: int = 42) -> None:
        self.master_seed = master_seed
        self._seq = np.random.SeedSequence(master_seed)
        self._rng = np.random.default_rng(self._seq)

    def seeds(self, n: int) -> List[int]:
        if n < 0:
            raise ValueError("n must be non-negative")
        return [int(s) for s in self._rng.integers(1, 2**31 - 1, size=n)]

    def generators(self, n: int) -> List[np.random.Generator]:
        """Independent generators; repeated calls keep spawning new streams."""
        if n < 0:
            raise ValueError("n must be non-negative")
        return [np.random.default_rng(child) for child in self._seq.spawn(n)]

    def generator(self) -> np.random.Generator:
        return self.generators(1)[0]
