from __future__ import annotations

import functools
from typing import Any, Callable, Dict, Tuple


class MemoizedFunction:
    """Wraps a pure function with a table of previously computed results.

    The table is keyed by the positional argument tuple and only grows.
    Not thread-safe: share across threads only behind external locking.
    """

    def __init__(self, f: Callable[..., Any]) -> None:
        if not callable(f):
            raise TypeError(f"Expected a callable, got {type(f).__name__}")
        functools.update_wrapper(self, f)
        self.f = f
        self.values: Dict[Tuple[Any, ...], Any] = {}

    def evaluate(self, *args: Any) -> Any:
        if args in self.values:
            return self.values[args]
        result = self.f(*args)
        self.values[args] = result
        return result

    __call__ = evaluate

    def is_cached(self, *args: Any) -> bool:
        return args in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        name = getattr(self.f, "__name__", repr(self.f))
        return f"MemoizedFunction({name}, cached={len(self.values)})"


def memoize(f: Callable[..., Any]) -> MemoizedFunction:
    """Decorator form of MemoizedFunction."""
    return MemoizedFunction(f)
