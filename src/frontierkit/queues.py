from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from .errors import EmptyContainerError
from .ordering import Entry, Ordering, locate


class Queue(ABC):
    """Common interface of Stack, FIFOQueue and PriorityQueue."""

    @abstractmethod
    def pop(self) -> Any:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        ...

    def __bool__(self) -> bool:
        return len(self) > 0

    def is_empty(self) -> bool:
        return len(self) == 0

    @staticmethod
    def _source_items(source: "Queue | Iterable[Any]") -> List[Any]:
        """Items held by an extend() source.

        A PriorityQueue yields the item of each entry, never the
        (priority, item) pair. The list is a snapshot so a container can
        be extended with itself.
        """
        if isinstance(source, PriorityQueue):
            return [entry.item for entry in source.entries]
        return list(source)


class Stack(Queue):
    """Last in, first out."""

    def __init__(self) -> None:
        self._items: List[Any] = []

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise EmptyContainerError("pop from an empty Stack")
        return self._items.pop()

    def extend(self, source: Queue | Iterable[Any]) -> None:
        for item in self._source_items(source):
            self.push(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


class FIFOQueue(Queue):
    """First in, first out."""

    def __init__(self) -> None:
        self._items: deque = deque()

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise EmptyContainerError("pop from an empty FIFOQueue")
        return self._items.popleft()

    def extend(self, source: Queue | Iterable[Any]) -> None:
        for item in self._source_items(source):
            self.push(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FIFOQueue({list(self._items)!r})"


def _score(scorer: Callable[..., Any], item: Any, problem: Any) -> Any:
    # MemoizedFunction is callable, so the cache key is (item,) or (problem, item)
    if problem is None:
        return scorer(item)
    return scorer(problem, item)


class PriorityQueue(Queue):
    """Entries kept sorted by priority, stable among equal priorities.

    ascending: pop() returns the item with the minimum priority
    descending: pop() returns the item with the maximum priority

    Equal priorities pop in insertion order under both policies.
    """

    def __init__(self, order: Ordering | str = Ordering.ASCENDING) -> None:
        self.order = Ordering.coerce(order)
        self._entries: List[Entry] = []

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    def push(self, priority: Any, item: Any) -> None:
        entry = Entry(priority, item)
        bounds = locate(self._entries, entry, self.order)
        self._entries.insert(bounds.stop, entry)

    def push_scored(self, item: Any, scorer: Callable[..., Any], problem: Any = None) -> None:
        """Push `item` with priority `scorer(item)`, or `scorer(problem, item)` given a context."""
        self.push(_score(scorer, item, problem), item)

    def pop(self) -> Any:
        if not self._entries:
            raise EmptyContainerError("pop from an empty PriorityQueue")
        return self._entries.pop(0).item

    def peek(self) -> Entry:
        if not self._entries:
            raise EmptyContainerError("peek into an empty PriorityQueue")
        return self._entries[0]

    def remove(self, item: Any) -> None:
        """Delete the first entry holding `item`; a missing item is ignored."""
        for i, entry in enumerate(self._entries):
            if entry.item == item:
                del self._entries[i]
                return

    def extend(
        self,
        source: Queue | Iterable[Any],
        scorer: Optional[Callable[..., Any]] = None,
        problem: Any = None,
    ) -> None:
        """Push every item of `source`.

        With a scorer every priority is recomputed. Without one, only a
        PriorityQueue source is accepted and its priorities are reused.
        """
        if scorer is None:
            if not isinstance(source, PriorityQueue):
                raise ValueError("extend() from a non-priority source needs a scorer")
            for entry in source.entries:
                self.push(entry.priority, entry.item)
            return
        for item in self._source_items(source):
            self.push_scored(item, scorer, problem)

    def items(self) -> List[Any]:
        return [entry.item for entry in self._entries]

    def __contains__(self, item: Any) -> bool:
        return any(entry.item == item for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"PriorityQueue(order={self.order.value!r}, entries={self._entries!r})"
