"""Min-priority queue used by the shortest-path search."""

from __future__ import annotations

import heapq
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)


class MinPriorityQueue(Generic[K]):
    """Binary-heap priority queue with lazy deletion.

    The same key may be pushed several times with different priorities;
    consumers skip keys they have already finalised.  Equal priorities pop
    in ascending key order, so keys must be mutually comparable.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, K]] = []

    def push(self, key: K, priority: float) -> None:
        heapq.heappush(self._heap, (priority, key))

    def pop_min(self) -> tuple[K, float]:
        """Remove and return the ``(key, priority)`` with lowest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        priority, key = heapq.heappop(self._heap)
        return key, priority

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["MinPriorityQueue"]
