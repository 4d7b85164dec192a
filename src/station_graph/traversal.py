"""Hop-based traversals over a StationStore.

Every function takes the store as its first argument and only reads it.
Neighbor order is whatever ``store.neighbors`` yields (ascending id for
the bundled backends).

Public API:
    breadth_first: Lazy BFS visit order from a start station.
    depth_first: Lazy DFS visit order from a start station.
    bounded_cheapest: Cheapest station within a hop budget.
    fewest_hops_path: Path with the fewest roads between two stations.
    cheapest_station: Cheapest station in the whole store.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator

from .exceptions import NoneReachableError, UnreachableError
from .graph.protocol import StationStore
from .graph.types import PathResult, Station


def breadth_first(store: StationStore, start: int) -> Iterator[int]:
    """Yield station ids reachable from *start* in breadth-first order.

    Raises:
        StationNotFoundError: Immediately, if *start* is not in the store.
    """
    store.get_station(start)
    return _breadth_first(store, start)


def _breadth_first(store: StationStore, start: int) -> Iterator[int]:
    discovered: set[int] = {start}
    queue: deque[int] = deque([start])

    while queue:
        current = queue.popleft()
        yield current
        for neighbor_id, _ in store.neighbors(current):
            if neighbor_id not in discovered:
                discovered.add(neighbor_id)
                queue.append(neighbor_id)


def depth_first(store: StationStore, start: int) -> Iterator[int]:
    """Yield station ids reachable from *start* in depth-first order.

    Uses an explicit stack; a station is marked discovered when pushed,
    so each one is yielded exactly once.

    Raises:
        StationNotFoundError: Immediately, if *start* is not in the store.
    """
    store.get_station(start)
    return _depth_first(store, start)


def _depth_first(store: StationStore, start: int) -> Iterator[int]:
    discovered: set[int] = {start}
    stack: list[int] = [start]

    while stack:
        current = stack.pop()
        yield current
        for neighbor_id, _ in store.neighbors(current):
            if neighbor_id not in discovered:
                discovered.add(neighbor_id)
                stack.append(neighbor_id)


def bounded_cheapest(store: StationStore, start: int, max_hops: int) -> Station:
    """Return the cheapest station at most *max_hops* roads away from *start*.

    The start station itself takes part in the comparison.  A station's hop
    count is that of the station which first discovered it, plus one.  Ties
    on price go to the station discovered first.

    Raises:
        StationNotFoundError: If *start* is not in the store.
        ValueError: If *max_hops* is negative.
    """
    if max_hops < 0:
        raise ValueError(f"max_hops must be non-negative, got {max_hops}")

    cheapest = store.get_station(start)
    hops: dict[int, int] = {start: 0}
    queue: deque[int] = deque([start])

    while queue:
        current = queue.popleft()
        station = store.get_station(current)
        if station.price < cheapest.price:
            cheapest = station

        if hops[current] >= max_hops:
            continue

        for neighbor_id, _ in store.neighbors(current):
            if neighbor_id not in hops:
                hops[neighbor_id] = hops[current] + 1
                queue.append(neighbor_id)

    return cheapest


def fewest_hops_path(store: StationStore, start: int, end: int) -> PathResult:
    """Find the path from *start* to *end* that uses the fewest roads.

    The returned weight is the sum of the road weights along that path,
    which need not be the minimum possible weight.

    Raises:
        StationNotFoundError: If either station is not in the store.
        UnreachableError: If no path exists.
    """
    store.get_station(start)
    store.get_station(end)
    if start == end:
        return PathResult(total_weight=0.0, path=(start,))

    # parent -> (predecessor, weight of the road used to get here)
    parent: dict[int, tuple[int, float] | None] = {start: None}
    queue: deque[int] = deque([start])

    while queue and end not in parent:
        current = queue.popleft()
        for neighbor_id, weight in store.neighbors(current):
            if neighbor_id not in parent:
                parent[neighbor_id] = (current, weight)
                queue.append(neighbor_id)

    if end not in parent:
        raise UnreachableError(f"No path from station {start} to station {end}")

    path = [end]
    total = 0.0
    step = parent[end]
    while step is not None:
        previous, weight = step
        total += weight
        path.append(previous)
        step = parent[previous]
    path.reverse()
    return PathResult(total_weight=total, path=tuple(path))


def cheapest_station(store: StationStore) -> Station:
    """Return the cheapest station in the store, lowest id on ties.

    Raises:
        NoneReachableError: If the store has no stations.
    """
    stations = store.list_stations()
    if not stations:
        raise NoneReachableError("The store has no stations")
    return min(stations, key=lambda s: (s.price, s.station_id))


__all__ = [
    "breadth_first",
    "depth_first",
    "bounded_cheapest",
    "fewest_hops_path",
    "cheapest_station",
]
