"""Weighted shortest-path queries (Dijkstra) over a StationStore.

Ties between equal tentative distances are broken by smallest station id.

Public API:
    dijkstra: Cheapest path between two stations.
    shortest_distances: Distance from one station to every reachable one.
    nearest_station: Closest reachable station other than the source.
"""

from __future__ import annotations

from .exceptions import NoneReachableError, UnreachableError
from .graph.protocol import StationStore
from .graph.types import NearestResult, PathResult
from .priority_queue import MinPriorityQueue


def _relax_from(
    store: StationStore,
    start: int,
    target: int | None = None,
) -> tuple[dict[int, float], dict[int, int], list[int]]:
    """Run the Dijkstra relaxation loop from *start*.

    Stops early once *target* is finalised, or exhausts the frontier when
    *target* is None.

    Returns:
        Tuple of (distances, predecessors, finalisation order).  Stations
        missing from ``distances`` were not reached.
    """
    distances: dict[int, float] = {start: 0.0}
    predecessors: dict[int, int] = {}
    visited: set[int] = set()
    order: list[int] = []

    queue: MinPriorityQueue[int] = MinPriorityQueue()
    queue.push(start, 0.0)

    while queue:
        current, distance = queue.pop_min()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        if current == target:
            break

        for neighbor_id, weight in store.neighbors(current):
            if neighbor_id in visited:
                continue
            candidate = distance + weight
            if neighbor_id not in distances or candidate < distances[neighbor_id]:
                distances[neighbor_id] = candidate
                predecessors[neighbor_id] = current
                queue.push(neighbor_id, candidate)

    return distances, predecessors, order


def _build_path(predecessors: dict[int, int], start: int, end: int) -> tuple[int, ...]:
    path = [end]
    while path[-1] != start:
        path.append(predecessors[path[-1]])
    path.reverse()
    return tuple(path)


def dijkstra(store: StationStore, start: int, end: int) -> PathResult:
    """Find the minimum-weight path from *start* to *end*.

    Raises:
        StationNotFoundError: If either station is not in the store.
        UnreachableError: If *end* cannot be reached from *start*.
    """
    store.get_station(start)
    store.get_station(end)
    if start == end:
        return PathResult(total_weight=0.0, path=(start,))

    distances, predecessors, _ = _relax_from(store, start, target=end)
    if end not in distances:
        raise UnreachableError(f"No path from station {start} to station {end}")

    return PathResult(
        total_weight=distances[end],
        path=_build_path(predecessors, start, end),
    )


def shortest_distances(store: StationStore, start: int) -> dict[int, float]:
    """Return the shortest distance from *start* to every reachable station.

    The start station maps to 0.0; unreachable stations are absent.

    Raises:
        StationNotFoundError: If *start* is not in the store.
    """
    store.get_station(start)
    distances, _, _ = _relax_from(store, start)
    return distances


def nearest_station(store: StationStore, start: int) -> NearestResult:
    """Return the closest station to *start* by total road weight.

    Raises:
        StationNotFoundError: If *start* is not in the store.
        NoneReachableError: If no other station can be reached.
    """
    store.get_station(start)
    distances, predecessors, order = _relax_from(store, start)

    # order[0] is start; the next finalised station is the nearest.
    if len(order) < 2:
        raise NoneReachableError(f"No station reachable from station {start}")

    nearest_id = order[1]
    return NearestResult(
        station=store.get_station(nearest_id),
        distance=distances[nearest_id],
        path=_build_path(predecessors, start, nearest_id),
    )


__all__ = ["dijkstra", "shortest_distances", "nearest_station"]
