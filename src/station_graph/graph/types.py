"""Data structures shared by the station stores and the path engine.

Public API:
    Station: Immutable gas station record.
    Connection: Immutable undirected road between two stations.
    PathResult: Ordered path plus its total weight.
    NearestResult: Closest reachable station, its distance and path.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """An immutable gas station.

    Attributes:
        station_id: Identifier assigned by the store; never reused.
        name: Display name.
        price: Unit price of fuel (non-negative).
    """

    station_id: int
    name: str
    price: float


@dataclass(frozen=True)
class Connection:
    """An immutable undirected connection.

    The endpoints are normalised so ``station_a < station_b``.

    Attributes:
        station_a: Lower endpoint id.
        station_b: Higher endpoint id.
        weight: Distance or cost of the road (non-negative).
    """

    station_a: int
    station_b: int
    weight: float

    @classmethod
    def between(cls, first: int, second: int, weight: float) -> Connection:
        """Build a connection with its endpoints in ascending order."""
        low, high = sorted((first, second))
        return cls(station_a=low, station_b=high, weight=weight)


@dataclass(frozen=True)
class PathResult:
    """Result of a path query.

    Attributes:
        total_weight: Sum of the edge weights along ``path``.
        path: Station ids from start to end, inclusive.
    """

    total_weight: float
    path: tuple[int, ...]


@dataclass(frozen=True)
class NearestResult:
    """Result of a nearest-station query."""

    station: Station
    distance: float
    path: tuple[int, ...] = ()


__all__ = ["Station", "Connection", "PathResult", "NearestResult"]
