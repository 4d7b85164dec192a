"""InMemoryStationStore -- dict-based implementation of the StationStore protocol.

Public API:
    InMemoryStationStore: StationStore backed by plain dicts.
"""

from __future__ import annotations

import logging

from ..exceptions import CapacityExceededError, StationNotFoundError
from .types import Connection, Station
from .validation import check_distinct, check_price, check_weight, is_station_id

logger = logging.getLogger(__name__)


class InMemoryStationStore:
    """Dict-based StationStore.

    Stations live in ``_stations`` keyed by id; the adjacency relation is a
    dict per station mapping neighbor id to weight, written in both
    directions for every connection.  Not thread-safe: callers must not
    query while another caller mutates.

    Args:
        store_id: Human-readable identifier for this store instance.
        max_stations: Optional cap on the number of live stations.
    """

    def __init__(self, store_id: str = "memory", max_stations: int | None = None) -> None:
        self._store_id = store_id
        self._max_stations = max_stations
        self._stations: dict[int, Station] = {}
        self._adjacency: dict[int, dict[int, float]] = {}
        self._next_id = 0

    @property
    def store_id(self) -> str:
        return self._store_id

    @property
    def max_stations(self) -> int | None:
        return self._max_stations

    def __len__(self) -> int:
        return len(self._stations)

    # ── station operations ───────────────────────────────────

    def add_station(self, name: str, price: float) -> int:
        value = check_price(price)
        if self._max_stations is not None and len(self._stations) >= self._max_stations:
            raise CapacityExceededError(
                f"Store {self._store_id!r} is full ({self._max_stations} stations)"
            )

        sid = self._next_id
        self._next_id += 1
        self._stations[sid] = Station(station_id=sid, name=str(name), price=value)
        self._adjacency[sid] = {}
        logger.debug("Added station %s (%s) to %s", sid, name, self._store_id)
        return sid

    def remove_station(self, station_id: int) -> None:
        self._require(station_id)
        for neighbor_id in self._adjacency.pop(station_id):
            self._adjacency[neighbor_id].pop(station_id, None)
        del self._stations[station_id]
        logger.debug("Removed station %s from %s", station_id, self._store_id)

    def update_station(
        self,
        station_id: int,
        name: str | None = None,
        price: float | None = None,
    ) -> Station:
        current = self._require(station_id)
        new_price = current.price if price is None else check_price(price)
        new_name = current.name if name is None else str(name)
        updated = Station(station_id=station_id, name=new_name, price=new_price)
        self._stations[station_id] = updated
        return updated

    def get_station(self, station_id: int) -> Station:
        return self._require(station_id)

    def has_station(self, station_id: int) -> bool:
        return is_station_id(station_id) and station_id in self._stations

    def list_stations(self) -> list[Station]:
        return [self._stations[sid] for sid in sorted(self._stations)]

    # ── connection operations ────────────────────────────────

    def add_connection(self, station_a: int, station_b: int, weight: float) -> None:
        self._require(station_a)
        self._require(station_b)
        check_distinct(station_a, station_b)
        value = check_weight(weight)

        self._adjacency[station_a][station_b] = value
        self._adjacency[station_b][station_a] = value
        logger.debug("Connected %s <-> %s (weight=%s)", station_a, station_b, value)

    def remove_connection(self, station_a: int, station_b: int) -> None:
        self._require(station_a)
        self._require(station_b)
        self._adjacency[station_a].pop(station_b, None)
        self._adjacency[station_b].pop(station_a, None)

    def neighbors(self, station_id: int) -> list[tuple[int, float]]:
        self._require(station_id)
        return sorted(self._adjacency[station_id].items())

    def list_connections(self) -> list[Connection]:
        connections: list[Connection] = []
        for sid in sorted(self._adjacency):
            for neighbor_id, weight in sorted(self._adjacency[sid].items()):
                if sid < neighbor_id:
                    connections.append(Connection(sid, neighbor_id, weight))
        return connections

    # ── lifecycle ────────────────────────────────────────────

    def close(self) -> None:
        self._stations.clear()
        self._adjacency.clear()

    # ── helpers ──────────────────────────────────────────────

    def _require(self, station_id: int) -> Station:
        station = self._stations.get(station_id) if is_station_id(station_id) else None
        if station is None:
            raise StationNotFoundError(station_id)
        return station


__all__ = ["InMemoryStationStore"]
