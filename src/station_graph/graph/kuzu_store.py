"""KuzuStationStore -- Kuzu-backed implementation of the StationStore protocol.

Stations are rows of a ``Station`` node table and roads are rows of a
``ROAD`` rel table.  Each road is stored once (lower id to higher id)
and read undirected, so both endpoints see it as a neighbor.  Writes to
an existing road match it directed on the normalised (low, high) pair.

Public API:
    KuzuStationStore: Concrete StationStore implementation backed by Kuzu.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any

import kuzu

from ..exceptions import CapacityExceededError, StationNotFoundError
from .types import Connection, Station
from .validation import check_distinct, check_price, check_weight, is_station_id

logger = logging.getLogger(__name__)

_IN_MEMORY = ":memory:"
_SEQUENCE_NAME = "station"


class KuzuStationStore:
    """Kuzu graph database implementation of the StationStore protocol.

    The schema is created on construction.  The next station id is kept
    in an ``IdSequence`` node so ids stay unique when an on-disk database
    is reopened.  All Cypher queries use parameterised bindings.

    Args:
        db_path: Filesystem path for the Kuzu database directory, or None
            for an in-memory database.
        store_id: Optional human-readable identifier; auto-generated if None.
        max_stations: Optional cap on the number of live stations.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(
        self,
        db_path: Path | str | None = None,
        store_id: str | None = None,
        max_stations: int | None = None,
    ) -> None:
        self._db_path = Path(db_path) if db_path is not None else None
        self._store_id = store_id or f"kuzu-{uuid.uuid4().hex[:8]}"
        self._max_stations = max_stations
        self._db = kuzu.Database(str(self._db_path) if self._db_path else _IN_MEMORY)
        self._conn = kuzu.Connection(self._db)

        self._initialize_schema()
        self._next_id = self._load_next_id()

    @property
    def store_id(self) -> str:
        return self._store_id

    @property
    def max_stations(self) -> int | None:
        return self._max_stations

    def close(self) -> None:
        """Release Kuzu resources."""
        if self._conn is not None:
            self._conn.close()
        if self._db is not None:
            self._db.close()
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    def __len__(self) -> int:
        rows = self._rows("MATCH (s:Station) RETURN count(s)")
        return int(rows[0][0]) if rows else 0

    # ── schema management ─────────────────────────────────────

    def _initialize_schema(self) -> None:
        self._conn.execute(
            "CREATE NODE TABLE IF NOT EXISTS Station("
            "station_id INT64, name STRING, price DOUBLE, PRIMARY KEY(station_id))"
        )
        self._conn.execute(
            "CREATE REL TABLE IF NOT EXISTS ROAD(FROM Station TO Station, weight DOUBLE)"
        )
        self._conn.execute(
            "CREATE NODE TABLE IF NOT EXISTS IdSequence("
            "name STRING, next_id INT64, PRIMARY KEY(name))"
        )
        logger.debug("Kuzu schema ready for %s (%s)", self._store_id, self._db_path or _IN_MEMORY)

    def _load_next_id(self) -> int:
        rows = self._rows(
            "MATCH (q:IdSequence) WHERE q.name = $name RETURN q.next_id",
            {"name": _SEQUENCE_NAME},
        )
        if rows:
            return int(rows[0][0])

        self._conn.execute(
            "CREATE (:IdSequence {name: $name, next_id: 0})",
            {"name": _SEQUENCE_NAME},
        )
        return 0

    # ── station operations ────────────────────────────────────

    def add_station(self, name: str, price: float) -> int:
        value = check_price(price)
        if self._max_stations is not None and len(self) >= self._max_stations:
            raise CapacityExceededError(
                f"Store {self._store_id!r} is full ({self._max_stations} stations)"
            )

        sid = self._next_id
        self._conn.execute("BEGIN TRANSACTION")
        try:
            self._conn.execute(
                "MATCH (q:IdSequence) WHERE q.name = $name SET q.next_id = $next",
                {"name": _SEQUENCE_NAME, "next": sid + 1},
            )
            self._conn.execute(
                "CREATE (:Station {station_id: $sid, name: $name, price: $price})",
                {"sid": sid, "name": str(name), "price": value},
            )
        except Exception:
            self._rollback()
            raise
        self._conn.execute("COMMIT")
        self._next_id = sid + 1
        logger.debug("Added station %s (%s) to %s", sid, name, self._store_id)
        return sid

    def remove_station(self, station_id: int) -> None:
        self._require(station_id)
        self._conn.execute(
            "MATCH (s:Station) WHERE s.station_id = $sid DETACH DELETE s",
            {"sid": station_id},
        )
        logger.debug("Removed station %s from %s", station_id, self._store_id)

    def update_station(
        self,
        station_id: int,
        name: str | None = None,
        price: float | None = None,
    ) -> Station:
        current = self._require(station_id)
        updated = Station(
            station_id=station_id,
            name=current.name if name is None else str(name),
            price=current.price if price is None else check_price(price),
        )
        self._conn.execute(
            "MATCH (s:Station) WHERE s.station_id = $sid "
            "SET s.name = $name, s.price = $price",
            {"sid": station_id, "name": updated.name, "price": updated.price},
        )
        return updated

    def get_station(self, station_id: int) -> Station:
        return self._require(station_id)

    def has_station(self, station_id: int) -> bool:
        return self._fetch_station(station_id) is not None

    def list_stations(self) -> list[Station]:
        rows = self._rows(
            "MATCH (s:Station) RETURN s.station_id, s.name, s.price ORDER BY s.station_id"
        )
        return [self._row_to_station(row) for row in rows]

    # ── connection operations ─────────────────────────────────

    def add_connection(self, station_a: int, station_b: int, weight: float) -> None:
        self._require(station_a)
        self._require(station_b)
        check_distinct(station_a, station_b)
        value = check_weight(weight)

        params = {**self._road_key(station_a, station_b), "w": value}
        if self._road_exists(station_a, station_b):
            self._conn.execute(
                "MATCH (a:Station)-[r:ROAD]->(b:Station) "
                "WHERE a.station_id = $a AND b.station_id = $b SET r.weight = $w",
                params,
            )
        else:
            self._conn.execute(
                "MATCH (a:Station), (b:Station) "
                "WHERE a.station_id = $a AND b.station_id = $b "
                "CREATE (a)-[:ROAD {weight: $w}]->(b)",
                params,
            )
        logger.debug("Connected %s <-> %s (weight=%s)", station_a, station_b, value)

    def remove_connection(self, station_a: int, station_b: int) -> None:
        self._require(station_a)
        self._require(station_b)
        self._conn.execute(
            "MATCH (a:Station)-[r:ROAD]->(b:Station) "
            "WHERE a.station_id = $a AND b.station_id = $b DELETE r",
            self._road_key(station_a, station_b),
        )

    def neighbors(self, station_id: int) -> list[tuple[int, float]]:
        self._require(station_id)
        rows = self._rows(
            "MATCH (a:Station)-[r:ROAD]-(b:Station) WHERE a.station_id = $sid "
            "RETURN b.station_id, r.weight ORDER BY b.station_id",
            {"sid": station_id},
        )
        return [(int(row[0]), float(row[1])) for row in rows]

    def list_connections(self) -> list[Connection]:
        rows = self._rows(
            "MATCH (a:Station)-[r:ROAD]->(b:Station) "
            "RETURN a.station_id, b.station_id, r.weight"
        )
        connections = [
            Connection.between(int(row[0]), int(row[1]), float(row[2])) for row in rows
        ]
        return sorted(connections, key=lambda c: (c.station_a, c.station_b))

    # ── private helpers ───────────────────────────────────────

    def _rows(self, cypher: str, params: dict[str, Any] | None = None) -> list[list[Any]]:
        """Run a query and collect every result row."""
        result = self._conn.execute(cypher, params or {})
        rows: list[list[Any]] = []
        while result.has_next():
            rows.append(result.get_next())
        return rows

    def _rollback(self) -> None:
        try:
            self._conn.execute("ROLLBACK")
        except RuntimeError as e:
            # Kuzu may already have rolled back the failed transaction.
            logger.debug("Rollback skipped: %s", e)

    def _fetch_station(self, station_id: int) -> Station | None:
        if not is_station_id(station_id):
            return None
        rows = self._rows(
            "MATCH (s:Station) WHERE s.station_id = $sid "
            "RETURN s.station_id, s.name, s.price",
            {"sid": station_id},
        )
        if not rows:
            return None
        return self._row_to_station(rows[0])

    def _require(self, station_id: int) -> Station:
        station = self._fetch_station(station_id)
        if station is None:
            raise StationNotFoundError(station_id)
        return station

    @staticmethod
    def _road_key(station_a: int, station_b: int) -> dict[str, Any]:
        """Bind a road's endpoints in stored (low -> high) order."""
        low, high = sorted((station_a, station_b))
        return {"a": low, "b": high}

    def _road_exists(self, station_a: int, station_b: int) -> bool:
        rows = self._rows(
            "MATCH (a:Station)-[r:ROAD]->(b:Station) "
            "WHERE a.station_id = $a AND b.station_id = $b RETURN count(r)",
            self._road_key(station_a, station_b),
        )
        return bool(rows) and int(rows[0][0]) > 0

    @staticmethod
    def _row_to_station(row: list[Any]) -> Station:
        return Station(station_id=int(row[0]), name=str(row[1]), price=float(row[2]))


__all__ = ["KuzuStationStore"]
