"""StationStore protocol -- the common interface all station backends implement.

Public API:
    StationStore: Runtime-checkable protocol defining the store contract.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .types import Connection, Station


@runtime_checkable
class StationStore(Protocol):
    """Common interface for station graph backends.

    Every concrete implementation (in-memory, Kuzu) must satisfy this
    protocol so the traversal and path functions can run against any
    backend without changes.
    """

    # ── identity ──────────────────────────────────────────────

    @property
    def store_id(self) -> str:
        """Unique identifier for this store instance."""
        ...

    def __len__(self) -> int:
        """Number of stations currently stored."""
        ...

    # ── station operations ────────────────────────────────────

    def add_station(self, name: str, price: float) -> int:
        """Insert a station and return its newly assigned id.

        Raises:
            InvalidPriceError: If *price* is negative or not finite.
            CapacityExceededError: If the store has a ``max_stations``
                limit and is full.
        """
        ...

    def remove_station(self, station_id: int) -> None:
        """Delete a station and every connection incident to it.

        Raises:
            StationNotFoundError: If *station_id* is unknown.
        """
        ...

    def update_station(
        self,
        station_id: int,
        name: str | None = None,
        price: float | None = None,
    ) -> Station:
        """Change the name and/or price of a station and return it."""
        ...

    def get_station(self, station_id: int) -> Station:
        """Fetch a single station.

        Raises:
            StationNotFoundError: If *station_id* is unknown.
        """
        ...

    def has_station(self, station_id: int) -> bool:
        """Return True if *station_id* is present."""
        ...

    def list_stations(self) -> list[Station]:
        """Return all stations in ascending id order."""
        ...

    # ── connection operations ─────────────────────────────────

    def add_connection(self, station_a: int, station_b: int, weight: float) -> None:
        """Connect two stations, replacing the weight of an existing road.

        Raises:
            StationNotFoundError: If either station is unknown.
            SelfLoopError: If both ids are the same.
            InvalidWeightError: If *weight* is negative or not finite.
        """
        ...

    def remove_connection(self, station_a: int, station_b: int) -> None:
        """Disconnect two stations; a missing road is not an error.

        Raises:
            StationNotFoundError: If either station is unknown.
        """
        ...

    def neighbors(self, station_id: int) -> list[tuple[int, float]]:
        """Return ``(neighbor_id, weight)`` pairs in ascending neighbor id.

        Raises:
            StationNotFoundError: If *station_id* is unknown.
        """
        ...

    def list_connections(self) -> list[Connection]:
        """Return every road once, ordered by ``(station_a, station_b)``."""
        ...

    # ── lifecycle ─────────────────────────────────────────────

    def close(self) -> None:
        """Release resources held by the store."""
        ...


__all__ = ["StationStore"]
