"""Factory for creating station stores by backend name."""

from __future__ import annotations

from typing import Any

from .memory_store import InMemoryStationStore
from .protocol import StationStore


def create_station_store(backend: str = "memory", **kwargs: Any) -> StationStore:
    """Create a station store.

    Args:
        backend: ``"memory"`` (dict-based) or ``"kuzu"`` (embedded graph
            database, in-memory unless ``db_path`` is given).
        **kwargs: Backend-specific configuration (``store_id``,
            ``max_stations``, ``db_path``).

    Returns:
        A StationStore implementation.

    Raises:
        ValueError: If *backend* is unrecognised.
    """
    if backend == "memory":
        return InMemoryStationStore(
            store_id=kwargs.get("store_id", "memory"),
            max_stations=kwargs.get("max_stations"),
        )
    elif backend == "kuzu":
        from .kuzu_store import KuzuStationStore

        return KuzuStationStore(
            db_path=kwargs.get("db_path"),
            store_id=kwargs.get("store_id"),
            max_stations=kwargs.get("max_stations"),
        )
    else:
        raise ValueError(
            f"Unknown backend: {backend!r}.  "
            f"Choose from: 'memory', 'kuzu'"
        )


__all__ = ["create_station_store"]
