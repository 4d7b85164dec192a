"""Station graph storage layer.

Public API:
    Station: Immutable gas station record.
    Connection: Immutable undirected road between two stations.
    PathResult: Path query result (total weight + ordered ids).
    NearestResult: Nearest-station query result.
    StationStore: Protocol all backends implement.
    InMemoryStationStore: Dict-based implementation.
    KuzuStationStore: Kuzu-backed implementation.
    create_station_store: Factory for creating stores by backend name.
"""

from __future__ import annotations

from .factory import create_station_store
from .kuzu_store import KuzuStationStore
from .memory_store import InMemoryStationStore
from .protocol import StationStore
from .types import Connection, NearestResult, PathResult, Station

__all__ = [
    "Station",
    "Connection",
    "PathResult",
    "NearestResult",
    "StationStore",
    "InMemoryStationStore",
    "KuzuStationStore",
    "create_station_store",
]
