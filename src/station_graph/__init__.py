"""station-graph-lib: weighted gas station network with path queries."""

__version__ = "0.1.0"

from .exceptions import (
    CapacityExceededError,
    InvalidPriceError,
    InvalidWeightError,
    NoneReachableError,
    SelfLoopError,
    StationGraphError,
    StationNotFoundError,
    UnreachableError,
)
from .graph import (
    Connection,
    InMemoryStationStore,
    KuzuStationStore,
    NearestResult,
    PathResult,
    Station,
    StationStore,
    create_station_store,
)
from .shortest_path import dijkstra, nearest_station, shortest_distances
from .traversal import (
    bounded_cheapest,
    breadth_first,
    cheapest_station,
    depth_first,
    fewest_hops_path,
)

__all__ = [
    # Stores
    "StationStore",
    "InMemoryStationStore",
    "KuzuStationStore",
    "create_station_store",
    # Data types
    "Station",
    "Connection",
    "PathResult",
    "NearestResult",
    # Traversal
    "breadth_first",
    "depth_first",
    "bounded_cheapest",
    "fewest_hops_path",
    "cheapest_station",
    # Shortest paths
    "dijkstra",
    "shortest_distances",
    "nearest_station",
    # Exceptions
    "StationGraphError",
    "StationNotFoundError",
    "InvalidWeightError",
    "InvalidPriceError",
    "SelfLoopError",
    "UnreachableError",
    "NoneReachableError",
    "CapacityExceededError",
]
