"""Custom exceptions for station-graph-lib."""


class StationGraphError(Exception):
    """Base exception for station graph operations."""


class StationNotFoundError(StationGraphError, KeyError):
    """Raised when a station id is not present in the store."""

    def __init__(self, station_id: int):
        super().__init__(station_id)
        self.station_id = station_id

    def __str__(self) -> str:
        return f"Station not found: {self.station_id}"


class InvalidWeightError(StationGraphError, ValueError):
    """Raised when a connection weight is negative or not finite."""


class InvalidPriceError(StationGraphError, ValueError):
    """Raised when a station price is negative or not finite."""


class SelfLoopError(StationGraphError, ValueError):
    """Raised when a connection would join a station to itself."""


class UnreachableError(StationGraphError):
    """Raised when no path exists between two stations."""


class NoneReachableError(StationGraphError):
    """Raised when no other station can be reached from the source."""


class CapacityExceededError(StationGraphError):
    """Raised when a store configured with max_stations is full."""
