"""Argument checks shared by every StationStore backend."""

from __future__ import annotations

import math

from ..exceptions import InvalidPriceError, InvalidWeightError, SelfLoopError


def check_price(price: float) -> float:
    """Return *price* as a float, rejecting negative or non-finite values."""
    try:
        value = float(price)
    except (TypeError, ValueError) as e:
        raise InvalidPriceError(f"Price must be a number, got {price!r}") from e
    if not math.isfinite(value) or value < 0:
        raise InvalidPriceError(f"Price must be finite and non-negative, got {price!r}")
    return value


def check_weight(weight: float) -> float:
    """Return *weight* as a float, rejecting negative or non-finite values."""
    try:
        value = float(weight)
    except (TypeError, ValueError) as e:
        raise InvalidWeightError(f"Weight must be a number, got {weight!r}") from e
    if not math.isfinite(value) or value < 0:
        raise InvalidWeightError(f"Weight must be finite and non-negative, got {weight!r}")
    return value


def is_station_id(value: object) -> bool:
    """Return True if *value* can be a station id (an int, but not a bool)."""
    return isinstance(value, int) and not isinstance(value, bool)


def check_distinct(station_a: int, station_b: int) -> None:
    if station_a == station_b:
        raise SelfLoopError(f"Cannot connect station {station_a} to itself")


__all__ = ["check_price", "check_weight", "check_distinct", "is_station_id"]
