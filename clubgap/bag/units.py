"""Distance unit conversion shared by every bag computation."""

from __future__ import annotations

import math
from typing import Any, Literal

from clubgap.config import UNIT_ALIASES

Unit = Literal["yards", "meters"]
Metric = Literal["carry", "total"]

YARDS_TO_METERS = 0.9144
METERS_TO_YARDS = 1.09361


def as_distance(value: Any) -> float:
    """Coerce *value* into a finite float, treating anything else as ``0``."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def normalize_unit(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return UNIT_ALIASES.get(value.strip().lower())


def convert_distance(distance: Any, from_unit: str, to_unit: str) -> float:
    """Convert *distance* between yards and meters.

    Values are never rounded here; use :func:`round_distance` when presenting.
    """
    value = as_distance(distance)
    if from_unit == to_unit:
        return value
    if from_unit == "yards" and to_unit == "meters":
        return value * YARDS_TO_METERS
    if from_unit == "meters" and to_unit == "yards":
        return value * METERS_TO_YARDS
    return value


def round_distance(value: float) -> int:
    """Round half up, the way distances are shown to players."""
    return int(math.floor(as_distance(value) + 0.5))


__all__ = [
    "METERS_TO_YARDS",
    "Metric",
    "Unit",
    "YARDS_TO_METERS",
    "as_distance",
    "convert_distance",
    "normalize_unit",
    "round_distance",
]
