"""
core/parsing.py - Lenient value parsing for configuration records.

Configuration records arrive from external state containers as plain data.
Unknown enum values fall back to a documented default instead of failing.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Optional, Sequence, Tuple, Type, TypeVar
import logging

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

Point2D = Tuple[float, float]


def parse_enum(enum_cls: Type[E], value: Any, default: E) -> E:
    """
    Parse an enum member from a member, its value, or its name.

    Unknown values return ``default`` and log a warning.
    """
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        pass
    if isinstance(value, str):
        key = value.strip().upper().replace("-", "_")
        if key in enum_cls.__members__:
            return enum_cls.__members__[key]
    logger.warning(
        "Unknown %s value %r, falling back to %s",
        enum_cls.__name__, value, default.value,
    )
    return default


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def clamp_fraction(value: float) -> float:
    """Clamp a position expressed as a fraction of length into [0, 1]."""
    return clamp(float(value), 0.0, 1.0)


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """``numerator / denominator``, or ``default`` when the denominator is not positive."""
    if denominator <= 0:
        return default
    return numerator / denominator


def parse_point(data: Any) -> Point2D:
    """Parse a 2D point from ``{"x": .., "y": ..}`` or an (x, y) pair."""
    if isinstance(data, dict):
        return (float(data.get("x", 0.0)), float(data.get("y", 0.0)))
    x, y = data
    return (float(x), float(y))


def parse_points(data: Optional[Sequence[Any]]) -> Tuple[Point2D, ...]:
    """Parse a profile curve, preserving point order."""
    if not data:
        return ()
    return tuple(parse_point(p) for p in data)


def points_to_list(points: Sequence[Point2D]) -> list:
    """Serialize a profile curve as a list of ``{"x", "y"}`` dicts."""
    return [{"x": round(x, 6), "y": round(y, 6)} for x, y in points]
