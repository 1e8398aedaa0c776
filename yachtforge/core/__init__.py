"""
core - Shared constants, parsing helpers, settings and logging setup.
"""

from .constants import (
    SEAWATER_DENSITY_KG_M3,
    AIR_DENSITY_KG_M3,
    GRAVITY_M_S2,
    SOLAR_CONSTANT_W_M2,
    KNOTS_TO_MS,
    EPSILON,
    TWO_PI,
)
from .parsing import (
    Point2D,
    parse_enum,
    clamp,
    clamp_fraction,
    safe_ratio,
    parse_point,
    parse_points,
    points_to_list,
)
from .logging_setup import setup_logging
from .records import Record, with_field

__all__ = [
    "SEAWATER_DENSITY_KG_M3",
    "AIR_DENSITY_KG_M3",
    "GRAVITY_M_S2",
    "SOLAR_CONSTANT_W_M2",
    "KNOTS_TO_MS",
    "EPSILON",
    "TWO_PI",
    "Point2D",
    "parse_enum",
    "clamp",
    "clamp_fraction",
    "safe_ratio",
    "parse_point",
    "parse_points",
    "points_to_list",
    "setup_logging",
    "Record",
    "with_field",
]
