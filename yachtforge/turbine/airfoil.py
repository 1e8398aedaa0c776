"""
turbine/airfoil.py - Blade cross-section profiles.

Profiles are closed loops in the section plane: x along the chord,
centred on mid-chord so it runs -chord/2 to +chord/2, and y across it.
The upper surface runs leading edge to trailing edge, the lower surface
back again.
"""

from __future__ import annotations
from typing import List, Tuple
import math

Point2D = Tuple[float, float]

DEFAULT_CHORD_RESOLUTION = 12

# NACA 4-digit half-thickness coefficients
NACA_COEFFICIENTS = (0.2969, -0.1260, -0.3516, 0.2843, -0.1015)

LEADING_EDGE_ZONE = 0.1
TRAILING_EDGE_ZONE = 0.9


def naca_half_thickness(x: float, thickness: float) -> float:
    """Half-thickness at chord fraction x for a thickness ratio."""
    a0, a1, a2, a3, a4 = NACA_COEFFICIENTS
    return 5 * thickness * (
        a0 * math.sqrt(x) + a1 * x + a2 * x * x + a3 * x ** 3 + a4 * x ** 4
    )


def camber_line(x: float, camber: float) -> float:
    """Parabolic mean line 4 * camber * x * (1 - x)."""
    return camber * 4 * x * (1 - x)


def _upper_factor(x: float, leading_edge: float, trailing_edge: float) -> float:
    factor = 1.0
    if x < LEADING_EDGE_ZONE:
        factor *= math.sqrt(x * 10) * leading_edge
    if x > TRAILING_EDGE_ZONE:
        factor *= (1 - (x - 0.9) * 10) * trailing_edge + (1 - trailing_edge)
    return factor


def _lower_factor(x: float) -> float:
    factor = 1.0
    if x < LEADING_EDGE_ZONE:
        factor *= math.sqrt(x * 10)
    if x > TRAILING_EDGE_ZONE:
        factor *= 1 - (x - 0.9) * 10
    return factor


def airfoil_profile(
    chord: float,
    thickness: float,
    camber: float,
    leading_edge: float,
    trailing_edge: float,
    resolution: int = DEFAULT_CHORD_RESOLUTION,
) -> List[Point2D]:
    """
    Generate an airfoil loop of ``2 * (resolution + 1)`` points.

    The edge rounding parameters shape only the upper surface; the lower
    surface always uses full rounding and a sharp trailing edge.

    Args:
        chord: Chord length (m)
        thickness: Thickness ratio
        camber: Mean line camber
        leading_edge: Leading edge rounding (0-1)
        trailing_edge: Trailing edge sharpness (0-1)
        resolution: Chord intervals per surface

    Returns:
        Upper surface leading to trailing edge, then lower surface
        trailing to leading edge.
    """
    resolution = max(1, int(resolution))
    half = chord / 2
    points: List[Point2D] = []

    for i in range(resolution + 1):
        x = i / resolution
        t = naca_half_thickness(x, thickness) * _upper_factor(x, leading_edge, trailing_edge)
        points.append((x * chord - half, camber_line(x, camber) + t))

    for i in range(resolution, -1, -1):
        x = i / resolution
        t = naca_half_thickness(x, thickness) * _lower_factor(x)
        points.append((x * chord - half, camber_line(x, camber) - t))

    return points
