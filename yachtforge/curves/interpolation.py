"""
curves/interpolation.py - Scalar easing and position-keyed interpolation.

Shared by the hull lofting engine (profile lookups, cross-section slots)
and the turbine engine (blade section properties).
"""

from __future__ import annotations
from typing import Any, Callable, Optional, Sequence, Tuple, TypeVar, Union
import math
import logging

logger = logging.getLogger("yachtforge.curves.interpolation")

Point2D = Tuple[float, float]
T = TypeVar("T")

BlendFn = Callable[[float], float]
FieldGetter = Union[str, Callable[[Any], float]]


# =============================================================================
# EASING
# =============================================================================

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Hermite step between edge0 and edge1, clamped to [0, 1]."""
    if edge1 == edge0:
        return 0.0 if x < edge0 else 1.0
    t = max(0.0, min(1.0, (x - edge0) / (edge1 - edge0)))
    return t * t * (3 - 2 * t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def linear_blend(t: float) -> float:
    return t


def smooth_blend(t: float) -> float:
    """Smooth blend t^2(3-2t); zero slope at both ends."""
    return t * t * (3 - 2 * t)


# =============================================================================
# EVENLY SPACED VALUES
# =============================================================================

def catmull_rom_1d(p0: float, p1: float, p2: float, p3: float, t: float) -> float:
    t2 = t * t
    t3 = t2 * t
    return 0.5 * (
        (2 * p1)
        + (-p0 + p2) * t
        + (2 * p0 - 5 * p1 + 4 * p2 - p3) * t2
        + (-p0 + 3 * p1 - 3 * p2 + p3) * t3
    )


def interpolate_values(values: Sequence[float], t: float) -> float:
    """
    Spline through evenly spaced values at parameter t in [0, 1].

    No values gives 0, one value is constant, two values interpolate
    linearly.
    """
    if not values:
        return 0.0
    if len(values) == 1:
        return values[0]
    if len(values) == 2:
        return lerp(values[0], values[1], t)

    n = len(values) - 1
    i = min(max(int(math.floor(t * n)), 0), n - 1)
    local_t = t * n - i

    p0 = values[max(0, i - 1)]
    p1 = values[i]
    p2 = values[min(n, i + 1)]
    p3 = values[min(n, i + 2)]
    return catmull_rom_1d(p0, p1, p2, p3, local_t)


def interpolate_path(points: Sequence[Point2D], t: float) -> Point2D:
    """Point on a drawn path at parameter t, treating points as evenly spaced."""
    if not points:
        return (0.0, 0.0)
    if len(points) == 1:
        return (points[0][0], points[0][1])
    if len(points) == 2:
        return (
            lerp(points[0][0], points[1][0], t),
            lerp(points[0][1], points[1][1], t),
        )
    return (
        interpolate_values([p[0] for p in points], t),
        interpolate_values([p[1] for p in points], t),
    )


# =============================================================================
# POSITION-KEYED RECORDS
# =============================================================================

def _getter(field: FieldGetter) -> Callable[[Any], float]:
    if callable(field):
        return field
    return lambda entry: getattr(entry, field)


def find_bracket(
    entries: Sequence[T],
    t: float,
    position: FieldGetter = "position",
) -> Tuple[T, T, float]:
    """
    Find the entries bracketing t by position.

    Returns (lower, upper, local_t) with local_t clamped to [0, 1]. Outside
    the covered range the first and last entries are returned, so the
    nearest end value is held. Requires at least one entry.
    """
    pos = _getter(position)
    ordered = sorted(entries, key=pos)

    lower, upper = ordered[0], ordered[-1]
    for a, b in zip(ordered, ordered[1:]):
        if pos(a) <= t <= pos(b):
            lower, upper = a, b
            break

    span = pos(upper) - pos(lower)
    if span == 0:
        return lower, upper, 0.0

    local_t = max(0.0, min(1.0, (t - pos(lower)) / span))
    return lower, upper, local_t


def interpolate_keyed(
    entries: Sequence[Any],
    t: float,
    field: FieldGetter,
    default: float,
    blend: BlendFn = smooth_blend,
    position: FieldGetter = "position",
) -> float:
    """
    Interpolate one numeric field of position-keyed records at t.

    Args:
        entries: Records with a position and the requested field
        t: Query position
        field: Attribute name or getter
        default: Value when there are no entries
        blend: Blend function mapping local t to weight
        position: Attribute name or getter for the key

    Returns:
        The blended value. A single entry is returned as-is; coincident
        bracket positions return the lower entry's value.
    """
    if not entries:
        return default

    get = _getter(field)
    if len(entries) == 1:
        return get(entries[0])

    lower, upper, local_t = find_bracket(entries, t, position)
    if lower is upper or _getter(position)(upper) == _getter(position)(lower):
        return get(lower)

    w = blend(local_t)
    a = get(lower)
    return a + (get(upper) - a) * w


def entry_at_slot(
    entries: Sequence[T],
    t: float,
    slots: int = 10,
    position: FieldGetter = "position",
) -> Optional[T]:
    """
    First entry sharing the slot round(t * slots), or None.

    Used for sparse overrides keyed to coarse stations.
    """
    pos = _getter(position)
    slot = int(round(t * slots))
    for entry in entries:
        if int(round(pos(entry) * slots)) == slot:
            return entry
    return None
