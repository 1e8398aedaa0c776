"""
curves/spline.py - Spline interpolation and path simplification.

Catmull-Rom interpolation through control points and Douglas-Peucker
reduction. All functions return new lists and never modify their input.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple
import math
import logging

from yachtforge.core.constants import EPSILON

logger = logging.getLogger("yachtforge.curves.spline")

Point2D = Tuple[float, float]

DEFAULT_SEGMENTS_PER_SPAN = 10
DEFAULT_SIMPLIFY_TOLERANCE = 2.0


def catmull_rom(
    p0: Point2D,
    p1: Point2D,
    p2: Point2D,
    p3: Point2D,
    t: float,
) -> Point2D:
    """
    Evaluate a uniform Catmull-Rom segment between p1 and p2.

    Returns p1 exactly at t=0 and p2 at t=1.
    """
    t2 = t * t
    t3 = t2 * t

    x = 0.5 * (
        (2 * p1[0])
        + (-p0[0] + p2[0]) * t
        + (2 * p0[0] - 5 * p1[0] + 4 * p2[0] - p3[0]) * t2
        + (-p0[0] + 3 * p1[0] - 3 * p2[0] + p3[0]) * t3
    )
    y = 0.5 * (
        (2 * p1[1])
        + (-p0[1] + p2[1]) * t
        + (2 * p0[1] - 5 * p1[1] + 4 * p2[1] - p3[1]) * t2
        + (-p0[1] + 3 * p1[1] - 3 * p2[1] + p3[1]) * t3
    )
    return (x, y)


def interpolate(
    curve: Sequence[Point2D],
    segments_per_span: int = DEFAULT_SEGMENTS_PER_SPAN,
) -> List[Point2D]:
    """
    Smooth a control polyline with Catmull-Rom interpolation.

    Args:
        curve: Ordered control points
        segments_per_span: Samples emitted per span between control points

    Returns:
        Dense point list. Control point k sits at index k * segments_per_span
        and the last control point is always the final sample. Two points
        interpolate linearly; fewer than two are returned unchanged.
    """
    points = [tuple(p) for p in curve]
    if len(points) < 2:
        return points

    segments = max(1, int(segments_per_span))

    if len(points) == 2:
        (x0, y0), (x1, y1) = points
        result = []
        for i in range(segments + 1):
            t = i / segments
            result.append((x0 * (1 - t) + x1 * t, y0 * (1 - t) + y1 * t))
        return result

    # Duplicate endpoints so the curve passes through them
    padded = [points[0]] + points + [points[-1]]

    result: List[Point2D] = []
    for i in range(len(padded) - 3):
        p0, p1, p2, p3 = padded[i], padded[i + 1], padded[i + 2], padded[i + 3]
        for j in range(segments):
            result.append(catmull_rom(p0, p1, p2, p3, j / segments))

    result.append(points[-1])
    return result


def perpendicular_distance(point: Point2D, start: Point2D, end: Point2D) -> float:
    """
    Distance from point to the segment start-end.

    A zero-length segment falls back to the distance to start.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length_sq = dx * dx + dy * dy

    if length_sq < EPSILON:
        return math.hypot(point[0] - start[0], point[1] - start[1])

    t = ((point[0] - start[0]) * dx + (point[1] - start[1]) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    proj_x = start[0] + t * dx
    proj_y = start[1] + t * dy
    return math.hypot(point[0] - proj_x, point[1] - proj_y)


def simplify(
    curve: Sequence[Point2D],
    tolerance: float = DEFAULT_SIMPLIFY_TOLERANCE,
) -> List[Point2D]:
    """
    Reduce a polyline with the Douglas-Peucker algorithm.

    Every removed point lies within ``tolerance`` of the simplified path.
    """
    points = [tuple(p) for p in curve]
    if len(points) < 3:
        return points

    start, end = points[0], points[-1]
    max_distance = 0.0
    split_index = 0

    for i in range(1, len(points) - 1):
        d = perpendicular_distance(points[i], start, end)
        if d > max_distance:
            max_distance = d
            split_index = i

    if max_distance > tolerance:
        left = simplify(points[:split_index + 1], tolerance)
        right = simplify(points[split_index:], tolerance)
        return left[:-1] + right

    return [start, end]
