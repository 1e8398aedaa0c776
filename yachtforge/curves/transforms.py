"""
curves/transforms.py - Point transforms for authored profile curves.

Rotation, rotational symmetry, and the affine map between canvas pixel
space and the [-1, 1] profile space.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple
import math

Point2D = Tuple[float, float]

ORIGIN: Point2D = (0.0, 0.0)


def distance(a: Point2D, b: Point2D) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def rotate(point: Point2D, angle: float, center: Point2D = ORIGIN) -> Point2D:
    """Rotate point counter-clockwise by angle (radians) about center."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return (
        center[0] + dx * cos_a - dy * sin_a,
        center[1] + dx * sin_a + dy * cos_a,
    )


def apply_symmetry(
    curve: Sequence[Point2D],
    count: int,
    center: Point2D = ORIGIN,
) -> List[List[Point2D]]:
    """
    Replicate a curve with n-fold rotational symmetry.

    Copy i is rotated by 2*pi*i/count; copy 0 is the input itself.
    """
    if count < 1:
        return []

    step = 2 * math.pi / count
    return [
        [rotate(p, step * i, center) for p in curve]
        for i in range(count)
    ]


def normalize(points: Sequence[Point2D], canvas_size: float) -> List[Point2D]:
    """Map canvas pixel coordinates to [-1, 1] profile space."""
    c = canvas_size / 2
    return [((x - c) / c, (y - c) / c) for x, y in points]


def denormalize(points: Sequence[Point2D], canvas_size: float) -> List[Point2D]:
    """Map [-1, 1] profile space back to canvas pixel coordinates."""
    c = canvas_size / 2
    return [(x * c + c, y * c + c) for x, y in points]
