"""
webgl/primitives.py - Closed primitive solids.

Boxes, cylinders, cones, spheres, lathes, swept tubes and extruded
outlines used for hubs, shafts, support arms, cross-beams and deck
parts. Every solid is centred the way the renderer expects:

- box, cylinder, cone, sphere: centred on the origin, Y up
- lathe: profile revolved about the Y axis at its own heights
- tube: follows its path from the first control point
- extrude: outline in the XY plane, extruded from z=0 to z=depth

All solids are closed shells with outward winding.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple
import math
import logging

from yachtforge.core.constants import EPSILON
from .mesh_builder import MeshBuilder, transform_mesh
from .schema import MeshData

logger = logging.getLogger("yachtforge.webgl.primitives")

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

DEFAULT_RADIAL_SEGMENTS = 16


def _ring(builder: MeshBuilder, radius: float, y: float, segments: int, v: float) -> List[int]:
    """Horizontal ring of vertices about the Y axis."""
    ring = []
    for k in range(segments):
        theta = 2 * math.pi * k / segments
        ring.append(builder.add_vertex(
            radius * math.cos(theta), y, radius * math.sin(theta),
            uv=(k / segments, v),
        ))
    return ring


def _cap_rows(builder: MeshBuilder, rows: List[List[int]], flip: bool) -> None:
    """Close both ends of a closed-row grid stitched with add_grid."""
    first, last = rows[0], rows[-1]
    if flip:
        builder.add_loop_cap(first)
        builder.add_loop_cap(last[::-1])
    else:
        builder.add_loop_cap(first[::-1])
        builder.add_loop_cap(last)


# =============================================================================
# BOX
# =============================================================================

def box(width: float, height: float, depth: float, mesh_id: str = "box") -> MeshData:
    """Axis-aligned box of size (width, height, depth) along (X, Y, Z)."""
    builder = MeshBuilder()
    hx, hy, hz = width / 2, height / 2, depth / 2

    corner = {}
    for ix in (0, 1):
        for iy in (0, 1):
            for iz in (0, 1):
                corner[(ix, iy, iz)] = builder.add_vertex(
                    -hx + ix * width, -hy + iy * height, -hz + iz * depth,
                    uv=(float(ix), float(iy)),
                )

    faces = (
        ((1, 0, 0), (1, 1, 0), (1, 1, 1), (1, 0, 1)),  # +X
        ((0, 0, 0), (0, 0, 1), (0, 1, 1), (0, 1, 0)),  # -X
        ((0, 1, 0), (0, 1, 1), (1, 1, 1), (1, 1, 0)),  # +Y
        ((0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1)),  # -Y
        ((0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1)),  # +Z
        ((0, 0, 0), (0, 1, 0), (1, 1, 0), (1, 0, 0)),  # -Z
    )
    for a, b, c, d in faces:
        builder.add_quad(corner[a], corner[b], corner[c], corner[d])

    return builder.build(mesh_id)


# =============================================================================
# SOLIDS OF REVOLUTION
# =============================================================================

def cylinder(
    radius_top: float,
    radius_bottom: float,
    height: float,
    radial_segments: int = DEFAULT_RADIAL_SEGMENTS,
    mesh_id: str = "cylinder",
) -> MeshData:
    """
    Capped cylinder (or frustum) along Y, centred on the origin.

    A zero top or bottom radius collapses that end to an apex.
    """
    if radius_top <= EPSILON and radius_bottom <= EPSILON:
        logger.debug("Cylinder %s has zero radius, using a thin box", mesh_id)
        return box(EPSILON, height, EPSILON, mesh_id)
    if radius_top <= EPSILON:
        return cone(radius_bottom, height, radial_segments, mesh_id)
    if radius_bottom <= EPSILON:
        flipped = cone(radius_top, height, radial_segments, mesh_id)
        return _mirror_y(flipped)

    builder = MeshBuilder()
    half = height / 2
    rows = [
        _ring(builder, radius_bottom, -half, radial_segments, 0.0),
        _ring(builder, radius_top, half, radial_segments, 1.0),
    ]
    builder.add_grid(rows, closed=True)
    _cap_rows(builder, rows, flip=False)
    return builder.build(mesh_id)


def cone(
    radius: float,
    height: float,
    radial_segments: int = DEFAULT_RADIAL_SEGMENTS,
    mesh_id: str = "cone",
) -> MeshData:
    """Cone along Y with its apex at +height/2 and a capped base."""
    builder = MeshBuilder()
    half = height / 2
    base = _ring(builder, radius, -half, radial_segments, 0.0)
    builder.add_loop_cap(base[::-1])
    builder.add_loop_cap(base, apex=(0.0, half, 0.0))
    return builder.build(mesh_id)


def sphere(
    radius: float,
    width_segments: int = DEFAULT_RADIAL_SEGMENTS,
    height_segments: int = 12,
    mesh_id: str = "sphere",
) -> MeshData:
    """UV sphere centred on the origin with single pole vertices."""
    builder = MeshBuilder()
    rows = []
    for i in range(1, height_segments):
        phi = -math.pi / 2 + math.pi * i / height_segments
        rows.append(_ring(
            builder,
            radius * math.cos(phi),
            radius * math.sin(phi),
            width_segments,
            i / height_segments,
        ))

    builder.add_grid(rows, closed=True)
    builder.add_loop_cap(rows[0][::-1], apex=(0.0, -radius, 0.0))
    builder.add_loop_cap(rows[-1], apex=(0.0, radius, 0.0))
    return builder.build(mesh_id)


def lathe(
    profile: Sequence[Vec2],
    segments: int = DEFAULT_RADIAL_SEGMENTS,
    mesh_id: str = "lathe",
) -> MeshData:
    """
    Revolve (radius, y) profile points about the Y axis.

    Profile points must be ordered by increasing y. End points with zero
    radius become pole vertices; other ends are capped.
    """
    points = list(profile)
    start_pole = points and points[0][0] <= EPSILON
    end_pole = points and points[-1][0] <= EPSILON
    body = [p for p in points if p[0] > EPSILON]

    if not body:
        logger.debug("Lathe %s has no radius, returning empty mesh", mesh_id)
        return MeshData(mesh_id=mesh_id)

    builder = MeshBuilder()
    n = len(body)
    rows = [
        _ring(builder, r, y, segments, i / max(n - 1, 1))
        for i, (r, y) in enumerate(body)
    ]
    builder.add_grid(rows, closed=True)

    if start_pole:
        builder.add_loop_cap(rows[0][::-1], apex=(0.0, points[0][1], 0.0))
    else:
        builder.add_loop_cap(rows[0][::-1])
    if end_pole:
        builder.add_loop_cap(rows[-1], apex=(0.0, points[-1][1], 0.0))
    else:
        builder.add_loop_cap(rows[-1])

    return builder.build(mesh_id)


def _mirror_y(mesh: MeshData) -> MeshData:
    """Mirror a mesh through the XZ plane, keeping outward winding."""
    return transform_mesh(mesh, scale=(1, -1, 1))


# =============================================================================
# SWEEPS
# =============================================================================

def quadratic_bezier(p0: Sequence[float], p1: Sequence[float], p2: Sequence[float], t: float) -> tuple:
    """Point on a quadratic Bezier curve in any dimension."""
    u = 1 - t
    return tuple(u * u * a + 2 * u * t * b + t * t * c for a, b, c in zip(p0, p1, p2))


def _quadratic_tangent(p0: Vec3, p1: Vec3, p2: Vec3, t: float) -> Vec3:
    u = 1 - t
    return tuple(2 * u * (b - a) + 2 * t * (c - b) for a, b, c in zip(p0, p1, p2))


def _normalize(v: Sequence[float]) -> Vec3:
    length = math.sqrt(sum(c * c for c in v))
    if length <= EPSILON:
        return (0.0, 0.0, 0.0)
    return tuple(c / length for c in v)


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def tube(
    p0: Vec3,
    p1: Vec3,
    p2: Vec3,
    radius: float,
    tubular_segments: int = 8,
    radial_segments: int = 8,
    mesh_id: str = "tube",
) -> MeshData:
    """
    Round tube swept along a quadratic Bezier path, capped at both ends.

    Frames are carried along the path so the tube does not twist.
    """
    builder = MeshBuilder()

    t0 = _normalize(_quadratic_tangent(p0, p1, p2, 0.0))
    axes = sorted(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
                  key=lambda a: abs(sum(x * y for x, y in zip(a, t0))))
    binormal = axes[0]

    rows = []
    for i in range(tubular_segments + 1):
        s = i / tubular_segments
        center = quadratic_bezier(p0, p1, p2, s)
        tangent = _normalize(_quadratic_tangent(p0, p1, p2, s))
        normal = _normalize(_cross(binormal, tangent))
        binormal = _cross(tangent, normal)

        row = []
        for k in range(radial_segments):
            phi = 2 * math.pi * k / radial_segments
            c, sn = math.cos(phi), math.sin(phi)
            row.append(builder.add_vertex(
                center[0] + radius * (c * normal[0] + sn * binormal[0]),
                center[1] + radius * (c * normal[1] + sn * binormal[1]),
                center[2] + radius * (c * normal[2] + sn * binormal[2]),
                uv=(s, k / radial_segments),
            ))
        rows.append(row)

    builder.add_grid(rows, closed=True, flip=True)
    _cap_rows(builder, rows, flip=True)
    return builder.build(mesh_id)


def polygon_area(outline: Sequence[Vec2]) -> float:
    """Signed shoelace area; positive for counter-clockwise outlines."""
    area = 0.0
    n = len(outline)
    for i in range(n):
        x0, y0 = outline[i]
        x1, y1 = outline[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return area / 2


def extrude(outline: Sequence[Vec2], depth: float, mesh_id: str = "extrude") -> MeshData:
    """
    Extrude a closed 2D outline from z=0 to z=depth (depth > 0).

    The outline may be given in either direction. Caps are fanned from the
    outline centroid, so the outline should be star-shaped about it.
    """
    points = list(outline)
    if len(points) > 1 and points[0] == points[-1]:
        points.pop()
    if len(points) < 3:
        logger.debug("Outline for %s has %d points, using a box", mesh_id, len(points))
        return box(EPSILON, EPSILON, depth, mesh_id)
    if polygon_area(points) < 0:
        points.reverse()

    builder = MeshBuilder()
    n = len(points)
    rows = [
        [builder.add_vertex(x, y, z, uv=(i / n, z / depth if depth else 0.0))
         for i, (x, y) in enumerate(points)]
        for z in (0.0, depth)
    ]
    builder.add_grid(rows, closed=True, flip=True)
    _cap_rows(builder, rows, flip=True)
    return builder.build(mesh_id)
