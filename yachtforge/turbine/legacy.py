"""
turbine/legacy.py - Profile-drawn turbine generators.

The original turbine builder: the player draws a 2D blade profile
(x = radial distance as a fraction of radius, y = height from -1 at the
base to 1 at the top) which is smoothed and swept into a twisted blade
with a rectangular cross-section.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple
import math
import logging

from yachtforge.core.constants import TWO_PI
from yachtforge.curves.spline import interpolate
from yachtforge.webgl.mesh_builder import MeshBuilder, flip_winding, signed_volume
from yachtforge.webgl.primitives import box, cylinder
from yachtforge.webgl.schema import AssemblyData, MeshData

logger = logging.getLogger("yachtforge.turbine.legacy")

Point2D = Tuple[float, float]

DEFAULT_LEGACY_PROFILE: Tuple[Point2D, ...] = (
    (0.1, 0.0),
    (0.2, -0.3),
    (0.3, -0.5),
    (0.35, -0.7),
    (0.3, -0.9),
)

PROFILE_SEGMENTS_PER_SPAN = 8

HELIX_SEGMENTS = 24
HELIX_BLADE_WIDTH = 0.15
MIN_INNER_RADIUS = 0.05


def generate_legacy_blade(
    profile: Sequence[Point2D],
    height: float,
    diameter: float,
    thickness: float = 0.05,
    helix_twist: float = 45.0,
    mesh_id: str = "legacy_blade",
) -> MeshData:
    """
    Sweep a rectangular cross-section along a smoothed blade profile.

    Each profile sample becomes a ring of four vertices: the outer edge at
    the profile radius and the inner edge ``thickness`` closer to the
    axis, no nearer than ``MIN_INNER_RADIUS``. Each edge is offset by half
    the thickness either side in Z and the ring is rotated by the
    cumulative twist. The resulting tube is capped at both
    ends and oriented outward.

    Returns a ``thickness x height x 0.2 * diameter`` box when the smoothed
    profile has fewer than two points.
    """
    smooth = interpolate(profile, PROFILE_SEGMENTS_PER_SPAN)
    if len(smooth) < 2:
        logger.debug("Blade profile has %d points, using placeholder", len(smooth))
        return box(thickness, height, diameter * 0.2, mesh_id)

    half = thickness / 2
    last = len(smooth) - 1
    builder = MeshBuilder()
    rows: List[List[int]] = []

    for i, (px, py) in enumerate(smooth):
        t = i / last
        twist = math.radians(t * helix_twist)
        cos_t, sin_t = math.cos(twist), math.sin(twist)

        radial = px * diameter / 2
        inner = max(MIN_INNER_RADIUS, radial - thickness)
        y = (py + 1) / 2 * height

        rows.append([
            builder.add_vertex(radial * cos_t, y, radial * sin_t - half, uv=(t, 1.0)),
            builder.add_vertex(radial * cos_t, y, radial * sin_t + half, uv=(t, 0.0)),
            builder.add_vertex(inner * cos_t, y, inner * sin_t + half, uv=(t, 0.3)),
            builder.add_vertex(inner * cos_t, y, inner * sin_t - half, uv=(t, 0.7)),
        ])

    builder.add_grid(rows, closed=True)
    builder.add_loop_cap(rows[0][::-1])
    builder.add_loop_cap(rows[-1])

    mesh = builder.build(mesh_id)
    # Descending profiles or twist past 90 degrees invert the rings
    if signed_volume(mesh) < 0:
        mesh = flip_winding(mesh)
    return mesh


def generate_helix_blades(
    height: float,
    diameter: float,
    blade_count: int,
    twist: float = 60.0,
) -> List[MeshData]:
    """
    Simple helical ribbon blades, one mesh per blade.

    Each ribbon is ``HELIX_BLADE_WIDTH`` wide radially, sits at the rotor
    radius and turns ``twist`` degrees over the height.
    """
    blades = []
    radius = diameter / 2
    inner_radius = radius - HELIX_BLADE_WIDTH
    twist_rad = math.radians(twist)

    for b in range(blade_count):
        builder = MeshBuilder()
        base_angle = b / blade_count * math.pi * 2
        rows = []
        for i in range(HELIX_SEGMENTS + 1):
            t = i / HELIX_SEGMENTS
            angle = base_angle + t * twist_rad
            c, s = math.cos(angle), math.sin(angle)
            rows.append([
                builder.add_vertex(c * radius, t * height, s * radius, uv=(t, 0.0)),
                builder.add_vertex(c * inner_radius, t * height, s * inner_radius, uv=(t, 1.0)),
            ])
        builder.add_grid(rows)
        blades.append(builder.build(f"helix_blade_{b}"))

    return blades


def generate_legacy_turbine(
    height: float,
    diameter: float,
    blade_count: int,
    blade_profile: Sequence[Point2D] = (),
    blade_thickness: float = 0.08,
    helix_twist: float = 30.0,
) -> AssemblyData:
    """
    Profile-drawn turbine: shaft, blades, top cap and bottom mount.

    An empty profile uses ``DEFAULT_LEGACY_PROFILE``.
    """
    assembly = AssemblyData(assembly_id="legacy_turbine")
    blade_count = max(1, int(blade_count))

    assembly.add(cylinder(0.1, 0.1, height, 16, mesh_id="shaft"), "shaft",
                 position=(0, height / 2, 0))

    profile = blade_profile if len(blade_profile) > 0 else DEFAULT_LEGACY_PROFILE
    blade = generate_legacy_blade(profile, height, diameter, blade_thickness, helix_twist)
    step = TWO_PI / blade_count
    for i in range(blade_count):
        assembly.add(blade, f"blade_{i}", rotation=(0, step * i, 0))

    assembly.add(cylinder(0.15, 0.12, 0.1, 16, mesh_id="top_cap"), "top_cap",
                 position=(0, height + 0.05, 0))
    assembly.add(cylinder(0.2, 0.25, 0.15, 16, mesh_id="bottom_mount"), "bottom_mount",
                 position=(0, -0.075, 0))

    logger.info("Generated legacy turbine: %d blades", blade_count)
    return assembly
