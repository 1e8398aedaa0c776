"""
turbine/blade.py - Section-based blade geometry.

A blade is lofted through ``segments + 1`` airfoil loops stacked along
the turbine height:

1. Section properties blended at span position t
2. Radial distance from the style's offset curve
3. Airfoil loop with tapered chord
4. Pitch about the section's own origin, then placement at the twist
   plus sweep angle around the vertical axis

The loops are stitched into an open-ended surface; blades are rendered
double-sided. Blade copies around the rotor share one mesh.
"""

from __future__ import annotations
from typing import List
import math
import logging

from yachtforge.webgl.mesh_builder import MeshBuilder
from yachtforge.webgl.schema import MeshData
from .airfoil import airfoil_profile
from .parameters import TurbineConfig
from .sections import section_value
from .styles import radial_offset

logger = logging.getLogger("yachtforge.turbine.blade")

DEFAULT_BLADE_SEGMENTS = 24
DEFAULT_CHORD_RESOLUTION = 8


def blade_chord(config: TurbineConfig, width: float, t: float) -> float:
    """Chord (m) at span position t for a section width multiplier."""
    blade = config.blade
    return blade.chord * config.diameter * width * (1 - (1 - blade.taper) * t)


def generate_blade(
    config: TurbineConfig,
    segments: int = DEFAULT_BLADE_SEGMENTS,
    chord_resolution: int = DEFAULT_CHORD_RESOLUTION,
    mesh_id: str = "blade",
) -> MeshData:
    """
    Generate one blade mesh.

    Args:
        config: Turbine configuration
        segments: Height intervals
        chord_resolution: Chord intervals per airfoil surface
        mesh_id: Id for the resulting mesh

    Returns:
        MeshData with ``(segments + 1) * 2 * (chord_resolution + 1)``
        vertices and UVs (span fraction, loop fraction)
    """
    blade = config.blade
    sections = blade.sections
    segments = max(1, int(segments))

    builder = MeshBuilder()
    rows: List[List[int]] = []

    for i in range(segments + 1):
        t = i / segments
        y = t * config.height

        width = section_value(sections, t, "width")
        thickness = section_value(sections, t, "thickness")
        pitch = math.radians(section_value(sections, t, "pitch"))
        sweep = math.radians(section_value(sections, t, "sweep"))

        radius = radial_offset(blade.style, t, config.diameter)
        angle = math.radians(blade.twist * t) + sweep

        loop = airfoil_profile(
            blade_chord(config, width, t),
            blade.thickness * thickness,
            section_value(sections, t, "camber"),
            section_value(sections, t, "leading_edge"),
            section_value(sections, t, "trailing_edge"),
            chord_resolution,
        )

        cos_p, sin_p = math.cos(pitch), math.sin(pitch)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        last = len(loop) - 1

        row = []
        for j, (ax, ay) in enumerate(loop):
            px = ax * cos_p - ay * sin_p
            py = ax * sin_p + ay * cos_p
            row.append(builder.add_vertex(
                radius * cos_a + px * sin_a,
                y,
                radius * sin_a - px * cos_a + py,
                uv=(t, j / last),
            ))
        rows.append(row)

    builder.add_grid(rows)

    mesh = builder.build(mesh_id)
    logger.debug(
        "Generated %s blade: %d vertices, %d faces",
        blade.style.value, mesh.vertex_count, mesh.face_count,
    )
    return mesh
