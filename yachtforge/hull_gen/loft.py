"""
hull_gen/loft.py - Hull lofting.

Lofts station cross-sections into a closed triangulated shell:

1. Stations at ``longitudinal_segments + 1`` positions along the length
2. Starboard half at +Z, port half mirrored to -Z with reversed winding
3. Keel line and deck edge bridged between the halves
4. Bow and stern openings capped

Coordinate frame: X along the hull (bow at -X), Y up, Z to starboard.
"""

from __future__ import annotations
from typing import List
import logging

from yachtforge.webgl.mesh_builder import MeshBuilder
from yachtforge.webgl.primitives import box
from yachtforge.webgl.schema import MeshData
from .parameters import HullConfig
from .sections import generate_cross_section

logger = logging.getLogger(__name__)

DEFAULT_LONGITUDINAL_SEGMENTS = 32
DEFAULT_TRANSVERSE_SEGMENTS = 16


def placeholder_hull(config: HullConfig, mesh_id: str = "hull") -> MeshData:
    """Box standing in for a hull that cannot be lofted."""
    return box(
        max(config.length, 0.01),
        max(config.draft + config.freeboard, 0.01),
        max(config.beam, 0.01),
        mesh_id,
    )


def loft_hull(
    config: HullConfig,
    longitudinal_segments: int = DEFAULT_LONGITUDINAL_SEGMENTS,
    transverse_segments: int = DEFAULT_TRANSVERSE_SEGMENTS,
    mesh_id: str = "hull",
) -> MeshData:
    """
    Generate a closed hull shell.

    Args:
        config: Hull configuration
        longitudinal_segments: Station intervals along the length
        transverse_segments: Intervals per half cross-section
        mesh_id: Id for the resulting mesh

    Returns:
        MeshData with UVs (station fraction, height fraction)
    """
    if longitudinal_segments < 1 or transverse_segments < 1:
        logger.debug(
            "Cannot loft %s with %dx%d segments, using placeholder",
            mesh_id, longitudinal_segments, transverse_segments,
        )
        return placeholder_hull(config, mesh_id)

    builder = MeshBuilder()
    n_long = longitudinal_segments
    n_trans = transverse_segments

    sections = [
        generate_cross_section(config, i / n_long, n_trans)
        for i in range(n_long + 1)
    ]

    starboard: List[List[int]] = []
    port: List[List[int]] = []
    for i, section in enumerate(sections):
        x = (i / n_long - 0.5) * config.length
        u = i / n_long
        starboard.append([
            builder.add_vertex(x, py, px, uv=(u, j / n_trans))
            for j, (px, py) in enumerate(section)
        ])
    for i, section in enumerate(sections):
        x = (i / n_long - 0.5) * config.length
        u = i / n_long
        port.append([
            builder.add_vertex(x, py, -px, uv=(u, j / n_trans))
            for j, (px, py) in enumerate(section)
        ])

    builder.add_grid(starboard)
    builder.add_grid(port, flip=True)

    # Keel line and deck edge bridges
    for i in range(n_long):
        s0, s1 = starboard[i][0], starboard[i + 1][0]
        p0, p1 = port[i][0], port[i + 1][0]
        builder.add_triangle(s1, s0, p0)
        builder.add_triangle(s1, p0, p1)

        s0, s1 = starboard[i][n_trans], starboard[i + 1][n_trans]
        p0, p1 = port[i][n_trans], port[i + 1][n_trans]
        builder.add_triangle(s0, s1, p1)
        builder.add_triangle(s0, p1, p0)

    # End caps, loops in the direction the side faces traverse them
    builder.add_loop_cap(starboard[0][::-1] + port[0])
    builder.add_loop_cap(starboard[n_long] + port[n_long][::-1])

    mesh = builder.build(mesh_id)
    logger.debug(
        "Lofted %s: %d vertices, %d faces", mesh_id, mesh.vertex_count, mesh.face_count
    )
    return mesh
