"""
webgl/mesh_builder.py - Mesh construction utilities.

Provides utilities for building triangle meshes with recomputed normals,
plus topology queries used to check closure of generated shells.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Optional, Sequence, Tuple
import math
import logging

from yachtforge.core.constants import EPSILON
from .errors import MeshValidationError
from .schema import AssemblyData, MeshData

logger = logging.getLogger("yachtforge.webgl.mesh_builder")

Edge = Tuple[int, int]


class MeshBuilder:
    """
    Builder for constructing triangle meshes.

    Usage:
        builder = MeshBuilder()
        v0 = builder.add_vertex(0, 0, 0)
        v1 = builder.add_vertex(1, 0, 0)
        v2 = builder.add_vertex(0, 1, 0)
        builder.add_triangle(v0, v1, v2)
        mesh = builder.build("triangle")
    """

    def __init__(self):
        self._vertices: List[float] = []
        self._indices: List[int] = []
        self._uvs: List[float] = []
        self._has_uvs = False
        self._vertex_count = 0

    def add_vertex(
        self,
        x: float,
        y: float,
        z: float,
        uv: Optional[Tuple[float, float]] = None,
    ) -> int:
        """Add a vertex and return its index."""
        self._vertices.extend([float(x), float(y), float(z)])
        if uv is not None:
            self._has_uvs = True
            self._uvs.extend([float(uv[0]), float(uv[1])])
        else:
            self._uvs.extend([0.0, 0.0])
        idx = self._vertex_count
        self._vertex_count += 1
        return idx

    def add_vertices(self, vertices: Sequence[Tuple[float, float, float]]) -> List[int]:
        """Add multiple vertices and return their indices."""
        return [self.add_vertex(x, y, z) for x, y, z in vertices]

    def add_triangle(self, v0: int, v1: int, v2: int) -> None:
        """Add a triangle face (counter-clockwise winding faces the viewer)."""
        self._indices.extend([v0, v1, v2])

    def add_quad(self, v0: int, v1: int, v2: int, v3: int) -> None:
        """Add a quad as two triangles (v0,v1,v2,v3 in CCW order)."""
        self.add_triangle(v0, v1, v2)
        self.add_triangle(v0, v2, v3)

    def add_triangle_fan(self, center: int, ring: Sequence[int]) -> None:
        """Add triangles from a fan around center vertex."""
        for i in range(len(ring) - 1):
            self.add_triangle(center, ring[i], ring[i + 1])

    def add_loop_cap(
        self,
        loop: Sequence[int],
        apex: Optional[Tuple[float, float, float]] = None,
    ) -> int:
        """
        Close a boundary loop with a fan around a new center vertex.

        The loop is given in the direction its existing faces traverse it;
        cap triangles traverse each edge in reverse so every edge ends up
        shared by exactly two faces. The center is the loop centroid unless
        ``apex`` is given. Returns the center vertex index.
        """
        n = len(loop)
        if apex is None:
            apex = (
                sum(self._vertices[i * 3] for i in loop) / n,
                sum(self._vertices[i * 3 + 1] for i in loop) / n,
                sum(self._vertices[i * 3 + 2] for i in loop) / n,
            )
        center = self.add_vertex(*apex, uv=(0.5, 0.5) if self._has_uvs else None)

        for k in range(n):
            u = loop[k]
            v = loop[(k + 1) % n]
            self.add_triangle(center, v, u)
        return center

    def add_grid(self, rows: List[List[int]], closed: bool = False, flip: bool = False) -> None:
        """
        Stitch consecutive rows of equal length into quads.

        Quad (a, c, b), (b, c, d) with a=(i, j), b=(i, j+1), c=(i+1, j),
        d=(i+1, j+1); ``flip`` reverses winding, ``closed`` wraps each row.
        """
        for i in range(len(rows) - 1):
            row, nxt = rows[i], rows[i + 1]
            span = len(row) if closed else len(row) - 1
            for j in range(span):
                j1 = (j + 1) % len(row)
                a, b, c, d = row[j], row[j1], nxt[j], nxt[j1]
                if flip:
                    self.add_triangle(a, b, c)
                    self.add_triangle(b, d, c)
                else:
                    self.add_triangle(a, c, b)
                    self.add_triangle(b, c, d)

    def build(self, mesh_id: str = "", compute_normals: bool = True) -> MeshData:
        """Build the final mesh."""
        if compute_normals:
            normals = compute_vertex_normals(self._vertices, self._indices)
        else:
            normals = [0.0, 1.0, 0.0] * self._vertex_count

        return MeshData(
            vertices=list(self._vertices),
            indices=list(self._indices),
            normals=normals,
            uvs=list(self._uvs) if self._has_uvs else None,
            mesh_id=mesh_id,
        )

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def face_count(self) -> int:
        return len(self._indices) // 3


def compute_vertex_normals(vertices: List[float], indices: List[int]) -> List[float]:
    """
    Compute smooth per-vertex normals.

    Area-weighted average of adjacent face normals; vertices with no
    usable faces get (0, 0, 1).
    """
    vertex_count = len(vertices) // 3
    normals = [0.0] * len(vertices)

    for i in range(0, len(indices), 3):
        i0, i1, i2 = indices[i], indices[i + 1], indices[i + 2]

        v0 = (vertices[i0 * 3], vertices[i0 * 3 + 1], vertices[i0 * 3 + 2])
        v1 = (vertices[i1 * 3], vertices[i1 * 3 + 1], vertices[i1 * 3 + 2])
        v2 = (vertices[i2 * 3], vertices[i2 * 3 + 1], vertices[i2 * 3 + 2])

        e1 = (v1[0] - v0[0], v1[1] - v0[1], v1[2] - v0[2])
        e2 = (v2[0] - v0[0], v2[1] - v0[1], v2[2] - v0[2])

        nx = e1[1] * e2[2] - e1[2] * e2[1]
        ny = e1[2] * e2[0] - e1[0] * e2[2]
        nz = e1[0] * e2[1] - e1[1] * e2[0]

        for idx in (i0, i1, i2):
            normals[idx * 3] += nx
            normals[idx * 3 + 1] += ny
            normals[idx * 3 + 2] += nz

    degenerate = 0
    for i in range(vertex_count):
        nx = normals[i * 3]
        ny = normals[i * 3 + 1]
        nz = normals[i * 3 + 2]

        length = math.sqrt(nx * nx + ny * ny + nz * nz)
        if length > EPSILON:
            normals[i * 3] = nx / length
            normals[i * 3 + 1] = ny / length
            normals[i * 3 + 2] = nz / length
        else:
            normals[i * 3] = 0.0
            normals[i * 3 + 1] = 0.0
            normals[i * 3 + 2] = 1.0
            degenerate += 1

    if degenerate:
        logger.debug("%d vertices had degenerate normals", degenerate)

    return normals


# =============================================================================
# TOPOLOGY
# =============================================================================

def edge_face_counts(indices: Sequence[int]) -> Counter:
    """Number of faces using each undirected edge."""
    counts: Counter = Counter()
    for i in range(0, len(indices), 3):
        a, b, c = indices[i], indices[i + 1], indices[i + 2]
        for u, v in ((a, b), (b, c), (c, a)):
            counts[(min(u, v), max(u, v))] += 1
    return counts


def boundary_edges(mesh: MeshData) -> List[Edge]:
    """Edges used by exactly one face. Empty for a closed shell."""
    return sorted(e for e, n in edge_face_counts(mesh.indices).items() if n == 1)


def non_manifold_edges(mesh: MeshData) -> List[Edge]:
    """Edges shared by more than two faces."""
    return sorted(e for e, n in edge_face_counts(mesh.indices).items() if n > 2)


def inconsistent_edges(mesh: MeshData) -> List[Edge]:
    """
    Directed edges traversed twice in the same direction.

    Two faces sharing an edge with the same orientation means one of them
    is wound backwards.
    """
    directed: Counter = Counter()
    idx = mesh.indices
    for i in range(0, len(idx), 3):
        a, b, c = idx[i], idx[i + 1], idx[i + 2]
        for e in ((a, b), (b, c), (c, a)):
            directed[e] += 1
    return sorted(e for e, n in directed.items() if n > 1)


def is_closed(mesh: MeshData) -> bool:
    """True when every edge is shared by exactly two faces."""
    counts = edge_face_counts(mesh.indices)
    return bool(counts) and all(n == 2 for n in counts.values())


def signed_volume(mesh: MeshData) -> float:
    """
    Signed enclosed volume (divergence theorem).

    Positive for a closed shell whose faces wind outward.
    """
    total = 0.0
    for a, b, c in mesh.triangles():
        ax, ay, az = mesh.vertex(a)
        bx, by, bz = mesh.vertex(b)
        cx, cy, cz = mesh.vertex(c)
        total += (
            ax * (by * cz - bz * cy)
            - ay * (bx * cz - bz * cx)
            + az * (bx * cy - by * cx)
        )
    return total / 6.0


# =============================================================================
# COMBINING
# =============================================================================

def merge_meshes(meshes: List[MeshData], mesh_id: str = "merged") -> MeshData:
    """Merge multiple meshes into a single mesh."""
    builder = MeshBuilder()

    for mesh in meshes:
        offset = builder.vertex_count
        for i in range(mesh.vertex_count):
            builder.add_vertex(*mesh.vertex(i))
        for i in range(0, len(mesh.indices), 3):
            builder.add_triangle(
                mesh.indices[i] + offset,
                mesh.indices[i + 1] + offset,
                mesh.indices[i + 2] + offset,
            )

    return builder.build(mesh_id)


def flatten_assembly(assembly: AssemblyData, mesh_id: str = "") -> MeshData:
    """Bake every placed part into one mesh in assembly space."""
    builder = MeshBuilder()

    for part in assembly.parts:
        offset = builder.vertex_count
        for x, y, z in part.world_positions():
            builder.add_vertex(float(x), float(y), float(z))
        idx = part.mesh.indices
        for i in range(0, len(idx), 3):
            builder.add_triangle(idx[i] + offset, idx[i + 1] + offset, idx[i + 2] + offset)

    logger.debug(
        "Flattened %d parts into %d vertices", assembly.part_count, builder.vertex_count
    )
    return builder.build(mesh_id or assembly.assembly_id)


def flip_winding(mesh: MeshData) -> MeshData:
    """Copy of a mesh with every triangle's winding reversed."""
    indices = list(mesh.indices)
    for i in range(0, len(indices), 3):
        indices[i + 1], indices[i + 2] = indices[i + 2], indices[i + 1]
    return MeshData(
        vertices=list(mesh.vertices),
        indices=indices,
        normals=compute_vertex_normals(mesh.vertices, indices),
        uvs=list(mesh.uvs) if mesh.uvs is not None else None,
        mesh_id=mesh.mesh_id,
    )


def transform_mesh(
    mesh: MeshData,
    translate: Tuple[float, float, float] = (0, 0, 0),
    scale: Tuple[float, float, float] = (1, 1, 1),
) -> MeshData:
    """Scale then translate mesh vertices; normals are recomputed."""
    new_vertices = []
    for i in range(mesh.vertex_count):
        x, y, z = mesh.vertex(i)
        new_vertices.extend([
            x * scale[0] + translate[0],
            y * scale[1] + translate[1],
            z * scale[2] + translate[2],
        ])

    indices = list(mesh.indices)
    # Mirroring an odd number of axes flips orientation
    if (scale[0] * scale[1] * scale[2]) < 0:
        for i in range(0, len(indices), 3):
            indices[i + 1], indices[i + 2] = indices[i + 2], indices[i + 1]

    return MeshData(
        vertices=new_vertices,
        indices=indices,
        normals=compute_vertex_normals(new_vertices, indices),
        uvs=list(mesh.uvs) if mesh.uvs is not None else None,
        mesh_id=mesh.mesh_id,
    )


# =============================================================================
# VALIDATION
# =============================================================================

def mesh_issues(mesh: MeshData) -> List[str]:
    """List structural problems with a mesh's buffers."""
    issues: List[str] = []

    if len(mesh.vertices) % 3:
        issues.append(f"vertex buffer length {len(mesh.vertices)} is not a multiple of 3")
    if len(mesh.indices) % 3:
        issues.append(f"index buffer length {len(mesh.indices)} is not a multiple of 3")
    if mesh.normals and len(mesh.normals) != len(mesh.vertices):
        issues.append(
            f"normal buffer length {len(mesh.normals)} != vertex buffer length {len(mesh.vertices)}"
        )
    if mesh.uvs is not None and len(mesh.uvs) != mesh.vertex_count * 2:
        issues.append(f"uv buffer length {len(mesh.uvs)} != 2 * vertex count")

    count = mesh.vertex_count
    bad = [i for i in mesh.indices if i < 0 or i >= count]
    if bad:
        issues.append(f"{len(bad)} indices out of range [0, {count})")

    if any(not math.isfinite(v) for v in mesh.vertices):
        issues.append("vertex buffer contains non-finite values")

    return issues


def validate_mesh(mesh: MeshData) -> MeshData:
    """Raise MeshValidationError when the mesh buffers are malformed."""
    issues = mesh_issues(mesh)
    if issues:
        logger.warning("Mesh %s invalid: %s", mesh.mesh_id, issues)
        raise MeshValidationError(mesh.mesh_id, issues)
    return mesh
