"""
webgl/schema.py - Mesh data contracts.

Single source of truth for the buffers handed to the renderer: a triangle
mesh, a placed instance of a mesh, and an assembly of named parts.

Coordinate frame: X along the hull (bow at -X), Y up, Z to starboard.
Turbine geometry uses Y as the rotor axis.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import math
import struct
import logging

import numpy as np

logger = logging.getLogger("yachtforge.webgl.schema")

SCHEMA_VERSION = "1.0.0"

Vec3 = Tuple[float, float, float]


# =============================================================================
# BOUNDS
# =============================================================================

@dataclass
class BoundingBox:
    """Axis-aligned bounding box."""
    min: Vec3
    max: Vec3

    @property
    def center(self) -> Vec3:
        return tuple((a + b) / 2 for a, b in zip(self.min, self.max))

    @property
    def size(self) -> Vec3:
        return tuple(b - a for a, b in zip(self.min, self.max))

    @property
    def diagonal(self) -> float:
        s = self.size
        return math.sqrt(s[0] ** 2 + s[1] ** 2 + s[2] ** 2)

    def to_dict(self) -> Dict[str, Any]:
        return {"min": list(self.min), "max": list(self.max)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoundingBox":
        return cls(min=tuple(data["min"]), max=tuple(data["max"]))

    @classmethod
    def from_vertices(cls, vertices: List[float]) -> Optional["BoundingBox"]:
        if len(vertices) < 3:
            return None
        arr = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return cls(min=tuple(float(v) for v in lo), max=tuple(float(v) for v in hi))


# =============================================================================
# MESH DATA
# =============================================================================

@dataclass
class MeshData:
    """
    Triangle mesh in flat buffers.

    Vertex data is interleaved: [x0,y0,z0, x1,y1,z1, ...]
    Indices are triangle vertex triples, 32-bit unsigned in binary form
    Normals are per-vertex, normalized
    UVs are optional, 2 components per vertex

    Binary Format:
    - Header (24 bytes):
      - magic: 4 bytes "YFMS"
      - version: 4 bytes uint32 (1)
      - vertex_count: 4 bytes uint32
      - face_count: 4 bytes uint32
      - flags: 4 bytes uint32 (bit 0=has_uvs)
      - reserved: 4 bytes
    - Vertices: vertex_count * 3 * 4 bytes (float32)
    - Indices: face_count * 3 * 4 bytes (uint32)
    - Normals: vertex_count * 3 * 4 bytes (float32)
    - UVs (if flag): vertex_count * 2 * 4 bytes (float32)
    """

    vertices: List[float] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    normals: List[float] = field(default_factory=list)

    uvs: Optional[List[float]] = None

    mesh_id: str = ""
    bounds: Optional[BoundingBox] = None

    MAGIC = b'YFMS'
    BINARY_VERSION = 1
    FLAG_HAS_UVS = 1
    HEADER_FORMAT = '<4sIIIII'
    HEADER_SIZE = 24

    def __post_init__(self):
        if self.bounds is None and len(self.vertices) >= 3:
            self.bounds = BoundingBox.from_vertices(self.vertices)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3

    @property
    def face_count(self) -> int:
        return len(self.indices) // 3

    @property
    def is_empty(self) -> bool:
        return self.vertex_count == 0

    def vertex(self, index: int) -> Vec3:
        i = index * 3
        return (self.vertices[i], self.vertices[i + 1], self.vertices[i + 2])

    def triangles(self) -> List[Tuple[int, int, int]]:
        idx = self.indices
        return [(idx[i], idx[i + 1], idx[i + 2]) for i in range(0, len(idx), 3)]

    def positions_array(self) -> np.ndarray:
        """Vertex positions as an (N, 3) float64 array."""
        return np.asarray(self.vertices, dtype=np.float64).reshape(-1, 3)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        result = {
            "mesh_id": self.mesh_id,
            "vertices": list(self.vertices),
            "indices": list(self.indices),
            "normals": list(self.normals),
            "metadata": {
                "schema_version": SCHEMA_VERSION,
                "vertex_count": self.vertex_count,
                "face_count": self.face_count,
                "bounds": self.bounds.to_dict() if self.bounds else None,
                "has_uvs": self.uvs is not None,
            },
        }
        if self.uvs is not None:
            result["uvs"] = list(self.uvs)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MeshData":
        bounds = None
        if data.get("metadata", {}).get("bounds"):
            bounds = BoundingBox.from_dict(data["metadata"]["bounds"])

        return cls(
            vertices=list(data.get("vertices", [])),
            indices=list(data.get("indices", [])),
            normals=list(data.get("normals", [])),
            uvs=data.get("uvs"),
            mesh_id=data.get("mesh_id", ""),
            bounds=bounds,
        )

    def to_binary(self) -> bytes:
        """Serialize to the packed binary format."""
        flags = 0
        if self.uvs is not None:
            flags |= self.FLAG_HAS_UVS

        header = struct.pack(
            self.HEADER_FORMAT,
            self.MAGIC,
            self.BINARY_VERSION,
            self.vertex_count,
            self.face_count,
            flags,
            0,  # Reserved
        )

        data = bytearray(header)
        data.extend(np.asarray(self.vertices, dtype=np.float32).tobytes())
        data.extend(np.asarray(self.indices, dtype=np.uint32).tobytes())
        data.extend(np.asarray(self.normals, dtype=np.float32).tobytes())
        if self.uvs is not None:
            data.extend(np.asarray(self.uvs, dtype=np.float32).tobytes())

        return bytes(data)

    @classmethod
    def from_binary(cls, data: bytes, mesh_id: str = "") -> "MeshData":
        """Deserialize from the packed binary format."""
        if len(data) < cls.HEADER_SIZE:
            raise ValueError(f"Invalid binary data: too short ({len(data)} bytes)")

        magic, version, vertex_count, face_count, flags, _ = struct.unpack(
            cls.HEADER_FORMAT, data[:cls.HEADER_SIZE]
        )
        if magic != cls.MAGIC:
            raise ValueError(f"Invalid magic: {magic}, expected {cls.MAGIC}")
        if version != cls.BINARY_VERSION:
            raise ValueError(f"Unsupported version: {version}, expected {cls.BINARY_VERSION}")

        offset = cls.HEADER_SIZE

        def read(count: int, dtype) -> list:
            nonlocal offset
            size = count * 4
            values = np.frombuffer(data[offset:offset + size], dtype=dtype).tolist()
            offset += size
            return values

        vertices = read(vertex_count * 3, np.float32)
        indices = read(face_count * 3, np.uint32)
        normals = read(vertex_count * 3, np.float32)
        uvs = read(vertex_count * 2, np.float32) if flags & cls.FLAG_HAS_UVS else None

        return cls(
            vertices=vertices,
            indices=indices,
            normals=normals,
            uvs=uvs,
            mesh_id=mesh_id,
        )


# =============================================================================
# PLACEMENT
# =============================================================================

def rotation_matrix(rotation: Vec3) -> np.ndarray:
    """
    Rotation matrix for Euler angles (rx, ry, rz) in radians, XYZ order.

    Equivalent to Rx @ Ry @ Rz applied to column vectors.
    """
    rx, ry, rz = rotation
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)

    mx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]], dtype=np.float64)
    my = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]], dtype=np.float64)
    mz = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]], dtype=np.float64)
    return mx @ my @ mz


@dataclass
class MeshInstance:
    """
    A placed reference to a shared mesh.

    Replicated parts (blades, arms, twin hulls) share one MeshData and
    differ only in placement.
    """
    mesh: MeshData
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)
    name: str = ""

    @property
    def is_identity(self) -> bool:
        return (
            self.position == (0.0, 0.0, 0.0)
            and self.rotation == (0.0, 0.0, 0.0)
            and self.scale == (1.0, 1.0, 1.0)
        )

    def world_positions(self) -> np.ndarray:
        """Mesh vertices transformed into assembly space as (N, 3)."""
        local = self.mesh.positions_array() * np.asarray(self.scale, dtype=np.float64)
        rotated = local @ rotation_matrix(self.rotation).T
        return rotated + np.asarray(self.position, dtype=np.float64)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "mesh_id": self.mesh.mesh_id,
            "position": list(self.position),
            "rotation": list(self.rotation),
            "scale": list(self.scale),
        }


@dataclass
class AssemblyData:
    """Named collection of placed meshes forming one generated object."""
    assembly_id: str = ""
    parts: List[MeshInstance] = field(default_factory=list)

    def add(
        self,
        mesh: MeshData,
        name: str = "",
        position: Vec3 = (0.0, 0.0, 0.0),
        rotation: Vec3 = (0.0, 0.0, 0.0),
        scale: Vec3 = (1.0, 1.0, 1.0),
    ) -> MeshInstance:
        instance = MeshInstance(
            mesh=mesh,
            position=tuple(float(v) for v in position),
            rotation=tuple(float(v) for v in rotation),
            scale=tuple(float(v) for v in scale),
            name=name or mesh.mesh_id,
        )
        self.parts.append(instance)
        return instance

    def extend(self, other: "AssemblyData", prefix: str = "") -> None:
        for part in other.parts:
            self.parts.append(MeshInstance(
                mesh=part.mesh,
                position=part.position,
                rotation=part.rotation,
                scale=part.scale,
                name=f"{prefix}{part.name}",
            ))

    def parts_named(self, prefix: str) -> List[MeshInstance]:
        return [p for p in self.parts if p.name.startswith(prefix)]

    def unique_meshes(self) -> List[MeshData]:
        seen = {}
        for part in self.parts:
            seen.setdefault(id(part.mesh), part.mesh)
        return list(seen.values())

    @property
    def part_count(self) -> int:
        return len(self.parts)

    @property
    def vertex_count(self) -> int:
        return sum(p.mesh.vertex_count for p in self.parts)

    @property
    def face_count(self) -> int:
        return sum(p.mesh.face_count for p in self.parts)

    def bounds(self) -> Optional[BoundingBox]:
        arrays = [p.world_positions() for p in self.parts if not p.mesh.is_empty]
        if not arrays:
            return None
        stacked = np.vstack(arrays)
        return BoundingBox(
            min=tuple(float(v) for v in stacked.min(axis=0)),
            max=tuple(float(v) for v in stacked.max(axis=0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        bounds = self.bounds()
        return {
            "assembly_id": self.assembly_id,
            "schema_version": SCHEMA_VERSION,
            "meshes": {m.mesh_id: m.to_dict() for m in self.unique_meshes()},
            "parts": [p.to_dict() for p in self.parts],
            "metadata": {
                "part_count": self.part_count,
                "vertex_count": self.vertex_count,
                "face_count": self.face_count,
                "bounds": bounds.to_dict() if bounds else None,
            },
        }
