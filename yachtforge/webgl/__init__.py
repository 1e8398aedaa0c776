"""
webgl - Mesh containers, construction and primitive solids.

Geometry engines emit MeshData buffers grouped into AssemblyData; the
renderer consumes them without further processing.
"""

from __future__ import annotations

from .schema import (
    SCHEMA_VERSION,
    BoundingBox,
    MeshData,
    MeshInstance,
    AssemblyData,
    rotation_matrix,
)
from .config import (
    DetailLevel,
    DetailConfig,
    DETAIL_CONFIGS,
    get_detail_config,
)
from .errors import (
    GeometryError,
    ConfigurationError,
    MeshValidationError,
    create_error_from_dict,
)
from .mesh_builder import (
    MeshBuilder,
    compute_vertex_normals,
    boundary_edges,
    non_manifold_edges,
    inconsistent_edges,
    is_closed,
    signed_volume,
    merge_meshes,
    flip_winding,
    flatten_assembly,
    transform_mesh,
    mesh_issues,
    validate_mesh,
)
from .primitives import box, cylinder, cone, sphere, lathe, tube, extrude

__all__ = [
    # Schema
    "SCHEMA_VERSION",
    "BoundingBox",
    "MeshData",
    "MeshInstance",
    "AssemblyData",
    "rotation_matrix",
    # Config
    "DetailLevel",
    "DetailConfig",
    "DETAIL_CONFIGS",
    "get_detail_config",
    # Errors
    "GeometryError",
    "ConfigurationError",
    "MeshValidationError",
    "create_error_from_dict",
    # Construction
    "MeshBuilder",
    "compute_vertex_normals",
    "boundary_edges",
    "non_manifold_edges",
    "inconsistent_edges",
    "is_closed",
    "signed_volume",
    "merge_meshes",
    "flip_winding",
    "flatten_assembly",
    "transform_mesh",
    "mesh_issues",
    "validate_mesh",
    # Primitives
    "box",
    "cylinder",
    "cone",
    "sphere",
    "lathe",
    "tube",
    "extrude",
]
