"""
tests/webgl/test_schema.py - Tests for mesh data contracts

Tests for MeshData buffers, binary packing, placement and assemblies.
"""

import math

import numpy as np
import pytest


def make_triangle(mesh_id="tri", uvs=None):
    from yachtforge.webgl.schema import MeshData

    return MeshData(
        mesh_id=mesh_id,
        vertices=[0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.5, 1.0, 0.0],
        indices=[0, 1, 2],
        normals=[0.0, 0.0, 1.0] * 3,
        uvs=uvs,
    )


class TestBoundingBox:
    """Tests for BoundingBox."""

    def test_from_vertices(self):
        """Test bounds computed from a flat buffer."""
        from yachtforge.webgl.schema import BoundingBox

        bounds = BoundingBox.from_vertices([0, -1, 2, 4, 3, -2])

        assert bounds.min == (0.0, -1.0, -2.0)
        assert bounds.max == (4.0, 3.0, 2.0)
        assert bounds.center == (2.0, 1.0, 0.0)
        assert bounds.size == (4.0, 4.0, 4.0)
        assert abs(bounds.diagonal - math.sqrt(48)) < 1e-12

    def test_from_too_few(self):
        """Test no bounds for an empty buffer."""
        from yachtforge.webgl.schema import BoundingBox

        assert BoundingBox.from_vertices([]) is None

    def test_dict_round_trip(self):
        from yachtforge.webgl.schema import BoundingBox

        bounds = BoundingBox(min=(0.0, 0.0, 0.0), max=(1.0, 2.0, 3.0))
        assert BoundingBox.from_dict(bounds.to_dict()) == bounds


class TestMeshData:
    """Tests for MeshData dataclass."""

    def test_mesh_data_creation(self):
        """Test basic MeshData creation."""
        mesh = make_triangle("test_hull")

        assert mesh.mesh_id == "test_hull"
        assert mesh.vertex_count == 3
        assert mesh.face_count == 1
        assert mesh.vertex(2) == (0.5, 1.0, 0.0)
        assert mesh.triangles() == [(0, 1, 2)]
        assert not mesh.is_empty

    def test_bounds_computed(self):
        """Test bounds are filled in on construction."""
        mesh = make_triangle()
        assert mesh.bounds.max == (1.0, 1.0, 0.0)

    def test_empty_mesh(self):
        from yachtforge.webgl.schema import MeshData

        mesh = MeshData(mesh_id="empty")
        assert mesh.is_empty
        assert mesh.bounds is None

    def test_positions_array(self):
        arr = make_triangle().positions_array()
        assert arr.shape == (3, 3)
        assert arr.dtype == np.float64

    def test_mesh_data_to_dict(self):
        """Test MeshData serialization."""
        data = make_triangle("test").to_dict()

        assert data["mesh_id"] == "test"
        assert data["indices"] == [0, 1, 2]
        assert data["metadata"]["vertex_count"] == 3
        assert data["metadata"]["face_count"] == 1
        assert data["metadata"]["schema_version"] == "1.0.0"
        assert data["metadata"]["has_uvs"] is False
        assert "uvs" not in data

    def test_mesh_data_from_dict(self):
        """Test MeshData deserialization."""
        from yachtforge.webgl.schema import MeshData

        original = make_triangle("restored", uvs=[0, 0, 1, 0, 0.5, 1])
        mesh = MeshData.from_dict(original.to_dict())

        assert mesh.mesh_id == "restored"
        assert mesh.vertices == original.vertices
        assert mesh.uvs == original.uvs
        assert mesh.bounds == original.bounds


class TestBinaryFormat:
    """Tests for the packed binary format."""

    def test_header(self):
        """Test header layout."""
        import struct

        data = make_triangle().to_binary()
        magic, version, vertex_count, face_count, flags, reserved = struct.unpack(
            "<4sIIIII", data[:24]
        )

        assert magic == b"YFMS"
        assert version == 1
        assert vertex_count == 3
        assert face_count == 1
        assert flags == 0
        assert reserved == 0

    def test_size(self):
        """Test buffer sizes follow the header counts."""
        plain = make_triangle().to_binary()
        assert len(plain) == 24 + 9 * 4 + 3 * 4 + 9 * 4

        with_uvs = make_triangle(uvs=[0, 0, 1, 0, 0.5, 1]).to_binary()
        assert len(with_uvs) == len(plain) + 6 * 4

    def test_round_trip(self):
        """Test decoding restores buffers at float32 precision."""
        from yachtforge.webgl.schema import MeshData

        original = make_triangle(uvs=[0, 0, 1, 0, 0.5, 1])
        decoded = MeshData.from_binary(original.to_binary(), mesh_id="tri")

        assert decoded.indices == [0, 1, 2]
        assert decoded.vertices == pytest.approx(original.vertices)
        assert decoded.uvs == pytest.approx(original.uvs)
        assert decoded.mesh_id == "tri"

    def test_too_short(self):
        from yachtforge.webgl.schema import MeshData

        with pytest.raises(ValueError, match="too short"):
            MeshData.from_binary(b"YFMS")

    def test_bad_magic(self):
        from yachtforge.webgl.schema import MeshData

        data = b"GLTF" + make_triangle().to_binary()[4:]
        with pytest.raises(ValueError, match="magic"):
            MeshData.from_binary(data)

    def test_bad_version(self):
        import struct

        from yachtforge.webgl.schema import MeshData

        data = bytearray(make_triangle().to_binary())
        data[4:8] = struct.pack("<I", 9)
        with pytest.raises(ValueError, match="version"):
            MeshData.from_binary(bytes(data))


class TestPlacement:
    """Tests for rotation and mesh instances."""

    def test_rotation_identity(self):
        from yachtforge.webgl.schema import rotation_matrix

        assert np.allclose(rotation_matrix((0.0, 0.0, 0.0)), np.eye(3))

    def test_rotation_about_y(self):
        """Test +X rotates toward -Z for a positive Y angle."""
        from yachtforge.webgl.schema import rotation_matrix

        rotated = rotation_matrix((0.0, math.pi / 2, 0.0)) @ np.array([1.0, 0.0, 0.0])
        assert np.allclose(rotated, [0.0, 0.0, -1.0])

    def test_instance_world_positions(self):
        from yachtforge.webgl.schema import MeshInstance

        instance = MeshInstance(
            mesh=make_triangle(),
            position=(10.0, 0.0, 0.0),
            scale=(2.0, 2.0, 2.0),
        )
        world = instance.world_positions()
        assert np.allclose(world[1], [12.0, 0.0, 0.0])
        assert not instance.is_identity

    def test_identity_instance(self):
        from yachtforge.webgl.schema import MeshInstance

        instance = MeshInstance(mesh=make_triangle())
        assert instance.is_identity
        assert np.allclose(instance.world_positions(), make_triangle().positions_array())


class TestAssemblyData:
    """Tests for AssemblyData."""

    def test_add_and_counts(self):
        from yachtforge.webgl.schema import AssemblyData

        tri = make_triangle()
        assembly = AssemblyData(assembly_id="test")
        assembly.add(tri, "a")
        assembly.add(tri, "b", position=(0, 0, 5))

        assert assembly.part_count == 2
        assert assembly.vertex_count == 6
        assert assembly.face_count == 2
        assert len(assembly.unique_meshes()) == 1

    def test_name_defaults_to_mesh_id(self):
        from yachtforge.webgl.schema import AssemblyData

        assembly = AssemblyData()
        part = assembly.add(make_triangle("fin"))
        assert part.name == "fin"

    def test_bounds_in_assembly_space(self):
        from yachtforge.webgl.schema import AssemblyData

        assembly = AssemblyData()
        assembly.add(make_triangle(), position=(0, 0, -3))
        assembly.add(make_triangle(), position=(0, 0, 3))

        bounds = assembly.bounds()
        assert bounds.min[2] == -3.0
        assert bounds.max[2] == 3.0

    def test_empty_bounds(self):
        from yachtforge.webgl.schema import AssemblyData

        assert AssemblyData().bounds() is None

    def test_extend_with_prefix(self):
        from yachtforge.webgl.schema import AssemblyData

        inner = AssemblyData()
        inner.add(make_triangle(), "deck")
        outer = AssemblyData()
        outer.extend(inner, prefix="top_")

        assert outer.parts[0].name == "top_deck"
        assert outer.parts[0].mesh is inner.parts[0].mesh

    def test_parts_named(self):
        from yachtforge.webgl.schema import AssemblyData

        assembly = AssemblyData()
        for name in ("blade_0", "blade_1", "shaft"):
            assembly.add(make_triangle(), name)
        assert [p.name for p in assembly.parts_named("blade_")] == ["blade_0", "blade_1"]

    def test_to_dict(self):
        from yachtforge.webgl.schema import AssemblyData

        assembly = AssemblyData(assembly_id="demo")
        assembly.add(make_triangle("tri"), "one", rotation=(0, math.pi, 0))
        data = assembly.to_dict()

        assert data["assembly_id"] == "demo"
        assert list(data["meshes"]) == ["tri"]
        assert data["parts"][0]["mesh_id"] == "tri"
        assert data["parts"][0]["rotation"] == [0.0, math.pi, 0.0]
        assert data["metadata"]["part_count"] == 1
