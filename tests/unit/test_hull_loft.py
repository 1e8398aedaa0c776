"""
Unit tests for yachtforge/hull_gen lofting and assembly.

Every lofted hull must be a closed, consistently wound shell.
"""

import pytest

from yachtforge.hull_gen import (
    BowConfig,
    BowType,
    ChineConfig,
    ChineType,
    DeckConfig,
    HullCategory,
    HullConfig,
    KeelConfig,
    KeelType,
    SternConfig,
    SternType,
    generate_catamaran_hulls,
    generate_complete_hull,
    generate_deck,
    generate_hull,
    generate_trimaran_hulls,
    loft_hull,
)
from yachtforge.webgl.mesh_builder import (
    boundary_edges,
    inconsistent_edges,
    is_closed,
    mesh_issues,
    non_manifold_edges,
    signed_volume,
)


def assert_closed_shell(mesh):
    assert boundary_edges(mesh) == []
    assert non_manifold_edges(mesh) == []
    assert inconsistent_edges(mesh) == []
    assert mesh_issues(mesh) == []


class TestLoftHull:
    """Test hull lofting."""

    def test_default_hull_closed(self, hull_config):
        mesh = loft_hull(hull_config, 16, 8)
        assert_closed_shell(mesh)
        assert is_closed(mesh)
        assert signed_volume(mesh) > 0

    def test_vertex_and_face_counts(self, hull_config):
        n_long, n_trans = 10, 6
        mesh = loft_hull(hull_config, n_long, n_trans)

        # Two halves plus two cap centres
        assert mesh.vertex_count == 2 * (n_long + 1) * (n_trans + 1) + 2
        sides = 2 * 2 * n_long * n_trans
        bridges = 4 * n_long
        caps = 2 * 2 * (n_trans + 1)
        assert mesh.face_count == sides + bridges + caps

    def test_dimensions(self, hull_config):
        mesh = loft_hull(hull_config, 16, 8)
        lo, hi = mesh.bounds.min, mesh.bounds.max

        assert abs(lo[0] + hull_config.length / 2) < 1e-9
        assert abs(hi[0] - hull_config.length / 2) < 1e-9
        assert abs(hi[2] - hull_config.beam / 2) < 1e-6
        assert abs(lo[2] + hull_config.beam / 2) < 1e-6
        assert hi[1] <= hull_config.freeboard + 1e-9

    def test_mirror_symmetric(self, hull_config):
        mesh = loft_hull(hull_config, 8, 4)
        zs = sorted(round(mesh.vertex(i)[2], 9) for i in range(mesh.vertex_count))
        mirrored = sorted(round(-z, 9) for z in zs)
        assert zs == mirrored

    def test_uvs_present(self, hull_config):
        mesh = loft_hull(hull_config, 4, 4)
        assert mesh.uvs is not None
        assert len(mesh.uvs) == mesh.vertex_count * 2

    @pytest.mark.parametrize("segments", [(0, 8), (8, 0), (-1, -1)])
    def test_placeholder_for_no_segments(self, hull_config, segments):
        mesh = loft_hull(hull_config, *segments)
        assert mesh.vertex_count == 8
        assert mesh.face_count == 12
        assert is_closed(mesh)

    @pytest.mark.parametrize("bow_type", list(BowType))
    def test_every_bow_closed(self, hull_config, bow_type):
        config = hull_config.with_field("bow", BowConfig(type=bow_type))
        assert_closed_shell(loft_hull(config, 12, 6))

    @pytest.mark.parametrize("stern_type", list(SternType))
    def test_every_stern_closed(self, hull_config, stern_type):
        config = hull_config.with_field("stern", SternConfig(type=stern_type))
        assert_closed_shell(loft_hull(config, 12, 6))

    @pytest.mark.parametrize("keel_type", list(KeelType))
    def test_every_keel_closed(self, hull_config, keel_type):
        config = hull_config.with_field("keel", KeelConfig(type=keel_type, depth=0.5))
        assert_closed_shell(loft_hull(config, 12, 6))

    @pytest.mark.parametrize("chine_type", list(ChineType))
    def test_every_chine_closed(self, hull_config, chine_type):
        config = hull_config.with_field("chine", ChineConfig(type=chine_type, count=2))
        assert_closed_shell(loft_hull(config, 12, 6))

    def test_user_curves_closed(self, hull_config):
        from yachtforge.hull_gen import (
            DEFAULT_BUTTOCK_PROFILE,
            DEFAULT_WATERLINE_PROFILE,
            default_cross_section,
        )

        config = HullConfig(
            waterline_profile=DEFAULT_WATERLINE_PROFILE,
            buttock_profile=DEFAULT_BUTTOCK_PROFILE,
            cross_sections=(default_cross_section(4), default_cross_section(6)),
        )
        assert_closed_shell(loft_hull(config, 12, 6))


class TestMultihulls:
    """Test catamaran and trimaran assemblies."""

    def test_catamaran_parts(self, low_detail):
        config = HullConfig(category=HullCategory.CATAMARAN)
        assembly = generate_catamaran_hulls(config, detail=low_detail)

        names = [p.name for p in assembly.parts]
        assert names == ["hull_port", "hull_starboard", "cross_beam_fore", "cross_beam_aft"]

    def test_catamaran_hulls_share_mesh(self, low_detail):
        config = HullConfig(category=HullCategory.CATAMARAN)
        assembly = generate_catamaran_hulls(config, detail=low_detail)

        port, starboard = assembly.parts[0], assembly.parts[1]
        assert port.mesh is starboard.mesh
        assert port.position == (0.0, 0.0, -config.beam * 0.4)
        assert starboard.position == (0.0, 0.0, config.beam * 0.4)
        assert_closed_shell(port.mesh)

    def test_catamaran_spacing_override(self, low_detail):
        config = HullConfig(category=HullCategory.CATAMARAN)
        assembly = generate_catamaran_hulls(config, hull_spacing=0.5, detail=low_detail)
        assert assembly.parts[1].position[2] == config.beam * 0.5

    def test_catamaran_hull_is_narrow(self, low_detail):
        config = HullConfig(category=HullCategory.CATAMARAN)
        hull = generate_catamaran_hulls(config, detail=low_detail).parts[0].mesh
        width = hull.bounds.size[2]
        assert abs(width - config.beam * 0.3) < 1e-6

    def test_trimaran_parts(self, low_detail):
        config = HullConfig(category=HullCategory.TRIMARAN)
        assembly = generate_trimaran_hulls(config, detail=low_detail)

        names = [p.name for p in assembly.parts]
        assert names[:3] == ["hull_main", "ama_port", "ama_starboard"]
        assert len(assembly.parts_named("aka_")) == 4
        assert assembly.parts[1].mesh is assembly.parts[2].mesh

    def test_trimaran_ama_scale(self, low_detail):
        config = HullConfig(category=HullCategory.TRIMARAN)
        ama = generate_trimaran_hulls(config, detail=low_detail).parts[1].mesh
        assert abs(ama.bounds.size[0] - config.length * config.ama_scale) < 1e-6
        assert_closed_shell(ama)

    def test_generate_hull_dispatch(self, low_detail):
        assert generate_hull(HullConfig(), low_detail).assembly_id == "monohull"
        cat = generate_hull(HullConfig(category="catamaran"), low_detail)
        assert cat.assembly_id == "catamaran"
        tri = generate_hull(HullConfig(category="trimaran"), low_detail)
        assert tri.assembly_id == "trimaran"


class TestDeck:
    """Test deck generation."""

    def test_plain_deck(self, hull_config):
        assembly = generate_deck(hull_config)
        assert [p.name for p in assembly.parts] == ["deck"]
        assert is_closed(assembly.parts[0].mesh)

    def test_coach_roof_and_windshield(self, hull_config):
        config = hull_config.with_field("deck", DeckConfig(coach_roof=True))
        names = [p.name for p in generate_deck(config).parts]
        assert names == ["deck", "coach_roof", "windshield"]

    def test_deck_sits_above_waterline(self, hull_config):
        bounds = generate_deck(hull_config).bounds()
        assert bounds.min[1] >= hull_config.draft + 0.3 - 1e-9

    def test_multihull_deck_wider(self, hull_config):
        mono = generate_deck(hull_config).bounds()
        cat = generate_deck(hull_config.with_field("category", HullCategory.CATAMARAN)).bounds()
        assert cat.size[2] > mono.size[2]


class TestCompleteHull:
    """Test the full hull pipeline."""

    def test_monohull(self, hull_config, low_detail):
        assembly = generate_complete_hull(hull_config, low_detail)
        assert assembly.assembly_id == "hull_monohull"
        assert [p.name for p in assembly.parts] == ["hull", "deck"]

    def test_uses_settings_detail(self, hull_config, monkeypatch):
        from yachtforge.core.config import reset_settings

        monkeypatch.setenv("YACHTFORGE_DETAIL_LEVEL", "low")
        reset_settings()

        hull = generate_complete_hull(hull_config).parts[0].mesh
        assert hull.vertex_count == 2 * 17 * 9 + 2
