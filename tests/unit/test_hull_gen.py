"""
Unit tests for yachtforge/hull_gen shape tables and cross-sections.
"""

import math

import pytest

from yachtforge.hull_gen import (
    BOW_SHAPES,
    CHINE_SCALES,
    KEEL_SHAPES,
    STERN_SHAPES,
    BowConfig,
    BowType,
    ChineConfig,
    ChineType,
    CrossSection,
    HullCategory,
    HullConfig,
    KeelConfig,
    KeelType,
    SternConfig,
    SternType,
    bow_profile,
    chine_scale,
    create_default_config,
    default_cross_section,
    generate_cross_section,
    keel_depth,
    region_multipliers,
    stern_profile,
)
from yachtforge.hull_gen.shapes import MIN_HEIGHT, MIN_WIDTH, keel_window


class TestHullConfig:
    """Test hull configuration records."""

    def test_defaults(self):
        config = HullConfig()
        assert config.length == 12.0
        assert config.beam == 4.0
        assert config.draft == 0.8
        assert config.freeboard == 1.2
        assert config.category == HullCategory.MONOHULL
        assert not config.is_multihull

    def test_unknown_enums_fall_back(self):
        config = HullConfig(
            category="submarine",
            bow=BowConfig(type="ram"),
            stern=SternConfig(type="square"),
            keel=KeelConfig(type="banana"),
        )
        assert config.category == HullCategory.MONOHULL
        assert config.bow.type == BowType.PIERCING
        assert config.stern.type == SternType.TRANSOM
        assert config.keel.type == KeelType.V_HULL

    def test_from_dict_partial(self):
        config = HullConfig.from_dict({
            "length": 15,
            "category": "trimaran",
            "bow": {"type": "axe"},
            "waterline_profile": [{"x": -0.5, "y": 0.2}, {"x": 0.5, "y": 0.3}],
        })
        assert config.length == 15
        assert config.beam == 4.0
        assert config.category == HullCategory.TRIMARAN
        assert config.bow.type == BowType.AXE
        assert config.bow.angle == 25.0
        assert config.waterline_profile == ((-0.5, 0.2), (0.5, 0.3))

    def test_to_dict_round_trip(self):
        config = HullConfig(
            category=HullCategory.CATAMARAN,
            cross_sections=(default_cross_section(3),),
        )
        restored = HullConfig.from_dict(config.to_dict())
        assert restored.category == HullCategory.CATAMARAN
        assert len(restored.cross_sections) == 1
        assert abs(restored.cross_sections[0].position - 0.3) < 1e-9

    def test_scaled(self):
        config = HullConfig()
        sub = config.scaled(beam=1.2)
        assert sub.beam == 1.2
        assert sub.length == config.length
        assert sub.bow == config.bow

    def test_positions_clamped(self):
        keel = KeelConfig(position=1.7, length=-0.2)
        assert keel.position == 1.0
        assert keel.length == 0.0

    def test_chine_count_clamped(self):
        assert ChineConfig(count=9).count == 4
        assert ChineConfig(count=-1).count == 0

    def test_create_default_config(self):
        config = create_default_config(HullCategory.CATAMARAN)
        assert config.category == HullCategory.CATAMARAN
        assert config.is_multihull


class TestShapeTables:
    """Test the bow, stern, keel and chine strategy tables."""

    def test_tables_cover_enums(self):
        assert set(BOW_SHAPES) == set(BowType)
        assert set(STERN_SHAPES) == set(SternType)
        assert set(KEEL_SHAPES) == set(KeelType)
        assert set(CHINE_SCALES) == set(ChineType) - {ChineType.NONE}

    @pytest.mark.parametrize("bow_type", list(BowType))
    @pytest.mark.parametrize("t", [0.0, 0.5, 1.0])
    def test_bow_profile_minimums(self, bow_type, t):
        width, height = bow_profile(BowConfig(type=bow_type), t)
        assert width >= MIN_WIDTH
        assert height >= MIN_HEIGHT

    @pytest.mark.parametrize("stern_type", list(SternType))
    @pytest.mark.parametrize("t", [0.0, 0.5, 1.0])
    def test_stern_profile_minimums(self, stern_type, t):
        width, height = stern_profile(SternConfig(type=stern_type), t)
        assert width >= MIN_WIDTH
        assert height >= MIN_HEIGHT

    def test_piercing_bow_tip_collapses(self):
        width, height = bow_profile(BowConfig(type=BowType.PIERCING), 1.0)
        assert width == MIN_WIDTH
        assert abs(height - 0.7) < 1e-12

    def test_entry_angle_narrows_bow(self):
        blunt = bow_profile(BowConfig(type=BowType.PLUMB, angle=10), 0.5)[0]
        fine = bow_profile(BowConfig(type=BowType.PLUMB, angle=50), 0.5)[0]
        assert fine < blunt

    def test_transom_width(self):
        width, _ = stern_profile(SternConfig(type=SternType.TRANSOM, width=0.8), 1.0)
        assert abs(width - 0.8) < 1e-12

    def test_keel_window(self):
        keel = KeelConfig(position=0.5, length=0.6)
        assert keel_window(keel, 0.1) == 0.0
        assert keel_window(keel, 0.9) == 0.0
        assert keel_window(keel, 0.5) == 1.0
        assert 0.0 < keel_window(keel, 0.25) < 1.0

    def test_keel_depth_outside_window(self):
        keel = KeelConfig(type=KeelType.DEEP_V, position=0.5, length=0.4)
        assert keel_depth(keel, 0.0, 0.05) == 0.0

    def test_flat_keel(self):
        keel = KeelConfig(type=KeelType.FLAT)
        assert keel_depth(keel, 0.0, 0.5) == 0.0

    def test_v_hull_keel(self):
        keel = KeelConfig(type=KeelType.V_HULL, depth=0.3)
        assert abs(keel_depth(keel, 0.0, 0.5) - 0.3) < 1e-12

    def test_chine_none(self):
        assert chine_scale(ChineConfig(type=ChineType.NONE), 0.4) == 1.0

    def test_chine_band(self):
        hard = ChineConfig(type=ChineType.HARD, count=1, positions=(0.4,), angles=(15.0,))
        assert chine_scale(hard, 0.4) > 1.0
        assert chine_scale(hard, 0.8) == 1.0

        reverse = hard.with_field("type", ChineType.REVERSE)
        assert chine_scale(reverse, 0.4) < 1.0

    def test_chine_zero_entries_use_defaults(self):
        chine = ChineConfig(type=ChineType.HARD, count=1, positions=(0.0,), angles=(0.0,))
        expected = 1 + math.tan(math.radians(15.0)) * 0.05
        assert abs(chine_scale(chine, 0.5) - expected) < 1e-12
        assert chine_scale(chine, 0.0) == 1.0

    def test_chine_count_beyond_lists(self):
        """Missing entries fall back to the defaults."""
        chine = ChineConfig(type=ChineType.SOFT, count=2, positions=(0.2,), angles=(10.0,))
        assert chine_scale(chine, 0.5) > 1.0


class TestCrossSections:
    """Test station cross-section generation."""

    def test_point_count(self, hull_config):
        assert len(generate_cross_section(hull_config, 0.5, 16)) == 17
        assert len(generate_cross_section(hull_config, 0.5, 4)) == 5

    def test_midship_extent(self, hull_config):
        points = generate_cross_section(hull_config, 0.5, 16)
        assert points[0][0] == 0.0
        assert abs(points[-1][0] - hull_config.beam / 2) < 1e-9
        assert abs(points[-1][1] - hull_config.freeboard) < 1e-9

    def test_keel_below_draft(self, hull_config):
        points = generate_cross_section(hull_config, 0.5, 16)
        assert points[0][1] <= -hull_config.draft

    def test_bow_narrower_than_midship(self, hull_config):
        bow = generate_cross_section(hull_config, 0.0, 16)
        mid = generate_cross_section(hull_config, 0.5, 16)
        assert bow[-1][0] < mid[-1][0]

    def test_midship_multipliers(self, hull_config):
        assert region_multipliers(hull_config, 0.5) == (1.0, 1.0)

    def test_waterline_profile_scales_width(self, hull_config):
        config = hull_config.with_field("waterline_profile", ((0.0, 0.5), (1.0, 0.5)))
        width, height = region_multipliers(config, 0.5)
        assert abs(width - 1.0) < 1e-12
        assert height == 1.0

    def test_buttock_profile_scales_height(self, hull_config):
        config = hull_config.with_field("buttock_profile", ((0.0, 1.0), (1.0, 1.0)))
        _, height = region_multipliers(config, 0.5)
        assert abs(height - 1.5) < 1e-12

    def test_cross_section_override(self, hull_config):
        override = CrossSection(position=0.5, profile=((0.0, 0.0), (0.3, 0.2)), beam_multiplier=1.5)
        config = hull_config.with_field("cross_sections", (override,))

        assert region_multipliers(config, 0.5)[0] == 1.5
        assert region_multipliers(config, 0.7)[0] == 1.0

    def test_override_without_profile_ignored(self, hull_config):
        override = CrossSection(position=0.5, profile=(), beam_multiplier=1.5)
        config = hull_config.with_field("cross_sections", (override,))
        assert region_multipliers(config, 0.5)[0] == 1.0
