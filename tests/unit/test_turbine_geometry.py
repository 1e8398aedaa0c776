"""
Unit tests for yachtforge/turbine section, airfoil and style helpers.
"""

import math

import pytest

from yachtforge.turbine import (
    DEFAULT_BLADE_SECTION,
    DEFAULT_BLADE_SECTIONS,
    RADIAL_OFFSETS,
    AirfoilType,
    BladeConfig,
    BladeSection,
    BladeStyle,
    HubConfig,
    HubType,
    SupportArmConfig,
    SupportArmType,
    TurbineConfig,
    airfoil_profile,
    camber_line,
    naca_half_thickness,
    radial_offset,
    sample_section,
    section_value,
)


class TestTurbineConfig:
    """Test turbine configuration records."""

    def test_defaults(self):
        config = TurbineConfig()
        assert config.height == 8.0
        assert config.diameter == 2.0
        assert config.blade_count == 3
        assert config.blade.style == BladeStyle.HELIX
        assert config.blade.sections == DEFAULT_BLADE_SECTIONS
        assert config.radius == 1.0

    @pytest.mark.parametrize("count", [0, -3])
    def test_blade_count_clamped(self, count):
        assert TurbineConfig(blade_count=count).blade_count == 1

    def test_unknown_enums_fall_back(self):
        config = TurbineConfig(
            blade=BladeConfig(style="propeller", airfoil="wing"),
            hub=HubConfig(type="pyramid"),
            support_arms=SupportArmConfig(type="rope"),
        )
        assert config.blade.style == BladeStyle.HELIX
        assert config.blade.airfoil == AirfoilType.SYMMETRIC
        assert config.hub.type == HubType.CYLINDER
        assert config.support_arms.type == SupportArmType.STRAIGHT

    def test_from_dict_sections(self):
        config = TurbineConfig.from_dict({
            "height": 6,
            "blade": {
                "style": "darrieus",
                "sections": [
                    {"position": 0.0, "width": 0.5, "offset": {"x": 0.3, "y": 0.0}},
                    {"position": 1.0, "width": 0.7},
                ],
            },
        })
        assert config.height == 6
        assert config.diameter == 2.0
        assert config.blade.style == BladeStyle.DARRIEUS
        assert len(config.blade.sections) == 2
        assert config.blade.sections[0].offset == (0.3, 0.0)

    def test_to_dict_round_trip(self, turbine_config):
        restored = TurbineConfig.from_dict(turbine_config.to_dict())
        assert restored.blade.sections == turbine_config.blade.sections
        assert restored.hub == turbine_config.hub

    def test_arms_enabled(self):
        assert not SupportArmConfig().enabled
        assert not SupportArmConfig(count=2, type="hidden").enabled
        assert SupportArmConfig(count=2, type="straight").enabled

    def test_swept_area(self, turbine_config):
        assert turbine_config.swept_area == 16.0


class TestSections:
    """Test blade section blending."""

    def test_values_at_sections(self):
        assert section_value(DEFAULT_BLADE_SECTIONS, 0.0, "width") == 1.0
        assert section_value(DEFAULT_BLADE_SECTIONS, 0.5, "width") == 1.2
        assert section_value(DEFAULT_BLADE_SECTIONS, 1.0, "pitch") == -5.0

    def test_smooth_blend_midway(self):
        assert abs(section_value(DEFAULT_BLADE_SECTIONS, 0.25, "width") - 1.1) < 1e-12

    def test_no_sections_use_default(self):
        assert section_value((), 0.3, "thickness") == DEFAULT_BLADE_SECTION.thickness
        assert section_value((), 0.3, "leading_edge") == 0.3

    def test_single_section_constant(self):
        sections = (BladeSection(position=0.2, width=0.6),)
        assert section_value(sections, 0.9, "width") == 0.6

    def test_sample_section(self):
        section = sample_section(DEFAULT_BLADE_SECTIONS, 0.5)
        assert section.position == 0.5
        assert section.width == 1.2
        assert section.pitch == 0.0


class TestAirfoil:
    """Test airfoil profile generation."""

    def test_naca_thickness(self):
        assert naca_half_thickness(0.0, 0.12) == 0.0
        assert abs(naca_half_thickness(0.3, 0.12) - 0.06) < 1e-3

    def test_camber_line(self):
        assert camber_line(0.5, 0.1) == 0.1
        assert camber_line(0.0, 0.1) == 0.0

    def test_point_count(self):
        assert len(airfoil_profile(1.0, 0.12, 0.0, 0.3, 0.7, 12)) == 26
        assert len(airfoil_profile(1.0, 0.12, 0.0, 0.3, 0.7, 6)) == 14

    def test_chord_centered(self):
        points = airfoil_profile(2.0, 0.12, 0.0, 0.3, 0.7, 8)
        xs = [x for x, _ in points]
        assert min(xs) == -1.0
        assert max(xs) == 1.0
        assert points[0] == (-1.0, 0.0)

    def test_symmetric_with_full_rounding(self):
        """Zero camber and unit edge factors mirror upper and lower surfaces."""
        res = 10
        points = airfoil_profile(1.0, 0.15, 0.0, 1.0, 1.0, res)
        for i in range(res + 1):
            upper = points[i]
            lower = points[2 * res + 1 - i]
            assert upper[0] == lower[0]
            assert abs(upper[1] + lower[1]) < 1e-12

    def test_upper_above_lower(self):
        res = 10
        points = airfoil_profile(1.0, 0.12, 0.05, 0.3, 0.7, res)
        for i in range(1, res):
            assert points[i][1] > points[2 * res + 1 - i][1]

    def test_camber_lifts_profile(self):
        flat = airfoil_profile(1.0, 0.12, 0.0, 0.3, 0.7, 8)
        cambered = airfoil_profile(1.0, 0.12, 0.1, 0.3, 0.7, 8)
        assert cambered[4][1] > flat[4][1]

    def test_minimum_resolution(self):
        assert len(airfoil_profile(1.0, 0.12, 0.0, 0.3, 0.7, 0)) == 4


class TestRadialOffsets:
    """Test style radial offset curves."""

    def test_every_style_except_custom(self):
        assert set(RADIAL_OFFSETS) == set(BladeStyle) - {BladeStyle.CUSTOM}

    def test_constant_styles(self):
        assert radial_offset(BladeStyle.HELIX, 0.3, 2.0) == 0.9
        assert radial_offset(BladeStyle.H_ROTOR, 0.7, 2.0) == 0.95

    def test_custom_default(self):
        assert radial_offset(BladeStyle.CUSTOM, 0.5, 2.0) == 0.85

    def test_darrieus_bulges(self):
        assert abs(radial_offset(BladeStyle.DARRIEUS, 0.5, 2.0) - 1.0) < 1e-12
        assert abs(radial_offset(BladeStyle.DARRIEUS, 0.0, 2.0) - 0.3) < 1e-12

    def test_troposkein(self):
        assert abs(radial_offset(BladeStyle.TROPOSKEIN, 0.5, 2.0) - 0.95) < 1e-12
        assert abs(radial_offset(BladeStyle.TROPOSKEIN, 0.0, 2.0) - 0.35) < 1e-12

    @pytest.mark.parametrize("style", list(BladeStyle))
    def test_offsets_positive(self, style):
        for i in range(11):
            assert radial_offset(style, i / 10, 2.0) > 0.0
