"""
Unit tests for yachtforge/physics/stability.py and summary.py
"""

import math

import pytest

from yachtforge.physics import (
    DEFAULT_YACHT,
    HullDimensions,
    HullSpec,
    HullType,
    RotorSpec,
    SolarConfig,
    StabilityRating,
    YachtDesign,
    calculate_design_stats,
    calculate_foil_takeoff_speed,
    calculate_hull_speed,
    calculate_metacentric_height,
    calculate_roll_period,
    calculate_stability,
    get_hull_performance_summary,
)


class TestMetacentricHeight:
    """Test GM estimates."""

    def test_monohull(self, monohull_dimensions):
        """GM = (KB + BM - KG) x 0.8 for a 12 x 4 m monohull of 4 t."""
        kb = 0.53
        bm = (12 * 4 ** 3 / 12) / (4000 / 1025)
        kg = 0.6 + 1.5
        expected = (kb + bm - kg) * 0.8

        gm = calculate_metacentric_height("monohull", monohull_dimensions)
        assert abs(gm - expected) < 1e-9
        assert abs(gm - 11.864) < 1e-9

    def test_catamaran_beam_ratio(self, catamaran_dimensions):
        assert calculate_metacentric_height("catamaran", catamaran_dimensions) == 6 * 0.4

    def test_trimaran_beam_ratio(self, catamaran_dimensions):
        assert calculate_metacentric_height(HullType.TRIMARAN, catamaran_dimensions) == 6 * 0.5

    def test_hydrofoil_uses_formula(self, monohull_dimensions):
        mono = calculate_metacentric_height("monohull", monohull_dimensions)
        foil = calculate_metacentric_height("hydrofoil", monohull_dimensions)
        assert abs(foil - mono / 0.8 * 0.6) < 1e-9


class TestRollPeriod:
    """Test natural roll period."""

    def test_formula(self):
        k = 4 / 2.4
        expected = 2 * math.pi * math.sqrt(k * k / (9.81 * 2.0))
        assert abs(calculate_roll_period(4.0, 2.0) - expected) < 1e-12

    @pytest.mark.parametrize("gm", [0.0, -1.0, 0.05])
    def test_gm_floor(self, gm):
        assert calculate_roll_period(4.0, gm) == calculate_roll_period(4.0, 0.1)

    def test_stiffer_rolls_faster(self):
        assert calculate_roll_period(4.0, 3.0) < calculate_roll_period(4.0, 1.0)


class TestCalculateStability:
    """Test the stability summary."""

    def test_monohull(self, monohull_dimensions):
        result = calculate_stability("monohull", monohull_dimensions)
        assert abs(result.metacentric_height - 11.864) < 1e-9
        assert result.max_safe_heel_angle == 45.0
        assert result.stability_index == 100.0
        assert abs(result.pitch_stability - 86.0) < 1e-9
        assert result.overall_rating == StabilityRating.EXCELLENT

    def test_catamaran(self, catamaran_dimensions):
        result = calculate_stability("catamaran", catamaran_dimensions)
        assert abs(result.metacentric_height - 2.4) < 1e-12
        assert abs(result.pitch_stability - 77.0) < 1e-9
        assert result.overall_rating == "Excellent"

    def test_low_gm_limits_heel(self):
        dims = HullDimensions(length=10, beam=0.5, draft=1.0, displacement=5000)
        result = calculate_stability("catamaran", dims)
        assert abs(result.max_safe_heel_angle - (15 + 0.2 * 20)) < 1e-9

    def test_indices_clamped(self):
        dims = HullDimensions(length=30, beam=1.0, draft=3.0, displacement=50000)
        result = calculate_stability("monohull", dims)
        assert 0.0 <= result.stability_index <= 100.0
        assert 0.0 <= result.pitch_stability <= 100.0

    @pytest.mark.parametrize("field", ["length", "beam", "displacement"])
    def test_zero_dimension(self, field):
        values = {"length": 12.0, "beam": 3.0, "draft": 1.5, "displacement": 4000.0}
        values[field] = 0.0
        result = calculate_stability("monohull", HullDimensions(**values))
        assert math.isfinite(result.metacentric_height)
        assert math.isfinite(result.roll_period)
        assert 0.0 <= result.stability_index <= 100.0
        assert 0.0 <= result.pitch_stability <= 100.0

    def test_zero_displacement_drops_bm(self):
        dims = HullDimensions(length=12.0, beam=3.0, draft=1.5, displacement=0.0)
        expected = (1.5 * 0.53 - (1.5 * 0.6 + 1.5)) * 0.8
        assert abs(calculate_metacentric_height("monohull", dims) - expected) < 1e-9

    def test_to_dict(self, monohull_dimensions):
        data = calculate_stability("monohull", monohull_dimensions).to_dict()
        assert data["metacentric_height"] == 11.864
        assert data["overall_rating"] == "Excellent"


class TestStabilityRating:
    """Test rating thresholds."""

    @pytest.mark.parametrize("average,rating", [
        (95.0, "Excellent"),
        (80.0, "Excellent"),
        (79.9, "Good"),
        (60.0, "Good"),
        (45.0, "Fair"),
        (39.9, "Poor"),
        (0.0, "Poor"),
    ])
    def test_thresholds(self, average, rating):
        assert StabilityRating.from_index(average) == rating


class TestSpeeds:
    """Test hull speed and foil takeoff."""

    def test_hull_speed(self):
        expected = 1.34 * math.sqrt(12 * 3.281) * 0.5144
        assert abs(calculate_hull_speed(12.0) - expected) < 1e-12

    def test_longer_hulls_faster(self):
        assert calculate_hull_speed(20.0) > calculate_hull_speed(10.0)

    def test_foil_takeoff(self):
        expected = math.sqrt(2 * 4000 * 9.81 / (1025 * 0.8 * 2.0))
        assert abs(calculate_foil_takeoff_speed(4000) - expected) < 1e-12
        assert abs(expected - 6.9176) < 1e-4

    def test_bigger_foil_lifts_sooner(self):
        assert calculate_foil_takeoff_speed(4000, 4.0) < calculate_foil_takeoff_speed(4000)

    def test_degenerate_inputs(self):
        assert calculate_foil_takeoff_speed(4000, 0.0) == 0.0
        assert calculate_foil_takeoff_speed(-10.0) == 0.0
        assert calculate_hull_speed(-1.0) == 0.0


class TestPerformanceSummary:
    """Test the combined hull summary."""

    def test_monohull(self, monohull_dimensions):
        summary = get_hull_performance_summary("monohull", "piercing", monohull_dimensions)

        drag_score = max(0.0, 100 - summary.drag.total_drag / 100)
        expected = drag_score * 0.5 + summary.stability.stability_index * 0.5
        assert abs(summary.performance_score - expected) < 1e-9
        assert summary.foil_takeoff_speed is None

    def test_hydrofoil_reports_takeoff(self, monohull_dimensions):
        summary = get_hull_performance_summary("hydrofoil", "bulbous", monohull_dimensions)
        assert abs(summary.foil_takeoff_speed - calculate_foil_takeoff_speed(4000)) < 1e-12

    def test_drag_at_test_speed(self, monohull_dimensions):
        summary = get_hull_performance_summary("monohull", "piercing", monohull_dimensions)
        assert abs(summary.drag.form_drag - 19603.125) < 1e-6

    def test_to_dict(self, monohull_dimensions):
        data = get_hull_performance_summary("monohull", "piercing", monohull_dimensions).to_dict()
        assert data["foil_takeoff_speed"] is None
        assert "drag" in data and "stability" in data


class TestDesignStats:
    """Test builder design statistics."""

    def test_default_yacht(self):
        stats = calculate_design_stats(DEFAULT_YACHT)

        assert abs(stats.drag_coefficient - 0.085) < 1e-12
        assert abs(stats.stability - 27.2) < 1e-9
        assert abs(stats.max_speed - math.sqrt(100 / 0.085)) < 1e-9
        assert abs(stats.turbine_efficiency - 0.25) < 1e-12
        assert abs(stats.solar_output - 1.7) < 1e-12
        assert abs(stats.range - 75 / 0.775 * 10) < 1e-9

    def test_hydrofoil_speed_bonus(self):
        design = DEFAULT_YACHT.with_field("hull", HullSpec(type="hydrofoil"))
        stats = calculate_design_stats(design)
        dc = 0.3 * (4 / 12) * 0.5
        assert abs(stats.max_speed - math.sqrt(100 / dc) * 1.5) < 1e-9

    def test_blade_count_bonus_capped(self):
        design = DEFAULT_YACHT.with_field("rotor", RotorSpec(blade_count=6))
        assert abs(calculate_design_stats(design).turbine_efficiency - 0.25 * 1.2) < 1e-12

    def test_range_consumption_floor(self):
        """Strong generation cannot push net consumption below 0.5 kW."""
        design = YachtDesign(
            solar=SolarConfig(deck_coverage=100.0, turbine_integrated=True),
            rotor=RotorSpec(blade_count=6),
        )
        stats = calculate_design_stats(design)
        assert abs(stats.range - 75 / 0.5 * 10) < 1e-9

    def test_to_dict(self):
        data = calculate_design_stats(DEFAULT_YACHT).to_dict()
        assert data["drag_coefficient"] == 0.085
        assert data["range"] == 967.7

    def test_zero_length_hull(self):
        design = DEFAULT_YACHT.with_field("hull", HullSpec(length=0.0))
        stats = calculate_design_stats(design)
        assert stats.drag_coefficient == 0.0
        assert stats.max_speed == 0.0
        assert math.isfinite(stats.range)
