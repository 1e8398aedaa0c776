"""
Unit tests for yachtforge/physics/wind.py and noise.py
"""

import math

import pytest

from yachtforge.physics import (
    WEATHER_PRESETS,
    NoiseGenerator,
    Weather,
    WindSystem,
    calculate_apparent_wind,
    calculate_wind_effect,
)
from yachtforge.physics.noise import build_permutation, fade


class TestNoise:
    """Test seeded gradient noise."""

    def test_permutation_doubled(self):
        perm = build_permutation(42)
        assert len(perm) == 512
        assert sorted(perm[:256]) == list(range(256))
        assert perm[:256] == perm[256:]

    def test_seed_determinism(self):
        assert build_permutation(7) == build_permutation(7)
        assert build_permutation(7) != build_permutation(8)

    @pytest.mark.parametrize("x", [0.0, 1.0, 17.0, 255.0, 300.0])
    def test_zero_at_integers(self, x):
        assert NoiseGenerator(42).noise1d(x) == 0.0

    def test_bounded(self):
        noise = NoiseGenerator(42)
        for i in range(1000):
            assert -1.0 <= noise.noise1d(i * 0.137) <= 1.0

    def test_continuous(self):
        noise = NoiseGenerator(3)
        assert abs(noise.noise1d(4.5) - noise.noise1d(4.5001)) < 1e-3

    def test_negative_input(self):
        value = NoiseGenerator(42).noise1d(-3.3)
        assert -1.0 <= value <= 1.0

    def test_fade(self):
        assert fade(0.0) == 0.0
        assert fade(1.0) == 1.0
        assert fade(0.5) == 0.5


class TestApparentWind:
    """Test apparent wind vector arithmetic."""

    def test_head_on_motion(self):
        """Sailing into the wind's source reduces apparent speed."""
        result = calculate_apparent_wind(10.0, 0.0, 10.0, 0.0)
        assert abs(result.speed - 4.86) < 1e-9
        assert abs(result.direction) < 1e-9

    def test_stationary_boat(self):
        result = calculate_apparent_wind(8.0, 270.0, 0.0, 45.0)
        assert abs(result.speed - 8.0) < 1e-9
        assert abs(result.direction - 270.0) < 1e-9

    def test_direction_in_range(self):
        for direction in range(0, 360, 30):
            result = calculate_apparent_wind(6.0, float(direction), 5.0, 120.0)
            assert 0.0 <= result.direction < 360.0


class TestWindEffect:
    """Test aerodynamic loads."""

    def test_beam_wind(self):
        effect = calculate_wind_effect(10.0, 90.0, 10.0, 4.0)
        assert abs(effect.lateral_force - 183.75) < 1e-9
        assert abs(effect.forward_force) < 1e-9
        assert abs(effect.heel_moment - 183.75 * 2.0 * 0.5) < 1e-9

    def test_head_wind(self):
        effect = calculate_wind_effect(10.0, 0.0, 10.0, 4.0)
        assert abs(effect.lateral_force) < 1e-12
        assert abs(effect.forward_force + 183.75 * 0.2) < 1e-9


class TestWindSystem:
    """Test the noise-driven wind system."""

    def test_defaults_from_settings(self):
        wind = WindSystem()
        assert wind.seed == 42
        assert wind.base_direction == 45.0
        assert wind.weather == Weather.TRADE_WINDS
        assert wind.time == 0.0

    def test_settings_seed(self, monkeypatch):
        from yachtforge.core.config import reset_settings

        monkeypatch.setenv("YACHTFORGE_WIND_SEED", "9")
        monkeypatch.setenv("YACHTFORGE_WEATHER", "storm")
        reset_settings()

        wind = WindSystem()
        assert wind.seed == 9
        assert wind.weather == Weather.STORM

    def test_trade_wind_speeds(self):
        wind = WindSystem(seed=42)
        for _ in range(200):
            state = wind.update(0.7, 0.0, 0.0)
            assert 10.0 <= state.speed <= 18.0

    def test_gusts_bounded(self):
        wind = WindSystem(seed=1, weather="storm")
        preset = WEATHER_PRESETS[Weather.STORM]
        for _ in range(100):
            state = wind.update(1.3, 0.0, 0.0)
            assert state.gust_speed <= state.speed * (1 + preset.gust_factor) + 1e-9
            assert state.gust_speed >= state.speed * (1 - preset.gust_factor) - 1e-9

    def test_direction_wraps(self):
        wind = WindSystem(seed=5, initial_direction=359.0, weather="doldrums")
        for _ in range(100):
            state = wind.update(2.0, 0.0, 0.0)
            assert 0.0 <= state.direction < 360.0

    def test_same_seed_replays(self):
        a = WindSystem(seed=11)
        b = WindSystem(seed=11)
        for _ in range(20):
            assert a.update(1.0, 5.0, 90.0) == b.update(1.0, 5.0, 90.0)

    def test_update_advances_clock(self):
        wind = WindSystem(seed=3)
        wind.update(2.5, 0.0, 0.0)
        wind.update(2.5, 0.0, 0.0)
        assert wind.time == 5.0
        assert wind.sample(5.0) == wind.sample(5.0)

    def test_set_base_direction(self):
        wind = WindSystem()
        wind.set_base_direction(370.0)
        assert wind.base_direction == 10.0
        wind.set_base_direction(-90.0)
        assert wind.base_direction == 270.0

    def test_set_weather(self):
        wind = WindSystem()
        wind.set_weather("doldrums")
        assert wind.preset.base_speed == (0.0, 3.0)
        wind.set_weather("hurricane")
        assert wind.weather == Weather.TRADE_WINDS

    def test_state_at_integer_time(self):
        """Noise vanishes on lattice points, leaving the preset midpoint."""
        wind = WindSystem(seed=42, initial_direction=90.0, weather="clear")
        state = wind.sample(0.0)
        assert state.speed == 5.5
        assert state.gust_speed == 5.5
        assert state.direction == 90.0

    def test_to_dict(self):
        data = WindSystem().update(1.0, 0.0, 0.0).to_dict()
        assert set(data) == {
            "direction", "speed", "gust_speed", "gust_factor",
            "apparent_direction", "apparent_speed",
        }

    def test_every_weather_has_preset(self):
        assert set(WEATHER_PRESETS) == set(Weather)
        for preset in WEATHER_PRESETS.values():
            assert preset.base_speed[0] <= preset.base_speed[1]
            assert math.isfinite(preset.gust_factor)
