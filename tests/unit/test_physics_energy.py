"""
Unit tests for yachtforge/physics/energy.py

Tests turbine and solar generation, consumption and battery bookkeeping.
"""

import math

import pytest

from yachtforge.physics import (
    BETZ_LIMIT,
    CUT_IN_SPEED,
    CUT_OUT_SPEED,
    BatteryConfig,
    RotorSpec,
    SolarConfig,
    Weather,
    calculate_motor_consumption,
    calculate_solar_power,
    calculate_systems_consumption,
    calculate_turbine_efficiency,
    calculate_turbine_power,
    get_cloud_multiplier,
    get_solar_multiplier,
    update_battery,
    update_energy_system,
)
from yachtforge.turbine import TurbineConfig


@pytest.fixture
def rotor():
    return RotorSpec()


@pytest.fixture
def battery():
    return BatteryConfig(capacity=100.0, current_charge=75.0)


class TestTurbineEfficiency:
    """Test the blade design power coefficient."""

    def test_default_rotor(self, rotor):
        expected = 0.28 * (1 - 7 / 180 * 0.3) * 0.98
        assert abs(calculate_turbine_efficiency(rotor) - expected) < 1e-12
        assert abs(expected - 0.27120) < 1e-5

    def test_capped_at_betz(self):
        extreme = RotorSpec(twist=52, taper=1.5, thickness=-2.0, camber=2.0)
        assert calculate_turbine_efficiency(extreme) == BETZ_LIMIT

    def test_three_blades_best(self):
        three = calculate_turbine_efficiency(RotorSpec(blade_count=3))
        two = calculate_turbine_efficiency(RotorSpec(blade_count=2))
        assert abs(two - three * 0.85) < 1e-12

    def test_unlisted_blade_count(self):
        three = calculate_turbine_efficiency(RotorSpec(blade_count=3))
        seven = calculate_turbine_efficiency(RotorSpec(blade_count=7))
        assert abs(seven - three * 0.88) < 1e-12

    def test_optimal_twist(self):
        assert calculate_turbine_efficiency(RotorSpec(twist=52)) > calculate_turbine_efficiency(RotorSpec(twist=0))

    def test_rotor_from_turbine_config(self):
        rotor = RotorSpec.from_turbine_config(TurbineConfig())
        assert rotor.height == 8.0
        assert rotor.twist == 45.0
        assert rotor.camber == 0.0
        assert rotor.swept_area == 16.0


class TestTurbinePower:
    """Test turbine output."""

    def test_power_formula(self, rotor):
        result = calculate_turbine_power(rotor, 8.0)
        expected = 0.5 * 1.225 * rotor.swept_area * 8.0 ** 3 * result.efficiency / 1000
        assert abs(result.mechanical_power - expected) < 1e-12
        assert abs(result.electrical_power - expected * 0.9) < 1e-12

    def test_rpm_capped(self, rotor):
        result = calculate_turbine_power(rotor, 10.0)
        assert result.tip_speed_ratio == 5.5
        assert result.rpm == 200.0

    def test_rpm_below_cap(self, rotor):
        result = calculate_turbine_power(rotor, 1.0)
        assert abs(result.rpm - 5.5 * 60 / (2 * math.pi)) < 1e-9

    @pytest.mark.parametrize("speed", [0.0, 2.4, 25.1, 40.0])
    def test_outside_operating_window(self, rotor, speed):
        assert calculate_turbine_power(rotor, speed).electrical_power == 0.0

    @pytest.mark.parametrize("speed", [CUT_IN_SPEED, 12.0, CUT_OUT_SPEED])
    def test_inside_operating_window(self, rotor, speed):
        assert calculate_turbine_power(rotor, speed).electrical_power > 0.0

    def test_mechanical_power_past_cut_out(self, rotor):
        assert calculate_turbine_power(rotor, 30.0).mechanical_power > 0.0

    def test_zero_diameter_rotor(self):
        result = calculate_turbine_power(RotorSpec(diameter=0.0), 10.0)
        assert result.rpm == 200.0
        assert result.mechanical_power == 0.0
        assert result.electrical_power == 0.0

    def test_zero_diameter_rotor_in_calm(self):
        assert calculate_turbine_power(RotorSpec(diameter=0.0), 0.0).rpm == 0.0


class TestSolar:
    """Test solar environment and panel output."""

    def test_noon(self):
        assert abs(get_solar_multiplier(0.5) - 1.0) < 1e-12

    @pytest.mark.parametrize("time_of_day", [0.0, 0.1, 0.25, 0.9])
    def test_dark(self, time_of_day):
        assert get_solar_multiplier(time_of_day) == 0.0

    def test_morning_weaker_than_noon(self):
        assert 0.0 < get_solar_multiplier(0.35) < get_solar_multiplier(0.5)

    @pytest.mark.parametrize("weather,expected", [
        (Weather.CLEAR, 1.0),
        ("storm", 0.15),
        ("trade-winds", 0.85),
        ("blizzard", 0.8),
    ])
    def test_cloud_multiplier(self, weather, expected):
        assert get_cloud_multiplier(weather) == expected

    def test_panel_area(self):
        result = calculate_solar_power(SolarConfig(), 12.0, 4.0, 0.5, "clear")
        assert abs(result.panel_area - (12 * 4 * 0.6 * 0.6 + 2.0)) < 1e-9

    def test_noon_clear_output(self):
        result = calculate_solar_power(SolarConfig(), 12.0, 4.0, 0.5, Weather.CLEAR)
        irradiance = 1361.0 * 0.7
        raw = irradiance * result.panel_area * 0.22 / 1000
        assert abs(result.irradiance - irradiance) < 1e-9
        assert abs(result.raw_power - raw) < 1e-9
        assert abs(result.electrical_power - raw * 0.95 * 0.92) < 1e-9

    def test_night_output(self):
        result = calculate_solar_power(SolarConfig(), 12.0, 4.0, 0.0, Weather.CLEAR)
        assert result.electrical_power == 0.0

    def test_no_integrated_panels(self):
        solar = SolarConfig(deck_coverage=0.0, turbine_integrated=False)
        assert calculate_solar_power(solar, 12.0, 4.0, 0.5, "clear").panel_area == 0.0


class TestConsumption:
    """Test motor and systems loads."""

    def test_motor(self):
        result = calculate_motor_consumption(50.0, 10.0, 1000.0)
        assert abs(result.mechanical_power - 2.57) < 1e-9
        assert abs(result.electrical_power - 2.57 / 0.92) < 1e-9

    def test_motor_capped(self):
        result = calculate_motor_consumption(100.0, 10.0, 10000.0)
        assert result.mechanical_power == 15.0

    def test_motor_idle(self):
        assert calculate_motor_consumption(0.0, 10.0, 1000.0).electrical_power == 0.0

    def test_systems(self):
        assert abs(calculate_systems_consumption(False, 0.5) - 0.15) < 1e-12
        assert abs(calculate_systems_consumption(False, 0.1) - 0.25) < 1e-12
        assert abs(calculate_systems_consumption(True, 0.5) - 0.45) < 1e-12


class TestBattery:
    """Test battery updates."""

    def test_discharge(self, battery):
        state = update_battery(battery, -10.0, 3600.0)
        assert abs(state.current_charge - 65.0) < 1e-9
        assert abs(state.charge_percent - 65.0) < 1e-9
        assert abs(state.time_to_empty - 6.5) < 1e-9
        assert state.time_to_full == math.inf

    def test_charge_with_losses(self, battery):
        state = update_battery(battery, 10.0, 3600.0)
        assert abs(state.current_charge - 84.5) < 1e-9
        assert abs(state.time_to_full - 15.5 / 9.5) < 1e-9
        assert state.time_to_empty == math.inf

    def test_clamped(self, battery):
        assert update_battery(battery, 1000.0, 3600.0).current_charge == 100.0
        assert update_battery(battery, -1000.0, 3600.0).current_charge == 0.0

    def test_idle(self, battery):
        state = update_battery(battery, 0.0, 60.0)
        assert state.current_charge == 75.0
        assert state.time_to_full == math.inf
        assert state.time_to_empty == math.inf

    def test_to_dict_infinite_times(self, battery):
        data = update_battery(battery, 0.0, 60.0).to_dict()
        assert data["time_to_full"] is None
        assert data["time_to_empty"] is None

    def test_energy(self, battery):
        assert battery.energy == 75.0


class TestEnergySystem:
    """Test one tick of the energy balance."""

    def test_balance(self, rotor, battery):
        state = update_energy_system(
            rotor, SolarConfig(), battery, 12.0, 4.0,
            wind_speed=8.0, time_of_day=0.5, weather="clear",
            throttle=50.0, speed_knots=6.0, hull_drag=800.0, dt=60.0,
        )
        assert abs(state.net_power - (state.total_generation - state.total_consumption)) < 1e-12
        assert abs(state.energy_credits_earned - state.total_generation * 60.0 / 3600) < 1e-12
        assert state.battery.charging_power == state.net_power

    def test_calm_night_drains(self, rotor, battery):
        state = update_energy_system(
            rotor, SolarConfig(), battery, 12.0, 4.0,
            wind_speed=0.0, time_of_day=0.0, weather="clear",
            throttle=0.0, speed_knots=0.0, hull_drag=0.0, dt=3600.0,
        )
        assert state.total_generation == 0.0
        assert state.energy_credits_earned == 0.0
        assert abs(state.battery.current_charge - (75.0 - 0.25)) < 1e-9

    def test_to_dict(self, rotor, battery):
        data = update_energy_system(
            rotor, SolarConfig(), battery, 12.0, 4.0,
            8.0, 0.5, "clear", 0.0, 0.0, 0.0, 1.0,
        ).to_dict()
        assert set(data) == {
            "turbine", "solar", "motor", "systems", "battery",
            "net_power", "energy_credits_earned",
        }
