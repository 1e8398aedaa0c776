"""
yachtforge Energy System

Power generation (turbine, solar), consumption (motor, ship systems)
and battery bookkeeping. Every function returns a fresh result; the
caller replaces its previous state with it.

Units: power in kW, energy in kWh, time steps in seconds.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Union
import logging
import math

from yachtforge.core.constants import (
    AIR_DENSITY_KG_M3,
    KNOTS_TO_MS,
    SECONDS_PER_HOUR,
    SOLAR_CONSTANT_W_M2,
    WATTS_PER_KW,
)
from .parameters import BatteryConfig, RotorSpec, SolarConfig, Weather

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Turbine
BASE_VAWT_EFFICIENCY = 0.28
BETZ_LIMIT = 0.593
OPTIMAL_TWIST = 52.0  # degrees
GENERATOR_EFFICIENCY = 0.90
CUT_IN_SPEED = 2.5  # m/s
CUT_OUT_SPEED = 25.0  # m/s
MAX_RPM = 200.0

BLADE_COUNT_FACTORS = {3: 1.0, 2: 0.85, 4: 0.95, 5: 0.92}
DEFAULT_BLADE_COUNT_FACTOR = 0.88

# Solar
SOLAR_PANEL_EFFICIENCY = 0.22
INVERTER_EFFICIENCY = 0.95
THERMAL_DERATING = 0.92
ATMOSPHERE_TRANSMISSION = 0.7
USABLE_DECK_FRACTION = 0.6
TURBINE_PANEL_AREA = 2.0  # m²

CLOUD_MULTIPLIERS = {
    Weather.CLEAR: 1.0,
    Weather.CLOUDY: 0.4,
    Weather.TRADE_WINDS: 0.85,
    Weather.STORM: 0.15,
    Weather.DOLDRUMS: 0.6,
}
DEFAULT_CLOUD_MULTIPLIER = 0.8

# Motor
MAX_MOTOR_POWER = 15.0  # kW
MOTOR_EFFICIENCY = 0.92

# Always-on loads
SYSTEMS_BASE_LOAD = 0.15
NAVIGATION_LIGHTS_LOAD = 0.1
CANOPY_LOAD = 0.3

# Battery
CHARGING_EFFICIENCY = 0.95


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class TurbinePowerResults:
    mechanical_power: float  # kW (theoretical)
    electrical_power: float  # kW, zero outside the operating window
    rpm: float
    tip_speed_ratio: float
    efficiency: float  # Power coefficient, never above the Betz limit

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mechanical_power": round(self.mechanical_power, 4),
            "electrical_power": round(self.electrical_power, 4),
            "rpm": round(self.rpm, 1),
            "tip_speed_ratio": round(self.tip_speed_ratio, 2),
            "efficiency": round(self.efficiency, 4),
        }


@dataclass(frozen=True)
class SolarPowerResults:
    panel_area: float  # m²
    irradiance: float  # W/m² reaching the panels
    raw_power: float  # kW before losses
    electrical_power: float  # kW after inverter and thermal losses

    def to_dict(self) -> Dict[str, Any]:
        return {
            "panel_area": round(self.panel_area, 3),
            "irradiance": round(self.irradiance, 2),
            "raw_power": round(self.raw_power, 4),
            "electrical_power": round(self.electrical_power, 4),
        }


@dataclass(frozen=True)
class MotorConsumptionResults:
    mechanical_power: float  # kW at the propeller
    electrical_power: float  # kW drawn from the battery
    efficiency: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mechanical_power": round(self.mechanical_power, 4),
            "electrical_power": round(self.electrical_power, 4),
            "efficiency": round(self.efficiency, 3),
        }


def _hours(value: float) -> Any:
    return None if math.isinf(value) else round(value, 3)


@dataclass(frozen=True)
class BatteryState:
    """
    Battery after one update.

    ``time_to_full`` and ``time_to_empty`` are ``math.inf`` when the
    battery is not charging or not discharging respectively.
    """
    current_charge: float  # kWh
    charge_percent: float  # 0-100
    charging_power: float  # kW, positive = charging
    time_to_full: float  # hours
    time_to_empty: float  # hours
    health: float = 100.0

    def to_dict(self) -> Dict[str, Any]:
        """Infinite times serialize as None."""
        return {
            "current_charge": round(self.current_charge, 4),
            "charge_percent": round(self.charge_percent, 2),
            "charging_power": round(self.charging_power, 4),
            "time_to_full": _hours(self.time_to_full),
            "time_to_empty": _hours(self.time_to_empty),
            "health": round(self.health, 1),
        }


@dataclass(frozen=True)
class EnergySystemState:
    """One tick of the whole energy system."""
    turbine: TurbinePowerResults
    solar: SolarPowerResults
    motor: MotorConsumptionResults
    systems: float  # kW
    battery: BatteryState
    net_power: float  # kW
    energy_credits_earned: float  # 1 credit = 1 kWh generated

    @property
    def total_generation(self) -> float:
        return self.turbine.electrical_power + self.solar.electrical_power

    @property
    def total_consumption(self) -> float:
        return self.motor.electrical_power + self.systems

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turbine": self.turbine.to_dict(),
            "solar": self.solar.to_dict(),
            "motor": self.motor.to_dict(),
            "systems": round(self.systems, 3),
            "battery": self.battery.to_dict(),
            "net_power": round(self.net_power, 4),
            "energy_credits_earned": round(self.energy_credits_earned, 6),
        }


# =============================================================================
# SOLAR ENVIRONMENT
# =============================================================================

WeatherLike = Union[Weather, str]


def get_solar_multiplier(time_of_day: float) -> float:
    """
    Sun strength for a time of day (0 = midnight, 0.5 = noon).

    Zero while the sun is below the horizon; low sun is attenuated by the
    longer atmospheric path.
    """
    angle = time_of_day * 2 * math.pi
    elevation = math.sin(angle - math.pi / 2)
    if elevation <= 0:
        return 0.0

    atmospheric_path = 1 / max(elevation, 0.1)
    attenuation = math.exp(-0.1 * (atmospheric_path - 1))
    return elevation * attenuation


def get_cloud_multiplier(weather: WeatherLike) -> float:
    """Cloud cover factor; unrecognised weather uses 0.8."""
    if not isinstance(weather, Weather):
        try:
            weather = Weather(weather)
        except ValueError:
            return DEFAULT_CLOUD_MULTIPLIER
    return CLOUD_MULTIPLIERS.get(weather, DEFAULT_CLOUD_MULTIPLIER)


# =============================================================================
# GENERATION
# =============================================================================

def calculate_turbine_efficiency(rotor: RotorSpec) -> float:
    """Power coefficient from the blade design, capped at the Betz limit."""
    blade_count_factor = BLADE_COUNT_FACTORS.get(rotor.blade_count, DEFAULT_BLADE_COUNT_FACTOR)
    twist_factor = 1 - abs(rotor.twist - OPTIMAL_TWIST) / 180 * 0.3
    taper_factor = 0.9 + rotor.taper * 0.1
    thickness_factor = 1 - (rotor.thickness - 0.08) * 0.5
    camber_factor = 1 + abs(rotor.camber) * 0.2

    blade_efficiency = (
        BASE_VAWT_EFFICIENCY
        * blade_count_factor
        * twist_factor
        * taper_factor
        * thickness_factor
        * camber_factor
    )
    return min(BETZ_LIMIT, blade_efficiency)


def calculate_turbine_power(rotor: RotorSpec, wind_speed: float) -> TurbinePowerResults:
    """
    Turbine output for a wind speed.

    Args:
        rotor: Turbine quantities
        wind_speed: Wind speed at the rotor (m/s)

    Returns:
        TurbinePowerResults; electrical power is zero below cut-in and
        above cut-out
    """
    efficiency = calculate_turbine_efficiency(rotor)

    radius = rotor.diameter / 2
    tip_speed_ratio = 4 + rotor.blade_count * 0.5
    if radius > 0:
        omega = tip_speed_ratio * wind_speed / radius
        rpm = min(MAX_RPM, omega * 60 / (2 * math.pi))
    else:
        # A zero-diameter rotor spins at the cap in any wind
        rpm = MAX_RPM if wind_speed > 0 else 0.0

    # P = 0.5 × ρ × A × v³ × Cp
    mechanical_power = (
        0.5 * AIR_DENSITY_KG_M3 * rotor.swept_area * wind_speed ** 3 * efficiency / WATTS_PER_KW
    )
    electrical_power = mechanical_power * GENERATOR_EFFICIENCY
    if wind_speed < CUT_IN_SPEED or wind_speed > CUT_OUT_SPEED:
        electrical_power = 0.0

    return TurbinePowerResults(
        mechanical_power=mechanical_power,
        electrical_power=electrical_power,
        rpm=rpm,
        tip_speed_ratio=tip_speed_ratio,
        efficiency=efficiency,
    )


def calculate_solar_power(
    solar: SolarConfig,
    length: float,
    beam: float,
    time_of_day: float,
    weather: WeatherLike,
) -> SolarPowerResults:
    """
    Solar output for the deck and turbine panels.

    Args:
        solar: Panel layout
        length: Hull length (m)
        beam: Hull beam (m)
        time_of_day: Fraction of the day, 0 = midnight
        weather: Weather state

    Returns:
        SolarPowerResults
    """
    deck_area = length * beam * USABLE_DECK_FRACTION
    panel_area = deck_area * solar.deck_coverage / 100
    if solar.turbine_integrated:
        panel_area += TURBINE_PANEL_AREA

    irradiance = (
        SOLAR_CONSTANT_W_M2
        * get_solar_multiplier(time_of_day)
        * get_cloud_multiplier(weather)
        * ATMOSPHERE_TRANSMISSION
    )
    raw_power = irradiance * panel_area * SOLAR_PANEL_EFFICIENCY / WATTS_PER_KW
    electrical_power = raw_power * INVERTER_EFFICIENCY * THERMAL_DERATING

    return SolarPowerResults(
        panel_area=panel_area,
        irradiance=irradiance,
        raw_power=raw_power,
        electrical_power=electrical_power,
    )


# =============================================================================
# CONSUMPTION
# =============================================================================

def calculate_motor_consumption(
    throttle: float,
    speed_knots: float,
    hull_drag: float,
) -> MotorConsumptionResults:
    """
    Motor draw for a throttle setting.

    Args:
        throttle: Throttle (percent, 0-100)
        speed_knots: Current boat speed (knots)
        hull_drag: Hull drag (N)
    """
    drag_power = hull_drag * speed_knots * KNOTS_TO_MS / WATTS_PER_KW
    mechanical_power = min(MAX_MOTOR_POWER, drag_power * throttle / 100)
    return MotorConsumptionResults(
        mechanical_power=mechanical_power,
        electrical_power=mechanical_power / MOTOR_EFFICIENCY,
        efficiency=MOTOR_EFFICIENCY,
    )


def is_night(time_of_day: float) -> bool:
    return time_of_day < 0.25 or time_of_day > 0.75


def calculate_systems_consumption(canopy: bool, time_of_day: float) -> float:
    """Always-on loads (kW): instruments, navigation lights, canopy."""
    power = SYSTEMS_BASE_LOAD
    if is_night(time_of_day):
        power += NAVIGATION_LIGHTS_LOAD
    if canopy:
        power += CANOPY_LOAD
    return power


# =============================================================================
# STORAGE
# =============================================================================

def update_battery(battery: BatteryConfig, net_power: float, dt: float) -> BatteryState:
    """
    Advance the battery by one time step.

    Args:
        battery: Battery before the step
        net_power: Generation minus consumption (kW)
        dt: Step length (seconds)

    Returns:
        BatteryState with charge clamped to [0, capacity]
    """
    energy_delta = net_power * dt / SECONDS_PER_HOUR
    efficiency = CHARGING_EFFICIENCY if net_power > 0 else 1.0

    energy = battery.energy + energy_delta * efficiency
    energy = max(0.0, min(battery.capacity, energy))

    charge_percent = energy / battery.capacity * 100 if battery.capacity > 0 else 0.0

    if net_power > 0:
        time_to_full = (battery.capacity - energy) / (net_power * efficiency)
    else:
        time_to_full = math.inf
    time_to_empty = energy / abs(net_power) if net_power < 0 else math.inf

    return BatteryState(
        current_charge=energy,
        charge_percent=charge_percent,
        charging_power=net_power,
        time_to_full=time_to_full,
        time_to_empty=time_to_empty,
    )


def update_energy_system(
    rotor: RotorSpec,
    solar: SolarConfig,
    battery: BatteryConfig,
    length: float,
    beam: float,
    wind_speed: float,
    time_of_day: float,
    weather: WeatherLike,
    throttle: float,
    speed_knots: float,
    hull_drag: float,
    dt: float,
) -> EnergySystemState:
    """
    One tick of the complete energy balance.

    Returns:
        EnergySystemState including the credits earned this tick
    """
    turbine = calculate_turbine_power(rotor, wind_speed)
    solar_result = calculate_solar_power(solar, length, beam, time_of_day, weather)
    motor = calculate_motor_consumption(throttle, speed_knots, hull_drag)
    systems = calculate_systems_consumption(solar.canopy_enabled, time_of_day)

    generation = turbine.electrical_power + solar_result.electrical_power
    consumption = motor.electrical_power + systems
    net_power = generation - consumption

    battery_state = update_battery(battery, net_power, dt)

    logger.debug(
        "Energy tick: gen=%.3f kW, use=%.3f kW, battery=%.1f%%",
        generation, consumption, battery_state.charge_percent,
    )

    return EnergySystemState(
        turbine=turbine,
        solar=solar_result,
        motor=motor,
        systems=systems,
        battery=battery_state,
        net_power=net_power,
        energy_credits_earned=generation * dt / SECONDS_PER_HOUR,
    )
