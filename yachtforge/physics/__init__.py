"""
physics - Closed-form yacht performance model.

Drag, stability, energy generation and storage, and wind. All functions
are pure: explicit inputs in, a fresh result dataclass out.
"""

from .parameters import (
    HullType,
    BowShape,
    Weather,
    HullDimensions,
    HullSpec,
    RotorSpec,
    SolarConfig,
    BatteryConfig,
    YachtDesign,
    DEFAULT_YACHT,
    parse_hull_type,
    parse_bow_shape,
    parse_weather,
)
from .drag import (
    HullCoefficients,
    BowModifier,
    HULL_COEFFICIENTS,
    BOW_MODIFIERS,
    DragResults,
    calculate_wetted_surface,
    calculate_froude_number,
    calculate_drag,
)
from .stability import (
    StabilityRating,
    StabilityResults,
    calculate_metacentric_height,
    calculate_roll_period,
    calculate_stability,
    calculate_hull_speed,
    calculate_foil_takeoff_speed,
)
from .energy import (
    BETZ_LIMIT,
    CUT_IN_SPEED,
    CUT_OUT_SPEED,
    TurbinePowerResults,
    SolarPowerResults,
    MotorConsumptionResults,
    BatteryState,
    EnergySystemState,
    get_solar_multiplier,
    get_cloud_multiplier,
    calculate_turbine_efficiency,
    calculate_turbine_power,
    calculate_solar_power,
    calculate_motor_consumption,
    calculate_systems_consumption,
    update_battery,
    update_energy_system,
)
from .noise import NoiseGenerator
from .wind import (
    WeatherPreset,
    WEATHER_PRESETS,
    ApparentWind,
    WindState,
    WindEffect,
    WindSystem,
    calculate_apparent_wind,
    calculate_wind_effect,
)
from .summary import (
    HullPerformanceSummary,
    DesignStats,
    get_hull_performance_summary,
    calculate_design_stats,
)

__all__ = [
    # Parameters
    "HullType",
    "BowShape",
    "Weather",
    "HullDimensions",
    "HullSpec",
    "RotorSpec",
    "SolarConfig",
    "BatteryConfig",
    "YachtDesign",
    "DEFAULT_YACHT",
    "parse_hull_type",
    "parse_bow_shape",
    "parse_weather",
    # Drag
    "HullCoefficients",
    "BowModifier",
    "HULL_COEFFICIENTS",
    "BOW_MODIFIERS",
    "DragResults",
    "calculate_wetted_surface",
    "calculate_froude_number",
    "calculate_drag",
    # Stability
    "StabilityRating",
    "StabilityResults",
    "calculate_metacentric_height",
    "calculate_roll_period",
    "calculate_stability",
    "calculate_hull_speed",
    "calculate_foil_takeoff_speed",
    # Energy
    "BETZ_LIMIT",
    "CUT_IN_SPEED",
    "CUT_OUT_SPEED",
    "TurbinePowerResults",
    "SolarPowerResults",
    "MotorConsumptionResults",
    "BatteryState",
    "EnergySystemState",
    "get_solar_multiplier",
    "get_cloud_multiplier",
    "calculate_turbine_efficiency",
    "calculate_turbine_power",
    "calculate_solar_power",
    "calculate_motor_consumption",
    "calculate_systems_consumption",
    "update_battery",
    "update_energy_system",
    # Wind
    "NoiseGenerator",
    "WeatherPreset",
    "WEATHER_PRESETS",
    "ApparentWind",
    "WindState",
    "WindEffect",
    "WindSystem",
    "calculate_apparent_wind",
    "calculate_wind_effect",
    # Summary
    "HullPerformanceSummary",
    "DesignStats",
    "get_hull_performance_summary",
    "calculate_design_stats",
]
