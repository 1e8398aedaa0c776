"""
yachtforge Wind Model

Apparent wind, weather presets, a noise-driven wind system and the
aerodynamic load the wind puts on the yacht.

Directions are compass degrees: 0 = North, 90 = East.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union
import logging
import math

from yachtforge.core.config import get_settings
from yachtforge.core.constants import AIR_DENSITY_KG_M3, KNOTS_TO_MS
from .noise import NoiseGenerator
from .parameters import Weather, parse_weather

logger = logging.getLogger(__name__)


# =============================================================================
# WEATHER PRESETS
# =============================================================================

@dataclass(frozen=True)
class WeatherPreset:
    base_speed: Tuple[float, float]  # (min, max) m/s
    gust_factor: float  # Gust variation
    direction_variation: float  # Degrees of drift
    description: str

    @property
    def speed_range(self) -> float:
        return self.base_speed[1] - self.base_speed[0]


WEATHER_PRESETS: Dict[Weather, WeatherPreset] = {
    Weather.CLEAR: WeatherPreset((3.0, 8.0), 0.15, 15.0, "Light and variable winds"),
    Weather.CLOUDY: WeatherPreset((5.0, 12.0), 0.25, 25.0, "Moderate winds with occasional gusts"),
    Weather.TRADE_WINDS: WeatherPreset((10.0, 18.0), 0.12, 8.0, "Steady, reliable trade winds"),
    Weather.STORM: WeatherPreset((18.0, 30.0), 0.5, 45.0, "Strong, unpredictable storm winds"),
    Weather.DOLDRUMS: WeatherPreset((0.0, 3.0), 0.3, 60.0, "Calm, nearly windless conditions"),
}

# Noise sampling rates and offsets per channel
SPEED_NOISE_RATE = 0.1
DIRECTION_NOISE_RATE = 0.05
DIRECTION_NOISE_OFFSET = 100.0
GUST_NOISE_RATE = 0.5
GUST_NOISE_OFFSET = 200.0

WINDAGE_DRAG_COEFFICIENT = 0.3
FORWARD_FORCE_FACTOR = -0.2
HEEL_LEVER_FACTOR = 0.5


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class ApparentWind:
    speed: float  # m/s
    direction: float  # degrees, 0-360

    def to_dict(self) -> Dict[str, Any]:
        return {"speed": round(self.speed, 3), "direction": round(self.direction, 2)}


@dataclass(frozen=True)
class WindState:
    """Wind at one instant."""
    direction: float  # degrees, 0-360
    speed: float  # m/s
    gust_speed: float  # m/s
    gust_factor: float
    apparent_direction: float
    apparent_speed: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direction": round(self.direction, 2),
            "speed": round(self.speed, 3),
            "gust_speed": round(self.gust_speed, 3),
            "gust_factor": round(self.gust_factor, 3),
            "apparent_direction": round(self.apparent_direction, 2),
            "apparent_speed": round(self.apparent_speed, 3),
        }


@dataclass(frozen=True)
class WindEffect:
    lateral_force: float  # N, sideways
    forward_force: float  # N, negative for a headwind
    heel_moment: float  # N·m

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lateral_force": round(self.lateral_force, 2),
            "forward_force": round(self.forward_force, 2),
            "heel_moment": round(self.heel_moment, 2),
        }


# =============================================================================
# CALCULATIONS
# =============================================================================

def calculate_apparent_wind(
    true_speed: float,
    true_direction: float,
    boat_speed_knots: float,
    heading: float,
) -> ApparentWind:
    """
    Wind felt aboard: true wind minus the boat's velocity.

    Args:
        true_speed: True wind speed (m/s)
        true_direction: True wind direction (degrees)
        boat_speed_knots: Boat speed (knots)
        heading: Boat heading (degrees)
    """
    boat_speed = boat_speed_knots * KNOTS_TO_MS
    wind_rad = math.radians(true_direction)
    heading_rad = math.radians(heading)

    x = true_speed * math.sin(wind_rad) - boat_speed * math.sin(heading_rad)
    y = true_speed * math.cos(wind_rad) - boat_speed * math.cos(heading_rad)

    direction = math.degrees(math.atan2(x, y))
    if direction < 0:
        direction += 360

    return ApparentWind(speed=math.hypot(x, y), direction=direction)


def calculate_wind_effect(
    apparent_speed: float,
    apparent_angle: float,
    sail_area: float,
    beam: float,
) -> WindEffect:
    """
    Aerodynamic load on the superstructure.

    Args:
        apparent_speed: Apparent wind speed (m/s)
        apparent_angle: Angle relative to the bow (degrees, 0 = head wind)
        sail_area: Exposed area (m²)
        beam: Hull beam (m), sets the heeling lever
    """
    angle = math.radians(apparent_angle)
    pressure = 0.5 * AIR_DENSITY_KG_M3 * apparent_speed ** 2
    total_force = pressure * sail_area * WINDAGE_DRAG_COEFFICIENT

    lateral_force = total_force * math.sin(angle)
    return WindEffect(
        lateral_force=lateral_force,
        forward_force=total_force * math.cos(angle) * FORWARD_FORCE_FACTOR,
        heel_moment=lateral_force * (beam / 2) * HEEL_LEVER_FACTOR,
    )


# =============================================================================
# WIND SYSTEM
# =============================================================================

class WindSystem:
    """
    Time-varying wind around a base direction.

    Speed, direction and gusts are read from three offset channels of one
    seeded noise generator, so successive updates vary smoothly. Each
    ``update`` advances the clock and returns a new ``WindState``.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        initial_direction: Optional[float] = None,
        weather: Union[Weather, str, None] = None,
    ):
        settings = get_settings()
        self.seed = settings.wind_seed if seed is None else int(seed)
        self.noise = NoiseGenerator(self.seed)
        self.base_direction = (
            settings.initial_wind_direction_deg if initial_direction is None else initial_direction
        )
        self.weather = parse_weather(settings.default_weather if weather is None else weather)
        self.time = 0.0

    @property
    def preset(self) -> WeatherPreset:
        return WEATHER_PRESETS[self.weather]

    def set_weather(self, weather: Union[Weather, str]) -> None:
        self.weather = parse_weather(weather)
        logger.debug("Weather set to %s", self.weather.value)

    def set_base_direction(self, direction: float) -> None:
        self.base_direction = direction % 360

    def sample(self, time: float, boat_speed_knots: float = 0.0, heading: float = 0.0) -> WindState:
        """Wind at an absolute time without advancing the clock."""
        preset = self.preset

        speed_noise = self.noise.noise1d(time * SPEED_NOISE_RATE)
        direction_noise = self.noise.noise1d(time * DIRECTION_NOISE_RATE + DIRECTION_NOISE_OFFSET)
        gust_noise = self.noise.noise1d(time * GUST_NOISE_RATE + GUST_NOISE_OFFSET)

        min_speed = preset.base_speed[0]
        half_range = preset.speed_range / 2
        speed = min_speed + half_range + speed_noise * half_range

        gust_speed = speed * (1 + gust_noise * preset.gust_factor)
        direction = (self.base_direction + direction_noise * preset.direction_variation + 360) % 360

        apparent = calculate_apparent_wind(gust_speed, direction, boat_speed_knots, heading)

        return WindState(
            direction=direction,
            speed=speed,
            gust_speed=gust_speed,
            gust_factor=preset.gust_factor,
            apparent_direction=apparent.direction,
            apparent_speed=apparent.speed,
        )

    def update(self, dt: float, boat_speed_knots: float, heading: float) -> WindState:
        """
        Advance by ``dt`` seconds.

        Args:
            dt: Time step (s)
            boat_speed_knots: Boat speed (knots)
            heading: Boat heading (degrees)
        """
        self.time += dt
        return self.sample(self.time, boat_speed_knots, heading)
