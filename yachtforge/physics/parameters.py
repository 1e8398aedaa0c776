"""
physics/parameters.py - Inputs to the performance model.

Plain frozen records; the physics functions never hold on to them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from yachtforge.core.parsing import Point2D, parse_enum, parse_points, points_to_list
from yachtforge.core.records import Record
from yachtforge.turbine.parameters import TurbineConfig
from yachtforge.turbine.sections import section_value


# =============================================================================
# ENUMS
# =============================================================================

class HullType(Enum):
    """Hull families with their own coefficient tables."""
    MONOHULL = "monohull"
    CATAMARAN = "catamaran"
    TRIMARAN = "trimaran"
    HYDROFOIL = "hydrofoil"


class BowShape(Enum):
    """Bow shapes with drag/wave/pitch modifiers."""
    PIERCING = "piercing"
    FLARED = "flared"
    BULBOUS = "bulbous"


class Weather(Enum):
    """Named weather states driving wind and cloud cover."""
    CLEAR = "clear"
    CLOUDY = "cloudy"
    TRADE_WINDS = "trade-winds"
    STORM = "storm"
    DOLDRUMS = "doldrums"


def parse_hull_type(value: Any) -> HullType:
    return parse_enum(HullType, value, HullType.MONOHULL)


def parse_bow_shape(value: Any) -> BowShape:
    return parse_enum(BowShape, value, BowShape.PIERCING)


def parse_weather(value: Any) -> Weather:
    return parse_enum(Weather, value, Weather.TRADE_WINDS)


# =============================================================================
# HULL
# =============================================================================

@dataclass(frozen=True)
class HullDimensions(Record):
    """Principal dimensions for drag and stability."""

    length: float
    """Length (m)."""

    beam: float
    """Beam (m)."""

    draft: float
    """Draft below the waterline (m)."""

    displacement: float
    """Displacement (kg)."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "length": round(self.length, 3),
            "beam": round(self.beam, 3),
            "draft": round(self.draft, 3),
            "displacement": round(self.displacement, 1),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HullDimensions":
        return cls(
            length=data["length"],
            beam=data["beam"],
            draft=data["draft"],
            displacement=data["displacement"],
        )


@dataclass(frozen=True)
class HullSpec(Record):
    """Hull selection as configured in the builder."""

    type: HullType = HullType.CATAMARAN
    length: float = 12.0
    beam: float = 4.0
    draft: float = 0.8
    bow_shape: BowShape = BowShape.PIERCING

    def __post_init__(self):
        self._set("type", parse_hull_type(self.type))
        self._set("bow_shape", parse_bow_shape(self.bow_shape))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "length": round(self.length, 3),
            "beam": round(self.beam, 3),
            "draft": round(self.draft, 3),
            "bow_shape": self.bow_shape.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HullSpec":
        d = cls()
        return cls(
            type=data.get("type", d.type),
            length=data.get("length", d.length),
            beam=data.get("beam", d.beam),
            draft=data.get("draft", d.draft),
            bow_shape=data.get("bow_shape", d.bow_shape),
        )


# =============================================================================
# ENERGY
# =============================================================================

@dataclass(frozen=True)
class RotorSpec(Record):
    """
    Turbine quantities used by the power model.

    ``from_turbine_config`` derives one from a full turbine configuration.
    """

    height: float = 4.0
    diameter: float = 2.0
    blade_count: int = 3
    twist: float = 45.0
    """Helical twist over the blade height (degrees)."""
    taper: float = 0.8
    thickness: float = 0.08
    """Blade thickness ratio."""
    camber: float = 0.0
    blade_profile: Tuple[Point2D, ...] = ()
    """Hand-drawn blade curve; empty uses the preset."""

    def __post_init__(self):
        self._set("blade_count", max(1, int(self.blade_count)))
        self._set("blade_profile", parse_points(self.blade_profile))

    @property
    def swept_area(self) -> float:
        return self.height * self.diameter

    @classmethod
    def from_turbine_config(cls, config: TurbineConfig) -> "RotorSpec":
        """Power-model view of a ``TurbineConfig``; camber is sampled at mid-span."""
        return cls(
            height=config.height,
            diameter=config.diameter,
            blade_count=config.blade_count,
            twist=config.blade.twist,
            taper=config.blade.taper,
            thickness=config.blade.thickness,
            camber=section_value(config.blade.sections, 0.5, "camber"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "height": round(self.height, 3),
            "diameter": round(self.diameter, 3),
            "blade_count": self.blade_count,
            "twist": round(self.twist, 3),
            "taper": round(self.taper, 4),
            "thickness": round(self.thickness, 4),
            "camber": round(self.camber, 4),
            "blade_profile": points_to_list(self.blade_profile),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RotorSpec":
        d = cls()
        return cls(
            height=data.get("height", d.height),
            diameter=data.get("diameter", d.diameter),
            blade_count=data.get("blade_count", d.blade_count),
            twist=data.get("twist", d.twist),
            taper=data.get("taper", d.taper),
            thickness=data.get("thickness", d.thickness),
            camber=data.get("camber", d.camber),
            blade_profile=data.get("blade_profile", ()),
        )


@dataclass(frozen=True)
class SolarConfig(Record):
    """Solar panel layout."""

    deck_coverage: float = 60.0
    """Share of usable deck covered by panels (percent, 0-100)."""

    turbine_integrated: bool = True
    """Panels built into the turbine blades (adds a fixed area)."""

    canopy_enabled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "deck_coverage": round(self.deck_coverage, 2),
            "turbine_integrated": self.turbine_integrated,
            "canopy_enabled": self.canopy_enabled,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolarConfig":
        d = cls()
        return cls(
            deck_coverage=data.get("deck_coverage", d.deck_coverage),
            turbine_integrated=bool(data.get("turbine_integrated", d.turbine_integrated)),
            canopy_enabled=bool(data.get("canopy_enabled", d.canopy_enabled)),
        )


@dataclass(frozen=True)
class BatteryConfig(Record):
    """Battery bank."""

    capacity: float = 100.0
    """Capacity (kWh)."""

    current_charge: float = 75.0
    """State of charge (percent, 0-100)."""

    @property
    def energy(self) -> float:
        """Stored energy (kWh)."""
        return self.current_charge / 100 * self.capacity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "capacity": round(self.capacity, 3),
            "current_charge": round(self.current_charge, 3),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BatteryConfig":
        d = cls()
        return cls(
            capacity=data.get("capacity", d.capacity),
            current_charge=data.get("current_charge", d.current_charge),
        )


# =============================================================================
# DESIGN
# =============================================================================

@dataclass(frozen=True)
class YachtDesign(Record):
    """A complete yacht design as saved by the builder."""

    id: str = "default"
    name: str = "E-Cat Starter"
    hull: HullSpec = field(default_factory=HullSpec)
    rotor: RotorSpec = field(default_factory=RotorSpec)
    solar: SolarConfig = field(default_factory=SolarConfig)
    battery: BatteryConfig = field(default_factory=BatteryConfig)
    deck_modules: Tuple[str, ...] = ()

    def __post_init__(self):
        self._set("deck_modules", tuple(self.deck_modules))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "hull": self.hull.to_dict(),
            "rotor": self.rotor.to_dict(),
            "solar": self.solar.to_dict(),
            "battery": self.battery.to_dict(),
            "deck_modules": list(self.deck_modules),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "YachtDesign":
        d = cls()
        return cls(
            id=data.get("id", d.id),
            name=data.get("name", d.name),
            hull=HullSpec.from_dict(data.get("hull", {})),
            rotor=RotorSpec.from_dict(data.get("rotor", {})),
            solar=SolarConfig.from_dict(data.get("solar", {})),
            battery=BatteryConfig.from_dict(data.get("battery", {})),
            deck_modules=data.get("deck_modules", ()),
        )


DEFAULT_YACHT = YachtDesign()
