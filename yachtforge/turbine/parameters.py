"""
turbine/parameters.py - Procedural turbine configuration records.

A blade is described by global shape parameters plus a list of
position-keyed sections (0 = bottom, 1 = top) whose properties are
blended along the span. All records are frozen.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple

from yachtforge.core.parsing import Point2D, clamp_fraction, parse_enum, parse_point
from yachtforge.core.records import Record
from .enums import (
    AirfoilType,
    BladeStyle,
    HubMaterial,
    HubType,
    ShaftStyle,
    SupportArmType,
)


# =============================================================================
# BLADE
# =============================================================================

@dataclass(frozen=True)
class BladeSection(Record):
    """Blade properties at one span position."""

    position: float = 0.5
    """Span position (0 = bottom, 1 = top)."""

    width: float = 1.0
    """Chord multiplier (0.2-3.0)."""

    thickness: float = 1.0
    """Thickness multiplier (0.5-2.0)."""

    pitch: float = 0.0
    """Local pitch angle (degrees, -60 to 60)."""

    twist: float = 0.0
    """Local twist offset (degrees, -45 to 45)."""

    sweep: float = 0.0
    """Sweep angle (degrees, -30 to 30)."""

    camber: float = 0.0
    """Airfoil camber (-0.5 to 0.5)."""

    leading_edge: float = 0.3
    """Leading edge rounding (0-1)."""

    trailing_edge: float = 0.7
    """Trailing edge sharpness (0-1)."""

    offset: Point2D = (0.0, 0.0)
    """Offset from the blade's axis position; stored for the editor."""

    def __post_init__(self):
        self._set("position", clamp_fraction(self.position))
        self._set("offset", parse_point(self.offset))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": round(self.position, 4),
            "width": round(self.width, 4),
            "thickness": round(self.thickness, 4),
            "pitch": round(self.pitch, 3),
            "twist": round(self.twist, 3),
            "sweep": round(self.sweep, 3),
            "camber": round(self.camber, 4),
            "leading_edge": round(self.leading_edge, 4),
            "trailing_edge": round(self.trailing_edge, 4),
            "offset": {"x": round(self.offset[0], 4), "y": round(self.offset[1], 4)},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BladeSection":
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


DEFAULT_BLADE_SECTION = BladeSection()

DEFAULT_BLADE_SECTIONS: Tuple[BladeSection, ...] = (
    BladeSection(position=0.0, width=1.0, pitch=5.0),
    BladeSection(position=0.5, width=1.2, pitch=0.0),
    BladeSection(position=1.0, width=0.8, pitch=-5.0),
)


@dataclass(frozen=True)
class BladeConfig(Record):
    """Blade shape."""

    style: BladeStyle = BladeStyle.HELIX
    airfoil: AirfoilType = AirfoilType.SYMMETRIC

    # Dimensions
    chord: float = 0.3
    """Chord as a fraction of rotor diameter (0.1-1.0)."""

    span: float = 1.0
    """Span as a fraction of turbine height (0.5-1.0)."""

    thickness: float = 0.08
    """Base airfoil thickness ratio (0.02-0.3)."""

    # Global transforms
    twist: float = 45.0
    """Total twist from bottom to top (degrees)."""

    taper: float = 0.8
    """Tip/root chord ratio (0.3-1.5)."""

    sweep: float = 0.0
    prebend: float = 0.0

    sections: Tuple[BladeSection, ...] = DEFAULT_BLADE_SECTIONS

    def __post_init__(self):
        self._set("style", parse_enum(BladeStyle, self.style, BladeStyle.HELIX))
        self._set("airfoil", parse_enum(AirfoilType, self.airfoil, AirfoilType.SYMMETRIC))
        self._set("sections", tuple(
            s if isinstance(s, BladeSection) else BladeSection.from_dict(s)
            for s in self.sections
        ))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "style": self.style.value,
            "airfoil": self.airfoil.value,
            "chord": round(self.chord, 4),
            "span": round(self.span, 4),
            "thickness": round(self.thickness, 4),
            "twist": round(self.twist, 3),
            "taper": round(self.taper, 4),
            "sweep": round(self.sweep, 3),
            "prebend": round(self.prebend, 3),
            "sections": [s.to_dict() for s in self.sections],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BladeConfig":
        d = cls()
        return cls(
            style=data.get("style", d.style),
            airfoil=data.get("airfoil", d.airfoil),
            chord=data.get("chord", d.chord),
            span=data.get("span", d.span),
            thickness=data.get("thickness", d.thickness),
            twist=data.get("twist", d.twist),
            taper=data.get("taper", d.taper),
            sweep=data.get("sweep", d.sweep),
            prebend=data.get("prebend", d.prebend),
            sections=tuple(data.get("sections", d.sections)),
        )


# =============================================================================
# ROTOR PARTS
# =============================================================================

@dataclass(frozen=True)
class HubConfig(Record):
    """Hub caps at the top and bottom of the shaft."""

    type: HubType = HubType.CYLINDER

    diameter: float = 0.1
    """Hub diameter as a fraction of rotor diameter (0.05-0.3)."""

    length: float = 1.0
    """Length multiplier (0.5-2.0); hub height is height * length * 0.1."""

    top_cap: bool = True
    bottom_mount: bool = True
    material: HubMaterial = HubMaterial.METAL

    def __post_init__(self):
        self._set("type", parse_enum(HubType, self.type, HubType.CYLINDER))
        self._set("material", parse_enum(HubMaterial, self.material, HubMaterial.METAL))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "diameter": round(self.diameter, 4),
            "length": round(self.length, 4),
            "top_cap": self.top_cap,
            "bottom_mount": self.bottom_mount,
            "material": self.material.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HubConfig":
        d = cls()
        return cls(
            type=data.get("type", d.type),
            diameter=data.get("diameter", d.diameter),
            length=data.get("length", d.length),
            top_cap=bool(data.get("top_cap", d.top_cap)),
            bottom_mount=bool(data.get("bottom_mount", d.bottom_mount)),
            material=data.get("material", d.material),
        )


@dataclass(frozen=True)
class ShaftConfig(Record):
    visible: bool = True

    diameter: float = 0.08
    """Shaft diameter as a fraction of rotor diameter."""

    style: ShaftStyle = ShaftStyle.STRAIGHT
    sections: int = 1

    def __post_init__(self):
        self._set("style", parse_enum(ShaftStyle, self.style, ShaftStyle.STRAIGHT))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visible": self.visible,
            "diameter": round(self.diameter, 4),
            "style": self.style.value,
            "sections": self.sections,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShaftConfig":
        d = cls()
        return cls(
            visible=bool(data.get("visible", d.visible)),
            diameter=data.get("diameter", d.diameter),
            style=data.get("style", d.style),
            sections=int(data.get("sections", d.sections)),
        )


@dataclass(frozen=True)
class SupportArmConfig(Record):
    """
    Horizontal arms joining each blade to the shaft.

    One arm per blade is placed at every entry of ``positions``
    (fractions of height); ``count`` only switches arms on.
    """

    count: int = 0
    positions: Tuple[float, ...] = ()
    type: SupportArmType = SupportArmType.HIDDEN
    width: float = 1.0
    fairing: bool = False

    def __post_init__(self):
        self._set("type", parse_enum(SupportArmType, self.type, SupportArmType.STRAIGHT))
        self._set("count", max(0, int(self.count)))
        self._set("positions", tuple(clamp_fraction(p) for p in self.positions))

    @property
    def enabled(self) -> bool:
        return self.count > 0 and self.type != SupportArmType.HIDDEN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "positions": [round(p, 4) for p in self.positions],
            "type": self.type.value,
            "width": round(self.width, 4),
            "fairing": self.fairing,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SupportArmConfig":
        d = cls()
        return cls(
            count=data.get("count", d.count),
            positions=tuple(data.get("positions", d.positions)),
            type=data.get("type", d.type),
            width=data.get("width", d.width),
            fairing=bool(data.get("fairing", d.fairing)),
        )


# =============================================================================
# TURBINE
# =============================================================================

@dataclass(frozen=True)
class TurbineConfig(Record):
    """
    Complete procedural turbine configuration.

    Dimensions in meters. ``blade_count`` is clamped to at least 1.
    """

    height: float = 8.0
    """Total height (m, 3-20)."""

    diameter: float = 2.0
    """Rotor diameter (m, 0.5-6)."""

    blade_count: int = 3

    blade: BladeConfig = field(default_factory=BladeConfig)
    hub: HubConfig = field(default_factory=HubConfig)
    shaft: ShaftConfig = field(default_factory=ShaftConfig)
    support_arms: SupportArmConfig = field(default_factory=SupportArmConfig)

    def __post_init__(self):
        self._set("blade_count", max(1, int(self.blade_count)))

    @property
    def radius(self) -> float:
        return self.diameter / 2

    @property
    def swept_area(self) -> float:
        """Frontal area swept by the rotor (m^2)."""
        return self.height * self.blade.span * self.diameter

    def to_dict(self) -> Dict[str, Any]:
        return {
            "height": round(self.height, 3),
            "diameter": round(self.diameter, 3),
            "blade_count": self.blade_count,
            "blade": self.blade.to_dict(),
            "hub": self.hub.to_dict(),
            "shaft": self.shaft.to_dict(),
            "support_arms": self.support_arms.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TurbineConfig":
        """Create from dictionary; missing keys keep their defaults."""
        d = cls()
        return cls(
            height=data.get("height", d.height),
            diameter=data.get("diameter", d.diameter),
            blade_count=data.get("blade_count", d.blade_count),
            blade=BladeConfig.from_dict(data.get("blade", {})),
            hub=HubConfig.from_dict(data.get("hub", {})),
            shaft=ShaftConfig.from_dict(data.get("shaft", {})),
            support_arms=SupportArmConfig.from_dict(data.get("support_arms", {})),
        )


DEFAULT_TURBINE_CONFIG = TurbineConfig()
