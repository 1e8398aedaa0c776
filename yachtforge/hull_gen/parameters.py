"""
hull_gen/parameters.py - Procedural hull configuration records.

All records are frozen; use ``with_field`` to derive a modified copy.
Fractional positions are clamped into [0, 1] on construction rather
than rejected, so slider values from the builder never fail.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

from yachtforge.core.parsing import (
    Point2D,
    clamp_fraction,
    parse_enum,
    parse_points,
    points_to_list,
)
from yachtforge.core.records import Record
from .enums import BowType, ChineType, FinType, HullCategory, KeelType, SternType


@dataclass(frozen=True)
class BowConfig(Record):
    """Bow shape parameters."""

    type: BowType = BowType.PIERCING

    angle: float = 25.0
    """Entry angle (degrees, 10-60)."""

    overhang: float = 5.0
    """Bow overhang (percent of length, 0-30)."""

    flare: float = 10.0
    """Flare angle at the bow (degrees, 0-30)."""

    rake: float = 15.0
    """Forward rake (degrees, 0-45)."""

    bulb_size: float = 0.2
    """Bulb size for bulbous bows (0-0.5)."""

    bulb_position: float = 0.3
    """Vertical bulb position (fraction, 0-1)."""

    def __post_init__(self):
        self._set("type", parse_enum(BowType, self.type, BowType.PIERCING))
        self._set("bulb_position", clamp_fraction(self.bulb_position))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "angle": round(self.angle, 3),
            "overhang": round(self.overhang, 3),
            "flare": round(self.flare, 3),
            "rake": round(self.rake, 3),
            "bulb_size": round(self.bulb_size, 4),
            "bulb_position": round(self.bulb_position, 4),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BowConfig":
        d = cls()
        return cls(
            type=data.get("type", d.type),
            angle=data.get("angle", d.angle),
            overhang=data.get("overhang", d.overhang),
            flare=data.get("flare", d.flare),
            rake=data.get("rake", d.rake),
            bulb_size=data.get("bulb_size", d.bulb_size),
            bulb_position=data.get("bulb_position", d.bulb_position),
        )


@dataclass(frozen=True)
class SternConfig(Record):
    """Stern shape parameters."""

    type: SternType = SternType.TRANSOM

    angle: float = 10.0
    """Transom angle (degrees, -15 to 45)."""

    overhang: float = 5.0
    """Stern overhang (percent of length, 0-20)."""

    width: float = 0.8
    """Transom width ratio (0.3-1.0)."""

    height: float = 0.7
    """Transom height ratio (0.3-1.0)."""

    rake: float = 10.0
    """Backward rake (degrees, 0-30)."""

    def __post_init__(self):
        self._set("type", parse_enum(SternType, self.type, SternType.TRANSOM))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "angle": round(self.angle, 3),
            "overhang": round(self.overhang, 3),
            "width": round(self.width, 4),
            "height": round(self.height, 4),
            "rake": round(self.rake, 3),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SternConfig":
        d = cls()
        return cls(
            type=data.get("type", d.type),
            angle=data.get("angle", d.angle),
            overhang=data.get("overhang", d.overhang),
            width=data.get("width", d.width),
            height=data.get("height", d.height),
            rake=data.get("rake", d.rake),
        )


@dataclass(frozen=True)
class KeelConfig(Record):
    """Keel line shape and its active window along the hull."""

    type: KeelType = KeelType.V_HULL

    depth: float = 0.3
    """Keel depth below the hull bottom (m, 0-2)."""

    length: float = 0.6
    """Active window length as a fraction of hull length."""

    position: float = 0.5
    """Window centre as a fraction of hull length from the bow."""

    sweep: float = 15.0
    """Keel sweep angle (degrees)."""

    fin_type: FinType = FinType.NONE
    fin_depth: float = 0.0

    def __post_init__(self):
        self._set("type", parse_enum(KeelType, self.type, KeelType.V_HULL))
        self._set("fin_type", parse_enum(FinType, self.fin_type, FinType.NONE))
        self._set("length", clamp_fraction(self.length))
        self._set("position", clamp_fraction(self.position))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "depth": round(self.depth, 4),
            "length": round(self.length, 4),
            "position": round(self.position, 4),
            "sweep": round(self.sweep, 3),
            "fin_type": self.fin_type.value,
            "fin_depth": round(self.fin_depth, 4),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeelConfig":
        d = cls()
        return cls(
            type=data.get("type", d.type),
            depth=data.get("depth", d.depth),
            length=data.get("length", d.length),
            position=data.get("position", d.position),
            sweep=data.get("sweep", d.sweep),
            fin_type=data.get("fin_type", d.fin_type),
            fin_depth=data.get("fin_depth", d.fin_depth),
        )


@dataclass(frozen=True)
class ChineConfig(Record):
    """
    Chine lines along the hull side.

    ``positions`` are normalized heights (0-1) per chine; ``angles`` are in
    degrees. Missing or zero entries fall back to 0.5 and 15 degrees.
    """

    type: ChineType = ChineType.HARD
    count: int = 1
    positions: Tuple[float, ...] = (0.4,)
    angles: Tuple[float, ...] = (15.0,)

    def __post_init__(self):
        self._set("type", parse_enum(ChineType, self.type, ChineType.NONE))
        self._set("count", max(0, min(4, int(self.count))))
        self._set("positions", tuple(clamp_fraction(p) for p in self.positions))
        self._set("angles", tuple(float(a) for a in self.angles))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "count": self.count,
            "positions": [round(p, 4) for p in self.positions],
            "angles": [round(a, 3) for a in self.angles],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChineConfig":
        d = cls()
        return cls(
            type=data.get("type", d.type),
            count=data.get("count", d.count),
            positions=tuple(data.get("positions", d.positions)),
            angles=tuple(data.get("angles", d.angles)),
        )


@dataclass(frozen=True)
class DeckConfig(Record):
    """Deck slab and coach roof."""

    camber: float = 5.0
    """Deck camber (percent of deck width, 0-15)."""

    sheer: float = 0.2
    """Sheer rise at bow and stern (m)."""

    coach_roof: bool = False
    coach_roof_height: float = 0.6
    coach_roof_length: float = 0.35

    def to_dict(self) -> Dict[str, Any]:
        return {
            "camber": round(self.camber, 3),
            "sheer": round(self.sheer, 4),
            "coach_roof": self.coach_roof,
            "coach_roof_height": round(self.coach_roof_height, 4),
            "coach_roof_length": round(self.coach_roof_length, 4),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeckConfig":
        d = cls()
        return cls(
            camber=data.get("camber", d.camber),
            sheer=data.get("sheer", d.sheer),
            coach_roof=bool(data.get("coach_roof", d.coach_roof)),
            coach_roof_height=data.get("coach_roof_height", d.coach_roof_height),
            coach_roof_length=data.get("coach_roof_length", d.coach_roof_length),
        )


@dataclass(frozen=True)
class CrossSection(Record):
    """
    User-drawn section override.

    Matched to stations by slot ``round(position * 10)``. Only the beam
    multiplier shapes the loft; deadrise and freeboard are stored for the
    editor.
    """

    position: float = 0.5
    profile: Tuple[Point2D, ...] = ()
    beam_multiplier: float = 1.0
    deadrise: float = 15.0
    freeboard: float = 1.0

    def __post_init__(self):
        self._set("position", clamp_fraction(self.position))
        self._set("profile", parse_points(self.profile))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": round(self.position, 4),
            "profile": points_to_list(self.profile),
            "beam_multiplier": round(self.beam_multiplier, 4),
            "deadrise": round(self.deadrise, 3),
            "freeboard": round(self.freeboard, 4),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CrossSection":
        d = cls()
        return cls(
            position=data.get("position", d.position),
            profile=tuple(data.get("profile", ())),
            beam_multiplier=data.get("beam_multiplier", d.beam_multiplier),
            deadrise=data.get("deadrise", d.deadrise),
            freeboard=data.get("freeboard", d.freeboard),
        )


@dataclass(frozen=True)
class HullConfig(Record):
    """
    Complete procedural hull configuration.

    All dimensions in meters.
    """

    # === DIMENSIONS ===
    length: float = 12.0
    """Overall length (m)."""

    beam: float = 4.0
    """Maximum beam (m)."""

    draft: float = 0.8
    """Design draft (m)."""

    freeboard: float = 1.2
    """Freeboard (m)."""

    category: HullCategory = HullCategory.MONOHULL

    # === SHAPE ===
    bow: BowConfig = field(default_factory=BowConfig)
    stern: SternConfig = field(default_factory=SternConfig)
    keel: KeelConfig = field(default_factory=KeelConfig)
    chine: ChineConfig = field(default_factory=ChineConfig)
    deck: DeckConfig = field(default_factory=DeckConfig)

    # === USER CURVES ===
    waterline_profile: Tuple[Point2D, ...] = ()
    """Top-down waterline; scales section width."""

    buttock_profile: Tuple[Point2D, ...] = ()
    """Side buttock line; scales section height."""

    cross_sections: Tuple[CrossSection, ...] = ()

    # === MULTI-HULL LAYOUT ===
    hull_spacing: float = 0.4
    """Catamaran hull offset as a fraction of beam."""

    ama_spacing: float = 0.45
    """Trimaran ama offset as a fraction of beam."""

    ama_scale: float = 0.6
    """Trimaran ama length as a fraction of length."""

    def __post_init__(self):
        self._set("category", parse_enum(HullCategory, self.category, HullCategory.MONOHULL))
        self._set("waterline_profile", parse_points(self.waterline_profile))
        self._set("buttock_profile", parse_points(self.buttock_profile))
        self._set("cross_sections", tuple(self.cross_sections))

    @property
    def is_multihull(self) -> bool:
        return self.category != HullCategory.MONOHULL

    def scaled(
        self,
        length: Optional[float] = None,
        beam: Optional[float] = None,
        draft: Optional[float] = None,
    ) -> "HullConfig":
        """Copy with new principal dimensions; used for multi-hull sub-hulls."""
        return replace(
            self,
            length=self.length if length is None else length,
            beam=self.beam if beam is None else beam,
            draft=self.draft if draft is None else draft,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "length": round(self.length, 3),
            "beam": round(self.beam, 3),
            "draft": round(self.draft, 3),
            "freeboard": round(self.freeboard, 3),
            "category": self.category.value,
            "bow": self.bow.to_dict(),
            "stern": self.stern.to_dict(),
            "keel": self.keel.to_dict(),
            "chine": self.chine.to_dict(),
            "deck": self.deck.to_dict(),
            "waterline_profile": points_to_list(self.waterline_profile),
            "buttock_profile": points_to_list(self.buttock_profile),
            "cross_sections": [s.to_dict() for s in self.cross_sections],
            "hull_spacing": round(self.hull_spacing, 4),
            "ama_spacing": round(self.ama_spacing, 4),
            "ama_scale": round(self.ama_scale, 4),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HullConfig":
        """Create from dictionary; missing keys keep their defaults."""
        d = cls()
        return cls(
            length=data.get("length", d.length),
            beam=data.get("beam", d.beam),
            draft=data.get("draft", d.draft),
            freeboard=data.get("freeboard", d.freeboard),
            category=data.get("category", d.category),
            bow=BowConfig.from_dict(data.get("bow", {})),
            stern=SternConfig.from_dict(data.get("stern", {})),
            keel=KeelConfig.from_dict(data.get("keel", {})),
            chine=ChineConfig.from_dict(data.get("chine", {})),
            deck=DeckConfig.from_dict(data.get("deck", {})),
            waterline_profile=tuple(data.get("waterline_profile", ())),
            buttock_profile=tuple(data.get("buttock_profile", ())),
            cross_sections=tuple(
                CrossSection.from_dict(s) for s in data.get("cross_sections", [])
            ),
            hull_spacing=data.get("hull_spacing", d.hull_spacing),
            ama_spacing=data.get("ama_spacing", d.ama_spacing),
            ama_scale=data.get("ama_scale", d.ama_scale),
        )
