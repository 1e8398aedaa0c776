"""
contracts/payloads.py - Pydantic models for configuration payloads.

Payloads come from the builder UI as camelCase JSON. Each model checks
structure and numeric types, then converts to the frozen record the
generators consume. Enum strings are passed through untouched; the
records map unknown values to their documented defaults.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar, Union
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from yachtforge.hull_gen.parameters import HullConfig
from yachtforge.physics.parameters import HullDimensions, YachtDesign
from yachtforge.turbine.parameters import TurbineConfig
from yachtforge.webgl.errors import ConfigurationError

logger = logging.getLogger(__name__)


class PayloadModel(BaseModel):
    """Accepts camelCase or snake_case keys; dumps snake_case for ``from_dict``."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_data(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


# =============================================================================
# Shared
# =============================================================================


class PointPayload(PayloadModel):
    """A profile point in normalized space."""

    x: float = Field(..., description="Horizontal coordinate")
    y: float = Field(..., description="Vertical coordinate")


ProfilePayload = List[Union[PointPayload, Tuple[float, float]]]


# =============================================================================
# Hull Schemas
# =============================================================================


class BowPayload(PayloadModel):
    type: Optional[str] = Field(None, description="Bow family, e.g. piercing/flared/bulbous")
    angle: Optional[float] = Field(None, description="Entry angle (degrees)")
    overhang: Optional[float] = Field(None, description="Overhang (percent of length)")
    flare: Optional[float] = Field(None, description="Flare angle (degrees)")
    rake: Optional[float] = Field(None, description="Forward rake (degrees)")
    bulb_size: Optional[float] = Field(None, description="Bulb size (0-0.5)")
    bulb_position: Optional[float] = Field(None, description="Vertical bulb position (0-1)")


class SternPayload(PayloadModel):
    type: Optional[str] = None
    angle: Optional[float] = None
    overhang: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    rake: Optional[float] = None


class KeelPayload(PayloadModel):
    type: Optional[str] = None
    depth: Optional[float] = None
    length: Optional[float] = None
    position: Optional[float] = None
    sweep: Optional[float] = None
    fin_type: Optional[str] = None
    fin_depth: Optional[float] = None


class ChinePayload(PayloadModel):
    type: Optional[str] = None
    count: Optional[int] = Field(None, ge=0, description="Number of chines")
    positions: Optional[List[float]] = None
    angles: Optional[List[float]] = None


class DeckPayload(PayloadModel):
    camber: Optional[float] = None
    sheer: Optional[float] = None
    coach_roof: Optional[bool] = None
    coach_roof_height: Optional[float] = None
    coach_roof_length: Optional[float] = None


class CrossSectionPayload(PayloadModel):
    position: float = Field(..., description="Position along length (0 = bow)")
    profile: ProfilePayload = Field(default_factory=list)
    beam_multiplier: Optional[float] = None
    deadrise: Optional[float] = None
    freeboard: Optional[float] = None


class HullPayload(PayloadModel):
    """Procedural hull configuration."""

    length: float = Field(..., gt=0, description="Overall length (m)")
    beam: float = Field(..., gt=0, description="Maximum beam (m)")
    draft: float = Field(..., gt=0, description="Design draft (m)")
    freeboard: Optional[float] = Field(None, description="Freeboard (m)")
    category: Optional[str] = Field(None, description="monohull/catamaran/trimaran")

    bow: BowPayload = Field(default_factory=BowPayload)
    stern: SternPayload = Field(default_factory=SternPayload)
    keel: KeelPayload = Field(default_factory=KeelPayload)
    chine: ChinePayload = Field(default_factory=ChinePayload)
    deck: DeckPayload = Field(default_factory=DeckPayload)

    waterline_profile: ProfilePayload = Field(default_factory=list)
    buttock_profile: ProfilePayload = Field(default_factory=list)
    cross_sections: List[CrossSectionPayload] = Field(default_factory=list)

    hull_spacing: Optional[float] = None
    ama_spacing: Optional[float] = None
    ama_scale: Optional[float] = None

    def to_record(self) -> HullConfig:
        return HullConfig.from_dict(self.to_data())


# =============================================================================
# Turbine Schemas
# =============================================================================


class BladeSectionPayload(PayloadModel):
    position: float = Field(..., description="Height fraction (0 = base)")
    width: Optional[float] = None
    thickness: Optional[float] = None
    pitch: Optional[float] = None
    twist: Optional[float] = None
    sweep: Optional[float] = None
    camber: Optional[float] = None
    leading_edge: Optional[float] = None
    trailing_edge: Optional[float] = None
    offset: Optional[Union[PointPayload, Tuple[float, float]]] = None


class BladePayload(PayloadModel):
    style: Optional[str] = Field(None, description="Blade style, e.g. helix/darrieus")
    airfoil: Optional[str] = Field(None, description="Airfoil family")
    chord: Optional[float] = None
    span: Optional[float] = None
    thickness: Optional[float] = None
    twist: Optional[float] = None
    taper: Optional[float] = None
    sweep: Optional[float] = None
    prebend: Optional[float] = None
    sections: Optional[List[BladeSectionPayload]] = None


class HubPayload(PayloadModel):
    type: Optional[str] = None
    diameter: Optional[float] = None
    length: Optional[float] = None
    top_cap: Optional[bool] = None
    bottom_mount: Optional[bool] = None
    material: Optional[str] = None


class ShaftPayload(PayloadModel):
    visible: Optional[bool] = None
    diameter: Optional[float] = None
    style: Optional[str] = None
    sections: Optional[int] = None


class SupportArmPayload(PayloadModel):
    count: Optional[int] = Field(None, ge=0)
    positions: Optional[List[float]] = None
    type: Optional[str] = None
    width: Optional[float] = None
    fairing: Optional[bool] = None


class TurbinePayload(PayloadModel):
    """Procedural turbine configuration."""

    height: float = Field(..., gt=0, description="Total height (m)")
    diameter: float = Field(..., gt=0, description="Rotor diameter (m)")
    blade_count: int = Field(3, description="Number of blades; clamped to at least 1")

    blade: BladePayload = Field(default_factory=BladePayload)
    hub: HubPayload = Field(default_factory=HubPayload)
    shaft: ShaftPayload = Field(default_factory=ShaftPayload)
    support_arms: SupportArmPayload = Field(default_factory=SupportArmPayload)

    def to_record(self) -> TurbineConfig:
        return TurbineConfig.from_dict(self.to_data())


# =============================================================================
# Performance Schemas
# =============================================================================


class HullDimensionsPayload(PayloadModel):
    """Principal dimensions for the performance model."""

    length: float = Field(..., gt=0, description="Length (m)")
    beam: float = Field(..., gt=0, description="Beam (m)")
    draft: float = Field(..., gt=0, description="Draft (m)")
    displacement: float = Field(..., gt=0, description="Displacement (kg)")

    def to_record(self) -> HullDimensions:
        return HullDimensions.from_dict(self.to_data())


class HullSpecPayload(PayloadModel):
    type: Optional[str] = None
    length: Optional[float] = None
    beam: Optional[float] = None
    draft: Optional[float] = None
    bow_shape: Optional[str] = None


class RotorPayload(PayloadModel):
    height: Optional[float] = None
    diameter: Optional[float] = None
    blade_count: Optional[int] = None
    twist: Optional[float] = None
    taper: Optional[float] = None
    thickness: Optional[float] = None
    camber: Optional[float] = None
    blade_profile: ProfilePayload = Field(default_factory=list)


class SolarPayload(PayloadModel):
    deck_coverage: Optional[float] = Field(None, ge=0, le=100)
    turbine_integrated: Optional[bool] = None
    canopy_enabled: Optional[bool] = None


class BatteryPayload(PayloadModel):
    capacity: Optional[float] = Field(None, gt=0, description="Capacity (kWh)")
    current_charge: Optional[float] = Field(None, ge=0, le=100)


class YachtDesignPayload(PayloadModel):
    """A saved yacht design."""

    id: Optional[str] = None
    name: Optional[str] = None
    hull: HullSpecPayload = Field(default_factory=HullSpecPayload)
    rotor: RotorPayload = Field(default_factory=RotorPayload, alias="turbine")
    solar: SolarPayload = Field(default_factory=SolarPayload)
    battery: BatteryPayload = Field(default_factory=BatteryPayload)
    deck_modules: List[str] = Field(default_factory=list)

    def to_record(self) -> YachtDesign:
        return YachtDesign.from_dict(self.to_data())


# =============================================================================
# Parsing
# =============================================================================

M = TypeVar("M", bound=PayloadModel)


def format_issues(error: ValidationError) -> List[str]:
    """One ``path: message`` line per validation error."""
    issues = []
    for item in error.errors():
        path = ".".join(str(part) for part in item["loc"]) or "<root>"
        issues.append(f"{path}: {item['msg']}")
    return issues


def validate_payload(model: Type[M], data: Any, record: str) -> M:
    """
    Validate a payload against a model.

    Raises:
        ConfigurationError: If the payload is structurally invalid
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        issues = format_issues(e)
        logger.warning("Rejected %s payload: %s", record, issues)
        raise ConfigurationError(record, issues) from e


def parse_hull_config(data: Any) -> HullConfig:
    return validate_payload(HullPayload, data, "hull").to_record()


def parse_turbine_config(data: Any) -> TurbineConfig:
    return validate_payload(TurbinePayload, data, "turbine").to_record()


def parse_hull_dimensions(data: Any) -> HullDimensions:
    return validate_payload(HullDimensionsPayload, data, "hull_dimensions").to_record()


def parse_yacht_design(data: Any) -> YachtDesign:
    return validate_payload(YachtDesignPayload, data, "yacht").to_record()
