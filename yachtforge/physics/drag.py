"""
yachtforge Hydrodynamic Drag

Drag decomposition for the four hull families:

- Form drag on the frontal (beam x draft) area
- Skin friction on the wetted surface
- Wave-making resistance growing with Froude number squared
- Induced drag from foil lift while a hydrofoil is foiling

total = form + friction + wave + induced, with no further correction.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Union
import logging
import math

from yachtforge.core.constants import (
    SEAWATER_DENSITY_KG_M3,
    GRAVITY_M_S2,
)
from yachtforge.core.parsing import safe_ratio
from .parameters import BowShape, HullDimensions, HullType, parse_bow_shape, parse_hull_type

logger = logging.getLogger(__name__)


# =============================================================================
# COEFFICIENT TABLES
# =============================================================================

RHO_SEAWATER = SEAWATER_DENSITY_KG_M3  # 1025.0 kg/m³
GRAVITY = GRAVITY_M_S2  # 9.81 m/s²


@dataclass(frozen=True)
class HullCoefficients:
    """Empirical coefficients for one hull family."""
    drag: float  # Cd - form drag
    friction: float  # Cf - skin friction
    wave: float  # Cw - wave-making resistance
    stability: float  # GM scaling factor
    heeling_resistance: float  # Resistance to roll
    pitching_moment: float  # Resistance to pitch
    lift: float  # Foil lift coefficient


@dataclass(frozen=True)
class BowModifier:
    """Multipliers a bow shape applies to drag, wave and pitch terms."""
    drag: float
    wave: float
    pitch: float


HULL_COEFFICIENTS: Dict[HullType, HullCoefficients] = {
    HullType.MONOHULL: HullCoefficients(0.45, 0.003, 0.15, 0.8, 0.6, 0.7, 0.0),
    # Slim hulls: less form drag, more wetted surface
    HullType.CATAMARAN: HullCoefficients(0.35, 0.0035, 0.12, 1.5, 1.2, 0.9, 0.0),
    HullType.TRIMARAN: HullCoefficients(0.32, 0.004, 0.10, 1.8, 1.4, 1.0, 0.0),
    HullType.HYDROFOIL: HullCoefficients(0.20, 0.002, 0.02, 0.6, 0.4, 0.5, 0.8),
}

BOW_MODIFIERS: Dict[BowShape, BowModifier] = {
    BowShape.PIERCING: BowModifier(drag=0.85, wave=0.80, pitch=1.1),
    BowShape.FLARED: BowModifier(drag=1.05, wave=1.10, pitch=0.85),
    BowShape.BULBOUS: BowModifier(drag=0.90, wave=0.70, pitch=1.0),
}

# S ≈ L × (B + 2D) × Cs
WETTED_SURFACE_COEFFICIENTS: Dict[HullType, float] = {
    HullType.MONOHULL: 0.75,
    HullType.CATAMARAN: 0.85,
    HullType.TRIMARAN: 0.95,
    HullType.HYDROFOIL: 0.60,
}

# Foiling attenuation of the hull terms
FOIL_FORM_FACTOR = 0.3
FOIL_FRICTION_FACTOR = 0.4
FOIL_WAVE_FACTOR = 0.1
FOIL_ASPECT_RATIO = 8.0
FOIL_AREA_RATIO = 0.5  # Foil area per metre of hull length

EFFECTIVE_SPEED_FACTOR = 0.1


# =============================================================================
# DRAG RESULTS
# =============================================================================

@dataclass(frozen=True)
class DragResults:
    """Drag components in newtons."""

    total_drag: float
    form_drag: float  # Pressure drag
    friction_drag: float  # Skin friction
    wave_drag: float  # Wave-making resistance
    induced_drag: float  # Foil lift penalty
    effective_speed: float  # m/s after drag deceleration

    froude_number: float = 0.0
    wetted_surface: float = 0.0  # m²

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary with appropriate precision."""
        return {
            "total_drag": round(self.total_drag, 2),
            "form_drag": round(self.form_drag, 2),
            "friction_drag": round(self.friction_drag, 2),
            "wave_drag": round(self.wave_drag, 2),
            "induced_drag": round(self.induced_drag, 2),
            "effective_speed": round(self.effective_speed, 3),
            "froude_number": round(self.froude_number, 4),
            "wetted_surface": round(self.wetted_surface, 3),
        }


# =============================================================================
# CALCULATIONS
# =============================================================================

HullTypeLike = Union[HullType, str]
BowShapeLike = Union[BowShape, str]


def hull_coefficients(hull_type: HullTypeLike) -> HullCoefficients:
    """Coefficient table entry; unknown hull types use the monohull row."""
    return HULL_COEFFICIENTS[parse_hull_type(hull_type)]


def bow_modifier(bow_shape: BowShapeLike) -> BowModifier:
    """Bow modifier entry; unknown bows use the piercing row."""
    return BOW_MODIFIERS[parse_bow_shape(bow_shape)]


def calculate_wetted_surface(hull_type: HullTypeLike, dimensions: HullDimensions) -> float:
    """Wetted surface area (m²) from L × (B + 2D) × Cs."""
    cs = WETTED_SURFACE_COEFFICIENTS[parse_hull_type(hull_type)]
    return dimensions.length * (dimensions.beam + 2 * dimensions.draft) * cs


def calculate_froude_number(speed: float, length: float) -> float:
    """Fn = V / sqrt(g × L); zero for a non-positive length."""
    if length <= 0:
        return 0.0
    return speed / math.sqrt(GRAVITY * length)


def calculate_drag(
    hull_type: HullTypeLike,
    bow_shape: BowShapeLike,
    dimensions: HullDimensions,
    speed: float,
    hydrofoiling: bool = False,
) -> DragResults:
    """
    Calculate total hydrodynamic drag.

    Args:
        hull_type: Hull family
        bow_shape: Bow shape
        dimensions: Principal dimensions, displacement in kg
        speed: Boat speed (m/s)
        hydrofoiling: Whether a hydrofoil hull is up on its foils

    Returns:
        DragResults in newtons
    """
    hull_type = parse_hull_type(hull_type)
    coeffs = HULL_COEFFICIENTS[hull_type]
    bow = bow_modifier(bow_shape)

    wetted_surface = calculate_wetted_surface(hull_type, dimensions)
    speed_sq = speed * speed
    dynamic_pressure = 0.5 * RHO_SEAWATER * speed_sq

    frontal_area = dimensions.beam * dimensions.draft
    form_drag = dynamic_pressure * coeffs.drag * bow.drag * frontal_area

    friction_drag = dynamic_pressure * coeffs.friction * wetted_surface

    froude_number = calculate_froude_number(speed, dimensions.length)
    wave_coefficient = coeffs.wave * bow.wave * froude_number ** 2
    wave_drag = dynamic_pressure * wave_coefficient * wetted_surface

    induced_drag = 0.0
    # Foils carry no load at rest
    if hull_type == HullType.HYDROFOIL and hydrofoiling and speed > 0:
        form_drag *= FOIL_FORM_FACTOR
        friction_drag *= FOIL_FRICTION_FACTOR
        wave_drag *= FOIL_WAVE_FACTOR

        lift_required = dimensions.displacement * GRAVITY
        foil_area = dimensions.length * FOIL_AREA_RATIO
        induced_drag = safe_ratio(
            lift_required ** 2, dynamic_pressure * math.pi * FOIL_ASPECT_RATIO * foil_area
        )

    total_drag = form_drag + friction_drag + wave_drag + induced_drag

    drag_deceleration = safe_ratio(total_drag, dimensions.displacement)
    effective_speed = max(0.0, speed - drag_deceleration * EFFECTIVE_SPEED_FACTOR)

    logger.debug(
        "Drag %s at %.2f m/s: total=%.1f N (Fn=%.3f)",
        hull_type.value, speed, total_drag, froude_number,
    )

    return DragResults(
        total_drag=total_drag,
        form_drag=form_drag,
        friction_drag=friction_drag,
        wave_drag=wave_drag,
        induced_drag=induced_drag,
        effective_speed=effective_speed,
        froude_number=froude_number,
        wetted_surface=wetted_surface,
    )
