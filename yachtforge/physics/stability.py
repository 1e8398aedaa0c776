"""
yachtforge Stability

Transverse stability from a simplified metacentric height:

    GM = KB + BM - KG

KB ≈ 0.53 × draft, BM = I / V with I = L × B³ / 12,
KG ≈ 0.6 × draft + 1.5 (includes superstructure). Multihulls use a
beam-proportional GM instead.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict
import logging
import math

from yachtforge.core.constants import (
    GRAVITY_M_S2,
    HULL_SPEED_COEFFICIENT,
    HULL_SPEED_KNOTS_TO_MS,
    METERS_TO_FEET,
    SEAWATER_DENSITY_KG_M3,
)
from yachtforge.core.parsing import clamp, safe_ratio
from .drag import HULL_COEFFICIENTS, HullTypeLike
from .parameters import HullDimensions, HullType, parse_hull_type

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

KB_DRAFT_RATIO = 0.53
KG_DRAFT_RATIO = 0.6
KG_SUPERSTRUCTURE = 1.5  # m

# Multihull GM as a fraction of beam
MULTIHULL_GM_BEAM_RATIO = {
    HullType.CATAMARAN: 0.4,
    HullType.TRIMARAN: 0.5,
}

GYRATION_BEAM_DIVISOR = 2.4
MIN_GM_FOR_ROLL = 0.1  # m

MAX_SAFE_HEEL = 45.0  # degrees
BASE_SAFE_HEEL = 15.0
HEEL_PER_GM = 20.0

FOIL_LIFT_COEFFICIENT = 0.8
DEFAULT_FOIL_AREA = 2.0  # m²


class StabilityRating:
    """Qualitative rating from the average of stability and pitch indices."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"

    THRESHOLDS = (
        (80.0, EXCELLENT),
        (60.0, GOOD),
        (40.0, FAIR),
    )

    @classmethod
    def from_index(cls, average: float) -> str:
        for threshold, rating in cls.THRESHOLDS:
            if average >= threshold:
                return rating
        return cls.POOR


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class StabilityResults:
    """Stability figures for one hull configuration."""

    metacentric_height: float  # GM (m), higher = more stable
    roll_period: float  # Natural roll period (s)
    max_safe_heel_angle: float  # Degrees before capsize risk
    stability_index: float  # 0-100
    pitch_stability: float  # 0-100
    overall_rating: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary with appropriate precision."""
        return {
            "metacentric_height": round(self.metacentric_height, 3),
            "roll_period": round(self.roll_period, 2),
            "max_safe_heel_angle": round(self.max_safe_heel_angle, 1),
            "stability_index": round(self.stability_index, 1),
            "pitch_stability": round(self.pitch_stability, 1),
            "overall_rating": self.overall_rating,
        }


# =============================================================================
# CALCULATIONS
# =============================================================================

def calculate_metacentric_height(hull_type: HullTypeLike, dimensions: HullDimensions) -> float:
    """GM in metres, scaled by the hull family's stability factor."""
    hull_type = parse_hull_type(hull_type)

    if hull_type in MULTIHULL_GM_BEAM_RATIO:
        return dimensions.beam * MULTIHULL_GM_BEAM_RATIO[hull_type]

    kb = dimensions.draft * KB_DRAFT_RATIO
    waterplane_inertia = dimensions.length * dimensions.beam ** 3 / 12
    volume = dimensions.displacement / SEAWATER_DENSITY_KG_M3
    bm = safe_ratio(waterplane_inertia, volume)
    kg = dimensions.draft * KG_DRAFT_RATIO + KG_SUPERSTRUCTURE

    return (kb + bm - kg) * HULL_COEFFICIENTS[hull_type].stability


def calculate_roll_period(beam: float, metacentric_height: float) -> float:
    """T = 2π × sqrt(k² / (g × GM)), k ≈ beam / 2.4."""
    k = beam / GYRATION_BEAM_DIVISOR
    gm = max(metacentric_height, MIN_GM_FOR_ROLL)
    return 2 * math.pi * math.sqrt(k * k / (GRAVITY_M_S2 * gm))


def calculate_stability(hull_type: HullTypeLike, dimensions: HullDimensions) -> StabilityResults:
    """
    Calculate stability characteristics.

    Args:
        hull_type: Hull family; unknown values use monohull coefficients
        dimensions: Principal dimensions, displacement in kg

    Returns:
        StabilityResults with indices clamped to [0, 100]
    """
    hull_type = parse_hull_type(hull_type)
    coeffs = HULL_COEFFICIENTS[hull_type]
    length, beam = dimensions.length, dimensions.beam

    gm = calculate_metacentric_height(hull_type, dimensions)
    roll_period = calculate_roll_period(beam, gm)
    max_heel = min(MAX_SAFE_HEEL, BASE_SAFE_HEEL + gm * HEEL_PER_GM)

    stability_index = clamp(
        gm * 30 + coeffs.heeling_resistance * 20 + safe_ratio(beam, length) * 50, 0.0, 100.0
    )
    pitch_stability = clamp(
        safe_ratio(length, beam) * 15 + coeffs.pitching_moment * 30 + 20, 0.0, 100.0
    )
    rating = StabilityRating.from_index((stability_index + pitch_stability) / 2)

    logger.debug("Stability %s: GM=%.3f m, rating=%s", hull_type.value, gm, rating)

    return StabilityResults(
        metacentric_height=gm,
        roll_period=roll_period,
        max_safe_heel_angle=max_heel,
        stability_index=stability_index,
        pitch_stability=pitch_stability,
        overall_rating=rating,
    )


def calculate_hull_speed(length: float) -> float:
    """
    Displacement hull speed in m/s.

    1.34 × sqrt(LWL in feet) knots.
    """
    length_feet = max(0.0, length) * METERS_TO_FEET
    return HULL_SPEED_COEFFICIENT * math.sqrt(length_feet) * HULL_SPEED_KNOTS_TO_MS


def calculate_foil_takeoff_speed(displacement: float, foil_area: float = DEFAULT_FOIL_AREA) -> float:
    """Speed (m/s) at which foil lift equals weight."""
    weight = max(0.0, displacement) * GRAVITY_M_S2
    lift_per_speed_sq = SEAWATER_DENSITY_KG_M3 * FOIL_LIFT_COEFFICIENT * foil_area
    return math.sqrt(safe_ratio(2 * weight, lift_per_speed_sq))
