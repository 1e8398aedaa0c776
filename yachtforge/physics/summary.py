"""
physics/summary.py - Headline performance figures.

``get_hull_performance_summary`` combines drag and stability at a fixed
test speed; ``calculate_design_stats`` is the quick scoring the builder
shows for a whole yacht design.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
import math

from yachtforge.core.parsing import safe_ratio
from .drag import BowShapeLike, DragResults, HullTypeLike, calculate_drag
from .parameters import HullDimensions, HullType, YachtDesign, parse_hull_type
from .stability import (
    StabilityResults,
    calculate_foil_takeoff_speed,
    calculate_hull_speed,
    calculate_stability,
)

logger = logging.getLogger(__name__)

TEST_SPEED = 5.0  # m/s

DESIGN_HULL_MODIFIERS = {
    HullType.MONOHULL: 1.0,
    HullType.CATAMARAN: 0.85,
    HullType.TRIMARAN: 0.75,
    HullType.HYDROFOIL: 0.5,
}

CRUISE_CONSUMPTION = 2.0  # kW
MIN_NET_CONSUMPTION = 0.5  # kW


@dataclass(frozen=True)
class HullPerformanceSummary:
    drag: DragResults
    stability: StabilityResults
    hull_speed: float  # m/s
    performance_score: float
    foil_takeoff_speed: Optional[float] = None  # m/s, hydrofoils only

    def to_dict(self) -> Dict[str, Any]:
        return {
            "drag": self.drag.to_dict(),
            "stability": self.stability.to_dict(),
            "hull_speed": round(self.hull_speed, 3),
            "performance_score": round(self.performance_score, 1),
            "foil_takeoff_speed": (
                None if self.foil_takeoff_speed is None else round(self.foil_takeoff_speed, 3)
            ),
        }


@dataclass(frozen=True)
class DesignStats:
    drag_coefficient: float
    stability: float
    max_speed: float  # knots
    turbine_efficiency: float  # 0-1
    solar_output: float  # kW at peak
    range: float  # km at cruise

    def to_dict(self) -> Dict[str, Any]:
        return {
            "drag_coefficient": round(self.drag_coefficient, 4),
            "stability": round(self.stability, 2),
            "max_speed": round(self.max_speed, 2),
            "turbine_efficiency": round(self.turbine_efficiency, 4),
            "solar_output": round(self.solar_output, 3),
            "range": round(self.range, 1),
        }


def get_hull_performance_summary(
    hull_type: HullTypeLike,
    bow_shape: BowShapeLike,
    dimensions: HullDimensions,
) -> HullPerformanceSummary:
    """
    Drag at the 5 m/s test speed, stability and an overall score.

    The score averages a drag score (100 minus one point per 100 N) with
    the stability index.
    """
    hull_type = parse_hull_type(hull_type)
    drag = calculate_drag(hull_type, bow_shape, dimensions, TEST_SPEED)
    stability = calculate_stability(hull_type, dimensions)

    foil_takeoff_speed = None
    if hull_type == HullType.HYDROFOIL:
        foil_takeoff_speed = calculate_foil_takeoff_speed(dimensions.displacement)

    drag_score = max(0.0, 100 - drag.total_drag / 100)
    performance_score = drag_score * 0.5 + stability.stability_index * 0.5

    return HullPerformanceSummary(
        drag=drag,
        stability=stability,
        hull_speed=calculate_hull_speed(dimensions.length),
        performance_score=performance_score,
        foil_takeoff_speed=foil_takeoff_speed,
    )


def calculate_design_stats(design: YachtDesign) -> DesignStats:
    """Builder stats for a design; recomputed on every edit."""
    hull, rotor, solar, battery = design.hull, design.rotor, design.solar, design.battery
    modifier = DESIGN_HULL_MODIFIERS[hull.type]

    drag_coefficient = 0.3 * safe_ratio(hull.beam, hull.length) * modifier
    stability = hull.beam * hull.draft * modifier * 10
    max_speed = math.sqrt(safe_ratio(100, drag_coefficient))
    if hull.type == HullType.HYDROFOIL:
        max_speed *= 1.5

    turbine_efficiency = 0.25 * min(rotor.blade_count / 3, 1.2)

    solar_output = solar.deck_coverage / 100 * 2
    if solar.turbine_integrated:
        solar_output += 0.5

    average_generation = solar_output * 0.5 + turbine_efficiency * 1.5
    net_consumption = max(MIN_NET_CONSUMPTION, CRUISE_CONSUMPTION - average_generation)
    cruise_range = battery.energy / net_consumption * 10

    logger.debug("Design stats for %s: range=%.1f km", design.id, cruise_range)

    return DesignStats(
        drag_coefficient=drag_coefficient,
        stability=stability,
        max_speed=max_speed,
        turbine_efficiency=turbine_efficiency,
        solar_output=solar_output,
        range=cruise_range,
    )
