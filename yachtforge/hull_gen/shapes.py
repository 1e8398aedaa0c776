"""
hull_gen/shapes.py - Shape family strategy tables.

Each table maps a shape enum to a pure function. Lookups that miss a
table use the generic shape defined next to it.

Bow and stern functions return (width, height) multipliers applied to
the half-beam and to draft/freeboard. ``t`` runs from the start of the
end region (t=0) to the extreme end of the hull (t=1).
"""

from __future__ import annotations
from typing import Callable, Dict, Tuple
import math

from yachtforge.curves.interpolation import ease_in_out_quad, smoothstep
from .enums import BowType, ChineType, KeelType, SternType
from .parameters import BowConfig, ChineConfig, KeelConfig, SternConfig

Profile = Tuple[float, float]

MIN_WIDTH = 0.01
MIN_HEIGHT = 0.1


# =============================================================================
# BOW
# =============================================================================

def _bow_piercing(bow: BowConfig, t: float) -> Profile:
    return (1 - t * t) * 0.8, 1 - t * 0.3


def _bow_flared(bow: BowConfig, t: float) -> Profile:
    flare_effect = math.sin(math.radians(bow.flare)) * 0.3
    return (1 - t * 0.7) * (1 + flare_effect * (1 - t)), 1 - t * 0.2


def _bow_bulbous(bow: BowConfig, t: float) -> Profile:
    bulb = math.sin(smoothstep(0.6, 1, t) * math.pi) * bow.bulb_size
    return (1 - t * 0.6) + bulb, 1 - t * 0.25 + bulb * 0.5


def _bow_spoon(bow: BowConfig, t: float) -> Profile:
    return (1 - t ** 1.5) * 0.85, 1 - t * 0.35 + math.sin(t * math.pi) * 0.1


def _bow_clipper(bow: BowConfig, t: float) -> Profile:
    overhang = bow.overhang / 100
    return (1 - t * 0.7) * (1 + overhang * t), 1 - t * 0.15 + overhang * t * 0.3


def _bow_plumb(bow: BowConfig, t: float) -> Profile:
    return 1 - t * 0.9, 1 - t * 0.1


def _bow_axe(bow: BowConfig, t: float) -> Profile:
    return (1 - t * 0.85) * (0.7 + 0.3 * t), 1 - t * 0.05


def _bow_wave_piercing(bow: BowConfig, t: float) -> Profile:
    return (1 - t) ** 2 * 0.6, 1 - t * 0.4


def generic_bow(bow: BowConfig, t: float) -> Profile:
    return 1 - t * 0.7, 1 - t * 0.3


BOW_SHAPES: Dict[BowType, Callable[[BowConfig, float], Profile]] = {
    BowType.PIERCING: _bow_piercing,
    BowType.FLARED: _bow_flared,
    BowType.BULBOUS: _bow_bulbous,
    BowType.SPOON: _bow_spoon,
    BowType.CLIPPER: _bow_clipper,
    BowType.PLUMB: _bow_plumb,
    BowType.AXE: _bow_axe,
    BowType.WAVE_PIERCING: _bow_wave_piercing,
}


def bow_profile(bow: BowConfig, t: float) -> Profile:
    """Bow multipliers with the entry angle applied, clamped to minimums."""
    width, height = BOW_SHAPES.get(bow.type, generic_bow)(bow, t)
    width *= 1 - math.tan(math.radians(bow.angle)) * t * 0.2
    return max(MIN_WIDTH, width), max(MIN_HEIGHT, height)


# =============================================================================
# STERN
# =============================================================================

def _stern_transom(stern: SternConfig, t: float) -> Profile:
    width = stern.width * (1 - (1 - t) * 0.3)
    height = stern.height + (1 - stern.height) * (1 - t) * 0.5
    return width, height


def _stern_cruiser(stern: SternConfig, t: float) -> Profile:
    return stern.width * (0.7 + 0.3 * math.sin(t * math.pi / 2)), 0.8 + 0.2 * t


def _stern_canoe(stern: SternConfig, t: float) -> Profile:
    width = stern.width * (1 - t * 0.7) * math.cos(t * math.pi / 3)
    return width, 0.7 + 0.3 * (1 - t)


def _stern_double_ended(stern: SternConfig, t: float) -> Profile:
    return (1 - t * 0.85) * 0.6, 0.6 + 0.4 * (1 - t * t)


def _stern_sugar_scoop(stern: SternConfig, t: float) -> Profile:
    scoop = math.sin(t * math.pi) * 0.15
    return stern.width * (0.85 + 0.15 * t), 0.5 + scoop + t * 0.3


def _stern_reverse_transom(stern: SternConfig, t: float) -> Profile:
    reverse = math.sin(math.radians(stern.angle)) * t * 0.2
    return stern.width * (0.9 + 0.1 * t), 0.6 + 0.4 * t - reverse


def _stern_ducktail(stern: SternConfig, t: float) -> Profile:
    return stern.width * (0.8 + 0.2 * math.sqrt(t)), 0.4 + 0.6 * ease_in_out_quad(t)


def generic_stern(stern: SternConfig, t: float) -> Profile:
    return stern.width * (0.9 + 0.1 * t), 0.7 + 0.3 * t


STERN_SHAPES: Dict[SternType, Callable[[SternConfig, float], Profile]] = {
    SternType.TRANSOM: _stern_transom,
    SternType.CRUISER: _stern_cruiser,
    SternType.CANOE: _stern_canoe,
    SternType.DOUBLE_ENDED: _stern_double_ended,
    SternType.SUGAR_SCOOP: _stern_sugar_scoop,
    SternType.REVERSE_TRANSOM: _stern_reverse_transom,
    SternType.DUCKTAIL: _stern_ducktail,
}


def stern_profile(stern: SternConfig, t: float) -> Profile:
    """Stern multipliers clamped to minimums."""
    width, height = STERN_SHAPES.get(stern.type, generic_stern)(stern, t)
    return max(MIN_WIDTH, width), max(MIN_HEIGHT, height)


# =============================================================================
# KEEL
# =============================================================================
# Keel functions take u (0-1 across the section) and x (0-1 along the hull)

def _keel_flat(keel: KeelConfig, u: float, x: float) -> float:
    return 0.0


def _keel_v_hull(keel: KeelConfig, u: float, x: float) -> float:
    return abs(0.5 - u) * keel.depth * 2


def _keel_deep_v(keel: KeelConfig, u: float, x: float) -> float:
    return (abs(0.5 - u) * 2) ** 0.8 * keel.depth * 1.5


def _keel_modified_v(keel: KeelConfig, u: float, x: float) -> float:
    # Flatter toward the bow
    v_amount = 0.5 + x if x < 0.5 else 1.0
    return abs(0.5 - u) * keel.depth * 2 * v_amount


def _keel_round_bottom(keel: KeelConfig, u: float, x: float) -> float:
    r = (u - 0.5) * 2
    return math.sqrt(max(0.0, 1 - r * r)) * keel.depth * 0.8


def _keel_multi_chine(keel: KeelConfig, u: float, x: float) -> float:
    return math.floor(abs(0.5 - u) * 2 * 4) / 4 * keel.depth


def _keel_tunnel(keel: KeelConfig, u: float, x: float) -> float:
    if u < 0.3 or u > 0.7:
        return keel.depth * 0.5
    return 0.0


def _keel_cathedral(keel: KeelConfig, u: float, x: float) -> float:
    tri = abs(u - 0.5)
    if tri < 0.15:
        return keel.depth * 0.3
    return keel.depth * 0.3 if abs(tri - 0.35) < 0.15 else 0.0


def generic_keel(keel: KeelConfig, u: float, x: float) -> float:
    return abs(0.5 - u) * keel.depth


KEEL_SHAPES: Dict[KeelType, Callable[[KeelConfig, float, float], float]] = {
    KeelType.FLAT: _keel_flat,
    KeelType.V_HULL: _keel_v_hull,
    KeelType.DEEP_V: _keel_deep_v,
    KeelType.MODIFIED_V: _keel_modified_v,
    KeelType.ROUND_BOTTOM: _keel_round_bottom,
    KeelType.MULTI_CHINE: _keel_multi_chine,
    KeelType.TUNNEL: _keel_tunnel,
    KeelType.CATHEDRAL: _keel_cathedral,
}


def keel_window(keel: KeelConfig, x: float) -> float:
    """Fade factor of the keel along the hull; 0 outside its window."""
    start = keel.position - keel.length / 2
    end = keel.position + keel.length / 2
    if not start <= x <= end:
        return 0.0
    return smoothstep(start, start + 0.1, x) * smoothstep(end, end - 0.1, x)


def keel_depth(keel: KeelConfig, u: float, x: float) -> float:
    """Extra depth below the hull bottom at section sample u, station x."""
    factor = keel_window(keel, x)
    if factor == 0.0:
        return 0.0
    return KEEL_SHAPES.get(keel.type, generic_keel)(keel, u, x) * factor


# =============================================================================
# CHINE
# =============================================================================

CHINE_SCALES: Dict[ChineType, Callable[[float], float]] = {
    ChineType.HARD: lambda angle: 1 + math.tan(angle) * 0.05,
    ChineType.SOFT: lambda angle: 1 + math.sin(angle) * 0.03,
    ChineType.REVERSE: lambda angle: 1 - math.tan(angle) * 0.03,
    ChineType.SPRAY_RAIL: lambda angle: 1 + math.tan(angle) * 0.08,
}

CHINE_BAND = 0.1
DEFAULT_CHINE_POSITION = 0.5
DEFAULT_CHINE_ANGLE = 15.0


def chine_scale(chine: ChineConfig, normalized_y: float) -> float:
    """
    Horizontal scale at a normalized section height.

    Every chine whose band contains the height contributes its factor.
    """
    scale_fn = CHINE_SCALES.get(chine.type)
    if scale_fn is None or chine.count == 0:
        return 1.0

    scale = 1.0
    for i in range(chine.count):
        position = (chine.positions[i] if i < len(chine.positions) else 0.0) or DEFAULT_CHINE_POSITION
        angle = (chine.angles[i] if i < len(chine.angles) else 0.0) or DEFAULT_CHINE_ANGLE
        if abs(normalized_y - position) < CHINE_BAND:
            scale *= scale_fn(math.radians(angle))
    return scale
