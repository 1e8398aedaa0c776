"""
turbine/styles.py - Radial offset curves per blade style.

Each curve gives the blade's distance from the axis as a fraction of
rotor radius at span position t (0 = bottom, 1 = top).
"""

from __future__ import annotations
from typing import Callable, Dict
import math

from .enums import BladeStyle


def _troposkein(t: float) -> float:
    tt = (t - 0.5) * 2
    return 0.95 - 0.6 * tt * tt


RADIAL_OFFSETS: Dict[BladeStyle, Callable[[float], float]] = {
    BladeStyle.HELIX: lambda t: 0.9,
    BladeStyle.DARRIEUS: lambda t: 0.3 + 0.7 * math.sin(t * math.pi),
    BladeStyle.SAVONIUS: lambda t: 0.5 + 0.3 * math.sin(t * math.pi * 2),
    BladeStyle.H_ROTOR: lambda t: 0.95,
    BladeStyle.GIROMILL: lambda t: 0.9,
    BladeStyle.RIBBON: lambda t: 0.4 + 0.5 * math.sin(t * math.pi),
    BladeStyle.INFINITY: lambda t: 0.3 + 0.5 * abs(math.sin(t * math.pi * 2)),
    BladeStyle.TROPOSKEIN: _troposkein,
    BladeStyle.HYBRID: lambda t: 0.5 + 0.4 * math.sin(t * math.pi),
}

DEFAULT_RADIAL_FRACTION = 0.85


def radial_offset(style: BladeStyle, t: float, diameter: float) -> float:
    """Blade distance from the axis (m); custom and unknown styles sit at 0.85r."""
    curve = RADIAL_OFFSETS.get(style)
    fraction = curve(t) if curve is not None else DEFAULT_RADIAL_FRACTION
    return diameter / 2 * fraction
