"""
turbine/sections.py - Blade section blending along the span.
"""

from __future__ import annotations
from typing import Sequence

from yachtforge.curves.interpolation import interpolate_keyed, smooth_blend
from .parameters import DEFAULT_BLADE_SECTION, BladeSection

BLENDED_FIELDS = (
    "width",
    "thickness",
    "pitch",
    "twist",
    "sweep",
    "camber",
    "leading_edge",
    "trailing_edge",
)


def section_value(sections: Sequence[BladeSection], t: float, name: str) -> float:
    """
    One section property at span position t.

    No sections gives the default section's value; a single section is
    constant along the span.
    """
    return interpolate_keyed(
        sections, t, name, getattr(DEFAULT_BLADE_SECTION, name), blend=smooth_blend
    )


def sample_section(sections: Sequence[BladeSection], t: float) -> BladeSection:
    """Blended section at span position t."""
    values = {name: section_value(sections, t, name) for name in BLENDED_FIELDS}
    offset = (
        interpolate_keyed(sections, t, lambda s: s.offset[0], 0.0),
        interpolate_keyed(sections, t, lambda s: s.offset[1], 0.0),
    )
    return BladeSection(position=t, offset=offset, **values)
