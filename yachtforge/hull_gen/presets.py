"""
hull_gen/presets.py - Default hull configuration and editor profiles.
"""

from __future__ import annotations
from typing import Tuple

from .enums import HullCategory
from .parameters import CrossSection, HullConfig

Point2D = Tuple[float, float]

# Profiles the editor restores when a view is cleared
DEFAULT_WATERLINE_PROFILE: Tuple[Point2D, ...] = (
    (-0.8, 0.0), (-0.4, 0.3), (0.2, 0.4), (0.8, 0.2),
)
DEFAULT_BUTTOCK_PROFILE: Tuple[Point2D, ...] = (
    (-0.8, -0.2), (-0.3, -0.1), (0.3, 0.0), (0.8, 0.1),
)
DEFAULT_SECTION_PROFILE: Tuple[Point2D, ...] = (
    (0.0, -0.3), (0.2, -0.1), (0.4, 0.2),
)

DEFAULT_HULL_CONFIG = HullConfig()


def create_default_config(category: HullCategory = HullCategory.MONOHULL) -> HullConfig:
    """Default hull of the given category."""
    return DEFAULT_HULL_CONFIG.with_field("category", category)


def default_cross_section(slot: int) -> CrossSection:
    """New cross-section override for editor slot 0-10."""
    return CrossSection(position=slot / 10, profile=DEFAULT_SECTION_PROFILE)
