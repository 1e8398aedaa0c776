"""
hull_gen/sections.py - Station cross-section synthesis.

A station is the half-section of the hull at fraction ``position`` of its
length (0 = bow, 1 = stern), sampled from the keel line (index 0) to the
deck edge (last index). Points are (half-breadth, height) in meters with
the waterline at height 0.
"""

from __future__ import annotations
from typing import List, Tuple
import logging

from yachtforge.curves.interpolation import entry_at_slot, interpolate_path
from .parameters import HullConfig
from .shapes import bow_profile, chine_scale, keel_depth, stern_profile

logger = logging.getLogger(__name__)

Point2D = Tuple[float, float]

BOW_END = 0.25
STERN_START = 0.75
SECTION_SLOTS = 10

KEEL_BAND = 0.1
SIDE_BAND = 0.8


def region_multipliers(config: HullConfig, position: float) -> Tuple[float, float]:
    """
    Width and height multipliers for a station.

    Combines the bow/stern region shapes with the user-drawn waterline,
    buttock and cross-section overrides.
    """
    if position < BOW_END:
        width, height = bow_profile(config.bow, 1 - position / BOW_END)
    elif position > STERN_START:
        width, height = stern_profile(config.stern, (position - STERN_START) / (1 - STERN_START))
    else:
        width, height = 1.0, 1.0

    if config.waterline_profile:
        width *= abs(interpolate_path(config.waterline_profile, position)[1]) + 0.5

    if config.buttock_profile:
        height *= abs(interpolate_path(config.buttock_profile, position)[1]) + 0.5

    override = entry_at_slot(config.cross_sections, position, SECTION_SLOTS)
    if override is not None and override.profile:
        width *= override.beam_multiplier or 1.0

    return width, height


def generate_cross_section(
    config: HullConfig,
    position: float,
    resolution: int = 16,
) -> List[Point2D]:
    """
    Generate the half cross-section at a station.

    Args:
        config: Hull configuration
        position: Station position along the hull (0 = bow, 1 = stern)
        resolution: Number of transverse segments

    Returns:
        ``resolution + 1`` points from keel line to deck edge
    """
    width, height = region_multipliers(config, position)

    half_beam = config.beam / 2 * width
    draft = config.draft * height
    freeboard = config.freeboard * height

    points: List[Point2D] = []
    for i in range(resolution + 1):
        u = i / resolution
        x = u * half_beam

        if u < KEEL_BAND:
            y = -draft - keel_depth(config.keel, u, position)
        elif u < SIDE_BAND:
            side = (u - KEEL_BAND) / (SIDE_BAND - KEEL_BAND)
            y = -draft * (1 - side) + freeboard * side * 0.3
        else:
            deck = (u - SIDE_BAND) / (1 - SIDE_BAND)
            y = freeboard * (0.3 + deck * 0.7)

        points.append((x, y))

    return apply_chine(config, points, draft)


def apply_chine(config: HullConfig, points: List[Point2D], draft: float) -> List[Point2D]:
    """Scale half-breadths inside each chine band."""
    chine = config.chine
    if chine.count == 0:
        return points

    result = []
    for x, y in points:
        normalized_y = (y + draft) / (draft * 2 + 1)
        result.append((x * chine_scale(chine, normalized_y), y))
    return result
