"""
hull_gen/assembly.py - Multi-hull and deck assembly.

Catamarans and trimarans reuse the single-hull loft with scaled
dimensions; twin parts share one mesh and differ only in placement.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
import math
import logging

from yachtforge.core.config import get_settings
from yachtforge.webgl.config import DetailConfig
from yachtforge.webgl.primitives import box, extrude, quadratic_bezier
from yachtforge.webgl.schema import AssemblyData
from .enums import HullCategory
from .loft import loft_hull
from .parameters import HullConfig

logger = logging.getLogger(__name__)

# Catamaran layout
CATAMARAN_HULL_BEAM = 0.3
CROSS_BEAM_WIDTH = 0.3
CROSS_BEAM_HEIGHT = 0.25
CROSS_BEAM_X = 0.2
CROSS_BEAM_CLEARANCE = 0.3

# Trimaran layout
TRIMARAN_MAIN_BEAM = 0.4
AMA_BEAM = 0.15
AMA_DRAFT = 0.7
AMA_OFFSET_X = -0.05
AMA_RISE = 0.2
AKA_WIDTH = 0.2
AKA_HEIGHT = 0.15
AKA_POSITIONS = (0.15, -0.15)
AKA_CLEARANCE = 0.2
AKA_ROLL = 0.1

# Deck
DECK_WIDTH_MONOHULL = 0.5
DECK_WIDTH_MULTIHULL = 0.75
DECK_LENGTH = 0.65
DECK_CLEARANCE = 0.3
DECK_BASE_THICKNESS = 0.1
DECK_CURVE_SEGMENTS = 12


def _detail(detail: Optional[DetailConfig]) -> DetailConfig:
    return detail if detail is not None else get_settings().detail


# =============================================================================
# MULTI-HULLS
# =============================================================================

def generate_catamaran_hulls(
    config: HullConfig,
    hull_spacing: Optional[float] = None,
    detail: Optional[DetailConfig] = None,
) -> AssemblyData:
    """Two narrow hulls either side of the centreline plus two cross-beams."""
    detail = _detail(detail)
    spacing = config.hull_spacing if hull_spacing is None else hull_spacing
    longitudinal, transverse = detail.catamaran_segments

    hull = loft_hull(
        config.scaled(beam=config.beam * CATAMARAN_HULL_BEAM),
        longitudinal, transverse, mesh_id="catamaran_hull",
    )

    assembly = AssemblyData(assembly_id="catamaran")
    offset = config.beam * spacing
    assembly.add(hull, "hull_port", position=(0, 0, -offset))
    assembly.add(hull, "hull_starboard", position=(0, 0, offset))

    beam_box = box(
        CROSS_BEAM_WIDTH,
        CROSS_BEAM_HEIGHT,
        offset * 2 + config.beam * CATAMARAN_HULL_BEAM,
        mesh_id="cross_beam",
    )
    y = config.draft + CROSS_BEAM_CLEARANCE
    assembly.add(beam_box, "cross_beam_fore", position=(config.length * CROSS_BEAM_X, y, 0))
    assembly.add(beam_box, "cross_beam_aft", position=(-config.length * CROSS_BEAM_X, y, 0))

    return assembly


def generate_trimaran_hulls(
    config: HullConfig,
    ama_spacing: Optional[float] = None,
    ama_scale: Optional[float] = None,
    detail: Optional[DetailConfig] = None,
) -> AssemblyData:
    """Main hull, two outrigger amas and four angled akas."""
    detail = _detail(detail)
    spacing = config.ama_spacing if ama_spacing is None else ama_spacing
    scale = config.ama_scale if ama_scale is None else ama_scale

    main = loft_hull(
        config.scaled(beam=config.beam * TRIMARAN_MAIN_BEAM),
        *detail.trimaran_main_segments, mesh_id="trimaran_main_hull",
    )
    ama = loft_hull(
        config.scaled(
            length=config.length * scale,
            beam=config.beam * AMA_BEAM,
            draft=config.draft * AMA_DRAFT,
        ),
        *detail.trimaran_ama_segments, mesh_id="trimaran_ama",
    )

    assembly = AssemblyData(assembly_id="trimaran")
    assembly.add(main, "hull_main")

    offset = config.beam * spacing
    ama_x = config.length * AMA_OFFSET_X
    ama_y = config.draft * AMA_RISE
    assembly.add(ama, "ama_port", position=(ama_x, ama_y, -offset))
    assembly.add(ama, "ama_starboard", position=(ama_x, ama_y, offset))

    aka = box(AKA_WIDTH, AKA_HEIGHT, offset, mesh_id="aka")
    aka_y = config.draft + AKA_CLEARANCE
    for x_ratio, label in zip(AKA_POSITIONS, ("fore", "aft")):
        x = config.length * x_ratio
        assembly.add(aka, f"aka_{label}_port", position=(x, aka_y, -offset / 2),
                     rotation=(0, 0, AKA_ROLL))
        assembly.add(aka, f"aka_{label}_starboard", position=(x, aka_y, offset / 2),
                     rotation=(0, 0, -AKA_ROLL))

    return assembly


# =============================================================================
# DECK
# =============================================================================

def deck_outline(length: float, width: float) -> List[Tuple[float, float]]:
    """Deck plan: straight sides with quadratic ends, in (x, z) plan coordinates."""
    hl, hw = length / 2, width / 2
    outline = [(-hl, -hw), (hl, -hw)]
    for s in range(1, DECK_CURVE_SEGMENTS + 1):
        outline.append(quadratic_bezier((hl, -hw), (hl, 0.0), (hl, hw), s / DECK_CURVE_SEGMENTS))
    outline.append((-hl, hw))
    for s in range(1, DECK_CURVE_SEGMENTS):
        outline.append(quadratic_bezier((-hl, hw), (-hl, 0.0), (-hl, -hw), s / DECK_CURVE_SEGMENTS))
    return outline


def generate_deck(config: HullConfig) -> AssemblyData:
    """Deck slab, plus coach roof and windshield when configured."""
    assembly = AssemblyData(assembly_id="deck")
    deck = config.deck

    ratio = DECK_WIDTH_MONOHULL if config.category == HullCategory.MONOHULL else DECK_WIDTH_MULTIHULL
    width = config.beam * ratio
    length = config.length * DECK_LENGTH
    height = config.draft + DECK_CLEARANCE
    thickness = DECK_BASE_THICKNESS + deck.camber / 100 * width

    slab = extrude(deck_outline(length, width), thickness, mesh_id="deck")
    # Extruded along +Z; laid flat so the thickness rises along +Y
    assembly.add(slab, "deck", position=(0, height, 0), rotation=(-math.pi / 2, 0, 0))

    if deck.coach_roof:
        cabin_length = config.length * deck.coach_roof_length
        cabin_width = width * 0.5
        roof_height = deck.coach_roof_height

        cabin = box(cabin_length, roof_height, cabin_width, mesh_id="coach_roof")
        assembly.add(cabin, "coach_roof",
                     position=(config.length * 0.15, height + roof_height / 2, 0))

        windshield = box(0.05, roof_height * 0.6, cabin_width * 0.9, mesh_id="windshield")
        assembly.add(
            windshield, "windshield",
            position=(config.length * 0.15 + cabin_length / 2 + 0.1, height + roof_height * 0.5, 0),
            rotation=(0, 0, 0.3),
        )

    return assembly


# =============================================================================
# COMPLETE HULL
# =============================================================================

def generate_hull(config: HullConfig, detail: Optional[DetailConfig] = None) -> AssemblyData:
    """Hull parts only, by category."""
    detail = _detail(detail)

    if config.category == HullCategory.CATAMARAN:
        return generate_catamaran_hulls(config, detail=detail)
    if config.category == HullCategory.TRIMARAN:
        return generate_trimaran_hulls(config, detail=detail)

    assembly = AssemblyData(assembly_id="monohull")
    assembly.add(
        loft_hull(
            config,
            detail.hull_longitudinal_segments,
            detail.hull_transverse_segments,
            mesh_id="monohull",
        ),
        "hull",
    )
    return assembly


def generate_complete_hull(config: HullConfig, detail: Optional[DetailConfig] = None) -> AssemblyData:
    """
    Generate the hull assembly for a configuration.

    Args:
        config: Hull configuration
        detail: Tessellation settings; defaults to the process settings

    Returns:
        AssemblyData with hull parts followed by deck parts
    """
    assembly = AssemblyData(assembly_id=f"hull_{config.category.value}")
    assembly.extend(generate_hull(config, detail))
    assembly.extend(generate_deck(config))

    logger.info(
        "Generated %s hull: %d parts, %d vertices",
        config.category.value, assembly.part_count, assembly.vertex_count,
    )
    return assembly
