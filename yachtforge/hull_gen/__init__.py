"""
hull_gen - Procedural hull lofting.

Converts a HullConfig into station cross-sections, lofts them into a
closed shell and assembles multi-hull and deck parts.
"""

from .enums import (
    HullCategory,
    BowType,
    SternType,
    KeelType,
    FinType,
    ChineType,
)
from yachtforge.core.records import with_field
from .parameters import (
    BowConfig,
    SternConfig,
    KeelConfig,
    ChineConfig,
    DeckConfig,
    CrossSection,
    HullConfig,
)
from .shapes import (
    BOW_SHAPES,
    STERN_SHAPES,
    KEEL_SHAPES,
    CHINE_SCALES,
    bow_profile,
    stern_profile,
    keel_depth,
    chine_scale,
)
from .sections import region_multipliers, generate_cross_section
from .loft import loft_hull
from .assembly import (
    generate_catamaran_hulls,
    generate_trimaran_hulls,
    generate_deck,
    generate_hull,
    generate_complete_hull,
)
from .presets import (
    DEFAULT_HULL_CONFIG,
    DEFAULT_WATERLINE_PROFILE,
    DEFAULT_BUTTOCK_PROFILE,
    DEFAULT_SECTION_PROFILE,
    create_default_config,
    default_cross_section,
)

__all__ = [
    # Enums
    "HullCategory",
    "BowType",
    "SternType",
    "KeelType",
    "FinType",
    "ChineType",
    # Parameters
    "BowConfig",
    "SternConfig",
    "KeelConfig",
    "ChineConfig",
    "DeckConfig",
    "CrossSection",
    "HullConfig",
    "with_field",
    # Shapes
    "BOW_SHAPES",
    "STERN_SHAPES",
    "KEEL_SHAPES",
    "CHINE_SCALES",
    "bow_profile",
    "stern_profile",
    "keel_depth",
    "chine_scale",
    # Generation
    "region_multipliers",
    "generate_cross_section",
    "loft_hull",
    "generate_catamaran_hulls",
    "generate_trimaran_hulls",
    "generate_deck",
    "generate_hull",
    "generate_complete_hull",
    # Presets
    "DEFAULT_HULL_CONFIG",
    "DEFAULT_WATERLINE_PROFILE",
    "DEFAULT_BUTTOCK_PROFILE",
    "DEFAULT_SECTION_PROFILE",
    "create_default_config",
    "default_cross_section",
]
