"""
turbine - Procedural vertical-axis wind turbine geometry.

Section-based blades lofted from airfoil loops, rotor parts (hub, shaft,
support arms), the profile-drawn legacy generator and the preset library.
"""

from .enums import (
    BladeStyle,
    AirfoilType,
    HubType,
    HubMaterial,
    ShaftStyle,
    SupportArmType,
    PresetCategory,
)
from .parameters import (
    BladeSection,
    BladeConfig,
    HubConfig,
    ShaftConfig,
    SupportArmConfig,
    TurbineConfig,
    DEFAULT_BLADE_SECTION,
    DEFAULT_BLADE_SECTIONS,
    DEFAULT_TURBINE_CONFIG,
)
from .sections import section_value, sample_section
from .airfoil import airfoil_profile, naca_half_thickness, camber_line
from .styles import RADIAL_OFFSETS, radial_offset
from .blade import generate_blade, blade_chord
from .rotor import (
    generate_hub,
    generate_shaft,
    generate_support_arm,
    generate_turbine,
)
from .legacy import (
    DEFAULT_LEGACY_PROFILE,
    generate_legacy_blade,
    generate_helix_blades,
    generate_legacy_turbine,
)
from .presets import (
    PerformanceRating,
    TurbinePreset,
    BladePreset,
    TURBINE_PRESETS,
    BLADE_PRESETS,
    AIRFOIL_EFFICIENCY,
    create_sections,
    get_turbine_preset,
    turbine_presets_by_category,
    config_from_preset,
    get_blade_preset,
    blade_presets_by_category,
    blade_presets_unlocked,
)

__all__ = [
    # Enums
    "BladeStyle",
    "AirfoilType",
    "HubType",
    "HubMaterial",
    "ShaftStyle",
    "SupportArmType",
    "PresetCategory",
    # Parameters
    "BladeSection",
    "BladeConfig",
    "HubConfig",
    "ShaftConfig",
    "SupportArmConfig",
    "TurbineConfig",
    "DEFAULT_BLADE_SECTION",
    "DEFAULT_BLADE_SECTIONS",
    "DEFAULT_TURBINE_CONFIG",
    # Geometry
    "section_value",
    "sample_section",
    "airfoil_profile",
    "naca_half_thickness",
    "camber_line",
    "RADIAL_OFFSETS",
    "radial_offset",
    "generate_blade",
    "blade_chord",
    "generate_hub",
    "generate_shaft",
    "generate_support_arm",
    "generate_turbine",
    # Legacy
    "DEFAULT_LEGACY_PROFILE",
    "generate_legacy_blade",
    "generate_helix_blades",
    "generate_legacy_turbine",
    # Presets
    "PerformanceRating",
    "TurbinePreset",
    "BladePreset",
    "TURBINE_PRESETS",
    "BLADE_PRESETS",
    "AIRFOIL_EFFICIENCY",
    "create_sections",
    "get_turbine_preset",
    "turbine_presets_by_category",
    "config_from_preset",
    "get_blade_preset",
    "blade_presets_by_category",
    "blade_presets_unlocked",
]
