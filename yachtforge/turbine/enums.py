"""
turbine/enums.py - Turbine generation enumerations.

Values match the selector strings used by the turbine editor.
"""

from enum import Enum


class BladeStyle(Enum):
    """Blade layout family; selects the radial offset curve."""
    HELIX = "helix"
    DARRIEUS = "darrieus"
    SAVONIUS = "savonius"
    H_ROTOR = "h-rotor"
    GIROMILL = "giromill"
    RIBBON = "ribbon"
    INFINITY = "infinity"
    TROPOSKEIN = "troposkein"
    HYBRID = "hybrid"
    CUSTOM = "custom"


class AirfoilType(Enum):
    """Airfoil family. Drives the efficiency rating, not the section shape."""
    FLAT = "flat"
    SYMMETRIC = "symmetric"
    CAMBERED = "cambered"
    DOUBLE_SURFACE = "double-surface"
    HELICAL = "helical"
    S_CURVE = "s-curve"
    CUP = "cup"
    CUSTOM = "custom"


class HubType(Enum):
    CYLINDER = "cylinder"
    SPHERE = "sphere"
    CONE = "cone"
    STREAMLINED = "streamlined"
    NONE = "none"


class HubMaterial(Enum):
    METAL = "metal"
    PLASTIC = "plastic"
    CARBON = "carbon"
    MATCHING = "matching"


class ShaftStyle(Enum):
    STRAIGHT = "straight"
    TAPERED = "tapered"
    REINFORCED = "reinforced"


class SupportArmType(Enum):
    STRAIGHT = "straight"
    CURVED = "curved"
    AIRFOIL = "airfoil"
    HIDDEN = "hidden"


class PresetCategory(Enum):
    """Shop category of a turbine or blade preset."""
    EFFICIENCY = "efficiency"
    AESTHETIC = "aesthetic"
    EXPERIMENTAL = "experimental"
    CLASSIC = "classic"
