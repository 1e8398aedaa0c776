"""
hull_gen/enums.py - Hull generation enumerations.

Values match the selector strings used by the builder UI.
"""

from enum import Enum


class HullCategory(Enum):
    """Hull topology."""
    MONOHULL = "monohull"
    CATAMARAN = "catamaran"
    TRIMARAN = "trimaran"


class BowType(Enum):
    """Bow shape family."""
    PIERCING = "piercing"
    FLARED = "flared"
    BULBOUS = "bulbous"
    SPOON = "spoon"
    CLIPPER = "clipper"
    PLUMB = "plumb"
    AXE = "axe"
    WAVE_PIERCING = "wave-piercing"


class SternType(Enum):
    """Stern shape family."""
    TRANSOM = "transom"
    CRUISER = "cruiser"
    CANOE = "canoe"
    DOUBLE_ENDED = "double-ended"
    SUGAR_SCOOP = "sugar-scoop"
    REVERSE_TRANSOM = "reverse-transom"
    DUCKTAIL = "ducktail"


class KeelType(Enum):
    """Bottom shape below the keel line."""
    FLAT = "flat"
    V_HULL = "v-hull"
    DEEP_V = "deep-v"
    MODIFIED_V = "modified-v"
    ROUND_BOTTOM = "round-bottom"
    MULTI_CHINE = "multi-chine"
    TUNNEL = "tunnel"
    CATHEDRAL = "cathedral"


class FinType(Enum):
    """Appendage below the keel. Recorded on the keel config, not meshed."""
    NONE = "none"
    STUB = "stub"
    FIN = "fin"
    BULB = "bulb"
    WING = "wing"
    CENTERBOARD = "centerboard"
    DAGGERBOARD = "daggerboard"


class ChineType(Enum):
    """Chine configuration."""
    NONE = "none"
    SOFT = "soft"
    HARD = "hard"
    REVERSE = "reverse"
    SPRAY_RAIL = "spray-rail"
