"""
turbine/presets.py - Turbine and blade preset library.

Turbine presets are partial configurations merged over the defaults by
``config_from_preset``. Blade presets are 2D profiles for the
profile-drawn generator in ``turbine.legacy``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple
import math

from .enums import AirfoilType, PresetCategory
from .parameters import BladeSection, TurbineConfig

Point2D = Tuple[float, float]


@dataclass(frozen=True)
class PerformanceRating:
    """Shop ratings, 1-10. Lower startup_wind and noise are better."""
    power: int
    startup_wind: int
    noise: int
    durability: int
    efficiency: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "power": self.power,
            "startup_wind": self.startup_wind,
            "noise": self.noise,
            "durability": self.durability,
            "efficiency": self.efficiency,
        }


@dataclass(frozen=True)
class TurbinePreset:
    """Named partial turbine configuration."""
    id: str
    name: str
    description: str
    category: PresetCategory
    unlock_cost: int
    rating: PerformanceRating
    config: Dict[str, Any] = field(default_factory=dict)
    """Partial ``TurbineConfig.to_dict()`` layout; blade sections as records."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "unlock_cost": self.unlock_cost,
            "rating": self.rating.to_dict(),
            "config": config_from_preset(self).to_dict(),
        }


@dataclass(frozen=True)
class BladePreset:
    """Drawn blade profile in normalized coordinates."""
    id: str
    name: str
    description: str
    category: PresetCategory
    unlock_cost: int
    points: Tuple[Point2D, ...]


def create_sections(count: int, overrides: Sequence[Dict[str, Any]]) -> Tuple[BladeSection, ...]:
    """``count`` evenly spaced default sections with per-index overrides."""
    sections = []
    for i in range(count):
        values = dict(overrides[i]) if i < len(overrides) else {}
        values.setdefault("position", i / (count - 1) if count > 1 else 0.0)
        sections.append(BladeSection(**values))
    return tuple(sections)


# =============================================================================
# TURBINE PRESETS
# =============================================================================

TURBINE_PRESETS: List[TurbinePreset] = [
    # --- Efficiency ---
    TurbinePreset(
        id="classic-helix",
        name="Classic Helix",
        description="Traditional helical VAWT with proven efficiency. Good all-around performance in variable winds.",
        category=PresetCategory.EFFICIENCY,
        unlock_cost=0,
        rating=PerformanceRating(power=7, startup_wind=6, noise=7, durability=8, efficiency=7),
        config={
            "height": 8,
            "diameter": 2,
            "blade_count": 3,
            "blade": {
                "style": "helix",
                "airfoil": "symmetric",
                "twist": 60,
                "taper": 0.85,
                "sections": create_sections(5, [
                    {"width": 1.0, "pitch": 8, "thickness": 1.1},
                    {"width": 1.1, "pitch": 4, "thickness": 1.0},
                    {"width": 1.2, "pitch": 0, "thickness": 1.0},
                    {"width": 1.1, "pitch": -4, "thickness": 1.0},
                    {"width": 0.9, "pitch": -8, "thickness": 0.9},
                ]),
            },
        },
    ),
    TurbinePreset(
        id="high-efficiency-darrieus",
        name="High-Eff Darrieus",
        description="Optimized Darrieus design with curved troposkein blades for maximum lift efficiency.",
        category=PresetCategory.EFFICIENCY,
        unlock_cost=1500,
        rating=PerformanceRating(power=9, startup_wind=4, noise=6, durability=7, efficiency=9),
        config={
            "height": 10,
            "diameter": 2.5,
            "blade_count": 3,
            "blade": {
                "style": "darrieus",
                "airfoil": "double-surface",
                "twist": 0,
                "taper": 1.0,
                "prebend": 25,
                "chord": 0.25,
                "sections": create_sections(7, [
                    {"width": 0.6, "pitch": 12, "offset": (0.3, 0)},
                    {"width": 0.8, "pitch": 8, "offset": (0.5, 0)},
                    {"width": 1.0, "pitch": 4, "offset": (0.7, 0)},
                    {"width": 1.1, "pitch": 0, "offset": (0.8, 0)},
                    {"width": 1.0, "pitch": -4, "offset": (0.7, 0)},
                    {"width": 0.8, "pitch": -8, "offset": (0.5, 0)},
                    {"width": 0.6, "pitch": -12, "offset": (0.3, 0)},
                ]),
            },
            "support_arms": {
                "count": 2,
                "positions": (0.25, 0.75),
                "type": "airfoil",
                "width": 1.2,
                "fairing": True,
            },
        },
    ),
    TurbinePreset(
        id="giromill-pro",
        name="Giromill Pro",
        description="H-rotor design with variable pitch capability. Excellent in steady winds.",
        category=PresetCategory.EFFICIENCY,
        unlock_cost=2000,
        rating=PerformanceRating(power=8, startup_wind=5, noise=5, durability=9, efficiency=8),
        config={
            "height": 8,
            "diameter": 3,
            "blade_count": 4,
            "blade": {
                "style": "h-rotor",
                "airfoil": "double-surface",
                "twist": 0,
                "taper": 1.0,
                "prebend": 0,
                "chord": 0.2,
                "thickness": 0.12,
                "sections": create_sections(3, [
                    {"width": 1.0, "pitch": 6, "sweep": 5},
                    {"width": 1.0, "pitch": 0, "sweep": 0},
                    {"width": 1.0, "pitch": -6, "sweep": -5},
                ]),
            },
            "support_arms": {
                "count": 3,
                "positions": (0.15, 0.5, 0.85),
                "type": "airfoil",
                "width": 0.8,
                "fairing": True,
            },
        },
    ),
    TurbinePreset(
        id="savonius-power",
        name="Savonius Power",
        description="Drag-based design with excellent startup torque. Works in turbulent conditions.",
        category=PresetCategory.EFFICIENCY,
        unlock_cost=800,
        rating=PerformanceRating(power=5, startup_wind=9, noise=4, durability=10, efficiency=5),
        config={
            "height": 6,
            "diameter": 1.5,
            "blade_count": 2,
            "blade": {
                "style": "savonius",
                "airfoil": "s-curve",
                "twist": 90,
                "taper": 1.0,
                "chord": 0.6,
                "thickness": 0.02,
                "sections": create_sections(5, [
                    {"width": 0.95, "camber": 0.4, "pitch": 0},
                    {"width": 1.0, "camber": 0.45, "pitch": 15},
                    {"width": 1.0, "camber": 0.5, "pitch": 30},
                    {"width": 1.0, "camber": 0.45, "pitch": 45},
                    {"width": 0.95, "camber": 0.4, "pitch": 60},
                ]),
            },
            "hub": {
                "type": "cylinder",
                "diameter": 0.25,
                "length": 1.0,
                "top_cap": True,
                "bottom_mount": True,
                "material": "metal",
            },
        },
    ),
    # --- Aesthetic ---
    TurbinePreset(
        id="infinity-loop",
        name="Infinity Loop",
        description="Elegant figure-8 design inspired by mathematical infinity. A true conversation piece.",
        category=PresetCategory.AESTHETIC,
        unlock_cost=3000,
        rating=PerformanceRating(power=6, startup_wind=6, noise=8, durability=6, efficiency=6),
        config={
            "height": 10,
            "diameter": 2,
            "blade_count": 2,
            "blade": {
                "style": "infinity",
                "airfoil": "symmetric",
                "twist": 180,
                "taper": 0.7,
                "chord": 0.35,
                "sections": create_sections(9, [
                    {"width": 0.7, "pitch": 0, "offset": (0.2, 0)},
                    {"width": 0.9, "pitch": 15, "offset": (0.5, 0)},
                    {"width": 1.0, "pitch": 30, "offset": (0.8, 0)},
                    {"width": 0.9, "pitch": 45, "offset": (0.5, 0)},
                    {"width": 0.8, "pitch": 0, "offset": (0.2, 0)},
                    {"width": 0.9, "pitch": -45, "offset": (0.5, 0)},
                    {"width": 1.0, "pitch": -30, "offset": (0.8, 0)},
                    {"width": 0.9, "pitch": -15, "offset": (0.5, 0)},
                    {"width": 0.7, "pitch": 0, "offset": (0.2, 0)},
                ]),
            },
        },
    ),
    TurbinePreset(
        id="flowing-ribbon",
        name="Flowing Ribbon",
        description="Continuous ribbon blade that flows like fabric in the wind. Pure sculptural beauty.",
        category=PresetCategory.AESTHETIC,
        unlock_cost=2500,
        rating=PerformanceRating(power=5, startup_wind=7, noise=9, durability=5, efficiency=5),
        config={
            "height": 12,
            "diameter": 1.8,
            "blade_count": 1,
            "blade": {
                "style": "ribbon",
                "airfoil": "flat",
                "twist": 360,
                "taper": 0.6,
                "chord": 0.4,
                "thickness": 0.02,
                "sections": create_sections(12, [
                    {
                        "width": 0.8 + math.sin(i / 11 * math.pi) * 0.4,
                        "pitch": i / 11 * 360 - 180,
                        "sweep": math.sin(i / 11 * math.pi * 2) * 15,
                    }
                    for i in range(12)
                ]),
            },
        },
    ),
    TurbinePreset(
        id="dj-blade",
        name="DJ Blade",
        description="Party-ready design with LED integration points. Makes your yacht the center of attention.",
        category=PresetCategory.AESTHETIC,
        unlock_cost=1800,
        rating=PerformanceRating(power=6, startup_wind=6, noise=5, durability=7, efficiency=6),
        config={
            "height": 8,
            "diameter": 2.5,
            "blade_count": 4,
            "blade": {
                "style": "helix",
                "airfoil": "symmetric",
                "twist": 45,
                "taper": 0.9,
                "chord": 0.35,
                "sections": create_sections(5, [
                    {"width": 1.2, "pitch": 10, "thickness": 1.2},
                    {"width": 1.4, "pitch": 5, "thickness": 1.1},
                    {"width": 1.5, "pitch": 0, "thickness": 1.0},
                    {"width": 1.4, "pitch": -5, "thickness": 1.1},
                    {"width": 1.2, "pitch": -10, "thickness": 1.2},
                ]),
            },
        },
    ),
    TurbinePreset(
        id="crystal-bloom",
        name="Crystal Bloom",
        description="Organic flower-like design with translucent blades. Catches light beautifully at sunset.",
        category=PresetCategory.AESTHETIC,
        unlock_cost=2200,
        rating=PerformanceRating(power=4, startup_wind=7, noise=8, durability=4, efficiency=4),
        config={
            "height": 7,
            "diameter": 2.2,
            "blade_count": 5,
            "blade": {
                "style": "custom",
                "airfoil": "cambered",
                "twist": 30,
                "taper": 0.5,
                "chord": 0.45,
                "thickness": 0.03,
                "sections": create_sections(6, [
                    {"width": 0.4, "pitch": 15, "camber": 0.3},
                    {"width": 0.8, "pitch": 10, "camber": 0.25},
                    {"width": 1.2, "pitch": 5, "camber": 0.2},
                    {"width": 1.4, "pitch": 0, "camber": 0.15},
                    {"width": 1.2, "pitch": -5, "camber": 0.1},
                    {"width": 0.6, "pitch": -10, "camber": 0.05},
                ]),
            },
        },
    ),
    # --- Experimental ---
    TurbinePreset(
        id="hybrid-lift-drag",
        name="Hybrid Lift-Drag",
        description="Experimental design combining lift and drag principles. Self-starting with good efficiency.",
        category=PresetCategory.EXPERIMENTAL,
        unlock_cost=3500,
        rating=PerformanceRating(power=7, startup_wind=8, noise=6, durability=6, efficiency=7),
        config={
            "height": 9,
            "diameter": 2.8,
            "blade_count": 6,
            "blade": {
                "style": "hybrid",
                "airfoil": "cambered",
                "twist": 75,
                "taper": 0.75,
                "chord": 0.28,
                "sections": create_sections(7, [
                    {"width": 0.8, "pitch": 20, "camber": 0.35, "offset": (0.2, 0)},
                    {"width": 1.0, "pitch": 15, "camber": 0.3, "offset": (0.3, 0)},
                    {"width": 1.2, "pitch": 8, "camber": 0.2, "offset": (0.4, 0)},
                    {"width": 1.3, "pitch": 0, "camber": 0.1, "offset": (0.5, 0)},
                    {"width": 1.2, "pitch": -8, "camber": 0.15, "offset": (0.4, 0)},
                    {"width": 1.0, "pitch": -15, "camber": 0.25, "offset": (0.3, 0)},
                    {"width": 0.8, "pitch": -20, "camber": 0.35, "offset": (0.2, 0)},
                ]),
            },
        },
    ),
    TurbinePreset(
        id="tornado-spiral",
        name="Tornado Spiral",
        description="Extreme twist design inspired by tornado dynamics. Captures energy from all directions.",
        category=PresetCategory.EXPERIMENTAL,
        unlock_cost=4000,
        rating=PerformanceRating(power=6, startup_wind=8, noise=4, durability=5, efficiency=6),
        config={
            "height": 12,
            "diameter": 1.5,
            "blade_count": 3,
            "blade": {
                "style": "helix",
                "airfoil": "helical",
                "twist": 540,
                "taper": 0.4,
                "chord": 0.5,
                "thickness": 0.05,
                "sections": create_sections(15, [
                    {
                        "width": 0.5 + math.sin(i / 14 * math.pi) * 0.7,
                        "pitch": i * 36,
                        "sweep": math.sin(i / 14 * math.pi * 3) * 20,
                    }
                    for i in range(15)
                ]),
            },
            "hub": {
                "type": "streamlined",
                "diameter": 0.08,
                "length": 1.2,
                "top_cap": True,
                "bottom_mount": True,
                "material": "carbon",
            },
        },
    ),
    TurbinePreset(
        id="biomimetic-kelp",
        name="Biomimetic Kelp",
        description="Inspired by ocean kelp movement. Flexible design that adapts to wind conditions.",
        category=PresetCategory.EXPERIMENTAL,
        unlock_cost=2800,
        rating=PerformanceRating(power=5, startup_wind=9, noise=9, durability=4, efficiency=5),
        config={
            "height": 10,
            "diameter": 2,
            "blade_count": 8,
            "blade": {
                "style": "custom",
                "airfoil": "cambered",
                "twist": 20,
                "taper": 0.3,
                "chord": 0.15,
                "thickness": 0.02,
                "sections": create_sections(8, [
                    {
                        "width": 0.4 + i * 0.15,
                        "pitch": math.sin(i / 7 * math.pi * 2) * 15,
                        "sweep": math.sin(i / 7 * math.pi * 3) * 10,
                        "camber": 0.1 + i * 0.05,
                    }
                    for i in range(8)
                ]),
            },
        },
    ),
    # --- Classic ---
    TurbinePreset(
        id="traditional-windmill",
        name="Traditional Windmill",
        description="Classic windmill blade design adapted for modern use. Reliable and time-tested.",
        category=PresetCategory.CLASSIC,
        unlock_cost=500,
        rating=PerformanceRating(power=6, startup_wind=7, noise=6, durability=9, efficiency=6),
        config={
            "height": 8,
            "diameter": 2.5,
            "blade_count": 4,
            "blade": {
                "style": "h-rotor",
                "airfoil": "flat",
                "twist": 15,
                "taper": 0.7,
                "chord": 0.3,
                "thickness": 0.04,
                "sections": create_sections(3, [
                    {"width": 1.2, "pitch": 12, "thickness": 1.2},
                    {"width": 1.0, "pitch": 8, "thickness": 1.0},
                    {"width": 0.7, "pitch": 4, "thickness": 0.8},
                ]),
            },
        },
    ),
    TurbinePreset(
        id="marine-classic",
        name="Marine Classic",
        description="Nautical-inspired design that complements traditional yacht aesthetics.",
        category=PresetCategory.CLASSIC,
        unlock_cost=1000,
        rating=PerformanceRating(power=6, startup_wind=6, noise=7, durability=8, efficiency=6),
        config={
            "height": 7,
            "diameter": 2,
            "blade_count": 3,
            "blade": {
                "style": "helix",
                "airfoil": "symmetric",
                "twist": 45,
                "taper": 0.85,
                "chord": 0.28,
                "sections": create_sections(4, [
                    {"width": 1.0, "pitch": 10, "thickness": 1.1},
                    {"width": 1.15, "pitch": 5, "thickness": 1.0},
                    {"width": 1.1, "pitch": 0, "thickness": 1.0},
                    {"width": 0.9, "pitch": -5, "thickness": 0.95},
                ]),
            },
            "hub": {
                "type": "sphere",
                "diameter": 0.12,
                "length": 0.8,
                "top_cap": True,
                "bottom_mount": True,
                "material": "metal",
            },
        },
    ),
]

_PRESETS_BY_ID = {p.id: p for p in TURBINE_PRESETS}


def get_turbine_preset(preset_id: str) -> Optional[TurbinePreset]:
    return _PRESETS_BY_ID.get(preset_id)


def turbine_presets_by_category(category: PresetCategory) -> List[TurbinePreset]:
    return [p for p in TURBINE_PRESETS if p.category == category]


def config_from_preset(preset: TurbinePreset) -> TurbineConfig:
    """Merge a preset over the default configuration."""
    return TurbineConfig.from_dict(preset.config)


# =============================================================================
# AIRFOIL RATINGS
# =============================================================================

AIRFOIL_EFFICIENCY: Dict[AirfoilType, float] = {
    AirfoilType.FLAT: 0.6,
    AirfoilType.SYMMETRIC: 0.8,
    AirfoilType.CAMBERED: 0.85,
    AirfoilType.DOUBLE_SURFACE: 0.95,
    AirfoilType.HELICAL: 0.75,
    AirfoilType.S_CURVE: 0.5,
    AirfoilType.CUP: 0.45,
    AirfoilType.CUSTOM: 0.7,
}


# =============================================================================
# BLADE PROFILE PRESETS
# =============================================================================

BLADE_PRESETS: List[BladePreset] = [
    BladePreset(
        "classic-curved", "Classic Curved",
        "Traditional VAWT blade with gentle curve for reliable performance",
        PresetCategory.EFFICIENCY, 0,
        ((0.1, 0.0), (0.15, -0.3), (0.25, -0.5), (0.35, -0.65), (0.4, -0.8)),
    ),
    BladePreset(
        "helix-wing", "Helix Wing",
        "S-curved blade inspired by Gorlov helical design",
        PresetCategory.EFFICIENCY, 0,
        ((0.05, 0.0), (0.2, -0.2), (0.15, -0.4), (0.25, -0.6), (0.2, -0.8)),
    ),
    BladePreset(
        "savonius", "Savonius Scoop",
        "Deep curved scoop blade, great for low wind speeds",
        PresetCategory.EFFICIENCY, 200,
        ((0.0, 0.0), (0.3, -0.15), (0.4, -0.35), (0.35, -0.55), (0.2, -0.75), (0.05, -0.85)),
    ),
    BladePreset(
        "darrieus-egg", "Darrieus Egg",
        "Egg-beater style troposkein curve for high speed",
        PresetCategory.EFFICIENCY, 500,
        ((0.0, 0.0), (0.35, -0.2), (0.45, -0.45), (0.35, -0.7), (0.0, -0.9)),
    ),
    BladePreset(
        "ribbon-twist", "Ribbon Twist",
        "Flowing ribbon design with artistic flair",
        PresetCategory.AESTHETIC, 300,
        ((0.1, 0.0), (0.3, -0.1), (0.15, -0.3), (0.35, -0.5), (0.2, -0.7), (0.3, -0.85)),
    ),
    BladePreset(
        "flame", "Flame",
        "Dynamic flame-shaped blade with aggressive curves",
        PresetCategory.AESTHETIC, 400,
        ((0.05, 0.0), (0.25, -0.1), (0.15, -0.25), (0.3, -0.4), (0.2, -0.55),
         (0.35, -0.7), (0.15, -0.85)),
    ),
    BladePreset(
        "infinity-loop", "Infinity Loop",
        "Figure-8 inspired design for the signature E-Cat look",
        PresetCategory.AESTHETIC, 1000,
        ((0.2, 0.0), (0.35, -0.15), (0.25, -0.3), (0.1, -0.45), (0.25, -0.6),
         (0.35, -0.75), (0.2, -0.9)),
    ),
    BladePreset(
        "wave", "Ocean Wave",
        "Sinusoidal wave pattern inspired by the sea",
        PresetCategory.AESTHETIC, 350,
        ((0.15, 0.0), (0.35, -0.15), (0.15, -0.35), (0.35, -0.55), (0.15, -0.75), (0.25, -0.9)),
    ),
    BladePreset(
        "bio-leaf", "Bio Leaf",
        "Organic leaf-inspired blade mimicking nature",
        PresetCategory.EXPERIMENTAL, 600,
        ((0.05, 0.0), (0.15, -0.15), (0.4, -0.3), (0.45, -0.5), (0.3, -0.7), (0.1, -0.85)),
    ),
    BladePreset(
        "angular", "Angular",
        "Sharp geometric design for a modern look",
        PresetCategory.EXPERIMENTAL, 450,
        ((0.1, 0.0), (0.1, -0.25), (0.35, -0.35), (0.35, -0.6), (0.1, -0.7), (0.1, -0.9)),
    ),
    BladePreset(
        "spiral", "Spiral",
        "Logarithmic spiral for experimental high efficiency",
        PresetCategory.EXPERIMENTAL, 800,
        ((0.05, 0.0), (0.15, -0.12), (0.25, -0.28), (0.32, -0.45), (0.35, -0.62),
         (0.33, -0.78), (0.25, -0.9)),
    ),
    BladePreset(
        "dj-blade", "DJ Blade",
        "Party-ready design with LED integration points",
        PresetCategory.AESTHETIC, 1500,
        ((0.15, 0.0), (0.4, -0.1), (0.25, -0.25), (0.4, -0.4), (0.25, -0.55),
         (0.4, -0.7), (0.15, -0.85)),
    ),
]


def get_blade_preset(preset_id: str) -> Optional[BladePreset]:
    return next((p for p in BLADE_PRESETS if p.id == preset_id), None)


def blade_presets_by_category(category: PresetCategory) -> List[BladePreset]:
    return [p for p in BLADE_PRESETS if p.category == category]


def blade_presets_unlocked(credits: float) -> List[BladePreset]:
    """Blade presets affordable with the given energy credits."""
    return [p for p in BLADE_PRESETS if p.unlock_cost <= credits]
