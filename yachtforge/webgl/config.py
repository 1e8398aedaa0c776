"""
webgl/config.py - Mesh detail configuration.

Provides tessellation settings per detail level for hull lofting and
turbine blade generation.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict
import logging

logger = logging.getLogger("yachtforge.webgl.config")


class DetailLevel(Enum):
    """Level of detail settings."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    ULTRA = "ultra"


# =============================================================================
# DETAIL CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class DetailConfig:
    """Tessellation parameters for one detail level."""

    level: DetailLevel

    # Hull loft
    hull_longitudinal_segments: int
    hull_transverse_segments: int

    # Multi-hull sub-meshes
    catamaran_segments: tuple      # (longitudinal, transverse)
    trimaran_main_segments: tuple
    trimaran_ama_segments: tuple

    # Turbine
    blade_segments: int
    chord_resolution: int
    radial_segments: int          # Hub, shaft and tube circumference

    def __post_init__(self):
        """Validate configuration."""
        assert self.hull_longitudinal_segments > 0, "hull_longitudinal_segments must be positive"
        assert self.hull_transverse_segments > 0, "hull_transverse_segments must be positive"
        assert self.blade_segments > 0, "blade_segments must be positive"
        assert self.chord_resolution > 1, "chord_resolution must be greater than 1"
        assert self.radial_segments >= 3, "radial_segments must be at least 3"


DETAIL_CONFIGS: Dict[DetailLevel, DetailConfig] = {
    DetailLevel.LOW: DetailConfig(
        level=DetailLevel.LOW,
        hull_longitudinal_segments=16,
        hull_transverse_segments=8,
        catamaran_segments=(12, 6),
        trimaran_main_segments=(14, 7),
        trimaran_ama_segments=(10, 5),
        blade_segments=12,
        chord_resolution=6,
        radial_segments=8,
    ),
    DetailLevel.MEDIUM: DetailConfig(
        level=DetailLevel.MEDIUM,
        hull_longitudinal_segments=32,
        hull_transverse_segments=16,
        catamaran_segments=(24, 12),
        trimaran_main_segments=(28, 14),
        trimaran_ama_segments=(20, 10),
        blade_segments=24,
        chord_resolution=8,
        radial_segments=16,
    ),
    DetailLevel.HIGH: DetailConfig(
        level=DetailLevel.HIGH,
        hull_longitudinal_segments=64,
        hull_transverse_segments=32,
        catamaran_segments=(48, 24),
        trimaran_main_segments=(56, 28),
        trimaran_ama_segments=(40, 20),
        blade_segments=48,
        chord_resolution=12,
        radial_segments=24,
    ),
    DetailLevel.ULTRA: DetailConfig(
        level=DetailLevel.ULTRA,
        hull_longitudinal_segments=128,
        hull_transverse_segments=48,
        catamaran_segments=(96, 36),
        trimaran_main_segments=(112, 42),
        trimaran_ama_segments=(80, 30),
        blade_segments=96,
        chord_resolution=16,
        radial_segments=32,
    ),
}


def get_detail_config(level: DetailLevel) -> DetailConfig:
    """Get detail config, defaulting to MEDIUM for unknown levels."""
    return DETAIL_CONFIGS.get(level, DETAIL_CONFIGS[DetailLevel.MEDIUM])
