"""
core/config.py - Runtime settings.

Settings are read from YACHTFORGE_* environment variables with
fallbacks matching the interactive builder defaults.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import os

from yachtforge.webgl.config import DetailLevel, DetailConfig, get_detail_config
from .parsing import parse_enum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorSettings:
    """Settings shared by the geometry engines and the wind model."""

    detail_level: DetailLevel = DetailLevel.MEDIUM

    # Wind model
    wind_seed: int = 42
    initial_wind_direction_deg: float = 45.0
    default_weather: str = "trade-winds"

    # Logging
    log_level: str = "WARNING"

    @property
    def detail(self) -> DetailConfig:
        return get_detail_config(self.detail_level)

    @classmethod
    def from_env(cls) -> "GeneratorSettings":
        """Create settings from environment variables."""
        detail = os.getenv("YACHTFORGE_DETAIL_LEVEL", "medium")

        return cls(
            detail_level=parse_enum(DetailLevel, detail, DetailLevel.MEDIUM),
            wind_seed=int(os.getenv("YACHTFORGE_WIND_SEED", "42")),
            initial_wind_direction_deg=float(
                os.getenv("YACHTFORGE_WIND_DIRECTION", "45")
            ),
            default_weather=os.getenv("YACHTFORGE_WEATHER", "trade-winds"),
            log_level=os.getenv("YACHTFORGE_LOG_LEVEL", "WARNING").upper(),
        )


_settings: GeneratorSettings = None


def get_settings() -> GeneratorSettings:
    """Get process settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = GeneratorSettings.from_env()
        logger.debug("Loaded settings: %s", _settings)
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
