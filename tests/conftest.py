"""
yachtforge Test Configuration and Fixtures

Shared configurations sized for fast meshing.
"""

import pytest


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """
    Isolate tests from the caller's YACHTFORGE_* environment.

    Settings are cached per process, so the cache is dropped before and
    after each test.
    """
    from yachtforge.core.config import reset_settings

    for name in (
        "YACHTFORGE_DETAIL_LEVEL",
        "YACHTFORGE_WIND_SEED",
        "YACHTFORGE_WIND_DIRECTION",
        "YACHTFORGE_WEATHER",
        "YACHTFORGE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def low_detail():
    """LOW tessellation keeps lofting fast."""
    from yachtforge.webgl.config import DetailLevel, get_detail_config
    return get_detail_config(DetailLevel.LOW)


@pytest.fixture
def hull_config():
    """Default monohull configuration."""
    from yachtforge.hull_gen import HullConfig
    return HullConfig()


@pytest.fixture
def turbine_config():
    """Default helix turbine configuration."""
    from yachtforge.turbine import TurbineConfig
    return TurbineConfig()


@pytest.fixture
def monohull_dimensions():
    """12 m monohull displacing 4 tonnes."""
    from yachtforge.physics import HullDimensions
    return HullDimensions(length=12.0, beam=4.0, draft=1.0, displacement=4000.0)


@pytest.fixture
def catamaran_dimensions():
    """12 m catamaran displacing 5 tonnes."""
    from yachtforge.physics import HullDimensions
    return HullDimensions(length=12.0, beam=6.0, draft=0.8, displacement=5000.0)
