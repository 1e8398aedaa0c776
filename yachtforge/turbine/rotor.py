"""
turbine/rotor.py - Turbine assembly.

Places blades, shaft, hubs and support arms around the vertical axis.
The rotor axis is +Y with the base at y=0; blade i is rotated by
2*pi*i/blade_count about the axis.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
import math
import logging

from yachtforge.core.config import get_settings
from yachtforge.core.constants import TWO_PI
from yachtforge.webgl.config import DetailConfig
from yachtforge.webgl.primitives import box, cone, cylinder, extrude, lathe, quadratic_bezier, sphere, tube
from yachtforge.webgl.schema import AssemblyData, MeshData
from .blade import generate_blade
from .enums import HubType, ShaftStyle, SupportArmType
from .parameters import TurbineConfig

logger = logging.getLogger("yachtforge.turbine.rotor")

HUB_HEIGHT_RATIO = 0.1
STREAMLINED_HUB_POINTS = 12

TAPERED_SHAFT_TOP = 0.8
REINFORCED_SHAFT = 1.2

ARM_REACH = 0.9
ARM_WIDTH_RATIO = 0.05
ARM_CURVE_SEGMENTS = 12
ARM_TUBE_SEGMENTS = 8


def _detail(detail: Optional[DetailConfig]) -> DetailConfig:
    return detail if detail is not None else get_settings().detail


# =============================================================================
# HUB AND SHAFT
# =============================================================================

def generate_hub(config: TurbineConfig, radial_segments: int = 16) -> Optional[MeshData]:
    """Hub mesh for the configured hub type, or None for no hub."""
    hub = config.hub
    radius = hub.diameter * config.diameter / 2
    height = config.height * hub.length * HUB_HEIGHT_RATIO

    if hub.type == HubType.NONE:
        return None
    if hub.type == HubType.SPHERE:
        return sphere(radius * 1.5, radial_segments, 12, mesh_id="hub")
    if hub.type == HubType.CONE:
        return cone(radius * 1.2, height * 2, radial_segments, mesh_id="hub")
    if hub.type == HubType.STREAMLINED:
        # Teardrop revolved from base to tip
        profile = []
        for i in range(STREAMLINED_HUB_POINTS + 1):
            t = i / STREAMLINED_HUB_POINTS
            r = radius * math.sin(t * math.pi) * (1 - t * 0.3)
            profile.append((r, t * height * 1.5))
        return lathe(profile, radial_segments, mesh_id="hub")
    return cylinder(radius, radius, height, radial_segments, mesh_id="hub")


def generate_shaft(config: TurbineConfig, radial_segments: int = 16) -> Optional[MeshData]:
    """Shaft spanning the full height, centred at the origin; None when hidden."""
    shaft = config.shaft
    if not shaft.visible:
        return None

    radius = shaft.diameter * config.diameter / 2
    if shaft.style == ShaftStyle.TAPERED:
        top, bottom = radius * TAPERED_SHAFT_TOP, radius
    elif shaft.style == ShaftStyle.REINFORCED:
        top = bottom = radius * REINFORCED_SHAFT
    else:
        top = bottom = radius
    return cylinder(top, bottom, config.height, radial_segments, mesh_id="shaft")


# =============================================================================
# SUPPORT ARMS
# =============================================================================

def arm_dimensions(config: TurbineConfig) -> Tuple[float, float]:
    """(reach, width) of a support arm in meters."""
    reach = config.radius * ARM_REACH
    width = ARM_WIDTH_RATIO * config.diameter * config.support_arms.width
    return reach, width


def faired_arm_outline(reach: float, width: float) -> List[Tuple[float, float]]:
    """Streamlined arm plan: curved leading half, straight taper to the tip."""
    outline = [(0.0, 0.0)]
    for s in range(1, ARM_CURVE_SEGMENTS + 1):
        outline.append(quadratic_bezier(
            (0.0, 0.0), (reach * 0.3, width), (reach * 0.5, width * 0.5),
            s / ARM_CURVE_SEGMENTS,
        ))
    outline.append((reach, 0.0))
    outline.append((reach * 0.5, -width * 0.5))
    for s in range(1, ARM_CURVE_SEGMENTS):
        outline.append(quadratic_bezier(
            (reach * 0.5, -width * 0.5), (reach * 0.3, -width), (0.0, 0.0),
            s / ARM_CURVE_SEGMENTS,
        ))
    return outline


def generate_support_arm(config: TurbineConfig, radial_segments: int = 8) -> Optional[MeshData]:
    """One arm mesh shared by every arm placement; None when arms are off."""
    arms = config.support_arms
    if not arms.enabled:
        return None

    reach, width = arm_dimensions(config)
    if arms.type == SupportArmType.AIRFOIL and arms.fairing:
        return extrude(faired_arm_outline(reach, width), width * 0.3, mesh_id="support_arm")
    if arms.type == SupportArmType.CURVED:
        return tube(
            (0.0, 0.0, 0.0), (reach * 0.5, width * 2, 0.0), (reach, 0.0, 0.0),
            width * 0.3, ARM_TUBE_SEGMENTS, radial_segments, mesh_id="support_arm",
        )
    return box(reach, width * 0.4, width * 0.6, mesh_id="support_arm")


# =============================================================================
# TURBINE
# =============================================================================

def blade_angle(index: int, blade_count: int) -> float:
    return TWO_PI * index / blade_count


def generate_turbine(config: TurbineConfig, detail: Optional[DetailConfig] = None) -> AssemblyData:
    """
    Generate the turbine assembly.

    Args:
        config: Turbine configuration
        detail: Tessellation settings; defaults to the process settings

    Returns:
        AssemblyData with parts ``blade_<i>``, ``shaft``, ``hub_top``,
        ``hub_bottom`` and ``arm_<k>_<i>`` as configured
    """
    detail = _detail(detail)
    assembly = AssemblyData(assembly_id="turbine")
    n = config.blade_count

    blade = generate_blade(config, detail.blade_segments, detail.chord_resolution)
    for i in range(n):
        assembly.add(blade, f"blade_{i}", rotation=(0, blade_angle(i, n), 0))

    shaft = generate_shaft(config, detail.radial_segments)
    if shaft is not None:
        assembly.add(shaft, "shaft", position=(0, config.height / 2, 0))

    hub = generate_hub(config, detail.radial_segments)
    if hub is not None:
        if config.hub.top_cap:
            assembly.add(hub, "hub_top", position=(0, config.height, 0))
        if config.hub.bottom_mount:
            assembly.add(hub, "hub_bottom", rotation=(math.pi, 0, 0))

    arm = generate_support_arm(config, ARM_TUBE_SEGMENTS)
    if arm is not None:
        reach, _ = arm_dimensions(config)
        for k, position in enumerate(config.support_arms.positions):
            y = position * config.height
            for i in range(n):
                angle = blade_angle(i, n)
                # Y rotation by angle points local +X at polar angle -angle
                assembly.add(
                    arm, f"arm_{k}_{i}",
                    position=(math.cos(angle) * reach * 0.5, y, -math.sin(angle) * reach * 0.5),
                    rotation=(0, angle, 0),
                )

    logger.info(
        "Generated %s turbine: %d blades, %d parts, %d vertices",
        config.blade.style.value, n, assembly.part_count, assembly.vertex_count,
    )
    return assembly
