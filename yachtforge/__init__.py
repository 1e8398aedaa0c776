"""
yachtforge - Procedural yacht hull and VAWT turbine generation.

Sub-packages:
- curves:    spline interpolation, simplification, point transforms
- webgl:     mesh containers, mesh builder, primitive solids
- hull_gen:  hull lofting and multi-hull assembly
- turbine:   blade, hub, shaft and support-arm geometry
- physics:   drag, stability, energy balance and wind model
- contracts: validated payloads from external state containers
"""

__version__ = "1.0.0"
