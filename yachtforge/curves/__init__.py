"""
curves - Curve toolkit shared by the hull and turbine engines.
"""

from .spline import (
    catmull_rom,
    interpolate,
    perpendicular_distance,
    simplify,
    DEFAULT_SEGMENTS_PER_SPAN,
    DEFAULT_SIMPLIFY_TOLERANCE,
)
from .transforms import (
    distance,
    rotate,
    apply_symmetry,
    normalize,
    denormalize,
)
from .interpolation import (
    lerp,
    smoothstep,
    ease_in_out_quad,
    linear_blend,
    smooth_blend,
    interpolate_values,
    interpolate_path,
    find_bracket,
    interpolate_keyed,
    entry_at_slot,
)

__all__ = [
    "catmull_rom",
    "interpolate",
    "perpendicular_distance",
    "simplify",
    "DEFAULT_SEGMENTS_PER_SPAN",
    "DEFAULT_SIMPLIFY_TOLERANCE",
    "distance",
    "rotate",
    "apply_symmetry",
    "normalize",
    "denormalize",
    "lerp",
    "smoothstep",
    "ease_in_out_quad",
    "linear_blend",
    "smooth_blend",
    "interpolate_values",
    "interpolate_path",
    "find_bracket",
    "interpolate_keyed",
    "entry_at_slot",
]
