"""
yachtforge Physical Constants

Constants used throughout yachtforge for physics and geometry calculations.
"""

import math

# ==================== Physical Constants ====================

# Water properties
SEAWATER_DENSITY_KG_M3 = 1025.0  # kg/m³ (seawater)

# Gravitational acceleration
GRAVITY_M_S2 = 9.81  # m/s²

# Air properties
AIR_DENSITY_KG_M3 = 1.225  # kg/m³ at sea level

# Solar constant at the top of the atmosphere
SOLAR_CONSTANT_W_M2 = 1361.0  # W/m²

# ==================== Unit Conversions ====================

# Speed conversions as used by the performance model
KNOTS_TO_MS = 0.514
METERS_TO_FEET = 3.281

# Hull speed rule of thumb: 1.34 * sqrt(LWL in feet) knots
HULL_SPEED_COEFFICIENT = 1.34
HULL_SPEED_KNOTS_TO_MS = 0.5144

SECONDS_PER_HOUR = 3600.0
WATTS_PER_KW = 1000.0

# ==================== Geometry Constants ====================

TWO_PI = 2.0 * math.pi

# Degenerate-length threshold for normals and chord lengths
EPSILON = 1e-10
