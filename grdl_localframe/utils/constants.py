# -*- coding: utf-8 -*-
"""
Geodetic Constants - Reference ellipsoid and angle conversion constants.

Provides commonly used constants including:
- WGS-84 ellipsoid parameters
- Degree/radian conversion factors

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# ===================================================================
# Angle Conversions
# ===================================================================

#: Degrees to radians conversion factor
DEG_TO_RAD = 0.017453292519943295  # π/180

#: Radians to degrees conversion factor
RAD_TO_DEG = 57.29577951308232  # 180/π

# ===================================================================
# WGS-84 Ellipsoid Parameters
# ===================================================================

#: WGS-84 semi-major axis (equatorial radius) in meters
WGS84_A = 6378137.0  # m

#: WGS-84 flattening, defining value
WGS84_F = 1.0 / 298.257223563

#: WGS-84 semi-minor axis (polar radius) in meters
WGS84_B = WGS84_A * (1.0 - WGS84_F)  # ~6356752.314245 m

#: WGS-84 first eccentricity squared (e² = f(2-f))
WGS84_E2 = WGS84_F * (2.0 - WGS84_F)  # ~0.00669437999014

#: WGS-84 second eccentricity squared (e'² = e²/(1-e²))
WGS84_EP2 = WGS84_E2 / (1.0 - WGS84_E2)  # ~0.00673949674228

# ===================================================================
# Longitude Range
# ===================================================================

#: Half-open longitude interval (-180, 180] used for origin normalization
LONGITUDE_MIN = -180.0  # deg, exclusive
LONGITUDE_MAX = 180.0  # deg, inclusive

# ===================================================================
# Constants Dictionary (for programmatic access)
# ===================================================================

CONSTANTS = {
    'DEG_TO_RAD': DEG_TO_RAD,
    'RAD_TO_DEG': RAD_TO_DEG,
    'WGS84_A': WGS84_A,
    'WGS84_B': WGS84_B,
    'WGS84_F': WGS84_F,
    'WGS84_E2': WGS84_E2,
    'WGS84_EP2': WGS84_EP2,
    'LONGITUDE_MIN': LONGITUDE_MIN,
    'LONGITUDE_MAX': LONGITUDE_MAX,
}

__all__ = [
    # Angle conversions
    'DEG_TO_RAD',
    'RAD_TO_DEG',
    # WGS-84 parameters
    'WGS84_A',
    'WGS84_B',
    'WGS84_F',
    'WGS84_E2',
    'WGS84_EP2',
    # Longitude range
    'LONGITUDE_MIN',
    'LONGITUDE_MAX',
    # Dictionary
    'CONSTANTS',
]
