# -*- coding: utf-8 -*-
"""
grdl-localframe - Local tangent-plane Cartesian coordinates.

Converts between geodetic latitude, longitude and ellipsoid height and a
local East-North-Up frame anchored at a chosen origin, with forward and
reverse conversions that invert each other to numerical precision.

Modules
-------
geometry : Reference ellipsoid and local frame transforms
utils : Constants and helper functions

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

__version__ = "0.1.0"

from grdl_localframe import geometry, utils
from grdl_localframe.geometry import (
    Ellipsoid,
    WGS84,
    LocalFrame,
    geodetic_to_enu,
    enu_to_geodetic,
)

__all__ = [
    "geometry",
    "utils",
    "Ellipsoid",
    "WGS84",
    "LocalFrame",
    "geodetic_to_enu",
    "enu_to_geodetic",
    "__version__",
]
