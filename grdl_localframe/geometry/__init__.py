# -*- coding: utf-8 -*-
"""
Local Frame Geometry - Ellipsoid and local East-North-Up transforms.

Provides:
- Reference ellipsoid with geodetic <-> ECF conversion
- Local tangent-plane (ENU) frame anchored at a geodetic origin

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from grdl_localframe.geometry.ellipsoid import (
    EllipsoidTransform,
    Ellipsoid,
    WGS84,
    enu_rotation_matrix,
)

from grdl_localframe.geometry.local_frame import (
    Origin,
    LocalCoordinates,
    GeodeticCoordinates,
    LocalFrame,
    geodetic_to_enu,
    enu_to_geodetic,
)

__all__ = [
    # Ellipsoid
    "EllipsoidTransform",
    "Ellipsoid",
    "WGS84",
    "enu_rotation_matrix",
    # Local frame
    "Origin",
    "LocalCoordinates",
    "GeodeticCoordinates",
    "LocalFrame",
    "geodetic_to_enu",
    "enu_to_geodetic",
]
