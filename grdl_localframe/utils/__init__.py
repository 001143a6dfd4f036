# -*- coding: utf-8 -*-
"""
Utilities - Constants and helper functions.

WGS-84 parameters, angle conversion factors, longitude normalization and
coordinate input parsing.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from grdl_localframe.utils.constants import (
    DEG_TO_RAD,
    RAD_TO_DEG,
    WGS84_A,
    WGS84_B,
    WGS84_F,
    WGS84_E2,
    WGS84_EP2,
)

from grdl_localframe.utils.misc import (
    normalize_longitude,
    split_triplet,
)

__all__ = [
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "WGS84_A",
    "WGS84_B",
    "WGS84_F",
    "WGS84_E2",
    "WGS84_EP2",
    "normalize_longitude",
    "split_triplet",
]
