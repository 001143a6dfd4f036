# -*- coding: utf-8 -*-
"""
Reference Ellipsoid - Geodetic <-> geocentric (ECF) transforms.

Provides the ellipsoid model a local frame is built on: conversion from
geodetic latitude, longitude and height to Earth Centered Fixed (ECF)
Cartesian coordinates and back, for an arbitrary oblate ellipsoid.

The reverse transform uses the closed-form algorithm from Zhu, J.
"Conversion of Earth-centered, Earth-fixed coordinates to geodetic
coordinates." IEEE Transactions on Aerospace and Electronic Systems,
30(3), 1994.

Dependencies
------------
numpy - Vectorized trigonometry

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

# Third-party
import numpy as np

# GRDL internal
from grdl_localframe.utils.constants import WGS84_A, WGS84_F
from grdl_localframe.utils.misc import split_triplet


# ===================================================================
# Transform Contract
# ===================================================================

class EllipsoidTransform(Protocol):
    """
    Geodetic <-> geocentric transform used by a local frame.

    Any object exposing these two methods can back a ``LocalFrame``.
    ``reverse`` must invert ``forward`` to the model's stated precision.
    """

    def forward(self, lat, lon, h) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        ...

    def reverse(self, x, y, z) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        ...


# ===================================================================
# Ellipsoid
# ===================================================================

@dataclass(frozen=True)
class Ellipsoid:
    """
    Oblate ellipsoid of revolution.

    Attributes
    ----------
    a : float
        Semi-major (equatorial) axis in meters.
    f : float
        Flattening, (a - b) / a. Zero gives a sphere.
    """
    a: float
    f: float

    def __post_init__(self):
        if not np.isfinite(self.a) or self.a <= 0:
            raise ValueError(f"Semi-major axis must be positive and finite, got {self.a}")
        if not np.isfinite(self.f) or self.f >= 1 or self.f < 0:
            raise ValueError(f"Flattening must be in [0, 1), got {self.f}")

    @property
    def b(self) -> float:
        """Semi-minor (polar) axis in meters."""
        return self.a * (1.0 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2.0 - self.f)

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1.0 - self.e2)

    def forward(
        self,
        lat: np.ndarray,
        lon: Optional[np.ndarray] = None,
        h: Optional[np.ndarray] = None
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Convert geodetic coordinates to ECF.

        Parameters
        ----------
        lat : np.ndarray
            Geodetic latitude in degrees, or a 3-element/3xN/Nx3 array
            of [lat, lon, h].
        lon : np.ndarray, optional
            Longitude in degrees.
        h : np.ndarray, optional
            Height above the ellipsoid in meters.

        Returns
        -------
        x : np.ndarray
            ECF X coordinate(s) in meters.
        y : np.ndarray
            ECF Y coordinate(s) in meters.
        z : np.ndarray
            ECF Z coordinate(s) in meters.
        """
        lat, lon, h = split_triplet(lat, lon, h, name='LLA')
        e2 = self.e2

        lat_rad = np.radians(lat)
        lon_rad = np.radians(lon)

        sin_lat = np.sin(lat_rad)
        cos_lat = np.cos(lat_rad)
        sin_lon = np.sin(lon_rad)
        cos_lon = np.cos(lon_rad)

        # Prime vertical radius of curvature
        R = self.a / np.sqrt(1.0 - e2 * sin_lat * sin_lat)

        x = (R + h) * cos_lat * cos_lon
        y = (R + h) * cos_lat * sin_lon
        z = (R * (1.0 - e2) + h) * sin_lat

        return x, y, z

    def reverse(
        self,
        x: np.ndarray,
        y: Optional[np.ndarray] = None,
        z: Optional[np.ndarray] = None
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Convert ECF coordinates to geodetic.

        Points so close to the center that no unique solution exists
        (inside the evolute of the ellipse) come back as NaN.

        Parameters
        ----------
        x : np.ndarray
            ECF X coordinate(s) in meters, or a 3-element/3xN/Nx3 array of
            full ECF positions.
        y : np.ndarray, optional
            ECF Y coordinate(s) in meters.
        z : np.ndarray, optional
            ECF Z coordinate(s) in meters.

        Returns
        -------
        lat : np.ndarray
            Geodetic latitude in degrees.
        lon : np.ndarray
            Longitude in degrees, in [-180, 180].
        h : np.ndarray
            Height above the ellipsoid in meters.
        """
        x, y, z = split_triplet(x, y, z, name='ECF')
        x, y, z = np.broadcast_arrays(x, y, z)

        a = self.a
        b = self.b
        e2 = self.e2
        e4 = e2 * e2
        ome2 = 1.0 - e2
        a2 = a * a
        b2 = b * b
        e_b2 = (a2 - b2) / b2

        z2 = z * z
        r2 = x * x + y * y
        r = np.sqrt(r2)

        # Check for valid solution
        valid = (a * r) ** 2 + (b * z) ** 2 > (a2 - b2) ** 2

        lat = np.full(x.shape, np.nan, dtype=np.float64)
        lon = np.full(x.shape, np.nan, dtype=np.float64)
        h = np.full(x.shape, np.nan, dtype=np.float64)

        # Invalid points are masked out below; keep their arithmetic quiet
        with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
            F = 54.0 * b2 * z2
            G = r2 + ome2 * z2 - e2 * (a2 - b2)
            c = e4 * F * r2 / (G * G * G)
            s = np.cbrt(1.0 + c + np.sqrt(c * c + 2.0 * c))
            templ = s + 1.0 / s + 1.0
            P = F / (3.0 * templ * templ * G * G)
            Q = np.sqrt(1.0 + 2.0 * e4 * P)
            r0 = (-P * e2 * r / (1.0 + Q) +
                  np.sqrt(np.abs(0.5 * a2 * (1.0 + 1.0 / Q) -
                                 P * ome2 * z2 / (Q * (1.0 + Q)) -
                                 0.5 * P * r2)))
            temp2 = r - e2 * r0
            U = np.sqrt(temp2 * temp2 + z2)
            V = np.sqrt(temp2 * temp2 + ome2 * z2)
            z0 = b2 * z / (a * V)

        lon[valid] = np.degrees(np.arctan2(y[valid], x[valid]))
        lat[valid] = np.degrees(np.arctan2(z[valid] + e_b2 * z0[valid], r[valid]))
        h[valid] = U[valid] * (1.0 - b2 / (a * V[valid]))

        return lat, lon, h


#: WGS-84 reference ellipsoid
WGS84 = Ellipsoid(WGS84_A, WGS84_F)


# ===================================================================
# Per-point ENU Rotation
# ===================================================================

def enu_rotation_matrix(lat: float, lon: float) -> np.ndarray:
    """
    Compute the ECF to East-North-Up rotation matrix at a geodetic point.

    Rows are the local East, North and Up unit vectors expressed in ECF.
    The matrix depends only on the direction of the ellipsoid normal, so
    no ellipsoid parameters are needed.

    Parameters
    ----------
    lat : float
        Geodetic latitude in degrees.
    lon : float
        Longitude in degrees.

    Returns
    -------
    np.ndarray
        3x3 rotation matrix from ECF to ENU.
    """
    lat_rad = np.radians(float(lat))
    lon_rad = np.radians(float(lon))
    sin_lat, cos_lat = np.sin(lat_rad), np.cos(lat_rad)
    sin_lon, cos_lon = np.sin(lon_rad), np.cos(lon_rad)

    return np.array([
        [-sin_lon, cos_lon, 0.0],
        [-cos_lon * sin_lat, -sin_lon * sin_lat, cos_lat],
        [cos_lon * cos_lat, sin_lon * cos_lat, sin_lat],
    ])


__all__ = [
    "EllipsoidTransform",
    "Ellipsoid",
    "WGS84",
    "enu_rotation_matrix",
]
