# -*- coding: utf-8 -*-
"""
Local Cartesian Frame - Geodetic <-> local East-North-Up (ENU) coordinates.

A ``LocalFrame`` is anchored at an origin point on or near the ellipsoid.
Geodetic positions are taken to ECF through the ellipsoid model, shifted
by the origin's ECF position and rotated onto the local East, North and Up
axes. The reverse path applies the transposed rotation and hands the ECF
result back to the ellipsoid.

This is a rigid rotation and translation, not a map projection: there is
no scale or distortion correction, so coordinates are only meaningful for
relative positioning near the origin.

Frames are immutable. ``reset`` returns a new frame homed at another
origin, so a frame may be shared freely between threads.

Dependencies
------------
numpy - Rotation and vectorized transforms

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
import logging
from typing import NamedTuple, Optional, Sequence

# Third-party
import numpy as np

# GRDL internal
from grdl_localframe.geometry.ellipsoid import (
    EllipsoidTransform,
    WGS84,
    enu_rotation_matrix,
)
from grdl_localframe.utils.constants import DEG_TO_RAD
from grdl_localframe.utils.misc import normalize_longitude, split_triplet

logger = logging.getLogger(__name__)


# ===================================================================
# Data Structures
# ===================================================================

class Origin(NamedTuple):
    """Origin of a local frame (degrees, degrees, meters)."""
    lat: float
    lon: float
    h: float


class LocalCoordinates(NamedTuple):
    """East, north and up displacements from the frame origin."""
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray


class GeodeticCoordinates(NamedTuple):
    """Geodetic latitude, longitude (degrees) and ellipsoid height."""
    lat: np.ndarray
    lon: np.ndarray
    h: np.ndarray


# ===================================================================
# Helper Functions
# ===================================================================

def _origin_rotation(lat0: float, lon0: float) -> np.ndarray:
    """
    ECF to ENU rotation at the origin, exact at cardinal angles.

    ``lon0`` must already be normalized to (-180, 180]. Terms that are
    analytically zero at the poles, at +/-90 longitude and on the
    antimeridian are set to exactly zero rather than left as the
    ~1e-16 residue of the trigonometric evaluation.
    """
    phi = lat0 * DEG_TO_RAD
    sphi = np.sin(phi)
    cphi = 0.0 if abs(lat0) == 90 else np.cos(phi)

    lam = lon0 * DEG_TO_RAD
    slam = 0.0 if abs(lon0) == 180 else np.sin(lam)
    clam = 0.0 if abs(lon0) == 90 else np.cos(lam)

    return np.array([
        [-slam, clam, 0.0],                   # East
        [-clam * sphi, -slam * sphi, cphi],   # North
        [clam * cphi, slam * cphi, sphi],     # Up
    ], dtype=np.float64)


# ===================================================================
# Local Frame
# ===================================================================

class LocalFrame:
    """
    Local East-North-Up Cartesian frame anchored at a geodetic origin.

    The origin's ECF position and the ECF to ENU rotation are computed
    once at construction and never change afterwards. ``forward`` and
    ``reverse`` are pure reads of that state.

    A frame is always configured: there is no way to build one without an
    origin, which is what makes ``forward``/``reverse`` valid to call.
    Re-home a frame with ``reset``, which returns a new instance.

    Parameters
    ----------
    lat0 : float
        Origin geodetic latitude in degrees, [-90, 90]. Not validated here;
        out-of-range values are left to the ellipsoid transform.
    lon0 : float
        Origin longitude in degrees. Folded once into (-180, 180].
    h0 : float
        Origin height above the ellipsoid, in the ellipsoid's linear unit.
    ellipsoid : EllipsoidTransform
        Geodetic <-> ECF transform. Default WGS-84.

    Examples
    --------
    >>> frame = LocalFrame(45.0, 45.0, 100.0)
    >>> x, y, z = frame.forward(45.001, 45.0, 100.0)
    >>> lat, lon, h = frame.reverse(x, y, z)
    """

    def __init__(
        self,
        lat0: float = 0.0,
        lon0: float = 0.0,
        h0: float = 0.0,
        ellipsoid: EllipsoidTransform = WGS84
    ):
        lat0 = float(lat0)
        lon0 = normalize_longitude(lon0)
        h0 = float(h0)

        x0, y0, z0 = ellipsoid.forward(lat0, lon0, h0)
        origin_ecf = np.array([x0, y0, z0], dtype=np.float64).ravel()
        rotation = _origin_rotation(lat0, lon0)

        origin_ecf.setflags(write=False)
        rotation.setflags(write=False)

        self._ellipsoid = ellipsoid
        self._origin = Origin(lat0, lon0, h0)
        self._origin_ecf = origin_ecf
        self._rotation = rotation

        logger.debug(
            "Local frame origin lat=%.9f lon=%.9f h=%.4f (ECF %s)",
            lat0, lon0, h0, origin_ecf,
        )

    def reset(self, lat0: float, lon0: float, h0: float = 0.0) -> 'LocalFrame':
        """
        Return a frame re-homed at a new origin on the same ellipsoid.

        Parameters
        ----------
        lat0 : float
            Origin geodetic latitude in degrees.
        lon0 : float
            Origin longitude in degrees.
        h0 : float
            Origin height above the ellipsoid.

        Returns
        -------
        LocalFrame
            New frame. This frame is left unchanged.
        """
        return LocalFrame(lat0, lon0, h0, ellipsoid=self._ellipsoid)

    # ---------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------

    @property
    def origin(self) -> Origin:
        """Normalized origin (lat, lon, h)."""
        return self._origin

    @property
    def lat0(self) -> float:
        return self._origin.lat

    @property
    def lon0(self) -> float:
        return self._origin.lon

    @property
    def h0(self) -> float:
        return self._origin.h

    @property
    def origin_geocentric(self) -> np.ndarray:
        """Origin in ECF coordinates, shape (3,). Read-only."""
        return self._origin_ecf

    @property
    def rotation(self) -> np.ndarray:
        """
        ECF to ENU rotation, shape (3, 3). Read-only.

        Rows are the local East, North and Up unit vectors in ECF.
        """
        return self._rotation

    @property
    def ellipsoid(self) -> EllipsoidTransform:
        return self._ellipsoid

    @property
    def major_radius(self) -> float:
        """Equatorial radius of the underlying ellipsoid."""
        return self._ellipsoid.a

    @property
    def flattening(self) -> float:
        """Flattening of the underlying ellipsoid."""
        return self._ellipsoid.f

    # ---------------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------------

    def forward(
        self,
        lat: np.ndarray,
        lon: Optional[np.ndarray] = None,
        h: Optional[np.ndarray] = None
    ) -> LocalCoordinates:
        """
        Convert geodetic coordinates to local ENU.

        Parameters
        ----------
        lat : np.ndarray
            Geodetic latitude in degrees, or a 3-element/3xN/Nx3 array
            of [lat, lon, h].
        lon : np.ndarray, optional
            Longitude in degrees.
        h : np.ndarray, optional
            Height above the ellipsoid.

        Returns
        -------
        LocalCoordinates
            East (x), north (y) and up (z) displacements from the origin,
            in the ellipsoid's linear unit. The origin itself maps to
            exactly (0, 0, 0).
        """
        lat, lon, h = split_triplet(lat, lon, h, name='LLA')
        xc, yc, zc = self._ellipsoid.forward(lat, lon, h)

        x0, y0, z0 = self._origin_ecf
        offset = np.stack(np.broadcast_arrays(xc - x0, yc - y0, zc - z0))
        local = np.tensordot(self._rotation, offset, axes=1)

        return LocalCoordinates(local[0], local[1], local[2])

    def reverse(
        self,
        x: np.ndarray,
        y: Optional[np.ndarray] = None,
        z: Optional[np.ndarray] = None
    ) -> GeodeticCoordinates:
        """
        Convert local ENU coordinates to geodetic.

        Parameters
        ----------
        x : np.ndarray
            East displacement, or a 3-element/3xN/Nx3 array of [x, y, z].
        y : np.ndarray, optional
            North displacement.
        z : np.ndarray, optional
            Up displacement.

        Returns
        -------
        GeodeticCoordinates
            Latitude and longitude in degrees, and height above the
            ellipsoid, as returned by the ellipsoid transform.
        """
        x, y, z = split_triplet(x, y, z, name='ENU')

        local = np.stack(np.broadcast_arrays(x, y, z))
        ecf = np.tensordot(self._rotation.T, local, axes=1)

        x0, y0, z0 = self._origin_ecf
        lat, lon, h = self._ellipsoid.reverse(ecf[0] + x0, ecf[1] + y0, ecf[2] + z0)

        return GeodeticCoordinates(lat, lon, h)

    # ---------------------------------------------------------------
    # Vectors
    # ---------------------------------------------------------------

    def vector_to_local(self, ecf_vector: np.ndarray) -> np.ndarray:
        """
        Rotate an ECF direction or velocity vector into the local frame.

        No translation is applied.

        Parameters
        ----------
        ecf_vector : np.ndarray
            ECF vector(s), shape (3,) or (3, N).

        Returns
        -------
        np.ndarray
            ENU vector(s), same shape as input.
        """
        return self._rotation @ np.asarray(ecf_vector, dtype=np.float64)

    def vector_to_geocentric(self, enu_vector: np.ndarray) -> np.ndarray:
        """
        Rotate a local ENU vector back into ECF.

        Parameters
        ----------
        enu_vector : np.ndarray
            ENU vector(s), shape (3,) or (3, N).

        Returns
        -------
        np.ndarray
            ECF vector(s), same shape as input.
        """
        return self._rotation.T @ np.asarray(enu_vector, dtype=np.float64)

    def point_rotation(self, lat: float, lon: float) -> np.ndarray:
        """
        Rotation from the ENU frame at a point into this frame's axes.

        Multiplying a vector expressed in the East-North-Up frame at
        (lat, lon) by this matrix gives the same vector in the origin's
        local frame. Away from the origin the two frames differ by the
        curvature of the ellipsoid between them.

        Parameters
        ----------
        lat : float
            Geodetic latitude of the point in degrees.
        lon : float
            Longitude of the point in degrees.

        Returns
        -------
        np.ndarray
            3x3 rotation matrix.
        """
        return self._rotation @ enu_rotation_matrix(lat, lon).T

    def __repr__(self) -> str:
        lat0, lon0, h0 = self._origin
        return f"LocalFrame(lat0={lat0!r}, lon0={lon0!r}, h0={h0!r})"


# ===================================================================
# Functional Interface
# ===================================================================

def geodetic_to_enu(
    lat: np.ndarray,
    lon: np.ndarray,
    h: np.ndarray,
    origin: Sequence[float],
    ellipsoid: EllipsoidTransform = WGS84
) -> LocalCoordinates:
    """
    Convert geodetic coordinates to ENU about a one-off origin.

    Parameters
    ----------
    lat, lon : np.ndarray
        Geodetic latitude and longitude in degrees.
    h : np.ndarray
        Height above the ellipsoid.
    origin : sequence of float
        Frame origin as (lat0, lon0, h0).
    ellipsoid : EllipsoidTransform
        Geodetic <-> ECF transform. Default WGS-84.

    Returns
    -------
    LocalCoordinates
        East, north and up displacements from the origin.
    """
    lat0, lon0, h0 = origin
    return LocalFrame(lat0, lon0, h0, ellipsoid=ellipsoid).forward(lat, lon, h)


def enu_to_geodetic(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    origin: Sequence[float],
    ellipsoid: EllipsoidTransform = WGS84
) -> GeodeticCoordinates:
    """
    Convert ENU coordinates about a one-off origin to geodetic.

    Parameters
    ----------
    x, y, z : np.ndarray
        East, north and up displacements from the origin.
    origin : sequence of float
        Frame origin as (lat0, lon0, h0).
    ellipsoid : EllipsoidTransform
        Geodetic <-> ECF transform. Default WGS-84.

    Returns
    -------
    GeodeticCoordinates
        Latitude, longitude and height.
    """
    lat0, lon0, h0 = origin
    return LocalFrame(lat0, lon0, h0, ellipsoid=ellipsoid).reverse(x, y, z)


__all__ = [
    "Origin",
    "LocalCoordinates",
    "GeodeticCoordinates",
    "LocalFrame",
    "geodetic_to_enu",
    "enu_to_geodetic",
]
