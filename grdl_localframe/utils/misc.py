# -*- coding: utf-8 -*-
"""
Miscellaneous Utilities - Longitude normalization and coordinate input parsing.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from typing import Optional, Tuple
import numpy as np

from grdl_localframe.utils.constants import LONGITUDE_MIN, LONGITUDE_MAX


def normalize_longitude(lon: float) -> float:
    """
    Fold a longitude into the half-open interval (-180, 180].

    A single +/-360 step is applied, so inputs are expected to lie within
    one revolution of the interval. 180 is kept as 180 and -180 maps to 180.

    Parameters
    ----------
    lon : float
        Longitude in degrees.

    Returns
    -------
    float
        Longitude in degrees within (-180, 180].

    Examples
    --------
    >>> normalize_longitude(540.0)
    180.0
    >>> normalize_longitude(-180.0)
    180.0
    """
    lon = float(lon)
    if lon > LONGITUDE_MAX:
        return lon - 360.0
    if lon <= LONGITUDE_MIN:
        return lon + 360.0
    return lon


def split_triplet(
    first: np.ndarray,
    second: Optional[np.ndarray] = None,
    third: Optional[np.ndarray] = None,
    name: str = 'coordinate'
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Split coordinate input into three float64 component arrays.

    Accepts either three separate components, or a single stacked array
    passed as ``first`` with shape (3,), (3, N) or (N, 3). A (3, 3) array
    is read as rows of components.

    Parameters
    ----------
    first : np.ndarray
        First component, or the full stacked coordinate array.
    second : np.ndarray, optional
        Second component.
    third : np.ndarray, optional
        Third component.
    name : str
        Label used in error messages (e.g. 'ECF', 'LLA', 'ENU').

    Returns
    -------
    Tuple[np.ndarray, np.ndarray, np.ndarray]
        The three components as float64 arrays.

    Raises
    ------
    ValueError
        If the stacked array has an unsupported shape, or only one of
        ``second`` and ``third`` is given.
    """
    first = np.asarray(first, dtype=np.float64)

    if second is None and third is None:
        if first.ndim == 1 and first.size == 3:
            return first[0], first[1], first[2]
        elif first.ndim == 2 and first.shape[0] == 3:
            return first[0], first[1], first[2]
        elif first.ndim == 2 and first.shape[1] == 3:
            return first[:, 0], first[:, 1], first[:, 2]
        raise ValueError(
            f"Invalid {name} shape {first.shape}. Expected (3,), (3,N), or (N,3)"
        )

    if second is None or third is None:
        raise ValueError(
            f"{name} components must be given all three separately or as one stacked array"
        )

    return (first,
            np.asarray(second, dtype=np.float64),
            np.asarray(third, dtype=np.float64))


__all__ = [
    "normalize_longitude",
    "split_triplet",
]
