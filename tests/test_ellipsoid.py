# -*- coding: utf-8 -*-
"""Tests for the reference ellipsoid transforms."""
import numpy as np
import pytest

from grdl_localframe.geometry.ellipsoid import (
    Ellipsoid,
    WGS84,
    enu_rotation_matrix,
)
from grdl_localframe.utils.constants import WGS84_A, WGS84_B


class TestECFGeodeticRoundtrip:
    """Test geodetic <-> ECF roundtrip conversions."""

    def test_origin_point(self):
        """Test conversion at lat=0, lon=0."""
        lat, lon, h = 0.0, 0.0, 0.0
        x, y, z = WGS84.forward(lat, lon, h)
        lat2, lon2, h2 = WGS84.reverse(x, y, z)
        assert abs(float(lat2) - lat) < 1e-10
        assert abs(float(lon2) - lon) < 1e-10
        assert abs(float(h2) - h) < 1e-6

    def test_north_pole(self):
        lat, lon, h = 90.0, 0.0, 0.0
        x, y, z = WGS84.forward(lat, lon, h)
        lat2, lon2, h2 = WGS84.reverse(x, y, z)
        assert abs(float(lat2) - lat) < 1e-10
        assert abs(float(h2) - h) < 1e-6

    def test_south_pole(self):
        lat, lon, h = -90.0, 0.0, 250.0
        x, y, z = WGS84.forward(lat, lon, h)
        lat2, lon2, h2 = WGS84.reverse(x, y, z)
        assert abs(float(lat2) - lat) < 1e-10
        assert abs(float(h2) - h) < 1e-6

    def test_arbitrary_point(self):
        lat, lon, h = 38.8977, -77.0365, 100.0  # Washington DC
        x, y, z = WGS84.forward(lat, lon, h)
        lat2, lon2, h2 = WGS84.reverse(x, y, z)
        assert abs(float(lat2) - lat) < 1e-9
        assert abs(float(lon2) - lon) < 1e-9
        assert abs(float(h2) - h) < 1e-6

    def test_vector_input(self):
        lats = np.array([0.0, 45.0, -30.0, 89.0])
        lons = np.array([0.0, 90.0, -120.0, 179.0])
        hs = np.array([0.0, 1000.0, 5000.0, -200.0])
        x, y, z = WGS84.forward(lats, lons, hs)
        lat2, lon2, h2 = WGS84.reverse(x, y, z)
        np.testing.assert_allclose(lat2, lats, atol=1e-9)
        np.testing.assert_allclose(lon2, lons, atol=1e-9)
        np.testing.assert_allclose(h2, hs, atol=1e-6)

    def test_array_3_input_ecf(self):
        """Test single (3,) vector input."""
        x, y, z = WGS84.forward(38.0, -77.0, 0.0)
        ecf = np.array([float(x), float(y), float(z)])
        lat, lon, h = WGS84.reverse(ecf)
        assert abs(float(lat) - 38.0) < 1e-9
        assert abs(float(lon) - (-77.0)) < 1e-9

    def test_array_3x1_input_ecf(self):
        """Test (3,1) column vector input."""
        x, y, z = WGS84.forward(38.0, -77.0, 0.0)
        ecf = np.array([[float(x)], [float(y)], [float(z)]])
        lat, lon, h = WGS84.reverse(ecf)
        assert abs(float(lat[0]) - 38.0) < 1e-9

    def test_nx3_input_lla(self):
        """Rows of [lat, lon, h] match separate components."""
        lla = np.array([[10.0, 20.0, 30.0], [-40.0, 150.0, 0.0]])
        stacked = WGS84.forward(lla)
        separate = WGS84.forward(lla[:, 0], lla[:, 1], lla[:, 2])
        for got, want in zip(stacked, separate):
            np.testing.assert_array_equal(got, want)

    def test_invalid_shape(self):
        with pytest.raises(ValueError, match="Invalid ECF shape"):
            WGS84.reverse(np.zeros((4, 4)))

    def test_partial_components(self):
        with pytest.raises(ValueError):
            WGS84.forward(10.0, 20.0)


class TestKnownValues:
    def test_equator_prime_meridian(self):
        x, y, z = WGS84.forward(0.0, 0.0, 0.0)
        assert float(x) == pytest.approx(WGS84_A)
        assert abs(float(y)) < 1e-9
        assert abs(float(z)) < 1e-9

    def test_north_pole_radius(self):
        x, y, z = WGS84.forward(90.0, 0.0, 0.0)
        assert abs(float(x)) < 1e-6
        assert float(z) == pytest.approx(WGS84_B, abs=1e-6)

    def test_height_along_normal(self):
        """Height adds along the outward normal."""
        x0, y0, z0 = WGS84.forward(0.0, 90.0, 0.0)
        x1, y1, z1 = WGS84.forward(0.0, 90.0, 1000.0)
        assert float(y1 - y0) == pytest.approx(1000.0)

    def test_center_is_nan(self):
        """No unique solution at the ellipsoid center."""
        lat, lon, h = WGS84.reverse(0.0, 0.0, 0.0)
        assert np.isnan(lat)
        assert np.isnan(lon)
        assert np.isnan(h)


class TestEllipsoidParameters:
    def test_wgs84_derived(self):
        assert WGS84.b == pytest.approx(WGS84_B, abs=1e-6)
        assert WGS84.e2 == pytest.approx(0.00669437999014, abs=1e-14)
        assert WGS84.ep2 == pytest.approx(0.00673949674228, abs=1e-14)

    def test_sphere_roundtrip(self):
        sphere = Ellipsoid(6371000.0, 0.0)
        x, y, z = sphere.forward(30.0, 60.0, 500.0)
        assert float(np.sqrt(x * x + y * y + z * z)) == pytest.approx(6371500.0)
        lat, lon, h = sphere.reverse(x, y, z)
        assert float(lat) == pytest.approx(30.0, abs=1e-10)
        assert float(lon) == pytest.approx(60.0, abs=1e-10)
        assert float(h) == pytest.approx(500.0, abs=1e-6)

    @pytest.mark.parametrize("a, f", [
        (0.0, 0.003),
        (-1.0, 0.003),
        (6378137.0, 1.0),
        (6378137.0, -0.1),
        (float('nan'), 0.0),
    ])
    def test_invalid_parameters(self, a, f):
        with pytest.raises(ValueError):
            Ellipsoid(a, f)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            WGS84.a = 1.0


class TestENURotation:
    @pytest.mark.parametrize("lat, lon", [
        (0.0, 0.0), (38.9, -77.0), (-60.0, 170.0), (89.0, 45.0),
    ])
    def test_orthonormal(self, lat, lon):
        R = enu_rotation_matrix(lat, lon)
        np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)

    def test_up_is_normal(self):
        """Up row points along the outward normal at the equator."""
        R = enu_rotation_matrix(0.0, 0.0)
        np.testing.assert_allclose(R[2], [1.0, 0.0, 0.0], atol=1e-15)
        np.testing.assert_allclose(R[0], [0.0, 1.0, 0.0], atol=1e-15)
        np.testing.assert_allclose(R[1], [0.0, 0.0, 1.0], atol=1e-15)
