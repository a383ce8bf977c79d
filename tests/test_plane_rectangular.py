"""Tests for the Japan Plane Rectangular projection."""

import math

import numpy as np
import pytest

from coordinates.plane_rectangular import (
    PlaneRectangularProjection,
    geographic_to_plane_rectangular,
    meridian_arc_offset,
    plane_rectangular_to_geographic,
)
from coordinates.systems import JprOrigin


class TestKnownPoints:
    """Tests against published survey points in zone IX."""

    def test_plane_rectangular_to_geographic(self):
        """(y=22694.980, x=11573.375) is at 140°05'08"E, 36°06'15"N to 1e-3 deg."""
        longitude, latitude = plane_rectangular_to_geographic(22694.980, 11573.375, JprOrigin.IX)

        expected_lon = 140 + 5 / 60 + 8 / 3600
        expected_lat = 36 + 6 / 60 + 15 / 3600
        assert math.floor(np.degrees(longitude) * 1000) == math.floor(expected_lon * 1000)
        assert math.floor(np.degrees(latitude) * 1000) == math.floor(expected_lat * 1000)

    def test_geographic_to_plane_rectangular(self):
        y, x = geographic_to_plane_rectangular(
            np.radians(140.08785504166664), np.radians(36.103774791666666), JprOrigin.IX
        )
        assert y == pytest.approx(22916.2436, abs=1e-4)
        assert x == pytest.approx(11543.6883, abs=1e-4)

    def test_known_point_inverse(self):
        longitude, latitude = plane_rectangular_to_geographic(22916.2436, 11543.6883, JprOrigin.IX)
        assert np.degrees(longitude) == pytest.approx(140.08785504166664, abs=1e-8)
        assert np.degrees(latitude) == pytest.approx(36.103774791666666, abs=1e-8)


class TestOrigins:
    """Each origin maps to (0, 0) of its own zone."""

    @pytest.mark.parametrize("origin", list(JprOrigin))
    def test_origin_projects_to_zero(self, origin):
        y, x = geographic_to_plane_rectangular(origin.longitude, origin.latitude, origin)
        assert y == pytest.approx(0.0, abs=1e-6)
        assert x == pytest.approx(0.0, abs=1e-6)

    @pytest.mark.parametrize("origin", list(JprOrigin))
    def test_zero_maps_to_origin(self, origin):
        longitude, latitude = plane_rectangular_to_geographic(0.0, 0.0, origin)
        assert longitude == pytest.approx(origin.longitude, abs=1e-12)
        assert latitude == pytest.approx(origin.latitude, abs=1e-12)

    def test_meridian_arc_at_equator_is_zero(self):
        assert meridian_arc_offset(0.0) == 0.0

    def test_meridian_arc_to_36_degrees(self):
        """Meridian arc to 36°N on GRS80 is 3,985,542.67 m before scaling."""
        s0 = meridian_arc_offset(np.radians(36.0))
        assert s0 == pytest.approx(0.9999 * 3_985_542.670, abs=1e-2)


class TestRoundTrip:
    """Forward then inverse recovers the input."""

    @pytest.mark.parametrize("origin", list(JprOrigin))
    def test_round_trip_within_zone(self, origin, zone_points):
        longitudes, latitudes = zone_points(origin, count=100)
        for lon, lat in zip(longitudes, latitudes):
            y, x = geographic_to_plane_rectangular(lon, lat, origin)
            lon2, lat2 = plane_rectangular_to_geographic(y, x, origin)
            assert np.degrees(lon2) == pytest.approx(np.degrees(lon), abs=1e-7)
            assert np.degrees(lat2) == pytest.approx(np.degrees(lat), abs=1e-7)

    def test_round_trip_from_plane(self):
        for y, x in [(-50_000.0, 120_000.0), (80_000.0, -30_000.0), (0.0, 250_000.0)]:
            lon, lat = plane_rectangular_to_geographic(y, x, JprOrigin.VI)
            y2, x2 = geographic_to_plane_rectangular(lon, lat, JprOrigin.VI)
            assert y2 == pytest.approx(y, abs=1e-6)
            assert x2 == pytest.approx(x, abs=1e-6)


class TestGeometry:
    """Structural properties of the projection."""

    def test_easting_is_odd_in_longitude_offset(self):
        origin = JprOrigin.IX
        lat = np.radians(35.5)
        d = np.radians(0.3)
        y_east, x_east = geographic_to_plane_rectangular(origin.longitude + d, lat, origin)
        y_west, x_west = geographic_to_plane_rectangular(origin.longitude - d, lat, origin)
        assert y_east > 0
        assert y_east == pytest.approx(-y_west, abs=1e-9)
        assert x_east == pytest.approx(x_west, abs=1e-9)

    def test_northing_increases_with_latitude(self):
        origin = JprOrigin.IX
        _, x_south = geographic_to_plane_rectangular(origin.longitude, np.radians(35.9), origin)
        _, x_north = geographic_to_plane_rectangular(origin.longitude, np.radians(36.1), origin)
        assert x_south < 0 < x_north

    def test_central_meridian_scale_factor(self):
        """A short step along the central meridian is scaled by 0.9999."""
        origin = JprOrigin.IX
        step = 1e-5
        _, x0 = geographic_to_plane_rectangular(origin.longitude, origin.latitude, origin)
        _, x1 = geographic_to_plane_rectangular(origin.longitude, origin.latitude + step, origin)

        e2 = (1 / 298.257222101) * (2 - 1 / 298.257222101)
        sin_lat = np.sin(origin.latitude + step / 2)
        meridian_radius = 6378137.0 * (1 - e2) / (1 - e2 * sin_lat**2) ** 1.5
        assert (x1 - x0) / (meridian_radius * step) == pytest.approx(0.9999, rel=1e-8)

    def test_far_from_zone_does_not_raise(self):
        y, x = geographic_to_plane_rectangular(0.0, 0.0, JprOrigin.IX)
        assert math.isfinite(y) and math.isfinite(x)


class TestReferenceAgreement:
    """Cross-check against PROJ's implementation of the same EPSG zones."""

    @pytest.mark.parametrize("origin", [JprOrigin.I, JprOrigin.IX, JprOrigin.XII, JprOrigin.XIX])
    def test_matches_proj(self, origin, zone_points):
        projection = PlaneRectangularProjection(origin)
        to_proj, to_geo = projection.reference_transformer()
        longitudes, latitudes = zone_points(origin, count=20)

        for lon, lat in zip(longitudes, latitudes):
            y, x = projection.to_projected(lon, lat)
            ref_y, ref_x = to_proj.transform(np.degrees(lon), np.degrees(lat))
            assert y == pytest.approx(ref_y, abs=1e-3)
            assert x == pytest.approx(ref_x, abs=1e-3)

            ref_lon, ref_lat = to_geo.transform(y, x)
            lon2, lat2 = projection.to_geographic(y, x)
            assert np.degrees(lon2) == pytest.approx(ref_lon, abs=1e-8)
            assert np.degrees(lat2) == pytest.approx(ref_lat, abs=1e-8)


class TestProjectionObject:
    """Tests for PlaneRectangularProjection."""

    def test_metadata(self):
        projection = PlaneRectangularProjection(JprOrigin.IX)
        assert projection.origin is JprOrigin.IX
        assert projection.epsg_code == 6677
        assert projection.name == "JGD2011 / Japan Plane Rectangular CS IX"

    def test_delegates_to_functions(self):
        projection = PlaneRectangularProjection(JprOrigin.III)
        lon, lat = np.radians(132.3), np.radians(35.8)
        assert projection.to_projected(lon, lat) == geographic_to_plane_rectangular(
            lon, lat, JprOrigin.III
        )
        assert projection.to_geographic(1000.0, -2000.0) == plane_rectangular_to_geographic(
            1000.0, -2000.0, JprOrigin.III
        )
