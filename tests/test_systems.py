"""Tests for origin and zoom level identifiers."""

import numpy as np
import pytest

from common.exceptions import InvalidCoordinateSystemError
from coordinates.systems import JprOrigin, ZoomLevel


class TestJprOriginParse:
    """Tests for JprOrigin.parse."""

    @pytest.mark.parametrize("value", [9, "9", " 9 ", "IX", "ix", JprOrigin.IX])
    def test_accepts_equivalent_spellings(self, value):
        assert JprOrigin.parse(value) is JprOrigin.IX

    def test_accepts_full_range(self):
        assert [JprOrigin.parse(i) for i in range(1, 20)] == list(JprOrigin)

    @pytest.mark.parametrize("value", [0, 20, -1, "0", "20", "XX", "", "nine", 9.0, None, True])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(InvalidCoordinateSystemError) as exc_info:
            JprOrigin.parse(value)
        assert exc_info.value.kind == "origin"
        assert exc_info.value.value == value

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            JprOrigin.parse(0)

    @pytest.mark.parametrize("value", [np.int64(9), np.int32(9), np.uint8(9)])
    def test_accepts_numpy_integers(self, value):
        assert JprOrigin.parse(value) is JprOrigin.IX

    @pytest.mark.parametrize("value", ["\u00b2", "9\u00b2", "\u2468"])
    def test_rejects_non_decimal_digits(self, value):
        with pytest.raises(InvalidCoordinateSystemError):
            JprOrigin.parse(value)


class TestJprOriginTable:
    """Tests for origin constants."""

    def test_zone_ix_origin(self):
        """Zone IX (Tokyo) is at 36°N, 139°50'E."""
        assert JprOrigin.IX.latitude == pytest.approx(np.radians(36.0), abs=1e-12)
        assert JprOrigin.IX.longitude == pytest.approx(np.radians(139 + 50 / 60), abs=1e-12)

    def test_zone_i_origin(self):
        assert JprOrigin.I.latitude == pytest.approx(np.radians(33.0), abs=1e-12)
        assert JprOrigin.I.longitude == pytest.approx(np.radians(129.5), abs=1e-12)

    def test_zone_xviii_origin(self):
        """Zone XVIII (Okinotorishima) is the only origin at 20°N."""
        assert JprOrigin.XVIII.latitude == pytest.approx(np.radians(20.0), abs=1e-12)
        assert JprOrigin.XVIII.longitude == pytest.approx(np.radians(136.0), abs=1e-12)

    def test_zone_xix_origin(self):
        assert JprOrigin.XIX.latitude == pytest.approx(np.radians(26.0), abs=1e-12)
        assert JprOrigin.XIX.longitude == pytest.approx(np.radians(154.0), abs=1e-12)

    def test_all_origins_inside_japan(self):
        for origin in JprOrigin:
            assert 20.0 <= np.degrees(origin.latitude) <= 44.0
            assert 124.0 <= np.degrees(origin.longitude) <= 154.0

    def test_epsg_codes(self):
        assert JprOrigin.I.epsg_code == 6669
        assert JprOrigin.IX.epsg_code == 6677
        assert JprOrigin.XIX.epsg_code == 6687


class TestZoomLevel:
    """Tests for ZoomLevel."""

    @pytest.mark.parametrize("value", [21, "21", "LV21", "lv21", np.int64(21)])
    def test_parse(self, value):
        assert ZoomLevel.parse(value) is ZoomLevel.LV21

    @pytest.mark.parametrize("value", [-1, 25, "25", "LV25", 1.5, "\u00b2", np.int64(25)])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(InvalidCoordinateSystemError) as exc_info:
            ZoomLevel.parse(value)
        assert exc_info.value.kind == "zoom"

    def test_range(self):
        assert int(min(ZoomLevel)) == 0
        assert int(max(ZoomLevel)) == 24
        assert len(ZoomLevel) == 25

    def test_scale(self):
        assert ZoomLevel.LV0.scale == 128.0
        assert ZoomLevel.LV21.scale == 2.0 ** 28
