"""Tests for angle unit conversion."""

import numpy as np
import pytest

from common.units import Q_, dms_to_radians, from_radians, to_radians


class TestToRadians:
    """Tests for to_radians."""

    def test_degrees(self):
        assert to_radians(180.0) == pytest.approx(np.pi)

    def test_arcminutes(self):
        assert to_radians(7770, "arcminute") == pytest.approx(np.radians(129.5))

    def test_arcseconds(self):
        assert to_radians(129600, "arcsecond") == pytest.approx(np.radians(36.0))

    def test_quantity_input(self):
        assert to_radians(Q_(90, "degree")) == pytest.approx(np.pi / 2)

    def test_rejects_non_angle(self):
        with pytest.raises(ValueError):
            to_radians(1.0, "meter")


class TestFromRadians:
    """Tests for from_radians."""

    def test_degrees(self):
        assert from_radians(np.pi) == pytest.approx(180.0)

    def test_arcseconds(self):
        assert from_radians(np.radians(1.0), "arcsecond") == pytest.approx(3600.0)

    def test_rejects_non_angle(self):
        with pytest.raises(ValueError):
            from_radians(1.0, "second")


class TestDms:
    """Tests for dms_to_radians."""

    def test_positive(self):
        expected = np.radians(36 + 6 / 60 + 15 / 3600)
        assert dms_to_radians(36, 6, 15) == pytest.approx(expected)

    def test_negative_degrees_apply_to_whole_angle(self):
        expected = -np.radians(12 + 30 / 60)
        assert dms_to_radians(-12, 30) == pytest.approx(expected)
