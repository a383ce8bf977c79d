"""Pytest configuration and fixtures for coordinate transformation tests."""

import numpy as np
import pytest

from coordinates.systems import JprOrigin


@pytest.fixture
def rng():
    """Seeded random generator so property tests are reproducible."""
    return np.random.default_rng(20240917)


@pytest.fixture
def zone_points(rng):
    """Factory for random points within half a degree of a zone origin."""
    def make(origin: JprOrigin, count: int = 200):
        d_lon = rng.uniform(-0.5, 0.5, count)
        d_lat = rng.uniform(-0.5, 0.5, count)
        longitudes = origin.longitude + np.radians(d_lon)
        latitudes = origin.latitude + np.radians(d_lat)
        return longitudes, latitudes
    return make
