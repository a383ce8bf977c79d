"""
Geocentric (Earth-Centred Earth-Fixed) Coordinates on WGS84.

This module converts between geographic coordinates with ellipsoidal height
and Earth-centred Cartesian coordinates (EPSG:4978 / EPSG:4979 axes). It is
used for 3D visualization and distance work where ellipsoidal curvature
matters.

Scientific Context
------------------
Domain: Geodesy
Model: WGS84 reference ellipsoid

The forward direction is closed form. The inverse recovers latitude with a
fixed-point iteration

    φ_{k+1} = atan(z / (p - e² N(φ_k) cos φ_k)),    p = √(x² + y²)

which contracts by roughly e² sin²φ per step, so a handful of iterations
reach 1e-12 rad anywhere outside the polar axis. The iteration is bounded;
exhausting the bound raises `ConvergenceError`. Points on the polar axis
(p = 0) are handled in closed form.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Hofmann-Wellenhof, B. et al. (2008). GNSS. Section 5.6.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from common.constants import GeodeticConstants
from common.exceptions import ConvergenceError
from common.logging_config import get_logger

logger = get_logger(__name__)

# Below this distance from the polar axis a point is treated as on the axis
POLAR_AXIS_THRESHOLD_M = 1e-10


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = f(2 - f)
    """
    a: float
    f: float
    name: str

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)


WGS84Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.WGS84_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.WGS84_FLATTENING.value,
    name="WGS84"
)


def radius_of_curvature_prime_vertical(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the prime vertical.

    Parameters
    ----------
    latitude_rad : float or ndarray
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float or ndarray
        Radius of curvature N in meters.

    Notes
    -----
    N = a / (1 - e² sin²φ)^(1/2)

    At the equator (φ=0): N = a ≈ 6,378,137 m
    At the poles (φ=±90°): N ≈ 6,399,594 m
    """
    sin_lat = np.sin(latitude_rad)
    return ellipsoid.a / np.sqrt(1 - ellipsoid.e2 * sin_lat**2)


def _ellipsoidal_height(p, z, latitude_rad, ellipsoid: EllipsoidParameters):
    # Equals p / cos φ - N for the converged latitude, without the
    # division by cos φ near the poles.
    sin_lat = np.sin(latitude_rad)
    cos_lat = np.cos(latitude_rad)
    return (
        p * cos_lat
        + z * sin_lat
        - ellipsoid.a * np.sqrt(1 - ellipsoid.e2 * sin_lat**2)
    )


def geographic_to_geocentric(
    longitude_rad: float,
    latitude_rad: float,
    altitude_m: float = 0.0,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> Tuple[float, float, float]:
    """Convert geographic coordinates and height to geocentric Cartesian.

    Parameters
    ----------
    longitude_rad, latitude_rad : float
        Geodetic coordinates in radians.
    altitude_m : float
        Height above the ellipsoid in meters.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    Tuple[float, float, float]
        (x, y, z) in meters.

    Notes
    -----
    The geocentric frame has:
    - Origin at Earth's center of mass
    - X-axis through the prime meridian (0° longitude) at equator
    - Y-axis through 90°E at equator
    - Z-axis through the North Pole
    """
    sin_lat = np.sin(latitude_rad)
    cos_lat = np.cos(latitude_rad)

    N = radius_of_curvature_prime_vertical(latitude_rad, ellipsoid)

    x = (N + altitude_m) * cos_lat * np.cos(longitude_rad)
    y = (N + altitude_m) * cos_lat * np.sin(longitude_rad)
    z = (N * (1 - ellipsoid.e2) + altitude_m) * sin_lat

    return float(x), float(y), float(z)


def geocentric_to_geographic(
    x: float,
    y: float,
    z: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    max_iterations: int = GeodeticConstants.GEOCENTRIC_MAX_ITERATIONS,
    tolerance: float = GeodeticConstants.GEOCENTRIC_TOLERANCE.value
) -> Tuple[Tuple[float, float], float]:
    """Convert geocentric Cartesian coordinates to geographic and height.

    Parameters
    ----------
    x, y, z : float
        Geocentric coordinates in meters.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).
    max_iterations : int
        Maximum number of latitude updates.
    tolerance : float
        Convergence tolerance on the latitude update, in radians.

    Returns
    -------
    Tuple[Tuple[float, float], float]
        ((longitude_rad, latitude_rad), altitude_m)

    Raises
    ------
    ConvergenceError
        If the latitude update is still above `tolerance` after
        `max_iterations` updates.

    Notes
    -----
    On the polar axis the latitude is ±π/2 by the sign of z (the centre of
    the Earth maps to the north pole) and the longitude is 0.
    """
    longitude_rad = float(np.arctan2(y, x))
    p = np.hypot(x, y)

    if p < POLAR_AXIS_THRESHOLD_M:
        latitude_rad = float(np.copysign(np.pi / 2, z))
        altitude_m = float(np.abs(z) - ellipsoid.b)
        return (longitude_rad, latitude_rad), altitude_m

    e2 = ellipsoid.e2
    latitude_rad = np.arctan(z / (p * (1 - e2)))

    residual = np.inf
    for iteration in range(1, max_iterations + 1):
        N = radius_of_curvature_prime_vertical(latitude_rad, ellipsoid)
        latitude_new = np.arctan(z / (p - e2 * N * np.cos(latitude_rad)))
        residual = np.abs(latitude_new - latitude_rad)
        latitude_rad = latitude_new
        if residual < tolerance:
            logger.debug(f"Latitude converged after {iteration} iterations")
            break
    else:
        logger.error(
            f"Latitude did not converge for ({x}, {y}, {z}) "
            f"after {max_iterations} iterations"
        )
        raise ConvergenceError(max_iterations, float(residual))

    altitude_m = _ellipsoidal_height(p, z, latitude_rad, ellipsoid)

    return (longitude_rad, float(latitude_rad)), float(altitude_m)


# Vectorized versions for batch processing
def geographic_to_geocentric_batch(
    longitudes_rad: NDArray[np.float64],
    latitudes_rad: NDArray[np.float64],
    altitudes_m: NDArray[np.float64],
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> Tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Vectorized geographic to geocentric conversion.

    Parameters
    ----------
    longitudes_rad, latitudes_rad : ndarray
        Geodetic coordinates in radians.
    altitudes_m : ndarray
        Heights above the ellipsoid in meters.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid.

    Returns
    -------
    Tuple[ndarray, ndarray, ndarray]
        (x, y, z) arrays in meters.
    """
    sin_lat = np.sin(latitudes_rad)
    cos_lat = np.cos(latitudes_rad)

    N = radius_of_curvature_prime_vertical(latitudes_rad, ellipsoid)

    x = (N + altitudes_m) * cos_lat * np.cos(longitudes_rad)
    y = (N + altitudes_m) * cos_lat * np.sin(longitudes_rad)
    z = (N * (1 - ellipsoid.e2) + altitudes_m) * sin_lat

    return x, y, z


def geocentric_to_geographic_batch(
    x: NDArray[np.float64],
    y: NDArray[np.float64],
    z: NDArray[np.float64],
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    max_iterations: int = GeodeticConstants.GEOCENTRIC_MAX_ITERATIONS,
    tolerance: float = GeodeticConstants.GEOCENTRIC_TOLERANCE.value
) -> Tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64], int]:
    """Vectorized geocentric to geographic conversion.

    All points are iterated together until every latitude update is below
    `tolerance`.

    Parameters
    ----------
    x, y, z : ndarray
        Geocentric coordinates in meters.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).
    max_iterations : int
        Maximum number of latitude updates.
    tolerance : float
        Convergence threshold on the largest latitude update in radians.

    Returns
    -------
    Tuple[ndarray, ndarray, ndarray, int]
        (longitudes_rad, latitudes_rad, altitudes_m, iterations)

    Raises
    ------
    ConvergenceError
        If any point has not converged after `max_iterations` updates.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)

    longitudes_rad = np.arctan2(y, x)
    p = np.hypot(x, y)
    on_axis = p < POLAR_AXIS_THRESHOLD_M
    # Placeholder distance keeps the iteration finite on the axis
    p_safe = np.where(on_axis, 1.0, p)

    e2 = ellipsoid.e2
    latitudes_rad = np.arctan(z / (p_safe * (1 - e2)))

    residual = np.inf
    for iteration in range(1, max_iterations + 1):
        N = radius_of_curvature_prime_vertical(latitudes_rad, ellipsoid)
        latitudes_new = np.arctan(z / (p_safe - e2 * N * np.cos(latitudes_rad)))
        delta = np.abs(latitudes_new - latitudes_rad)
        residual = float(np.max(delta[~on_axis])) if np.any(~on_axis) else 0.0
        latitudes_rad = latitudes_new
        if residual < tolerance:
            break
    else:
        logger.error(f"Batch latitude did not converge after {max_iterations} iterations")
        raise ConvergenceError(max_iterations, residual)

    altitudes_m = _ellipsoidal_height(p, z, latitudes_rad, ellipsoid)

    latitudes_rad = np.where(on_axis, np.copysign(np.pi / 2, z), latitudes_rad)
    altitudes_m = np.where(on_axis, np.abs(z) - ellipsoid.b, altitudes_m)

    logger.debug(f"Batch of {x.size} points converged after {iteration} iterations")
    return longitudes_rad, latitudes_rad, altitudes_m, iteration
