"""
Geodetic Constants for Japanese Cartography and Web Mapping.

This module provides the ellipsoid parameters, projection constants and
truncated series coefficients used by every transformation in the system.
All constants are defined in SI units and traceable to authoritative sources.

References
----------
- GRS80 / JGD2011 parameters: Geospatial Information Authority of Japan (GSI)
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Krüger series: Kawase, K. (2011). A General Formula for Calculating
  Meridian Arc Length and its Application to Coordinate Conversion in the
  Gauss-Krüger Projection. Bulletin of the GSI, 59.
"""

from dataclasses import dataclass
from typing import Final
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Constant:
    """A geodetic constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of geodetic constants used throughout the system.

    All constants are class attributes with full metadata including
    uncertainty bounds and authoritative sources.

    Plane Rectangular (JGD2011 / GRS80)
    -----------------------------------
    The Japan Plane Rectangular system is defined on the GRS80 ellipsoid
    realised by Japan Geodetic Datum 2011.

    Geocentric (WGS84)
    ------------------
    Earth-centred Cartesian coordinates are expressed on WGS84.

    Web Mercator
    ------------
    Spherical pseudo-Mercator tiling used by slippy-map tile servers.
    """

    # =========================================================================
    # GRS80 Ellipsoid (JGD2011)
    # Reference: GSI, Survey Act Enforcement Order
    # =========================================================================

    GRS80_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="GRS80, IUGG 1979",
        description="Semi-major axis (equatorial radius) of GRS80 ellipsoid"
    )

    GRS80_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257222101,
        uncertainty=0.0,  # Derived from defining constants, fixed by law
        unit="dimensionless",
        source="GRS80, IUGG 1979",
        description="Inverse flattening F = 1/f of GRS80 ellipsoid"
    )

    JPR_SCALE_FACTOR: Final[Constant] = Constant(
        value=0.9999,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="MLIT Notification No. 9 (2002)",
        description="Scale factor M0 on the central meridian of each plane rectangular zone"
    )

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    # =========================================================================
    # Web Mercator Tiling
    # =========================================================================

    WEB_MERCATOR_MAX_LATITUDE: Final[Constant] = Constant(
        value=85.05112878,
        uncertainty=1e-8,
        unit="degree",
        source="EPSG:3857, atan(sinh(pi))",
        description="Latitude at which the square Web Mercator world is clipped"
    )

    TILE_SIZE: Final[Constant] = Constant(
        value=256,
        uncertainty=0.0,
        unit="pixel",
        source="OSM slippy map convention",
        description="Edge length of a map tile"
    )

    EQUATOR_PIXEL_RESOLUTION: Final[Constant] = Constant(
        value=156543.04,
        uncertainty=0.01,
        unit="m/pixel",
        source="Equatorial circumference / 256",
        description="Ground distance of one pixel on the equator at zoom level 0"
    )

    # =========================================================================
    # Geocentric Latitude Solver
    # =========================================================================

    GEOCENTRIC_TOLERANCE: Final[Constant] = Constant(
        value=1e-12,
        uncertainty=0.0,
        unit="rad",
        source="Convergence criterion",
        description="Latitude change below which the fixed-point iteration stops"
    )

    GEOCENTRIC_MAX_ITERATIONS: Final[int] = 10


def _frozen(values) -> NDArray[np.float64]:
    array = np.array(values, dtype=np.float64)
    array.setflags(write=False)
    return array


class KrugerSeries:
    """Truncated Krüger series coefficients for the GRS80 ellipsoid.

    The coefficients are expansions in the third flattening
    n = 1 / (2F - 1) truncated at n^5 (A, ALPHA, BETA) or n^6 (DELTA).
    They are hard-coded so that the projection is bit-for-bit reproducible;
    recomputing them with a different truncation order gives differences
    above 1e-12.

    Attributes
    ----------
    N : float
        Third flattening of GRS80.
    A0 : float
        Leading coefficient of the meridian arc series.
    A_ARR : ndarray, shape (5,)
        Meridian arc sine-series coefficients.
    ALPHA_ARR : ndarray, shape (5,)
        Forward (conformal -> projected) double-angle coefficients.
    BETA_ARR : ndarray, shape (5,)
        Inverse (projected -> conformal) double-angle coefficients.
    DELTA_ARR : ndarray, shape (6,)
        Conformal latitude -> geodetic latitude sine-series coefficients.

    Notes
    -----
    A0     = 1 + n²/4 + n⁴/64
    A_1    = -(3/2)(n - n³/8 - n⁵/64)
    ALPHA_1 = n/2 - 2n²/3 + 5n³/16 + 41n⁴/180 - 127n⁵/288
    BETA_1 = n/2 - 2n²/3 + 37n³/96 - n⁴/360 - 81n⁵/512
    DELTA_1 = 2n - 2n²/3 - 2n³ + 116n⁴/45 + 26n⁵/45 - 2854n⁶/675
    """

    N: Final[float] = 1.0 / (2.0 * GeodeticConstants.GRS80_INVERSE_FLATTENING.value - 1.0)

    A0: Final[float] = 1.0000007049454078

    A_ARR: Final[NDArray[np.float64]] = _frozen([
        -0.0025188297041239312,
        2.6435429493240994e-6,
        -3.4526259073074147e-9,
        4.891830424387949e-12,
        -7.228726045813916e-15,
    ])

    ALPHA_ARR: Final[NDArray[np.float64]] = _frozen([
        0.0008377318247285465,
        7.6085278483792483e-7,
        1.1976455002315586e-9,
        2.4291502606542472e-12,
        5.7501643840919741e-15,
    ])

    BETA_ARR: Final[NDArray[np.float64]] = _frozen([
        0.0008377321681620316,
        5.905870211016955e-8,
        1.6734826761541112e-10,
        2.1648237311010893e-13,
        3.79409187887551e-16,
    ])

    DELTA_ARR: Final[NDArray[np.float64]] = _frozen([
        0.003356551485604312,
        6.571873263127177e-6,
        1.7646404372866207e-8,
        5.3877538900094696e-11,
        1.7640075159133883e-13,
        6.056074055207582e-16,
    ])
