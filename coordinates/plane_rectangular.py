"""
Japan Plane Rectangular Coordinate System (Gauss-Krüger Projection).

This module converts between geographic coordinates on the GRS80 ellipsoid
(JGD2011) and the 19 zones of the Japan Plane Rectangular system.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Transverse Mercator (Gauss-Krüger) via Krüger's n-series

Each zone is a conformal projection centred on its own origin with scale
factor M0 = 0.9999 on the central meridian, so scale distortion stays below
1e-4 within the zone. The projection is computed with series in the third
flattening n truncated at order n^5 (n^6 for the latitude recovery), which
is accurate to well under a millimetre inside Japan.

Axis Convention
---------------
Following Japanese surveying practice, X points north and Y points east.
Functions therefore return and accept (y, x) pairs.

Accuracy is only warranted inside the region each origin is intended to
cover. The functions perform no validation and never raise.

References
----------
- Kawase, K. (2011). Bulletin of the GSI, 59, 1-13.
- Krüger, L. (1912). Konforme Abbildung des Erdellipsoids in der Ebene.
"""

from typing import Tuple
import numpy as np

from pyproj import CRS, Transformer

from common.constants import GeodeticConstants, KrugerSeries
from coordinates.systems import JprOrigin

# EPSG:6668 is JGD2011 geographic 2D
JGD2011_GEOGRAPHIC_EPSG = 6668

_N = KrugerSeries.N
_M0 = GeodeticConstants.JPR_SCALE_FACTOR.value
_A = GeodeticConstants.GRS80_SEMI_MAJOR_AXIS.value

# Rectifying radius scaled by M0
_A_BAR = _M0 * _A * KrugerSeries.A0 / (1.0 + _N)

# Eccentricity expressed through n: e = 2√n / (1 + n)
_E = 2.0 * np.sqrt(_N) / (1.0 + _N)

_J5 = np.arange(1, 6)
_J6 = np.arange(1, 7)


def meridian_arc_offset(latitude_rad: float) -> float:
    """Scaled meridian arc length from the equator to a latitude.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians (normally an origin latitude φ0).

    Returns
    -------
    float
        S0 = M0·A/(1+n) · (A0·φ + Σ A_j sin 2jφ), in meters.
    """
    series = KrugerSeries.A0 * latitude_rad + np.sum(
        KrugerSeries.A_ARR * np.sin(2 * _J5 * latitude_rad)
    )
    return float((_M0 * _A) / (1.0 + _N) * series)


def geographic_to_plane_rectangular(
    longitude_rad: float,
    latitude_rad: float,
    origin: JprOrigin
) -> Tuple[float, float]:
    """Project geographic coordinates onto a plane rectangular zone.

    Parameters
    ----------
    longitude_rad, latitude_rad : float
        JGD2011 geographic coordinates in radians.
    origin : JprOrigin
        The zone origin.

    Returns
    -------
    Tuple[float, float]
        (y, x) in meters; y eastward, x northward of the origin.

    Examples
    --------
    >>> import numpy as np
    >>> y, x = geographic_to_plane_rectangular(
    ...     np.radians(140.08785504166664), np.radians(36.103774791666666), JprOrigin.IX
    ... )
    >>> round(y, 4), round(x, 4)
    (22916.2436, 11543.6883)
    """
    s0 = meridian_arc_offset(origin.latitude)

    # Isometric latitude substitution
    sin_lat = np.sin(latitude_rad)
    t = np.sinh(np.arctanh(sin_lat) - _E * np.arctanh(_E * sin_lat))
    t_bar = np.sqrt(1.0 + t * t)

    d_lon = longitude_rad - origin.longitude
    xi2 = np.arctan(t / np.cos(d_lon))
    eta2 = np.arctanh(np.sin(d_lon) / t_bar)

    alpha = KrugerSeries.ALPHA_ARR
    x = _A_BAR * (
        xi2 + np.sum(alpha * np.sin(2 * _J5 * xi2) * np.cosh(2 * _J5 * eta2))
    ) - s0
    y = _A_BAR * (
        eta2 + np.sum(alpha * np.cos(2 * _J5 * xi2) * np.sinh(2 * _J5 * eta2))
    )

    return float(y), float(x)


def plane_rectangular_to_geographic(
    y: float,
    x: float,
    origin: JprOrigin
) -> Tuple[float, float]:
    """Recover geographic coordinates from a plane rectangular position.

    Parameters
    ----------
    y, x : float
        Easting and northing in meters relative to the origin.
    origin : JprOrigin
        The zone origin.

    Returns
    -------
    Tuple[float, float]
        (longitude_rad, latitude_rad) on JGD2011.
    """
    s0 = meridian_arc_offset(origin.latitude)

    xi = (x + s0) / _A_BAR
    eta = y / _A_BAR

    beta = KrugerSeries.BETA_ARR
    xi2 = xi - np.sum(beta * np.sin(2 * _J5 * xi) * np.cosh(2 * _J5 * eta))
    eta2 = eta - np.sum(beta * np.cos(2 * _J5 * xi) * np.sinh(2 * _J5 * eta))

    # Conformal latitude
    chi = np.arcsin(np.sin(xi2) / np.cosh(eta2))

    latitude_rad = chi + np.sum(KrugerSeries.DELTA_ARR * np.sin(2 * _J6 * chi))
    longitude_rad = origin.longitude + np.arctan(np.sinh(eta2) / np.cos(xi2))

    return float(longitude_rad), float(latitude_rad)


class PlaneRectangularProjection:
    """A single zone of the Japan Plane Rectangular system.

    Parameters
    ----------
    origin : JprOrigin
        The zone origin.

    Notes
    -----
    `to_projected` and `to_geographic` are the in-house series
    implementation. `reference_transformer` exposes the equivalent PROJ
    pipeline for independent cross-checks; it is never used to compute
    results.
    """

    def __init__(self, origin: JprOrigin):
        self._origin = origin

    @property
    def origin(self) -> JprOrigin:
        return self._origin

    @property
    def name(self) -> str:
        return f"JGD2011 / Japan Plane Rectangular CS {self._origin.name}"

    @property
    def epsg_code(self) -> int:
        return self._origin.epsg_code

    def to_projected(self, longitude_rad: float, latitude_rad: float) -> Tuple[float, float]:
        return geographic_to_plane_rectangular(longitude_rad, latitude_rad, self._origin)

    def to_geographic(self, y: float, x: float) -> Tuple[float, float]:
        return plane_rectangular_to_geographic(y, x, self._origin)

    def reference_transformer(self) -> Tuple[Transformer, Transformer]:
        """Build PROJ transformers for this zone.

        Returns
        -------
        Tuple[Transformer, Transformer]
            (geographic -> projected, projected -> geographic). Both use
            (longitude, latitude) degrees and (y, x) meters, i.e.
            always_xy ordering.
        """
        crs_geo = CRS.from_epsg(JGD2011_GEOGRAPHIC_EPSG)
        crs_proj = CRS.from_epsg(self.epsg_code)
        to_proj = Transformer.from_crs(crs_geo, crs_proj, always_xy=True)
        to_geo = Transformer.from_crs(crs_proj, crs_geo, always_xy=True)
        return to_proj, to_geo

    def __repr__(self) -> str:
        return f"PlaneRectangularProjection(origin=JprOrigin.{self._origin.name})"
