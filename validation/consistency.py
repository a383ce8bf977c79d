"""
Numeric Consistency Checks for Coordinate Transformations.

This module provides checks that the transformations are self-consistent
and agree with an independent implementation.

Check Categories
----------------
1. Round trips (forward then inverse recovers the input)
2. Reference agreement (plane rectangular results match PROJ)
3. Truncation bounds (pixel round trips stay within one pixel)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import numpy as np
from numpy.typing import NDArray

from common.logging_config import get_logger
from coordinates.geocentric import (
    geocentric_to_geographic_batch,
    geographic_to_geocentric_batch,
)
from coordinates.plane_rectangular import PlaneRectangularProjection
from coordinates.systems import JprOrigin, ZoomLevel
from coordinates.web_mercator import geographic_to_pixel, pixel_to_geographic

logger = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the check.
    passed : bool
        Whether the check passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class TransformConsistencyChecker:
    """Checker for numeric consistency of the coordinate transformations.

    Each check takes arrays of geographic points (radians) and returns a
    `ValidationResult` with the worst error observed.
    """

    def __init__(self, strict_mode: bool = False):
        """Initialize checker.

        Parameters
        ----------
        strict_mode : bool
            If True, raise AssertionError on a failing check.
        """
        self.strict_mode = strict_mode
        self._logger = get_logger("TransformConsistencyChecker")

    def _report(self, result: ValidationResult) -> ValidationResult:
        if result.passed:
            self._logger.debug(f"CHECK | {result.test_name} | PASS | {result.message}")
        else:
            self._logger.warning(f"CHECK | {result.test_name} | FAIL | {result.message}")
            if self.strict_mode:
                raise AssertionError(f"{result.test_name}: {result.message}")
        return result

    def check_plane_rectangular_round_trip(
        self,
        longitudes_rad: NDArray[np.float64],
        latitudes_rad: NDArray[np.float64],
        origin: JprOrigin,
        tolerance_deg: float = 1e-4
    ) -> ValidationResult:
        """Geographic -> plane rectangular -> geographic recovers the input."""
        projection = PlaneRectangularProjection(origin)

        errors = []
        for lon, lat in zip(longitudes_rad, latitudes_rad):
            y, x = projection.to_projected(lon, lat)
            lon2, lat2 = projection.to_geographic(y, x)
            errors.append(max(abs(lon2 - lon), abs(lat2 - lat)))

        max_error_deg = float(np.degrees(np.max(errors)))

        return self._report(ValidationResult(
            test_name="plane_rectangular_round_trip",
            passed=max_error_deg < tolerance_deg,
            message=f"Zone {origin.name}: max error {max_error_deg:.3e} deg",
            details={
                'origin': int(origin),
                'num_points': len(errors),
                'max_error_deg': max_error_deg,
                'tolerance_deg': tolerance_deg,
            }
        ))

    def check_plane_rectangular_reference(
        self,
        longitudes_rad: NDArray[np.float64],
        latitudes_rad: NDArray[np.float64],
        origin: JprOrigin,
        tolerance_m: float = 1e-3
    ) -> ValidationResult:
        """Projected coordinates agree with PROJ for the zone's EPSG code."""
        projection = PlaneRectangularProjection(origin)
        to_proj, _ = projection.reference_transformer()

        ref_y, ref_x = to_proj.transform(
            np.degrees(longitudes_rad), np.degrees(latitudes_rad)
        )
        ref_y = np.atleast_1d(ref_y)
        ref_x = np.atleast_1d(ref_x)

        errors = []
        for lon, lat, ry, rx in zip(longitudes_rad, latitudes_rad, ref_y, ref_x):
            y, x = projection.to_projected(lon, lat)
            errors.append(np.hypot(y - ry, x - rx))

        max_error_m = float(np.max(errors))

        return self._report(ValidationResult(
            test_name="plane_rectangular_reference",
            passed=max_error_m < tolerance_m,
            message=f"EPSG:{projection.epsg_code}: max deviation {max_error_m:.3e} m",
            details={
                'epsg_code': projection.epsg_code,
                'num_points': len(errors),
                'max_error_m': max_error_m,
                'tolerance_m': tolerance_m,
            }
        ))

    def check_geocentric_round_trip(
        self,
        longitudes_rad: NDArray[np.float64],
        latitudes_rad: NDArray[np.float64],
        altitudes_m: NDArray[np.float64],
        angle_tolerance_rad: float = 1e-9,
        altitude_tolerance_m: float = 1e-6
    ) -> ValidationResult:
        """Geographic -> geocentric -> geographic recovers the input."""
        x, y, z = geographic_to_geocentric_batch(longitudes_rad, latitudes_rad, altitudes_m)
        lon2, lat2, alt2, iterations = geocentric_to_geographic_batch(x, y, z)

        d_lon = np.abs(np.arctan2(np.sin(lon2 - longitudes_rad), np.cos(lon2 - longitudes_rad)))
        max_angle = float(max(np.max(d_lon), np.max(np.abs(lat2 - latitudes_rad))))
        max_alt = float(np.max(np.abs(alt2 - altitudes_m)))

        return self._report(ValidationResult(
            test_name="geocentric_round_trip",
            passed=max_angle < angle_tolerance_rad and max_alt < altitude_tolerance_m,
            message=(
                f"max angle error {max_angle:.3e} rad, "
                f"max altitude error {max_alt:.3e} m, {iterations} iterations"
            ),
            details={
                'num_points': int(np.size(x)),
                'max_angle_error_rad': max_angle,
                'max_altitude_error_m': max_alt,
                'iterations': iterations,
            }
        ))

    def check_pixel_round_trip(
        self,
        longitudes_rad: NDArray[np.float64],
        latitudes_rad: NDArray[np.float64],
        zoom: ZoomLevel
    ) -> ValidationResult:
        """Pixel truncation loses less than one pixel.

        The recovered corner must lie north-west of the input and the next
        pixel's corner south-east of it.
        """
        violations = 0
        for lon, lat in zip(longitudes_rad, latitudes_rad):
            px, py = geographic_to_pixel(lon, lat, zoom)
            west, north = pixel_to_geographic(px, py, zoom)
            east, south = pixel_to_geographic(px + 1, py + 1, zoom)
            if not (west <= lon < east and south < lat <= north):
                violations += 1

        return self._report(ValidationResult(
            test_name="pixel_round_trip",
            passed=violations == 0,
            message=f"Zoom {int(zoom)}: {violations} points outside their pixel",
            details={
                'zoom': int(zoom),
                'num_points': len(longitudes_rad),
                'num_violations': violations,
            }
        ))

    def check_all(
        self,
        longitudes_rad: NDArray[np.float64],
        latitudes_rad: NDArray[np.float64],
        origin: JprOrigin,
        zoom: ZoomLevel = ZoomLevel.LV18,
        altitudes_m: Optional[NDArray[np.float64]] = None
    ) -> List[ValidationResult]:
        """Run all checks on one set of points.

        Parameters
        ----------
        longitudes_rad, latitudes_rad : ndarray
            Points inside the zone of `origin`.
        origin : JprOrigin
            Plane rectangular zone to check.
        zoom : ZoomLevel
            Zoom level for the pixel check.
        altitudes_m : ndarray, optional
            Heights for the geocentric check (default: zero).

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        longitudes_rad = np.asarray(longitudes_rad, dtype=np.float64)
        latitudes_rad = np.asarray(latitudes_rad, dtype=np.float64)
        if altitudes_m is None:
            altitudes_m = np.zeros_like(latitudes_rad)

        results = []

        # 1. Plane rectangular round trip
        results.append(self.check_plane_rectangular_round_trip(
            longitudes_rad, latitudes_rad, origin
        ))

        # 2. Agreement with PROJ
        results.append(self.check_plane_rectangular_reference(
            longitudes_rad, latitudes_rad, origin
        ))

        # 3. Geocentric round trip
        results.append(self.check_geocentric_round_trip(
            longitudes_rad, latitudes_rad, np.asarray(altitudes_m, dtype=np.float64)
        ))

        # 4. Pixel truncation
        results.append(self.check_pixel_round_trip(longitudes_rad, latitudes_rad, zoom))

        return results
