"""
Common utilities and infrastructure for the coordinate transformation system.

This package provides foundational components used across all modules:
- Geodetic constants and truncated series coefficients
- Angle unit conversion
- Error taxonomy
- Logging infrastructure
"""

from common.constants import GeodeticConstants, KrugerSeries
from common.units import to_radians, from_radians, dms_to_radians
from common.exceptions import (
    CoordinateTransformError,
    InvalidCoordinateSystemError,
    ConvergenceError,
)
from common.logging_config import get_logger, set_log_level

__all__ = [
    "GeodeticConstants",
    "KrugerSeries",
    "to_radians",
    "from_radians",
    "dms_to_radians",
    "CoordinateTransformError",
    "InvalidCoordinateSystemError",
    "ConvergenceError",
    "get_logger",
    "set_log_level",
]
