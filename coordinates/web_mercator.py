"""
Web Mercator Pixel and Tile Coordinates.

Slippy-map tiling as used by most web map tile servers: the world between
±85.05112878° latitude is projected with spherical Mercator onto a square
of 256·2^zoom pixels, origin at the north-west corner, y increasing south.

Pixel coordinates are unsigned integers. Converting a geographic point to a
pixel truncates the sub-pixel part, so `pixel_to_geographic` returns the
north-west corner of the pixel rather than the input point.

Zoom levels are assumed already validated (see `ZoomLevel.parse`).
"""

from typing import Tuple
import numpy as np

from common.constants import GeodeticConstants
from coordinates.systems import ZoomLevel

TILE_SIZE = int(GeodeticConstants.TILE_SIZE.value)

_UINT32_MAX = float(np.iinfo(np.uint32).max)

# atanh(sin(L)) for the clipping latitude L
_Y_OFFSET = np.arctanh(
    np.sin(np.radians(GeodeticConstants.WEB_MERCATOR_MAX_LATITUDE.value))
)


def _to_pixel_index(value: float) -> int:
    # Saturating unsigned 32-bit truncation
    value = np.nan_to_num(value, nan=0.0, posinf=_UINT32_MAX, neginf=0.0)
    return int(np.clip(value, 0.0, _UINT32_MAX))


def geographic_to_pixel(
    longitude_rad: float,
    latitude_rad: float,
    zoom: ZoomLevel
) -> Tuple[int, int]:
    """Convert geographic coordinates to pixel coordinates.

    Parameters
    ----------
    longitude_rad, latitude_rad : float
        Geographic coordinates in radians.
    zoom : ZoomLevel
        Zoom level.

    Returns
    -------
    Tuple[int, int]
        (x, y) pixel coordinates, truncated toward zero.

    Examples
    --------
    >>> import numpy as np
    >>> geographic_to_pixel(np.radians(139.7649308), np.radians(35.6812405), ZoomLevel.LV21)
    (476868027, 211407949)
    """
    scale = zoom.scale
    x = scale * (longitude_rad / np.pi + 1.0)
    y = scale / np.pi * (-np.arctanh(np.sin(latitude_rad)) + _Y_OFFSET)
    return _to_pixel_index(x), _to_pixel_index(y)


def pixel_to_geographic(x: int, y: int, zoom: ZoomLevel) -> Tuple[float, float]:
    """Convert pixel coordinates to geographic coordinates.

    Parameters
    ----------
    x, y : int
        Pixel coordinates.
    zoom : ZoomLevel
        Zoom level.

    Returns
    -------
    Tuple[float, float]
        (longitude_rad, latitude_rad) of the pixel's north-west corner.
    """
    scale = zoom.scale
    longitude_rad = np.pi * (x / scale - 1.0)
    latitude_rad = np.arcsin(np.tanh(-np.pi * y / scale + _Y_OFFSET))
    return float(longitude_rad), float(latitude_rad)


def pixel_resolution(latitude_rad: float, zoom: ZoomLevel) -> float:
    """Ground distance covered by one pixel, in meters.

    Notes
    -----
    resolution = 156543.04 · cos(φ) / 2^zoom, where 156543.04 m is the
    equatorial circumference divided by 256.
    """
    base = GeodeticConstants.EQUATOR_PIXEL_RESOLUTION.value
    return float(base * np.cos(latitude_rad) / 2.0 ** int(zoom))


def pixel_to_tile(x: int, y: int) -> Tuple[int, int]:
    """Tile containing a pixel."""
    return x // TILE_SIZE, y // TILE_SIZE
