"""
Coordinate Transformations for Japanese Cartography and Web Mapping.

This module provides:
- Japan Plane Rectangular system (19 zones) <-> geographic
- Web Mercator pixel / tile coordinates <-> geographic
- WGS84 geocentric Cartesian <-> geographic with height
- Validated origin and zoom identifiers
- Composite value types chaining the above through geographic coordinates

All angles are in radians and all lengths in meters.
"""

from coordinates.systems import JprOrigin, ZoomLevel

from coordinates.plane_rectangular import (
    PlaneRectangularProjection,
    geographic_to_plane_rectangular,
    plane_rectangular_to_geographic,
)

from coordinates.web_mercator import (
    geographic_to_pixel,
    pixel_to_geographic,
    pixel_resolution,
    pixel_to_tile,
)

from coordinates.geocentric import (
    WGS84Ellipsoid,
    geographic_to_geocentric,
    geocentric_to_geographic,
    geographic_to_geocentric_batch,
    geocentric_to_geographic_batch,
)

from coordinates.points import (
    Geographic,
    PlaneRectangular,
    Pixel,
    Tile,
    Voxel,
    Geocentric,
)

__all__ = [
    # Identifiers
    "JprOrigin",
    "ZoomLevel",
    # Plane rectangular
    "PlaneRectangularProjection",
    "geographic_to_plane_rectangular",
    "plane_rectangular_to_geographic",
    # Web Mercator
    "geographic_to_pixel",
    "pixel_to_geographic",
    "pixel_resolution",
    "pixel_to_tile",
    # Geocentric
    "WGS84Ellipsoid",
    "geographic_to_geocentric",
    "geocentric_to_geographic",
    "geographic_to_geocentric_batch",
    "geocentric_to_geographic_batch",
    # Value types
    "Geographic",
    "PlaneRectangular",
    "Pixel",
    "Tile",
    "Voxel",
    "Geocentric",
]
