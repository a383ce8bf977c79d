"""
Coordinate Value Types.

Thin immutable wrappers over the numeric core. Every type converts to every
other through the geographic representation, which is the common
interchange type: e.g. a `Pixel` becomes a `PlaneRectangular` by first
becoming a `Geographic`.

Design Rationale
----------------
The transformation functions take and return plain tuples. These types add
the coordinate kind (and origin / zoom level where one is needed) so that a
value cannot be fed to the wrong inverse.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from coordinates.geocentric import geocentric_to_geographic, geographic_to_geocentric
from coordinates.plane_rectangular import (
    geographic_to_plane_rectangular,
    plane_rectangular_to_geographic,
)
from coordinates.systems import JprOrigin, ZoomLevel
from coordinates.web_mercator import (
    geographic_to_pixel,
    pixel_resolution,
    pixel_to_geographic,
    pixel_to_tile,
)


@dataclass(frozen=True)
class Geographic:
    """Longitude and latitude in RADIANS.

    Examples
    --------
    >>> tokyo = Geographic.from_degrees(139.7649308, 35.6812405)
    >>> tokyo.to_pixel(ZoomLevel.LV21).to_tuple()
    (476868027, 211407949)
    """
    longitude: float  # radians
    latitude: float  # radians

    @classmethod
    def from_degrees(cls, lon_deg: float, lat_deg: float) -> 'Geographic':
        return cls(longitude=float(np.radians(lon_deg)), latitude=float(np.radians(lat_deg)))

    def to_degrees(self) -> Tuple[float, float]:
        """(longitude_degrees, latitude_degrees) for display."""
        return float(np.degrees(self.longitude)), float(np.degrees(self.latitude))

    def to_tuple(self) -> Tuple[float, float]:
        return self.longitude, self.latitude

    def to_plane_rectangular(self, origin: JprOrigin) -> 'PlaneRectangular':
        y, x = geographic_to_plane_rectangular(self.longitude, self.latitude, origin)
        return PlaneRectangular(y=y, x=x, origin=origin)

    def to_pixel(self, zoom: ZoomLevel) -> 'Pixel':
        x, y = geographic_to_pixel(self.longitude, self.latitude, zoom)
        return Pixel(x=x, y=y, zoom=zoom)

    def to_geocentric(self, altitude_m: float) -> 'Geocentric':
        x, y, z = geographic_to_geocentric(self.longitude, self.latitude, altitude_m)
        return Geocentric(x=x, y=y, z=z)


@dataclass(frozen=True)
class PlaneRectangular:
    """Position in a Japan Plane Rectangular zone.

    Attributes
    ----------
    y : float
        Easting in METERS from the origin.
    x : float
        Northing in METERS from the origin.
    origin : JprOrigin
        Zone origin.
    """
    y: float
    x: float
    origin: JprOrigin

    def to_tuple(self) -> Tuple[float, float]:
        """(y, x)"""
        return self.y, self.x

    def to_geographic(self) -> Geographic:
        longitude, latitude = plane_rectangular_to_geographic(self.y, self.x, self.origin)
        return Geographic(longitude=longitude, latitude=latitude)

    def to_pixel(self, zoom: ZoomLevel) -> 'Pixel':
        return self.to_geographic().to_pixel(zoom)

    def to_geocentric(self, altitude_m: float) -> 'Geocentric':
        return self.to_geographic().to_geocentric(altitude_m)


@dataclass(frozen=True)
class Tile:
    """Map tile index at a zoom level."""
    x: int
    y: int
    zoom: ZoomLevel

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class Pixel:
    """Web Mercator pixel at a zoom level."""
    x: int
    y: int
    zoom: ZoomLevel

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    def to_tile(self) -> Tile:
        tile_x, tile_y = pixel_to_tile(self.x, self.y)
        return Tile(x=tile_x, y=tile_y, zoom=self.zoom)

    @property
    def resolution(self) -> float:
        """Ground size of this pixel in meters."""
        return pixel_resolution(self.to_geographic().latitude, self.zoom)

    def to_geographic(self) -> Geographic:
        longitude, latitude = pixel_to_geographic(self.x, self.y, self.zoom)
        return Geographic(longitude=longitude, latitude=latitude)

    def to_plane_rectangular(self, origin: JprOrigin) -> PlaneRectangular:
        return self.to_geographic().to_plane_rectangular(origin)

    def to_geocentric(self, altitude_m: float) -> 'Geocentric':
        return self.to_geographic().to_geocentric(altitude_m)


@dataclass(frozen=True)
class Voxel:
    """Pixel with a vertical index.

    The vertical cell size is `resolution` meters, normally chosen to match
    the pixel's ground resolution, so the altitude of the voxel is
    `z * resolution`.
    """
    x: int
    y: int
    z: int
    resolution: float  # meters per vertical step
    zoom: ZoomLevel

    @property
    def altitude(self) -> float:
        return self.z * self.resolution

    def to_tuple(self) -> Tuple[int, int, int]:
        return self.x, self.y, self.z

    def to_pixel(self) -> Pixel:
        return Pixel(x=self.x, y=self.y, zoom=self.zoom)

    def to_geographic(self) -> Geographic:
        return self.to_pixel().to_geographic()

    def to_geographic_with_altitude(self) -> Tuple[Geographic, float]:
        return self.to_geographic(), self.altitude

    def to_plane_rectangular(self, origin: JprOrigin) -> PlaneRectangular:
        return self.to_geographic().to_plane_rectangular(origin)

    def to_plane_rectangular_with_altitude(
        self, origin: JprOrigin
    ) -> Tuple[PlaneRectangular, float]:
        return self.to_plane_rectangular(origin), self.altitude

    def to_pixel_with_altitude(self) -> Tuple[Pixel, float]:
        return self.to_pixel(), self.altitude

    def to_geocentric(self) -> 'Geocentric':
        return self.to_geographic().to_geocentric(self.altitude)

    def to_geocentric_with_altitude(self) -> Tuple['Geocentric', float]:
        return self.to_geocentric(), self.altitude


@dataclass(frozen=True)
class Geocentric:
    """WGS84 Earth-centred Cartesian coordinates in METERS."""
    x: float
    y: float
    z: float

    def to_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def to_geographic_with_altitude(self) -> Tuple[Geographic, float]:
        (longitude, latitude), altitude = geocentric_to_geographic(self.x, self.y, self.z)
        return Geographic(longitude=longitude, latitude=latitude), altitude

    def to_geographic(self) -> Geographic:
        return self.to_geographic_with_altitude()[0]

    def to_plane_rectangular(self, origin: JprOrigin) -> PlaneRectangular:
        return self.to_geographic().to_plane_rectangular(origin)

    def to_plane_rectangular_with_altitude(
        self, origin: JprOrigin
    ) -> Tuple[PlaneRectangular, float]:
        geographic, altitude = self.to_geographic_with_altitude()
        return geographic.to_plane_rectangular(origin), altitude

    def to_pixel(self, zoom: ZoomLevel) -> Pixel:
        return self.to_geographic().to_pixel(zoom)

    def to_pixel_with_altitude(self, zoom: ZoomLevel) -> Tuple[Pixel, float]:
        geographic, altitude = self.to_geographic_with_altitude()
        return geographic.to_pixel(zoom), altitude
