"""
Closed Identifier Sets: Plane Rectangular Origins and Zoom Levels.

The numeric transformations are parameterized by one of 19 plane
rectangular origins or one of 25 zoom levels. Both are closed sets, so they
are modelled as enumerations with a single `parse` entry point that turns a
raw integer or string into a validated member. Nothing downstream indexes a
table with an unchecked integer.

Origin Table
------------
Origin latitudes are tabulated in arc-seconds and origin longitudes in
arc-minutes, as published in MLIT Notification No. 9 (2002). They are
converted to radians once at import.
"""

from enum import IntEnum
from numbers import Integral
from typing import Dict, Tuple, Union

from common.exceptions import InvalidCoordinateSystemError
from common.logging_config import get_logger
from common.units import to_radians

logger = get_logger(__name__)


def _parse_member(enum_cls, kind: str, value: Union[int, str]):
    if isinstance(value, enum_cls):
        return value

    candidate = value
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("+-").isdecimal():
            candidate = int(text)
        else:
            try:
                return enum_cls[text.upper()]
            except KeyError:
                candidate = None
    elif isinstance(value, bool) or not isinstance(value, Integral):
        candidate = None
    else:
        candidate = int(value)

    if candidate is not None:
        try:
            return enum_cls(candidate)
        except ValueError:
            pass

    lo, hi = min(enum_cls), max(enum_cls)
    logger.warning(f"Rejected {kind} identifier {value!r}")
    raise InvalidCoordinateSystemError(
        kind,
        value,
        f"Invalid {kind} {value!r}: expected an integer in [{int(lo)}, {int(hi)}]"
    )


class JprOrigin(IntEnum):
    """Origin of the Japan Plane Rectangular Coordinate System (zones I-XIX).

    Examples
    --------
    >>> JprOrigin.parse("9") is JprOrigin.IX
    True
    >>> JprOrigin.IX.epsg_code
    6677
    """
    I = 1
    II = 2
    III = 3
    IV = 4
    V = 5
    VI = 6
    VII = 7
    VIII = 8
    IX = 9
    X = 10
    XI = 11
    XII = 12
    XIII = 13
    XIV = 14
    XV = 15
    XVI = 16
    XVII = 17
    XVIII = 18
    XIX = 19

    @classmethod
    def parse(cls, value: Union[int, str]) -> "JprOrigin":
        """Validate a raw origin identifier.

        Parameters
        ----------
        value : int or str
            An integer in [1, 19], its decimal string, or the Roman numeral
            zone name (case-insensitive).

        Returns
        -------
        JprOrigin

        Raises
        ------
        InvalidCoordinateSystemError
            If the value does not name one of the 19 origins.
        """
        return _parse_member(cls, "origin", value)

    @property
    def latitude(self) -> float:
        """Origin latitude φ0 in radians."""
        return _ORIGIN_RADIANS[self][1]

    @property
    def longitude(self) -> float:
        """Origin (central meridian) longitude λ0 in radians."""
        return _ORIGIN_RADIANS[self][0]

    @property
    def epsg_code(self) -> int:
        """EPSG code of 'JGD2011 / Japan Plane Rectangular CS <zone>'."""
        return 6668 + int(self)


# (latitude in arc-seconds, longitude in arc-minutes)
_ORIGIN_TABLE: Dict[JprOrigin, Tuple[int, int]] = {
    JprOrigin.I: (118800, 7770),
    JprOrigin.II: (118800, 7860),
    JprOrigin.III: (129600, 7930),
    JprOrigin.IV: (118800, 8010),
    JprOrigin.V: (129600, 8060),
    JprOrigin.VI: (129600, 8160),
    JprOrigin.VII: (129600, 8230),
    JprOrigin.VIII: (129600, 8310),
    JprOrigin.IX: (129600, 8390),
    JprOrigin.X: (144000, 8450),
    JprOrigin.XI: (158400, 8415),
    JprOrigin.XII: (158400, 8535),
    JprOrigin.XIII: (158400, 8655),
    JprOrigin.XIV: (93600, 8520),
    JprOrigin.XV: (93600, 7650),
    JprOrigin.XVI: (93600, 7440),
    JprOrigin.XVII: (93600, 7860),
    JprOrigin.XVIII: (72000, 8160),
    JprOrigin.XIX: (93600, 9240),
}

# (longitude, latitude) in radians
_ORIGIN_RADIANS: Dict[JprOrigin, Tuple[float, float]] = {
    origin: (to_radians(lon_min, "arcminute"), to_radians(lat_sec, "arcsecond"))
    for origin, (lat_sec, lon_min) in _ORIGIN_TABLE.items()
}


class ZoomLevel(IntEnum):
    """Slippy-map zoom level.

    The maximum is 24: beyond it tile pixel coordinates no longer fit in an
    unsigned 32-bit integer (see mapbox/geojson-vt#87).
    """
    LV0 = 0
    LV1 = 1
    LV2 = 2
    LV3 = 3
    LV4 = 4
    LV5 = 5
    LV6 = 6
    LV7 = 7
    LV8 = 8
    LV9 = 9
    LV10 = 10
    LV11 = 11
    LV12 = 12
    LV13 = 13
    LV14 = 14
    LV15 = 15
    LV16 = 16
    LV17 = 17
    LV18 = 18
    LV19 = 19
    LV20 = 20
    LV21 = 21
    LV22 = 22
    LV23 = 23
    LV24 = 24

    @classmethod
    def parse(cls, value: Union[int, str]) -> "ZoomLevel":
        """Validate a raw zoom level (integer in [0, 24] or its string form)."""
        return _parse_member(cls, "zoom", value)

    @property
    def scale(self) -> float:
        """Half the world width in pixels, 2^(zoom+7)."""
        return 2.0 ** (int(self) + 7)
