"""
Angle Units for Coordinate Transformations.

This module provides a centralized unit system using the `pint` library so
that angles declared in degrees, arc-minutes or arc-seconds are converted to
radians in exactly one place. Transformation code works in radians only.

Example Usage
-------------
>>> from common.units import to_radians
>>> to_radians(7770, 'arcminute')
2.260201381...
"""

from typing import Union

import numpy as np
import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

ANGLE_UNITS = ("radian", "degree", "arcminute", "arcsecond")


def _angle(value: Union[float, pint.Quantity], unit: str) -> pint.Quantity:
    if isinstance(value, pint.Quantity):
        quantity = value
    else:
        quantity = Q_(value, unit)
    if quantity.dimensionality != ureg.radian.dimensionality:
        raise ValueError(
            f"Expected an angle, got {quantity.units} "
            f"with dimensionality {quantity.dimensionality}"
        )
    return quantity


def to_radians(value: Union[float, pint.Quantity], unit: str = "degree") -> float:
    """Convert an angle to radians.

    Parameters
    ----------
    value : float or pint.Quantity
        The angle. A bare number is interpreted in `unit`.
    unit : str
        One of 'radian', 'degree', 'arcminute', 'arcsecond'.

    Returns
    -------
    float
        The angle in radians.

    Raises
    ------
    ValueError
        If the unit is not an angle.
    """
    try:
        return float(_angle(value, unit).to(ureg.radian).magnitude)
    except pint.DimensionalityError as e:
        raise ValueError(f"Cannot convert {value!r} {unit} to radians") from e


def from_radians(value: float, unit: str = "degree") -> float:
    """Convert an angle in radians to `unit`."""
    try:
        return float(Q_(value, ureg.radian).to(unit).magnitude)
    except pint.DimensionalityError as e:
        raise ValueError(f"Cannot convert radians to {unit}") from e


def dms_to_radians(degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> float:
    """Convert a degree/minute/second triple to radians.

    The sign of `degrees` applies to the whole angle.
    """
    sign = -1.0 if np.signbit(degrees) else 1.0
    total = (
        Q_(abs(degrees), ureg.degree)
        + Q_(minutes, ureg.arcminute)
        + Q_(seconds, ureg.arcsecond)
    )
    return sign * float(total.to(ureg.radian).magnitude)
