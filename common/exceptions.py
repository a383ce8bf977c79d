"""Exceptions raised by the coordinate transformation system."""

from typing import Any


class CoordinateTransformError(Exception):
    """Base class for all errors raised by this package."""


class InvalidCoordinateSystemError(CoordinateTransformError, ValueError):
    """An origin or zoom identifier is outside its closed range.

    Attributes
    ----------
    kind : str
        Which identifier was rejected ('origin' or 'zoom').
    value : Any
        The rejected raw value.
    """

    def __init__(self, kind: str, value: Any, message: str):
        super().__init__(message)
        self.kind = kind
        self.value = value


class ConvergenceError(CoordinateTransformError, RuntimeError):
    """An iterative solver exhausted its iteration bound.

    Attributes
    ----------
    iterations : int
        Number of iterations performed.
    residual : float
        Magnitude of the last update.
    """

    def __init__(self, iterations: int, residual: float):
        super().__init__(
            f"Latitude iteration did not converge after {iterations} iterations "
            f"(last update {residual:.3e} rad)"
        )
        self.iterations = iterations
        self.residual = residual
