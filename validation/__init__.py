"""
Validation Framework for Coordinate Transformations.

This module provides numeric consistency checks.
"""

from validation.consistency import (
    TransformConsistencyChecker,
    ValidationResult,
)

__all__ = [
    "TransformConsistencyChecker",
    "ValidationResult",
]
