"""
Core infrastructure for PyDense.

This module provides the error policy shared by the vector and matrix
containers.

Key components:
    exceptions: Exception hierarchy
    limits: Container size limits
    validation: Input validators
    precision: Tolerances for floating-point comparison
"""

from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    InvalidSizeError,
    IndexOutOfRangeError,
    DimensionMismatchError,
)
from pydense.core.limits import (
    MAX_VECTOR_SIZE,
    MAX_MATRIX_SIZE,
    SizeLimits,
    VECTOR_LIMITS,
    MATRIX_LIMITS,
)

__all__ = [
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "InvalidSizeError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    # Limits
    "MAX_VECTOR_SIZE",
    "MAX_MATRIX_SIZE",
    "SizeLimits",
    "VECTOR_LIMITS",
    "MATRIX_LIMITS",
]
