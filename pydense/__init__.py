"""
PyDense: dense vector and matrix containers for Python.

Value-semantics containers over numpy storage with bounds-checked access,
strict size validation and reproducible, ascending-order products.

Submodules:
    containers: DynamicVector and DynamicMatrix
    core: Exceptions, size limits, validators, tolerances
"""

__version__ = "0.1.0"

from pydense.containers import DynamicVector, DynamicMatrix, TokenReader
from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    InvalidSizeError,
    IndexOutOfRangeError,
    DimensionMismatchError,
)
from pydense.core.limits import MAX_VECTOR_SIZE, MAX_MATRIX_SIZE

__all__ = [
    "__version__",
    "DynamicVector",
    "DynamicMatrix",
    "TokenReader",
    "PyDenseError",
    "ValidationError",
    "InvalidSizeError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "MAX_VECTOR_SIZE",
    "MAX_MATRIX_SIZE",
]
