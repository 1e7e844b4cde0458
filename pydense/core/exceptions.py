"""
Exception hierarchy for PyDense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error. Container failures fall into three kinds:
invalid sizes at construction, out-of-range checked access, and
operand size mismatches in binary arithmetic.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseError(Exception):
    """Base exception for all PyDense errors."""
    pass


class ValidationError(PyDenseError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: wrong
    argument types, non-numeric element types, malformed text input.
    """
    pass


class InvalidSizeError(ValidationError, ValueError):
    """
    Requested container size is zero, negative or above the limit.

    Raised synchronously at construction, before any storage is
    allocated, so no partially-built container is ever observable.

    Attributes:
        size: The rejected size
        limit: The maximum size allowed for the container kind
    """

    def __init__(
        self,
        message: str,
        size: int | None = None,
        limit: int | None = None
    ):
        super().__init__(message)
        self.size = size
        self.limit = limit


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Checked access with an index outside [0, size).

    Only the checked accessors raise this. Negative indices are
    treated as out of range rather than counted from the end.

    Attributes:
        index: The rejected index
        size: Size of the container that was accessed
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.size = size


class DimensionMismatchError(ValidationError):
    """
    Binary arithmetic invoked on operands of incompatible size.

    Raised by vector-vector add/subtract/dot, matrix-vector multiply
    and matrix-matrix add/subtract/multiply. Operands are never
    truncated or padded to fit.

    Attributes:
        left: Size of the left operand
        right: Size of the right operand
        operation: Name of the failed operation (e.g. 'addition')
    """

    def __init__(
        self,
        message: str,
        left: int | None = None,
        right: int | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.left = left
        self.right = right
        self.operation = operation
