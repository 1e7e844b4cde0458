"""
Input validation utilities for PyDense.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No resizing, truncation or padding to make operands fit
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator
import warnings

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pydense.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidSizeError,
    ValidationError,
)
from pydense.core.limits import SizeLimits


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (Python or NumPy) and return it as int.

    Booleans are rejected even though they subclass int.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from e


def check_size(size: Any, limits: SizeLimits, name: str = "size") -> int:
    """
    Verify a requested container size lies within the limits.

    Args:
        size: Requested size
        limits: Bounds for the container kind
        name: Parameter name for error messages

    Returns:
        The size as a Python int

    Raises:
        ValidationError: If size is not an integer
        InvalidSizeError: If size is outside [limits.min_size, limits.max_size]
    """
    size = check_integer(size, name)
    if not limits.admits(size):
        raise InvalidSizeError(
            f"{name}: {limits.name} size must be between {limits.min_size} "
            f"and {limits.max_size}, got {size}",
            size=size,
            limit=limits.max_size,
        )
    return size


def check_index(index: Any, size: int, name: str = "index") -> int:
    """
    Verify an index addresses an existing element.

    Negative indices are out of range; there is no counting from the end.

    Args:
        index: Index to check
        size: Current size of the container
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is not in [0, size)
    """
    index = check_integer(index, name)
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(
            f"{name}: {index} out of range for size {size}",
            index=index,
            size=size,
        )
    return index


def check_same_size(left: int, right: int, operation: str) -> None:
    """
    Verify the two operands of a binary operation have the same size.

    Args:
        left: Size of the left operand
        right: Size of the right operand
        operation: Operation name for error messages (e.g. 'addition')

    Raises:
        DimensionMismatchError: If sizes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"Operands must be same size for {operation}, got {left} and {right}",
            left=left,
            right=right,
            operation=operation,
        )


def check_dtype(dtype: DTypeLike, name: str = "dtype") -> np.dtype:
    """
    Verify dtype is a numeric element type.

    Integer, unsigned, floating and complex dtypes are accepted. Booleans,
    strings, datetimes and object dtype are not.

    Args:
        dtype: Anything np.dtype() accepts
        name: Parameter name for error messages

    Returns:
        The normalised np.dtype

    Raises:
        ValidationError: If dtype is not understood or not numeric
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a valid dtype: {e}") from e

    if not np.issubdtype(result, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result}, expected numeric element type"
        )
    return result


def is_numeric_scalar(value: Any) -> bool:
    """
    True if value is a number that maps onto a NumPy numeric dtype.

    Python and NumPy ints, floats and complex numbers qualify. Booleans and
    numbers NumPy can only hold as objects (Decimal, Fraction) do not, so
    arithmetic never produces a container of non-numeric dtype.
    """
    if not isinstance(value, numbers.Number) or isinstance(value, bool):
        return False
    return bool(np.issubdtype(np.asarray(value).dtype, np.number))


def check_array(
    array: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    The result is always a fresh copy, never a view of the caller's data.
    When dtype is given and the conversion to an integer dtype drops a
    fractional part, a RuntimeWarning is issued.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target element type, or None to keep the inferred one

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types, "
            f"ragged nesting or non-numeric data"
        )

    if result.dtype == np.bool_:
        result = result.astype(np.int64)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if dtype is None:
        return result

    target = check_dtype(dtype)
    if np.issubdtype(target, np.integer) and np.issubdtype(result.dtype, np.inexact):
        if np.any(result != np.trunc(result)):
            warnings.warn(
                f"{name}: casting {result.dtype} to {target} discards fractional parts",
                RuntimeWarning,
                stacklevel=3,
            )
    return result.astype(target)


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ValidationError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array is square.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If the number of rows and columns differ
    """
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise DimensionMismatchError(
            f"{name}: matrix must be square, got shape {array.shape}",
            left=n_rows,
            right=n_cols,
            operation="construction",
        )
