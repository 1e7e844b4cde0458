"""
Tolerance-based comparison used by the containers' isclose() methods.

Exact equality (==) stays the default container comparison; these
helpers exist for floating-point data.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any


# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14


def is_close(
    a: ArrayLike,
    b: ArrayLike,
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    a = np.asarray(a)
    b = np.asarray(b)
    # Unsigned subtraction wraps around
    if a.dtype.kind in 'biu':
        a = a.astype(np.float64)
    if b.dtype.kind in 'biu':
        b = b.astype(np.float64)
    return np.abs(a - b) <= atol + rtol * np.abs(b)


def all_close(
    a: NDArray[Any],
    b: NDArray[Any],
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL
) -> bool:
    """Elementwise is_close reduced to a single bool; shapes must already match."""
    return bool(np.all(is_close(a, b, rtol=rtol, atol=atol)))
