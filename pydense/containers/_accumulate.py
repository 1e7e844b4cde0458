"""
Ascending-order accumulation kernels.

Products are summed starting from the element type's zero, one term at a
time in ascending index order. Floating-point addition is not associative,
so this fixed order is what makes results reproducible across platforms;
np.dot, np.sum and BLAS use pairwise or blocked summation and are avoided
here on purpose.

Each kernel vectorises across the output entries and loops only over the
summation index, so every output entry sees the same sequence of additions
as the scalar loop

    acc = 0
    for k in range(n):
        acc += a[k] * b[k]
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def dot_ascending(a: NDArray[Any], b: NDArray[Any]) -> Any:
    """
    Dot product of two 1D arrays of equal length.

    Args:
        a: Left operand, shape (n,)
        b: Right operand, shape (n,)

    Returns:
        NumPy scalar of the promoted element type.
    """
    dtype = np.result_type(a.dtype, b.dtype)
    terms = np.empty(a.shape[0] + 1, dtype=dtype)
    terms[0] = 0
    np.multiply(a, b, out=terms[1:])
    # accumulate is a running prefix sum, hence strictly sequential
    return np.add.accumulate(terms, dtype=dtype)[-1]


def matvec_ascending(A: NDArray[Any], v: NDArray[Any]) -> NDArray[Any]:
    """
    Matrix-vector product, entry i = sum over j of A[i, j] * v[j].

    Args:
        A: Square matrix, shape (n, n)
        v: Vector, shape (n,)

    Returns:
        Array of shape (n,) with the promoted element type.
    """
    n = A.shape[0]
    dtype = np.result_type(A.dtype, v.dtype)
    acc = np.zeros(n, dtype=dtype)
    for j in range(n):
        np.add(acc, A[:, j] * v[j], out=acc)
    return acc


def matmul_ascending(A: NDArray[Any], B: NDArray[Any]) -> NDArray[Any]:
    """
    Matrix-matrix product, entry (i, j) = sum over k of A[i, k] * B[k, j].

    Args:
        A: Left square matrix, shape (n, n)
        B: Right square matrix, shape (n, n)

    Returns:
        Array of shape (n, n) with the promoted element type.
    """
    n = A.shape[0]
    dtype = np.result_type(A.dtype, B.dtype)
    acc = np.zeros((n, n), dtype=dtype)
    for k in range(n):
        np.add(acc, np.multiply.outer(A[:, k], B[k, :]), out=acc)
    return acc
