"""
Tests for the ascending-order accumulation kernels.

Each kernel must agree with the plain scalar loop, term for term, on
floating-point data (not just to within tolerance).
"""

import numpy as np

from pydense.containers._accumulate import (
    dot_ascending,
    matmul_ascending,
    matvec_ascending,
)


def scalar_dot(a, b):
    acc = a.dtype.type(0) * b.dtype.type(0)
    for k in range(a.shape[0]):
        acc = acc + a[k] * b[k]
    return acc


class TestDotAscending:

    def test_integer(self):
        assert dot_ascending(np.array([2, 4, 6]), np.array([3, 5, 7])) == 68

    def test_bitwise_equal_to_scalar_loop(self, rng):
        a = rng.standard_normal(1000) * 1e8
        b = rng.standard_normal(1000)
        assert dot_ascending(a, b) == scalar_dot(a, b)

    def test_single_element(self):
        assert dot_ascending(np.array([3.0]), np.array([-2.0])) == -6.0

    def test_keeps_narrow_integer_dtype(self):
        a = np.array([1, 2], dtype=np.int32)
        assert dot_ascending(a, a).dtype == np.int32

    def test_complex(self):
        a = np.array([1 + 1j, 2])
        b = np.array([1 - 1j, 1j])
        assert dot_ascending(a, b) == 2 + 2j


class TestMatvecAscending:

    def test_bitwise_equal_to_row_dots(self, rng):
        A = rng.standard_normal((20, 20)) * 1e6
        v = rng.standard_normal(20)
        result = matvec_ascending(A, v)
        for i in range(20):
            assert result[i] == scalar_dot(A[i], v)

    def test_integer(self):
        A = np.array([[1, 2], [3, 4]])
        np.testing.assert_array_equal(matvec_ascending(A, np.array([1, 0])), [1, 3])


class TestMatmulAscending:

    def test_bitwise_equal_to_scalar_loop(self, rng):
        A = rng.standard_normal((8, 8)) * 1e6
        B = rng.standard_normal((8, 8))
        result = matmul_ascending(A, B)
        for i in range(8):
            for j in range(8):
                assert result[i, j] == scalar_dot(A[i], B[:, j])

    def test_integer_matches_numpy(self, random_int_matrices):
        A, B = random_int_matrices
        np.testing.assert_array_equal(matmul_ascending(A, B), A @ B)

    def test_promotes_mixed_dtypes(self):
        A = np.eye(2, dtype=np.int64)
        B = np.full((2, 2), 0.5)
        assert matmul_ascending(A, B).dtype == np.float64
