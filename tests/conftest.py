"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydense import DynamicMatrix, DynamicVector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_vector():
    """Integer vector [3, 6, 9, 12, 15, 18]."""
    return DynamicVector.from_buffer([3, 6, 9, 12, 15, 18], dtype=np.int64)


@pytest.fixture
def int_matrix():
    """4x4 integer matrix with entries 5, 10, ..., 80 row-major."""
    return DynamicMatrix.from_rows(
        np.arange(5, 85, 5, dtype=np.int64).reshape(4, 4)
    )


@pytest.fixture
def random_int_matrices(rng):
    """Pair of 5x5 integer matrices with small entries (exact arithmetic)."""
    A = rng.integers(-9, 10, size=(5, 5))
    B = rng.integers(-9, 10, size=(5, 5))
    return A, B
