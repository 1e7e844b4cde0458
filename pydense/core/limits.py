"""
Size limits for dense containers.

Every container kind has a fixed upper bound on its size. Vectors are
bounded by element count, matrices by side length, so the largest matrix
holds MAX_MATRIX_SIZE**2 elements spread over MAX_MATRIX_SIZE row vectors.

Used by the constructors, the validators and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SizeLimits:
    """Inclusive size bounds for one container kind."""
    min_size: int
    max_size: int
    name: str

    def admits(self, size: int) -> bool:
        """True if ``size`` is a legal size for this container kind."""
        return self.min_size <= size <= self.max_size


MAX_VECTOR_SIZE = 100_000_000

MAX_MATRIX_SIZE = 10_000

# Vector: element count
VECTOR_LIMITS = SizeLimits(
    min_size=1,
    max_size=MAX_VECTOR_SIZE,
    name='vector',
)

# Matrix: side length of a square matrix
MATRIX_LIMITS = SizeLimits(
    min_size=1,
    max_size=MAX_MATRIX_SIZE,
    name='matrix',
)
