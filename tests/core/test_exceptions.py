"""
Tests for PyDense exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyDenseError)
    - Builtin compatibility (InvalidSizeError is a ValueError,
      IndexOutOfRangeError is an IndexError)
    - Diagnostic attributes and their None defaults
"""

import pytest

from pydense.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidSizeError,
    PyDenseError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyDenseError."""

    def test_validation_error_is_pydense_error(self):
        with pytest.raises(PyDenseError):
            raise ValidationError("bad input")

    @pytest.mark.parametrize("exc_type", [
        InvalidSizeError,
        IndexOutOfRangeError,
        DimensionMismatchError,
    ])
    def test_container_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("failed")

    def test_invalid_size_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidSizeError("size 0")

    def test_index_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("index 5")

    def test_dimension_mismatch_is_not_value_error(self):
        err = DimensionMismatchError("3 vs 4")
        assert not isinstance(err, ValueError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidSizeError:

    def test_all_attributes(self):
        err = InvalidSizeError("too large", size=10_005, limit=10_000)
        assert str(err) == "too large"
        assert err.size == 10_005
        assert err.limit == 10_000

    def test_defaults_are_none(self):
        err = InvalidSizeError("bad size")
        assert err.size is None
        assert err.limit is None


class TestIndexOutOfRangeError:

    def test_all_attributes(self):
        err = IndexOutOfRangeError("index 6 out of range", index=6, size=5)
        assert err.index == 6
        assert err.size == 5

    def test_catchable_with_attributes(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            raise IndexOutOfRangeError("out of range", index=-3, size=5)
        assert exc_info.value.index == -3


class TestDimensionMismatchError:

    def test_all_attributes(self):
        err = DimensionMismatchError(
            "Operands must be same size for addition, got 4 and 7",
            left=4,
            right=7,
            operation="addition",
        )
        assert "addition" in str(err)
        assert err.left == 4
        assert err.right == 7
        assert err.operation == "addition"

    def test_defaults_are_none(self):
        err = DimensionMismatchError("mismatch")
        assert err.left is None
        assert err.right is None
        assert err.operation is None
