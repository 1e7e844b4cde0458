"""
DynamicVector: dense, dynamically-sized vector with value semantics.

Each vector exclusively owns a contiguous 1D numpy buffer. Buffers passed
in by the caller are copied on the way in, buffers handed out are copied on
the way out, so two vectors never alias each other's storage. Arithmetic
always returns a new vector and leaves its operands untouched.

Access comes in two flavours:
    v[i], v[i] = x      unchecked fast path for caller-validated indices
    v.at(i), v.set_at   checked path raising IndexOutOfRangeError
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, Iterator, TextIO

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pydense.core.exceptions import ValidationError
from pydense.core.limits import VECTOR_LIMITS
from pydense.core.precision import DEFAULT_ATOL, DEFAULT_RTOL, all_close
from pydense.core.validation import (
    check_array,
    check_dtype,
    check_index,
    check_ndim,
    check_same_size,
    check_size,
    is_numeric_scalar,
)
from pydense.containers._accumulate import dot_ascending
from pydense.containers._stream import (
    TokenReader,
    as_reader,
    format_elements,
    parse_tokens,
)


class DynamicVector:
    """
    Dense vector of numeric elements.

    Construction:
        DynamicVector(size, dtype=np.float64)     zero-filled
        DynamicVector.from_buffer(buffer, size)   copied from caller data
        v.copy()                                  deep copy
        v.transfer()                              O(1) ownership transfer

    Invariant: 1 <= size <= MAX_VECTOR_SIZE for every usable vector. A
    vector whose storage has been transferred away has size 0 and may only
    be used as the target of assign().
    """

    __slots__ = ('_data',)

    # Make numpy defer to our reflected operators (np.int64(2) * v)
    __array_ufunc__ = None

    # Mutable container
    __hash__ = None

    def __init__(self, size: int = 1, dtype: DTypeLike = np.float64):
        size = check_size(size, VECTOR_LIMITS)
        dtype = check_dtype(dtype)
        self._data: NDArray[Any] = np.zeros(size, dtype=dtype)

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> DynamicVector:
        """Take ownership of a freshly computed 1D array."""
        check_size(data.shape[0], VECTOR_LIMITS)
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    @classmethod
    def from_buffer(
        cls,
        buffer: ArrayLike,
        size: int | None = None,
        dtype: DTypeLike | None = None,
    ) -> DynamicVector:
        """
        Build a vector by copying the first ``size`` elements of a buffer.

        Parameters
        ----------
        buffer : array-like
            1D source data. Must not be None.
        size : int, optional
            Number of leading elements to copy. Defaults to the whole buffer.
        dtype : dtype, optional
            Element type. Defaults to the type inferred from the buffer.
            Casting fractional values to an integer dtype issues a
            RuntimeWarning.

        Raises
        ------
        InvalidSizeError
            If size is 0, negative or above MAX_VECTOR_SIZE.
        ValidationError
            If the buffer is not 1D numeric data or is shorter than size.
        """
        assert buffer is not None, "DynamicVector.from_buffer requires a non-None buffer"
        if size is not None:
            size = check_size(size, VECTOR_LIMITS)

        data = check_array(buffer, "buffer", dtype=dtype)
        check_ndim(data, 1, "buffer")

        if size is None:
            size = check_size(data.shape[0], VECTOR_LIMITS, "buffer length")
        elif data.shape[0] < size:
            raise ValidationError(
                f"buffer: expected at least {size} elements, got {data.shape[0]}"
            )

        if data.shape[0] != size:
            data = data[:size].copy()
        return cls._wrap(data)

    # --- Ownership ---

    def copy(self) -> DynamicVector:
        """Deep copy with independent storage."""
        return type(self)._wrap(self._data.copy())

    def __copy__(self) -> DynamicVector:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> DynamicVector:
        return self.copy()

    def transfer(self) -> DynamicVector:
        """
        Move this vector's storage into a new vector in constant time.

        This vector is left empty (size 0) and may only be reused as the
        target of assign().
        """
        moved = type(self).__new__(type(self))
        moved._data = self._data
        self._data = np.empty(0, dtype=moved._data.dtype)
        return moved

    def assign(self, other: DynamicVector, transfer: bool = False) -> DynamicVector:
        """
        Replace this vector's contents with ``other``'s.

        The size may change. With transfer=True the storage is moved rather
        than copied and ``other`` is left empty. Assigning a vector to
        itself is a no-op.

        Returns:
            self, to allow chaining
        """
        if not isinstance(other, DynamicVector):
            raise TypeError(f"Cannot assign {type(other).__name__} to DynamicVector")
        if other is self:
            return self
        if transfer:
            self._data = other.transfer()._data
        else:
            self._data = other.copy()._data
        return self

    def swap(self, other: DynamicVector) -> None:
        """Exchange storage with another vector in constant time."""
        if not isinstance(other, DynamicVector):
            raise TypeError(f"Cannot swap DynamicVector with {type(other).__name__}")
        self._data, other._data = other._data, self._data

    # --- Shape and access ---

    @property
    def size(self) -> int:
        """Number of elements."""
        return self._data.shape[0]

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: int) -> Any:
        # Unchecked: bounds are the caller's responsibility
        return self._data[operator.index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[operator.index(index)] = value

    def at(self, index: int) -> Any:
        """
        Checked element read.

        Raises:
            IndexOutOfRangeError: If index < 0 or index >= size
        """
        return self._data[check_index(index, self.size)]

    def set_at(self, index: int, value: Any) -> None:
        """
        Checked element write.

        Raises:
            IndexOutOfRangeError: If index < 0 or index >= size
        """
        self._data[check_index(index, self.size)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    # --- Comparison ---

    def equals(self, other: Any) -> bool:
        """True iff other is a vector of the same size with equal elements."""
        if not isinstance(other, DynamicVector):
            return False
        if self.size != other.size:
            return False
        return bool(np.array_equal(self._data, other._data))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        return self.equals(other)

    def isclose(
        self,
        other: DynamicVector,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """Tolerance comparison for floating-point vectors; False on size mismatch."""
        if not isinstance(other, DynamicVector) or self.size != other.size:
            return False
        return all_close(self._data, other._data, rtol=rtol, atol=atol)

    # --- Arithmetic ---

    def add(self, other: DynamicVector | numbers.Number) -> DynamicVector:
        """
        Elementwise sum with a scalar or a vector of the same size.

        Raises:
            DimensionMismatchError: If other is a vector of different size
        """
        if isinstance(other, DynamicVector):
            check_same_size(self.size, other.size, "addition")
            return type(self)._wrap(self._data + other._data)
        if is_numeric_scalar(other):
            return type(self)._wrap(self._data + other)
        raise TypeError(f"Cannot add {type(other).__name__} to DynamicVector")

    def subtract(self, other: DynamicVector | numbers.Number) -> DynamicVector:
        """
        Elementwise difference with a scalar or a vector of the same size.

        Raises:
            DimensionMismatchError: If other is a vector of different size
        """
        if isinstance(other, DynamicVector):
            check_same_size(self.size, other.size, "subtraction")
            return type(self)._wrap(self._data - other._data)
        if is_numeric_scalar(other):
            return type(self)._wrap(self._data - other)
        raise TypeError(f"Cannot subtract {type(other).__name__} from DynamicVector")

    def multiply(self, scalar: numbers.Number) -> DynamicVector:
        """Every element multiplied by a scalar. Use dot() for vector operands."""
        if not is_numeric_scalar(scalar):
            raise TypeError(
                f"Cannot multiply DynamicVector by {type(scalar).__name__}; "
                f"use dot() for the scalar product of two vectors"
            )
        return type(self)._wrap(self._data * scalar)

    def dot(self, other: DynamicVector) -> Any:
        """
        Scalar product, accumulated from zero in ascending index order.

        Raises:
            DimensionMismatchError: If sizes differ
        """
        if not isinstance(other, DynamicVector):
            raise TypeError(f"Cannot take dot product with {type(other).__name__}")
        check_same_size(self.size, other.size, "dot product")
        return dot_ascending(self._data, other._data)

    def __add__(self, other: Any) -> DynamicVector:
        if isinstance(other, DynamicVector) or is_numeric_scalar(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> DynamicVector:
        if is_numeric_scalar(other):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> DynamicVector:
        if isinstance(other, DynamicVector) or is_numeric_scalar(other):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> DynamicVector:
        if is_numeric_scalar(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> DynamicVector:
        if is_numeric_scalar(other):
            return self.multiply(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, DynamicVector):
            return self.dot(other)
        return NotImplemented

    # --- Text streaming ---

    def read(self, source: str | TextIO | TokenReader) -> DynamicVector:
        """
        Fill this vector in place from whitespace-separated tokens.

        Consumes exactly ``size`` tokens in index order. On failure the
        vector is left unmodified.

        Raises:
            ValidationError: If input ends early or a token does not parse
        """
        reader = as_reader(source)
        tokens = reader.take(self.size, "vector")
        self._data[:] = parse_tokens(tokens, self.dtype, "vector")
        return self

    def write(self, stream: TextIO) -> None:
        """Write elements separated by a single space."""
        stream.write(str(self))

    def __str__(self) -> str:
        return format_elements(self._data)

    def __repr__(self) -> str:
        return f"DynamicVector(size={self.size}, dtype={self.dtype})"

    # --- Interop ---

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements as a 1D numpy array."""
        return self._data.copy()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> NDArray[Any]:
        # Always a copy: the buffer is never exposed
        if copy is False:
            raise ValueError("DynamicVector cannot be converted to an array without copying")
        return self._data.astype(dtype) if dtype is not None else self._data.copy()

    def tolist(self) -> list[Any]:
        """Elements as a list of Python scalars."""
        return self._data.tolist()
