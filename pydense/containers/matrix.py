"""
DynamicMatrix: dense square matrix composed of DynamicVector rows.

The matrix holds an ordered list of row vectors, each of length equal to
the side length, and re-derives equality, arithmetic and streaming for 2D
semantics. m[i] hands out the live row, so m[i][j] = x writes through.

Products sum over the inner index in ascending order starting from zero
(see pydense.containers._accumulate), so results are reproducible for
floating-point element types.
"""

from __future__ import annotations

import numbers
import operator
from collections.abc import Mapping
from typing import Any, Iterator, TextIO

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pydense.core.exceptions import DimensionMismatchError, ValidationError
from pydense.core.limits import MATRIX_LIMITS
from pydense.core.precision import DEFAULT_ATOL, DEFAULT_RTOL
from pydense.core.validation import (
    check_array,
    check_dtype,
    check_index,
    check_ndim,
    check_same_size,
    check_size,
    check_square,
    is_numeric_scalar,
)
from pydense.containers._accumulate import matmul_ascending, matvec_ascending
from pydense.containers._stream import (
    TokenReader,
    as_reader,
    format_rows,
    parse_tokens,
)
from pydense.containers.vector import DynamicVector


class DynamicMatrix:
    """
    Dense square matrix of numeric elements.

    Construction:
        DynamicMatrix(size, dtype=np.float64)    zero-filled size x size
        DynamicMatrix.from_rows(rows)            copied from nested data
        m.copy()                                 deep copy, every row copied
        m.transfer()                             O(1) ownership transfer

    Invariant: 1 <= size <= MAX_MATRIX_SIZE and every row has length size.
    Rows obtained through m[i] must keep their length; replace a whole row
    with m[i] = row, which checks it.
    """

    __slots__ = ('_rows', '_dtype')

    __array_ufunc__ = None

    __hash__ = None

    def __init__(self, size: int = 1, dtype: DTypeLike = np.float64):
        size = check_size(size, MATRIX_LIMITS)
        dtype = check_dtype(dtype)
        self._rows: list[DynamicVector] = [DynamicVector(size, dtype) for _ in range(size)]
        self._dtype: np.dtype = dtype

    @classmethod
    def _wrap_rows(cls, rows: list[DynamicVector]) -> DynamicMatrix:
        """Take ownership of freshly built rows."""
        check_size(len(rows), MATRIX_LIMITS)
        matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._dtype = rows[0].dtype
        return matrix

    @classmethod
    def _from_array(cls, data: NDArray[Any]) -> DynamicMatrix:
        """Split a square 2D array into independently owned rows."""
        return cls._wrap_rows([DynamicVector._wrap(row.copy()) for row in data])

    @classmethod
    def from_rows(cls, rows: Any, dtype: DTypeLike | None = None) -> DynamicMatrix:
        """
        Build a matrix by copying square nested data.

        Parameters
        ----------
        rows : array-like
            Nested sequences, a list of DynamicVector, a 2D numpy array, or
            any object with a .values attribute (e.g. pandas DataFrame).
        dtype : dtype, optional
            Element type. Defaults to the type inferred from the data.

        Raises
        ------
        InvalidSizeError
            If there are no rows or more than MAX_MATRIX_SIZE.
        DimensionMismatchError
            If a row's length differs from the number of rows.
        ValidationError
            If the data is not 2D numeric data.
        """
        assert rows is not None, "DynamicMatrix.from_rows requires non-None rows"
        if isinstance(rows, Mapping):
            raise ValidationError(
                f"rows: expected a sequence of rows, got mapping {type(rows).__name__}"
            )
        values = getattr(rows, 'values', None)
        if values is not None and not callable(values) and not isinstance(rows, np.ndarray):
            rows = values

        if not isinstance(rows, np.ndarray):
            rows = [r.to_numpy() if isinstance(r, DynamicVector) else r for r in rows]
            n = check_size(len(rows), MATRIX_LIMITS, "rows")
            for i, row in enumerate(rows):
                if np.ndim(row) != 1:
                    raise ValidationError(f"rows: row {i} is not a 1D sequence")
                if len(row) != n:
                    raise DimensionMismatchError(
                        f"rows: row {i} has length {len(row)}, expected {n}",
                        left=n,
                        right=len(row),
                        operation="construction",
                    )

        data = check_array(rows, "rows", dtype=dtype)
        check_ndim(data, 2, "rows")
        check_square(data, "rows")
        check_size(data.shape[0], MATRIX_LIMITS, "rows")
        return cls._from_array(data)

    # --- Ownership ---

    def copy(self) -> DynamicMatrix:
        """Deep copy: every row is copied into independent storage."""
        return type(self)._wrap_rows([row.copy() for row in self._rows])

    def __copy__(self) -> DynamicMatrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> DynamicMatrix:
        return self.copy()

    def transfer(self) -> DynamicMatrix:
        """
        Move this matrix's rows into a new matrix in constant time.

        This matrix is left empty (size 0) and may only be reused as the
        target of assign().
        """
        moved = type(self).__new__(type(self))
        moved._rows = self._rows
        moved._dtype = self._dtype
        self._rows = []
        return moved

    def assign(self, other: DynamicMatrix, transfer: bool = False) -> DynamicMatrix:
        """
        Replace this matrix's contents with ``other``'s.

        The size may change. With transfer=True the rows are moved rather
        than copied and ``other`` is left empty. Assigning a matrix to
        itself is a no-op.

        Returns:
            self, to allow chaining
        """
        if not isinstance(other, DynamicMatrix):
            raise TypeError(f"Cannot assign {type(other).__name__} to DynamicMatrix")
        if other is self:
            return self
        source = other.transfer() if transfer else other.copy()
        self._rows = source._rows
        self._dtype = source._dtype
        return self

    def swap(self, other: DynamicMatrix) -> None:
        """Exchange rows with another matrix in constant time."""
        if not isinstance(other, DynamicMatrix):
            raise TypeError(f"Cannot swap DynamicMatrix with {type(other).__name__}")
        self._rows, other._rows = other._rows, self._rows
        self._dtype, other._dtype = other._dtype, self._dtype

    # --- Shape and access ---

    @property
    def size(self) -> int:
        """Side length."""
        return len(self._rows)

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._dtype

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> DynamicVector:
        # Unchecked: bounds are the caller's responsibility
        return self._rows[operator.index(index)]

    def __setitem__(self, index: int, row: ArrayLike) -> None:
        """
        Copy ``row`` into row ``index``.

        Raises:
            DimensionMismatchError: If the row length differs from size
        """
        values = check_array(
            row.to_numpy() if isinstance(row, DynamicVector) else row,
            "row",
            dtype=self._dtype,
        )
        check_ndim(values, 1, "row")
        check_same_size(self.size, values.shape[0], "row assignment")
        self._rows[operator.index(index)]._data[:] = values

    def at(self, index: int) -> DynamicVector:
        """
        Checked row access.

        Raises:
            IndexOutOfRangeError: If index < 0 or index >= size
        """
        return self._rows[check_index(index, self.size)]

    def __iter__(self) -> Iterator[DynamicVector]:
        return iter(self._rows)

    # --- Comparison ---

    def equals(self, other: Any) -> bool:
        """True iff other is a matrix of the same size with equal rows."""
        if not isinstance(other, DynamicMatrix):
            return False
        if self.size != other.size:
            return False
        return all(a.equals(b) for a, b in zip(self._rows, other._rows))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DynamicMatrix):
            return NotImplemented
        return self.equals(other)

    def isclose(
        self,
        other: DynamicMatrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """Tolerance comparison for floating-point matrices; False on size mismatch."""
        if not isinstance(other, DynamicMatrix) or self.size != other.size:
            return False
        return all(a.isclose(b, rtol=rtol, atol=atol) for a, b in zip(self._rows, other._rows))

    # --- Arithmetic ---

    def _as_array(self) -> NDArray[Any]:
        if not self._rows:
            return np.empty((0, 0), dtype=self._dtype)
        return np.vstack([row._data for row in self._rows])

    def add(self, other: DynamicMatrix) -> DynamicMatrix:
        """
        Elementwise sum of two matrices of the same size.

        Raises:
            DimensionMismatchError: If sizes differ
        """
        if not isinstance(other, DynamicMatrix):
            raise TypeError(f"Cannot add {type(other).__name__} to DynamicMatrix")
        check_same_size(self.size, other.size, "matrix addition")
        return type(self)._wrap_rows([a.add(b) for a, b in zip(self._rows, other._rows)])

    def subtract(self, other: DynamicMatrix) -> DynamicMatrix:
        """
        Elementwise difference of two matrices of the same size.

        Raises:
            DimensionMismatchError: If sizes differ
        """
        if not isinstance(other, DynamicMatrix):
            raise TypeError(f"Cannot subtract {type(other).__name__} from DynamicMatrix")
        check_same_size(self.size, other.size, "matrix subtraction")
        return type(self)._wrap_rows([a.subtract(b) for a, b in zip(self._rows, other._rows)])

    def multiply(
        self,
        other: DynamicMatrix | DynamicVector | numbers.Number,
    ) -> DynamicMatrix | DynamicVector:
        """
        Scalar, matrix-vector or matrix-matrix product.

        - scalar: new matrix with every entry multiplied
        - DynamicVector v: vector with entry i = sum_j self[i][j] * v[j]
        - DynamicMatrix B: matrix with entry (i, j) = sum_k self[i][k] * B[k][j]

        Sums run over the inner index in ascending order from zero.

        Raises:
            DimensionMismatchError: If the operand size differs from size
        """
        if isinstance(other, DynamicMatrix):
            check_same_size(self.size, other.size, "matrix multiplication")
            return type(self)._from_array(matmul_ascending(self._as_array(), other._as_array()))
        if isinstance(other, DynamicVector):
            check_same_size(self.size, other.size, "matrix-vector multiplication")
            return DynamicVector._wrap(matvec_ascending(self._as_array(), other._data))
        if is_numeric_scalar(other):
            return type(self)._wrap_rows([row.multiply(other) for row in self._rows])
        raise TypeError(f"Cannot multiply DynamicMatrix by {type(other).__name__}")

    def __add__(self, other: Any) -> DynamicMatrix:
        if isinstance(other, DynamicMatrix):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> DynamicMatrix:
        if isinstance(other, DynamicMatrix):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> DynamicMatrix:
        if is_numeric_scalar(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> DynamicMatrix:
        if is_numeric_scalar(other):
            return self.multiply(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> DynamicMatrix | DynamicVector:
        if isinstance(other, (DynamicMatrix, DynamicVector)):
            return self.multiply(other)
        return NotImplemented

    # --- Text streaming ---

    def read(self, source: str | TextIO | TokenReader) -> DynamicMatrix:
        """
        Fill this matrix in place from size*size tokens, row-major.

        On failure the matrix is left unmodified.

        Raises:
            ValidationError: If input ends early or a token does not parse
        """
        n = self.size
        reader = as_reader(source)
        tokens = reader.take(n * n, "matrix")
        values = parse_tokens(tokens, self._dtype, "matrix").reshape(n, n)
        for row, new_values in zip(self._rows, values):
            row._data[:] = new_values
        return self

    def write(self, stream: TextIO) -> None:
        """Write one row per line, elements separated by a single space."""
        stream.write(str(self))

    def __str__(self) -> str:
        return format_rows([row._data for row in self._rows])

    def __repr__(self) -> str:
        return f"DynamicMatrix(size={self.size}, dtype={self._dtype})"

    # --- Interop ---

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the entries as a 2D numpy array."""
        return self._as_array()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> NDArray[Any]:
        # Always a fresh array assembled from the rows
        if copy is False:
            raise ValueError("DynamicMatrix cannot be converted to an array without copying")
        data = self._as_array()
        return data.astype(dtype) if dtype is not None else data

    def tolist(self) -> list[list[Any]]:
        """Entries as nested lists of Python scalars."""
        return [row.tolist() for row in self._rows]
