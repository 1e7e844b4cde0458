"""
Tests for whitespace-delimited text streaming.

Vectors read N tokens and write them space-separated; matrices read
size*size tokens row-major and write one row per line.
"""

import io

import numpy as np
import pytest

from pydense import DynamicMatrix, DynamicVector, TokenReader, ValidationError


class TestTokenReader:

    def test_tokens_across_lines(self):
        reader = TokenReader("1 2\n\n  3\t4\n")
        assert list(reader) == ["1", "2", "3", "4"]
        assert reader.consumed == 4

    def test_exhausted_returns_none(self):
        reader = TokenReader("")
        assert reader.next_token() is None

    def test_take_exact(self):
        reader = TokenReader("a b c")
        assert reader.take(2, "x") == ["a", "b"]
        assert reader.next_token() == "c"

    def test_take_too_many(self):
        with pytest.raises(ValidationError, match="expected 3 tokens, input ended after 2"):
            TokenReader("1 2").take(3, "vector")

    def test_reads_lazily_from_stream(self):
        stream = io.StringIO("1 2\n3 4\n")
        reader = TokenReader(stream)
        reader.take(2, "x")
        assert stream.readline() == "3 4\n"


class TestVectorStreaming:

    def test_read_from_string(self):
        v = DynamicVector(3, dtype=np.int64).read("4 5 6")
        assert v.tolist() == [4, 5, 6]

    def test_read_floats(self):
        v = DynamicVector(2).read("1.5 -2e3")
        assert v.tolist() == [1.5, -2000.0]

    def test_read_from_text_stream(self):
        v = DynamicVector(2, dtype=np.int64)
        v.read(io.StringIO("7\n8\n"))
        assert v.tolist() == [7, 8]

    def test_consecutive_reads_share_reader(self):
        reader = TokenReader("1 2 3 4 5")
        a = DynamicVector(2, dtype=np.int64).read(reader)
        b = DynamicVector(3, dtype=np.int64).read(reader)
        assert a.tolist() == [1, 2]
        assert b.tolist() == [3, 4, 5]

    def test_short_input_leaves_vector_unmodified(self):
        v = DynamicVector.from_buffer([9, 9, 9])
        with pytest.raises(ValidationError, match="input ended"):
            v.read("1 2")
        assert v.tolist() == [9, 9, 9]

    def test_bad_token_leaves_vector_unmodified(self):
        v = DynamicVector.from_buffer([9, 9])
        with pytest.raises(ValidationError, match="cannot parse"):
            v.read("1 x")
        assert v.tolist() == [9, 9]

    def test_fraction_into_integer_vector(self):
        with pytest.raises(ValidationError, match="cannot parse"):
            DynamicVector(1, dtype=np.int64).read("2.5")

    def test_unsupported_source(self):
        with pytest.raises(ValidationError, match="source"):
            DynamicVector(1).read(42)

    def test_str(self):
        assert str(DynamicVector.from_buffer([1, 2, 3])) == "1 2 3"

    def test_write(self):
        out = io.StringIO()
        DynamicVector.from_buffer([1.5, 2.0]).write(out)
        assert out.getvalue() == "1.5 2.0"

    def test_repr(self):
        assert repr(DynamicVector(3, dtype=np.int64)) == "DynamicVector(size=3, dtype=int64)"

    def test_write_then_read(self):
        v = DynamicVector.from_buffer([3, -1, 4, 1, 5])
        restored = DynamicVector(5, dtype=v.dtype).read(str(v))
        assert restored == v


class TestMatrixStreaming:

    def test_read_row_major(self):
        m = DynamicMatrix(2, dtype=np.int64).read("1 2\n3 4\n")
        assert m.tolist() == [[1, 2], [3, 4]]

    def test_read_ignores_line_layout(self):
        m = DynamicMatrix(2, dtype=np.int64).read("1 2 3\n4")
        assert m.tolist() == [[1, 2], [3, 4]]

    def test_short_input_leaves_matrix_unmodified(self):
        m = DynamicMatrix(2, dtype=np.int64)
        with pytest.raises(ValidationError, match="expected 4 tokens"):
            m.read("1 2 3")
        assert m.tolist() == [[0, 0], [0, 0]]

    def test_str_one_row_per_line(self):
        m = DynamicMatrix.from_rows([[1, 2], [3, 4]])
        assert str(m) == "1 2\n3 4\n"

    def test_write(self):
        out = io.StringIO()
        DynamicMatrix.from_rows([[5]]).write(out)
        assert out.getvalue() == "5\n"

    def test_repr(self):
        assert repr(DynamicMatrix(2)) == "DynamicMatrix(size=2, dtype=float64)"

    def test_vector_then_matrix_from_one_stream(self):
        reader = TokenReader(io.StringIO("1 0\n1 2\n3 4\n"))
        v = DynamicVector(2, dtype=np.int64).read(reader)
        m = DynamicMatrix(2, dtype=np.int64).read(reader)
        assert (m @ v).tolist() == [1, 3]
