"""
Whitespace-delimited text streaming for dense containers.

Reading consumes whitespace-separated tokens in index order (row-major for
matrices). Writing emits elements separated by a single space; matrices
put one row per line with a newline after each row.

A TokenReader can be shared between several read() calls so that
consecutive containers are read from the same input, e.g.

    reader = TokenReader(sys.stdin)
    v.read(reader)
    m.read(reader)
"""

from __future__ import annotations

import io
from collections import deque
from typing import Any, Iterator, TextIO

import numpy as np
from numpy.typing import NDArray

from pydense.core.exceptions import ValidationError


class TokenReader:
    """
    Lazy tokenizer over a text stream.

    Lines are pulled from the stream only when the buffered tokens run
    out, so a reader over stdin never blocks for more input than the
    current read() needs.
    """

    def __init__(self, source: str | TextIO):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source
        self._pending: deque[str] = deque()
        self._consumed = 0

    @property
    def consumed(self) -> int:
        """Number of tokens handed out so far."""
        return self._consumed

    def __iter__(self) -> Iterator[str]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def next_token(self) -> str | None:
        """Return the next token, or None once the stream is exhausted."""
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        self._consumed += 1
        return self._pending.popleft()

    def take(self, count: int, name: str) -> list[str]:
        """
        Take exactly ``count`` tokens.

        Raises:
            ValidationError: If the stream ends before ``count`` tokens
        """
        tokens = []
        for _ in range(count):
            token = self.next_token()
            if token is None:
                raise ValidationError(
                    f"{name}: expected {count} tokens, input ended after {len(tokens)}"
                )
            tokens.append(token)
        return tokens


def as_reader(source: str | TextIO | TokenReader) -> TokenReader:
    """Wrap a string or text stream in a TokenReader; pass readers through."""
    if isinstance(source, TokenReader):
        return source
    if isinstance(source, str) or hasattr(source, 'readline'):
        return TokenReader(source)
    raise ValidationError(
        f"source: expected str, text stream or TokenReader, got {type(source).__name__}"
    )


def parse_tokens(tokens: list[str], dtype: np.dtype, name: str) -> NDArray[Any]:
    """
    Parse tokens into a 1D array of the given dtype.

    Raises:
        ValidationError: If any token is not a valid literal for dtype
    """
    try:
        return np.array(tokens, dtype=str).astype(dtype)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot parse tokens as {dtype}: {e}") from e


def format_elements(values: NDArray[Any]) -> str:
    """Elements of a 1D array separated by a single space."""
    return ' '.join(str(x) for x in values)


def format_rows(rows: list[NDArray[Any]]) -> str:
    """One formatted row per line, each followed by a newline."""
    return ''.join(format_elements(row) + '\n' for row in rows)
