"""
Dense container module.

Provides the two value-semantics containers and their text streaming.

Public API:
    DynamicVector  - dense vector with checked and unchecked access
    DynamicMatrix  - dense square matrix of DynamicVector rows
    TokenReader    - shared tokenizer for reading several containers from one stream
"""

from pydense.containers.vector import DynamicVector
from pydense.containers.matrix import DynamicMatrix
from pydense.containers._stream import TokenReader

__all__ = [
    "DynamicVector",
    "DynamicMatrix",
    "TokenReader",
]
