"""
Dense matrix value type.

Public API:
    Matrix        - rows x columns table of float64 values
    create()      - zero-filled or from a rectangular table
    identity(n)   - n x n identity
    add(), subtract(), multiply(), scale(), transpose(), invert()
                  - pure operations returning new matrices
"""

from densematrix.matrix.matrix import Matrix
from densematrix.matrix.operations import (
    create,
    identity,
    add,
    subtract,
    multiply,
    scale,
    transpose,
    invert,
)

__all__ = [
    "Matrix",
    "create",
    "identity",
    "add",
    "subtract",
    "multiply",
    "scale",
    "transpose",
    "invert",
]
