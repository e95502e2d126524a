"""
densematrix: dense real matrices with Gauss-Jordan inversion.

A small NumPy-backed matrix value type: construction, bounds-checked
element access, dimension-checked arithmetic, transpose and inversion.

Submodules:
    matrix: Matrix type and pure operations
    inversion: Inversion with pivot/condition diagnostics
    core: Exceptions, validation, result envelope, compute kernels
"""

__version__ = "0.1.0"

from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    NonSquareMatrixError,
    NumericalError,
    SingularMatrixError,
)
from densematrix.matrix import (
    Matrix,
    create,
    identity,
    add,
    subtract,
    multiply,
    scale,
    transpose,
    invert,
)
from densematrix.inversion import inv, InversionSolution

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "create",
    "identity",
    "add",
    "subtract",
    "multiply",
    "scale",
    "transpose",
    "invert",
    # Inversion diagnostics
    "inv",
    "InversionSolution",
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "NonSquareMatrixError",
    "NumericalError",
    "SingularMatrixError",
]
