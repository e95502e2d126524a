"""
Core infrastructure for densematrix.

This module provides shared abstractions and utilities used by the Matrix
type and the inversion pipeline.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerance tiers, linear algebra kernels
"""

from densematrix.core.protocols import Backend
from densematrix.core.result import Result
from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    NonSquareMatrixError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "NonSquareMatrixError",
    "NumericalError",
    "SingularMatrixError",
]
