"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error.

Matrix operations themselves report shape mismatches, out-of-bounds
indices and singular operands through sentinels (None / False). The
exceptions here cover malformed input and the opt-in strict path
(InversionSolution.unwrap()).

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Table dimensions are incorrect or inconsistent.

    Raised when a table is ragged, is not two-dimensional, or when
    an operand's shape rules out the requested operation.
    """
    pass


class NonSquareMatrixError(DimensionError):
    """
    Matrix is not square.

    Attributes:
        shape: (rows, columns) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(DenseMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when inversion is required to succeed but elimination met a
    zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: 2-norm condition number, if available
        pivot_index: Row index of the first zero pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.pivot_index = pivot_index
