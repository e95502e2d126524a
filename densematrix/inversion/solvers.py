"""
Solver dispatch for matrix inversion.

inv() is the diagnostic counterpart of Matrix.invert(): the same
elimination, reported with pivots, condition number, timing and warnings.
"""

from __future__ import annotations

from typing import Literal
import warnings

from numpy.typing import ArrayLike

from densematrix.core.exceptions import ValidationError
from densematrix.core.compute.tolerances import DEFAULT_PIVOT_TOLERANCE
from densematrix.matrix.matrix import Matrix
from densematrix.inversion.design import InversionDesign
from densematrix.inversion.solution import InversionSolution
from densematrix.inversion.backends.cpu import CPUGaussJordanBackend


BackendChoice = Literal['cpu']


def _ensure_design(matrix: Matrix | ArrayLike | InversionDesign) -> InversionDesign:
    """Convert Matrix or raw table to InversionDesign if needed."""
    if isinstance(matrix, InversionDesign):
        return matrix
    return InversionDesign.from_matrix(matrix)


def _get_backend(backend: BackendChoice, pivot_tol: float) -> CPUGaussJordanBackend:
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPUGaussJordanBackend(pivot_tol=pivot_tol)

    raise ValidationError(f"Unknown backend: {backend!r}")


def inv(
    matrix: Matrix | ArrayLike | InversionDesign,
    *,
    pivot_tol: float = DEFAULT_PIVOT_TOLERANCE,
    backend: BackendChoice = 'cpu',
) -> InversionSolution:
    """
    Invert a matrix by Gauss-Jordan elimination, with diagnostics.

    Parameters
    ----------
    matrix : Matrix, array-like or InversionDesign
        Operand. Tables are validated as by Matrix.from_content.
    pivot_tol : float
        Largest pivot magnitude treated as zero. The default 0.0 rejects
        exactly-zero pivots only.
    backend : str
        'cpu'.

    Returns
    -------
    InversionSolution
        Check .succeeded (or call .unwrap()) before using .inverse.
        Non-square and singular operands do not raise here.

    Warns
    -----
    RuntimeWarning
        When the inverse exists but the operand is numerically
        near-singular or ill-conditioned. The same messages are kept on
        InversionSolution.warnings.
    """
    design = _ensure_design(matrix)
    be = _get_backend(backend, pivot_tol)

    result = be.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return InversionSolution(_result=result, _design=design)
