"""
CPU backend for Gauss-Jordan inversion.

Runs the elimination kernel and adds the diagnostics Matrix.invert()
does not report: pivot magnitudes, condition number, timing and
near-singularity warnings.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from densematrix.core.result import Result
from densematrix.core.validation import check_non_negative
from densematrix.core.compute.timing import Timer
from densematrix.core.compute.tolerances import (
    DEFAULT_PIVOT_TOLERANCE,
    SINGULAR_CONDITION_THRESHOLD,
    select_tolerance,
)
from densematrix.core.compute.linalg.gauss_jordan import gauss_jordan_inverse
from densematrix.inversion.design import InversionDesign
from densematrix.inversion.solution import InversionParams


def _near_singular_warnings(
    A: NDArray[np.floating[Any]],
    min_abs_pivot: float,
    condition_number: float | None,
) -> list[str]:
    """Warnings for an inverse that exists but carries few correct digits."""
    messages = []
    n = A.shape[0]
    eps = np.finfo(np.float64).eps
    pivot_floor = n * eps * float(np.max(np.abs(A)))

    if min_abs_pivot < pivot_floor:
        messages.append(
            f"Matrix is numerically near-singular: smallest pivot "
            f"{min_abs_pivot:.3g} is below n*eps*max|A| = {pivot_floor:.3g}"
        )
    if condition_number is not None and condition_number > SINGULAR_CONDITION_THRESHOLD:
        messages.append(
            f"Matrix is ill-conditioned: condition number "
            f"{condition_number:.3g} exceeds 1/eps = {SINGULAR_CONDITION_THRESHOLD:.3g}"
        )
    return messages


class CPUGaussJordanBackend:
    """CPU backend for Gauss-Jordan inversion."""

    def __init__(self, pivot_tol: float = DEFAULT_PIVOT_TOLERANCE):
        self._pivot_tol = check_non_negative(pivot_tol, 'pivot_tol')

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    @property
    def pivot_tol(self) -> float:
        return self._pivot_tol

    def solve(self, design: InversionDesign) -> Result[InversionParams]:
        """
        Invert design.data.

        Never raises for non-square or singular operands; those outcomes
        are carried in params.status.
        """
        timer = Timer()
        timer.start()

        A = design.data
        warnings_list: list[str] = []

        with timer.section('elimination'):
            outcome = gauss_jordan_inverse(A, pivot_tol=self._pivot_tol)

        condition_number = None
        min_abs_pivot = None
        with timer.section('diagnostics'):
            # SVD does not converge on NaN/Inf cells.
            if design.is_square and np.all(np.isfinite(A)):
                condition_number = float(np.linalg.cond(A))
            if len(outcome.pivots) > 0:
                min_abs_pivot = float(np.min(np.abs(outcome.pivots)))
            if outcome.succeeded:
                warnings_list.extend(
                    _near_singular_warnings(A, min_abs_pivot, condition_number)
                )

        timer.stop()

        params = InversionParams(
            inverse=outcome.inverse,
            status=outcome.status,
            pivot_index=outcome.pivot_index,
            pivots=outcome.pivots,
            condition_number=condition_number,
        )

        info = {
            'method': 'gauss_jordan',
            'status': outcome.status,
            'pivot_index': outcome.pivot_index,
            'n_pivots': len(outcome.pivots),
            'min_abs_pivot': min_abs_pivot,
            'condition_number': condition_number,
            'pivot_tol': self._pivot_tol,
            'tolerance_tier': select_tolerance(condition_number).name,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
