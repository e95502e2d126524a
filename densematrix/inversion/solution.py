"""
Inversion solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from densematrix.core.result import Result
from densematrix.core.exceptions import NonSquareMatrixError, SingularMatrixError
from densematrix.core.compute.linalg.gauss_jordan import InversionStatus
from densematrix.matrix.matrix import Matrix

if TYPE_CHECKING:
    from densematrix.inversion.design import InversionDesign


@dataclass(frozen=True)
class InversionParams:
    """
    Parameter payload for Gauss-Jordan inversion.

    inverse is None unless status == 'ok'.
    """
    inverse: NDArray[np.floating[Any]] | None
    status: InversionStatus
    pivot_index: int | None
    pivots: NDArray[np.floating[Any]]
    condition_number: float | None


@dataclass
class InversionSolution:
    """
    User-facing inversion result.

    Wraps Result[InversionParams] and provides convenient accessors.
    """
    _result: Result[InversionParams]
    _design: 'InversionDesign'

    @property
    def inverse(self) -> Matrix | None:
        """The inverse as a new Matrix, or None if inversion failed."""
        inverse = self._result.params.inverse
        if inverse is None:
            return None
        return Matrix.from_content(inverse)

    @property
    def succeeded(self) -> bool:
        return self._result.params.status == 'ok'

    @property
    def status(self) -> InversionStatus:
        """'ok', 'non_square' or 'singular'."""
        return self._result.params.status

    @property
    def pivot_index(self) -> int | None:
        """Row of the first zero pivot, when status is 'singular'."""
        return self._result.params.pivot_index

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        """Pivot values used, in elimination order."""
        return self._result.params.pivots

    @property
    def condition_number(self) -> float | None:
        """2-norm condition number of the operand (None if non-square)."""
        return self._result.params.condition_number

    @property
    def shape(self) -> tuple[int, int]:
        return self._design.shape

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def unwrap(self) -> Matrix:
        """
        Return the inverse, or raise if inversion failed.

        Raises
        ------
        NonSquareMatrixError
            If the operand is not square.
        SingularMatrixError
            If elimination met a zero pivot.
        """
        if self.status == 'non_square':
            n_rows, n_columns = self.shape
            raise NonSquareMatrixError(
                f"Cannot invert a {n_rows}x{n_columns} matrix: "
                f"rows ({n_rows}) must equal columns ({n_columns})",
                shape=self.shape,
            )
        if self.status == 'singular':
            raise SingularMatrixError(
                f"Matrix is singular: pivot {self.pivot_index} is "
                f"{float(self.pivots[-1])!r} (tolerance {self.info['pivot_tol']!r})",
                matrix_name='A',
                condition_number=self.condition_number,
                pivot_index=self.pivot_index,
            )
        return self.inverse

    def summary(self) -> str:
        """Plain-text report of the inversion."""
        n_rows, n_columns = self.shape
        lines = [
            "Gauss-Jordan Inversion",
            "=" * 40,
            f"Operand:          {n_rows} x {n_columns}",
            f"Status:           {self.status}",
            f"Backend:          {self.backend_name}",
        ]
        if self.condition_number is not None:
            lines.append(f"Condition number: {self.condition_number:.6g}")
        if len(self.pivots) > 0:
            lines.append(f"Min |pivot|:      {np.min(np.abs(self.pivots)):.6g}")
        if self.pivot_index is not None:
            lines.append(f"Failed at pivot:  {self.pivot_index}")
        if self.timing is not None:
            lines.append(f"Time:             {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        if self.succeeded:
            lines.append("")
            lines.append("Inverse:")
            lines.append(self.inverse.format())
        return "\n".join(lines)

    def __repr__(self) -> str:
        n_rows, n_columns = self.shape
        return (
            f"InversionSolution(shape=({n_rows}, {n_columns}), "
            f"status={self.status!r})"
        )
