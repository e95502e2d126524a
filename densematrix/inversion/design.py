"""
InversionDesign: operand wrapper for the inversion pipeline.

Holds a private float64 copy of the matrix to invert plus its shape.
Non-square operands are accepted here; the backend reports them with
status 'non_square' rather than failing at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.matrix.matrix import Matrix


@dataclass(frozen=True)
class InversionDesign:
    """
    Design for matrix inversion. Immutable after construction.

    Construction:
        InversionDesign.from_matrix(matrix)
        InversionDesign.from_matrix([[1, 2], [3, 4]])
    """
    _data: NDArray[np.floating[Any]]
    _n_rows: int
    _n_columns: int

    @classmethod
    def from_matrix(cls, matrix: Matrix | ArrayLike) -> InversionDesign:
        """
        Build InversionDesign from a Matrix or a rectangular table.

        Tables are validated exactly as Matrix.from_content validates them.
        """
        if not isinstance(matrix, Matrix):
            matrix = Matrix.from_content(matrix)
        data = matrix.to_numpy()
        data.setflags(write=False)
        n_rows, n_columns = data.shape
        return cls(_data=data, _n_rows=n_rows, _n_columns=n_columns)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Operand (read-only array)."""
        return self._data

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def n_columns(self) -> int:
        return self._n_columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n_rows, self._n_columns)

    @property
    def is_square(self) -> bool:
        return self._n_rows == self._n_columns

    def __repr__(self) -> str:
        return f"InversionDesign(n_rows={self._n_rows}, n_columns={self._n_columns})"
