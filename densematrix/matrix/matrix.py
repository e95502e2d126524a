"""
Matrix: dense 2D table of real numbers.

Dimensions are fixed at construction; cell values are mutable. Storage is
a float64 NumPy array owned by the matrix. Construction copies its input
and every operation that returns a Matrix returns fresh storage, so a
result never aliases an operand.

Operation outcomes are reported with sentinels, never exceptions:
    get / multiply / invert           -> None on failure
    set / set_content / add / subtract -> False on failure

Malformed input (ragged or empty tables, non-numeric cells, non-positive
dimensions) raises ValidationError / DimensionError.
"""

from __future__ import annotations

import operator
from typing import Any, TextIO
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import ValidationError
from densematrix.core.validation import (
    check_array,
    check_2d,
    check_not_empty,
    check_rectangular,
    check_positive_int,
    check_non_negative,
)
from densematrix.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    DEFAULT_PIVOT_TOLERANCE,
)
from densematrix.core.compute.linalg.gauss_jordan import gauss_jordan_inverse
from densematrix.matrix._format import format_table


def _as_table(content: ArrayLike | Matrix, name: str) -> NDArray[np.floating[Any]]:
    """Validate a rectangular table and return a fresh float64 copy."""
    if isinstance(content, Matrix):
        return content.to_numpy()
    check_rectangular(content, name)
    table = check_array(content, name)
    check_2d(table, name)
    check_not_empty(table, name)
    return table


def _check_matrix(value: Any, name: str) -> Matrix:
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(value).__name__}"
        )
    return value


class Matrix:
    """
    Dense rows x columns matrix of float64 values.

    Construction:
        Matrix([[1, 2], [3, 4]])
        Matrix.from_content([[1, 2], [3, 4]])
        Matrix.zeros(2, 3)
        Matrix.identity(3)

    Mutating operations (return bool):
        set, set_content, add, subtract

    Pure operations (return a new Matrix, or None on failure):
        multiply, scale, transpose, invert, copy

    No arithmetic operator overloads are defined; the method name says
    whether an operation mutates. Module-level pure versions of add and
    subtract live in densematrix.matrix.operations.
    """

    __slots__ = ('_content', '_rows', '_columns')

    # Mutable value: equality is by content, so instances are unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, content: ArrayLike | Matrix):
        table = _as_table(content, 'content')
        self._content = table
        self._rows, self._columns = table.shape

    @classmethod
    def from_content(cls, content: ArrayLike | Matrix) -> Matrix:
        """
        Build a matrix from a rectangular table.

        Parameters
        ----------
        content : array-like
            Non-empty sequence of equal-length, non-empty rows of real
            numbers, or a 2D numeric array. The table is copied.

        Raises
        ------
        DimensionError
            If rows differ in length or the input is not 2D.
        ValidationError
            If the table is empty or holds non-numeric values.
        """
        return cls(content)

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        """Zero-filled rows x columns matrix. Both dimensions must be >= 1."""
        rows = check_positive_int(rows, 'rows')
        columns = check_positive_int(columns, 'columns')
        return cls._wrap(np.zeros((rows, columns), dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_positive_int(n, 'n')
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def _wrap(cls, array: NDArray[np.floating[Any]]) -> Matrix:
        """Adopt a freshly computed array without validating or copying it."""
        obj = cls.__new__(cls)
        obj._content = np.ascontiguousarray(array, dtype=np.float64)
        obj._rows, obj._columns = obj._content.shape
        return obj

    # --- Shape and content ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    @property
    def content(self) -> list[list[float]]:
        """Copy of the table as nested lists."""
        return self.to_list()

    def to_list(self) -> list[list[float]]:
        return self._content.tolist()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the table as a float64 array."""
        return self._content.copy()

    def copy(self) -> Matrix:
        return Matrix._wrap(self._content.copy())

    # --- Element access ---

    def _in_bounds(self, row: int, column: int) -> bool:
        row = operator.index(row)
        column = operator.index(column)
        return 0 <= row < self._rows and 0 <= column < self._columns

    def get(self, row: int, column: int) -> float | None:
        """
        Value at (row, column), or None if the index is outside the matrix.

        Negative indices are outside the matrix; they never wrap.
        """
        if not self._in_bounds(row, column):
            return None
        return float(self._content[row, column])

    def set(self, row: int, column: int, value: float) -> bool:
        """Store value at (row, column). Returns False, unchanged, if out of bounds."""
        if not self._in_bounds(row, column):
            return False
        self._content[row, column] = float(value)
        return True

    def set_content(self, new_content: ArrayLike | Matrix) -> bool:
        """
        Overwrite the table with new_content if it fits.

        new_content is accepted when its row count is <= rows and its column
        count is <= columns. It is written into the top-left block; cells
        outside that block keep their values. Dimensions never change.

        Returns
        -------
        bool
            False, with the matrix unchanged, if new_content does not fit.

        Raises
        ------
        DimensionError, ValidationError
            If new_content is not a valid table (see from_content).
        """
        table = _as_table(new_content, 'new_content')
        n_rows, n_columns = table.shape
        if n_rows > self._rows or n_columns > self._columns:
            return False
        self._content[:n_rows, :n_columns] = table
        return True

    # --- In-place arithmetic ---

    def add(self, other: Matrix) -> bool:
        """
        Add other to this matrix cell-wise, in place.

        Returns False, leaving this matrix unchanged, if shapes differ.
        """
        other = _check_matrix(other, 'other')
        if other.shape != self.shape:
            return False
        self._content += other._content
        return True

    def subtract(self, other: Matrix) -> bool:
        """
        Subtract other from this matrix cell-wise, in place.

        Returns False, leaving this matrix unchanged, if shapes differ.
        """
        other = _check_matrix(other, 'other')
        if other.shape != self.shape:
            return False
        self._content -= other._content
        return True

    # --- Pure arithmetic ---

    def multiply(self, other: Matrix) -> Matrix | None:
        """
        Matrix product self · other.

        Result is rows x other.columns with
        result[i, j] = sum_k self[i, k] * other[k, j].
        Returns None if self.columns != other.rows.
        """
        other = _check_matrix(other, 'other')
        if self._columns != other._rows:
            return None
        return Matrix._wrap(self._content @ other._content)

    def scale(self, factor: float) -> Matrix:
        """New matrix with every cell multiplied by factor."""
        return Matrix._wrap(self._content * float(factor))

    def transpose(self) -> Matrix:
        """New columns x rows matrix with result[i, j] = self[j, i]."""
        return Matrix._wrap(self._content.T.copy())

    def invert(self, *, pivot_tol: float = DEFAULT_PIVOT_TOLERANCE) -> Matrix | None:
        """
        Inverse by Gauss-Jordan elimination, or None.

        None is returned for a non-square matrix and for any matrix whose
        elimination meets a pivot with |pivot| <= pivot_tol. Pivots are
        taken from the diagonal without row exchanges, so the default
        pivot_tol=0.0 rejects exactly-zero pivots only.

        For pivot values, condition number and timing use
        densematrix.inversion.inv().
        """
        pivot_tol = check_non_negative(pivot_tol, 'pivot_tol')
        outcome = gauss_jordan_inverse(self._content, pivot_tol=pivot_tol)
        if not outcome.succeeded:
            return None
        return Matrix._wrap(outcome.inverse)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._content, other._content)
        )

    def allclose(self, other: Matrix, tier: ToleranceTier = CPU_FP64) -> bool:
        """Same shape and every cell equal within the tier's rtol/atol."""
        other = _check_matrix(other, 'other')
        if other.shape != self.shape:
            return False
        return bool(np.allclose(
            self._content, other._content, rtol=tier.rtol, atol=tier.atol
        ))

    # --- Display ---

    def format(self, precision: int | None = None) -> str:
        """Text rendering, one row per line."""
        return format_table(self._content, precision=precision)

    def dump(self, file: TextIO | None = None, precision: int | None = None) -> None:
        """Print the formatted table to file (stdout by default)."""
        print(self.format(precision=precision), file=file)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, columns={self._columns}, "
            f"content={self.to_list()!r})"
        )
