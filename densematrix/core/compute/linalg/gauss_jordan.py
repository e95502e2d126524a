"""
Gauss-Jordan matrix inversion.

Inverts a square matrix by row-reducing the augmented table [A | I] until
the left half is the identity; the right half is then A⁻¹.

Pivots are taken from the diagonal in order, with no row exchanges. A pivot
whose magnitude is at most pivot_tol (exactly 0.0 by default) stops the
elimination and the matrix is reported singular. Matrices such as
[[0, 1], [1, 0]] that only need a row swap are therefore rejected too.
"""

from dataclasses import dataclass, field
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray

from densematrix.core.compute.tolerances import DEFAULT_PIVOT_TOLERANCE


InversionStatus = Literal['ok', 'non_square', 'singular']


@dataclass(frozen=True)
class GaussJordanResult:
    """
    Outcome of Gauss-Jordan inversion.

    Attributes:
        inverse: A⁻¹ (n x n), or None if inversion failed
        status: 'ok', 'non_square' or 'singular'
        pivot_index: Row of the first rejected pivot (None unless singular)
        pivots: Pivot values used, in elimination order. On failure the
            rejected pivot is the last entry.
    """
    inverse: NDArray[np.floating[Any]] | None
    status: InversionStatus
    pivot_index: int | None = None
    pivots: NDArray[np.floating[Any]] = field(
        default_factory=lambda: np.empty(0, dtype=np.float64)
    )

    @property
    def succeeded(self) -> bool:
        return self.status == 'ok'


def augment_with_identity(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Build the n x 2n working table [A | I].

    Always returns a fresh float64 array; A is never modified.
    """
    n = A.shape[0]
    augmented = np.zeros((n, 2 * n), dtype=np.float64)
    augmented[:, :n] = A
    augmented[:, n:] = np.eye(n, dtype=np.float64)
    return augmented


def gauss_jordan_inverse(
    A: NDArray[np.floating[Any]],
    pivot_tol: float = DEFAULT_PIVOT_TOLERANCE,
) -> GaussJordanResult:
    """
    Invert a matrix by Gauss-Jordan elimination.

    For each pivot i = 0..n-1:
        1. p = aug[i, i]; stop with status 'singular' if |p| <= pivot_tol
        2. aug[i, :] /= p
        3. aug[k, :] -= aug[k, i] * aug[i, :] for every k != i

    The row updates in step 3 are done for all k at once with an outer
    product. Row i is fixed during the step, so every cell sees the same
    operations as the row-by-row loop.

    Args:
        A: Matrix to invert (2D)
        pivot_tol: Largest pivot magnitude treated as zero. 0.0 means only
            an exact zero pivot is rejected.

    Returns:
        GaussJordanResult. The input array is never modified and no partial
        elimination state is returned on failure.
    """
    A = np.asarray(A, dtype=np.float64)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        return GaussJordanResult(inverse=None, status='non_square')

    n = A.shape[0]
    augmented = augment_with_identity(A)
    pivots = np.empty(n, dtype=np.float64)

    for i in range(n):
        pivot = augmented[i, i]
        pivots[i] = pivot
        if abs(pivot) <= pivot_tol:
            return GaussJordanResult(
                inverse=None,
                status='singular',
                pivot_index=i,
                pivots=pivots[:i + 1].copy(),
            )

        augmented[i, :] /= pivot

        multipliers = augmented[:, i].copy()
        multipliers[i] = 0.0
        augmented -= np.outer(multipliers, augmented[i, :])

    return GaussJordanResult(
        inverse=augmented[:, n:].copy(),
        status='ok',
        pivots=pivots,
    )
