"""
Linear algebra kernels for densematrix.

All functions follow these conventions:
    - Kernels take and return NumPy arrays, never Matrix objects
    - Inputs are never modified
    - Each operation returns a structured result dataclass
    - Expected failures (singular, non-square) are reported in the result,
      not raised

Submodules:
    gauss_jordan: Inversion by Gauss-Jordan elimination
"""

from densematrix.core.compute.linalg.gauss_jordan import (
    GaussJordanResult,
    InversionStatus,
    augment_with_identity,
    gauss_jordan_inverse,
)

__all__ = [
    # Gauss-Jordan inversion
    "GaussJordanResult",
    "InversionStatus",
    "augment_with_identity",
    "gauss_jordan_inverse",
]
