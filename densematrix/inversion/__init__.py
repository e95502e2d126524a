"""
Matrix inversion with diagnostics.

Public API:
    inv(matrix)  - Gauss-Jordan inversion returning an InversionSolution
                   (inverse, status, pivots, condition number, timing)
"""

from densematrix.inversion.design import InversionDesign
from densematrix.inversion.solution import InversionParams, InversionSolution
from densematrix.inversion.solvers import inv

__all__ = [
    "inv",
    "InversionDesign",
    "InversionParams",
    "InversionSolution",
]
