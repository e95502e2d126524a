"""
Shared compute infrastructure for densematrix.

This module provides timing utilities, tolerance tiers and the linear
algebra kernels behind the Matrix type and the inversion pipeline.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and pivot/condition thresholds
    linalg: Linear algebra kernels (Gauss-Jordan inversion)
"""

from densematrix.core.compute.timing import Timer
from densematrix.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    DEFAULT_PIVOT_TOLERANCE,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "DEFAULT_PIVOT_TOLERANCE",
    "select_tolerance",
]
