"""
Tolerance tiers for numerical comparison.

Gauss-Jordan inversion in double precision reproduces a well-conditioned
inverse to roughly machine precision; ill-conditioned operands lose about
log10(cond) digits and need a looser tier.

Used by Matrix.allclose(), the inversion diagnostics and the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned problems in double precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Ill-conditioned problems (cond > ILL_CONDITIONED_THRESHOLD)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

ILL_CONDITIONED_THRESHOLD = 1e4

# Past 1/eps the inverse carries no correct digits.
SINGULAR_CONDITION_THRESHOLD = 1.0 / np.finfo(np.float64).eps

# Exact zero: a pivot is rejected only when it compares equal to 0.0.
DEFAULT_PIVOT_TOLERANCE = 0.0


def select_tolerance(condition_number: float | None = None) -> ToleranceTier:
    """Select the tolerance tier for an operand of the given condition number."""
    if condition_number is not None and condition_number > ILL_CONDITIONED_THRESHOLD:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
