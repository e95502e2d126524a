"""
Tests for the inversion pipeline: inv(), InversionDesign,
CPUGaussJordanBackend and InversionSolution.
"""

import warnings

import numpy as np
import pytest

from densematrix import Matrix, inv
from densematrix.core.exceptions import (
    NonSquareMatrixError,
    SingularMatrixError,
    ValidationError,
)
from densematrix.core.protocols import Backend
from densematrix.inversion import InversionDesign, InversionSolution
from densematrix.inversion.backends.cpu import CPUGaussJordanBackend


# Pivot 1 is 2**-52 after elimination: invertible, but barely.
NEAR_SINGULAR = [[1.0, 1.0], [1.0, 1.0 + np.finfo(np.float64).eps]]

# Diagonal, so the singular values (and cond = 1e20) are exact.
ILL_CONDITIONED = [[1.0, 0.0], [0.0, 1e-20]]


# ═══════════════════════════════════════════════════════════════════════
# InversionDesign
# ═══════════════════════════════════════════════════════════════════════


class TestDesign:

    def test_from_matrix(self, matrix_a):
        design = InversionDesign.from_matrix(matrix_a)
        assert design.shape == (3, 3)
        assert design.is_square
        np.testing.assert_array_equal(design.data, matrix_a.to_numpy())

    def test_from_table(self):
        design = InversionDesign.from_matrix([[1, 2, 3], [4, 5, 6]])
        assert design.n_rows == 2
        assert design.n_columns == 3
        assert not design.is_square

    def test_data_read_only(self, matrix_a):
        design = InversionDesign.from_matrix(matrix_a)
        with pytest.raises(ValueError):
            design.data[0, 0] = 5.0

    def test_copy_of_matrix(self, matrix_a):
        design = InversionDesign.from_matrix(matrix_a)
        matrix_a.set(0, 0, 50.0)
        assert design.data[0, 0] == 1.0

    def test_ragged_table_rejected(self):
        with pytest.raises(ValidationError):
            InversionDesign.from_matrix([[1, 2], [3]])

    def test_repr(self):
        assert repr(InversionDesign.from_matrix([[1.0]])) == "InversionDesign(n_rows=1, n_columns=1)"


# ═══════════════════════════════════════════════════════════════════════
# Backend
# ═══════════════════════════════════════════════════════════════════════


class TestBackend:

    def test_satisfies_protocol(self):
        assert isinstance(CPUGaussJordanBackend(), Backend)

    def test_name(self):
        assert CPUGaussJordanBackend().name == 'cpu_gauss_jordan'

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValidationError, match="pivot_tol"):
            CPUGaussJordanBackend(pivot_tol=-1e-9)

    def test_result_info(self, matrix_a):
        result = CPUGaussJordanBackend().solve(InversionDesign.from_matrix(matrix_a))
        assert result.backend_name == 'cpu_gauss_jordan'
        assert result.info['method'] == 'gauss_jordan'
        assert result.info['status'] == 'ok'
        assert result.info['n_pivots'] == 3
        assert result.info['pivot_tol'] == 0.0
        assert result.info['tolerance_tier'] == 'cpu_fp64'
        assert result.info['condition_number'] > 1.0
        assert result.warnings == ()

    def test_timing_sections(self, matrix_a):
        result = CPUGaussJordanBackend().solve(InversionDesign.from_matrix(matrix_a))
        assert {'total_seconds', 'elimination', 'diagnostics'} <= set(result.timing)

    def test_non_square_has_no_condition_number(self):
        result = CPUGaussJordanBackend().solve(InversionDesign.from_matrix([[1, 2, 3]]))
        assert result.params.status == 'non_square'
        assert result.params.condition_number is None
        assert result.info['min_abs_pivot'] is None

    def test_nan_operand_skips_condition_number(self):
        result = CPUGaussJordanBackend().solve(
            InversionDesign.from_matrix([[float('nan'), 0.0], [0.0, 1.0]])
        )
        assert result.params.condition_number is None


# ═══════════════════════════════════════════════════════════════════════
# inv() and InversionSolution
# ═══════════════════════════════════════════════════════════════════════


class TestInv:

    def test_success(self, matrix_a):
        solution = inv(matrix_a)
        assert isinstance(solution, InversionSolution)
        assert solution.succeeded
        assert solution.status == 'ok'
        assert solution.pivot_index is None
        assert solution.inverse.allclose(matrix_a.invert())
        assert solution.unwrap() == solution.inverse

    def test_agrees_with_matrix_invert(self, well_conditioned):
        assert inv(well_conditioned).inverse == well_conditioned.invert()

    def test_accepts_table(self):
        assert inv([[2.0]]).inverse == Matrix([[0.5]])

    def test_accepts_design(self, matrix_a):
        design = InversionDesign.from_matrix(matrix_a)
        assert inv(design).succeeded

    def test_pivots(self, matrix_a):
        solution = inv(matrix_a)
        # Product of pivots is det(A) = -3.
        assert np.prod(solution.pivots) == pytest.approx(-3.0)

    def test_inverse_is_fresh_each_access(self, matrix_a):
        solution = inv(matrix_a)
        first = solution.inverse
        first.set(0, 0, 99.0)
        assert solution.inverse.get(0, 0) != 99.0

    def test_unknown_backend(self, matrix_a):
        with pytest.raises(ValidationError, match="Unknown backend"):
            inv(matrix_a, backend='gpu')

    def test_singular(self):
        solution = inv(Matrix([[1, 0], [0, 0]]))
        assert not solution.succeeded
        assert solution.status == 'singular'
        assert solution.inverse is None
        assert solution.pivot_index == 1
        assert solution.condition_number == float('inf') or solution.condition_number > 1e15

    def test_singular_unwrap_raises(self):
        solution = inv(Matrix([[0, 1], [1, 0]]))
        with pytest.raises(SingularMatrixError) as exc_info:
            solution.unwrap()
        assert exc_info.value.pivot_index == 0
        assert exc_info.value.matrix_name == 'A'
        # Invertible with a row swap, so well conditioned.
        assert exc_info.value.condition_number == pytest.approx(1.0)

    def test_non_square_unwrap_raises(self):
        solution = inv(Matrix.zeros(2, 3))
        assert solution.status == 'non_square'
        assert solution.inverse is None
        with pytest.raises(NonSquareMatrixError, match="2x3") as exc_info:
            solution.unwrap()
        assert exc_info.value.shape == (2, 3)

    def test_pivot_tol(self):
        solution = inv(Matrix([[1e-20]]), pivot_tol=1e-12)
        assert solution.status == 'singular'
        assert solution.info['pivot_tol'] == 1e-12


class TestWarnings:

    def test_near_singular_warns(self):
        with pytest.warns(RuntimeWarning, match="near-singular"):
            solution = inv(NEAR_SINGULAR)
        assert solution.succeeded
        assert solution.warnings
        assert solution.info['tolerance_tier'] == 'cpu_fp64_ill_conditioned'

    def test_ill_conditioned_recorded(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            solution = inv(ILL_CONDITIONED)
        assert any("ill-conditioned" in w for w in solution.warnings)

    def test_well_conditioned_silent(self, matrix_a):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            solution = inv(matrix_a)
        assert solution.warnings == ()

    def test_failed_inversion_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            solution = inv(Matrix.zeros(2, 2))
        assert solution.warnings == ()


class TestSummary:

    def test_success_summary(self, matrix_a):
        text = inv(matrix_a).summary()
        assert "Gauss-Jordan Inversion" in text
        assert "Status:           ok" in text
        assert "Operand:          3 x 3" in text
        assert "Inverse:" in text

    def test_failure_summary(self):
        text = inv(Matrix([[1, 0], [0, 0]])).summary()
        assert "Status:           singular" in text
        assert "Failed at pivot:  1" in text
        assert "Inverse:" not in text

    def test_repr(self, matrix_a):
        assert repr(inv(matrix_a)) == "InversionSolution(shape=(3, 3), status='ok')"
