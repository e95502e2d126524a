"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def matrix_a():
    """3x3 invertible integer matrix."""
    return Matrix([[1, 3, -2], [3, 1, 1], [-3, -4, 2]])


@pytest.fixture
def matrix_b():
    """3x3 integer matrix with the same shape as matrix_a."""
    return Matrix([[2, 3, -2], [3, 4, 1], [-3, -5, 6]])


@pytest.fixture
def column_vector():
    """3x1 column."""
    return Matrix([[5], [9], [2]])


@pytest.fixture
def well_conditioned(rng):
    """Random 6x6 matrix made diagonally dominant so every pivot is nonzero."""
    n = 6
    A = rng.standard_normal((n, n))
    A += np.diag(np.sum(np.abs(A), axis=1) + 1.0)
    return Matrix(A)
