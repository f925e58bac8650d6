"""
Tests for the Cholesky, spectrum and SPD solve kernels.
"""

import numpy as np
import pytest

from pymardia.core.compute.linalg import (
    check_full_rank,
    cho_solve_cpu,
    cholesky_cpu,
    solve_spd_cpu,
    symmetric_spectrum,
)
from pymardia.core.exceptions import NotPositiveDefiniteError, SingularMatrixError


SPD = np.array([
    [4.0, 2.0, 0.6],
    [2.0, 2.0, 0.5],
    [0.6, 0.5, 3.0],
])


class TestCholesky:

    def test_upper_factor(self):
        H = cholesky_cpu(SPD).factor
        np.testing.assert_allclose(H.T @ H, SPD, rtol=1e-12)
        np.testing.assert_allclose(H, np.triu(H))

    def test_lower_factor(self):
        res = cholesky_cpu(SPD, lower=True)
        assert res.lower is True
        np.testing.assert_allclose(res.factor @ res.factor.T, SPD, rtol=1e-12)

    def test_not_positive_definite(self):
        A = np.array([[1.0, 2.0], [2.0, 1.0]])  # eigenvalues 3, -1
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky_cpu(A, matrix_name='covariance')
        assert exc_info.value.matrix_name == 'covariance'
        assert exc_info.value.min_eigenvalue == pytest.approx(-1.0)

    def test_zero_matrix(self):
        with pytest.raises(NotPositiveDefiniteError):
            cholesky_cpu(np.zeros((2, 2)))


class TestSpectrum:

    def test_full_rank(self):
        info = symmetric_spectrum(np.diag([1.0, 4.0]))
        assert info.rank == 2
        assert info.condition_number == pytest.approx(4.0)

    def test_rank_deficient(self):
        info = symmetric_spectrum(np.array([[1.0, 1.0], [1.0, 1.0]]))
        assert info.rank == 1
        assert info.condition_number == float('inf')

    def test_zero_matrix(self):
        assert symmetric_spectrum(np.zeros((3, 3))).rank == 0

    def test_check_full_rank_raises(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            check_full_rank(np.zeros((2, 2)), matrix_name='covariance')
        assert exc_info.value.rank == 0
        assert exc_info.value.expected_rank == 2


class TestSolve:

    def test_solve_vector(self, rng):
        b = rng.standard_normal(3)
        y = solve_spd_cpu(SPD, b)
        np.testing.assert_allclose(SPD @ y, b, rtol=1e-10)

    def test_cho_solve_many(self, rng):
        B = rng.standard_normal((3, 7))
        Y = cho_solve_cpu(SPD, B)
        np.testing.assert_allclose(SPD @ Y, B, rtol=1e-10, atol=1e-12)

    def test_solve_singular(self):
        with pytest.raises(SingularMatrixError):
            solve_spd_cpu(np.zeros((2, 2)), np.ones(2))

    def test_cho_solve_singular(self):
        with pytest.raises(SingularMatrixError):
            cho_solve_cpu(np.zeros((2, 2)), np.ones((2, 3)))
