"""
Tests for the synthetic multivariate normal sampler.
"""

import numpy as np
import pytest

from pymardia.core.exceptions import (
    DimensionError,
    NotPositiveDefiniteError,
    ValidationError,
)
from pymardia.normality import simulate
from pymardia.normality._simulate import simulate_mvn


MEAN = np.array([1.0, -2.0])
COV = np.array([[2.0, 0.8], [0.8, 1.0]])


class TestMoments:
    """Sample moments of a large draw recover the targets."""

    def test_identity_round_trip(self):
        X = simulate_mvn(np.zeros(2), np.eye(2), 100_000, rng=2024)
        np.testing.assert_allclose(X.mean(axis=0), [0.0, 0.0], atol=0.02)
        np.testing.assert_allclose(np.cov(X, rowvar=False, bias=True), np.eye(2), atol=0.05)

    def test_large_sample_moments(self):
        X = simulate_mvn(MEAN, COV, 100_000, rng=123)
        assert X.shape == (100_000, 2)
        np.testing.assert_allclose(X.mean(axis=0), MEAN, atol=0.02)
        np.testing.assert_allclose(np.cov(X, rowvar=False, bias=True), COV, atol=0.05)

    def test_diagonal_covariance(self):
        cov = np.diag([4.0, 0.25, 1.0])
        X = simulate_mvn(np.zeros(3), cov, 50_000, rng=7)
        np.testing.assert_allclose(X.std(axis=0), [2.0, 0.5, 1.0], rtol=0.03)

    def test_single_row(self):
        X = simulate_mvn(MEAN, COV, 1, rng=0)
        assert X.shape == (1, 2)
        assert np.all(np.isfinite(X))


class TestSeeding:

    def test_same_seed_same_sample(self):
        np.testing.assert_array_equal(
            simulate_mvn(MEAN, COV, 50, rng=99),
            simulate_mvn(MEAN, COV, 50, rng=99),
        )

    def test_different_seeds_differ(self):
        a = simulate_mvn(MEAN, COV, 50, rng=1)
        b = simulate_mvn(MEAN, COV, 50, rng=2)
        assert not np.array_equal(a, b)

    def test_generator_accepted(self):
        a = simulate_mvn(MEAN, COV, 20, rng=np.random.default_rng(5))
        b = simulate_mvn(MEAN, COV, 20, rng=np.random.default_rng(5))
        np.testing.assert_array_equal(a, b)

    def test_generator_state_advances(self, rng):
        a = simulate_mvn(MEAN, COV, 20, rng=rng)
        b = simulate_mvn(MEAN, COV, 20, rng=rng)
        assert not np.array_equal(a, b)

    def test_public_entry_point(self):
        np.testing.assert_array_equal(
            simulate(MEAN, COV, 30, seed=11),
            simulate_mvn(MEAN, COV, 30, rng=11),
        )


class TestErrors:

    def test_not_positive_definite(self):
        cov = np.array([[1.0, 2.0], [2.0, 1.0]])
        with pytest.raises(NotPositiveDefiniteError):
            simulate_mvn(MEAN, cov, 10, rng=0)

    def test_mean_cov_mismatch(self):
        with pytest.raises(DimensionError):
            simulate_mvn(np.zeros(3), COV, 10)

    def test_mean_not_1d(self):
        with pytest.raises(DimensionError):
            simulate_mvn(np.zeros((2, 1)), COV, 10)

    def test_zero_rows(self):
        with pytest.raises(ValidationError, match="at least 1 row"):
            simulate_mvn(MEAN, COV, 0)

    def test_nan_covariance(self):
        cov = np.array([[np.nan, 0.0], [0.0, 1.0]])
        with pytest.raises(ValidationError, match="cov: contains non-finite values"):
            simulate(np.zeros(2), cov, 5, seed=0)

    def test_inf_mean(self):
        with pytest.raises(ValidationError, match="mean: contains non-finite values"):
            simulate([0.0, np.inf], COV, 5, seed=0)

    def test_rectangular_covariance(self):
        with pytest.raises(DimensionError, match="square"):
            simulate_mvn(np.zeros(2), np.ones((2, 3)), 5)
