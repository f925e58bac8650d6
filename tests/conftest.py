"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def cross_data():
    """Four points on the axes of the plane: mean 0, covariance 0.5 I."""
    return np.array([
        [1.0, 0.0],
        [0.0, 1.0],
        [-1.0, 0.0],
        [0.0, -1.0],
    ])


@pytest.fixture
def normal_data(rng):
    """Correlated trivariate normal sample."""
    cov = np.array([
        [2.0, 0.6, 0.3],
        [0.6, 1.0, -0.2],
        [0.3, -0.2, 0.5],
    ])
    return rng.multivariate_normal([1.0, -2.0, 0.5], cov, size=300)


@pytest.fixture
def collinear_data(rng):
    """Dataset with perfect collinearity (should fail)."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1 + x2  # Perfect collinearity
    return np.column_stack([x1, x2, x3])
