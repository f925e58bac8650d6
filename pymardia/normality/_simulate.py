"""
Synthetic multivariate normal samples matching given moments.

With H the upper Cholesky factor of the covariance (H'H = cov) and U an
m x n matrix of independent standard normals, the rows of U H + mean are
multivariate normal with that mean and covariance.
"""

from __future__ import annotations

import logging
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymardia.core.compute.linalg import cholesky_cpu
from pymardia.core.exceptions import DimensionError, ValidationError
from pymardia.core.validation import check_1d, check_finite, check_square

logger = logging.getLogger(__name__)

SeedLike = int | np.random.Generator | None


def simulate_mvn(
    mean: NDArray[np.floating[Any]],
    cov: NDArray[np.floating[Any]],
    m: int,
    *,
    rng: SeedLike = None,
) -> NDArray[np.floating[Any]]:
    """
    Draw an m x n matrix whose rows are N(mean, cov).

    Parameters
    ----------
    mean : ndarray, shape (n,)
        Target mean vector.
    cov : ndarray, shape (n, n)
        Target covariance matrix. Must be positive definite.
    m : int
        Number of rows to draw.
    rng : int, numpy.random.Generator or None
        Random source. An int seeds a fresh generator; None draws from
        OS entropy.

    Raises
    ------
    NotPositiveDefiniteError
        If cov cannot be Cholesky-factored.
    DimensionError
        If mean and cov disagree in size.
    ValidationError
        If mean or cov holds NaN or Inf, or m < 1.
    """
    mean = np.asarray(mean, dtype=np.float64)
    cov = np.asarray(cov, dtype=np.float64)

    check_1d(mean, "mean")
    check_square(cov, "cov")
    n = mean.shape[0]
    if cov.shape != (n, n):
        raise DimensionError(f"cov: expected shape ({n}, {n}), got {cov.shape}")
    check_finite(mean, "mean")
    check_finite(cov, "cov")
    if m < 1:
        raise ValidationError(f"m: requires at least 1 row, got {m}")

    H = cholesky_cpu(cov, lower=False, matrix_name='covariance').factor
    generator = np.random.default_rng(rng)

    logger.debug("Simulating %d x %d multivariate normal sample", m, n)

    U = generator.standard_normal((m, n))
    return U @ H + mean
