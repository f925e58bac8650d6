"""
Mardia's multivariate skewness (A) and kurtosis (B) statistics.

With y(i1, i2) = (x_i1 - mean)' C^{-1} (x_i2 - mean):

    S = sum over all ordered pairs of y^3
    k = sum over i of y(i, i)^2
    A = S / (6m)
    B = sqrt(m / (8 n (n+2))) * (k/m - n (n+2))

Two evaluation methods give the same numbers:

    'pairwise'  visits each unordered pair i1 <= i2 once, one linear
                solve per pair, weighting off-diagonal pairs by 2.
    'gram'      forms the m x m Mahalanobis Gram matrix, in row blocks,
                from a single Cholesky factorisation and sums it directly.

Reference:
    Mardia, K.V. (1970). Measures of multivariate skewness and kurtosis
    with applications. Biometrika, 57(3), 519-530.
"""

from __future__ import annotations

import logging
import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymardia.core.compute.linalg import check_full_rank
from pymardia.core.exceptions import DimensionError, ValidationError
from pymardia.normality._common import MardiaStatistics, VALID_METHODS
from pymardia.normality._mahalanobis import iter_gram_blocks, quadratic_form

logger = logging.getLogger(__name__)


def kurtosis_statistic(kurtosis_sum: float, m: int, n: int) -> float:
    """Standardised kurtosis B from the raw diagonal sum k."""
    scale = math.sqrt(m / (8.0 * n * (n + 2)))
    return scale * (kurtosis_sum / m - n * (n + 2))


def _pairwise_sums(
    Xc: NDArray[np.floating[Any]],
    cov: NDArray[np.floating[Any]],
) -> tuple[float, float]:
    """Skewness and kurtosis sums by the literal i1 <= i2 double loop."""
    m = Xc.shape[0]
    s = 0.0
    k = 0.0
    for i1 in range(m):
        x1 = Xc[i1]
        for i2 in range(i1, m):
            y = quadratic_form(cov, x1, Xc[i2], check_rank=False)
            y3 = y ** 3
            if i2 > i1:
                s += 2.0 * y3
            else:
                s += y3
                k += y ** 2
    return s, k


def _gram_sums(
    Xc: NDArray[np.floating[Any]],
    cov: NDArray[np.floating[Any]],
    block_size: int = 1024,
) -> tuple[float, float]:
    """Skewness and kurtosis sums from row blocks of the Mahalanobis Gram matrix."""
    s = 0.0
    k = 0.0
    for start, G in iter_gram_blocks(cov, Xc, block_size=block_size, check_rank=False):
        rows = np.arange(G.shape[0])
        diag = G[rows, start + rows]
        s += float(np.sum(G ** 3))
        k += float(np.sum(diag ** 2))
    return s, k


def mardia_statistics(
    X: NDArray[np.floating[Any]],
    mean: NDArray[np.floating[Any]],
    cov: NDArray[np.floating[Any]],
    *,
    method: str = "gram",
    check_rank: bool = True,
) -> MardiaStatistics:
    """
    Compute Mardia's skewness A, kurtosis B and the raw kurtosis sum k.

    Parameters
    ----------
    X : ndarray, shape (m, n)
        Sample matrix.
    mean : ndarray, shape (n,)
        Column means of X.
    cov : ndarray, shape (n, n)
        Population covariance of X.
    method : str
        'gram' (default) or 'pairwise'.
    check_rank : bool
        Verify cov has full numerical rank first. Callers that already
        ran check_full_rank on cov pass False.

    Raises
    ------
    SingularMatrixError
        If cov is rank-deficient (m <= n or collinear columns).
    DimensionError
        If X, mean and cov have inconsistent shapes.
    ValidationError
        If method is unknown.
    """
    if method not in VALID_METHODS:
        raise ValidationError(
            f"method must be one of {VALID_METHODS}, got {method!r}"
        )

    X = np.asarray(X, dtype=np.float64)
    mean = np.asarray(mean, dtype=np.float64)
    cov = np.asarray(cov, dtype=np.float64)

    if X.ndim != 2:
        raise DimensionError(f"X: expected 2D array, got {X.ndim}D")
    m, n = X.shape
    if mean.shape != (n,):
        raise DimensionError(f"mean: expected shape ({n},), got {mean.shape}")
    if cov.shape != (n, n):
        raise DimensionError(f"cov: expected shape ({n}, {n}), got {cov.shape}")
    if m < 1:
        raise ValidationError(f"X: requires at least 1 observation, got {m}")

    # One rank check covers every pair below
    if check_rank:
        check_full_rank(cov, matrix_name='covariance')

    logger.debug("Mardia statistics: m=%d, n=%d, method=%s", m, n, method)

    Xc = X - mean
    if method == "pairwise":
        s, k = _pairwise_sums(Xc, cov)
    else:
        s, k = _gram_sums(Xc, cov)

    a = s / (6.0 * m)
    b = kurtosis_statistic(k, m, n)

    return MardiaStatistics(skewness=a, kurtosis=b, kurtosis_sum=k)
