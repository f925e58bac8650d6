"""
Mahalanobis quadratic forms u' C^{-1} v.

The covariance is never inverted explicitly. quadratic_form() solves
C y = v and returns u . y; mahalanobis_gram() does the same for every
pair of rows at once, reusing one Cholesky factorisation.
"""

from __future__ import annotations

from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray

from pymardia.core.compute.linalg import (
    check_full_rank,
    cho_solve_cpu,
    solve_spd_cpu,
)
from pymardia.core.exceptions import DimensionError


def _check_shapes(cov: NDArray, n: int, name: str) -> None:
    if cov.ndim != 2 or cov.shape != (n, n):
        raise DimensionError(
            f"{name}: covariance shape {cov.shape} does not match "
            f"vector length {n}"
        )


def quadratic_form(
    cov: NDArray[np.floating[Any]],
    u: NDArray[np.floating[Any]],
    v: NDArray[np.floating[Any]],
    *,
    check_rank: bool = True,
) -> float:
    """
    Compute u' cov^{-1} v by solving cov y = v.

    Parameters
    ----------
    cov : ndarray, shape (n, n)
        Symmetric positive definite covariance matrix.
    u, v : ndarray, shape (n,)
        Centred row vectors.
    check_rank : bool
        Verify cov has full numerical rank first. Callers that evaluate
        many pairs check once up front and pass False.

    Raises
    ------
    SingularMatrixError
        If cov is singular or rank-deficient.
    DimensionError
        If the shapes disagree.
    """
    cov = np.asarray(cov, dtype=np.float64)
    u = np.asarray(u, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    if u.shape != v.shape or u.ndim != 1:
        raise DimensionError(
            f"u and v must be 1D vectors of equal length, got {u.shape} and {v.shape}"
        )
    _check_shapes(cov, u.shape[0], "quadratic_form")

    if check_rank:
        check_full_rank(cov, matrix_name='covariance')

    y = solve_spd_cpu(cov, v, matrix_name='covariance')
    return float(u @ y)


def iter_gram_blocks(
    cov: NDArray[np.floating[Any]],
    Xc: NDArray[np.floating[Any]],
    *,
    block_size: int = 1024,
    check_rank: bool = True,
) -> Iterator[tuple[int, NDArray[np.floating[Any]]]]:
    """
    Yield row blocks of the Mahalanobis Gram matrix.

    Each item is (start, G[start:start + block_size, :]), so the full
    m x m matrix never has to be held in memory at once.

    Raises
    ------
    SingularMatrixError
        If cov is singular or rank-deficient.
    """
    cov = np.asarray(cov, dtype=np.float64)
    Xc = np.asarray(Xc, dtype=np.float64)
    _check_shapes(cov, Xc.shape[1], "mahalanobis_gram")
    if block_size < 1:
        raise ValueError(f"block_size must be >= 1, got {block_size}")

    if check_rank:
        check_full_rank(cov, matrix_name='covariance')

    # Y = cov^{-1} Xc', shape (n, m); one factorisation for all rows
    Y = cho_solve_cpu(cov, Xc.T, matrix_name='covariance')

    m = Xc.shape[0]
    for start in range(0, m, block_size):
        stop = min(start + block_size, m)
        yield start, Xc[start:stop] @ Y


def mahalanobis_gram(
    cov: NDArray[np.floating[Any]],
    Xc: NDArray[np.floating[Any]],
    *,
    check_rank: bool = True,
) -> NDArray[np.floating[Any]]:
    """
    Matrix of Mahalanobis cross-products G[i, j] = Xc[i]' cov^{-1} Xc[j].

    Parameters
    ----------
    cov : ndarray, shape (n, n)
        Symmetric positive definite covariance matrix.
    Xc : ndarray, shape (m, n)
        Centred sample matrix.

    Returns
    -------
    ndarray, shape (m, m)
        Symmetric Gram matrix. Its diagonal holds the squared Mahalanobis
        distances of each observation from the mean.

    Raises
    ------
    SingularMatrixError
        If cov is singular or rank-deficient.
    """
    blocks = [
        block for _, block in
        iter_gram_blocks(cov, Xc, block_size=max(1, len(Xc)), check_rank=check_rank)
    ]
    G = np.vstack(blocks) if blocks else np.empty((0, 0))
    return 0.5 * (G + G.T)
