"""
Sample mean and population covariance.

The covariance uses divisor m (not m - 1): Mardia's statistics are
defined in terms of the maximum likelihood covariance estimate.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymardia.core.exceptions import ValidationError
from pymardia.core.validation import check_2d
from pymardia.normality._common import Moments


def estimate_moments(X: NDArray[np.floating[Any]]) -> Moments:
    """
    Column means and population covariance of a sample matrix.

    Parameters
    ----------
    X : ndarray, shape (m, n)
        Sample matrix, rows are observations.

    Returns
    -------
    Moments
        mean of shape (n,) and covariance (1/m) Xc' Xc of shape (n, n),
        where Xc is X with the mean subtracted from every row.

    Raises
    ------
    ValidationError
        If X has no rows or no columns.
    """
    X = np.asarray(X, dtype=np.float64)
    check_2d(X, "X")
    m, n = X.shape
    if m < 1:
        raise ValidationError(f"X: requires at least 1 observation, got {m}")
    if n < 1:
        raise ValidationError(f"X: requires at least 1 variable, got {n}")

    mean = X.mean(axis=0)
    Xc = X - mean
    cov = (Xc.T @ Xc) / m
    # Exact symmetry; the matmul can leave last-bit asymmetry
    cov = 0.5 * (cov + cov.T)

    return Moments(mean=mean, covariance=cov)
