"""
Common types for Mardia's multivariate normality test.

Defines MardiaParams (the immutable result record) and the intermediate
records produced by each pipeline stage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


VALID_METHODS = ("gram", "pairwise")

# Below this many observations per variable the chi-square / normal
# approximations for A and B are rough; reported as a warning.
MIN_OBSERVATIONS_PER_VARIABLE = 20


@dataclass(frozen=True)
class Moments:
    """Sample mean (n,) and population covariance (n, n)."""
    mean: NDArray[np.floating[Any]]
    covariance: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class MardiaStatistics:
    """
    Raw Mardia statistics.

    Attributes
    ----------
    skewness : float
        A = S / (6m), where S sums cubed Mahalanobis cross-products over
        all ordered sample pairs.
    kurtosis : float
        B = sqrt(m / (8 n (n+2))) * (k/m - n (n+2)).
    kurtosis_sum : float
        k, the sum of squared diagonal Mahalanobis distances.
    """
    skewness: float
    kurtosis: float
    kurtosis_sum: float


@dataclass(frozen=True)
class SkewnessReference:
    """
    Asymptotic null distribution of the skewness statistic.

    A is asymptotically chi-square with `df` degrees of freedom, so its
    mean is df and its standard deviation sqrt(2 df).
    """
    mean: float
    sd: float
    z: float
    df: float
    p_value: float


@dataclass(frozen=True)
class MardiaParams:
    """
    Parameter payload for Mardia's test.

    Attributes
    ----------
    mean : ndarray
        Column means of the analysed matrix, shape (n,).
    covariance : ndarray
        Population covariance of the analysed matrix, shape (n, n).
    skewness : float
        Skewness statistic A.
    skewness_mean : float
        Asymptotic mean of A under multivariate normality, n(n+1)(n+2)/6.
    skewness_sd : float
        Asymptotic standard deviation of A, sqrt(2 * skewness_mean).
    skewness_z : float
        (A - skewness_mean) / skewness_sd.
    skewness_df : float
        Chi-square degrees of freedom for A (equal to skewness_mean).
    skewness_p_value : float
        Upper-tail chi-square p-value of A.
    kurtosis : float
        Kurtosis statistic B, referenced against N(0, 1).
    kurtosis_sum : float
        Raw sum of squared diagonal Mahalanobis distances.
    kurtosis_p_value : float
        Two-sided standard normal p-value of B.
    n_observations : int
        Number of rows analysed (m).
    n_variables : int
        Number of columns analysed (n).
    simulated : bool
        True if the analysed matrix was a synthetic draw.
    """
    mean: NDArray[np.floating[Any]]
    covariance: NDArray[np.floating[Any]]
    skewness: float
    skewness_mean: float
    skewness_sd: float
    skewness_z: float
    skewness_df: float
    skewness_p_value: float
    kurtosis: float
    kurtosis_sum: float
    kurtosis_p_value: float
    n_observations: int
    n_variables: int
    simulated: bool = False
