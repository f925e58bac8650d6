"""
Asymptotic null distributions for Mardia's statistics.

Under multivariate normality A is asymptotically chi-square with
n(n+1)(n+2)/6 degrees of freedom and B is asymptotically N(0, 1).
"""

from __future__ import annotations

import math

from scipy import stats

from pymardia.core.exceptions import ValidationError
from pymardia.normality._common import SkewnessReference


def skewness_df(n: int) -> float:
    """Chi-square degrees of freedom of A for n variables."""
    return n * (n + 1) * (n + 2) / 6.0


def reference_distribution(n: int, m: int, a: float) -> SkewnessReference:
    """
    Mean, standard deviation, z-score and p-value of A under the null.

    m is accepted so the signature matches the other stages; the
    asymptotic chi-square reference does not depend on it.
    """
    if n < 1:
        raise ValidationError(f"n: requires at least 1 variable, got {n}")
    if m < 1:
        raise ValidationError(f"m: requires at least 1 observation, got {m}")

    a_mu = skewness_df(n)
    a_sigma = math.sqrt(2.0 * a_mu)
    a_z = (a - a_mu) / a_sigma
    p_value = float(stats.chi2.sf(a, a_mu))

    return SkewnessReference(
        mean=a_mu,
        sd=a_sigma,
        z=a_z,
        df=a_mu,
        p_value=p_value,
    )


def kurtosis_p_value(b: float) -> float:
    """Two-sided p-value of B against N(0, 1)."""
    return float(2.0 * stats.norm.sf(abs(b)))
