"""
Mardia's multivariate normality test.

Public API:
    mardia_test(data)          - Skewness A and kurtosis B with reference values
    run(config, source)        - Test driven by a MardiaConfig
    moments(data)              - Mean and population covariance
    simulate(mean, cov, m)     - Synthetic multivariate normal draw
"""

from pymardia.normality.solvers import mardia_test, run, moments, simulate
from pymardia.normality.config import MardiaConfig
from pymardia.normality.design import MardiaDesign
from pymardia.normality._common import MardiaParams, MardiaStatistics, Moments
from pymardia.normality.solution import MardiaSolution

__all__ = [
    "mardia_test",
    "run",
    "moments",
    "simulate",
    "MardiaConfig",
    "MardiaDesign",
    "MardiaParams",
    "MardiaStatistics",
    "Moments",
    "MardiaSolution",
]
