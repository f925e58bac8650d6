"""
PyMardia: Mardia's test of multivariate normality for Python.

Estimates the sample mean and covariance of a data matrix, computes
Mardia's multivariate skewness and kurtosis statistics, and compares them
with their asymptotic null distributions. A simulation mode tests a
synthetic multivariate normal draw with the same moments, as a
calibration check.

Submodules:
    normality: Mardia's test, moments, synthetic sampler
    core: Exceptions, Result envelope, validation, DataSource
"""

__version__ = "0.1.0"

from pymardia import normality
from pymardia.core import DataSource
from pymardia.normality import mardia_test, MardiaConfig

__all__ = [
    "__version__",
    "normality",
    "DataSource",
    "mardia_test",
    "MardiaConfig",
]
