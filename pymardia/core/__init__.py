"""
Core infrastructure for PyMardia.

Shared abstractions used by the normality module and the CLI.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    datasource: Dataset loader (arrays, DataFrame, HDF5, CSV, NPY)
    compute: Timing and linear algebra kernels
"""

from pymardia.core.result import Result
from pymardia.core.datasource import DataSource
from pymardia.core.exceptions import (
    PyMardiaError,
    ValidationError,
    DimensionError,
    RangeError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)

__all__ = [
    # Data
    "DataSource",
    # Result
    "Result",
    # Exceptions
    "PyMardiaError",
    "ValidationError",
    "DimensionError",
    "RangeError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
]
