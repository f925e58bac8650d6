"""
Shared compute infrastructure for PyMardia.

Timing utilities and linear algebra kernels used by the normality
backends. Domain-specific orchestration lives in normality/backends/;
this package only holds shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    linalg: Cholesky factorisation, SPD solves, numerical rank
"""

from pymardia.core.compute.timing import Timer

__all__ = [
    "Timer",
]
