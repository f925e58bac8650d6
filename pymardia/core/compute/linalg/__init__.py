"""
Linear algebra kernels for PyMardia.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy (LAPACK under the hood)
    - Factorisations return a structured result dataclass
    - Errors are raised immediately as typed PyMardia exceptions

Submodules:
    cholesky: Cholesky decomposition and symmetric spectrum diagnostics
    solve: SPD solves (single and many right-hand sides), rank checks
"""

from pymardia.core.compute.linalg.cholesky import (
    CholeskyResult,
    SpectrumInfo,
    cholesky_cpu,
    symmetric_spectrum,
)
from pymardia.core.compute.linalg.solve import (
    check_full_rank,
    cho_solve_cpu,
    solve_spd_cpu,
)

__all__ = [
    # Cholesky
    "CholeskyResult",
    "cholesky_cpu",
    # Spectrum
    "SpectrumInfo",
    "symmetric_spectrum",
    "check_full_rank",
    # Solves
    "solve_spd_cpu",
    "cho_solve_cpu",
]
