"""
Cholesky factorisation and spectral diagnostics for symmetric matrices.

Provides the factorisation used by the synthetic sampler and the
eigenvalue-based rank/condition diagnostics used to reject singular
covariance matrices before any Mahalanobis solve is attempted.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
import scipy.linalg
from numpy.typing import NDArray

from pymardia.core.exceptions import NotPositiveDefiniteError


@dataclass(frozen=True)
class CholeskyResult:
    """
    Result of Cholesky decomposition.

    Attributes:
        factor: Triangular factor
        lower: True if factor is lower triangular (L L' = A),
               False if upper triangular (H' H = A)
    """
    factor: NDArray[np.floating[Any]]
    lower: bool


@dataclass(frozen=True)
class SpectrumInfo:
    """
    Eigenvalue summary of a symmetric matrix.

    Attributes:
        eigenvalues: Eigenvalues in ascending order
        rank: Numerical rank (eigenvalues above tolerance)
        condition_number: max / min eigenvalue, inf when rank-deficient
        tolerance: Threshold used to decide the rank
    """
    eigenvalues: NDArray[np.floating[Any]]
    rank: int
    condition_number: float
    tolerance: float


def symmetric_spectrum(A: NDArray[np.floating[Any]]) -> SpectrumInfo:
    """
    Eigenvalue-based rank and condition number of a symmetric matrix.

    The tolerance mirrors LAPACK's convention for numerical rank:
    size * eps * largest |eigenvalue|.
    """
    eigenvalues = np.linalg.eigvalsh(A)
    p = A.shape[0]
    scale = float(np.max(np.abs(eigenvalues))) if p > 0 else 0.0
    tol = p * np.finfo(np.float64).eps * scale
    rank = int(np.sum(eigenvalues > tol))

    if rank < p or eigenvalues[0] <= 0.0:
        condition_number = float('inf')
    else:
        condition_number = float(eigenvalues[-1] / eigenvalues[0])

    return SpectrumInfo(
        eigenvalues=eigenvalues,
        rank=rank,
        condition_number=condition_number,
        tolerance=tol,
    )


def cholesky_cpu(
    A: NDArray[np.floating[Any]],
    *,
    lower: bool = False,
    matrix_name: str = 'matrix',
) -> CholeskyResult:
    """
    Cholesky decomposition using LAPACK (via SciPy).

    Args:
        A: Symmetric positive definite matrix (p x p)
        lower: Return the lower factor L (L L' = A) instead of the
               upper factor H (H' H = A)
        matrix_name: Name used in error messages

    Returns:
        CholeskyResult with the requested triangular factor

    Raises:
        NotPositiveDefiniteError: If A cannot be factored
    """
    try:
        factor = scipy.linalg.cholesky(A, lower=lower, check_finite=True)
    except (np.linalg.LinAlgError, scipy.linalg.LinAlgError) as e:
        min_eig = float(np.linalg.eigvalsh(A)[0])
        raise NotPositiveDefiniteError(
            f"{matrix_name} is not positive definite "
            f"(minimum eigenvalue {min_eig:.6g}); Cholesky factorisation failed",
            matrix_name=matrix_name,
            min_eigenvalue=min_eig,
        ) from e

    return CholeskyResult(factor=factor, lower=lower)
