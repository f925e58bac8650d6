"""
Linear solves against symmetric positive definite matrices.

Mahalanobis forms never form an explicit inverse; they solve
A y = b instead. Rank deficiency is detected up front from the
spectrum so a near-singular covariance raises instead of returning
garbage from a numerically unstable solve.
"""

from typing import Any

import numpy as np
import scipy.linalg
from numpy.typing import NDArray

from pymardia.core.exceptions import SingularMatrixError
from pymardia.core.compute.linalg.cholesky import SpectrumInfo, symmetric_spectrum


def check_full_rank(
    A: NDArray[np.floating[Any]],
    *,
    matrix_name: str = 'matrix',
) -> SpectrumInfo:
    """
    Verify a symmetric matrix has full numerical rank.

    Returns:
        SpectrumInfo for reuse by callers (condition number warnings)

    Raises:
        SingularMatrixError: If the matrix is rank-deficient
    """
    spectrum = symmetric_spectrum(A)
    p = A.shape[0]
    if spectrum.rank < p:
        raise SingularMatrixError(
            f"{matrix_name} is singular: rank={spectrum.rank}, expected={p}. "
            f"This indicates too few observations (need more than {p}) "
            f"or linearly dependent columns.",
            matrix_name=matrix_name,
            condition_number=spectrum.condition_number,
            rank=spectrum.rank,
            expected_rank=p,
        )
    return spectrum


def solve_spd_cpu(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    *,
    matrix_name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Solve A y = b for symmetric positive definite A.

    b may be a vector (p,) or a stack of right-hand sides (p, k).

    Raises:
        SingularMatrixError: If LAPACK reports A as singular
    """
    try:
        return scipy.linalg.solve(A, b, assume_a='pos', check_finite=False)
    except (np.linalg.LinAlgError, scipy.linalg.LinAlgError) as e:
        raise SingularMatrixError(
            f"{matrix_name} is singular or not positive definite: {e}",
            matrix_name=matrix_name,
            expected_rank=A.shape[0],
        ) from e


def cho_solve_cpu(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
    *,
    matrix_name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Solve A Y = B for many right-hand sides with one Cholesky factorisation.

    Args:
        A: Symmetric positive definite matrix (p x p)
        B: Right-hand sides (p x k)

    Raises:
        SingularMatrixError: If A cannot be factored
    """
    try:
        c_and_lower = scipy.linalg.cho_factor(A, lower=True, check_finite=False)
    except (np.linalg.LinAlgError, scipy.linalg.LinAlgError) as e:
        raise SingularMatrixError(
            f"{matrix_name} is singular or not positive definite: {e}",
            matrix_name=matrix_name,
            expected_rank=A.shape[0],
        ) from e
    return scipy.linalg.cho_solve(c_and_lower, B, check_finite=False)
