"""
Solver dispatch for Mardia's test.

Provides mardia_test() as the main entry point, run() for a prepared
MardiaConfig, and the standalone stages moments() and simulate().
"""

from __future__ import annotations

import logging
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymardia.core.datasource import DataSource
from pymardia.core.exceptions import ValidationError
from pymardia.normality._common import Moments
from pymardia.normality._moments import estimate_moments
from pymardia.normality._simulate import SeedLike, simulate_mvn
from pymardia.normality.backends.cpu import CPUMardiaBackend
from pymardia.normality.config import MardiaConfig
from pymardia.normality.design import MardiaDesign
from pymardia.normality.solution import MardiaSolution

logger = logging.getLogger(__name__)

MethodChoice = Literal['gram', 'pairwise']


def _get_backend(backend: str, method: str):
    """Select backend. Only the CPU reference backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUMardiaBackend(method=method)
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def mardia_test(
    data: ArrayLike | MardiaDesign,
    *,
    simulate: bool = False,
    seed: SeedLike = None,
    row_range: tuple[int, int] | None = None,
    col_range: tuple[int, int] | None = None,
    method: MethodChoice = 'gram',
    backend: str = 'cpu',
) -> MardiaSolution:
    """
    Mardia's test of multivariate normality.

    Parameters
    ----------
    data : array-like or MardiaDesign
        Sample matrix (m observations x n variables).
    simulate : bool
        If True, test a synthetic multivariate normal draw with the same
        mean, covariance and shape as the data instead of the data itself.
    seed : int, numpy.random.Generator or None
        Random source for simulate=True.
    row_range, col_range : (start, stop), optional
        Half-open intervals selecting a sub-matrix. Ignored when data is
        already a MardiaDesign.
    method : str
        'gram' (default) evaluates all sample pairs from one Mahalanobis
        Gram matrix; 'pairwise' solves one linear system per pair.
    backend : str
        'cpu' (default).

    Returns
    -------
    MardiaSolution

    Raises
    ------
    ValidationError
        Empty, ragged or non-finite input.
    RangeError
        Sub-range outside the matrix.
    SingularMatrixError
        Covariance not invertible (m <= n or collinear columns).
    NotPositiveDefiniteError
        simulate=True and the covariance cannot be Cholesky-factored.
    """
    if isinstance(data, MardiaDesign):
        design = data
    else:
        design = MardiaDesign.from_array(
            data, row_range=row_range, col_range=col_range,
        )

    logger.debug("mardia_test on %r (simulate=%s, method=%s)", design, simulate, method)

    be = _get_backend(backend, method)
    result = be.solve(design, simulate=simulate, seed=seed)
    return MardiaSolution(_result=result, _design=design)


def run(
    config: MardiaConfig,
    source: DataSource,
    *,
    columns: list[str] | None = None,
) -> MardiaSolution:
    """
    Run Mardia's test as described by a MardiaConfig.

    The configuration's ranges are applied to the source matrix, then the
    test runs with its simulate/seed/method settings. `details` only
    affects reporting and is read by the caller.
    """
    design = MardiaDesign.from_datasource(
        source,
        columns=columns,
        row_range=config.row_range,
        col_range=config.col_range,
    )
    return mardia_test(
        design,
        simulate=config.simulate,
        seed=config.seed,
        method=config.method,
    )


def moments(data: ArrayLike) -> Moments:
    """
    Column means and population covariance (divisor m) of a sample matrix.

    Raises
    ------
    ValidationError
        Empty, ragged or non-finite input.
    """
    design = MardiaDesign.from_array(data)
    return estimate_moments(design.data)


def simulate(
    mean: ArrayLike,
    cov: ArrayLike,
    m: int,
    *,
    seed: SeedLike = None,
) -> NDArray[np.floating[Any]]:
    """
    Draw m rows from N(mean, cov) via the upper Cholesky factor of cov.

    Raises
    ------
    NotPositiveDefiniteError
        If cov cannot be Cholesky-factored.
    """
    return simulate_mvn(
        np.asarray(mean, dtype=np.float64),
        np.asarray(cov, dtype=np.float64),
        m,
        rng=seed,
    )
