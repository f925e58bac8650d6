"""
Mardia's test solution type.

MardiaSolution wraps Result[MardiaParams], exposes every field of the
result record as a property, and renders the text report via summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymardia.core.result import Result
from pymardia.normality._common import MardiaParams

if TYPE_CHECKING:
    from pymardia.normality.design import MardiaDesign


@dataclass
class MardiaSolution:
    """
    User-facing Mardia test results.

    A (skewness) is compared with its asymptotic chi-square mean and
    standard deviation; B (kurtosis) is compared with N(0, 1).
    """
    _result: Result[MardiaParams]
    _design: 'MardiaDesign | None'

    # --- Moments ---

    @property
    def mean(self) -> NDArray[np.floating[Any]]:
        """Column means of the analysed matrix, shape (n,)."""
        return self._result.params.mean

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """Population covariance of the analysed matrix, shape (n, n)."""
        return self._result.params.covariance

    # --- Skewness ---

    @property
    def skewness(self) -> float:
        """Skewness statistic A."""
        return self._result.params.skewness

    @property
    def skewness_mean(self) -> float:
        """Expected value of A under multivariate normality."""
        return self._result.params.skewness_mean

    @property
    def skewness_sd(self) -> float:
        """Asymptotic standard deviation of A."""
        return self._result.params.skewness_sd

    @property
    def skewness_z(self) -> float:
        """Z-score of A."""
        return self._result.params.skewness_z

    @property
    def skewness_df(self) -> float:
        """Chi-square degrees of freedom of A."""
        return self._result.params.skewness_df

    @property
    def skewness_p_value(self) -> float:
        """Upper-tail chi-square p-value of A."""
        return self._result.params.skewness_p_value

    # --- Kurtosis ---

    @property
    def kurtosis(self) -> float:
        """Standardised kurtosis statistic B."""
        return self._result.params.kurtosis

    @property
    def kurtosis_sum(self) -> float:
        """Raw sum of squared Mahalanobis distances."""
        return self._result.params.kurtosis_sum

    @property
    def kurtosis_p_value(self) -> float:
        """Two-sided N(0, 1) p-value of B."""
        return self._result.params.kurtosis_p_value

    # --- Shape ---

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def n_variables(self) -> int:
        return self._result.params.n_variables

    @property
    def simulated(self) -> bool:
        return self._result.params.simulated

    @property
    def params(self) -> MardiaParams:
        """The immutable result record."""
        return self._result.params

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def design(self) -> 'MardiaDesign | None':
        """The validated input the test ran on, including its ranges."""
        return self._design

    # --- Formatting ---

    def summary(self, details: bool = False) -> str:
        """
        Text report.

        Produces output like:
            A : got 3.2, expected 4.0 plus or minus 2.828, Z-score -0.283
            B : got -0.512, expected 0 plus or minus 1
            p-values: A 0.5247, B 0.6087

        With details=True, the mean vector and the upper triangle of the
        covariance matrix follow, one entry per line.
        """
        p = self._result.params
        lines = [
            f"A : got {p.skewness:.1f}, expected {p.skewness_mean:.1f} "
            f"plus or minus {p.skewness_sd:.3f}, Z-score {p.skewness_z:.3f}",
            f"B : got {p.kurtosis:.3f}, expected 0 plus or minus 1",
            f"p-values: A {_format_pvalue(p.skewness_p_value)}, "
            f"B {_format_pvalue(p.kurtosis_p_value)}",
        ]

        if details:
            n = p.n_variables
            lines.append("Mean:")
            for j in range(n):
                lines.append(f"  {j:2d} {float(p.mean[j])}")
            lines.append(f"Covariance: {p.covariance.shape}")
            for i in range(n):
                for j in range(i, n):
                    lines.append(f"  {i:2d} {j:2d} {float(p.covariance[i, j])}")

        for w in self._result.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"MardiaSolution(m={p.n_observations}, n={p.n_variables}, "
            f"A={p.skewness:.4g}, A_z={p.skewness_z:.4g}, B={p.kurtosis:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
