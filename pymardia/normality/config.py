"""
Run configuration for Mardia's test.

Everything that routes the pipeline (simulation, report detail, sub-ranges,
seeding, evaluation method) is carried by one frozen MardiaConfig value,
built once by the CLI or by the caller and passed into run().
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, asdict
from typing import Any

from pymardia.core.exceptions import ValidationError
from pymardia.normality._common import VALID_METHODS

IndexRange = tuple[int, int]


def _as_range(value: Any, name: str) -> IndexRange | None:
    if value is None:
        return None
    try:
        start, stop = value
        return int(start), int(stop)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"{name} must be a (start, stop) pair, got {value!r}"
        ) from e


@dataclass(frozen=True)
class MardiaConfig:
    """
    Configuration for a single test run.

    Attributes:
        simulate: Replace the data with a synthetic multivariate normal
            draw sharing its mean and covariance before testing.
        details: Include the mean vector and covariance listing in the
            text report.
        row_range: Half-open row interval [i0, i1), or None for all rows.
        col_range: Half-open column interval [j0, j1), or None for all.
        seed: Seed for the synthetic sampler; None uses OS entropy.
        method: 'gram' or 'pairwise' evaluation of the statistics.
    """
    simulate: bool = False
    details: bool = False
    row_range: IndexRange | None = None
    col_range: IndexRange | None = None
    seed: int | None = None
    method: str = "gram"

    def __post_init__(self):
        if self.method not in VALID_METHODS:
            raise ValidationError(
                f"method must be one of {VALID_METHODS}, got {self.method!r}"
            )
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, 'row_range', _as_range(self.row_range, 'row_range'))
        object.__setattr__(self, 'col_range', _as_range(self.col_range, 'col_range'))
        if self.seed is not None:
            try:
                seed = operator.index(self.seed)
            except TypeError as e:
                raise ValidationError(
                    f"seed must be an integer, got {self.seed!r}"
                ) from e
            if seed < 0:
                raise ValidationError(f"seed must be non-negative, got {seed}")
            object.__setattr__(self, 'seed', seed)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view, for logging and result metadata."""
        return asdict(self)
