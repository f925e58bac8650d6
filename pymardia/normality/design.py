"""
MardiaDesign: validated input for Mardia's test.

Wraps the sample matrix, applies the optional half-open row/column
sub-ranges, and validates the result. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pymardia.core.exceptions import ValidationError
from pymardia.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_min_samples,
    check_min_variables,
    check_range,
)

IndexRange = tuple[int, int]


@dataclass(frozen=True)
class MardiaDesign:
    """
    Design for Mardia's test.

    Holds an (m x n) sample matrix, rows are observations. Construct via
    factory classmethods:

        MardiaDesign.from_array(X, row_range=(0, 500))
        MardiaDesign.from_datasource(ds, col_range=(2, 5))
    """
    _data: NDArray[np.floating[Any]]
    _m: int
    _n: int
    _original_shape: tuple[int, int]
    _row_range: IndexRange | None
    _col_range: IndexRange | None
    _columns: tuple[str, ...] | None

    @classmethod
    def from_array(
        cls,
        data: ArrayLike,
        *,
        row_range: IndexRange | None = None,
        col_range: IndexRange | None = None,
    ) -> MardiaDesign:
        """
        Build MardiaDesign from array-like data.

        Parameters
        ----------
        data : array-like
            2D sample matrix, a pandas DataFrame, or a 1D vector (treated
            as a single variable).
        row_range, col_range : (start, stop), optional
            Half-open index intervals selecting a sub-matrix.
        """
        if hasattr(data, 'columns') and hasattr(data, 'values'):
            columns = tuple(str(c) for c in data.columns)
            data = data.values
        else:
            columns = None

        data_array = check_array(data, "X")
        if data_array.ndim == 1:
            data_array = data_array.reshape(-1, 1)

        return cls._build(
            data_array,
            row_range=row_range,
            col_range=col_range,
            columns=columns,
        )

    @classmethod
    def from_datasource(
        cls,
        source,
        *,
        columns: list[str] | None = None,
        row_range: IndexRange | None = None,
        col_range: IndexRange | None = None,
    ) -> MardiaDesign:
        """
        Build MardiaDesign from a DataSource.

        Parameters
        ----------
        source : DataSource
            Data source providing the matrix or named columns.
        columns : list of str, optional
            Column names to stack. If None, uses the full matrix.
        """
        data_array = check_array(source.matrix(columns), "X")
        if data_array.ndim == 1:
            data_array = data_array.reshape(-1, 1)

        if columns is not None:
            col_names = tuple(columns)
        else:
            meta_cols = source.metadata.get('columns')
            col_names = tuple(meta_cols) if meta_cols else None

        return cls._build(
            data_array,
            row_range=row_range,
            col_range=col_range,
            columns=col_names,
        )

    @classmethod
    def _build(
        cls,
        data: NDArray,
        *,
        row_range: IndexRange | None,
        col_range: IndexRange | None,
        columns: tuple[str, ...] | None,
    ) -> MardiaDesign:
        """Internal builder: range selection, then validation."""
        check_2d(data, "X")
        original_shape = (int(data.shape[0]), int(data.shape[1]))

        row_range = check_range(row_range, original_shape[0], 'row')
        col_range = check_range(col_range, original_shape[1], 'column')

        if row_range is not None:
            data = data[row_range[0]:row_range[1], :]
        if col_range is not None:
            data = data[:, col_range[0]:col_range[1]]
            if columns is not None:
                columns = columns[col_range[0]:col_range[1]]

        check_min_samples(data, 1, "X")
        check_min_variables(data, 1, "X")
        check_finite(data, "X")

        m, n = data.shape
        # Private copy, so freezing it never touches the caller's array
        data = np.array(data, dtype=np.float64, order='C', copy=True)
        data.setflags(write=False)

        if columns is not None and len(columns) != n:
            raise ValidationError(
                f"columns: got {len(columns)} names for {n} variables"
            )

        return cls(
            _data=data,
            _m=m,
            _n=n,
            _original_shape=original_shape,
            _row_range=row_range,
            _col_range=col_range,
            _columns=columns,
        )

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Sample matrix (m x n), read-only."""
        return self._data

    @property
    def m(self) -> int:
        """Number of observations."""
        return self._m

    @property
    def n(self) -> int:
        """Number of variables."""
        return self._n

    @property
    def original_shape(self) -> tuple[int, int]:
        """Shape before row/column range selection."""
        return self._original_shape

    @property
    def row_range(self) -> IndexRange | None:
        return self._row_range

    @property
    def col_range(self) -> IndexRange | None:
        return self._col_range

    @property
    def columns(self) -> tuple[str, ...] | None:
        """Column names, or None if not available."""
        return self._columns

    def __repr__(self) -> str:
        ranges = ""
        if self._row_range is not None:
            ranges += f", rows={self._row_range[0]}:{self._row_range[1]}"
        if self._col_range is not None:
            ranges += f", cols={self._col_range[0]}:{self._col_range[1]}"
        return f"MardiaDesign(m={self._m}, n={self._n}{ranges})"
