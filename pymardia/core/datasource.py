"""
DataSource: the dataset loader for PyMardia.

DataSource is the "I have data" abstraction. It knows how to pull a dense
sample matrix out of arrays, DataFrames and files (HDF5, CSV, NPY), and
nothing about what the matrix will be used for.

Usage:
    from pymardia import DataSource

    ds = DataSource.from_arrays(data=X)
    ds = DataSource.from_file("samples.h5", dataset="x")
    ds = DataSource.from_file("samples.csv", columns=["a", "b"])
    ds = DataSource.from_dataframe(df)

    X = ds.matrix()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymardia.core.exceptions import ValidationError, DimensionError

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)

HDF5_SUFFIXES = ('.h5', '.hdf5', '.he5')
CSV_SUFFIXES = ('.csv', '.tsv')


@dataclass
class DataSource:
    """
    Domain-agnostic data container.

    Construct via factory classmethods, not directly. A full matrix is
    stored under the key 'data'; named columns (from a DataFrame or CSV)
    are stored individually and stacked on demand by matrix().
    """
    _data: dict[str, Any]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Array Access ===

    def keys(self) -> frozenset[str]:
        """Return the names of all available arrays."""
        return frozenset(self._data.keys())

    def __getitem__(self, key: str) -> Any:
        """
        Access a named array.

        Raises:
            KeyError: If key not found, with a message listing available keys
        """
        if key not in self._data:
            available = self.keys()
            raise KeyError(
                f"DataSource has no array '{key}'. Available: {available}"
            )
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        """Check if a key exists."""
        return key in self._data

    def matrix(self, columns: list[str] | None = None) -> NDArray[np.floating[Any]]:
        """
        Materialise the sample matrix (observations x variables).

        Args:
            columns: Column names to stack, in order. If None, uses the
                full 'data' matrix when present, otherwise every column in
                insertion order.

        Raises:
            ValidationError: If the source holds no data
            DimensionError: If columns have different lengths
        """
        if columns is None and 'data' in self._data:
            return self._data['data']

        names = list(columns) if columns is not None else list(self._data.keys())
        if not names:
            raise ValidationError("DataSource has no columns")

        arrays = []
        for name in names:
            arr = np.asarray(self[name], dtype=np.float64)
            if arr.ndim == 1:
                arr = arr.reshape(-1, 1)
            arrays.append(arr)

        lengths = {arr.shape[0] for arr in arrays}
        if len(lengths) > 1:
            details = ", ".join(f"{n}={a.shape[0]}" for n, a in zip(names, arrays))
            raise DimensionError(f"Inconsistent column lengths: {details}")

        return np.hstack(arrays)

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of statistical units (rows)."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        """Source metadata (origin, path, dataset name, columns)."""
        return self._metadata.copy()

    # === Factory Methods ===

    @classmethod
    def from_arrays(
        cls,
        *,
        data: NDArray | None = None,
        columns: list[str] | None = None,
        **named_arrays: NDArray,
    ) -> DataSource:
        """
        Construct from NumPy arrays.

        Args:
            data: Full sample matrix (m x n). A 1D vector becomes (m, 1).
            columns: Optional names for the columns of `data`; when given,
                each column is stored under its own name.
            **named_arrays: Individual named columns.
        """
        storage: dict[str, Any] = {}
        n_obs: int | None = None

        if data is not None:
            data = np.asarray(data, dtype=np.float64)
            if data.ndim == 1:
                data = data.reshape(-1, 1)
            n_obs = data.shape[0]
            if columns is not None:
                if data.ndim != 2 or len(columns) != data.shape[1]:
                    raise DimensionError(
                        f"columns: got {len(columns)} names for data with shape {data.shape}"
                    )
                for i, col in enumerate(columns):
                    storage[col] = data[:, i]
            else:
                storage['data'] = data

        for name, arr in named_arrays.items():
            storage[name] = np.asarray(arr, dtype=np.float64)
            n_obs = n_obs or storage[name].shape[0]

        return cls(
            _data=storage,
            _metadata={'n_observations': n_obs, 'source': 'arrays'},
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        dataset: str | None = None,
        columns: list[str] | None = None,
    ) -> DataSource:
        """
        Construct from file (HDF5, CSV/TSV, NPY).

        Args:
            path: File path; the format is chosen from the suffix.
            dataset: Dataset name inside an HDF5 file (required for HDF5).
            columns: Column subset for CSV/TSV files.

        Raises:
            ValidationError: For unknown formats, missing files or datasets
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if not path.exists():
            raise ValidationError(f"File not found: {path}")

        logger.debug("Loading %s (format %s)", path, suffix)

        if suffix in HDF5_SUFFIXES:
            return cls._from_hdf5(path, dataset)
        elif suffix in CSV_SUFFIXES:
            import pandas as pd
            sep = '\t' if suffix == '.tsv' else ','
            try:
                df = pd.read_csv(path, usecols=columns, sep=sep)
            except (OSError, ValueError) as e:
                raise ValidationError(f"{path}: cannot read {suffix} file: {e}") from e
            return cls.from_dataframe(df, source_path=str(path))
        elif suffix == '.npy':
            try:
                data = np.load(path)
            except (OSError, ValueError) as e:
                raise ValidationError(f"{path}: cannot read .npy file: {e}") from e
            ds = cls.from_arrays(data=data, columns=columns)
            ds._metadata['source_path'] = str(path)
            return ds
        else:
            raise ValidationError(f"Unknown file format: {suffix}")

    @classmethod
    def _from_hdf5(cls, path: Path, dataset: str | None) -> DataSource:
        """Read one 2D dataset from an HDF5 file."""
        import h5py

        if dataset is None:
            raise ValidationError(
                f"{path}: HDF5 input requires a dataset name"
            )

        try:
            fd = h5py.File(path, 'r')
        except OSError as e:
            raise ValidationError(f"{path}: not a readable HDF5 file: {e}") from e

        with fd:
            if dataset not in fd:
                raise ValidationError(
                    f"{path}: no dataset named {dataset!r}. "
                    f"Available: {sorted(fd.keys())}"
                )
            node = fd[dataset]
            if not isinstance(node, h5py.Dataset):
                raise ValidationError(
                    f"{path}: {dataset!r} is a group, not a dataset"
                )
            try:
                data = np.asarray(node[()], dtype=np.float64)
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"{path}: dataset {dataset!r} is not numeric: {e}"
                ) from e

        if data.ndim == 1:
            data = data.reshape(-1, 1)

        return cls(
            _data={'data': data},
            _metadata={
                'n_observations': data.shape[0],
                'source': 'hdf5',
                'source_path': str(path),
                'dataset': dataset,
            },
        )

    @classmethod
    def from_dataframe(cls, df: 'pd.DataFrame', *, source_path: str | None = None) -> DataSource:
        """Construct from pandas DataFrame, one stored array per column."""
        storage: dict[str, Any] = {}

        for col in df.columns:
            try:
                storage[str(col)] = df[col].to_numpy(dtype=np.float64)
            except (TypeError, ValueError) as e:
                where = f"{source_path}: " if source_path else ""
                raise ValidationError(
                    f"{where}column {col!r} is not numeric: {e}"
                ) from e

        metadata = {
            'n_observations': len(df),
            'source': 'dataframe',
            'columns': [str(c) for c in df.columns],
        }
        if source_path:
            metadata['source_path'] = source_path

        return cls(_data=storage, _metadata=metadata)

    @classmethod
    def build(cls, *args, **kwargs) -> DataSource:
        """
        Convenience factory that dispatches to the appropriate from_* method.

        Examples:
            DataSource.build(data=X)                   # from_arrays
            DataSource.build("x.h5", dataset="x")      # from_file
        """
        if args and isinstance(args[0], (str, Path)):
            return cls.from_file(args[0], **kwargs)
        else:
            return cls.from_arrays(**kwargs)
