"""
Input validation utilities for PyMardia.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymardia.core.exceptions import ValidationError, DimensionError, RangeError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Ragged nested sequences (rows of different length) are rejected here,
    since numpy either refuses them or falls back to object dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        DimensionError: If rows have mismatched lengths
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise DimensionError(
            f"{name}: cannot convert to array (rows of unequal length?): {e}"
        ) from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} not supported")

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is a square 2D matrix.

    Raises:
        DimensionError: If array is not 2D or not square
    """
    check_2d(array, name)
    if array.shape[0] != array.shape[1]:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {array.shape}"
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples (rows).

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_min_variables(array: NDArray[np.floating[Any]], min_variables: int, name: str) -> None:
    """
    Verify a 2D array has at least the minimum number of columns.

    Raises:
        ValidationError: If array has fewer than min_variables columns
    """
    p = array.shape[1]
    if p < min_variables:
        raise ValidationError(
            f"{name}: requires at least {min_variables} variables, got {p}"
        )


def check_range(
    index_range: tuple[int, int] | None,
    size: int,
    axis: str,
) -> tuple[int, int] | None:
    """
    Validate a half-open [start, stop) index interval against an axis length.

    Args:
        index_range: (start, stop) pair, or None for the full axis
        size: Length of the axis being sliced
        axis: 'row' or 'column', used in error messages

    Returns:
        The range as a tuple of Python ints, or None

    Raises:
        RangeError: If the interval is malformed, empty or out of bounds
    """
    if index_range is None:
        return None

    try:
        start, stop = (int(v) for v in index_range)
    except (TypeError, ValueError) as e:
        raise RangeError(
            f"{axis} range must be a pair of integers, got {index_range!r}",
            axis=axis,
            size=size,
        ) from e

    if start < 0 or stop > size:
        raise RangeError(
            f"{axis} range [{start}, {stop}) exceeds bounds [0, {size})",
            axis=axis, start=start, stop=stop, size=size,
        )
    if stop <= start:
        raise RangeError(
            f"{axis} range [{start}, {stop}) is empty or reversed",
            axis=axis, start=start, stop=stop, size=size,
        )
    return start, stop
