"""
Tests for input validation utilities.

Validates core/validation.py:
    - check_array: conversion, dtype coercion, ragged/object rejection
    - check_finite: NaN/Inf detection
    - check_2d / check_square: dimensionality checks
    - check_min_samples / check_min_variables
    - check_range: half-open sub-range bounds
"""

import numpy as np
import pytest

from pymardia.core.exceptions import DimensionError, RangeError, ValidationError
from pymardia.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_min_samples,
    check_min_variables,
    check_range,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects bad input."""

    def test_list_to_float_array(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.dtype == np.float64
        assert result.shape == (2, 2)

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "X")
        assert result.dtype == np.float64

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], "X")

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"], ["c", "d"]], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:
    """check_finite rejects NaN and Inf values."""

    def test_finite_passes(self):
        check_finite(np.array([[1.0, 2.0], [3.0, 4.0]]), "X")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan, 3.0]), "X")

    def test_mixed_nan_inf(self):
        with pytest.raises(ValidationError, match="2 NaN.*1 Inf"):
            check_finite(np.array([np.nan, np.inf, np.nan]), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D.*got 1D"):
            check_2d(np.array([1.0, 2.0, 3.0]), "X")

    def test_check_square_passes(self):
        check_square(np.eye(3), "cov")

    def test_check_square_rejects_rectangular(self):
        with pytest.raises(DimensionError, match="square"):
            check_square(np.ones((2, 3)), "cov")

    def test_min_samples(self):
        check_min_samples(np.ones((1, 2)), 1, "X")
        with pytest.raises(ValidationError, match="at least 1 samples, got 0"):
            check_min_samples(np.ones((0, 2)), 1, "X")

    def test_min_variables(self):
        with pytest.raises(ValidationError, match="at least 1 variables, got 0"):
            check_min_variables(np.ones((3, 0)), 1, "X")


# ═══════════════════════════════════════════════════════════════════════
# check_range
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRange:
    """check_range validates half-open [start, stop) intervals."""

    def test_none_passes_through(self):
        assert check_range(None, 10, 'row') is None

    def test_full_range(self):
        assert check_range((0, 10), 10, 'row') == (0, 10)

    def test_numpy_ints_normalised(self):
        result = check_range((np.int64(2), np.int64(5)), 10, 'column')
        assert result == (2, 5)
        assert all(type(v) is int for v in result)

    def test_stop_beyond_size(self):
        with pytest.raises(RangeError, match=r"\[5, 11\) exceeds bounds \[0, 10\)") as exc_info:
            check_range((5, 11), 10, 'row')
        assert exc_info.value.axis == 'row'
        assert exc_info.value.size == 10

    def test_negative_start(self):
        with pytest.raises(RangeError):
            check_range((-1, 3), 10, 'column')

    def test_empty_range(self):
        with pytest.raises(RangeError, match="empty or reversed"):
            check_range((4, 4), 10, 'row')

    def test_reversed_range(self):
        with pytest.raises(RangeError, match="empty or reversed"):
            check_range((6, 2), 10, 'row')

    def test_malformed(self):
        with pytest.raises(RangeError, match="pair of integers"):
            check_range((1, 2, 3), 10, 'row')
