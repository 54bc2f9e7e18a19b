"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_2d / check_nonempty: shape checks
    - check_matrix: in-place precondition (same object back)
    - check_dimension: non-negative integers
    - check_tolerance: finite, non-negative reals
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_matrix,
    check_nonempty,
    check_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float_array_passthrough(self):
        arr = np.array([[1.0, 2.0]], dtype=np.float64)
        assert check_array(arr, "X") is arr

    def test_bool_promoted_to_float(self):
        result = check_array([True, False], "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 0.0])

    def test_rejects_none(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3], "X")

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "X")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="my_param"):
            check_array(["a"], "my_param")


# ═══════════════════════════════════════════════════════════════════════
# check_2d / check_nonempty
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "X")

    def test_1d_fails(self):
        with pytest.raises(DimensionError, match="expected 2D") as exc_info:
            check_2d(np.zeros(3), "X")
        assert exc_info.value.shape == (3,)

    def test_3d_fails(self):
        with pytest.raises(DimensionError):
            check_2d(np.zeros((2, 2, 2)), "X")

    def test_nonempty_passes(self):
        check_nonempty(np.zeros((1, 1)), "X")

    @pytest.mark.parametrize("shape", [(0, 3), (3, 0), (0, 0)])
    def test_empty_fails(self, shape):
        with pytest.raises(DimensionError, match="malformed matrix") as exc_info:
            check_nonempty(np.zeros(shape), "X")
        assert exc_info.value.shape == shape


# ═══════════════════════════════════════════════════════════════════════
# check_matrix
# ═══════════════════════════════════════════════════════════════════════


class TestCheckMatrix:
    """check_matrix enforces what an in-place routine can mutate."""

    def test_returns_same_object(self):
        a = np.ones((2, 2))
        assert check_matrix(a, "a") is a

    def test_float32_accepted(self):
        a = np.ones((2, 2), dtype=np.float32)
        assert check_matrix(a, "a") is a

    def test_rejects_list(self):
        with pytest.raises(ValidationError, match="numpy.ndarray"):
            check_matrix([[1.0, 2.0]], "a")

    def test_rejects_integer_dtype(self):
        with pytest.raises(ValidationError, match="floating dtype"):
            check_matrix(np.ones((2, 2), dtype=np.int64), "a")

    def test_rejects_read_only(self):
        a = np.ones((2, 2))
        a.flags.writeable = False
        with pytest.raises(ValidationError, match="read-only"):
            check_matrix(a, "a")

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_matrix(np.ones(3), "a")

    def test_rejects_empty(self):
        with pytest.raises(DimensionError):
            check_matrix(np.ones((0, 3)), "a")


# ═══════════════════════════════════════════════════════════════════════
# check_dimension / check_tolerance
# ═══════════════════════════════════════════════════════════════════════


class TestScalarChecks:

    def test_dimension_int(self):
        assert check_dimension(3, "dim") == 3

    def test_dimension_numpy_int(self):
        result = check_dimension(np.int32(4), "dim")
        assert result == 4
        assert type(result) is int

    def test_dimension_zero(self):
        assert check_dimension(0, "dim") == 0

    def test_dimension_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_dimension(-1, "dim")

    @pytest.mark.parametrize("bad", [2.0, "3", None, True])
    def test_dimension_not_int(self, bad):
        with pytest.raises(ValidationError, match="integer"):
            check_dimension(bad, "dim")

    def test_tolerance_values(self):
        assert check_tolerance(0, "tol") == 0.0
        assert check_tolerance(1e-10, "tol") == 1e-10

    @pytest.mark.parametrize("bad", [-1e-12, float("nan"), float("inf")])
    def test_tolerance_rejected(self, bad):
        with pytest.raises(ValidationError, match="tol"):
            check_tolerance(bad, "tol")

    def test_tolerance_not_real(self):
        with pytest.raises(ValidationError, match="real number"):
            check_tolerance("0.1", "tol")
