"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/string rejection
    - check_ndim / check_2d: dimensionality checks
    - check_dimensions: positive integer sizes
    - check_square / check_same_shape / check_inner_dimensions: shape rules
    - check_index: bounds
    - check_choice: string options
    - check_invertible: exact-zero determinant
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidDimensionsError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_choice,
    check_dimensions,
    check_index,
    check_inner_dimensions,
    check_invertible,
    check_ndim,
    check_same_shape,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "X")
        assert result.dtype == np.float64

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([1 + 2j], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "X")

    def test_1d_rejected_by_check_2d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_3d_rejected(self):
        with pytest.raises(DimensionError, match="got 3D"):
            check_ndim(np.zeros((2, 2, 2)), 2, "X")


# ═══════════════════════════════════════════════════════════════════════
# check_dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimensions:

    def test_positive_passes(self):
        check_dimensions(1, 1)
        check_dimensions(3, 7)

    def test_numpy_integers_pass(self):
        check_dimensions(np.int64(2), np.int32(3))

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (0, 0), (-1, 2)])
    def test_non_positive_rejected(self, rows, cols):
        with pytest.raises(InvalidDimensionsError) as exc_info:
            check_dimensions(rows, cols)
        assert exc_info.value.rows == rows
        assert exc_info.value.cols == cols

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="rows: expected an integer"):
            check_dimensions(2.0, 2)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="cols"):
            check_dimensions(2, True)


# ═══════════════════════════════════════════════════════════════════════
# Shape rules
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_square_passes(self):
        check_square((3, 3), "det")

    def test_not_square(self):
        with pytest.raises(NotSquareError, match="det requires a square matrix, got 2x3") as exc_info:
            check_square((2, 3), "det")
        assert exc_info.value.shape == (2, 3)
        assert exc_info.value.operation == "det"

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "combine")

    def test_same_shape_mismatch_reports_both(self):
        with pytest.raises(DimensionMismatchError, match="left is 2x3, right is 3x2") as exc_info:
            check_same_shape((2, 3), (3, 2), "combine")
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (3, 2)

    def test_inner_dimensions_pass(self):
        check_inner_dimensions((2, 3), (3, 5), "dot")

    def test_inner_dimensions_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="M1 is 2x3, M2 is 2x3"):
            check_inner_dimensions((2, 3), (2, 3), "dot")


# ═══════════════════════════════════════════════════════════════════════
# check_index / check_choice / check_invertible
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_range(self):
        check_index(0, 0, (2, 3))
        check_index(1, 2, (2, 3))

    @pytest.mark.parametrize("row,col", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range(self, row, col):
        with pytest.raises(IndexError, match="2x3"):
            check_index(row, col, (2, 3))


class TestCheckChoice:

    def test_valid(self):
        check_choice("partial", ("partial", "initial"), "pivoting")

    def test_invalid_lists_choices(self):
        with pytest.raises(ValidationError, match="'partial', 'initial'"):
            check_choice("full", ("partial", "initial"), "pivoting")


class TestCheckInvertible:

    def test_nonzero_passes(self):
        check_invertible(-2.0, "A")
        check_invertible(1e-300, "A")

    def test_zero_raises_with_determinant(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            check_invertible(0.0, "A")
        assert exc_info.value.determinant == 0.0
        assert exc_info.value.matrix_name == "A"

    def test_negative_zero_is_zero(self):
        with pytest.raises(SingularMatrixError):
            check_invertible(-0.0, "A")

    @pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
    def test_non_finite_raises_numerical(self, value):
        with pytest.raises(NumericalError, match="cannot invert"):
            check_invertible(value, "A")
