"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation names included in all shape error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidDimensionsError,
    NotSquareError,
    DimensionMismatchError,
    NumericalError,
    SingularMatrixError,
)


Shape = tuple[int, int]


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (indicating mixed types or
    non-numeric data) and non-numeric dtypes such as strings.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


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


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimensions(rows: Any, cols: Any) -> None:
    """
    Verify a requested matrix size is a pair of positive integers.

    Args:
        rows: Requested number of rows
        cols: Requested number of columns

    Raises:
        ValidationError: If either value is not an integer
        InvalidDimensionsError: If either value is less than 1
    """
    for label, value in (('rows', rows), ('cols', cols)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValidationError(
                f"{label}: expected an integer, got {type(value).__name__} {value!r}"
            )

    if rows < 1 or cols < 1:
        raise InvalidDimensionsError(
            f"Matrix must have at least one row and one column, got {rows}x{cols}",
            rows=int(rows),
            cols=int(cols),
        )


def check_square(shape: Shape, operation: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise NotSquareError(
            f"{operation} requires a square matrix, got {rows}x{cols}",
            shape=shape,
            operation=operation,
        )


def check_same_shape(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify two operands have identical shapes (elementwise operations).

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation} requires matrices of the same shape: "
            f"left is {left[0]}x{left[1]}, right is {right[0]}x{right[1]}",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_inner_dimensions(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify the contraction dimension of a product matches.

    Raises:
        DimensionMismatchError: If left cols != right rows
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: dimensions not matched. "
            f"M1 is {left[0]}x{left[1]}, M2 is {right[0]}x{right[1]}",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_index(row: int, col: int, shape: Shape) -> None:
    """
    Verify (row, col) addresses an element of a matrix of the given shape.

    Negative indices are rejected; the flat row-major mapping has no
    wrap-around.

    Raises:
        IndexError: If either index is out of range
    """
    rows, cols = shape
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError(
            f"index ({row}, {col}) out of range for {rows}x{cols} matrix"
        )


def check_choice(value: str, choices: tuple[str, ...], name: str) -> None:
    """
    Verify a string option is one of the allowed values.

    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise ValidationError(f"Unknown {name}: {value!r}. Must be one of {allowed}.")


def check_invertible(determinant: float, name: str) -> None:
    """
    Verify a determinant permits inversion.

    Exact comparison with 0.0: no tolerance is applied.

    Raises:
        SingularMatrixError: If the determinant is exactly zero
        NumericalError: If the determinant is NaN or infinite
    """
    if determinant == 0.0:
        raise SingularMatrixError(
            f"{name}: determinant is 0, matrix has no inverse",
            matrix_name=name,
            determinant=determinant,
        )
    if not np.isfinite(determinant):
        raise NumericalError(
            f"{name}: determinant is {determinant}, cannot invert"
        )
