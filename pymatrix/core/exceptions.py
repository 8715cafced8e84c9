"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Input problems are ValidationErrors, shape
problems are DimensionErrors, and failures of the arithmetic itself are
NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ParseError(ValidationError):
    """
    A text token could not be read as a floating-point number.

    Attributes:
        token: The offending token, if known
        row: Zero-based row index of the token, if known
        column: Zero-based column index of the token, if known
    """

    def __init__(
        self,
        message: str,
        token: str | None = None,
        row: int | None = None,
        column: int | None = None,
    ):
        super().__init__(message)
        self.token = token
        self.row = row
        self.column = column


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when shapes don't match expected dimensions or when two
    operands have incompatible shapes.
    """
    pass


class InvalidDimensionsError(DimensionError):
    """
    A matrix with zero (or negative) rows or columns was requested.

    Attributes:
        rows: Requested number of rows
        cols: Requested number of columns
    """

    def __init__(self, message: str, rows: int | None = None, cols: int | None = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class RaggedInputError(DimensionError):
    """
    Parsed rows have differing numbers of entries.

    Attributes:
        row: Zero-based index of the first row whose length differs
        expected: Number of entries in the first row
        actual: Number of entries in the offending row
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """
    A square-only operation was invoked on a non-square matrix.

    Attributes:
        shape: (rows, cols) of the matrix
        operation: Name of the operation that required a square matrix
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.operation = operation


class DimensionMismatchError(DimensionError):
    """
    Two operands have incompatible shapes.

    Attributes:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
        operation: Name of the operation
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an operation requires invertibility (inverse, solve,
    pivoting without row exchanges) but the matrix does not have it.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant that was found to be zero, if computed
        rank: Numerical rank, if computed
        expected_rank: Rank required by the operation
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.rank = rank
        self.expected_rank = expected_rank
