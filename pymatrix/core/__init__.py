"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the dense
matrix type, the text adapter, and the functional API.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance constants
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    ParseError,
    DimensionError,
    InvalidDimensionsError,
    RaggedInputError,
    NotSquareError,
    DimensionMismatchError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "ParseError",
    "DimensionError",
    "InvalidDimensionsError",
    "RaggedInputError",
    "NotSquareError",
    "DimensionMismatchError",
    "NumericalError",
    "SingularMatrixError",
]
