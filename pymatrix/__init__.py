"""
PyMatrix: dense 2-D float64 matrices with a small linear-algebra core.

Matrices live in a single flat row-major buffer. The core provides
elementwise arithmetic, matrix products, transpose, Gauss-Jordan row
reduction, determinants and inverses by cofactor expansion, and a
floating-point correction pass.

Submodules:
    dense: The Matrix type
    linalg: Functional API (det, inv, rref, solve) with timing/diagnostics
    io: Text/file parsing and display formatting
    core: Exceptions, validation, result envelope, tolerances
"""

__version__ = "0.1.0"

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
from pymatrix.dense import Matrix
from pymatrix import linalg
from pymatrix import io

__all__ = [
    "__version__",
    "Matrix",
    "linalg",
    "io",
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
