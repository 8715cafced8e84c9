"""
Dense matrix type.

Public API:
    Matrix              - row-major float64 matrix with arithmetic,
                          rref, det, cofactor, adjugate, inverse
    LAPLACE_WARN_SIZE   - size above which det() warns
"""

from pymatrix.dense.matrix import (
    Matrix,
    Pivoting,
    Expansion,
    PIVOTING_METHODS,
    EXPANSION_METHODS,
    LAPLACE_WARN_SIZE,
)

__all__ = [
    "Matrix",
    "Pivoting",
    "Expansion",
    "PIVOTING_METHODS",
    "EXPANSION_METHODS",
    "LAPLACE_WARN_SIZE",
]
