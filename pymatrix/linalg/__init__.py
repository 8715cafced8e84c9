"""
Functional linear algebra API.

Each function accepts a Matrix or a 2-D array-like, leaves it untouched,
and returns a LinalgSolution with the result, timing and warnings.

Public API:
    det(x)        - determinant by cofactor expansion
    inv(x)        - inverse via the adjugate
    rref(x)       - reduced row-echelon form, rank, pivot columns
    solve(a, b)   - a . x = b via the augmented matrix [a | b]

Example:
    >>> from pymatrix.linalg import inv
    >>> sol = inv([[4, 7], [2, 6]])
    >>> print(sol.summary())
"""

from pymatrix.linalg.solution import LinalgParams, LinalgSolution
from pymatrix.linalg.solvers import det, inv, rref, solve

__all__ = [
    "det",
    "inv",
    "rref",
    "solve",
    "LinalgParams",
    "LinalgSolution",
]
