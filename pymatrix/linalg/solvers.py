"""
Functional entry points for determinant, inverse, row reduction and
linear systems.

Each function accepts a Matrix or any 2-D array-like, never mutates its
input, and returns a LinalgSolution carrying timing and any warnings
raised while computing.
"""

from __future__ import annotations

import warnings
from contextlib import contextmanager
from typing import Iterator
import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import DimensionMismatchError, SingularMatrixError
from pymatrix.core.validation import check_array, check_2d, check_square, check_invertible
from pymatrix.dense.matrix import Matrix, Pivoting, Expansion
from pymatrix.linalg.solution import LinalgParams, LinalgSolution


def _ensure_matrix(x: ArrayLike | Matrix) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(x, Matrix):
        return x
    return Matrix.from_array(x)


@contextmanager
def _collect_warnings() -> Iterator[list[str]]:
    """Record warnings raised inside the block; messages land in the list on exit."""
    messages: list[str] = []
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        yield messages
    messages.extend(str(w.message) for w in caught)


def det(x: ArrayLike | Matrix, *, expansion: Expansion = 'fixed') -> LinalgSolution:
    """
    Determinant by cofactor expansion.

    Parameters
    ----------
    x : Matrix or array-like
        Square matrix.
    expansion : str
        'fixed' (always row 1) or 'sparsest' (row with most zeros).

    Returns
    -------
    LinalgSolution with determinant populated.
    """
    matrix = _ensure_matrix(x)
    timer = Timer()
    timer.start()

    with _collect_warnings() as caught:
        with timer.section('laplace'):
            d = matrix.det(expansion)

    timer.stop()

    result = Result(
        params=LinalgParams(determinant=d),
        info={'method': 'laplace', 'expansion': expansion, 'n': matrix.rows},
        timing=timer.result(),
        backend_name='cpu_laplace',
        warnings=tuple(caught),
    )
    return LinalgSolution(_result=result, _input=matrix)


def inv(x: ArrayLike | Matrix, *, expansion: Expansion = 'fixed') -> LinalgSolution:
    """
    Inverse via the adjugate: adj(A) / det(A).

    Parameters
    ----------
    x : Matrix or array-like
        Square, non-singular matrix.
    expansion : str
        Cofactor expansion strategy, see det().

    Returns
    -------
    LinalgSolution with matrix (the inverse) and determinant populated.

    Raises
    ------
    SingularMatrixError
        If the determinant is exactly zero.
    """
    matrix = _ensure_matrix(x)
    check_square(matrix.shape, 'inv')
    timer = Timer()
    timer.start()

    with _collect_warnings() as caught:
        with timer.section('determinant'):
            d = matrix.det(expansion)
        check_invertible(d, 'x')

        with timer.section('adjugate'):
            inverse = matrix.adjugate(expansion)

        with timer.section('scale'):
            inverse.apply(lambda v: v / d)

    timer.stop()

    result = Result(
        params=LinalgParams(matrix=inverse, determinant=d),
        info={'method': 'adjugate', 'expansion': expansion, 'n': matrix.rows},
        timing=timer.result(),
        backend_name='cpu_laplace',
        warnings=tuple(caught),
    )
    return LinalgSolution(_result=result, _input=matrix)


def rref(x: ArrayLike | Matrix, *, pivoting: Pivoting = 'partial') -> LinalgSolution:
    """
    Reduced row-echelon form of a copy of x.

    Parameters
    ----------
    x : Matrix or array-like
        Any matrix. Not modified.
    pivoting : str
        'partial' (default) or 'initial', see Matrix.rref().

    Returns
    -------
    LinalgSolution with matrix (the reduced copy), rank and pivot_columns.
    """
    matrix = _ensure_matrix(x)
    timer = Timer()
    timer.start()

    with timer.section('gauss_jordan'):
        reduced = matrix.copy()
        pivots = reduced.rref(pivoting)

    timer.stop()

    result = Result(
        params=LinalgParams(matrix=reduced, rank=len(pivots), pivot_columns=pivots),
        info={'method': 'gauss_jordan', 'pivoting': pivoting},
        timing=timer.result(),
        backend_name='cpu_gauss_jordan',
    )
    return LinalgSolution(_result=result, _input=matrix)


def solve(a: ArrayLike | Matrix, b: ArrayLike | Matrix) -> LinalgSolution:
    """
    Solve a . x = b by reducing the augmented matrix [a | b].

    Parameters
    ----------
    a : Matrix or array-like
        Square coefficient matrix (n x n).
    b : Matrix or array-like
        Right-hand side: vector of length n or matrix with n rows.

    Returns
    -------
    LinalgSolution with matrix (x, n x k), rank and pivot_columns of a.

    Raises
    ------
    DimensionMismatchError
        If b does not have n rows.
    SingularMatrixError
        If a is rank-deficient.
    """
    coef = _ensure_matrix(a)
    check_square(coef.shape, 'solve')
    n = coef.rows

    rhs = check_array(b.to_array() if isinstance(b, Matrix) else b, 'b')
    if rhs.ndim == 1:
        rhs = rhs.reshape(-1, 1)
    check_2d(rhs, 'b')
    if rhs.shape[0] != n:
        raise DimensionMismatchError(
            f"solve: a is {n}x{n} but b has {rhs.shape[0]} rows",
            left_shape=coef.shape,
            right_shape=(rhs.shape[0], rhs.shape[1]),
            operation='solve',
        )

    timer = Timer()
    timer.start()

    with timer.section('gauss_jordan'):
        augmented = Matrix.from_array(np.hstack([coef.to_array(), rhs]))
        pivots = tuple(c for c in augmented.rref('partial') if c < n)

    if len(pivots) < n:
        raise SingularMatrixError(
            f"solve: coefficient matrix is rank-deficient (rank={len(pivots)}, expected={n})",
            matrix_name='a',
            rank=len(pivots),
            expected_rank=n,
        )

    solution = Matrix.from_array(augmented.to_array()[:, n:])
    timer.stop()

    result = Result(
        params=LinalgParams(matrix=solution, rank=n, pivot_columns=pivots),
        info={'method': 'gauss_jordan', 'pivoting': 'partial', 'n_rhs': rhs.shape[1]},
        timing=timer.result(),
        backend_name='cpu_gauss_jordan',
    )
    return LinalgSolution(_result=result, _input=coef)
