"""
Laplace (cofactor) expansion kernels on a flat row-major square buffer.

Exponential in n. Minors are always fresh buffers gathered by index
arithmetic, never views into the parent.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def minor_buffer(data: NDArray[np.float64], n: int, row: int, col: int) -> NDArray[np.float64]:
    """Copy of the (n-1)x(n-1) submatrix without `row` and `col`."""
    index = [
        r * n + c
        for r in range(n) if r != row
        for c in range(n) if c != col
    ]
    return data[index]


def expansion_row(data: NDArray[np.float64], n: int, expansion: str) -> int:
    """
    Row to expand along.

    'fixed' always expands along row 1. 'sparsest' picks the first row
    with the most exact zeros.
    """
    if expansion == 'fixed':
        return 1
    zeros = [int(np.count_nonzero(data[r * n:(r + 1) * n] == 0.0)) for r in range(n)]
    return zeros.index(max(zeros))


def determinant(data: NDArray[np.float64], n: int, expansion: str = 'fixed') -> float:
    """Determinant of an n x n buffer by cofactor expansion."""
    if n == 1:
        return float(data[0])
    if n == 2:
        return float(data[0] * data[3] - data[1] * data[2])

    row = expansion_row(data, n, expansion)
    total = 0.0
    for j in range(n):
        entry = float(data[row * n + j])
        if entry == 0.0:
            continue
        total += cofactor(data, n, row, j, expansion) * entry
    return total


def cofactor(
    data: NDArray[np.float64],
    n: int,
    row: int,
    col: int,
    expansion: str = 'fixed',
) -> float:
    """Signed minor (-1)^(row+col) * det(minor(row, col)). 1.0 for n == 1."""
    if n == 1:
        return 1.0
    minor = determinant(minor_buffer(data, n, row, col), n - 1, expansion)
    return -minor if (row + col) % 2 else minor


def cofactor_buffer(data: NDArray[np.float64], n: int, expansion: str = 'fixed') -> NDArray[np.float64]:
    """Matrix of cofactors, entry (r, c) = cofactor(r, c)."""
    out = np.empty(n * n, dtype=np.float64)
    for r in range(n):
        for c in range(n):
            out[r * n + c] = cofactor(data, n, r, c, expansion)
    return out
