"""
Gauss-Jordan elimination kernels on a flat row-major buffer.

Every routine takes the buffer together with its (rows, cols) and works
exclusively through the row-major mapping (r, c) -> r*cols + c. Rows are
addressed as whole, disjoint slices of the one buffer; nothing is ever
copied out and written back partially.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.compute.tolerances import PIVOT_EPS


def row_slice(row: int, cols: int) -> slice:
    """Slice of the flat buffer holding one full row."""
    start = row * cols
    return slice(start, start + cols)


def swap_rows(data: NDArray[np.float64], a: int, b: int, cols: int) -> None:
    """Exchange two full rows in place."""
    if a == b:
        return
    row_a = row_slice(a, cols)
    row_b = row_slice(b, cols)
    held = data[row_a].copy()
    data[row_a] = data[row_b]
    data[row_b] = held


def eliminate(
    data: NDArray[np.float64],
    rows: int,
    cols: int,
    pivot_row: int,
    col: int,
) -> None:
    """
    Normalize the pivot row and clear its column from every other row.

    The pivot at (pivot_row, col) must be non-zero. Afterwards the pivot
    is 1.0 and column `col` is 0.0 in all other rows, above and below.
    """
    pivot = row_slice(pivot_row, cols)
    data[pivot] /= data[pivot_row * cols + col]

    for r in range(rows):
        if r == pivot_row:
            continue
        factor = data[r * cols + col]
        if factor != 0.0:
            data[row_slice(r, cols)] -= factor * data[pivot]


def gauss_jordan_partial(data: NDArray[np.float64], rows: int, cols: int) -> tuple[int, ...]:
    """
    Reduce to RREF with partial pivoting.

    For each column, the row at or below the current pivot row with the
    largest |value| in that column becomes the pivot. A column whose best
    candidate is within its own epsilon, PIVOT_EPS * max(1, max|column|)
    taken over the input, has no pivot: the round-off left at and below
    the pivot row is cleared to 0.0 and the column is skipped, so
    rank-deficient matrices reduce to true RREF.

    Returns:
        Pivot column indices, in order
    """
    column_scale = np.max(np.abs(data.reshape(rows, cols)), axis=0)
    column_eps = PIVOT_EPS * np.maximum(1.0, column_scale)

    pivots: list[int] = []
    pivot_row = 0

    for col in range(cols):
        if pivot_row >= rows:
            break

        # Column `col` from pivot_row downward
        below = slice(pivot_row * cols + col, None, cols)
        candidates = np.abs(data[below])
        best = int(np.argmax(candidates))
        if candidates[best] <= column_eps[col]:
            data[below] = 0.0
            continue

        swap_rows(data, pivot_row, pivot_row + best, cols)
        eliminate(data, rows, cols, pivot_row, col)

        pivots.append(col)
        pivot_row += 1

    return tuple(pivots)


def gauss_jordan_initial(data: NDArray[np.float64], rows: int, cols: int) -> tuple[int, ...]:
    """
    Reduce with a single up-front row exchange and diagonal pivots.

    If the top-left entry is zero, the first row with a strictly positive
    first-column entry is swapped into row 0. Each lead step then pivots
    on the diagonal entry (lead, lead) without further exchanges.

    Returns:
        Pivot column indices (0 .. min(rows, cols) - 1)

    Raises:
        SingularMatrixError: If a diagonal pivot is exactly zero
    """
    if data[0] == 0.0:
        for r in range(rows):
            if data[r * cols] > 0.0:
                swap_rows(data, 0, r, cols)
                break

    leads = min(rows, cols)
    for lead in range(leads):
        if data[lead * cols + lead] == 0.0:
            raise SingularMatrixError(
                f"Zero pivot at ({lead}, {lead}). pivoting='initial' makes no row "
                f"exchanges after the first lead; use pivoting='partial'.",
                rank=lead,
                expected_rank=leads,
            )
        eliminate(data, rows, cols, lead, lead)

    return tuple(range(leads))
