"""
Display formatting.

Each row renders as a bracketed, space-separated list of fixed-precision
values; one line per row with a newline after the last.
"""

from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

from pymatrix.core.exceptions import ValidationError

if TYPE_CHECKING:
    from pymatrix.dense.matrix import Matrix


DEFAULT_PRECISION = 3


def format_row(values: Iterable[float], precision: int = DEFAULT_PRECISION) -> str:
    """Render one row, e.g. '[1.000 2.000 3.000]'."""
    return "[" + " ".join(f"{v:.{precision}f}" for v in values) + "]"


def format_matrix(matrix: 'Matrix', precision: int = DEFAULT_PRECISION) -> str:
    """
    Render a matrix for display.

    >>> print(format_matrix(Matrix.from_string("1 2 ; 3 4")), end="")
    [1.000 2.000]
    [3.000 4.000]
    """
    if precision < 0:
        raise ValidationError(f"precision must be non-negative, got {precision}")
    return "".join(format_row(row, precision) + "\n" for row in matrix.to_array())
