"""
Linear algebra solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymatrix.core.result import Result
from pymatrix.dense.matrix import Matrix


@dataclass(frozen=True)
class LinalgParams:
    """
    Parameter payload for the functional API.

    All fields are optional (None if not computed). det() populates
    determinant; inv() populates matrix and determinant; rref() and
    solve() populate matrix, rank and pivot_columns.
    """
    matrix: Matrix | None = None
    determinant: float | None = None
    rank: int | None = None
    pivot_columns: tuple[int, ...] | None = None


@dataclass
class LinalgSolution:
    """
    User-facing linear algebra results.

    Wraps Result[LinalgParams] and provides convenient accessors.
    """
    _result: Result[LinalgParams]
    _input: Matrix

    @property
    def matrix(self) -> Matrix | None:
        """Resulting matrix (inverse, reduced form, or solution), if any."""
        return self._result.params.matrix

    @property
    def determinant(self) -> float | None:
        return self._result.params.determinant

    @property
    def rank(self) -> int | None:
        return self._result.params.rank

    @property
    def pivot_columns(self) -> tuple[int, ...] | None:
        return self._result.params.pivot_columns

    @property
    def input_shape(self) -> tuple[int, int]:
        return self._input.shape

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable report."""
        rows, cols = self.input_shape
        lines = [
            f"{self.info.get('method', 'unknown')} ({self.backend_name})",
            f"Input: {rows}x{cols} matrix",
        ]

        if self.determinant is not None:
            lines.append(f"Determinant: {self.determinant:.6g}")

        if self.rank is not None:
            lines.append(f"Rank: {self.rank}")

        if self.pivot_columns is not None:
            cols_str = ", ".join(str(c) for c in self.pivot_columns) or "none"
            lines.append(f"Pivot columns: {cols_str}")

        if self.matrix is not None:
            lines.append("Result:")
            lines.append(self.matrix.format().rstrip("\n"))

        if self.timing is not None:
            lines.append(f"Time: {self.timing['total_seconds']:.6f}s")

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        rows, cols = self.input_shape
        return f"LinalgSolution(method={self.info.get('method')!r}, input={rows}x{cols})"
