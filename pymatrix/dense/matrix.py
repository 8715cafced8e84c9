"""
Matrix: dense 2-D float64 matrix on a flat row-major buffer.

Element (r, c) lives at data[r*cols + c]. A Matrix owns its buffer: every
operation that returns a Matrix returns a new, independent one, and only
identity(), apply(), set(), rref() and correct() mutate in place.

Construction:
    Matrix(rows, cols)            zero-filled
    Matrix.eye(n)                 identity
    Matrix.from_rows(rows)        nested sequences
    Matrix.from_array(array)      numpy / array-like
    Matrix.from_string(text)      "1 2 3 ; 4 5 6"
    Matrix.from_file(path)        text (one row per line) or .npy
"""

from __future__ import annotations

import operator
import warnings
from pathlib import Path
from typing import Any, Callable, Literal, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ValidationError,
    InvalidDimensionsError,
    RaggedInputError,
)
from pymatrix.core.validation import (
    check_dimensions,
    check_square,
    check_same_shape,
    check_inner_dimensions,
    check_index,
    check_choice,
    check_invertible,
)
from pymatrix.core.compute.tolerances import ToleranceTier, FP64
from pymatrix.io._parse import ParsedMatrix, parse_string, parse_array, load_file
from pymatrix.io._format import DEFAULT_PRECISION, format_matrix
from pymatrix.dense._correction import correct_buffer
from pymatrix.dense._elimination import gauss_jordan_partial, gauss_jordan_initial
from pymatrix.dense._laplace import determinant, cofactor, cofactor_buffer


Pivoting = Literal['partial', 'initial']
Expansion = Literal['fixed', 'sparsest']

PIVOTING_METHODS: tuple[str, ...] = ('partial', 'initial')
EXPANSION_METHODS: tuple[str, ...] = ('fixed', 'sparsest')

# Above this size det() warns: cofactor expansion visits O(n!) minors
LAPLACE_WARN_SIZE = 8


class Matrix:
    """
    Dense row-major float64 matrix.

    Attributes are read through properties; the backing buffer is exposed
    read-only via `data`. Element access goes through get()/set().
    """

    __slots__ = ('_rows', '_cols', '_data')

    def __init__(self, rows: int, cols: int):
        """
        Zero-filled rows x cols matrix.

        Raises:
            InvalidDimensionsError: If rows < 1 or cols < 1
            ValidationError: If rows or cols is not an integer
        """
        check_dimensions(rows, cols)
        self._rows = int(rows)
        self._cols = int(cols)
        self._data = np.zeros(self._rows * self._cols, dtype=np.float64)

    # === Construction ===

    @classmethod
    def _from_buffer(cls, rows: int, cols: int, data: NDArray[np.float64]) -> Matrix:
        """Adopt a flat buffer the caller no longer uses. No copy."""
        if data.shape != (rows * cols,):
            raise ValueError(
                f"buffer of shape {data.shape} cannot back a {rows}x{cols} matrix"
            )
        m = cls.__new__(cls)
        m._rows = rows
        m._cols = cols
        m._data = np.ascontiguousarray(data, dtype=np.float64)
        return m

    @classmethod
    def _from_parsed(cls, parsed: ParsedMatrix) -> Matrix:
        return cls._from_buffer(parsed.rows, parsed.cols, parsed.data)

    @classmethod
    def eye(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        m = cls(n, n)
        m.identity()
        return m

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """
        Build from a sequence of equally long numeric rows.

        Raises:
            ValidationError: If a row is not a sequence or holds non-numbers
            RaggedInputError: If row lengths differ
            InvalidDimensionsError: If there are no rows or the rows are empty
        """
        materialized = []
        for i, r in enumerate(rows):
            try:
                materialized.append(list(r))
            except TypeError as e:
                raise ValidationError(
                    f"rows[{i}]: expected a sequence of numbers, got {type(r).__name__}"
                ) from e
        rows = materialized
        if not rows:
            raise InvalidDimensionsError("Matrix needs at least one row, got none", rows=0, cols=0)

        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise RaggedInputError(
                    f"Row {i} has {len(r)} entries, expected {width} (the length of row 0)",
                    row=i,
                    expected=width,
                    actual=len(r),
                )
        return cls._from_parsed(parse_array(rows, name='rows'))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build from a 2-D array-like (copied). 1-D input becomes one row.

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input has more than 2 dimensions
        """
        return cls._from_parsed(parse_array(array))

    @classmethod
    def from_string(cls, text: str, delimiter: str = ';') -> Matrix:
        """
        Build from the delimiter form: rows split on `delimiter`, entries
        on whitespace.

        >>> Matrix.from_string("1 2 3 ; 4 5 6").shape
        (2, 3)
        """
        return cls._from_parsed(parse_string(text, delimiter=delimiter))

    @classmethod
    def from_file(cls, path: str | Path) -> Matrix:
        """Build from a text file (one row per line) or a .npy file."""
        return cls._from_parsed(load_file(path))

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Number of entries, rows * cols."""
        return self._data.size

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the flat row-major buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def T(self) -> Matrix:
        """Alias for transpose()."""
        return self.transpose()

    # === Element access ===

    def _offset(self, row: int, col: int) -> int:
        check_index(row, col, self.shape)
        return row * self._cols + col

    def get(self, row: int, col: int) -> float:
        """Entry (row, col). Raises IndexError when out of range."""
        return float(self._data[self._offset(row, col)])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite entry (row, col). Raises IndexError when out of range."""
        self._data[self._offset(row, col)] = value

    def row(self, row: int) -> NDArray[np.float64]:
        """Copy of one row."""
        if not 0 <= row < self._rows:
            raise IndexError(f"row index {row} out of range for {self._rows}x{self._cols} matrix")
        start = row * self._cols
        return self._data[start:start + self._cols].copy()

    def column(self, col: int) -> NDArray[np.float64]:
        """Copy of one column."""
        if not 0 <= col < self._cols:
            raise IndexError(f"column index {col} out of range for {self._rows}x{self._cols} matrix")
        return self._data[col::self._cols].copy()

    def to_array(self) -> NDArray[np.float64]:
        """2-D numpy copy, shape (rows, cols)."""
        return self._data.reshape(self._rows, self._cols).copy()

    def tolist(self) -> list[list[float]]:
        return self._data.reshape(self._rows, self._cols).tolist()

    def copy(self) -> Matrix:
        """Deep copy with an independent buffer."""
        return Matrix._from_buffer(self._rows, self._cols, self._data.copy())

    # === In-place transforms ===

    def identity(self) -> None:
        """
        Overwrite with the identity: 1.0 on the diagonal, 0.0 elsewhere.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape, 'identity')
        self._data[:] = 0.0
        self._data[::self._cols + 1] = 1.0

    def apply(self, f: Callable[[float], float]) -> None:
        """Replace every entry x with f(x), in flat index order."""
        data = self._data
        for i in range(data.size):
            data[i] = f(float(data[i]))

    def correct(self) -> None:
        """
        Clean floating-point drift in place.

        Rounds values within 1e-7 below an integer up to it, snaps tiny
        positive (< 1e-6) and tiny negative (> -1e-5) values to zero, and
        normalizes negative zero.
        """
        correct_buffer(self._data)

    def rref(self, pivoting: Pivoting = 'partial') -> tuple[int, ...]:
        """
        Reduce to reduced row-echelon form in place (Gauss-Jordan), then
        run the correction pass.

        Args:
            pivoting: 'partial' picks the largest-magnitude pivot in each
                column and skips columns with no usable pivot.
                'initial' makes at most one row exchange before the first
                lead (first row with a positive leading entry) and pivots
                on the diagonal afterwards.

        Returns:
            Pivot column indices chosen by the elimination, in order

        Raises:
            ValidationError: If pivoting is unknown
            SingularMatrixError: With pivoting='initial', on a zero diagonal
                pivot. The matrix is left unchanged.
        """
        check_choice(pivoting, PIVOTING_METHODS, 'pivoting')

        work = self._data.copy()
        if pivoting == 'partial':
            pivots = gauss_jordan_partial(work, self._rows, self._cols)
        else:
            pivots = gauss_jordan_initial(work, self._rows, self._cols)
        correct_buffer(work)
        self._data[:] = work
        return pivots

    # === Elementwise ===

    def combine(self, other: Matrix, f: Callable[[float, float], float]) -> Matrix:
        """
        New matrix with f(self[i], other[i]) at every flat index i.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        check_same_shape(self.shape, other.shape, 'combine')
        out = np.fromiter(
            (f(a, b) for a, b in zip(self._data.tolist(), other._data.tolist())),
            dtype=np.float64,
            count=self.size,
        )
        return Matrix._from_buffer(self._rows, self._cols, out)

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum."""
        return self.combine(other, operator.add)

    def subtract(self, other: Matrix) -> Matrix:
        """Elementwise difference, self - other."""
        return self.combine(other, operator.sub)

    def multiply(self, other: Matrix) -> Matrix:
        """Elementwise (Hadamard) product."""
        return self.combine(other, operator.mul)

    # === Linear algebra ===

    def dot(self, other: Matrix) -> Matrix:
        """
        Matrix product self . other, shape (self.rows, other.cols).

        Raises:
            DimensionMismatchError: If self.cols != other.rows
        """
        check_inner_dimensions(self.shape, other.shape, 'dot')
        product = (
            self._data.reshape(self._rows, self._cols)
            @ other._data.reshape(other._rows, other._cols)
        )
        return Matrix._from_buffer(self._rows, other._cols, product.ravel())

    def transpose(self) -> Matrix:
        """New matrix with result[j, i] = self[i, j]."""
        flipped = self._data.reshape(self._rows, self._cols).T.flatten()
        return Matrix._from_buffer(self._cols, self._rows, flipped)

    def det(self, expansion: Expansion = 'fixed') -> float:
        """
        Determinant by cofactor (Laplace) expansion.

        1x1 and 2x2 are closed-form. Larger matrices expand along a row:
        'fixed' always uses row 1, 'sparsest' uses the row with the most
        zeros at each level of recursion.

        Raises:
            NotSquareError: If the matrix is not square
            ValidationError: If expansion is unknown
        """
        check_square(self.shape, 'det')
        check_choice(expansion, EXPANSION_METHODS, 'expansion')

        n = self._rows
        if n > LAPLACE_WARN_SIZE:
            warnings.warn(
                f"Cofactor expansion of a {n}x{n} matrix visits O(n!) minors "
                f"and may be very slow.",
                RuntimeWarning,
                stacklevel=2,
            )
        return determinant(self._data, n, expansion)

    def cofactor(self, row: int, col: int, expansion: Expansion = 'fixed') -> float:
        """
        Signed minor (-1)^(row+col) * det(minor without row and col).

        Raises:
            NotSquareError: If the matrix is not square
            IndexError: If (row, col) is out of range
        """
        check_square(self.shape, 'cofactor')
        check_index(row, col, self.shape)
        check_choice(expansion, EXPANSION_METHODS, 'expansion')
        return cofactor(self._data, self._rows, row, col, expansion)

    def adjugate(self, expansion: Expansion = 'fixed') -> Matrix:
        """Transpose of the corrected cofactor matrix."""
        check_square(self.shape, 'adjugate')
        check_choice(expansion, EXPANSION_METHODS, 'expansion')
        n = self._rows
        cof = cofactor_buffer(self._data, n, expansion)
        correct_buffer(cof)
        return Matrix._from_buffer(n, n, cof).transpose()

    def inverse(self, expansion: Expansion = 'fixed') -> Matrix:
        """
        Inverse as adjugate / det.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly 0.0
            NumericalError: If the determinant is not finite
        """
        check_square(self.shape, 'inverse')
        d = self.det(expansion)
        check_invertible(d, 'matrix')

        inv = self.adjugate(expansion)
        inv.apply(lambda x: x / d)
        return inv

    def rank(self) -> int:
        """Number of pivots in the partial-pivot RREF of a copy."""
        return len(self.copy().rref('partial'))

    # === Comparison ===

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
        tier: ToleranceTier = FP64,
    ) -> bool:
        """
        Same shape and every entry within tolerance.

        rtol/atol default to the given tier (FP64).
        """
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data,
            other._data,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    # === Operators ===

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray:
        arr = self.to_array()
        return arr if dtype is None else arr.astype(dtype)

    # === Display ===

    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        """Bracketed rows with fixed precision, newline-terminated."""
        return format_matrix(self, precision=precision)

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols})"
