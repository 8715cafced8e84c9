"""
Text and file readers.

Turns delimiter-separated strings, whitespace/newline text files and
.npy files into a ParsedMatrix: row count, column count and a flat
row-major float64 buffer. Nothing here knows about Matrix; the dense
module builds Matrix instances from ParsedMatrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import (
    ValidationError,
    ParseError,
    RaggedInputError,
    InvalidDimensionsError,
)
from pymatrix.core.validation import check_array, check_2d, check_dimensions


@dataclass(frozen=True)
class ParsedMatrix:
    """
    Fully parsed rectangular input.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        data: Flat row-major buffer of length rows * cols
    """
    rows: int
    cols: int
    data: NDArray[np.float64]


def _parse_token(token: str, row: int, column: int) -> float:
    message = f"Row {row}, column {column}: {token!r} is not a valid number"
    # float() accepts digit separators ("1_000"); plain float literals do not
    if '_' in token:
        raise ParseError(message, token=token, row=row, column=column)
    try:
        return float(token)
    except ValueError as e:
        raise ParseError(message, token=token, row=row, column=column) from e


def parse_rows(lines: Iterable[str]) -> ParsedMatrix:
    """
    Parse rows of whitespace-separated numbers.

    Whitespace-only rows are skipped; row indices in error messages count
    only the rows that were kept.

    Args:
        lines: One string per matrix row

    Raises:
        RaggedInputError: If a row's entry count differs from the first row's
        ParseError: If a token is not a valid float literal
        InvalidDimensionsError: If there are no non-blank rows
    """
    values: list[float] = []
    width: int | None = None
    n_rows = 0

    for line in lines:
        tokens = line.split()
        if not tokens:
            continue

        if width is None:
            width = len(tokens)
        elif len(tokens) != width:
            raise RaggedInputError(
                f"Row {n_rows} has {len(tokens)} entries, expected {width} "
                f"(the length of row 0)",
                row=n_rows,
                expected=width,
                actual=len(tokens),
            )

        values.extend(_parse_token(tok, n_rows, j) for j, tok in enumerate(tokens))
        n_rows += 1

    if width is None:
        raise InvalidDimensionsError("Input contains no rows", rows=0, cols=0)

    return ParsedMatrix(rows=n_rows, cols=width, data=np.array(values, dtype=np.float64))


def parse_string(text: str, delimiter: str = ';') -> ParsedMatrix:
    """
    Parse the delimiter form, e.g. "1 2 3 ; 4 5 6".

    Args:
        text: Rows separated by `delimiter`, entries by whitespace
        delimiter: Row separator (default ';')
    """
    if not delimiter:
        raise ValidationError("delimiter must be a non-empty string")
    return parse_rows(text.split(delimiter))


def parse_file(path: str | Path) -> ParsedMatrix:
    """
    Parse a text file with one row per line.

    Example file:
        1.0 0.2 2.0
        3.0 4.5 1.2
        9.8 3.3 1.4

    Raises:
        FileNotFoundError: If the file does not exist
        ParseError: If the file is not UTF-8 or holds a bad token
    """
    path = Path(path)
    try:
        content = path.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise ParseError(f"{path}: not valid UTF-8 text ({e.reason})") from e
    return parse_rows(content.splitlines())


def parse_array(array: Any, name: str = 'array') -> ParsedMatrix:
    """
    Validate a numeric array-like as a matrix. 1-D input becomes one row.

    Raises:
        ValidationError: If the input is not numeric
        DimensionError: If the input is not 1-D or 2-D
        InvalidDimensionsError: If either dimension is zero
    """
    arr = check_array(array, name)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    check_2d(arr, name)
    rows, cols = arr.shape
    check_dimensions(rows, cols)
    return ParsedMatrix(rows=rows, cols=cols, data=np.array(arr, dtype=np.float64).ravel())


def load_file(path: str | Path) -> ParsedMatrix:
    """Load a matrix file, dispatching on suffix: .npy or text."""
    path = Path(path)
    if path.suffix.lower() == '.npy':
        return parse_array(np.load(path, allow_pickle=False), name=str(path))
    return parse_file(path)
