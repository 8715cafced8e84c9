"""
Text and file adapter.

Readers produce a ParsedMatrix (rows, cols, flat buffer); Matrix builds
itself from one via Matrix.from_string / Matrix.from_file. The formatter
renders a Matrix back into bracketed rows.

Public API:
    parse_string(text, delimiter=';')  - "1 2 3 ; 4 5 6"
    parse_file(path)                   - one row per line
    load_file(path)                    - .npy or text, by suffix
    format_matrix(m, precision=3)      - display rows
"""

from pymatrix.io._parse import (
    ParsedMatrix,
    parse_rows,
    parse_string,
    parse_file,
    parse_array,
    load_file,
)
from pymatrix.io._format import DEFAULT_PRECISION, format_row, format_matrix

__all__ = [
    "ParsedMatrix",
    "parse_rows",
    "parse_string",
    "parse_file",
    "parse_array",
    "load_file",
    "DEFAULT_PRECISION",
    "format_row",
    "format_matrix",
]
