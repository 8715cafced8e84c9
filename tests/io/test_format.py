"""
Tests for display formatting.
"""

import pytest

from pymatrix import Matrix, ValidationError
from pymatrix.io import format_matrix, format_row


class TestFormatRow:

    def test_default_precision(self):
        assert format_row([1, 2.5, -3]) == "[1.000 2.500 -3.000]"

    def test_precision(self):
        assert format_row([1 / 3], precision=5) == "[0.33333]"

    def test_zero_precision(self):
        assert format_row([1.4, 2.6], precision=0) == "[1 3]"


class TestFormatMatrix:

    def test_one_line_per_row(self):
        text = format_matrix(Matrix.from_string("1 2 ; 3 4"))
        assert text == "[1.000 2.000]\n[3.000 4.000]\n"

    def test_str_and_format(self, m3x3):
        assert str(m3x3) == format_matrix(m3x3)
        assert m3x3.format(precision=1).splitlines()[0] == "[9.0 8.0 4.0]"

    def test_negative_precision(self, m3x3):
        with pytest.raises(ValidationError, match="precision"):
            m3x3.format(precision=-1)

    def test_single_entry(self):
        assert str(Matrix.from_string("42")) == "[42.000]\n"

    def test_corrected_output_has_no_negative_zero(self):
        m = Matrix.from_string("-0 -0.000001")
        m.correct()
        assert str(m) == "[0.000 0.000]\n"

    def test_reparse_display_text(self, m3x3):
        """Display text, brackets stripped, parses back with newline rows."""
        text = format_matrix(m3x3).replace("[", "").replace("]", "")
        assert Matrix.from_string(text, delimiter="\n") == m3x3
