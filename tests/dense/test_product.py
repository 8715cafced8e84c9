"""
Tests for the matrix product and transpose.
"""

import numpy as np
import pytest

from pymatrix import DimensionMismatchError, Matrix


class TestDot:

    def test_non_square_product(self):
        a = Matrix.from_string("1 2 3 ; 4 5 6")
        b = Matrix.from_string("7 8 ; 9 10 ; 11 12")
        out = a.dot(b)
        assert out.shape == (2, 2)
        assert out.tolist() == [[58.0, 64.0], [139.0, 154.0]]

    def test_shape_follows_outer_dimensions(self):
        out = Matrix(2, 3).dot(Matrix(3, 5))
        assert out.shape == (2, 5)

    def test_row_times_column(self):
        row = Matrix.from_string("1 2 3")
        col = row.transpose()
        assert row.dot(col).tolist() == [[14.0]]
        assert col.dot(row).shape == (3, 3)

    def test_identity_is_neutral(self, m3x3):
        assert m3x3.dot(Matrix.eye(3)) == m3x3
        assert Matrix.eye(3).dot(m3x3) == m3x3

    def test_matches_numpy(self, rng):
        x = rng.standard_normal((4, 6))
        y = rng.standard_normal((6, 3))
        out = Matrix.from_array(x).dot(Matrix.from_array(y))
        np.testing.assert_allclose(out.to_array(), x @ y, rtol=1e-12)

    def test_inner_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="M1 is 2x3, M2 is 2x3") as exc_info:
            Matrix(2, 3).dot(Matrix(2, 3))
        assert exc_info.value.operation == "dot"

    def test_square_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(3, 3).dot(Matrix(2, 2))

    def test_matmul_operator(self, m3x3):
        assert m3x3 @ m3x3 == m3x3.dot(m3x3)

    def test_operands_unchanged(self, m3x3):
        before = m3x3.copy()
        m3x3.dot(m3x3)
        assert m3x3 == before


class TestTranspose:

    def test_shape_and_values(self):
        m = Matrix.from_string("1 2 3 ; 4 5 6")
        t = m.transpose()
        assert t.shape == (3, 2)
        assert t.tolist() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]

    def test_buffer_is_row_major(self):
        t = Matrix.from_string("1 2 3 ; 4 5 6").transpose()
        np.testing.assert_array_equal(t.data, [1, 4, 2, 5, 3, 6])

    def test_involution(self, m3x3):
        assert m3x3.transpose().transpose() == m3x3

    def test_t_property(self, m3x3):
        assert m3x3.T == m3x3.transpose()

    def test_independent_buffer(self, m3x3):
        t = m3x3.transpose()
        t.set(0, 1, -1.0)
        assert m3x3.get(1, 0) == 2.0

    def test_product_transpose_rule(self, rng):
        a = Matrix.from_array(rng.standard_normal((3, 4)))
        b = Matrix.from_array(rng.standard_normal((4, 2)))
        assert a.dot(b).transpose().allclose(b.transpose().dot(a.transpose()))
