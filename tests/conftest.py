"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """4x4 diagonally dominant matrix: non-singular, modest condition number."""
    a = rng.standard_normal((4, 4)) + 8.0 * np.eye(4)
    return Matrix.from_array(a)


@pytest.fixture
def m3x3():
    """3x3 with det 132 (integer arithmetic throughout)."""
    return Matrix.from_string("9 8 4 ; 2 3 7; 4 1 1")


@pytest.fixture
def singular3x3():
    """Classic 1..9 matrix: rank 2, determinant exactly 0."""
    return Matrix.from_string("1 2 3 ; 4 5 6 ; 7 8 9")


@pytest.fixture
def augmented_system():
    """
    [A | b] for 5x-6y-7z=7, 3x-2y+5z=-17, 2x+4y-3z=29.

    Solution x=2, y=4, z=-3.
    """
    return Matrix.from_string("5 -6 -7 7 ; 3 -2 5 -17 ; 2 4 -3 29")
