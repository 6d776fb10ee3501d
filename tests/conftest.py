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
def square_ints():
    """3x3 integer matrix with distinct entries."""
    return Matrix.from_([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def wide_ints():
    """2x3 integer matrix (non-square)."""
    return Matrix.from_([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def random_int_pair(rng):
    """Conformant (4x3, 3x5) random integer arrays as plain-int matrices."""
    a = rng.integers(-9, 10, size=(4, 3))
    b = rng.integers(-9, 10, size=(3, 5))
    return Matrix.from_(a.tolist()), Matrix.from_(b.tolist()), a, b
