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
def x():
    """3x3 integer matrix [1..9]."""
    return Matrix(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])


@pytest.fixture
def y():
    """3x3 integer matrix [0..8]."""
    return Matrix(3, 3, [0, 1, 2, 3, 4, 5, 6, 7, 8])


@pytest.fixture
def rect():
    """2x3 integer matrix with negative entries."""
    return Matrix(2, 3, [-2, -1, 0, 1, 2, 3])
