"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a_2x2():
    return Matrix([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def b_2x2():
    return Matrix([[5.0, 6.0], [7.0, 8.0]])


@pytest.fixture
def a_2x3():
    return Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def random_pair(rng):
    """Two random 4x3 matrices of integer-valued floats (exact arithmetic)."""
    x = rng.integers(-50, 50, size=(4, 3)).astype(np.float64)
    y = rng.integers(-50, 50, size=(4, 3)).astype(np.float64)
    return Matrix(x), Matrix(y)
