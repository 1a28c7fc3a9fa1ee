"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix
from pymatrix.matrix import execution


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def sequential_mode():
    """Every test starts and ends in sequential mode."""
    execution.set_parallel(False)
    yield
    execution.set_parallel(False)


@pytest.fixture
def a_2x3():
    """2x3 left operand of the reference product."""
    return Matrix(2, 3, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def b_3x2():
    """3x2 right operand of the reference product."""
    return Matrix(3, 2, [7, 8, 9, 10, 11, 12])


@pytest.fixture
def random_pair(rng):
    """Random 6x5 and 5x4 integer matrices plus their numpy sources."""
    A = rng.integers(-10, 10, size=(6, 5))
    B = rng.integers(-10, 10, size=(5, 4))
    return Matrix.from_array(A), Matrix.from_array(B), A, B
