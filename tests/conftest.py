"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_square(rng):
    """Dense 6x6 Gaussian matrix (full rank with probability 1)."""
    return rng.standard_normal((6, 6))


@pytest.fixture
def rank_deficient(rng):
    """5x4 matrix of rank 2: rows are combinations of two random rows."""
    basis = rng.standard_normal((2, 4))
    weights = rng.standard_normal((5, 2))
    return weights @ basis
