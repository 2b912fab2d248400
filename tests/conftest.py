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
def noisy_line_data(rng):
    """Noisy samples around y = 1.5 + 0.75 x with positive weights."""
    n = 200
    x = rng.uniform(-5.0, 5.0, n)
    y = 1.5 + 0.75 * x + rng.standard_normal(n) * 0.1
    weights = rng.uniform(0.5, 2.0, n)
    return x, y, weights


@pytest.fixture
def weighted_fixture():
    """Seven-point data set with integer weights."""
    x = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]
    y = [1.0, 3.0, 4.0, 5.0, 2.0, 3.0, 4.0]
    weights = [1.0, 2.0, 3.0, 1.0, 8.0, 1.0, 5.0]
    return x, y, weights
