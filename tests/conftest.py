"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import from_rows
from densematrix.core import config


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a22():
    """[[1, 2], [3, 4]] with int cells."""
    return from_rows([[1, 2], [3, 4]])


@pytest.fixture
def b22():
    """[[5, 6], [7, 8]] with int cells."""
    return from_rows([[5, 6], [7, 8]])


@pytest.fixture
def a23():
    """[[1, 2, 3], [4, 5, 6]] with int cells."""
    return from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture(autouse=True)
def restore_settings():
    """Keep debug settings from leaking between tests."""
    settings = config.get_settings()
    saved = (settings.debug, settings.sink)
    yield
    settings.debug, settings.sink = saved
