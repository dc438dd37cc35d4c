"""Pytest fixtures for perfect number search tests."""

import pytest

from perfects import Config


@pytest.fixture
def unbounded_value():
    """An upper value bound no perfect number in the tested ranges reaches."""
    return 10 ** 100


@pytest.fixture
def small_config():
    """Configuration covering exponents 2..7 with the default bounds."""
    return Config(min_perfect=1, max_perfect=10000, min_exponent=2, max_exponent=7, limit=-1)
