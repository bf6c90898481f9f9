"""Configuration file
"""

import pytest

from vosealias.configuration import Configuration


@pytest.fixture(scope="session")
def configuration():
    return Configuration(seed=123456, nb_draws=100_000)


@pytest.fixture
def uniform(configuration):
    """new seeded uniform generator for each test so that the tests do not depend on their order"""
    return configuration.uniform()


@pytest.fixture(scope="session")
def distributions():
    """weights and their expected normalised distribution"""
    val = {
        "uniform": ([0.5, 0.5], [0.5, 0.5]),
        "uniform_scaled": ([5, 5], [0.5, 0.5]),
        "increasing": ([0.1, 0.2, 0.3, 0.4], [0.1, 0.2, 0.3, 0.4]),
        "increasing_scaled": ([10, 20, 30, 40], [0.1, 0.2, 0.3, 0.4]),
        "under_one": ([0.1, 0.2, 0.3], [0.1, 0.2, 0.3, 0.4]),
    }
    return val
