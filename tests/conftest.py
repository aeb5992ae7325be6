"""
Pytest fixtures for octarray tests.
"""

import logging

import pytest

from octarray.utils.config import Config


@pytest.fixture(autouse=True)
def reset_config():
    """Restore default configuration after every test."""
    yield
    Config.reset()


@pytest.fixture
def clean_logger():
    """Detach handlers added to the package logger during a test."""
    logger = logging.getLogger("octarray")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def matrix_3x3():
    """3x3 matrix of 1..9."""
    return [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


@pytest.fixture
def matrix_2x3():
    """2x3 matrix of 1..6."""
    return [[1, 2, 3], [4, 5, 6]]


@pytest.fixture
def cube_4x3x2():
    """4x3x2 array holding 0..23 in row-major order."""
    return [
        [[i * 6 + j * 2 + k for k in range(2)] for j in range(3)]
        for i in range(4)
    ]
