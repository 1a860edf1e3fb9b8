import logging

import pytest

from clmath.logging import logger


@pytest.fixture(scope="session", autouse=True)
def _set_clmath_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)
