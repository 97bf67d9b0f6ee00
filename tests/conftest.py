import logging

import pytest

from py_vec3.config import Vec3Config, basic_config
from py_vec3.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture
def restore_config():
    """Reinstate the default configuration after a test that changes it."""
    yield
    basic_config(Vec3Config())
