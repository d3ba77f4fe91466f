import logging

import pytest

from py_vec3 import Vec3d, Vec3f, reset_config
from py_vec3.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(params=[Vec3f, Vec3d], ids=["Vec3f", "Vec3d"])
def vec_type(request):
    """Run the test once for each precision."""
    return request.param


@pytest.fixture(autouse=True)
def clean_config():
    reset_config()
    yield
    reset_config()
