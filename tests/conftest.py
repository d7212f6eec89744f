"""
Pytest configuration and fixtures
"""
import logging

import pytest
from fastapi.testclient import TestClient

from kinapi.main import app


@pytest.fixture(autouse=True)
def reset_kinapi_logger():
    """configure_logging binds sys.stderr; drop the handler between tests."""
    yield
    logger = logging.getLogger("kinapi")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as c:
        yield c
