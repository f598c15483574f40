import io

import pytest
from fastapi.testclient import TestClient

from server_core.app_factory import create_app
from server_core.log import configure_logger, shutdown_logger


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    logger = configure_logger(stream=stream)
    yield stream, logger
    shutdown_logger()


@pytest.fixture
def client(log_stream):
    _, logger = log_stream
    with TestClient(create_app(logger=logger)) as c:
        yield c
