from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from kakinada_ccc.config import Settings
from kakinada_ccc.controller import CommandCenter
from kakinada_ccc.detection import MockDetectionBackend
from kakinada_ccc.main import create_app

@pytest.fixture
def fixed_time():
    return datetime(2025, 11, 1, 21, 12, tzinfo=timezone.utc)


@pytest.fixture
def backend(fixed_time):
    return MockDetectionBackend(clock=lambda: fixed_time)


@pytest.fixture
def center(backend):
    return CommandCenter(backend=backend)


@pytest.fixture
def settings():
    return Settings(_env_file=None, APP_ENV="test", LOG_LEVEL="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
