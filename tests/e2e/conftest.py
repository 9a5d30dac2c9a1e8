"""Fixtures for API tests.

The dispatcher is replaced by a mock, so routes are exercised without a
database: each test sets what ``dispatch`` returns or raises.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from snapix.config.settings import get_settings
from snapix.infrastructure.auth import JWTManager
from snapix.main import create_app
from snapix.presentation.api.dependencies import get_dispatcher, get_token_service


@pytest.fixture
def tokens():
    return JWTManager(
        "test-access-secret",
        "test-refresh-secret",
        timedelta(hours=1),
        timedelta(hours=1),
    )


@pytest.fixture
def dispatcher():
    dispatcher = MagicMock()
    dispatcher.dispatch = AsyncMock()
    return dispatcher


@pytest.fixture
def app(dispatcher, tokens):
    app = create_app(get_settings())
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    app.dependency_overrides[get_token_service] = lambda: tokens
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers(tokens):
    """Authorization header for user 7."""
    return {"Authorization": f"Bearer {tokens.create_access_token(7)}"}
