"""Pytest configuration and fixtures."""

import os
import tempfile

# Required settings must exist before anything reads them
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-secret")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-secret")
os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STORAGE_ROOT", tempfile.mkdtemp(prefix="snapix-storage-"))
os.environ.setdefault("LOG_FORMAT", "console")

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402

from snapix.config.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are re-read for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_uow():
    """Unit of Work mock with AsyncMock repositories.

    ``uow_factory`` returns it; ``async with`` yields the same object.
    """
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.users = AsyncMock()
    uow.posts = AsyncMock()
    uow.posts.exists_by_image_id.return_value = False
    uow.files = AsyncMock()
    return uow


@pytest.fixture
def uow_factory(mock_uow):
    return MagicMock(return_value=mock_uow)


@pytest.fixture
def mock_storage():
    storage = AsyncMock()
    return storage


@pytest.fixture
def sample_user_data():
    """Sample data for creating users in tests."""
    return {
        "username": "neo_1999",
        "email": "neo@zion.io",
        "password_hash": "$2b$12$hash",
    }
