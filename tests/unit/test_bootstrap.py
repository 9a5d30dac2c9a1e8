"""Unit tests for the composition root."""

from unittest.mock import AsyncMock

import pytest

from snapix.bootstrap import MESSAGE_TYPES, build_container
from snapix.config.settings import get_settings
from snapix.domain.posts.events import PostCreatedEvent


class TestBuildContainer:
    @pytest.mark.asyncio
    async def test_every_message_type_has_a_handler(self):
        """Test: One handler per known message type, nothing extra."""
        container = build_container(get_settings(), notification_client=AsyncMock())

        try:
            assert container.dispatcher.registered_types == frozenset(MESSAGE_TYPES)
            assert len(MESSAGE_TYPES) == 22
            assert container.celery_app is None
            assert container.event_bus.get_subscribers_count(PostCreatedEvent) == 1
        finally:
            await container.dispose()

    @pytest.mark.asyncio
    async def test_celery_client_by_default(self):
        container = build_container(get_settings())

        try:
            assert container.celery_app is not None
            assert container.celery_app.conf.task_default_queue == "notifier"
        finally:
            await container.dispose()
