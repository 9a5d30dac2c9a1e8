"""Unit tests for the in-process EventBus."""

import pytest

from snapix.domain.posts.entities import Post
from snapix.domain.posts.events import PostCreatedEvent, PostDeletedEvent
from snapix.infrastructure.messaging import EventBus


@pytest.fixture
def created_event():
    return PostCreatedEvent(post=Post(id=1, author_id=7, image_id="img-1"))


class TestEventBus:
    """Tests for subscribe and publish."""

    @pytest.mark.asyncio
    async def test_publish_reaches_subscribers_in_order(self, created_event):
        # Arrange
        bus = EventBus()
        received = []

        async def first(event):
            received.append(("first", event))

        async def second(event):
            received.append(("second", event))

        bus.subscribe(PostCreatedEvent, first)
        bus.subscribe(PostCreatedEvent, second)

        # Act
        await bus.publish(created_event)

        # Assert
        assert received == [("first", created_event), ("second", created_event)]

    @pytest.mark.asyncio
    async def test_failing_subscriber_does_not_stop_others(self, created_event):
        """Test: One subscriber raising leaves the rest and the publisher unaffected."""
        # Arrange
        bus = EventBus()
        received = []

        async def broken(event):
            raise RuntimeError("subscriber bug")

        async def healthy(event):
            received.append(event)

        bus.subscribe(PostCreatedEvent, broken)
        bus.subscribe(PostCreatedEvent, healthy)

        # Act
        await bus.publish(created_event)

        # Assert
        assert received == [created_event]

    @pytest.mark.asyncio
    async def test_only_exact_type_subscribers_receive(self, created_event):
        bus = EventBus()
        received = []

        async def on_delete(event):
            received.append(event)

        bus.subscribe(PostDeletedEvent, on_delete)

        await bus.publish_all([created_event])

        assert received == []

    def test_subscribers_count_per_type(self):
        bus = EventBus()

        async def handler(event):
            pass

        bus.subscribe(PostCreatedEvent, handler)

        assert bus.get_subscribers_count(PostCreatedEvent) == 1
        assert bus.get_subscribers_count(PostDeletedEvent) == 0
