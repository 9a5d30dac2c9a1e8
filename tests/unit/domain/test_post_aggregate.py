"""Unit tests for the Post aggregate and its events."""

import pytest

from snapix.domain.posts.entities import Post
from snapix.domain.posts.events import PostCreatedEvent, PostDeletedEvent
from snapix.domain.shared import ForbiddenError


class TestPostCreation:
    """Tests for Post.create_post and the post.create event."""

    def test_create_post_has_no_events_until_recorded(self):
        """Test: Creating a post records nothing before it is saved."""
        post = Post.create_post(author_id=1, image_id="abc", content="hello")

        assert post.id is None
        assert post.has_domain_events is False

    def test_record_created_emits_one_event_carrying_post(self):
        """Test: record_created adds exactly one post.create event."""
        # Arrange
        post = Post.create_post(author_id=1, image_id="abc", content=None)
        post.id = 42

        # Act
        post.record_created()

        # Assert
        events = post.pull_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], PostCreatedEvent)
        assert events[0].name == "post.create"
        assert events[0].post is post
        assert events[0].post.id == 42
        assert post.has_domain_events is False

    def test_mark_deleted_emits_delete_event(self):
        """Test: mark_deleted records post.delete with ids."""
        post = Post(id=5, author_id=1, image_id="abc")

        post.mark_deleted()

        [event] = post.pull_domain_events()
        assert isinstance(event, PostDeletedEvent)
        assert event.name == "post.delete"
        assert (event.post_id, event.author_id, event.image_id) == (5, 1, "abc")


class TestPostOwnership:
    """Tests for ensure_author and edit."""

    def test_ensure_author_accepts_author(self):
        post = Post(id=1, author_id=7, image_id="abc")

        post.ensure_author(7)

    def test_ensure_author_rejects_other_user(self):
        """Test: Another user gets ForbiddenError."""
        post = Post(id=1, author_id=7, image_id="abc")

        with pytest.raises(ForbiddenError):
            post.ensure_author(8)

    def test_edit_updates_content_and_timestamp(self):
        post = Post(id=1, author_id=7, image_id="abc", content="old")
        previous = post.updated_at

        post.edit("new")

        assert post.content == "new"
        assert post.updated_at >= previous
