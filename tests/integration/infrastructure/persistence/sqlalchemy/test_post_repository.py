"""Integration tests for SQLAlchemyPostRepository."""

import pytest

from snapix.domain.posts.entities import Post
from snapix.domain.shared import UpstreamError
from snapix.domain.users.entities import User
from snapix.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyPostRepository,
    SQLAlchemyUserRepository,
)


@pytest.fixture
async def author(session, sample_user_data):
    user = User.register(**sample_user_data)
    await SQLAlchemyUserRepository(session).save(user)
    return user


class TestPostRepository:
    """Integration tests for the posts table."""

    @pytest.mark.asyncio
    async def test_save_and_get(self, session, author):
        # Arrange
        repo = SQLAlchemyPostRepository(session)
        post = Post.create_post(author_id=author.id, image_id="a" * 32, content="hello")

        # Act
        await repo.save(post)
        loaded = await repo.get_by_id(post.id)

        # Assert
        assert post.id is not None
        assert loaded.author_id == author.id
        assert loaded.image_id == "a" * 32
        assert loaded.content == "hello"

    @pytest.mark.asyncio
    async def test_edit(self, session, author):
        repo = SQLAlchemyPostRepository(session)
        post = Post.create_post(author_id=author.id, image_id="img", content="old")
        await repo.save(post)

        post.edit(None)
        await repo.save(post)

        assert (await repo.get_by_id(post.id)).content is None

    @pytest.mark.asyncio
    async def test_delete_one(self, session, author):
        repo = SQLAlchemyPostRepository(session)
        keep = Post.create_post(author_id=author.id, image_id="img-1")
        drop = Post.create_post(author_id=author.id, image_id="img-2")
        await repo.save(keep)
        await repo.save(drop)

        await repo.delete_one(drop.id)

        assert await repo.get_by_id(drop.id) is None
        assert await repo.get_by_id(keep.id) is not None

    @pytest.mark.asyncio
    async def test_get_missing(self, session):
        assert await SQLAlchemyPostRepository(session).get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_exists_by_image_id(self, session, author):
        repo = SQLAlchemyPostRepository(session)
        await repo.save(Post.create_post(author_id=author.id, image_id="img-1"))

        assert await repo.exists_by_image_id("img-1") is True
        assert await repo.exists_by_image_id("img-2") is False

    @pytest.mark.asyncio
    async def test_image_backs_one_post_only(self, session, author):
        """Test: The unique image index rejects a second post on the same image."""
        repo = SQLAlchemyPostRepository(session)
        await repo.save(Post.create_post(author_id=author.id, image_id="img-1"))

        with pytest.raises(UpstreamError):
            await repo.save(Post.create_post(author_id=author.id, image_id="img-1"))
