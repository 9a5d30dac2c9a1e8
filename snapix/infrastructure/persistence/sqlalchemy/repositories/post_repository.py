"""SQLAlchemyPostRepository - implements the PostRepository port."""

from typing import Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from snapix.domain.posts.entities import Post
from snapix.domain.posts.repositories import PostRepository

from ..mappers import PostMapper
from ..models import PostModel
from .base import flush


class SQLAlchemyPostRepository(PostRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._mapper = PostMapper()

    async def save(self, post: Post) -> Post:
        if post.id is None:
            model = self._mapper.to_model(post)
            self._session.add(model)
            await flush(self._session, "post")
            post.id = model.id
        else:
            model = await self._session.get(PostModel, post.id)
            if model is None:
                raise ValueError(f"Post {post.id} not found")
            self._mapper.update_model(post, model)
            await flush(self._session, "post")
        return post

    async def get_by_id(self, post_id: int) -> Optional[Post]:
        model = await self._session.get(PostModel, post_id)
        if model is None:
            return None
        return self._mapper.to_entity(model)

    async def delete_one(self, post_id: int) -> None:
        await self._session.execute(delete(PostModel).where(PostModel.id == post_id))

    async def exists_by_image_id(self, image_id: str) -> bool:
        stmt = select(exists().where(PostModel.image_id == image_id))
        return bool(await self._session.scalar(stmt))
