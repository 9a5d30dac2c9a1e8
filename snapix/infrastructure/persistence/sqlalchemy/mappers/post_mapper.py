"""PostMapper - Post entity ↔ PostModel ORM."""

from snapix.domain.posts.entities import Post

from ..models import PostModel


class PostMapper:
    def to_entity(self, model: PostModel) -> Post:
        return Post(
            id=model.id,
            author_id=model.author_id,
            image_id=model.image_id,
            content=model.content,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def to_model(self, entity: Post) -> PostModel:
        return PostModel(
            id=entity.id,
            author_id=entity.author_id,
            image_id=entity.image_id,
            content=entity.content,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def update_model(self, entity: Post, model: PostModel) -> None:
        # Author and image are fixed at creation
        model.content = entity.content
        model.updated_at = entity.updated_at
