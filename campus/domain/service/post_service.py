"""Post domain service."""

from typing import Sequence

import logfire

from campus.domain.model.post import Post
from campus.domain.repository import PostRepository
from campus.domain.value import CounterField, PostId

from .base import Service


class PostService(Service):
    """Domain service for post lookups and counter adjustments."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_posts_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Get several posts in one query.

        Args:
            post_ids: Post IDs

        Returns:
            Posts that exist
        """
        if not post_ids:
            return []

        with logfire.span("post_service.get_posts_by_ids", count=len(post_ids)):
            posts = await self.post_repository.find_by_ids(post_ids)
            logfire.debug("Posts found", requested=len(post_ids), found=len(posts))
            return posts

    async def increment_counter(self, post_id: PostId, field: CounterField) -> None:
        """Atomically increment a post counter.

        Args:
            post_id: Post ID
            field: Allow-listed counter
        """
        with logfire.span(
            "post_service.increment_counter", post_id=str(post_id), field=field.value
        ):
            updated = await self.post_repository.increment_counter(post_id, field)
            if not updated:
                logfire.warn(
                    "Counter increment matched no post",
                    post_id=str(post_id),
                    field=field.value,
                )

    async def decrement_counter(self, post_id: PostId, field: CounterField) -> None:
        """Atomically decrement a post counter (minimum 0).

        A decrement that finds the counter at 0 means the counter had drifted
        from the vote records; it is logged and the counter stays at 0.

        Args:
            post_id: Post ID
            field: Allow-listed counter
        """
        with logfire.span(
            "post_service.decrement_counter", post_id=str(post_id), field=field.value
        ):
            updated = await self.post_repository.decrement_counter(post_id, field)
            if not updated:
                logfire.warn(
                    "Counter drift: decrement found counter at 0",
                    post_id=str(post_id),
                    field=field.value,
                )
