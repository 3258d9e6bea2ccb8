"""In-memory post repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from campus.domain.error import InvalidArgumentError
from campus.domain.model.post import Post
from campus.domain.repository.post import PostRepository
from campus.domain.value import POST_COUNTERS, CounterField, PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def snapshot(self) -> dict[PostId, Post]:
        """Copy of the current state (posts are immutable)."""
        return dict(self._posts)

    def restore(self, state: dict[PostId, Post]) -> None:
        """Reset to a previously taken snapshot."""
        self._posts = dict(state)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts at once."""
        return [self._posts[pid] for pid in post_ids if pid in self._posts]

    async def save(self, post: Post) -> Post:
        """Save a new post.

        Raises:
            IntegrityError: If a post with this ID already exists
        """
        if post.id in self._posts:
            raise IntegrityError("Duplicate post", None, Exception())

        self._posts[post.id] = post
        return post

    async def increment_counter(self, post_id: PostId, field: CounterField) -> bool:
        """Increment a counter by 1."""
        self._check_field(field)
        post = self._posts.get(post_id)
        if not post:
            return False

        self._posts[post_id] = post.model_copy(
            update={field.value: post.counter(field) + 1}
        )
        return True

    async def decrement_counter(self, post_id: PostId, field: CounterField) -> bool:
        """Decrement a counter by 1 (minimum 0)."""
        self._check_field(field)
        post = self._posts.get(post_id)
        if not post or post.counter(field) <= 0:
            return False

        self._posts[post_id] = post.model_copy(
            update={field.value: post.counter(field) - 1}
        )
        return True

    @staticmethod
    def _check_field(field: CounterField) -> None:
        if field not in POST_COUNTERS:
            raise InvalidArgumentError(
                f"Counter {field.value!r} is not tracked on posts"
            )
