"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from campus.domain.model.post import Post
from campus.domain.value import CounterField, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts at once (batch query).

        Args:
            post_ids: Post IDs to look up

        Returns:
            Posts that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a new post.

        Existing posts are never rewritten through this method, so vote
        counters cannot be overwritten wholesale.

        Args:
            post: The post to create

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def increment_counter(self, post_id: PostId, field: CounterField) -> bool:
        """Atomically increment a post counter by 1.

        Args:
            post_id: The post ID
            field: Allow-listed counter tracked on posts

        Returns:
            True if a row was updated, False if the post doesn't exist

        Raises:
            InvalidArgumentError: If the counter is not tracked on posts
        """
        pass

    @abstractmethod
    async def decrement_counter(self, post_id: PostId, field: CounterField) -> bool:
        """Atomically decrement a post counter by 1 (minimum 0).

        Args:
            post_id: The post ID
            field: Allow-listed counter tracked on posts

        Returns:
            True if a row was updated, False if the post doesn't exist
            or the counter was already 0

        Raises:
            InvalidArgumentError: If the counter is not tracked on posts
        """
        pass
