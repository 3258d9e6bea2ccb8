"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from campus.domain.model.vote import Vote
from campus.domain.value import PostId, UserId, VoteId, VoteType

# Unique constraint enforcing one vote per voter per post
VOTER_UNIQUE_CONSTRAINT = "uq_post_vote_voter"


class VoteRepository(ABC):
    """Repository for Vote entity.

    Write methods are conditional on the state the caller last read, so a
    concurrent change by the same voter is detected instead of overwritten.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific post.

        Args:
            user_id: The voter's ID
            post_id: The post's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Vote]:
        """Find a user's votes on multiple posts (batch query).

        Args:
            user_id: The voter's ID
            post_ids: Post IDs to check

        Returns:
            Votes by the user on the given posts
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already has a vote on this post
        """
        pass

    @abstractmethod
    async def update_vote_type(
        self, vote_id: VoteId, expected: VoteType, new: VoteType
    ) -> Optional[Vote]:
        """Flip a vote's polarity if it still has the expected polarity.

        Args:
            vote_id: The vote to update
            expected: Polarity the caller read before deciding to switch
            new: Polarity to store

        Returns:
            The updated vote, or None if the vote is gone or changed
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId, expected: VoteType) -> bool:
        """Delete a vote if it still has the expected polarity.

        Args:
            vote_id: The vote to delete
            expected: Polarity the caller read before deciding to remove

        Returns:
            True if the vote was deleted, False if it was already gone or changed
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId, vote_type: VoteType) -> int:
        """Count votes of one polarity on a post.

        Args:
            post_id: The post's ID
            vote_type: Polarity to count

        Returns:
            Number of matching votes
        """
        pass
