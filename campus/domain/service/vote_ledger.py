"""Vote ledger domain service.

The ledger is the only writer of vote records. Every cast resolves the
voter's new stance against their existing vote and adjusts the post's
denormalized counters in the same unit of work.
"""

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator, Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from campus.domain.error import (
    NotFoundError,
    StorageFailureError,
    UnauthenticatedError,
    VoteConflictError,
)
from campus.domain.model.vote import Vote
from campus.domain.repository import (
    VOTER_UNIQUE_CONSTRAINT,
    UnitOfWork,
    VoteRepository,
)
from campus.domain.value import (
    PostId,
    UserId,
    VoteId,
    VoteResolution,
    VoteState,
    VoteType,
)

from .base import Service
from .post_service import PostService


@contextmanager
def _storage_failures(operation: str, **attributes: str) -> Iterator[None]:
    """Translate SQLAlchemy errors into domain storage failures."""
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Storage failure", operation=operation, error=str(e), **attributes
        )
        raise StorageFailureError(f"Storage failure during {operation}") from e


class VoteLedger(Service):
    """Domain service that owns vote state transitions on community posts."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize vote ledger.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service (lookups and counters)
            unit_of_work: Transaction boundary shared with both repositories
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.unit_of_work = unit_of_work

    async def cast_vote(
        self,
        voter_id: UserId | None,
        post_id: PostId,
        requested: Any,
    ) -> Vote | None:
        """Apply a voter's upvote or downvote to a post.

        Resolution against the voter's existing vote:
        - no vote: create it and increment the matching counter
        - same polarity: delete it and decrement the matching counter
        - opposite polarity: flip it, decrement the old counter and
          increment the new one

        The read, the vote write and the counter adjustments run in one
        transaction; if any step fails nothing is applied.

        Args:
            voter_id: Authenticated caller, or None
            post_id: Post being voted on
            requested: Requested polarity ('upvote' or 'downvote')

        Returns:
            The resulting vote, or None if the vote was removed

        Raises:
            UnauthenticatedError: If there is no voter
            InvalidArgumentError: If the polarity is not upvote/downvote
            NotFoundError: If the post doesn't exist
            VoteConflictError: If a concurrent vote by the same voter won
            StorageFailureError: If persistence rejected a read or write
        """
        if voter_id is None:
            logfire.warn("Vote attempt without identity", post_id=str(post_id))
            raise UnauthenticatedError()

        vote_type = VoteType.parse(requested)

        with logfire.span(
            "vote_ledger.cast_vote",
            post_id=str(post_id),
            user_id=str(voter_id),
            vote_type=vote_type.value,
        ):
            try:
                async with self.unit_of_work.transaction():
                    return await self._resolve(voter_id, post_id, vote_type)
            except IntegrityError as e:
                if VOTER_UNIQUE_CONSTRAINT not in str(e.orig):
                    raise self._storage_failure(post_id, e) from e
                logfire.warn(
                    "Duplicate vote insert lost to concurrent cast",
                    post_id=str(post_id),
                    user_id=str(voter_id),
                )
                raise VoteConflictError(str(post_id), str(voter_id)) from e
            except SQLAlchemyError as e:
                raise self._storage_failure(post_id, e) from e

    async def _resolve(
        self, voter_id: UserId, post_id: PostId, vote_type: VoteType
    ) -> Vote | None:
        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))

        existing = await self.vote_repository.find_by_user_and_post(voter_id, post_id)

        if existing is None:
            vote = Vote(
                id=VoteId(uuid4()),
                post_id=post_id,
                user_id=voter_id,
                vote_type=vote_type,
                created_at=datetime.now(),
                updated_at=datetime.now(),
            )
            # Raises IntegrityError if a concurrent cast inserted first
            saved = await self.vote_repository.save(vote)
            await self.post_service.increment_counter(
                post_id, vote_type.counter_field
            )
            self._log_resolution(VoteResolution.CREATED, saved)
            return saved

        if existing.vote_type == vote_type:
            deleted = await self.vote_repository.delete(existing.id, vote_type)
            if not deleted:
                raise self._conflict(existing)
            await self.post_service.decrement_counter(
                post_id, vote_type.counter_field
            )
            self._log_resolution(VoteResolution.REMOVED, existing)
            return None

        updated = await self.vote_repository.update_vote_type(
            existing.id, existing.vote_type, vote_type
        )
        if updated is None:
            raise self._conflict(existing)
        await self.post_service.decrement_counter(
            post_id, existing.vote_type.counter_field
        )
        await self.post_service.increment_counter(post_id, vote_type.counter_field)
        self._log_resolution(VoteResolution.SWITCHED, updated)
        return updated

    @staticmethod
    def _storage_failure(post_id: PostId, error: Exception) -> StorageFailureError:
        logfire.error(
            "Storage failure",
            operation="cast_vote",
            post_id=str(post_id),
            error=str(error),
        )
        return StorageFailureError("Storage failure during cast_vote")

    @staticmethod
    def _conflict(vote: Vote) -> VoteConflictError:
        logfire.warn(
            "Vote changed concurrently",
            vote_id=str(vote.id),
            post_id=str(vote.post_id),
            user_id=str(vote.user_id),
        )
        return VoteConflictError(str(vote.post_id), str(vote.user_id))

    @staticmethod
    def _log_resolution(resolution: VoteResolution, vote: Vote) -> None:
        logfire.info(
            "Vote resolved",
            resolution=resolution.value,
            post_id=str(vote.post_id),
            user_id=str(vote.user_id),
            vote_type=vote.vote_type.value,
        )

    async def get_vote_state(
        self, post_id: PostId, caller_id: UserId | None
    ) -> VoteState:
        """Get a post's vote counters and the caller's own vote.

        Counters come straight from the post. An unauthenticated caller
        gets ``user_vote=None`` rather than an error.

        Raises:
            NotFoundError: If the post doesn't exist
            StorageFailureError: If persistence rejected the read
        """
        with logfire.span(
            "vote_ledger.get_vote_state",
            post_id=str(post_id),
            authenticated=caller_id is not None,
        ):
            with _storage_failures("get_vote_state", post_id=str(post_id)):
                post = await self.post_service.get_post_by_id(post_id)
                if not post:
                    raise NotFoundError("Post", str(post_id))

                user_vote = None
                if caller_id is not None:
                    vote = await self.vote_repository.find_by_user_and_post(
                        caller_id, post_id
                    )
                    user_vote = vote.vote_type if vote else None

            return post.vote_state(user_vote)

    async def get_user_vote(
        self, post_id: PostId, caller_id: UserId | None
    ) -> VoteType | None:
        """Get the caller's own vote on a post.

        Args:
            post_id: Post ID (the post need not exist)
            caller_id: Authenticated caller, or None

        Returns:
            The caller's polarity, or None if they haven't voted

        Raises:
            UnauthenticatedError: If there is no caller
            StorageFailureError: If persistence rejected the read
        """
        if caller_id is None:
            raise UnauthenticatedError()

        with logfire.span(
            "vote_ledger.get_user_vote", post_id=str(post_id), user_id=str(caller_id)
        ):
            with _storage_failures("get_user_vote", post_id=str(post_id)):
                vote = await self.vote_repository.find_by_user_and_post(
                    caller_id, post_id
                )
            return vote.vote_type if vote else None

    async def get_vote_states(
        self, post_ids: Sequence[PostId], caller_id: UserId | None
    ) -> dict[PostId, VoteState]:
        """Get vote states for a page of posts.

        Uses one query for the posts and one for the caller's votes.

        Args:
            post_ids: Posts to look up (unknown IDs are omitted from the result)
            caller_id: Authenticated caller, or None

        Returns:
            Mapping of post ID to vote state
        """
        if not post_ids:
            return {}

        unique_ids = list(dict.fromkeys(post_ids))

        with logfire.span(
            "vote_ledger.get_vote_states",
            count=len(unique_ids),
            authenticated=caller_id is not None,
        ):
            with _storage_failures("get_vote_states"):
                posts = await self.post_service.get_posts_by_ids(unique_ids)

                user_votes: dict[PostId, VoteType] = {}
                if caller_id is not None and posts:
                    votes = await self.vote_repository.find_by_user_and_posts(
                        caller_id, [post.id for post in posts]
                    )
                    user_votes = {vote.post_id: vote.vote_type for vote in votes}

            return {post.id: post.vote_state(user_votes.get(post.id)) for post in posts}
