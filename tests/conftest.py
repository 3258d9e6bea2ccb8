"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from campus.domain.model.post import Post
from campus.domain.value import PostId, UserId


def pytest_configure(config):
    """Keep logfire local and quiet during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_post(
    post_id: PostId | None = None,
    upvotes: int = 0,
    downvotes: int = 0,
    title: str = "Selling a used calculus textbook",
) -> Post:
    """Helper function to build a community post for tests.

    Args:
        post_id: Optional post ID (random if omitted)
        upvotes: Initial upvote counter
        downvotes: Initial downvote counter
        title: Post title

    Returns:
        Post domain model
    """
    now = datetime.now()
    return Post(
        id=post_id or PostId(uuid4()),
        author_id=UserId(uuid4()),
        title=title,
        content="Barely used, pickup near the library.",
        upvotes=upvotes,
        downvotes=downvotes,
        comment_count=0,
        created_at=now,
        updated_at=now,
    )
