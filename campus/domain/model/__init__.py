"""Domain model entities for the campus marketplace."""

from campus.domain.model.post import Post
from campus.domain.model.vote import Vote

__all__ = [
    "Post",
    "Vote",
]
