"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
