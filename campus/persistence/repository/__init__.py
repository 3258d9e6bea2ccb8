"""PostgreSQL repository implementations."""

from campus.persistence.repository.post import PostgresPostRepository
from campus.persistence.repository.unit_of_work import PostgresUnitOfWork
from campus.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresVoteRepository",
    "PostgresUnitOfWork",
]
