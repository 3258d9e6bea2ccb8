"""Repository interfaces for the campus marketplace domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from campus.domain.repository.post import PostRepository
from campus.domain.repository.unit_of_work import UnitOfWork
from campus.domain.repository.vote import VOTER_UNIQUE_CONSTRAINT, VoteRepository

__all__ = [
    "VOTER_UNIQUE_CONSTRAINT",
    "PostRepository",
    "VoteRepository",
    "UnitOfWork",
]
