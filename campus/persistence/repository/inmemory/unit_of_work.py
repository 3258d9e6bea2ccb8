"""In-memory unit of work for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from campus.domain.repository import UnitOfWork

from .post import InMemoryPostRepository
from .vote import InMemoryVoteRepository


class InMemoryUnitOfWork(UnitOfWork):
    """Snapshot/restore transaction over in-memory repositories.

    On an exception every participating repository is reset to the state
    it had when the block was entered, then the exception propagates.
    """

    def __init__(
        self, *repositories: InMemoryPostRepository | InMemoryVoteRepository
    ) -> None:
        self.repositories = repositories

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snapshots = [(repo, repo.snapshot()) for repo in self.repositories]
        try:
            yield
        except BaseException:
            for repo, state in snapshots:
                repo.restore(state)  # type: ignore[arg-type]
            raise
