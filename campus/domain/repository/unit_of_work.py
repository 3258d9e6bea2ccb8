"""Unit of work interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager


class UnitOfWork(ABC):
    """Transactional boundary spanning several repository calls.

    Everything executed inside ``transaction()`` is applied together or not
    at all: an exception leaving the block rolls back every write made in it.
    """

    @abstractmethod
    def transaction(self) -> AsyncContextManager[None]:
        """Open an atomic block.

        Usage:
            async with unit_of_work.transaction():
                await vote_repository.save(vote)
                await post_repository.increment_counter(post_id, field)
        """
        pass
