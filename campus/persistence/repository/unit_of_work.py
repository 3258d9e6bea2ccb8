"""PostgreSQL unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work backed by a SAVEPOINT on the request session.

    The request-scoped session commits when the request finishes. A nested
    transaction lets a failed block roll back on its own without discarding
    other work done in the same session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
