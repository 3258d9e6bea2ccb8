"""PostgreSQL implementation of Post repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import Column, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.error import InvalidArgumentError
from campus.domain.model import Post
from campus.domain.repository.post import PostRepository
from campus.domain.value import POST_COUNTERS, CounterField, PostId
from campus.persistence.mappers import post_to_dict, row_to_post
from campus.persistence.tables import posts_table


def _counter_column(field: CounterField) -> Column:
    """Resolve an allow-listed counter to its column on community_posts."""
    if field not in POST_COUNTERS:
        raise InvalidArgumentError(f"Counter {field.value!r} is not tracked on posts")
    return posts_table.c[field.value]


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts in a single query."""
        if not post_ids:
            return []

        stmt = select(posts_table).where(posts_table.c.id.in_(post_ids))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a new post."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            stmt = insert(posts_table).values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def increment_counter(self, post_id: PostId, field: CounterField) -> bool:
        """Atomically increment a counter by 1."""
        column = _counter_column(field)
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values({column: column + 1})
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def decrement_counter(self, post_id: PostId, field: CounterField) -> bool:
        """Atomically decrement a counter by 1 (minimum 0)."""
        column = _counter_column(field)
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .where(column > 0)  # Don't go below 0
            .values({column: column - 1})
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
