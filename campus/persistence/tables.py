"""SQLAlchemy table definitions for the campus marketplace.

Only the tables owned by the voting subsystem are defined here. They match
the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from campus.domain.repository.vote import VOTER_UNIQUE_CONSTRAINT

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMUNITY POSTS TABLE
# ============================================================================
posts_table = Table(
    "community_posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    # Identity provider user ID, no local users table
    Column("author_id", UUID, nullable=False),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0", name="upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="downvotes_non_negative"),
    CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
)

Index("idx_community_posts_created_at", posts_table.c.created_at.desc())
Index("idx_community_posts_author_id", posts_table.c.author_id)

# ============================================================================
# POST VOTES TABLE
# ============================================================================
votes_table = Table(
    "post_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "post_id",
        UUID,
        ForeignKey("community_posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "vote_type",
        Enum("upvote", "downvote", name="post_vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per voter per post
    UniqueConstraint("post_id", "user_id", name=VOTER_UNIQUE_CONSTRAINT),
)

Index("idx_post_votes_user_id", votes_table.c.user_id)
