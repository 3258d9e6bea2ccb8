"""community_votes_schema

Create the community voting schema:
- community_posts (denormalized upvote/downvote/comment counters)
- post_votes (one vote per voter per post, upvote or downvote)

Voter and author IDs come from the identity provider, so there is no local
users table to reference.

Revision ID: 3c1f0d7b9a21
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0d7b9a21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE post_vote_type AS ENUM ('upvote', 'downvote');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # COMMUNITY_POSTS table
    # ========================================================================
    op.create_table(
        "community_posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvotes >= 0", name="upvotes_non_negative"),
        sa.CheckConstraint("downvotes >= 0", name="downvotes_non_negative"),
        sa.CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
    )
    op.create_index(
        "idx_community_posts_created_at",
        "community_posts",
        [sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_community_posts_author_id", "community_posts", ["author_id"]
    )

    # ========================================================================
    # POST_VOTES table
    # ========================================================================
    op.create_table(
        "post_votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "vote_type",
            postgresql.ENUM(
                "upvote", "downvote", name="post_vote_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["post_id"], ["community_posts.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint("post_id", "user_id", name="uq_post_vote_voter"),
    )
    op.create_index("idx_post_votes_user_id", "post_votes", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_post_votes_user_id", table_name="post_votes")
    op.drop_table("post_votes")
    op.drop_index("idx_community_posts_author_id", table_name="community_posts")
    op.drop_index("idx_community_posts_created_at", table_name="community_posts")
    op.drop_table("community_posts")
    op.execute("DROP TYPE IF EXISTS post_vote_type")
