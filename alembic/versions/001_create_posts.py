"""Create posts table.

Revision ID: 001_create_posts
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_posts"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("likes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("removed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.CheckConstraint("likes >= 0", name="ck_posts_likes_non_negative"),
    )
    op.create_index("ix_posts_removed_id", "posts", ["removed", "id"])


def downgrade() -> None:
    op.drop_index("ix_posts_removed_id", table_name="posts")
    op.drop_table("posts")
