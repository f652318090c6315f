"""Post ORM — the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key (store-assigned)
    - likes >= 0 enforced by CHECK constraint
    - removed=False is active, removed=True is archived; rows are never deleted
    - created is set once at insert

Design Decisions:
    - Python-side defaults mirror the server defaults so Core INSERTs and
      Alembic-created tables agree
    - Index on (removed, id) serves the active listing ordered by id DESC
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, CheckConstraint, DateTime, Index, Integer, Text, false, func,
)
from sqlalchemy.orm import Mapped, mapped_column

from postboard.db.base import Base


class Post(Base):
    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_posts_likes_non_negative"),
        Index("ix_posts_removed_id", "removed", "id"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    likes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0",
    )
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
    removed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
