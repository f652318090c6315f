"""Post Repository — SQLAlchemy implementation of core PostRepository.

Invariants:
    - Reads filter on `removed`; only get_archived_by_id/restore see archived posts
    - Every mutation is ONE statement (UPDATE/INSERT ... RETURNING) then commit
    - likes arithmetic happens in the store: `likes + 1` and a CASE floor at 0
    - Mutations return the row as written; nothing is re-selected afterwards
    - Not-found (no row matched in the required state) returns None

Design Decisions:
    - Column selects instead of entity selects: results are PostRecord snapshots,
      not identity-mapped ORM objects, so a reused session never serves stale rows
    - synchronize_session=False: nothing in the session mirrors the updated rows
"""

import logging

from sqlalchemy import case, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.domain_types import PostId, PostRecord, Visibility
from postboard.models.post import Post

logger = logging.getLogger(__name__)

_COLUMNS = (Post.id, Post.content, Post.likes, Post.created, Post.removed)


def _in_state(visibility: Visibility):
    return Post.removed == (visibility is Visibility.ARCHIVED)


def _to_record(row) -> PostRecord:
    return PostRecord(
        id=PostId(row.id),
        content=row.content,
        likes=row.likes,
        created=row.created,
        removed=row.removed,
    )


class SqlPostRepository:
    """Post persistence bound to one request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    # ─── Reads ────────────────────────────────────────────────────

    async def list_active(self) -> list[PostRecord]:
        """Active posts, newest id first."""
        result = await self._db.execute(
            select(*_COLUMNS)
            .where(_in_state(Visibility.ACTIVE))
            .order_by(Post.id.desc()),
        )
        return [_to_record(row) for row in result]

    async def get_active_by_id(self, post_id: PostId) -> PostRecord | None:
        return await self._get(post_id, Visibility.ACTIVE)

    async def get_archived_by_id(self, post_id: PostId) -> PostRecord | None:
        return await self._get(post_id, Visibility.ARCHIVED)

    async def _get(self, post_id: PostId, visibility: Visibility) -> PostRecord | None:
        result = await self._db.execute(
            select(*_COLUMNS)
            .where(Post.id == post_id, _in_state(visibility)),
        )
        row = result.one_or_none()
        return _to_record(row) if row is not None else None

    # ─── Writes ───────────────────────────────────────────────────

    async def create(self, content: str) -> PostRecord:
        result = await self._db.execute(
            insert(Post).values(content=content).returning(*_COLUMNS),
        )
        post = _to_record(result.one())
        await self._db.commit()
        logger.info("Post created", extra={"post_id": post.id})
        return post

    async def edit(self, post_id: PostId, content: str) -> PostRecord | None:
        return await self._update_where(post_id, Visibility.ACTIVE, content=content)

    async def soft_delete(self, post_id: PostId) -> PostRecord | None:
        """Active → archived. An archived or unknown id is not found."""
        return await self._update_where(post_id, Visibility.ACTIVE, removed=True)

    async def restore(self, post_id: PostId) -> PostRecord | None:
        """Archived → active. An active or unknown id is not found."""
        return await self._update_where(post_id, Visibility.ARCHIVED, removed=False)

    async def like(self, post_id: PostId) -> PostRecord | None:
        return await self._update_where(post_id, Visibility.ACTIVE, likes=Post.likes + 1)

    async def dislike(self, post_id: PostId) -> PostRecord | None:
        """Decrement likes; at 0 the update still matches and leaves 0."""
        return await self._update_where(
            post_id, Visibility.ACTIVE,
            likes=case((Post.likes > 0, Post.likes - 1), else_=0),
        )

    async def _update_where(
        self, post_id: PostId, visibility: Visibility, **values: object,
    ) -> PostRecord | None:
        """Single UPDATE on the post with this id in the given state."""
        result = await self._db.execute(
            update(Post)
            .where(Post.id == post_id, _in_state(visibility))
            .values(**values)
            .returning(*_COLUMNS)
            .execution_options(synchronize_session=False),
        )
        row = result.one_or_none()
        if row is None:
            await self._db.rollback()
            return None
        await self._db.commit()
        return _to_record(row)
