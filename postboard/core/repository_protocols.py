"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Not-found is a return value (None), never an exception
    - Every mutation is atomic against concurrent requests on the same post

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
    - Async in Protocol: implementations do IO; the session is bound at construction
"""

from typing import Protocol

from postboard.core.domain_types import PostId, PostRecord


class PostRepository(Protocol):
    """Contract for post persistence, implemented by services/post_repository.py."""
    async def list_active(self) -> list[PostRecord]: ...
    async def get_active_by_id(self, post_id: PostId) -> PostRecord | None: ...
    async def get_archived_by_id(self, post_id: PostId) -> PostRecord | None: ...
    async def create(self, content: str) -> PostRecord: ...
    async def edit(self, post_id: PostId, content: str) -> PostRecord | None: ...
    async def soft_delete(self, post_id: PostId) -> PostRecord | None: ...
    async def restore(self, post_id: PostId) -> PostRecord | None: ...
    async def like(self, post_id: PostId) -> PostRecord | None: ...
    async def dislike(self, post_id: PostId) -> PostRecord | None: ...
