"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PostId wraps int: store-assigned, never reused
    - Operation values are the exact request paths
    - PostRecord is an immutable snapshot; it never tracks later store changes
    - OperationResult.body is None exactly when the response has no body

Design Decisions:
    - NewType over wrapper classes: zero runtime cost
    - str Enums: the enum value doubles as the routing key
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Operation(str, Enum):
    """Every operation the service exposes, keyed by request path."""
    LIST_ACTIVE = "/posts.get"
    GET_BY_ID = "/posts.getById"
    CREATE = "/posts.post"
    EDIT = "/posts.edit"
    SOFT_DELETE = "/posts.delete"
    RESTORE = "/posts.restore"
    LIKE = "/posts.like"
    DISLIKE = "/posts.dislike"


class Visibility(str, Enum):
    """The two states partitioned by the `removed` flag."""
    ACTIVE = "active"
    ARCHIVED = "archived"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class PostRecord:
    """A post as read from (or written to) the store."""
    id: PostId
    content: str
    likes: int
    created: datetime
    removed: bool = False


@dataclass(frozen=True)
class OperationResult:
    """What a handler produced: HTTP status plus an optional JSON body."""
    status_code: int
    body: Any = None
