"""Post Dispatch — explicit routing from request path to handler coroutine.

Invariants:
    - Every path->handler mapping is visible in one dict, no getattr magic
    - The table is built once at import and exposed read-only
    - Unknown paths resolve to None (never raises)
    - Every Operation member has exactly one handler
"""

from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType

from postboard.core.domain_types import Operation, OperationResult
from postboard.core.repository_protocols import PostRepository
from postboard.services import handle_posts

Handler = Callable[[PostRepository, Mapping[str, str]], Awaitable[OperationResult]]

HANDLERS: Mapping[Operation, Handler] = MappingProxyType({
    Operation.LIST_ACTIVE: handle_posts.handle_list_active,
    Operation.GET_BY_ID: handle_posts.handle_get_by_id,
    Operation.CREATE: handle_posts.handle_create,
    Operation.EDIT: handle_posts.handle_edit,
    Operation.SOFT_DELETE: handle_posts.handle_soft_delete,
    Operation.RESTORE: handle_posts.handle_restore,
    Operation.LIKE: handle_posts.handle_like,
    Operation.DISLIKE: handle_posts.handle_dislike,
})


def resolve(path: str) -> tuple[Operation, Handler] | None:
    """Look up the handler for a request path."""
    try:
        operation = Operation(path)
    except ValueError:
        return None
    return operation, HANDLERS[operation]
