"""Posts Route — single entry point for every /posts.* operation.

Invariants:
    - Path resolved BEFORE a session is acquired: unknown paths never touch the pool
    - Exactly one session per request, released by the provider on every exit path
    - Parameters come from the query string only; any listed HTTP method is accepted
    - A repeated query key resolves to its first value

Design Decisions:
    - Catch-all path route + explicit dispatch table (services/post_dispatch.py)
      instead of one FastAPI route per operation: the operation set is the table
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from postboard.api.responses import empty_response, encode_result
from postboard.infrastructure.database import (
    DatabaseSessionManager, get_session_provider,
)
from postboard.schemas.post import first_values
from postboard.services.post_dispatch import resolve
from postboard.services.post_repository import SqlPostRepository

logger = logging.getLogger(__name__)
router = APIRouter(tags=["posts"])

ACCEPTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@router.api_route(
    "/{path:path}", methods=ACCEPTED_METHODS, include_in_schema=False,
)
async def dispatch_operation(
    request: Request,
    provider: DatabaseSessionManager = Depends(get_session_provider),
):
    """Resolve the operation by path and run it inside a request-scoped session."""
    resolved = resolve(request.url.path)
    if resolved is None:
        return empty_response(status.HTTP_404_NOT_FOUND)
    operation, handler = resolved

    async with provider.session() as db:
        result = await handler(
            SqlPostRepository(db),
            first_values(request.query_params.multi_items()),
        )

    logger.debug(
        f"{operation.value} -> {result.status_code}",
        extra={"operation": operation.value, "status_code": result.status_code},
    )
    return encode_result(result)
