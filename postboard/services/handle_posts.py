"""Post Handlers — one coroutine per operation: validate, call repository, shape result.

Invariants:
    - Parameters validated BEFORE the first repository call (400 never touches the store)
    - Repository None → 404 with empty body
    - delete answers 204 with no body; every other success answers 200 with JSON
    - Handlers return OperationResult; HTTP encoding lives in api/responses.py
"""

import logging
from collections.abc import Mapping

from fastapi import status

from postboard.core.domain_types import Operation, OperationResult, PostRecord
from postboard.core.post_view import serialize_post, serialize_posts
from postboard.core.repository_protocols import PostRepository
from postboard.schemas.post import (
    PostContentParams, PostEditParams, PostIdParams, validate_params,
)

logger = logging.getLogger(__name__)

NOT_FOUND = OperationResult(status.HTTP_404_NOT_FOUND)


def _post_or_404(post: PostRecord | None) -> OperationResult:
    if post is None:
        return NOT_FOUND
    return OperationResult(status.HTTP_200_OK, serialize_post(post))


async def handle_list_active(
    repo: PostRepository, params: Mapping[str, str],
) -> OperationResult:
    posts = await repo.list_active()
    return OperationResult(status.HTTP_200_OK, serialize_posts(posts))


async def handle_get_by_id(
    repo: PostRepository, params: Mapping[str, str],
) -> OperationResult:
    p = validate_params(PostIdParams, params, Operation.GET_BY_ID.value)
    return _post_or_404(await repo.get_active_by_id(p.post_id))


async def handle_create(
    repo: PostRepository, params: Mapping[str, str],
) -> OperationResult:
    p = validate_params(PostContentParams, params, Operation.CREATE.value)
    post = await repo.create(p.content)
    return OperationResult(status.HTTP_200_OK, serialize_post(post))


async def handle_edit(
    repo: PostRepository, params: Mapping[str, str],
) -> OperationResult:
    p = validate_params(PostEditParams, params, Operation.EDIT.value)
    return _post_or_404(await repo.edit(p.post_id, p.content))


async def handle_soft_delete(
    repo: PostRepository, params: Mapping[str, str],
) -> OperationResult:
    p = validate_params(PostIdParams, params, Operation.SOFT_DELETE.value)
    post = await repo.soft_delete(p.post_id)
    if post is None:
        return NOT_FOUND
    logger.info("Post archived", extra={"post_id": post.id})
    return OperationResult(status.HTTP_204_NO_CONTENT)


async def handle_restore(
    repo: PostRepository, params: Mapping[str, str],
) -> OperationResult:
    p = validate_params(PostIdParams, params, Operation.RESTORE.value)
    post = await repo.restore(p.post_id)
    if post is not None:
        logger.info("Post restored", extra={"post_id": post.id})
    return _post_or_404(post)


async def handle_like(
    repo: PostRepository, params: Mapping[str, str],
) -> OperationResult:
    p = validate_params(PostIdParams, params, Operation.LIKE.value)
    return _post_or_404(await repo.like(p.post_id))


async def handle_dislike(
    repo: PostRepository, params: Mapping[str, str],
) -> OperationResult:
    p = validate_params(PostIdParams, params, Operation.DISLIKE.value)
    return _post_or_404(await repo.dislike(p.post_id))
