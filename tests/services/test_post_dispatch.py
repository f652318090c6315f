"""Post Dispatch — routing table and handler behavior against a mock repository.

Tests cover:
    - Every Operation resolves; unknown paths resolve to None
    - The routing table is read-only
    - Validation fails before any repository call
    - None from the repository becomes 404; delete answers 204 without body
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from postboard.core.domain_types import Operation, PostId, PostRecord
from postboard.core.errors import ParameterValidationError
from postboard.services.post_dispatch import HANDLERS, resolve


def _post(post_id: int = 1, likes: int = 0, removed: bool = False) -> PostRecord:
    return PostRecord(
        id=PostId(post_id), content="hello", likes=likes,
        created=datetime(2024, 1, 1, tzinfo=timezone.utc), removed=removed,
    )


def _make_mock_repo(**returns):
    repo = AsyncMock()
    for method, value in returns.items():
        getattr(repo, method).return_value = value
    return repo


async def _run(path: str, repo, params: dict):
    _, handler = resolve(path)
    return await handler(repo, params)


# ─── routing table ───────────────────────────────────────────────

def test_every_operation_has_a_handler():
    assert set(HANDLERS) == set(Operation)


@pytest.mark.parametrize("op", list(Operation))
def test_resolve_known_paths(op):
    operation, handler = resolve(op.value)
    assert operation is op
    assert handler is HANDLERS[op]


@pytest.mark.parametrize("path", ["/", "/posts", "/posts.unknown", "/POSTS.GET", "posts.get"])
def test_resolve_unknown_paths(path):
    assert resolve(path) is None


def test_handlers_table_is_read_only():
    with pytest.raises(TypeError):
        HANDLERS[Operation.LIKE] = HANDLERS[Operation.DISLIKE]


# ─── validation before store access ──────────────────────────────

@pytest.mark.parametrize("op,method", [
    (Operation.GET_BY_ID, "get_active_by_id"),
    (Operation.EDIT, "edit"),
    (Operation.SOFT_DELETE, "soft_delete"),
    (Operation.RESTORE, "restore"),
    (Operation.LIKE, "like"),
    (Operation.DISLIKE, "dislike"),
])
async def test_missing_id_fails_without_repository_call(op, method):
    repo = _make_mock_repo()
    with pytest.raises(ParameterValidationError):
        await _run(op.value, repo, {"content": "x"})
    getattr(repo, method).assert_not_awaited()


async def test_create_without_content_fails_without_repository_call():
    repo = _make_mock_repo()
    with pytest.raises(ParameterValidationError):
        await _run("/posts.post", repo, {})
    repo.create.assert_not_awaited()


# ─── not found → 404 ─────────────────────────────────────────────

@pytest.mark.parametrize("op,method", [
    (Operation.GET_BY_ID, "get_active_by_id"),
    (Operation.SOFT_DELETE, "soft_delete"),
    (Operation.RESTORE, "restore"),
    (Operation.LIKE, "like"),
    (Operation.DISLIKE, "dislike"),
])
async def test_repository_none_maps_to_404(op, method):
    repo = _make_mock_repo(**{method: None})
    result = await _run(op.value, repo, {"id": "4"})
    assert result.status_code == 404
    assert result.body is None
    getattr(repo, method).assert_awaited_once_with(4)


async def test_edit_not_found_maps_to_404():
    repo = _make_mock_repo(edit=None)
    result = await _run("/posts.edit", repo, {"id": "4", "content": "x"})
    assert result.status_code == 404


# ─── success shapes ──────────────────────────────────────────────

async def test_list_returns_serialized_listing():
    repo = _make_mock_repo(list_active=[_post(2), _post(1)])
    result = await _run("/posts.get", repo, {})
    assert result.status_code == 200
    assert [p["id"] for p in result.body] == [2, 1]


async def test_create_passes_stripped_content():
    repo = _make_mock_repo(create=_post(9))
    result = await _run("/posts.post", repo, {"content": "  hello "})
    repo.create.assert_awaited_once_with("hello")
    assert result.status_code == 200
    assert result.body["id"] == 9


async def test_edit_passes_id_and_content():
    repo = _make_mock_repo(edit=_post(3))
    await _run("/posts.edit", repo, {"id": "3", "content": "new"})
    repo.edit.assert_awaited_once_with(3, "new")


async def test_delete_answers_204_without_body():
    repo = _make_mock_repo(soft_delete=_post(3, removed=True))
    result = await _run("/posts.delete", repo, {"id": "3"})
    assert result.status_code == 204
    assert result.body is None


async def test_like_returns_updated_post():
    repo = _make_mock_repo(like=_post(3, likes=5))
    result = await _run("/posts.like", repo, {"id": "3"})
    assert result.body["likes"] == 5
