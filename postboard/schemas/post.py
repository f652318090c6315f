"""Post Parameter Schemas — Pydantic models for query-string parameters.

Invariants:
    - id: optional sign followed by digits only ("1.5", "abc", "" rejected)
    - id: within the 32-bit INTEGER range of posts.id, so no store call can overflow
    - a repeated query key keeps its FIRST value
    - content: non-empty after stripping whitespace; stored stripped
    - validate_params() turns any pydantic ValidationError into ParameterValidationError

Design Decisions:
    - field_validator(mode="before") for id: pydantic's lax int coercion is wider
      than the integer-only contract of the query string
"""

import re
from collections.abc import Iterable, Mapping
from typing import TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from postboard.core.domain_types import PostId
from postboard.core.errors import ErrorContext, ParameterValidationError

_INTEGER = re.compile(r"^[+-]?\d+$")

# posts.id is INTEGER: int4 on PostgreSQL
MIN_POST_ID = -(2**31)
MAX_POST_ID = 2**31 - 1

P = TypeVar("P", bound=BaseModel)


class PostIdParams(BaseModel):
    """Parameters for operations addressing one post by id."""
    id: int = Field(ge=MIN_POST_ID, le=MAX_POST_ID)

    @field_validator("id", mode="before")
    @classmethod
    def parse_integer(cls, v: object) -> int:
        if isinstance(v, bool):
            raise ValueError("id must be an integer")
        if isinstance(v, int):
            return v
        if isinstance(v, str) and _INTEGER.match(v.strip()):
            return int(v.strip())
        raise ValueError("id must be an integer")

    @property
    def post_id(self) -> PostId:
        return PostId(self.id)


class PostContentParams(BaseModel):
    """Parameters for creating a post."""
    content: str

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("content cannot be empty or whitespace")
        return v


class PostEditParams(PostIdParams, PostContentParams):
    """Parameters for editing a post: both id and content."""


def first_values(items: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Collapse multi-valued query items, keeping the first value per key."""
    params: dict[str, str] = {}
    for key, value in items:
        params.setdefault(key, value)
    return params


def validate_params(
    schema: type[P], params: Mapping[str, str], operation: str | None = None,
) -> P:
    """Validate query params against schema or raise ParameterValidationError."""
    try:
        return schema.model_validate(dict(params))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"])
        raise ParameterValidationError(
            f"Invalid parameter '{field}': {first['msg']}", field,
            ErrorContext(operation=operation),
        ) from e
