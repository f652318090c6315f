"""Post View — pure serialization of PostRecord into the public JSON shape.

Invariants:
    - Output keys are exactly id, content, likes, created
    - `removed` is never exposed
    - created is rendered as ISO-8601
"""

from postboard.core.domain_types import PostRecord


def serialize_post(post: PostRecord) -> dict:
    return {
        "id": post.id,
        "content": post.content,
        "likes": post.likes,
        "created": post.created.isoformat(),
    }


def serialize_posts(posts: list[PostRecord]) -> list[dict]:
    """Serialize a listing, preserving order."""
    return [serialize_post(p) for p in posts]
