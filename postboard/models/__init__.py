"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete for create_all/alembic
"""

from postboard.models.post import Post  # noqa: F401
