"""Infrastructure Layer — database pool and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store exceptions are mapped to core/errors.py types before leaving this layer
"""
