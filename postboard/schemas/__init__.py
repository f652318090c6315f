"""Pydantic Schemas — query-parameter validation at the HTTP boundary.

Invariants:
    - Schemas validate at system boundary, before any store access
"""
