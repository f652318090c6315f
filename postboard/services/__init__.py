"""Services Layer — post repository, request handlers, and operation dispatch.

Invariants:
    - Dispatch uses an explicit mapping (no auto-discovery)
    - Handlers never build HTTP responses; they return OperationResult
"""
