"""API Layer — FastAPI routes, response encoding, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Error responses carry an empty body; status code is the whole contract
"""
