"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All relay endpoints return JSON responses

Design Decisions:
    - Thin routes delegate to services
"""
