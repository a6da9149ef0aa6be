"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - The Gemini adapter maps every provider failure to ModelCallFailure

Design Decisions:
    - Thin wrapper over the raw SDK client (single responsibility)
"""
