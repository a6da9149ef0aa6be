"""Services Layer — prompt builders, route table, and the generic relay handler.

Invariants:
    - Builders are pure; the relay handler is the only async orchestrator
    - Routes resolved through an explicit tuple (no auto-discovery)
"""
