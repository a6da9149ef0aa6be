"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Functions are pure and deterministic; the only async member is the
      ModelClient protocol, implemented outside core

Design Decisions:
    - Functional core separated from imperative shell
"""
