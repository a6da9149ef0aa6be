"""Cloud Cost AI Relay Package — dashboard requests → Gemini prompts → JSON answers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
