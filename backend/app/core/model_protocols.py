"""Boundary Protocols — contract between the relay core and the model adapter.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - The model call is the only IO a relay performs, accessed through ModelClient

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests pass plain stub objects
"""

from typing import Protocol

from app.core.domain_types import PromptSpec
from app.core.errors import ModelCallFailure
from app.core.result import Result


class ModelClient(Protocol):
    """Contract for the generative model adapter — implemented by infrastructure."""
    async def generate(self, spec: PromptSpec) -> Result[str, ModelCallFailure]: ...
