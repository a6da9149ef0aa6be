"""Domain Types — immutable value objects shared by builders, adapter and handler.

Invariants:
    - PromptSpec holds 1-2 non-empty text parts, never mutated after build
    - GenerationOptions.temperature is None (model default) or within [0.0, 1.0]
    - max_output_tokens is always positive

Design Decisions:
    - Frozen dataclasses over Pydantic models: built per request in hot path,
      no parsing needed (ADR: validation happens at the HTTP boundary)
"""

from dataclasses import dataclass
from typing import Any, Mapping

Payload = Mapping[str, Any]


@dataclass(frozen=True)
class GenerationOptions:
    """Per-call model tunables."""
    max_output_tokens: int
    temperature: float | None = None

    def __post_init__(self):
        if self.max_output_tokens <= 0:
            raise ValueError("max_output_tokens must be positive")
        if self.temperature is not None and not 0.0 <= self.temperature <= 1.0:
            raise ValueError("temperature must be within [0, 1]")


@dataclass(frozen=True)
class PromptSpec:
    """Ordered prompt parts plus generation options."""
    parts: tuple[str, ...]
    options: GenerationOptions

    def __post_init__(self):
        if not 1 <= len(self.parts) <= 2:
            raise ValueError("PromptSpec requires 1 or 2 parts")

    @property
    def text(self) -> str:
        """All parts joined — used for logging and assertions."""
        return "\n".join(self.parts)
