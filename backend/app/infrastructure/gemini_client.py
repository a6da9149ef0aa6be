"""Gemini Client Adapter — wraps google-genai's async client behind generate(PromptSpec).

Invariants:
    - Exactly one outbound call per generate(); no retry, no caching, no rate limiting
    - Never raises for provider failures: every failure is Result.err(ModelCallFailure)
    - Empty or blocked responses are failures (no partial success)
    - The SDK client is built once and only read afterwards (shared across requests)

Design Decisions:
    - Result over exceptions at this boundary: the relay handler decides the HTTP
      shape, the adapter only classifies (ADR: explicit Ok | Err)
    - Provider diagnostics serialized to a JSON string: the dashboard prints
      geminiErrorDetail verbatim for debugging
"""

import json
import logging

from google import genai
from google.genai import errors, types

from app.core.domain_types import PromptSpec
from app.core.errors import ModelCallFailure
from app.core.result import Result

logger = logging.getLogger(__name__)


def _to_contents(spec: PromptSpec) -> list[types.Content]:
    return [types.Content(
        role="user", parts=[types.Part(text=part) for part in spec.parts],
    )]


def _to_config(spec: PromptSpec) -> types.GenerateContentConfig:
    config = types.GenerateContentConfig(
        max_output_tokens=spec.options.max_output_tokens,
    )
    if spec.options.temperature is not None:
        config.temperature = spec.options.temperature
    return config


def _dump(value) -> str | None:
    """JSON-serialize SDK models/plain data; None when nothing to report."""
    if not value:
        return None
    if isinstance(value, list):
        value = [
            v.model_dump(mode="json", exclude_none=True)
            if hasattr(v, "model_dump") else v
            for v in value
        ]
    elif hasattr(value, "model_dump"):
        value = value.model_dump(mode="json", exclude_none=True)
    return json.dumps(value, indent=2, default=str)


def _describe_empty_response(response: types.GenerateContentResponse) -> ModelCallFailure:
    feedback = response.prompt_feedback
    if feedback is not None and feedback.block_reason:
        message = f"Prompt blocked by Gemini: {feedback.block_reason}"
        return ModelCallFailure(message, provider_detail=_dump(feedback))
    return ModelCallFailure(
        "Gemini returned no text", provider_detail=_dump(response.candidates),
    )


class GeminiClient:
    """Adapter over google.genai.Client exposing generate(PromptSpec) -> Result."""

    def __init__(self, api_key: str, model: str, client: genai.Client | None = None):
        self.model = model
        self.client = client or genai.Client(api_key=api_key)

    async def generate(self, spec: PromptSpec) -> Result[str, ModelCallFailure]:
        """Send the prompt once and classify the outcome."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=_to_contents(spec),
                config=_to_config(spec),
            )
        except errors.APIError as e:
            logger.error(
                f"Gemini API error ({e.code}): {e.message}",
                extra={"model": self.model, "error_code": e.code},
            )
            return Result.err(ModelCallFailure(
                str(e), provider_detail=_dump(e.details),
            ))
        except Exception as e:
            logger.error(
                f"Unexpected Gemini error: {e}", exc_info=True,
                extra={"model": self.model},
            )
            return Result.err(ModelCallFailure(str(e) or type(e).__name__))

        text = response.text
        if not text:
            failure = _describe_empty_response(response)
            logger.error(
                f"Gemini response unusable: {failure.message}",
                extra={"model": self.model},
            )
            return Result.err(failure)

        self._log_success(response)
        return Result.ok(text)

    def _log_success(self, response: types.GenerateContentResponse) -> None:
        usage = response.usage_metadata
        logger.info(
            "Gemini API success",
            extra={
                "model": self.model,
                "input_tokens": getattr(usage, "prompt_token_count", None),
                "output_tokens": getattr(usage, "candidates_token_count", None),
            },
        )
