"""Relay Handler — generic validate → build → call → shape executor for every route.

Invariants:
    - Each call ends in exactly one outcome: a response body, or one raised RelayError
    - Validation happens before any prompt is built or network call made
    - The model client is injected and never mutated
    - No retries, no partial success

Design Decisions:
    - Parameterized by RouteDescriptor instead of one function per route
      (ADR: ~20 near-identical handlers collapse into one executor)
    - Raises typed errors instead of returning HTTP responses: global error
      handlers own the wire shape (ADR: uniform error envelope)
"""

import logging
from typing import Any

from app.core.enforce_payload import find_missing_fields
from app.core.errors import ErrorContext, InvalidFieldError, PayloadValidationError
from app.core.model_protocols import ModelClient
from app.services.route_table import RouteDescriptor

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_CHARS = 500


class RelayHandler:
    """Runs one route descriptor against one request payload."""

    def __init__(
        self,
        route: RouteDescriptor,
        model_client: ModelClient,
        preview_chars: int = DEFAULT_PREVIEW_CHARS,
    ):
        self.route = route
        self.model_client = model_client
        self.preview_chars = preview_chars

    async def handle(self, payload: Any) -> dict:
        """Return the response envelope or raise a RelayError."""
        self._validate(payload)

        spec = self.route.build_prompt(payload)
        prompt = spec.text
        logger.info(
            f"Sending prompt to Gemini (first {self.preview_chars} chars): "
            f"{prompt[:self.preview_chars]}...",
            extra={
                "route": self.route.name,
                "prompt_chars": len(prompt),
                "max_output_tokens": spec.options.max_output_tokens,
            },
        )

        result = await self.model_client.generate(spec)
        if result.is_err:
            failure = result.error.for_route(
                self.route.failure_message, self.route.name,
            )
            logger.error(
                f"Model call failed for {self.route.name}: {failure.message}",
                extra={
                    "route": self.route.name,
                    "error_code": failure.code,
                    "provider_detail": failure.provider_detail,
                },
            )
            raise failure

        return self.route.shape_response(payload, result.value)

    def _validate(self, payload: Any) -> None:
        missing = find_missing_fields(
            payload, self.route.required_fields, self.route.mapping_fields,
        )
        if missing:
            raise PayloadValidationError(
                missing, ErrorContext(route=self.route.name),
            )
        for field, check in self.route.field_checks:
            problem = check(payload[field])
            if problem:
                raise InvalidFieldError(
                    field, problem, ErrorContext(route=self.route.name),
                )
