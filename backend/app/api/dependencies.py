"""Request Dependencies — shared model client and JSON body reading for relay routes.

Invariants:
    - The model client is created once in lifespan and stored on app.state
    - Bodies larger than max_body_bytes are rejected before JSON decoding,
      and a streamed body is abandoned at the first chunk past the limit
    - An empty body decodes to {} (every required field then reports missing)
"""

import json
from typing import Any

from fastapi import Request

from app.config import get_settings
from app.core.errors import MalformedBodyError, PayloadTooLargeError
from app.core.model_protocols import ModelClient


def get_model_client(request: Request) -> ModelClient:
    """Shared, read-only model adapter (overridden in tests)."""
    return request.app.state.model_client


async def read_json_payload(request: Request) -> Any:
    """Decode the request body, enforcing the configured size limit."""
    limit = get_settings().max_body_bytes
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(limit)

    received = bytearray()
    async for chunk in request.stream():
        received += chunk
        if len(received) > limit:
            raise PayloadTooLargeError(limit)

    raw = bytes(received)
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as e:
        raise MalformedBodyError(str(e))
