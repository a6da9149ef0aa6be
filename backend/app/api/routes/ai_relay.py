"""AI Relay Routes — POST /api/ai/<name> for every descriptor in the route table.

Invariants:
    - One endpoint per RouteDescriptor, registered from ROUTES (no per-route code)
    - Routes never contain business logic (delegate to RelayHandler)
    - Every response is JSON: the envelope on success, RelayError envelope otherwise
"""

from typing import Any

from fastapi import APIRouter, Depends

from app.api.dependencies import get_model_client, read_json_payload
from app.config import get_settings
from app.core.model_protocols import ModelClient
from app.services.relay_handler import RelayHandler
from app.services.route_table import ROUTES, RouteDescriptor

router = APIRouter(prefix="/api/ai", tags=["ai"])


def _make_endpoint(route: RouteDescriptor):
    async def relay(
        payload: Any = Depends(read_json_payload),
        model_client: ModelClient = Depends(get_model_client),
    ) -> dict:
        handler = RelayHandler(
            route, model_client,
            preview_chars=get_settings().prompt_log_preview_chars,
        )
        return await handler.handle(payload)

    relay.__name__ = "relay_" + route.name.replace("-", "_")
    relay.__doc__ = f"Relay {route.name} to Gemini; responds with `{route.output_key}`."
    return relay


for _route in ROUTES:
    router.add_api_route(
        f"/{_route.name}", _make_endpoint(_route), methods=["POST"],
    )
