"""Cloud Cost AI Relay — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RelayError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Settings validated at import: a missing GEMINI_API_KEY stops startup
    - One GeminiClient built in lifespan, shared read-only by every request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Model client on app.state + Depends(get_model_client): injection point that
      tests override without patching modules
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import ai_relay, health
from app.config import get_settings
from app.infrastructure.gemini_client import GeminiClient
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.model_client = GeminiClient(
        api_key=settings.gemini_api_key, model=settings.gemini_model,
    )
    logger.info(
        f"Cloud Cost AI Relay started (model {settings.gemini_model})",
        extra={"model": settings.gemini_model},
    )
    yield
    logger.info("Cloud Cost AI Relay shutting down")


app = FastAPI(
    title="Cloud Cost AI Relay", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(ai_relay.router)

register_error_handlers(app)


def run() -> None:
    """Launch uvicorn on the configured host/port."""
    uvicorn.run(app, host=settings.host, port=settings.port)
