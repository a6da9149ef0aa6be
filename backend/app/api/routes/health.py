"""Liveness Probes — plain-text root check and JSON diagnostic route.

Invariants:
    - GET / always returns 200 with a non-empty body if the process started
      (startup already required GEMINI_API_KEY)
    - Neither route touches the model client
"""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

LIVENESS_MESSAGE = "Cloud Cost Dashboard Backend is running!"


@router.get("/", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
async def liveness():
    """Basic liveness probe."""
    return LIVENESS_MESSAGE


@router.get("/test-backend")
async def test_backend():
    """Diagnostic reachability check used by the dashboard."""
    return {"message": "Backend is reachable and test route works!"}
