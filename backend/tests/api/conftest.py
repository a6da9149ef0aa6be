"""API test fixtures — FastAPI test client with the model client stubbed out.

Invariants:
    - get_model_client dependency overridden with a StubModelClient per test
    - Lifespan is not run: no real GeminiClient is ever constructed

Design Decisions:
    - dependency_overrides over module patching: the same injection point
      production uses (app.state → Depends)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_model_client
from app.main import app
from tests.stub_model_client import StubModelClient


@pytest.fixture
def stub_model():
    return StubModelClient(text="X")


@pytest.fixture
async def client(stub_model):
    """FastAPI test client with the model client overridden."""
    app.dependency_overrides[get_model_client] = lambda: stub_model

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
