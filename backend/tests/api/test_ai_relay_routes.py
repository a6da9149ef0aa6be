"""AI Relay Routes — end-to-end HTTP tests with the model client stubbed.

Tests cover:
    - Every route: missing required fields → 400 without the output key
    - Every route: stub text "X" → 200 with body[outputKey] == "X"
    - Model failure → 500 with error + details (+ geminiErrorDetail when present)
    - Identical requests → byte-identical envelopes
    - Insights echoes summary fields
    - Oversized (declared or streamed) and malformed bodies rejected
    - Insights summaries that cannot be rendered rejected with 400
"""

import pytest

from app.config import get_settings
from app.core.errors import ModelCallFailure
from app.services.route_table import ROUTES, ROUTES_BY_NAME

VALID_PAYLOADS = {
    "insights": {"csvSummary": {
        "totalOverallCost": "99.10",
        "serviceCosts": [["AmazonEC2", 80.2], ["AmazonS3", 18.9]],
        "dataTruncated": True,
    }},
    "estimate": {
        "resourceType": "EC2 instance", "size": "t3.medium",
        "region": "us-east-1", "duration": 730,
    },
    "chat": {"userQuestion": "How do I cut NAT gateway costs?"},
}


def _valid_payload(name):
    return VALID_PAYLOADS.get(name, {"promptContext": f"context for {name}"})


ROUTE_NAMES = [r.name for r in ROUTES]


@pytest.mark.parametrize("name", ROUTE_NAMES)
async def test_missing_required_fields_returns_400(client, stub_model, name):
    res = await client.post(f"/api/ai/{name}", json={})

    assert res.status_code == 400
    body = res.json()
    assert "error" in body
    assert ROUTES_BY_NAME[name].output_key not in body
    for field in ROUTES_BY_NAME[name].required_fields:
        assert field in body["error"]
    assert stub_model.calls == []


@pytest.mark.parametrize("name", ROUTE_NAMES)
async def test_success_returns_model_text(client, name):
    res = await client.post(f"/api/ai/{name}", json=_valid_payload(name))

    assert res.status_code == 200
    assert res.json()[ROUTES_BY_NAME[name].output_key] == "X"


@pytest.mark.parametrize("name", ROUTE_NAMES)
async def test_model_failure_returns_500(client, stub_model, name):
    stub_model.failure = ModelCallFailure("fetch failed")

    res = await client.post(f"/api/ai/{name}", json=_valid_payload(name))

    assert res.status_code == 500
    body = res.json()
    assert body["error"] == ROUTES_BY_NAME[name].failure_message
    assert body["details"] == "fetch failed"
    assert "geminiErrorDetail" not in body


async def test_model_failure_surfaces_provider_detail(client, stub_model):
    stub_model.failure = ModelCallFailure(
        "Candidate was blocked due to SAFETY", provider_detail='[{"finish_reason": "SAFETY"}]',
    )

    res = await client.post("/api/ai/recommendation", json={"promptContext": "idle RDS"})

    assert res.status_code == 500
    assert res.json()["geminiErrorDetail"] == '[{"finish_reason": "SAFETY"}]'


@pytest.mark.parametrize("name", ROUTE_NAMES)
async def test_identical_requests_yield_identical_envelopes(client, name):
    first = await client.post(f"/api/ai/{name}", json=_valid_payload(name))
    second = await client.post(f"/api/ai/{name}", json=_valid_payload(name))

    assert first.content == second.content


async def test_insights_echoes_summary(client, stub_model):
    payload = VALID_PAYLOADS["insights"]

    res = await client.post("/api/ai/insights", json=payload)

    body = res.json()
    assert body["insights"] == "X"
    assert body["totalOverallCost"] == "99.10"
    assert body["serviceCosts"] == [["AmazonEC2", 80.2], ["AmazonS3", 18.9]]
    assert body["dataTruncated"] is True
    assert body["idleResources"] is None
    assert "- AmazonEC2: $80.20" in stub_model.calls[0].text


async def test_insights_rejects_empty_summary(client):
    res = await client.post("/api/ai/insights", json={"csvSummary": {}})
    assert res.status_code == 400


@pytest.mark.parametrize("summary", [
    {"topExpensiveResources": [{"resourceId": "i-1", "service": "EC2", "totalCost": None}]},
    {"idleResources": [{"resourceId": "vol-9", "service": "EBS", "totalCost": "3.10"}]},
    {"serviceCosts": [["EC2", None]]},
    {"serviceCosts": {"EC2": 10.0}},
    {"topExpensiveResources": ["i-1"]},
])
async def test_insights_rejects_unrenderable_summary(client, stub_model, summary):
    res = await client.post("/api/ai/insights", json={"csvSummary": summary})

    assert res.status_code == 400
    assert "csvSummary" in res.json()["error"]
    assert "insights" not in res.json()
    assert stub_model.calls == []


async def test_estimate_reports_only_missing_fields(client):
    res = await client.post("/api/ai/estimate", json={"resourceType": "S3", "size": "1TB"})

    assert res.status_code == 400
    assert res.json()["error"] == "Missing required field(s): region, duration"


async def test_chat_passes_generation_options(client, stub_model):
    await client.post("/api/ai/chat", json=_valid_payload("chat"))

    assert stub_model.calls[0].options.max_output_tokens == 300
    assert stub_model.calls[0].options.temperature == 0.5


async def test_policy_explainer_sniffs_json(client, stub_model):
    await client.post(
        "/api/ai/security-policy-explainer",
        json={"promptContext": '{"Version":"2012-10-17","Statement":[]}'},
    )
    await client.post(
        "/api/ai/security-policy-explainer",
        json={"promptContext": "allow ec2 read access"},
    )

    explain, generate = stub_model.calls
    assert explain.parts[1].startswith("Policy Document:")
    assert generate.parts[1] == "Policy Requirements: allow ec2 read access"


async def test_malformed_json_returns_400(client, stub_model):
    res = await client.post(
        "/api/ai/recommendation", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert "error" in res.json()
    assert stub_model.calls == []


async def test_empty_body_reports_missing_fields(client):
    res = await client.post("/api/ai/troubleshoot")

    assert res.status_code == 400
    assert "promptContext" in res.json()["error"]


async def test_oversized_body_returns_413(client, stub_model, monkeypatch):
    monkeypatch.setattr(get_settings(), "max_body_bytes", 64)

    res = await client.post("/api/ai/explain-cloud", json={"promptContext": "x" * 200})

    assert res.status_code == 413
    assert "error" in res.json()
    assert stub_model.calls == []


async def test_chunked_body_stops_reading_past_limit(client, stub_model, monkeypatch):
    monkeypatch.setattr(get_settings(), "max_body_bytes", 64)
    pulled = []

    async def chunks():
        for i in range(1000):
            pulled.append(i)
            yield b"x" * 64

    res = await client.post(
        "/api/ai/explain-cloud", content=chunks(),
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 413
    assert "error" in res.json()
    assert len(pulled) < 10
    assert stub_model.calls == []


async def test_get_on_relay_route_not_allowed(client):
    res = await client.get("/api/ai/chat")
    assert res.status_code == 405
