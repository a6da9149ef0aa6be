"""Route Table — verifies every relay route's contract.

Tests cover:
    - All 20 routes registered, names unique
    - Required fields, output keys and generation options per route
    - promptContext routes build two parts: instruction + labeled context
"""

import pytest

from app.core.domain_types import GenerationOptions
from app.services.route_table import ROUTES, ROUTES_BY_NAME

EXPECTED = {
    "insights": (("csvSummary",), "insights", 200, None),
    "estimate": (("resourceType", "size", "region", "duration"), "estimate", 150, None),
    "chat": (("userQuestion",), "answer", 300, 0.5),
    "recommendation": (("promptContext",), "recommendation", 50, 0.2),
    "explain-anomaly": (("promptContext",), "explanation", 100, 0.4),
    "resource-optimization": (("promptContext",), "optimizationPlan", 200, 0.3),
    "troubleshoot": (("promptContext",), "troubleshootResponse", 250, 0.4),
    "architecture-assistant": (("promptContext",), "architectureGuidance", 400, 0.7),
    "security-compliance": (("promptContext",), "securityComplianceResponse", 200, 0.3),
    "generate-playbook": (("promptContext",), "playbook", 600, 0.6),
    "iam-simplifier": (("promptContext",), "iamGuidance", 500, 0.4),
    "dr-planner": (("promptContext",), "drPlan", 500, 0.6),
    "explain-cloud": (("promptContext",), "explanation", 500, 0.5),
    "teach-me-setup": (("promptContext",), "learningContent", 800, 0.5),
    "service-decision": (("promptContext",), "serviceDecision", 600, 0.5),
    "security-policy-explainer": (("promptContext",), "policyExplanation", 700, 0.4),
    "generate-cloud-course": (("promptContext",), "courseContent", 800, 0.6),
    "interactive-cloud-lab": (("promptContext",), "labContent", 700, 0.6),
    "flashcards-quizzes": (("promptContext",), "learningContent", 700, 0.6),
    "cloud-career-guide": (("promptContext",), "careerGuideContent", 800, 0.7),
}


def test_all_routes_registered_once():
    names = [r.name for r in ROUTES]
    assert len(names) == len(set(names))
    assert set(names) == set(EXPECTED)


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_route_contract(name):
    required, output_key, max_tokens, temperature = EXPECTED[name]
    route = ROUTES_BY_NAME[name]
    assert route.required_fields == required
    assert route.output_key == output_key
    assert route.options == GenerationOptions(max_tokens, temperature)
    assert route.failure_message


@pytest.mark.parametrize(
    "name",
    sorted(n for n, spec in EXPECTED.items() if spec[0] == ("promptContext",)),
)
def test_prompt_context_routes_build_two_parts(name):
    spec = ROUTES_BY_NAME[name].build_prompt({"promptContext": "my context"})
    assert len(spec.parts) == 2
    assert "my context" in spec.parts[1]
    assert "my context" not in spec.parts[0]
    assert spec.options == ROUTES_BY_NAME[name].options


def test_insights_echoes_summary_fields():
    route = ROUTES_BY_NAME["insights"]
    summary = {"totalOverallCost": 10, "serviceCosts": [["EC2", 10]], "extra": "x"}
    body = route.shape_response({"csvSummary": summary}, "tips")
    assert body == {
        "insights": "tips",
        "totalOverallCost": 10,
        "serviceCosts": [["EC2", 10]],
        "topExpensiveResources": None,
        "idleResources": None,
        "dataTruncated": None,
    }


def test_plain_route_shapes_single_key():
    body = ROUTES_BY_NAME["dr-planner"].shape_response({"promptContext": "db"}, "plan")
    assert body == {"drPlan": "plan"}
