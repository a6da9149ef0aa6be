"""Route Table — one descriptor per relay route, consumed by the generic handler.

Invariants:
    - Route names are unique and served as POST /api/ai/<name>
    - Every descriptor names at least one required field
    - Generation options are fixed per route (never taken from the request)

Design Decisions:
    - Data descriptors over per-route handler functions: ~20 routes differ only
      in template, options and output key (ADR: one executor, many descriptors)
"""

from dataclasses import dataclass
from typing import Any, Callable

from app.core.domain_types import GenerationOptions, Payload, PromptSpec
from app.core.enforce_payload import find_summary_problem
from app.services import prompt_templates as t
from app.services.prompt_builders import (
    PartsBuilder,
    chat_parts,
    context_template,
    estimate_parts,
    insights_parts,
    security_policy_parts,
)

PROMPT_CONTEXT = ("promptContext",)


@dataclass(frozen=True)
class RouteDescriptor:
    """Everything the relay handler needs to serve one route."""
    name: str
    required_fields: tuple[str, ...]
    build_parts: PartsBuilder
    output_key: str
    options: GenerationOptions
    failure_message: str
    mapping_fields: tuple[str, ...] = ()
    echo_source: str | None = None
    echo_fields: tuple[str, ...] = ()
    # (field, check) pairs; a check returns a problem description or None
    field_checks: tuple[tuple[str, Callable[[Any], str | None]], ...] = ()

    def build_prompt(self, payload: Payload) -> PromptSpec:
        return PromptSpec(parts=self.build_parts(payload), options=self.options)

    def shape_response(self, payload: Payload, text: str) -> dict:
        body = {self.output_key: text}
        if self.echo_source:
            source = payload.get(self.echo_source) or {}
            for name in self.echo_fields:
                body[name] = source.get(name)
        return body


def _context_route(
    name: str, instruction: str, label: str, output_key: str,
    max_tokens: int, temperature: float, what: str,
) -> RouteDescriptor:
    return RouteDescriptor(
        name=name,
        required_fields=PROMPT_CONTEXT,
        build_parts=context_template(instruction, label),
        output_key=output_key,
        options=GenerationOptions(max_tokens, temperature),
        failure_message=f"Failed to generate AI {what}.",
    )


ROUTES: tuple[RouteDescriptor, ...] = (
    RouteDescriptor(
        name="insights",
        required_fields=("csvSummary",),
        build_parts=insights_parts,
        output_key="insights",
        options=GenerationOptions(200),
        failure_message=(
            "Failed to get AI insights from Gemini. Check backend logs for details."
        ),
        mapping_fields=("csvSummary",),
        field_checks=(("csvSummary", find_summary_problem),),
        echo_source="csvSummary",
        echo_fields=(
            "totalOverallCost", "serviceCosts", "topExpensiveResources",
            "idleResources", "dataTruncated",
        ),
    ),
    RouteDescriptor(
        name="estimate",
        required_fields=("resourceType", "size", "region", "duration"),
        build_parts=estimate_parts,
        output_key="estimate",
        options=GenerationOptions(150),
        failure_message="Failed to get cost estimate from Gemini.",
    ),
    RouteDescriptor(
        name="chat",
        required_fields=("userQuestion",),
        build_parts=chat_parts,
        output_key="answer",
        options=GenerationOptions(300, 0.5),
        failure_message="Failed to get AI chat response.",
    ),
    _context_route(
        "recommendation", t.RECOMMENDATION, "Opportunity Details",
        "recommendation", 50, 0.2, "recommendation",
    ),
    _context_route(
        "explain-anomaly", t.EXPLAIN_ANOMALY, "Anomaly Details",
        "explanation", 100, 0.4, "anomaly explanation",
    ),
    _context_route(
        "resource-optimization", t.RESOURCE_OPTIMIZATION, "Opportunity Details",
        "optimizationPlan", 200, 0.3, "resource optimization plan",
    ),
    _context_route(
        "troubleshoot", t.TROUBLESHOOT, "User's Problem",
        "troubleshootResponse", 250, 0.4, "troubleshooting response",
    ),
    _context_route(
        "architecture-assistant", t.ARCHITECTURE_ASSISTANT, "User's Request",
        "architectureGuidance", 400, 0.7, "architectural guidance",
    ),
    _context_route(
        "security-compliance", t.SECURITY_COMPLIANCE, "User's Query",
        "securityComplianceResponse", 200, 0.3, "security/compliance response",
    ),
    _context_route(
        "generate-playbook", t.GENERATE_PLAYBOOK, "Scenario",
        "playbook", 600, 0.6, "playbook",
    ),
    _context_route(
        "iam-simplifier", t.IAM_SIMPLIFIER, "IAM Question",
        "iamGuidance", 500, 0.4, "IAM guidance",
    ),
    _context_route(
        "dr-planner", t.DR_PLANNER, "Workload Details",
        "drPlan", 500, 0.6, "disaster recovery plan",
    ),
    _context_route(
        "explain-cloud", t.EXPLAIN_CLOUD, "Concept",
        "explanation", 500, 0.5, "cloud explanation",
    ),
    _context_route(
        "teach-me-setup", t.TEACH_ME_SETUP, "Setup Goal",
        "learningContent", 800, 0.5, "setup walkthrough",
    ),
    _context_route(
        "service-decision", t.SERVICE_DECISION, "Requirement",
        "serviceDecision", 600, 0.5, "service decision",
    ),
    RouteDescriptor(
        name="security-policy-explainer",
        required_fields=PROMPT_CONTEXT,
        build_parts=security_policy_parts,
        output_key="policyExplanation",
        options=GenerationOptions(700, 0.4),
        failure_message="Failed to generate AI policy explanation.",
    ),
    _context_route(
        "generate-cloud-course", t.GENERATE_CLOUD_COURSE, "Course Topic",
        "courseContent", 800, 0.6, "cloud course",
    ),
    _context_route(
        "interactive-cloud-lab", t.INTERACTIVE_CLOUD_LAB, "Lab Topic",
        "labContent", 700, 0.6, "interactive lab",
    ),
    _context_route(
        "flashcards-quizzes", t.FLASHCARDS_QUIZZES, "Study Topic",
        "learningContent", 700, 0.6, "flashcards and quizzes",
    ),
    _context_route(
        "cloud-career-guide", t.CLOUD_CAREER_GUIDE, "User's Background",
        "careerGuideContent", 800, 0.7, "cloud career guide",
    ),
)

ROUTES_BY_NAME: dict[str, RouteDescriptor] = {r.name: r for r in ROUTES}
