"""Prompt Builders — pure functions mapping a validated payload to prompt parts.

Invariants:
    - No I/O, no randomness: same payload always yields the same parts
    - Builders receive payloads already checked by enforce_payload
    - Each builder returns 1-2 parts; generation options are bound by the route table

Design Decisions:
    - Insights sections rendered independently and skipped when empty
      (ADR: dashboard may upload partial summaries)
    - Policy sniff treats ANY parseable JSON as an existing policy, including
      bare numbers and {} (ADR: preserve dashboard behavior, no stricter guess)
"""

import json
from typing import Any, Callable

from app.core.domain_types import Payload
from app.services import prompt_templates as t

PartsBuilder = Callable[[Payload], tuple[str, ...]]


# ─── insights ────────────────────────────────────────────────────

def _money(value: Any) -> str:
    return f"${float(value):.2f}"


def _section(title: str, lines: list[str]) -> str:
    return title + "\n" + "".join(f"- {line}\n" for line in lines) + "\n"


def _service_cost_lines(service_costs: list) -> list[str]:
    return [f"{service}: {_money(cost)}" for service, cost in service_costs]


def _resource_line(res: dict, with_usage_types: bool) -> str:
    parts = [
        f"Resource ID: {res.get('resourceId') or 'N/A'}",
        f"Service: {res.get('service')}",
        f"Cost: {_money(res.get('totalCost', 0))}",
    ]
    if with_usage_types:
        parts.append(f"Usage Types: {res.get('usageTypes')}")
    parts.append(f"Occurrences: {res.get('occurrences')}")
    parts.append(f"Duration: {res.get('durationDays')} days")
    return ", ".join(parts)


def build_insights_prompt(summary: dict) -> str:
    """Render a billing summary into the insights prompt."""
    total = summary.get("totalOverallCost")
    prompt = t.INSIGHTS_HEADER
    prompt += f"Overall Billing Period: {'Data available' if total else 'No data'}\n"
    if total:
        prompt += f"Total Unblended Cost: ${total}\n\n"

    service_costs = summary.get("serviceCosts")
    if service_costs:
        prompt += _section(
            t.INSIGHTS_SERVICE_COSTS_TITLE, _service_cost_lines(service_costs),
        )

    expensive = summary.get("topExpensiveResources")
    if expensive:
        prompt += _section(
            t.INSIGHTS_EXPENSIVE_TITLE,
            [_resource_line(r, with_usage_types=True) for r in expensive],
        )

    idle = summary.get("idleResources")
    if idle:
        prompt += _section(
            t.INSIGHTS_IDLE_TITLE,
            [_resource_line(r, with_usage_types=False) for r in idle],
        )

    if summary.get("dataTruncated") is True:
        prompt += t.INSIGHTS_TRUNCATION_NOTE + "\n\n"

    return prompt + t.INSIGHTS_FOOTER


def insights_parts(payload: Payload) -> tuple[str, ...]:
    return (build_insights_prompt(payload["csvSummary"]),)


# ─── estimate / chat ─────────────────────────────────────────────

def estimate_parts(payload: Payload) -> tuple[str, ...]:
    return (t.ESTIMATE.format(
        resourceType=payload["resourceType"],
        size=payload["size"],
        region=payload["region"],
        duration=payload["duration"],
    ),)


def build_chat_prompt(user_question: str, csv_context: Any = None) -> str:
    """Assistant persona, optional billing hint, then the question."""
    prompt = t.CHAT_PERSONA
    if isinstance(csv_context, dict) and csv_context.get("hasData"):
        prompt += "\n\n" + t.CHAT_BILLING_CONTEXT.format(
            numRowsProcessed=csv_context.get("numRowsProcessed"),
        )
    prompt += "\n\n" + t.CHAT_QUESTION.format(userQuestion=user_question)
    return prompt


def chat_parts(payload: Payload) -> tuple[str, ...]:
    return (build_chat_prompt(payload["userQuestion"], payload.get("csvContext")),)


# ─── promptContext routes ────────────────────────────────────────

def context_template(instruction: str, label: str) -> PartsBuilder:
    """Builder for the common shape: fixed instruction + labeled promptContext."""

    def build(payload: Payload) -> tuple[str, ...]:
        return (instruction, f"{label}: {payload['promptContext']}")

    return build


def sniff_policy_document(raw: Any) -> tuple[bool, Any]:
    """Return (True, document) when raw parses as JSON, else (False, None).

    Non-string values arrive already decoded by the JSON body parser and
    count as documents.
    """
    if not isinstance(raw, str):
        return True, raw
    try:
        return True, json.loads(raw)
    except ValueError:
        return False, None


def security_policy_parts(payload: Payload) -> tuple[str, ...]:
    raw = payload["promptContext"]
    is_policy, document = sniff_policy_document(raw)
    if is_policy:
        return (t.POLICY_EXPLAIN, f"Policy Document:\n{json.dumps(document, indent=2)}")
    return (t.POLICY_GENERATE, f"Policy Requirements: {raw}")
