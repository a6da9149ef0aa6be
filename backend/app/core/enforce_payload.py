"""Payload Enforcement — pure required-field checks run before any prompt is built.

Invariants:
    - A field is missing when absent or falsy: None, "", 0, False, empty collection
    - Mapping fields are also missing when the value is not a JSON object
    - Missing fields are reported in the route's declared order
    - A non-mapping body is missing every required field
    - Billing summaries are shape-checked section by section before rendering
"""

from typing import Any, Sequence


def is_blank(value: Any) -> bool:
    """True when the value would not carry anything into a prompt."""
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def find_missing_fields(
    payload: Any,
    required: Sequence[str],
    mapping_fields: Sequence[str] = (),
) -> list[str]:
    """Return required field names that are absent or blank in payload."""
    if not isinstance(payload, dict):
        return list(required)
    missing = []
    for name in required:
        value = payload.get(name)
        if is_blank(value) or (name in mapping_fields and not isinstance(value, dict)):
            missing.append(name)
    return missing


# ─── Billing summary shape (insights) ────────────────────────────

RESOURCE_LISTS = ("topExpensiveResources", "idleResources")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _service_costs_problem(service_costs: Any) -> str | None:
    if not isinstance(service_costs, list):
        return "serviceCosts must be a list of [service, cost] pairs"
    for pair in service_costs:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            return "serviceCosts must be a list of [service, cost] pairs"
        if not _is_number(pair[1]):
            return f"serviceCosts cost for {pair[0]!r} must be a number"
    return None


def _resources_problem(name: str, resources: Any) -> str | None:
    if not isinstance(resources, list):
        return f"{name} must be a list of objects"
    for res in resources:
        if not isinstance(res, dict):
            return f"{name} must be a list of objects"
        if "totalCost" in res and not _is_number(res["totalCost"]):
            return f"{name} totalCost must be a number"
    return None


def find_summary_problem(summary: Any) -> str | None:
    """Describe the first section of a billing summary that cannot be rendered.

    Absent or empty sections are fine (the prompt skips them).
    """
    service_costs = summary.get("serviceCosts")
    if not is_blank(service_costs):
        problem = _service_costs_problem(service_costs)
        if problem:
            return problem
    for name in RESOURCE_LISTS:
        resources = summary.get(name)
        if not is_blank(resources):
            problem = _resources_problem(name, resources)
            if problem:
                return problem
    return None
