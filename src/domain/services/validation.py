"""Structural validation of analysis replies.

The model is asked for JSON matching a fixed schema, but its reply is
never trusted by cast: ``decode_analysis_result`` either yields a fully
typed ``AnalysisResult`` or raises ``SchemaViolation``.
"""

import json
from collections.abc import Mapping
from typing import Any

from src.domain.constants import (
    MAX_KEY_INSIGHTS,
    MIN_KEY_INSIGHTS,
    PROJECTION_YEARS,
)
from src.domain.errors import SchemaViolation
from src.domain.models.analysis import (
    ActionItem,
    AnalysisResult,
    ExpenseBreakdownEntry,
    ProjectionPoint,
)
from src.domain.services.normalization import normalize_priority


REQUIRED_FIELDS = (
    "financialHealthScore",
    "netWorth",
    "monthlyCashFlow",
    "debtToIncomeRatio",
    "savingsRate",
    "summary",
    "keyInsights",
    "actionPlan",
    "wealthProjection",
    "expenseBreakdown",
)


def parse_analysis_text(text: str) -> AnalysisResult:
    """Parse the raw reply text into an analysis result.

    Args:
        text: Reply body returned by the model.

    Returns:
        AnalysisResult: Validated result.

    Raises:
        SchemaViolation: If the text is not JSON or fails validation.
    """
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise SchemaViolation(f"Reply is not valid JSON: {exc}") from exc
    return decode_analysis_result(payload)


def decode_analysis_result(payload: Any) -> AnalysisResult:
    """Validate a decoded JSON payload against the result schema.

    Args:
        payload: Object decoded from the reply.

    Returns:
        AnalysisResult: Fully typed result.

    Raises:
        SchemaViolation: If any field is missing or malformed.
    """
    if not isinstance(payload, Mapping):
        raise SchemaViolation("Reply must be a JSON object")
    missing = [name for name in REQUIRED_FIELDS if name not in payload]
    if missing:
        raise SchemaViolation(
            f"Reply is missing required fields: {', '.join(missing)}"
        )

    return AnalysisResult(
        financial_health_score=_percentage(payload, "financialHealthScore"),
        net_worth=_number(payload["netWorth"], "netWorth"),
        monthly_cash_flow=_number(payload["monthlyCashFlow"], "monthlyCashFlow"),
        debt_to_income_ratio=_percentage(payload, "debtToIncomeRatio"),
        savings_rate=_percentage(payload, "savingsRate"),
        summary=_text(payload["summary"], "summary"),
        key_insights=_key_insights(payload["keyInsights"]),
        action_plan=_action_plan(payload["actionPlan"]),
        wealth_projection=_wealth_projection(payload["wealthProjection"]),
        expense_breakdown=_expense_breakdown(payload["expenseBreakdown"]),
    )


def _number(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaViolation(f"Field '{field}' must be a number")
    return float(value)


def _percentage(payload: Mapping[str, Any], field: str) -> float:
    value = _number(payload[field], field)
    if not 0 <= value <= 100:
        raise SchemaViolation(
            f"Field '{field}' must be between 0 and 100, got {value}"
        )
    return value


def _text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise SchemaViolation(f"Field '{field}' must be a string")
    return value


def _items(value: Any, field: str) -> list:
    if not isinstance(value, list):
        raise SchemaViolation(f"Field '{field}' must be an array")
    return value


def _record(value: Any, field: str, keys: tuple[str, ...]) -> Mapping:
    if not isinstance(value, Mapping):
        raise SchemaViolation(f"Entries of '{field}' must be objects")
    missing = [key for key in keys if key not in value]
    if missing:
        raise SchemaViolation(
            f"Entry of '{field}' is missing: {', '.join(missing)}"
        )
    return value


def _key_insights(value: Any) -> tuple[str, ...]:
    insights = tuple(
        _text(item, "keyInsights") for item in _items(value, "keyInsights")
    )
    if not MIN_KEY_INSIGHTS <= len(insights) <= MAX_KEY_INSIGHTS:
        raise SchemaViolation(
            f"Field 'keyInsights' must hold {MIN_KEY_INSIGHTS}-"
            f"{MAX_KEY_INSIGHTS} items, got {len(insights)}"
        )
    return insights


def _action_plan(value: Any) -> tuple[ActionItem, ...]:
    actions = []
    for raw in _items(value, "actionPlan"):
        record = _record(
            raw,
            "actionPlan",
            ("title", "description", "priority", "impact"),
        )
        priority = normalize_priority(record["priority"])
        if priority is None:
            raise SchemaViolation(
                f"Unknown action priority: {record['priority']!r}"
            )
        actions.append(
            ActionItem(
                title=_text(record["title"], "actionPlan.title"),
                description=_text(
                    record["description"],
                    "actionPlan.description",
                ),
                priority=priority,
                impact=_text(record["impact"], "actionPlan.impact"),
            )
        )
    if not actions:
        raise SchemaViolation("Field 'actionPlan' must not be empty")
    return tuple(actions)


def _wealth_projection(value: Any) -> tuple[ProjectionPoint, ...]:
    points = []
    for raw in _items(value, "wealthProjection"):
        record = _record(
            raw,
            "wealthProjection",
            ("year", "conservative", "aggressive"),
        )
        year = _number(record["year"], "wealthProjection.year")
        if not year.is_integer():
            raise SchemaViolation(f"Projection year must be whole: {year}")
        points.append(
            ProjectionPoint(
                year=int(year),
                conservative=_number(
                    record["conservative"],
                    "wealthProjection.conservative",
                ),
                aggressive=_number(
                    record["aggressive"],
                    "wealthProjection.aggressive",
                ),
            )
        )
    years = [point.year for point in points]
    expected = list(range(1, PROJECTION_YEARS + 1))
    if years != expected:
        raise SchemaViolation(
            f"Field 'wealthProjection' must cover years 1..{PROJECTION_YEARS} "
            f"in order, got {years}"
        )
    return tuple(points)


def _expense_breakdown(value: Any) -> tuple[ExpenseBreakdownEntry, ...]:
    entries = []
    for raw in _items(value, "expenseBreakdown"):
        record = _record(raw, "expenseBreakdown", ("category", "percentage"))
        percentage = _number(record["percentage"], "expenseBreakdown.percentage")
        if not 0 <= percentage <= 100:
            raise SchemaViolation(
                f"Expense share must be between 0 and 100, got {percentage}"
            )
        entries.append(
            ExpenseBreakdownEntry(
                category=_text(record["category"], "expenseBreakdown.category"),
                percentage=percentage,
            )
        )
    return tuple(entries)


__all__ = ["REQUIRED_FIELDS", "parse_analysis_text", "decode_analysis_result"]
