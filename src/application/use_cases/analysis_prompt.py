"""Prompt and response schema sent to the generative model."""

import json
import textwrap

from src.domain.constants import (
    ACTION_PRIORITIES,
    AGGRESSIVE_RETURN,
    CONSERVATIVE_RETURN,
    DEBT_WEIGHT,
    HIGH_INTEREST_THRESHOLD,
    LIQUIDITY_WEIGHT,
    MAX_KEY_INSIGHTS,
    MIN_KEY_INSIGHTS,
    PROJECTION_YEARS,
    SAVINGS_WEIGHT,
)
from src.domain.models.profile import FinancialProfile
from src.domain.services.validation import REQUIRED_FIELDS


ANALYSIS_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "financialHealthScore": {
            "type": "NUMBER",
            "description": "Overall health score 0-100.",
            "minimum": 0,
            "maximum": 100,
        },
        "netWorth": {
            "type": "NUMBER",
            "description": "Calculated current net worth.",
        },
        "monthlyCashFlow": {
            "type": "NUMBER",
            "description": "Income minus all monthly expenses.",
        },
        "debtToIncomeRatio": {
            "type": "NUMBER",
            "description": "Percentage of income used for debt (0-100).",
            "minimum": 0,
            "maximum": 100,
        },
        "savingsRate": {
            "type": "NUMBER",
            "description": (
                "Percentage of income saved (0-100); 0 when monthly cash "
                "flow is negative."
            ),
            "minimum": 0,
            "maximum": 100,
        },
        "summary": {
            "type": "STRING",
            "description": "Executive summary (max 3 sentences).",
        },
        "keyInsights": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": (
                f"{MIN_KEY_INSIGHTS}-{MAX_KEY_INSIGHTS} high-level observations."
            ),
        },
        "actionPlan": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "title": {"type": "STRING"},
                    "description": {"type": "STRING"},
                    "priority": {
                        "type": "STRING",
                        "enum": list(ACTION_PRIORITIES),
                    },
                    "impact": {"type": "STRING"},
                },
                "required": ["title", "description", "priority", "impact"],
            },
        },
        "wealthProjection": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "year": {"type": "NUMBER"},
                    "conservative": {"type": "NUMBER"},
                    "aggressive": {"type": "NUMBER"},
                },
                "required": ["year", "conservative", "aggressive"],
            },
        },
        "expenseBreakdown": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "category": {"type": "STRING"},
                    "percentage": {"type": "NUMBER"},
                },
                "required": ["category", "percentage"],
            },
        },
    },
    "required": list(REQUIRED_FIELDS),
}

_INSTRUCTIONS = f"""
Instructions:
1. Health Score: Liquidity weight ({LIQUIDITY_WEIGHT}%), Debt weight ({DEBT_WEIGHT}%), Savings weight ({SAVINGS_WEIGHT}%).
2. Net Worth: Strict Assets - Liabilities.
3. Projections: {PROJECTION_YEARS} years, one entry per year numbered 1 to {PROJECTION_YEARS}. Conservative: {CONSERVATIVE_RETURN}% return. Aggressive: {AGGRESSIVE_RETURN}% return.
4. Insights: {MIN_KEY_INSIGHTS}-{MAX_KEY_INSIGHTS} items. Focus on tax efficiency, debt cost, and emergency fund status.
5. Action Plan: At least one item. Prioritize high-interest debt (>{HIGH_INTEREST_THRESHOLD}%) first.
6. Expense Breakdown: One entry per distinct expense category.
7. Percentages use a 0-100 scale. Currency values are plain numbers without symbols.
8. Savings Rate: Never negative. Use 0 when monthly cash flow is negative. Health score, debt-to-income ratio and savings rate stay within 0-100.
"""


def build_analysis_prompt(profile: FinancialProfile) -> str:
    """Return the prompt auditing ``profile``.

    Args:
        profile: Submitted profile snapshot.

    Returns:
        str: Persona line, profile JSON and the fixed instruction block.
    """
    profile_json = json.dumps(profile.to_payload(), indent=2)
    return (
        "As a Principal Wealth Architect, perform a deep audit on this "
        f"profile:\n{profile_json}\n{textwrap.dedent(_INSTRUCTIONS)}"
    )


__all__ = ["ANALYSIS_RESPONSE_SCHEMA", "build_analysis_prompt"]
