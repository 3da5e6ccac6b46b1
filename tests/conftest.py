"""Shared fixtures for the advisor tests."""

import json

import pytest

from src.domain.models.profile import (
    Asset,
    Expense,
    FinancialProfile,
    Liability,
)


def build_analysis_payload(**overrides) -> dict:
    """Return a reply payload satisfying the analysis schema."""
    payload = {
        "financialHealthScore": 72,
        "netWorth": 41000,
        "monthlyCashFlow": 500,
        "debtToIncomeRatio": 18.5,
        "savingsRate": 10,
        "summary": "Solid foundation. Debt is manageable. Grow savings.",
        "keyInsights": [
            "Emergency fund covers three months.",
            "Credit card debt costs 19% a year.",
            "Savings rate is below 15%.",
        ],
        "actionPlan": [
            {
                "title": "Pay off the credit card",
                "description": "Direct surplus cash to the 19% balance.",
                "priority": "High",
                "impact": "Saves about $900 a year",
            },
            {
                "title": "Automate savings",
                "description": "Move 5% of income on payday.",
                "priority": "Medium",
                "impact": "Raises the savings rate to 15%",
            },
        ],
        "wealthProjection": [
            {
                "year": year,
                "conservative": 41000 + 6000 * year,
                "aggressive": 41000 + 8000 * year,
            }
            for year in range(1, 11)
        ],
        "expenseBreakdown": [
            {"category": "Housing", "percentage": 60},
            {"category": "Food", "percentage": 40},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def analysis_payload() -> dict:
    return build_analysis_payload()


@pytest.fixture
def analysis_text(analysis_payload) -> str:
    return json.dumps(analysis_payload)


@pytest.fixture
def sample_profile() -> FinancialProfile:
    return FinancialProfile(
        monthly_income=5000,
        age=34,
        financial_goal="Buy a house in five years",
        assets=(
            Asset(id="a1", name="Savings", value=15000, type="cash"),
            Asset(id="a2", name="Index fund", value=30000, type="investment"),
        ),
        liabilities=(
            Liability(id="l1", name="Credit card", amount=4000, interest_rate=19.9),
        ),
        expenses=(
            Expense(id="e1", category="Housing", amount=2700),
            Expense(id="e2", category="Food", amount=1800),
        ),
    )


@pytest.fixture
def payload_builder():
    """Return the builder for schema-valid reply payloads."""
    return build_analysis_payload
