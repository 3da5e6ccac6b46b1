"""Local aggregation of user-entered line items.

These totals only back display values (live cash flow on the form,
absolute expense amounts on the dashboard); the financial metrics of the
analysis come from the model.
"""

import math

from src.domain.models.analysis import AnalysisResult
from src.domain.models.profile import FinancialProfile


def total_assets(profile: FinancialProfile) -> float:
    """Return the sum of asset values."""
    return sum((asset.value for asset in profile.assets), 0.0)


def total_liabilities(profile: FinancialProfile) -> float:
    """Return the sum of outstanding liability amounts."""
    return sum((item.amount for item in profile.liabilities), 0.0)


def total_expenses(profile: FinancialProfile) -> float:
    """Return the sum of monthly expenses."""
    return sum((expense.amount for expense in profile.expenses), 0.0)


def net_cash_flow(profile: FinancialProfile) -> float:
    """Return monthly income minus monthly expenses (signed)."""
    return profile.monthly_income - total_expenses(profile)


def expense_amounts(
    result: AnalysisResult,
    profile: FinancialProfile,
) -> list[tuple[str, float, int]]:
    """Map the percentage breakdown back onto the profile's expenses.

    Args:
        result: Analysis carrying the expense breakdown.
        profile: Profile the analysis was computed for.

    Returns:
        list[tuple[str, float, int]]: ``(category, percentage, amount)``
        tuples in breakdown order, amounts rounded half up to whole units.
    """
    total = total_expenses(profile)
    return [
        (
            entry.category,
            entry.percentage,
            math.floor(entry.percentage / 100 * total + 0.5),
        )
        for entry in result.expense_breakdown
    ]


__all__ = [
    "total_assets",
    "total_liabilities",
    "total_expenses",
    "net_cash_flow",
    "expense_amounts",
]
