"""Domain models for the structured analysis returned by the model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActionItem:
    """A recommended step in the action plan."""

    title: str
    description: str
    priority: str
    impact: str


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected net worth for a given year under both scenarios."""

    year: int
    conservative: float
    aggressive: float


@dataclass(frozen=True)
class ExpenseBreakdownEntry:
    """Share of total expenses for a category (0-100)."""

    category: str
    percentage: float


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis of a financial profile.

    Percentages are expressed on a 0-100 scale and currency values are
    plain numbers.

    Attributes:
        financial_health_score: Overall health score (0-100).
        net_worth: Assets minus liabilities.
        monthly_cash_flow: Income minus expenses, signed.
        debt_to_income_ratio: Share of income used for debt (0-100).
        savings_rate: Share of income saved (0-100).
        summary: Executive summary.
        key_insights: High-level observations (3-5 items).
        action_plan: Prioritized recommendations.
        wealth_projection: Yearly projections for years 1..10.
        expense_breakdown: Expense share per category.
    """

    financial_health_score: float
    net_worth: float
    monthly_cash_flow: float
    debt_to_income_ratio: float
    savings_rate: float
    summary: str
    key_insights: tuple[str, ...]
    action_plan: tuple[ActionItem, ...]
    wealth_projection: tuple[ProjectionPoint, ...]
    expense_breakdown: tuple[ExpenseBreakdownEntry, ...]


__all__ = [
    "ActionItem",
    "ProjectionPoint",
    "ExpenseBreakdownEntry",
    "AnalysisResult",
]
