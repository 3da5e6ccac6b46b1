"""Completion rules for the four steps of the financial form."""

from src.domain.constants import FORM_STEPS
from src.domain.models.profile import FinancialProfile


STEP_TITLES = {
    1: "Basics & Income",
    2: "Assets",
    3: "Liabilities",
    4: "Monthly Expenses",
}


def _basics_issues(profile: FinancialProfile) -> list[str]:
    issues = []
    if profile.age <= 0:
        issues.append("Enter your age.")
    if profile.monthly_income <= 0:
        issues.append("Enter your monthly income.")
    return issues


def _asset_issues(profile: FinancialProfile) -> list[str]:
    issues = []
    for index, asset in enumerate(profile.assets, start=1):
        if not asset.name.strip():
            issues.append(f"Asset #{index} needs a name.")
        if asset.value < 0:
            issues.append(f"Asset #{index} cannot have a negative value.")
    return issues


def _liability_issues(profile: FinancialProfile) -> list[str]:
    issues = []
    for index, liability in enumerate(profile.liabilities, start=1):
        if not liability.name.strip():
            issues.append(f"Liability #{index} needs a name.")
        if liability.amount < 0:
            issues.append(f"Liability #{index} cannot have a negative balance.")
        if liability.interest_rate < 0:
            issues.append(
                f"Liability #{index} cannot have a negative interest rate."
            )
    return issues


def _expense_issues(profile: FinancialProfile) -> list[str]:
    issues = []
    for index, expense in enumerate(profile.expenses, start=1):
        if not expense.category.strip():
            issues.append(f"Expense #{index} needs a category.")
        if expense.amount < 0:
            issues.append(f"Expense #{index} cannot be negative.")
    return issues


_CHECKS = {
    1: _basics_issues,
    2: _asset_issues,
    3: _liability_issues,
    4: _expense_issues,
}


def step_issues(profile: FinancialProfile, step: int) -> list[str]:
    """Return what prevents ``step`` from being complete.

    Args:
        profile: Profile being edited.
        step: Form step (1-based).

    Returns:
        list[str]: User-facing problems; empty when the step is complete.

    Raises:
        ValueError: If ``step`` is outside 1..FORM_STEPS.
    """
    if step not in _CHECKS:
        raise ValueError(f"Unknown form step: {step}")
    return _CHECKS[step](profile)


def submission_issues(profile: FinancialProfile) -> list[str]:
    """Return the problems of every step, in step order."""
    issues: list[str] = []
    for step in range(1, FORM_STEPS + 1):
        issues.extend(step_issues(profile, step))
    return issues


__all__ = ["STEP_TITLES", "step_issues", "submission_issues"]
