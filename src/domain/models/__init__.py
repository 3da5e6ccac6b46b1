"""Domain models package."""

from .analysis import (
    ActionItem,
    AnalysisResult,
    ExpenseBreakdownEntry,
    ProjectionPoint,
)
from .profile import Asset, Expense, FinancialProfile, Liability
from .session import AdvisorSession, AppState, ResetPolicy

__all__ = [
    "ActionItem",
    "AnalysisResult",
    "ExpenseBreakdownEntry",
    "ProjectionPoint",
    "Asset",
    "Expense",
    "FinancialProfile",
    "Liability",
    "AdvisorSession",
    "AppState",
    "ResetPolicy",
]
