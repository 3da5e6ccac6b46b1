"""Domain package for business rules and core models."""

from .constants import ANALYSIS_ERROR_MESSAGE, EXPENSE_CATEGORIES
from .errors import (
    AnalysisFailure,
    EmptyResponse,
    FormIncompleteError,
    InvalidTransitionError,
    RequestFailure,
    SchemaViolation,
)
from .models import (
    ActionItem,
    AdvisorSession,
    AnalysisResult,
    AppState,
    Asset,
    Expense,
    ExpenseBreakdownEntry,
    FinancialProfile,
    Liability,
    ProjectionPoint,
    ResetPolicy,
)

__all__ = [
    "ANALYSIS_ERROR_MESSAGE",
    "EXPENSE_CATEGORIES",
    "AnalysisFailure",
    "EmptyResponse",
    "FormIncompleteError",
    "InvalidTransitionError",
    "RequestFailure",
    "SchemaViolation",
    "ActionItem",
    "AdvisorSession",
    "AnalysisResult",
    "AppState",
    "Asset",
    "Expense",
    "ExpenseBreakdownEntry",
    "FinancialProfile",
    "Liability",
    "ProjectionPoint",
    "ResetPolicy",
]
