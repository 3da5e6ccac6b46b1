"""Domain services package."""

from .normalization import (
    normalize_asset_type,
    normalize_category,
    normalize_priority,
)
from .profile_totals import (
    expense_amounts,
    net_cash_flow,
    total_assets,
    total_expenses,
    total_liabilities,
)
from .session_transitions import (
    complete_analysis,
    fail_analysis,
    is_current_request,
    reset_session,
    start_analysis,
)
from .validation import decode_analysis_result, parse_analysis_text

__all__ = [
    "normalize_asset_type",
    "normalize_category",
    "normalize_priority",
    "expense_amounts",
    "net_cash_flow",
    "total_assets",
    "total_expenses",
    "total_liabilities",
    "complete_analysis",
    "fail_analysis",
    "is_current_request",
    "reset_session",
    "start_analysis",
    "decode_analysis_result",
    "parse_analysis_text",
]
