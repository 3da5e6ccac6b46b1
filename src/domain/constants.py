"""Domain constants for the financial advisor."""

ASSET_TYPES = ("cash", "investment", "property", "crypto", "other")

EXPENSE_CATEGORIES = (
    "Housing",
    "Food",
    "Transport",
    "Utilities",
    "Insurance",
    "Healthcare",
    "Savings",
    "Debt Repayment",
    "Entertainment",
    "Personal Care",
    "Other",
)

DEFAULT_EXPENSE_CATEGORY = "Housing"

ACTION_PRIORITIES = ("High", "Medium", "Low")

PROFILE_COLLECTIONS = ("assets", "liabilities", "expenses")

FORM_STEPS = 4

# Scoring and projection rules handed to the model.
LIQUIDITY_WEIGHT = 30
DEBT_WEIGHT = 40
SAVINGS_WEIGHT = 30
PROJECTION_YEARS = 10
CONSERVATIVE_RETURN = 4
AGGRESSIVE_RETURN = 9
HIGH_INTEREST_THRESHOLD = 7

MIN_KEY_INSIGHTS = 3
MAX_KEY_INSIGHTS = 5

ANALYSIS_ERROR_MESSAGE = (
    "Failed to generate analysis. Please check your API Key and try again."
)

ANALYSIS_STEPS = (
    "Securely processing financial data...",
    "Calculating net worth and cash flow...",
    "Analyzing debt structures and interest rates...",
    "Projecting future wealth scenarios...",
    "Finalizing personalized strategy...",
)


__all__ = [
    "ASSET_TYPES",
    "EXPENSE_CATEGORIES",
    "DEFAULT_EXPENSE_CATEGORY",
    "ACTION_PRIORITIES",
    "PROFILE_COLLECTIONS",
    "FORM_STEPS",
    "LIQUIDITY_WEIGHT",
    "DEBT_WEIGHT",
    "SAVINGS_WEIGHT",
    "PROJECTION_YEARS",
    "CONSERVATIVE_RETURN",
    "AGGRESSIVE_RETURN",
    "HIGH_INTEREST_THRESHOLD",
    "MIN_KEY_INSIGHTS",
    "MAX_KEY_INSIGHTS",
    "ANALYSIS_ERROR_MESSAGE",
    "ANALYSIS_STEPS",
]
