"""Domain policies package."""

from .form_steps import STEP_TITLES, step_issues, submission_issues

__all__ = ["STEP_TITLES", "step_issues", "submission_issues"]
