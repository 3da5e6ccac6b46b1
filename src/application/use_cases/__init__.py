"""Application use cases package."""

from .analysis_prompt import ANALYSIS_RESPONSE_SCHEMA, build_analysis_prompt
from .analyze_profile import AnalyzeProfileUseCase
from .financial_form import FinancialFormController
from .run_analysis import DEFAULT_MIN_DWELL_SECONDS, RunAnalysisUseCase

__all__ = [
    "ANALYSIS_RESPONSE_SCHEMA",
    "build_analysis_prompt",
    "AnalyzeProfileUseCase",
    "FinancialFormController",
    "DEFAULT_MIN_DWELL_SECONDS",
    "RunAnalysisUseCase",
]
