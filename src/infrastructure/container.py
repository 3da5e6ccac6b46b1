"""Composition root for wiring infrastructure adapters."""

from src.application.ports.session_store import SessionStorePort
from src.application.ports.text_generation import TextGenerationPort
from src.application.use_cases.analyze_profile import AnalyzeProfileUseCase
from src.application.use_cases.run_analysis import RunAnalysisUseCase
from src.infrastructure.gemini_client import GeminiTextGenerator
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from src.infrastructure.session_store import InMemorySessionStore
from src.infrastructure.settings import AdvisorSettings


def build_text_generator(
    settings: AdvisorSettings | None = None,
) -> TextGenerationPort:
    """Return the configured text-generation adapter."""
    resolved = settings or AdvisorSettings.from_env()
    return GeminiTextGenerator(
        api_key=resolved.api_key,
        model=resolved.model,
        temperature=resolved.temperature,
        timeout_seconds=resolved.request_timeout_seconds,
    )


def build_analyze_profile_use_case(
    generator: TextGenerationPort | None = None,
    settings: AdvisorSettings | None = None,
) -> AnalyzeProfileUseCase:
    """Return the analysis client use case."""
    resolved_generator = generator or build_text_generator(settings)
    return AnalyzeProfileUseCase(resolved_generator, logger=get_app_logger())


def build_run_analysis_use_case(
    store: SessionStorePort | None = None,
    generator: TextGenerationPort | None = None,
    settings: AdvisorSettings | None = None,
) -> RunAnalysisUseCase:
    """Return the use case driving the advisor session."""
    resolved = settings or AdvisorSettings.from_env()
    return RunAnalysisUseCase(
        analyzer=build_analyze_profile_use_case(generator, resolved),
        store=store or InMemorySessionStore(),
        min_dwell_seconds=resolved.min_dwell_seconds,
        reset_policy=resolved.reset_policy,
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
    )


__all__ = [
    "build_text_generator",
    "build_analyze_profile_use_case",
    "build_run_analysis_use_case",
]
