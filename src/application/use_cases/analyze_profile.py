"""Use case turning a profile snapshot into a validated analysis."""

from src.application.ports.text_generation import TextGenerationPort
from src.application.use_cases.analysis_prompt import (
    ANALYSIS_RESPONSE_SCHEMA,
    build_analysis_prompt,
)
from src.domain.errors import EmptyResponse, RequestFailure, SchemaViolation
from src.domain.models.analysis import AnalysisResult
from src.domain.models.profile import FinancialProfile
from src.domain.services.validation import parse_analysis_text
from src.infrastructure.logging.logger import get_app_logger


class AnalyzeProfileUseCase:
    """Send a profile to the generative model and decode its reply.

    Each call issues exactly one request: there is no caching, retry or
    deduplication of identical profiles.
    """

    def __init__(self, generator: TextGenerationPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            generator: Port producing JSON text from a prompt.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._generator = generator
        self._logger = logger or get_app_logger()

    async def execute(self, profile: FinancialProfile) -> AnalysisResult:
        """Return the analysis of ``profile``.

        Args:
            profile: Submitted profile snapshot; not validated here.

        Returns:
            AnalysisResult: Fully validated result.

        Raises:
            RequestFailure: If the service call raised.
            EmptyResponse: If the service returned no content.
            SchemaViolation: If the reply is not JSON or misses fields.
        """
        prompt = build_analysis_prompt(profile)
        try:
            text = await self._generator.generate_json(
                prompt,
                ANALYSIS_RESPONSE_SCHEMA,
            )
        except Exception as exc:
            self._logger.error(
                f"Analysis request failed: {type(exc).__name__}: {exc}"
            )
            raise RequestFailure(
                "Could not reach the analysis service."
            ) from exc

        if text is None or not text.strip():
            self._logger.error("Analysis service returned an empty response")
            raise EmptyResponse("Empty response from advisor")

        try:
            result = parse_analysis_text(text)
        except SchemaViolation as exc:
            self._logger.error(
                f"Analysis reply rejected: {exc.message}; "
                f"reply starts with {text[:200]!r}"
            )
            raise

        self._logger.info(
            f"Analysis decoded: score={result.financial_health_score}, "
            f"actions={len(result.action_plan)}"
        )
        return result


__all__ = ["AnalyzeProfileUseCase"]
