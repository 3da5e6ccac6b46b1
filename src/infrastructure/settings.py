"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

from src.domain.models.session import ResetPolicy
from src.infrastructure.logging.logger import get_app_logger


DEFAULT_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class AdvisorSettings:
    """Settings for the analysis service and the advisor flow.

    Attributes:
        api_key: Secret key for the generative-AI service.
        model: Model name used for the analysis.
        temperature: Sampling temperature of the analysis request.
        min_dwell_seconds: Minimum time the analyzing screen stays visible.
        request_timeout_seconds: Transport timeout of the analysis request.
        reset_policy: Whether a reset keeps the last-submitted profile.
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = 0.1
    min_dwell_seconds: float = 3.0
    request_timeout_seconds: float = 120.0
    reset_policy: ResetPolicy = ResetPolicy.RETAIN

    @classmethod
    def from_env(cls) -> "AdvisorSettings":
        """Build settings from environment variables.

        Returns:
            AdvisorSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        api_key = (
            os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or ""
        ).strip()
        model = os.getenv("ADVISOR_MODEL", DEFAULT_MODEL).strip()
        return cls(
            api_key=api_key or None,
            model=model or DEFAULT_MODEL,
            temperature=cls._float_env(
                "ADVISOR_TEMPERATURE", cls.temperature, logger
            ),
            min_dwell_seconds=cls._float_env(
                "ADVISOR_MIN_DWELL_SECONDS", cls.min_dwell_seconds, logger
            ),
            request_timeout_seconds=cls._float_env(
                "ADVISOR_REQUEST_TIMEOUT_SECONDS",
                cls.request_timeout_seconds,
                logger,
            ),
            reset_policy=cls._reset_policy_env(logger),
        )

    @staticmethod
    def _float_env(name: str, default: float, logger) -> float:
        """Read a non-negative float, falling back to ``default``.

        Args:
            name: Environment variable name.
            default: Value used when missing or invalid.
            logger: Logger used for warnings.

        Returns:
            float: Parsed value.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value < 0:
            logger.warning(f"Negative {name}={raw!r}; using {default}")
            return default
        return value

    @staticmethod
    def _reset_policy_env(logger) -> ResetPolicy:
        raw = os.getenv("ADVISOR_RESET_POLICY", ResetPolicy.RETAIN.value)
        try:
            return ResetPolicy(raw.strip().lower())
        except ValueError:
            logger.warning(
                f"Unsupported ADVISOR_RESET_POLICY={raw!r}. "
                "Expected retain or blank."
            )
            return ResetPolicy.RETAIN


__all__ = ["AdvisorSettings", "DEFAULT_MODEL"]
