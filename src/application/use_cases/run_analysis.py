"""Use case driving the advisor session through an analysis.

The analysis call and the minimum-dwell wait run concurrently and are
joined with ``asyncio.gather``: the session leaves ANALYZING only once the
call has settled and the dwell floor measured on a monotonic clock has
elapsed, i.e. after ``max(call latency, floor)``.
"""

import asyncio
import time
from typing import Awaitable, Callable

from src.application.ports.session_store import SessionStorePort
from src.application.use_cases.analyze_profile import AnalyzeProfileUseCase
from src.domain.constants import ANALYSIS_ERROR_MESSAGE
from src.domain.models.analysis import AnalysisResult
from src.domain.models.profile import FinancialProfile
from src.domain.models.session import AdvisorSession, ResetPolicy
from src.domain.services.session_transitions import (
    complete_analysis,
    fail_analysis,
    is_current_request,
    reset_session,
    start_analysis,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


DEFAULT_MIN_DWELL_SECONDS = 3.0


class RunAnalysisUseCase:
    """Sequence form submission, analysis and result/error display."""

    def __init__(
        self,
        analyzer: AnalyzeProfileUseCase,
        store: SessionStorePort,
        min_dwell_seconds: float = DEFAULT_MIN_DWELL_SECONDS,
        reset_policy: ResetPolicy = ResetPolicy.RETAIN,
        logger=None,
        usage_logger=None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the use case.

        Args:
            analyzer: Analysis client invoked once per submission.
            store: Port holding the current session value.
            min_dwell_seconds: Minimum time spent in ANALYZING.
            reset_policy: Whether a reset keeps the submitted profile.
            logger: Optional logger for diagnostics.
            usage_logger: Optional logger for flow events.
            clock: Monotonic clock in seconds.
            sleep: Coroutine function used to wait for the dwell deadline.
        """
        self._analyzer = analyzer
        self._store = store
        self._min_dwell_seconds = max(0.0, min_dwell_seconds)
        self._reset_policy = reset_policy
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock
        self._sleep = sleep

    def begin(self, profile: FinancialProfile) -> AdvisorSession:
        """Store ``profile`` as pending and move the session to ANALYZING.

        Raises:
            InvalidTransitionError: If the session is not in INPUT.
        """
        session = start_analysis(self._store.load(), profile)
        self._store.save(session)
        self._usage_logger.info(
            f"Analysis submitted: request={session.request_id}, "
            f"assets={len(profile.assets)}, "
            f"liabilities={len(profile.liabilities)}, "
            f"expenses={len(profile.expenses)}"
        )
        return session

    async def resolve(self, session: AdvisorSession) -> AdvisorSession:
        """Run the analysis of a session returned by ``begin``.

        The outcome is only applied when ``session`` is still the
        outstanding request; otherwise the stored session is returned
        unchanged.

        Args:
            session: ANALYZING session holding the pending profile.

        Returns:
            AdvisorSession: The session stored after the analysis settled.
        """
        request_id = session.request_id
        started = self._clock()
        deadline = started + self._min_dwell_seconds

        (result, failure), _ = await asyncio.gather(
            self._settle(session.pending_profile),
            self._wait_until(deadline),
        )
        elapsed = self._clock() - started

        current = self._store.load()
        if not is_current_request(current, request_id):
            self._logger.warning(
                f"Discarding analysis reply for stale request {request_id}"
            )
            return current

        if failure is None:
            updated = complete_analysis(current, request_id, result)
            self._usage_logger.info(
                f"Analysis completed: request={request_id}, "
                f"elapsed={elapsed:.2f}s"
            )
        else:
            updated = fail_analysis(current, request_id, ANALYSIS_ERROR_MESSAGE)
            self._usage_logger.info(
                f"Analysis failed: request={request_id}, "
                f"elapsed={elapsed:.2f}s, kind={type(failure).__name__}"
            )
        self._store.save(updated)
        return updated

    async def execute(self, profile: FinancialProfile) -> AdvisorSession:
        """Submit ``profile`` and wait for the results or error screen."""
        return await self.resolve(self.begin(profile))

    def reset(self) -> AdvisorSession:
        """Return to INPUT from RESULTS or ERROR, clearing stale data."""
        session = reset_session(self._store.load(), self._reset_policy)
        self._store.save(session)
        self._usage_logger.info(
            f"Session reset with policy={self._reset_policy.value}"
        )
        return session

    async def _settle(
        self,
        profile: FinancialProfile,
    ) -> tuple[AnalysisResult | None, Exception | None]:
        try:
            return await self._analyzer.execute(profile), None
        except Exception as exc:
            self._logger.error(f"Analysis failed: {type(exc).__name__}: {exc}")
            return None, exc

    async def _wait_until(self, deadline: float) -> None:
        remaining = deadline - self._clock()
        while remaining > 0:
            await self._sleep(remaining)
            remaining = deadline - self._clock()


__all__ = ["RunAnalysisUseCase", "DEFAULT_MIN_DWELL_SECONDS"]
