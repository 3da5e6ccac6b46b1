"""Tests for the RunAnalysisUseCase."""

import asyncio
import time
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.run_analysis import RunAnalysisUseCase
from src.domain.constants import ANALYSIS_ERROR_MESSAGE
from src.domain.errors import (
    EmptyResponse,
    InvalidTransitionError,
    RequestFailure,
    SchemaViolation,
)
from src.domain.models.session import AdvisorSession, AppState, ResetPolicy
from src.domain.services.session_transitions import reset_session
from src.domain.services.validation import decode_analysis_result
from src.infrastructure.session_store import InMemorySessionStore


class _FakeClock:
    """Monotonic clock advanced only by the fake sleep."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class _FakeAnalyzer:
    """Analyzer taking ``latency`` fake seconds then returning or raising."""

    def __init__(self, clock: _FakeClock, latency: float = 0.0,
                 result=None, error: Exception | None = None) -> None:
        self.clock = clock
        self.latency = latency
        self.result = result
        self.error = error
        self.profiles: list = []

    async def execute(self, profile):
        self.profiles.append(profile)
        if self.latency:
            await self.clock.sleep(self.latency)
        if self.error is not None:
            raise self.error
        return self.result


def _build(analyzer, clock, store=None, min_dwell=3.0,
           policy=ResetPolicy.RETAIN):
    return RunAnalysisUseCase(
        analyzer=analyzer,
        store=store or InMemorySessionStore(),
        min_dwell_seconds=min_dwell,
        reset_policy=policy,
        logger=MagicMock(),
        usage_logger=MagicMock(),
        clock=clock,
        sleep=clock.sleep,
    )


@pytest.fixture
def result(analysis_payload):
    return decode_analysis_result(analysis_payload)


def test_single_submission_invokes_analyzer_once(sample_profile, result):
    clock = _FakeClock()
    analyzer = _FakeAnalyzer(clock, result=result)
    use_case = _build(analyzer, clock)

    session = asyncio.run(use_case.execute(sample_profile))

    assert analyzer.profiles == [sample_profile]
    assert session.state is AppState.RESULTS
    assert session.result is result
    assert session.current_profile is sample_profile


def test_instant_reply_waits_for_dwell_floor(sample_profile, result):
    clock = _FakeClock()
    use_case = _build(_FakeAnalyzer(clock, result=result), clock, min_dwell=3)
    started = clock.now

    asyncio.run(use_case.execute(sample_profile))

    assert clock.now - started == pytest.approx(3.0)


def test_slow_reply_is_not_cut_short_by_dwell(sample_profile, result):
    clock = _FakeClock()
    analyzer = _FakeAnalyzer(clock, latency=7.5, result=result)
    use_case = _build(analyzer, clock, min_dwell=3)
    started = clock.now

    session = asyncio.run(use_case.execute(sample_profile))

    assert clock.now - started >= 7.5
    assert session.state is AppState.RESULTS


def test_dwell_floor_holds_with_real_clock(sample_profile, result):
    """A 0ms stub still keeps the session analyzing for the floor."""

    class _InstantAnalyzer:
        async def execute(self, profile):
            return result

    use_case = RunAnalysisUseCase(
        analyzer=_InstantAnalyzer(),
        store=InMemorySessionStore(),
        min_dwell_seconds=0.05,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )
    started = time.monotonic()

    session = asyncio.run(use_case.execute(sample_profile))

    assert time.monotonic() - started >= 0.05
    assert session.state is AppState.RESULTS


@pytest.mark.parametrize(
    "error",
    [
        RequestFailure("offline"),
        EmptyResponse("empty"),
        SchemaViolation("missing wealthProjection"),
        KeyError("unexpected"),
    ],
)
def test_any_failure_routes_to_error(sample_profile, error):
    clock = _FakeClock()
    use_case = _build(_FakeAnalyzer(clock, error=error), clock)
    started = clock.now

    session = asyncio.run(use_case.execute(sample_profile))

    assert session.state is AppState.ERROR
    assert session.result is None
    assert session.error_message == ANALYSIS_ERROR_MESSAGE
    assert clock.now - started == pytest.approx(3.0)


def test_failure_detail_is_logged_not_shown(sample_profile):
    clock = _FakeClock()
    use_case = _build(
        _FakeAnalyzer(clock, error=SchemaViolation("no wealthProjection")),
        clock,
    )

    session = asyncio.run(use_case.execute(sample_profile))

    logged = use_case._logger.error.call_args.args[0]
    assert "no wealthProjection" in logged
    assert "wealthProjection" not in session.error_message


def test_begin_clears_previous_error(sample_profile):
    clock = _FakeClock()
    store = InMemorySessionStore()
    use_case = _build(_FakeAnalyzer(clock, error=RequestFailure("x")), clock,
                      store=store)
    asyncio.run(use_case.execute(sample_profile))
    use_case.reset()

    session = use_case.begin(sample_profile)

    assert session.state is AppState.ANALYZING
    assert session.error_message is None
    assert store.load() is session


def test_begin_is_rejected_while_analyzing(sample_profile):
    clock = _FakeClock()
    use_case = _build(_FakeAnalyzer(clock), clock)
    use_case.begin(sample_profile)

    with pytest.raises(InvalidTransitionError):
        use_case.begin(sample_profile)


def test_stale_reply_is_not_applied(sample_profile, result):
    """A reply arriving after the flow moved on leaves the store untouched."""
    clock = _FakeClock()
    store = InMemorySessionStore()
    use_case = _build(_FakeAnalyzer(clock, result=result), clock, store=store)
    abandoned = use_case.begin(sample_profile)

    # The user gave up and the session was replaced meanwhile.
    replacement = AdvisorSession()
    store.save(replacement)

    session = asyncio.run(use_case.resolve(abandoned))

    assert session is replacement
    assert store.load() is replacement
    use_case._logger.warning.assert_called_once()


def test_reply_for_superseded_request_is_discarded(sample_profile, result):
    clock = _FakeClock()
    store = InMemorySessionStore()
    use_case = _build(_FakeAnalyzer(clock, result=result), clock, store=store)
    first = use_case.begin(sample_profile)
    store.save(reset_session(AdvisorSession(
        state=AppState.ERROR,
        pending_profile=sample_profile,
        request_id=first.request_id,
    )))
    second = use_case.begin(sample_profile)

    stale = asyncio.run(use_case.resolve(first))

    assert stale is second
    assert store.load().state is AppState.ANALYZING


@pytest.mark.parametrize("error", [None, RequestFailure("offline")])
def test_reset_returns_to_input_without_stale_data(
    sample_profile,
    result,
    error,
):
    clock = _FakeClock()
    use_case = _build(
        _FakeAnalyzer(clock, result=result, error=error),
        clock,
    )
    asyncio.run(use_case.execute(sample_profile))

    session = use_case.reset()

    assert session.state is AppState.INPUT
    assert session.result is None
    assert session.error_message is None
    assert session.current_profile is sample_profile


def test_blank_reset_policy_discards_profile(sample_profile, result):
    clock = _FakeClock()
    use_case = _build(
        _FakeAnalyzer(clock, result=result),
        clock,
        policy=ResetPolicy.BLANK,
    )
    asyncio.run(use_case.execute(sample_profile))

    assert use_case.reset() == AdvisorSession()


def test_usage_events_are_recorded(sample_profile, result):
    clock = _FakeClock()
    use_case = _build(_FakeAnalyzer(clock, result=result), clock)

    asyncio.run(use_case.execute(sample_profile))

    messages = [
        call.args[0] for call in use_case._usage_logger.info.call_args_list
    ]
    assert messages[0].startswith("Analysis submitted")
    assert messages[1].startswith("Analysis completed")
