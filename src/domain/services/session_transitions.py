"""Pure transitions of the advisor session state machine.

Legal moves::

    INPUT -> ANALYZING -> RESULTS | ERROR
    RESULTS | ERROR -> INPUT   (reset)

Every function returns a new ``AdvisorSession`` and raises
``InvalidTransitionError`` for any other move.
"""

from dataclasses import replace
from uuid import uuid4

from src.domain.errors import InvalidTransitionError
from src.domain.models.analysis import AnalysisResult
from src.domain.models.profile import FinancialProfile
from src.domain.models.session import AdvisorSession, AppState, ResetPolicy


def _require_state(session: AdvisorSession, *allowed: AppState) -> None:
    if session.state not in allowed:
        expected = ", ".join(state.value for state in allowed)
        raise InvalidTransitionError(
            f"Session is {session.state.value}; expected {expected}"
        )


def is_current_request(session: AdvisorSession, request_id: str) -> bool:
    """Return whether ``request_id`` is the outstanding analysis request."""
    return (
        session.state is AppState.ANALYZING
        and session.request_id == request_id
    )


def start_analysis(
    session: AdvisorSession,
    profile: FinancialProfile,
    request_id: str | None = None,
) -> AdvisorSession:
    """Move INPUT -> ANALYZING with ``profile`` as the pending snapshot.

    Args:
        session: Current session, must be in INPUT.
        profile: Submitted profile snapshot.
        request_id: Optional identifier; a fresh one is generated otherwise.

    Returns:
        AdvisorSession: Analyzing session with result and error cleared.
    """
    _require_state(session, AppState.INPUT)
    return replace(
        session,
        state=AppState.ANALYZING,
        pending_profile=profile,
        result=None,
        error_message=None,
        request_id=request_id or uuid4().hex,
    )


def complete_analysis(
    session: AdvisorSession,
    request_id: str,
    result: AnalysisResult,
) -> AdvisorSession:
    """Move ANALYZING -> RESULTS, promoting the pending profile."""
    _require_state(session, AppState.ANALYZING)
    if session.request_id != request_id:
        raise InvalidTransitionError(
            f"Request {request_id} is not the outstanding analysis"
        )
    return replace(
        session,
        state=AppState.RESULTS,
        current_profile=session.pending_profile,
        pending_profile=None,
        result=result,
        error_message=None,
    )


def fail_analysis(
    session: AdvisorSession,
    request_id: str,
    message: str,
) -> AdvisorSession:
    """Move ANALYZING -> ERROR with a single user-facing message."""
    _require_state(session, AppState.ANALYZING)
    if session.request_id != request_id:
        raise InvalidTransitionError(
            f"Request {request_id} is not the outstanding analysis"
        )
    return replace(
        session,
        state=AppState.ERROR,
        result=None,
        error_message=message,
    )


def reset_session(
    session: AdvisorSession,
    policy: ResetPolicy = ResetPolicy.RETAIN,
) -> AdvisorSession:
    """Move RESULTS | ERROR -> INPUT, clearing the result and error.

    Args:
        session: Session in RESULTS or ERROR.
        policy: RETAIN keeps the last-submitted profile for re-editing,
            BLANK starts over from an empty profile.

    Returns:
        AdvisorSession: Fresh input session.
    """
    _require_state(session, AppState.RESULTS, AppState.ERROR)
    retained = None
    if policy is ResetPolicy.RETAIN:
        retained = session.pending_profile or session.current_profile
    return AdvisorSession(state=AppState.INPUT, current_profile=retained)


__all__ = [
    "is_current_request",
    "start_analysis",
    "complete_analysis",
    "fail_analysis",
    "reset_session",
]
