"""Domain model for the advisor session state machine."""

from dataclasses import dataclass
from enum import Enum

from src.domain.models.analysis import AnalysisResult
from src.domain.models.profile import FinancialProfile


class AppState(str, Enum):
    """Screens of the advisor flow."""

    INPUT = "INPUT"
    ANALYZING = "ANALYZING"
    RESULTS = "RESULTS"
    ERROR = "ERROR"


class ResetPolicy(str, Enum):
    """What happens to the submitted profile when the session is reset."""

    RETAIN = "retain"
    BLANK = "blank"


@dataclass(frozen=True)
class AdvisorSession:
    """Single explicit value describing where the advisor flow stands.

    Attributes:
        state: Current screen.
        pending_profile: Snapshot submitted for the in-flight analysis.
        current_profile: Profile the dashboard (or the form) renders against.
        result: Analysis shown in the results screen.
        error_message: User-facing message shown in the error screen.
        request_id: Identifier of the outstanding (or last) analysis request.
    """

    state: AppState = AppState.INPUT
    pending_profile: FinancialProfile | None = None
    current_profile: FinancialProfile | None = None
    result: AnalysisResult | None = None
    error_message: str | None = None
    request_id: str | None = None


__all__ = ["AppState", "ResetPolicy", "AdvisorSession"]
