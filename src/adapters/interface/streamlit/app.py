"""Streamlit advisor entry point."""

import asyncio

import streamlit as st

from src.adapters.interface.streamlit.dashboard_view import render_dashboard
from src.adapters.interface.streamlit.form_view import render_form
from src.application.use_cases.financial_form import FinancialFormController
from src.application.use_cases.run_analysis import RunAnalysisUseCase
from src.domain.constants import ANALYSIS_STEPS
from src.domain.errors import FormIncompleteError
from src.domain.models.session import AdvisorSession, AppState
from src.infrastructure.container import build_run_analysis_use_case
from src.infrastructure.session_store import StreamlitSessionStore


FORM_KEY = "financial_form"
CLAIMED_REQUESTS_KEY = "claimed_requests"


def _get_form(session: AdvisorSession) -> FinancialFormController:
    """Return the form controller kept in the Streamlit session."""
    form = st.session_state.get(FORM_KEY)
    if form is None:
        form = FinancialFormController(session.current_profile)
        st.session_state[FORM_KEY] = form
    return form


def _claim_request(request_id: str) -> bool:
    """Return True only the first time a request id is claimed.

    Streamlit reruns the script on every interaction; claiming keeps a
    single analysis call per submission.
    """
    claimed = st.session_state.setdefault(CLAIMED_REQUESTS_KEY, set())
    if request_id in claimed:
        return False
    claimed.add(request_id)
    return True


def _reset(use_case: RunAnalysisUseCase) -> None:
    session = use_case.reset()
    _get_form(session).load(session.current_profile)
    st.rerun()


def _render_input(session: AdvisorSession, use_case: RunAnalysisUseCase) -> None:
    st.markdown(
        "Let our AI advisor analyze your income, assets, and debts to "
        "build a personalized roadmap to wealth."
    )
    form = _get_form(session)
    if not render_form(form):
        return
    try:
        profile = form.submit()
    except FormIncompleteError as exc:
        for issue in exc.issues:
            st.warning(issue)
        return
    use_case.begin(profile)
    st.rerun()


def _render_analyzing(
    session: AdvisorSession,
    use_case: RunAnalysisUseCase,
) -> None:
    with st.status("Analyzing your finances...", expanded=True):
        for message in ANALYSIS_STEPS:
            st.write(message)
    if not _claim_request(session.request_id):
        return
    asyncio.run(use_case.resolve(session))
    st.rerun()


def _render_error(session: AdvisorSession, use_case: RunAnalysisUseCase) -> None:
    st.subheader("Analysis Failed")
    st.error(session.error_message or "An unexpected error occurred.")
    if st.button("Try Again", key="error-reset"):
        _reset(use_case)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="WealthWise AI", layout="wide")
    st.title("WealthWise AI")

    store = StreamlitSessionStore(st.session_state)
    use_case = build_run_analysis_use_case(store=store)
    session = store.load()

    if session.state is AppState.INPUT:
        _render_input(session, use_case)
    elif session.state is AppState.ANALYZING:
        _render_analyzing(session, use_case)
    elif session.state is AppState.RESULTS:
        if render_dashboard(session.result, session.current_profile):
            _reset(use_case)
    else:
        _render_error(session, use_case)

    st.caption(
        "All calculations are estimates based on user input."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
