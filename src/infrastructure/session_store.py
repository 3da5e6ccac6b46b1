"""Session store adapters holding the current advisor session."""

from collections.abc import MutableMapping

from src.domain.models.session import AdvisorSession


SESSION_KEY = "advisor_session"


class InMemorySessionStore:
    """SessionStorePort implementation keeping the session in memory."""

    def __init__(self, session: AdvisorSession | None = None) -> None:
        self._session = session or AdvisorSession()

    def load(self) -> AdvisorSession:
        return self._session

    def save(self, session: AdvisorSession) -> None:
        self._session = session


class StreamlitSessionStore:
    """SessionStorePort implementation backed by ``st.session_state``.

    Any mutable mapping works, which keeps the adapter testable without a
    running Streamlit server.
    """

    def __init__(
        self,
        state: MutableMapping,
        key: str = SESSION_KEY,
    ) -> None:
        self._state = state
        self._key = key

    def load(self) -> AdvisorSession:
        session = self._state.get(self._key)
        if session is None:
            session = AdvisorSession()
            self._state[self._key] = session
        return session

    def save(self, session: AdvisorSession) -> None:
        self._state[self._key] = session


__all__ = ["InMemorySessionStore", "StreamlitSessionStore", "SESSION_KEY"]
