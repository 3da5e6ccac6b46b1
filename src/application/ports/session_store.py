"""Port holding the current advisor session value."""

from typing import Protocol

from src.domain.models.session import AdvisorSession


class SessionStorePort(Protocol):
    """Port exposing load/save of the single session value."""

    def load(self) -> AdvisorSession:
        """Return the current session (a fresh INPUT session if none)."""

    def save(self, session: AdvisorSession) -> None:
        """Replace the current session."""


__all__ = ["SessionStorePort"]
