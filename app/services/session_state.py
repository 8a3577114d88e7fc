from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from app.schemas.match import MatchResponse


class AnalysisState(str, Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    ANALYZING = "analyzing"
    COMPLETE = "complete"
    FAILED = "failed"


class SessionEvent(str, Enum):
    FILE_SELECTED = "file_selected"
    ANALYSIS_REQUESTED = "analysis_requested"
    ANALYSIS_SUCCEEDED = "analysis_succeeded"
    ANALYSIS_FAILED = "analysis_failed"
    RESET = "reset"


_TRANSITIONS: dict[tuple[AnalysisState, SessionEvent], AnalysisState] = {
    (AnalysisState.IDLE, SessionEvent.FILE_SELECTED): AnalysisState.FILE_SELECTED,
    (AnalysisState.FILE_SELECTED, SessionEvent.FILE_SELECTED): AnalysisState.FILE_SELECTED,
    (AnalysisState.FILE_SELECTED, SessionEvent.ANALYSIS_REQUESTED): AnalysisState.ANALYZING,
    (AnalysisState.ANALYZING, SessionEvent.ANALYSIS_SUCCEEDED): AnalysisState.COMPLETE,
    (AnalysisState.ANALYZING, SessionEvent.ANALYSIS_FAILED): AnalysisState.FAILED,
    (AnalysisState.COMPLETE, SessionEvent.FILE_SELECTED): AnalysisState.FILE_SELECTED,
    (AnalysisState.FAILED, SessionEvent.FILE_SELECTED): AnalysisState.FILE_SELECTED,
    (AnalysisState.FAILED, SessionEvent.ANALYSIS_REQUESTED): AnalysisState.ANALYZING,
}


class InvalidSessionTransition(RuntimeError):
    def __init__(self, state: AnalysisState, event: SessionEvent):
        super().__init__(f"Cannot apply '{event.value}' while session is '{state.value}'.")
        self.state = state
        self.event = event


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AnalysisSession:
    session_id: str
    state: AnalysisState = AnalysisState.IDLE
    result: MatchResponse | None = None
    error: str | None = None
    updated_at: datetime = field(default_factory=_utc_now)

    def dispatch(
        self,
        event: SessionEvent,
        *,
        result: MatchResponse | None = None,
        error: str | None = None,
    ) -> AnalysisState:
        if event is SessionEvent.RESET:
            next_state = AnalysisState.IDLE
        else:
            next_state = _TRANSITIONS.get((self.state, event))
            if next_state is None:
                raise InvalidSessionTransition(self.state, event)

        if next_state in {AnalysisState.IDLE, AnalysisState.FILE_SELECTED, AnalysisState.ANALYZING}:
            self.result = None
            self.error = None
        if next_state is AnalysisState.COMPLETE:
            self.result = result
        if next_state is AnalysisState.FAILED:
            self.error = error or "Analysis failed."

        self.state = next_state
        self.updated_at = _utc_now()
        return next_state


class SessionStore:
    """Process-local sessions; nothing is persisted."""

    def __init__(self, max_sessions: int = 1000):
        self._sessions: dict[str, AnalysisSession] = {}
        self._lock = threading.Lock()
        self._max_sessions = max_sessions

    def get(self, session_id: str) -> AnalysisSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def get_or_create(self, session_id: str) -> AnalysisSession:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                if len(self._sessions) >= self._max_sessions:
                    oldest = min(self._sessions.values(), key=lambda item: item.updated_at)
                    del self._sessions[oldest.session_id]
                session = AnalysisSession(session_id=session_id)
                self._sessions[session_id] = session
            return session

    def dispatch(self, session_id: str, event: SessionEvent, **kwargs) -> AnalysisSession:
        session = self.get_or_create(session_id)
        with self._lock:
            session.dispatch(event, **kwargs)
        return session

    def discard(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()


sessions = SessionStore()
