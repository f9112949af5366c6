"""Per-caller conversation sessions."""

import logging
import threading

from ..domain import ConversationExchange, ConversationSession

logger = logging.getLogger(__name__)


class ConversationManager:
    """Thread-safe map of session id to ``ConversationSession``.

    Sessions are created on first access. Callers receive copies of the
    exchange list so a concurrent ``record`` never changes a history that is
    already being used to build a prompt.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, ConversationSession] = {}
        self._lock = threading.Lock()

    def _get_or_create(self, session_id: str) -> ConversationSession:
        session = self._sessions.get(session_id)
        if session is None:
            session = ConversationSession(session_id=session_id)
            self._sessions[session_id] = session
            logger.debug("Created conversation session %s", session_id)
        return session

    def history(self, session_id: str, window: int | None = None) -> list[ConversationExchange]:
        """Return the last ``window`` exchanges of a session (all when None)."""
        with self._lock:
            session = self._sessions.get(session_id)
            return session.recent(window) if session else []

    def record(self, session_id: str, human: str, ai: str) -> ConversationExchange:
        with self._lock:
            return self._get_or_create(session_id).record(human, ai)

    def clear(self, session_id: str) -> bool:
        """Drop a session. Returns True if it existed."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

