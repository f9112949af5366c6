"""Unit tests for conversation sessions and the session manager."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from rag_pipeline.core.domain import (
    ConversationExchange,
    ConversationSession,
    ConversationState,
    render_history,
)
from rag_pipeline.core.services import ConversationManager

pytestmark = pytest.mark.unit


class TestConversationSession:
    def test_new_session_is_idle(self):
        assert ConversationSession("s").state is ConversationState.IDLE

    def test_first_exchange_activates_session(self):
        session = ConversationSession("s")
        session.record("hi", "hello")

        assert session.state is ConversationState.ACTIVE
        assert session.exchanges == [ConversationExchange("hi", "hello")]

    def test_recent_window(self):
        session = ConversationSession("s")
        for i in range(5):
            session.record(f"q{i}", f"a{i}")

        assert [e.human for e in session.recent(3)] == ["q2", "q3", "q4"]
        assert session.recent(0) == []
        assert len(session.recent(None)) == 5


class TestRenderHistory:
    def test_format(self):
        exchanges = [ConversationExchange("q1", "a1"), ConversationExchange("q2", "a2")]
        assert render_history(exchanges) == "Human: q1\nAI: a1\nHuman: q2\nAI: a2"

    def test_window_and_empty(self):
        exchanges = [ConversationExchange("q1", "a1"), ConversationExchange("q2", "a2")]

        assert render_history(exchanges, window=1) == "Human: q2\nAI: a2"
        assert render_history([]) == ""


class TestConversationManager:
    def test_history_of_unknown_session_is_empty(self):
        manager = ConversationManager()

        assert manager.history("missing") == []

    def test_record_and_clear(self):
        manager = ConversationManager()
        manager.record("s", "q", "a")

        assert manager.clear("s") is True
        assert manager.history("s") == []
        assert manager.clear("s") is False

    def test_history_is_a_copy(self):
        manager = ConversationManager()
        manager.record("s", "q1", "a1")
        history = manager.history("s")
        manager.record("s", "q2", "a2")

        assert len(history) == 1

    def test_sessions_are_isolated(self):
        manager = ConversationManager()
        manager.record("a", "qa", "aa")
        manager.record("b", "qb", "ab")

        assert [e.human for e in manager.history("a")] == ["qa"]
        assert [e.human for e in manager.history("b")] == ["qb"]

    def test_concurrent_records_are_all_kept(self):
        manager = ConversationManager()
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda i: manager.record("s", f"q{i}", f"a{i}"), range(200)))

        assert len(manager.history("s")) == 200
