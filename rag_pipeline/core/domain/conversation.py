"""Conversation models shared by conversational RAG and the agent layer."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .document import SearchResult


class ConversationState(Enum):
    """Lifecycle of a conversation session.

    Attributes:
        IDLE: No exchange recorded yet.
        ACTIVE: At least one exchange recorded.
    """

    IDLE = "idle"
    ACTIVE = "active"


@dataclass(frozen=True)
class ConversationExchange:
    """One (question, answer) pair."""

    human: str
    ai: str

    def render(self, ai_label: str = "AI") -> str:
        return f"Human: {self.human}\n{ai_label}: {self.ai}"


def render_history(
    exchanges: Sequence[ConversationExchange],
    window: int | None = None,
    ai_label: str = "AI",
) -> str:
    """Serialize the most recent ``window`` exchanges, newline-joined.

    Args:
        exchanges: Exchanges in conversational order.
        window: Number of trailing exchanges to keep (None keeps all).
        ai_label: Label used for the answer side of each exchange.

    Returns:
        ``Human: ...\\nAI: ...`` blocks, or an empty string.
    """
    if window is not None:
        exchanges = exchanges[-window:] if window > 0 else []
    return "\n".join(exchange.render(ai_label) for exchange in exchanges)


@dataclass
class ConversationSession:
    """Ordered exchanges of a single caller.

    Older exchanges are retained even when they fall outside the context
    window used for query composition.
    """

    session_id: str
    exchanges: list[ConversationExchange] = field(default_factory=list)

    @property
    def state(self) -> ConversationState:
        return ConversationState.ACTIVE if self.exchanges else ConversationState.IDLE

    def record(self, human: str, ai: str) -> ConversationExchange:
        exchange = ConversationExchange(human=human, ai=ai)
        self.exchanges.append(exchange)
        return exchange

    def recent(self, window: int | None) -> list[ConversationExchange]:
        if window is None:
            return list(self.exchanges)
        return self.exchanges[-window:] if window > 0 else []


@dataclass
class ConversationalAnswer:
    """Result of one conversational RAG turn.

    Attributes:
        answer: Raw model output.
        sources: Retrieved chunks, in ranked order.
        contextual_query: The query actually used for retrieval.
    """

    answer: str
    sources: list["SearchResult"]
    contextual_query: str
