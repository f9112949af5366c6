"""Domain models for the RAG pipeline."""

from .agent import AgentPreset, AgentProfile
from .conversation import (
    ConversationalAnswer,
    ConversationExchange,
    ConversationSession,
    ConversationState,
    render_history,
)
from .document import Chunk, Document, IndexStats, SearchResult

__all__ = [
    "AgentPreset",
    "AgentProfile",
    "Chunk",
    "ConversationExchange",
    "ConversationSession",
    "ConversationState",
    "ConversationalAnswer",
    "Document",
    "IndexStats",
    "SearchResult",
    "render_history",
]
