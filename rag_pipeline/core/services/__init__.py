"""Core services."""

from .agent_service import AgentService
from .conversation_manager import ConversationManager
from .generation import LiveModelGenerator
from .rag_service import RAGService
from .text_splitter import TextSplitter, split_text

__all__ = [
    "AgentService",
    "ConversationManager",
    "LiveModelGenerator",
    "RAGService",
    "TextSplitter",
    "split_text",
]
