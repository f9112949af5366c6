"""Answer Generator Port Interface."""

from abc import ABC, abstractmethod

from ..domain import AgentProfile, ConversationExchange


class AnswerGenerator(ABC):
    """Produces answer text for the RAG and agent operations.

    Two implementations exist: one backed by a live language model and one
    returning canned fixture text. The composition root picks one.
    """

    is_fixture: bool = False

    @abstractmethod
    def answer(self, question: str, context: str | None) -> str:
        """Answer a question from context, or from general knowledge if None."""
        ...

    @abstractmethod
    def converse(self, question: str, context: str, history_text: str) -> str: ...

    @abstractmethod
    def summarize(self, content: str) -> str: ...

    @abstractmethod
    def chat(
        self, profile: AgentProfile, history: list[ConversationExchange], message: str
    ) -> str:
        """Reply to ``message`` in the voice of an agent profile."""
        ...
