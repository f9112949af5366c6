"""Answer generation backed by a live language model."""

import logging

from ..domain import AgentProfile, ConversationExchange, render_history
from ..ports.answer_generator_port import AnswerGenerator
from ..ports.llm_port import LLMPort
from .prompts import (
    CONVERSATIONAL_PROMPT,
    GENERAL_KNOWLEDGE_CONTEXT,
    QA_PROMPT,
    SUMMARY_PROMPT,
)

logger = logging.getLogger(__name__)


class LiveModelGenerator(AnswerGenerator):
    """Fills the prompt templates and forwards them to an ``LLMPort``.

    Model output is returned exactly as produced. Provider failures surface
    as ``GenerationError`` from the LLM adapter and are not retried.
    """

    is_fixture = False

    def __init__(self, llm: LLMPort, temperature: float | None = None) -> None:
        """Initialize the generator.

        Args:
            llm: Language model client.
            temperature: Temperature for RAG prompts (None keeps the client default).
        """
        self.llm = llm
        self.temperature = temperature

    @staticmethod
    def build_answer_prompt(question: str, context: str | None) -> str:
        return QA_PROMPT.format(
            context=context if context else GENERAL_KNOWLEDGE_CONTEXT,
            question=question,
        )

    @staticmethod
    def build_conversation_prompt(question: str, context: str, history_text: str) -> str:
        return CONVERSATIONAL_PROMPT.format(
            context=context,
            history=history_text,
            question=question,
        )

    def answer(self, question: str, context: str | None) -> str:
        prompt = self.build_answer_prompt(question, context)
        logger.debug("Generating answer (context=%s chars)", len(context or ""))
        return self.llm.generate(prompt, temperature=self.temperature)

    def converse(self, question: str, context: str, history_text: str) -> str:
        prompt = self.build_conversation_prompt(question, context, history_text)
        return self.llm.generate(prompt, temperature=self.temperature)

    def summarize(self, content: str) -> str:
        return self.llm.generate(SUMMARY_PROMPT.format(content=content), temperature=self.temperature)

    def chat(
        self, profile: AgentProfile, history: list[ConversationExchange], message: str
    ) -> str:
        prompt = profile.render(render_history(history), message)
        return self.llm.generate(prompt, temperature=profile.temperature)
