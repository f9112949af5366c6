"""Canned-response generator used in fixture (demo) mode."""

from ....core.domain import AgentProfile, ConversationExchange
from ....core.ports.answer_generator_port import AnswerGenerator
from .demo_content import (
    DEFAULT_AGENT_REPLY_TEMPLATE,
    DEFAULT_ANSWER_TEMPLATE,
    DEMO_AGENT_REPLIES,
    DEMO_ANSWERS,
    DEMO_SUMMARY,
)


def _match_keyword(text: str, responses: dict[str, str]) -> str | None:
    lowered = text.lower()
    for keyword, response in responses.items():
        if keyword in lowered:
            return response
    return None


class FixtureModelGenerator(AnswerGenerator):
    """Returns pre-written text keyed on keywords in the input.

    Context and history are ignored; no external call is ever made.
    """

    is_fixture = True

    def answer(self, question: str, context: str | None) -> str:
        return _match_keyword(question, DEMO_ANSWERS) or DEFAULT_ANSWER_TEMPLATE.format(
            question=question
        )

    def converse(self, question: str, context: str, history_text: str) -> str:
        return self.answer(question, context)

    def summarize(self, content: str) -> str:
        return DEMO_SUMMARY

    def chat(
        self, profile: AgentProfile, history: list[ConversationExchange], message: str
    ) -> str:
        return _match_keyword(message, DEMO_AGENT_REPLIES) or DEFAULT_AGENT_REPLY_TEMPLATE.format(
            message=message
        )
