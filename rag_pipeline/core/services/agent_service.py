"""Conversational agent with named prompt presets and per-session memory."""

import logging

from ..domain import AgentPreset, AgentProfile, render_history
from ..domain.exceptions import InvalidParameterError
from ..ports.answer_generator_port import AnswerGenerator
from .conversation_manager import ConversationManager
from .prompts import (
    CODE_ASSISTANT_PROMPT,
    DATA_ANALYST_PROMPT,
    DOCUMENT_PROCESSOR_PROMPT,
    GENERAL_AGENT_PROMPT,
    ML_ENGINEER_PROMPT,
)

logger = logging.getLogger(__name__)

_PRESET_TEMPLATES: dict[AgentPreset, tuple[str, str]] = {
    AgentPreset.GENERAL: (GENERAL_AGENT_PROMPT, "AI"),
    AgentPreset.DATA_ANALYST: (DATA_ANALYST_PROMPT, "Data Analyst AI"),
    AgentPreset.CODE_ASSISTANT: (CODE_ASSISTANT_PROMPT, "Code Assistant AI"),
    AgentPreset.DOCUMENT_PROCESSOR: (DOCUMENT_PROCESSOR_PROMPT, "Document Processor AI"),
    AgentPreset.ML_ENGINEER: (ML_ENGINEER_PROMPT, "ML Engineer AI"),
}


def build_profiles(temperature: float = 0.7) -> dict[AgentPreset, AgentProfile]:
    return {
        preset: AgentProfile(preset=preset, template=template, ai_label=label, temperature=temperature)
        for preset, (template, label) in _PRESET_TEMPLATES.items()
    }


def resolve_preset(preset: AgentPreset | str | None) -> AgentPreset:
    if preset is None:
        return AgentPreset.GENERAL
    if isinstance(preset, AgentPreset):
        return preset
    try:
        return AgentPreset(preset)
    except ValueError as e:
        raise InvalidParameterError(
            f"Unknown agent preset: {preset}",
            cause=e,
            context={"preset": preset, "allowed": [p.value for p in AgentPreset]},
        ) from e


class AgentService:
    """Chat agent parameterised by a preset profile.

    Memory is kept per ``(session_id, preset)`` pair and is unbounded: the
    whole history is rendered into each prompt.
    """

    def __init__(
        self,
        generator: AnswerGenerator,
        conversations: ConversationManager | None = None,
        temperature: float = 0.7,
    ) -> None:
        self.generator = generator
        self.conversations = conversations or ConversationManager()
        self.profiles = build_profiles(temperature)

    @staticmethod
    def memory_key(session_id: str, preset: AgentPreset) -> str:
        return f"{session_id}:{preset.value}"

    def profile(self, preset: AgentPreset | str | None = None) -> AgentProfile:
        return self.profiles[resolve_preset(preset)]

    def chat(
        self,
        message: str,
        session_id: str,
        preset: AgentPreset | str | None = None,
        clear_memory: bool = False,
    ) -> str:
        """Send a message to the agent and record the exchange."""
        if not message or not message.strip():
            raise InvalidParameterError("message must not be empty")
        if not session_id:
            raise InvalidParameterError("session_id must not be empty")

        profile = self.profile(preset)
        key = self.memory_key(session_id, profile.preset)
        if clear_memory:
            self.conversations.clear(key)

        history = self.conversations.history(key)
        reply = self.generator.chat(profile, history, message)
        self.conversations.record(key, message, reply)
        logger.debug("Agent %s replied in session %s", profile.preset.value, session_id)
        return reply

    def memory(self, session_id: str, preset: AgentPreset | str | None = None) -> str:
        """Return the serialized conversation history for a session."""
        key = self.memory_key(session_id, resolve_preset(preset))
        return render_history(self.conversations.history(key))

    def clear(self, session_id: str, preset: AgentPreset | str | None = None) -> bool:
        return self.conversations.clear(self.memory_key(session_id, resolve_preset(preset)))
