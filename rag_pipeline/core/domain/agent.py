"""Agent preset models."""

from dataclasses import dataclass
from enum import Enum


class AgentPreset(str, Enum):
    """Closed set of agent personas."""

    GENERAL = "general"
    DATA_ANALYST = "data-analyst"
    CODE_ASSISTANT = "code-assistant"
    DOCUMENT_PROCESSOR = "document-processor"
    ML_ENGINEER = "ml-engineer"


@dataclass(frozen=True)
class AgentProfile:
    """Prompt configuration for one preset.

    Attributes:
        preset: Which preset this profile belongs to.
        template: Prompt with ``{history}`` and ``{input}`` placeholders.
        ai_label: Speaker label the template ends with.
        temperature: Sampling temperature for this agent.
    """

    preset: AgentPreset
    template: str
    ai_label: str
    temperature: float = 0.7

    def render(self, history: str, message: str) -> str:
        return self.template.format(history=history, input=message)
