"""Port for text-generation providers."""

from abc import ABC, abstractmethod


class LLMPort(ABC):
    """Single-shot text generation from a prompt."""

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Return the model output for ``prompt``, unmodified.

        ``None`` for temperature or max_tokens defers to the provider's
        configured defaults.
        """
        ...
