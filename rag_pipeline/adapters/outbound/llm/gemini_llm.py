"""Google Gemini adapter implementing the LLM port (google-genai SDK)."""

import logging
from typing import TYPE_CHECKING

import httpx

from ....core.domain.exceptions import (
    EmptyGenerationError,
    GenerationError,
    GenerationTimeoutError,
    MissingAPIKeyError,
)
from ....core.ports.llm_port import LLMPort
from ...common.rate_limiter import RateLimiter

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)


class GeminiLLM(LLMPort):
    """Text generation through the Gemini API.

    The SDK client is created lazily on the first call so the service can
    start without a key. Calls are made once: failures raise
    ``GenerationError`` (``GenerationTimeoutError`` for timeouts) and are
    never retried.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.3,
        max_tokens: int = 2048,
        timeout_seconds: float = 60.0,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        """Initialize the Gemini client.

        Args:
            api_key: Google AI API key.
            model: Model to use.
            temperature: Default sampling temperature.
            max_tokens: Default maximum output tokens.
            timeout_seconds: HTTP timeout applied to every request.
            rate_limiter: Optional limiter acquired before each request.
        """
        self.api_key = api_key
        self.model_name = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout_seconds = timeout_seconds
        self.rate_limiter = rate_limiter
        self._client: "genai.Client | None" = None

    def _get_client(self) -> "genai.Client":
        """Lazy load the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set. Set GOOGLE_API_KEY in your environment or .env file.",
                    context={"model": self.model_name},
                )

            from google import genai
            from google.genai import types

            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout_seconds * 1000)),
            )
            logger.info("Gemini client initialized for model: %s", self.model_name)

        return self._client

    def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        from google.genai.types import GenerateContentConfig

        client = self._get_client()

        if system_prompt:
            full_prompt = f"{system_prompt}\n\n---\n\n{prompt}"
        else:
            full_prompt = prompt

        if self.rate_limiter:
            self.rate_limiter.acquire()

        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=full_prompt,
                config=GenerateContentConfig(
                    temperature=self.temperature if temperature is None else temperature,
                    max_output_tokens=self.max_tokens if max_tokens is None else max_tokens,
                ),
            )
        except httpx.TimeoutException as e:
            raise GenerationTimeoutError(
                "Gemini request timed out",
                cause=e,
                context={"model": self.model_name, "timeout_seconds": self.timeout_seconds},
            ) from e
        except Exception as e:
            raise GenerationError(
                f"Gemini request failed: {e}",
                cause=e,
                context={"model": self.model_name},
            ) from e

        if not response.candidates:
            raise EmptyGenerationError(
                "Gemini returned no candidates (possibly blocked by safety filters)",
                context={"model": self.model_name},
            )

        return response.text or ""
