"""LLM adapters."""

from .gemini_llm import GeminiLLM

__all__ = ["GeminiLLM"]
