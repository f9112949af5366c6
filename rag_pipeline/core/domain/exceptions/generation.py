"""Generation (LLM) exceptions for the RAG pipeline."""

from .base import RAGPipelineError


class GenerationError(RAGPipelineError):
    """Language model call failed.

    Common causes:
    - Network issues or service unavailable
    - Invalid API key or exhausted quota
    - Content filtered by safety settings
    """

    error_code = "RAG_GEN_001"


class GenerationTimeoutError(GenerationError):
    """Language model call did not complete within the configured timeout."""

    error_code = "RAG_GEN_002"


class EmptyGenerationError(GenerationError):
    """Language model returned no candidates."""

    error_code = "RAG_GEN_003"
