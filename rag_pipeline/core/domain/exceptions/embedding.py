"""Embedding exceptions for the RAG pipeline."""

from .base import RAGPipelineError


class EmbeddingError(RAGPipelineError):
    """Failed to generate embeddings."""

    error_code = "RAG_EMB_001"


class EmbeddingAPIError(EmbeddingError):
    """Embedding API returned an error.

    Common causes:
    - Invalid API key
    - Quota exhausted
    - Malformed input
    """

    error_code = "RAG_EMB_002"


class EmbeddingTimeoutError(EmbeddingError):
    """Embedding call did not complete within the configured timeout."""

    error_code = "RAG_EMB_003"


class EmbeddingDimensionError(EmbeddingError):
    """Embedding vector does not match the index dimensionality."""

    error_code = "RAG_EMB_004"
