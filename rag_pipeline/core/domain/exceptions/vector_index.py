"""Vector index exceptions for the RAG pipeline."""

from .base import RAGPipelineError


class VectorIndexError(RAGPipelineError):
    """Base error for vector index operations."""

    error_code = "RAG_IDX_001"


class EmptyIndexError(VectorIndexError):
    """Read operation attempted against an index with zero entries.

    Distinct from "no matches", which cannot happen once the index holds
    at least one entry and k >= 1.
    """

    error_code = "RAG_IDX_002"
