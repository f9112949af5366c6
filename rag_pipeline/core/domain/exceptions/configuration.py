"""Configuration and credential exceptions for the RAG pipeline."""

from .base import RAGPipelineError


class ConfigurationError(RAGPipelineError):
    """Caller supplied invalid parameters.

    Raised immediately and never retried: empty content, overlap larger
    than the chunk size, missing required fields.
    """

    error_code = "RAG_CFG_001"


class EmptyContentError(ConfigurationError):
    """Document content or question text is empty."""

    error_code = "RAG_CFG_002"


class InvalidChunkingError(ConfigurationError):
    """Chunk size / overlap combination cannot make progress."""

    error_code = "RAG_CFG_003"


class InvalidParameterError(ConfigurationError):
    """A numeric or enumerated parameter is out of range."""

    error_code = "RAG_CFG_004"


class NotConfiguredError(RAGPipelineError):
    """An external AI credential is absent and no fixture mode is engaged."""

    error_code = "RAG_CFG_010"


class MissingAPIKeyError(NotConfiguredError):
    """Required API key is not configured."""

    error_code = "RAG_CFG_011"
