"""Pipeline exceptions, grouped by the stage that raises them.

Configuration and caller errors, missing credentials, embedding failures,
generation failures and index errors each have their own family under
``RAGPipelineError``.
"""

from .base import RaiseSite, RAGPipelineError
from .configuration import (
    ConfigurationError,
    EmptyContentError,
    InvalidChunkingError,
    InvalidParameterError,
    MissingAPIKeyError,
    NotConfiguredError,
)
from .embedding import (
    EmbeddingAPIError,
    EmbeddingDimensionError,
    EmbeddingError,
    EmbeddingTimeoutError,
)
from .generation import (
    EmptyGenerationError,
    GenerationError,
    GenerationTimeoutError,
)
from .vector_index import (
    EmptyIndexError,
    VectorIndexError,
)

__all__ = [
    # Base
    "RaiseSite",
    "RAGPipelineError",
    # Configuration
    "ConfigurationError",
    "EmptyContentError",
    "InvalidChunkingError",
    "InvalidParameterError",
    "NotConfiguredError",
    "MissingAPIKeyError",
    # Embedding
    "EmbeddingError",
    "EmbeddingAPIError",
    "EmbeddingTimeoutError",
    "EmbeddingDimensionError",
    # Generation
    "GenerationError",
    "GenerationTimeoutError",
    "EmptyGenerationError",
    # Vector index
    "VectorIndexError",
    "EmptyIndexError",
]
