"""Port for text embedding providers."""

from abc import ABC, abstractmethod


class EmbeddingPort(ABC):
    """Maps text to fixed-length float vectors.

    Implementations raise ``EmbeddingError`` subclasses on provider failures
    and ``NotConfiguredError`` when a credential is missing.
    """

    @abstractmethod
    def embed_query(self, text: str) -> list[float]: ...

    @abstractmethod
    def embed_documents(self, texts: list[str]) -> list[list[float]]: ...
