"""Port for searchable chunk stores."""

from abc import ABC, abstractmethod

from ..domain import Chunk, IndexStats, SearchResult


class KnowledgeIndexPort(ABC):
    """Abstract interface for a searchable store of chunks.

    Implemented by the numpy vector index and by the demo fixture index.
    """

    @abstractmethod
    def add(self, chunks: list[Chunk]) -> int:
        """Insert chunks as one all-or-nothing batch. Returns the count added."""
        ...

    @abstractmethod
    def search(self, query: str, k: int, *, keywords: str | None = None) -> list[SearchResult]:
        """Return the top ``min(k, size)`` chunks by descending relevance.

        ``keywords`` is the bare user question when ``query`` has been
        expanded with conversation history. Embedding indexes rank on
        ``query``; keyword indexes match on ``keywords`` when given.

        Raises:
            EmptyIndexError: If the index holds no entries.
            InvalidParameterError: If ``k < 1``.
        """
        ...

    @abstractmethod
    def sample(self, k: int) -> list[Chunk]:
        """Return the first ``k`` chunks in insertion order."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Discard every entry. Idempotent."""
        ...

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of indexed chunks."""
        ...

    @property
    @abstractmethod
    def has_store(self) -> bool:
        """Whether the underlying store has been created."""
        ...

    @abstractmethod
    def stats(self) -> IndexStats: ...
