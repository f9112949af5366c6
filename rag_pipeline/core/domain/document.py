"""Document, chunk and search result models for the RAG system."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Document:
    """A unit of ingested knowledge.

    Created once by the ingestion step and never mutated afterwards. It only
    disappears when the whole index is reset.

    Attributes:
        doc_id: Unique identifier assigned at ingestion time.
        content: Full text of the document.
        metadata: Caller-supplied key-value pairs (source, title, ...).
    """

    doc_id: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Chunk:
    """A contiguous slice of a Document, the unit of embedding and retrieval.

    Attributes:
        text: The slice of the parent content.
        parent_id: ``doc_id`` of the owning Document (lookup only).
        index: 0-based position within the parent's split sequence.
        metadata: Parent metadata stamped with ``doc_id`` and ``chunk_index``.
    """

    text: str
    parent_id: str
    index: int
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    """A search result with chunk and similarity score.

    Attributes:
        chunk: The matched Chunk.
        score: Similarity score (cosine, higher is more relevant).
    """

    chunk: Chunk
    score: float

    @property
    def content(self) -> str:
        return self.chunk.text

    @property
    def metadata(self) -> dict[str, Any]:
        return self.chunk.metadata


@dataclass(frozen=True)
class IndexStats:
    """Introspection snapshot of a knowledge index.

    ``document_count`` keeps the historical meaning (number of indexed
    chunks); ``chunk_count`` and ``source_document_count`` expose both
    counts explicitly.
    """

    document_count: int
    chunk_count: int
    source_document_count: int
    has_store: bool
    demo_mode: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "document_count": self.document_count,
            "chunk_count": self.chunk_count,
            "source_document_count": self.source_document_count,
            "has_store": self.has_store,
            "demo_mode": self.demo_mode,
        }
