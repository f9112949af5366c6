"""Keyword-matching index used in fixture (demo) mode."""

import logging
import threading

from ....core.domain import Chunk, IndexStats, SearchResult
from ....core.domain.exceptions import EmptyIndexError, InvalidParameterError
from ....core.ports.knowledge_index_port import KnowledgeIndexPort
from .demo_content import DEMO_DOCUMENTS

logger = logging.getLogger(__name__)


def demo_chunks() -> list[Chunk]:
    """Build the seeded demo documents as single-chunk entries."""
    return [
        Chunk(
            text=doc["content"],
            parent_id=doc["id"],
            index=0,
            metadata={**doc["metadata"], "doc_id": doc["id"], "chunk_index": 0},
        )
        for doc in DEMO_DOCUMENTS
    ]


class KeywordFixtureIndex(KnowledgeIndexPort):
    """Substring search over seeded demo documents plus anything added.

    No embeddings are computed. A chunk matches when the lowercased keywords
    (the bare question, else the query) occur in its text or title. With no
    matches the first ``k`` entries are returned so callers always get some
    context. ``reset`` restores the seed documents rather than emptying the
    index.
    """

    def __init__(self) -> None:
        self._chunks: list[Chunk] = demo_chunks()
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        return len(self._chunks)

    @property
    def has_store(self) -> bool:
        return True

    def add(self, chunks: list[Chunk]) -> int:
        with self._lock:
            self._chunks.extend(chunks)
        return len(chunks)

    def search(self, query: str, k: int, *, keywords: str | None = None) -> list[SearchResult]:
        if k < 1:
            raise InvalidParameterError("k must be at least 1", context={"k": k})

        with self._lock:
            chunks = list(self._chunks)
        if not chunks:
            raise EmptyIndexError("No documents have been added to the index")

        needle = (keywords or query).lower()
        matches = [
            chunk
            for chunk in chunks
            if needle in chunk.text.lower()
            or needle in str(chunk.metadata.get("title", "")).lower()
        ]
        if matches:
            return [SearchResult(chunk=chunk, score=1.0) for chunk in matches[:k]]

        logger.debug("No fixture match for %r, returning first %d entries", query, k)
        return [SearchResult(chunk=chunk, score=0.0) for chunk in chunks[:k]]

    def sample(self, k: int) -> list[Chunk]:
        with self._lock:
            return self._chunks[:k]

    def reset(self) -> None:
        with self._lock:
            self._chunks = demo_chunks()

    def stats(self) -> IndexStats:
        with self._lock:
            chunk_count = len(self._chunks)
            source_count = len({chunk.parent_id for chunk in self._chunks})
        return IndexStats(
            document_count=chunk_count,
            chunk_count=chunk_count,
            source_document_count=source_count,
            has_store=True,
            demo_mode=True,
        )
