"""In-memory vector index using numpy cosine similarity.

Vectors are L2-normalised on insertion so an inner product gives cosine
similarity. Brute-force search over every entry is fine at the scale of a
single process holding its own documents; nothing is persisted.

Thread safety: inserts embed outside the lock and then publish chunks and
vectors together under ``_lock``; searches read a consistent snapshot.
"""

import logging
import threading

import numpy as np

from ....core.domain import Chunk, IndexStats, SearchResult
from ....core.domain.exceptions import (
    EmbeddingDimensionError,
    EmptyIndexError,
    InvalidParameterError,
)
from ....core.ports.embedding_port import EmbeddingPort
from ....core.ports.knowledge_index_port import KnowledgeIndexPort

logger = logging.getLogger(__name__)


def _normalise(vectors: np.ndarray) -> np.ndarray:
    norms = np.linalg.norm(vectors, axis=1, keepdims=True)
    # Zero vectors stay zero and score 0 against everything.
    return vectors / np.where(norms == 0, 1.0, norms)


class InMemoryVectorIndex(KnowledgeIndexPort):
    """Exact cosine-similarity index over embedded chunks.

    The store is created lazily by the first insert, which fixes the
    dimensionality for the lifetime of the index (until ``reset``).

    Args:
        embedder: Embedding function used for chunks and queries.
    """

    def __init__(self, embedder: EmbeddingPort) -> None:
        self.embedder = embedder
        self._chunks: list[Chunk] = []
        self._vectors: np.ndarray | None = None
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        return len(self._chunks)

    @property
    def has_store(self) -> bool:
        return self._vectors is not None

    @property
    def dim(self) -> int | None:
        return None if self._vectors is None else int(self._vectors.shape[1])

    def add(self, chunks: list[Chunk]) -> int:
        """Embed and insert chunks as a single batch.

        Either every chunk becomes visible or none does: embedding and
        dimension checks happen before anything is published.
        """
        if not chunks:
            return 0

        raw = self.embedder.embed_documents([chunk.text for chunk in chunks])
        vectors = np.asarray(raw, dtype=np.float32)
        if vectors.ndim != 2 or vectors.shape[0] != len(chunks):
            raise EmbeddingDimensionError(
                "Embedder returned a malformed batch",
                context={"expected_rows": len(chunks), "shape": list(vectors.shape)},
            )
        vectors = _normalise(vectors)

        with self._lock:
            if self._vectors is None:
                self._vectors = vectors
            else:
                if vectors.shape[1] != self._vectors.shape[1]:
                    raise EmbeddingDimensionError(
                        "Embedding dimension does not match the index",
                        context={
                            "index_dim": int(self._vectors.shape[1]),
                            "batch_dim": int(vectors.shape[1]),
                        },
                    )
                self._vectors = np.vstack([self._vectors, vectors])
            self._chunks.extend(chunks)
            total = len(self._chunks)

        logger.info("Indexed %d chunks (total %d)", len(chunks), total)
        return len(chunks)

    def search(self, query: str, k: int, *, keywords: str | None = None) -> list[SearchResult]:
        if k < 1:
            raise InvalidParameterError("k must be at least 1", context={"k": k})

        with self._lock:
            vectors = self._vectors
            chunks = list(self._chunks)

        if vectors is None or not chunks:
            raise EmptyIndexError("No documents have been added to the index")

        query_vec = np.asarray(self.embedder.embed_query(query), dtype=np.float32)
        if query_vec.shape != (vectors.shape[1],):
            raise EmbeddingDimensionError(
                "Query embedding dimension does not match the index",
                context={"index_dim": int(vectors.shape[1]), "query_shape": list(query_vec.shape)},
            )
        query_vec = _normalise(query_vec.reshape(1, -1))[0]

        scores = vectors @ query_vec
        # Stable sort keeps insertion order among equal scores.
        order = np.argsort(-scores, kind="stable")[: min(k, len(chunks))]
        return [SearchResult(chunk=chunks[i], score=float(scores[i])) for i in order]

    def sample(self, k: int) -> list[Chunk]:
        with self._lock:
            return self._chunks[:k]

    def reset(self) -> None:
        with self._lock:
            self._chunks = []
            self._vectors = None
        logger.info("Vector index cleared")

    def stats(self) -> IndexStats:
        with self._lock:
            chunk_count = len(self._chunks)
            source_count = len({chunk.parent_id for chunk in self._chunks})
            has_store = self._vectors is not None
        return IndexStats(
            document_count=chunk_count,
            chunk_count=chunk_count,
            source_document_count=source_count,
            has_store=has_store,
            demo_mode=False,
        )
