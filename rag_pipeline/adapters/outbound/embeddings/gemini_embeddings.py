"""Gemini embedding adapter implementing the embedding port."""

import logging
from typing import TYPE_CHECKING

import httpx

from ....core.domain.exceptions import (
    EmbeddingAPIError,
    EmbeddingTimeoutError,
    MissingAPIKeyError,
)
from ....core.ports.embedding_port import EmbeddingPort
from ...common.rate_limiter import RateLimiter

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

EMBEDDING_BATCH_SIZE = 20


class GeminiEmbeddings(EmbeddingPort):
    """Embeddings from the Gemini API via the google-genai SDK.

    Documents are embedded in batches of ``EMBEDDING_BATCH_SIZE`` with the
    ``RETRIEVAL_DOCUMENT`` task type; queries use ``RETRIEVAL_QUERY``. A
    failed batch aborts the whole call so no chunk is indexed without a
    vector.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-embedding-001",
        timeout_seconds: float = 60.0,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self.api_key = api_key
        self.model_name = model_name
        self.timeout_seconds = timeout_seconds
        self.rate_limiter = rate_limiter
        self._client: "genai.Client | None" = None

    def _get_client(self) -> "genai.Client":
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set; embeddings are unavailable.",
                    context={"model": self.model_name},
                )

            from google import genai
            from google.genai import types

            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout_seconds * 1000)),
            )
        return self._client

    def embed_query(self, text: str) -> list[float]:
        return self._embed_texts([text], task_type="RETRIEVAL_QUERY")[0]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []

        all_embeddings: list[list[float]] = []
        for i in range(0, len(texts), EMBEDDING_BATCH_SIZE):
            batch = texts[i : i + EMBEDDING_BATCH_SIZE]
            all_embeddings.extend(self._embed_texts(batch, task_type="RETRIEVAL_DOCUMENT"))
        logger.debug("Embedded %d documents", len(all_embeddings))
        return all_embeddings

    def _embed_texts(self, texts: list[str], task_type: str) -> list[list[float]]:
        client = self._get_client()
        if self.rate_limiter:
            self.rate_limiter.acquire()

        try:
            result = client.models.embed_content(
                model=self.model_name,
                contents=texts,
                config={"task_type": task_type},
            )
        except httpx.TimeoutException as e:
            raise EmbeddingTimeoutError(
                "Embedding request timed out",
                cause=e,
                context={"model": self.model_name, "timeout_seconds": self.timeout_seconds},
            ) from e
        except Exception as e:
            raise EmbeddingAPIError(
                f"Embedding request failed: {e}",
                cause=e,
                context={"model": self.model_name, "batch_size": len(texts)},
            ) from e

        embeddings = [list(emb.values) for emb in (result.embeddings or [])]
        if len(embeddings) != len(texts):
            raise EmbeddingAPIError(
                "Embedding response size does not match request",
                context={"requested": len(texts), "received": len(embeddings)},
            )
        return embeddings
