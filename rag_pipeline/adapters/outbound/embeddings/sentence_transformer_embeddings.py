"""Local embeddings with sentence-transformers."""

import logging

from ....core.domain.exceptions import EmbeddingError
from ....core.ports.embedding_port import EmbeddingPort

logger = logging.getLogger(__name__)


class SentenceTransformerEmbeddings(EmbeddingPort):
    """Wrapper for a sentence-transformers embedding model.

    Runs locally, so no credential is needed. The model is loaded on first use.
    """

    def __init__(self, model_name: str = "all-MiniLM-L6-v2", batch_size: int = 32) -> None:
        """Initialize the embedding model.

        Args:
            model_name: Name of the sentence-transformers model to use.
                        Default is all-MiniLM-L6-v2 (fast, 384 dims).
            batch_size: Batch size for encoding.
        """
        self.model_name = model_name
        self.batch_size = batch_size
        self._model = None

    def _load_model(self):
        if self._model is None:
            logger.info("Loading embedding model: %s", self.model_name)
            from sentence_transformers import SentenceTransformer

            try:
                self._model = SentenceTransformer(self.model_name)
            except OSError as e:
                raise EmbeddingError(
                    f"Could not load embedding model {self.model_name}",
                    cause=e,
                    context={"model": self.model_name},
                ) from e
        return self._model

    def embed_query(self, text: str) -> list[float]:
        model = self._load_model()
        return model.encode(text, convert_to_numpy=True).tolist()

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        model = self._load_model()
        embeddings = model.encode(
            texts,
            batch_size=self.batch_size,
            convert_to_numpy=True,
            show_progress_bar=False,
        )
        return embeddings.tolist()
