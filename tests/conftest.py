"""
Pytest configuration and shared fixtures.
"""

import re
import zlib

import pytest

from rag_pipeline.adapters.outbound.vector_index import InMemoryVectorIndex
from rag_pipeline.core.ports import EmbeddingPort, LLMPort
from rag_pipeline.core.services import (
    ConversationManager,
    LiveModelGenerator,
    RAGService,
    TextSplitter,
)

BAG_OF_WORDS_DIM = 64


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (FastAPI app, no network)")


class BagOfWordsEmbedder(EmbeddingPort):
    """Deterministic embedder hashing lowercase words into fixed buckets."""

    def __init__(self, dim: int = BAG_OF_WORDS_DIM) -> None:
        self.dim = dim
        self.query_calls: list[str] = []
        self.document_calls: list[list[str]] = []

    def _vector(self, text: str) -> list[float]:
        vector = [0.0] * self.dim
        for word in re.findall(r"[a-z0-9]+", text.lower()):
            vector[zlib.crc32(word.encode()) % self.dim] += 1.0
        return vector

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self._vector(text)

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self._vector(text) for text in texts]


class LookupEmbedder(EmbeddingPort):
    """Returns preset vectors by exact text, with a default for unknown text."""

    def __init__(self, vectors: dict[str, list[float]], default: list[float] | None = None) -> None:
        self.vectors = vectors
        self.default = default

    def _lookup(self, text: str) -> list[float]:
        if text in self.vectors:
            return self.vectors[text]
        if self.default is None:
            raise KeyError(text)
        return self.default

    def embed_query(self, text: str) -> list[float]:
        return self._lookup(text)

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._lookup(text) for text in texts]


class RecordingLLM(LLMPort):
    """LLM double that records prompts and replays scripted replies."""

    def __init__(self, replies: list[str] | None = None, error: Exception | None = None) -> None:
        self.replies = list(replies or ["stub answer"])
        self.error = error
        self.prompts: list[str] = []
        self.temperatures: list[float | None] = []

    def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        self.prompts.append(prompt)
        self.temperatures.append(temperature)
        if self.error is not None:
            raise self.error
        index = min(len(self.prompts) - 1, len(self.replies) - 1)
        return self.replies[index]


@pytest.fixture
def embedder():
    return BagOfWordsEmbedder()


@pytest.fixture
def llm():
    return RecordingLLM()


@pytest.fixture
def make_service(embedder, llm):
    """Factory for a live-mode RAGService over deterministic fakes."""

    def _make(chunk_size: int = 1000, chunk_overlap: int = 200, **kwargs) -> RAGService:
        return RAGService(
            index=InMemoryVectorIndex(kwargs.pop("embedder", embedder)),
            generator=LiveModelGenerator(kwargs.pop("llm", llm), temperature=0.3),
            splitter=TextSplitter(chunk_size, chunk_overlap),
            conversations=ConversationManager(),
            **kwargs,
        )

    return _make


@pytest.fixture
def rag_service(make_service):
    return make_service()


@pytest.fixture
def no_api_key(monkeypatch):
    """Make sure no real credential leaks in from the environment."""
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)


@pytest.fixture
def recording_llm_cls():
    return RecordingLLM


@pytest.fixture
def lookup_embedder_cls():
    return LookupEmbedder
