"""Composition root wiring adapters to the application services."""

import logging
from dataclasses import dataclass

from ..adapters.common.rate_limiter import RateLimiter
from ..adapters.outbound.embeddings import GeminiEmbeddings, SentenceTransformerEmbeddings
from ..adapters.outbound.fixtures import FixtureModelGenerator, KeywordFixtureIndex
from ..adapters.outbound.llm import GeminiLLM
from ..adapters.outbound.vector_index import InMemoryVectorIndex
from ..config.settings import Settings
from ..core.ports import AnswerGenerator, EmbeddingPort, KnowledgeIndexPort
from ..core.services import (
    AgentService,
    ConversationManager,
    LiveModelGenerator,
    RAGService,
    TextSplitter,
)

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Services shared by every request of one application instance."""

    settings: Settings
    rag: RAGService
    agents: AgentService

    @property
    def demo_mode(self) -> bool:
        return self.rag.demo_mode


def build_embedder(settings: Settings) -> EmbeddingPort:
    if settings.embedding_backend == "local":
        logger.info("Using local embeddings: %s", settings.local_embedding_model)
        return SentenceTransformerEmbeddings(settings.local_embedding_model)
    return GeminiEmbeddings(
        api_key=settings.google_api_key,
        model_name=settings.embedding_model,
        timeout_seconds=settings.request_timeout_seconds,
        rate_limiter=RateLimiter(settings.embedding_requests_per_minute),
    )


def build_llm(settings: Settings) -> GeminiLLM:
    return GeminiLLM(
        api_key=settings.google_api_key if settings.has_llm_credentials else "",
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        timeout_seconds=settings.request_timeout_seconds,
        rate_limiter=RateLimiter(settings.llm_requests_per_minute),
    )


def build_index_and_generator(settings: Settings) -> tuple[KnowledgeIndexPort, AnswerGenerator]:
    """Pick the live or fixture strategy pair once, from the settings."""
    if settings.use_demo_mode:
        logger.warning("Google API key not configured. Running in demo (fixture) mode.")
        return KeywordFixtureIndex(), FixtureModelGenerator()

    # Without a key and without the fixture fallback, the adapters raise
    # MissingAPIKeyError on first use.
    index = InMemoryVectorIndex(build_embedder(settings))
    generator = LiveModelGenerator(build_llm(settings), temperature=settings.llm_temperature)
    return index, generator


def build_container(settings: Settings | None = None) -> ServiceContainer:
    """Build every service for one application instance."""
    settings = settings or Settings()
    index, generator = build_index_and_generator(settings)

    rag = RAGService(
        index=index,
        generator=generator,
        splitter=TextSplitter(settings.chunk_size, settings.chunk_overlap),
        conversations=ConversationManager(),
        top_k=settings.top_k_results,
        summary_top_k=settings.summary_top_k,
        conversation_window=settings.conversation_window,
    )
    agents = AgentService(
        generator=generator,
        conversations=ConversationManager(),
        temperature=settings.agent_temperature,
    )
    logger.info("Service container ready (demo_mode=%s)", generator.is_fixture)
    return ServiceContainer(settings=settings, rag=rag, agents=agents)
