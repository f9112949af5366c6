"""RAG service: ingestion, retrieval and generation over one knowledge index."""

import logging
import time
import uuid
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from ..domain import (
    Chunk,
    ConversationalAnswer,
    ConversationExchange,
    Document,
    IndexStats,
    SearchResult,
    render_history,
)
from ..domain.exceptions import EmptyContentError, EmptyIndexError, InvalidParameterError
from ..ports.answer_generator_port import AnswerGenerator
from ..ports.knowledge_index_port import KnowledgeIndexPort
from .conversation_manager import ConversationManager
from .prompts import CONTEXTUAL_QUERY_TEMPLATE
from .text_splitter import TextSplitter

logger = logging.getLogger(__name__)


def new_document_id() -> str:
    """Return an id of the form ``doc-<epoch-ms>-<9 hex chars>``."""
    return f"doc-{time.time_ns() // 1_000_000}-{uuid.uuid4().hex[:9]}"


def join_context(results: Sequence[SearchResult]) -> str:
    return "\n\n".join(result.chunk.text for result in results)


def _require_text(value: str, field: str) -> None:
    if not value or not value.strip():
        raise EmptyContentError(f"{field} must not be empty", context={"field": field})


class RAGService:
    """Retrieval-augmented generation over a shared knowledge index.

    The index and generator are chosen by the composition root (live model
    or fixture); this class never branches on which pair it was given.
    """

    def __init__(
        self,
        index: KnowledgeIndexPort,
        generator: AnswerGenerator,
        splitter: TextSplitter | None = None,
        conversations: ConversationManager | None = None,
        top_k: int = 5,
        summary_top_k: int = 10,
        conversation_window: int = 3,
    ) -> None:
        """Initialize the service.

        Args:
            index: Knowledge index holding embedded chunks.
            generator: Produces answer text.
            splitter: Chunker for ingested documents.
            conversations: Session store for conversational RAG.
            top_k: Chunks retrieved for answers and conversation turns.
            summary_top_k: Chunks fed to summarisation.
            conversation_window: Exchanges used to build contextual queries.
        """
        if top_k < 1 or summary_top_k < 1:
            raise InvalidParameterError(
                "top_k and summary_top_k must be at least 1",
                context={"top_k": top_k, "summary_top_k": summary_top_k},
            )
        if conversation_window < 0:
            raise InvalidParameterError(
                "conversation_window must be non-negative",
                context={"conversation_window": conversation_window},
            )
        self.index = index
        self.generator = generator
        self.splitter = splitter or TextSplitter()
        self.conversations = conversations or ConversationManager()
        self.top_k = top_k
        self.summary_top_k = summary_top_k
        self.conversation_window = conversation_window

    @property
    def demo_mode(self) -> bool:
        return self.generator.is_fixture

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def _chunk(self, document: Document) -> list[Chunk]:
        return [
            Chunk(
                text=text,
                parent_id=document.doc_id,
                index=i,
                metadata={**document.metadata, "doc_id": document.doc_id, "chunk_index": i},
            )
            for i, text in enumerate(self.splitter.iter_split(document.content))
        ]

    def add_document(self, content: str, metadata: Mapping[str, Any] | None = None) -> Document:
        """Split a document and add its chunks to the index.

        Raises:
            EmptyContentError: If content is empty.
            EmbeddingError: If the chunks could not be embedded.
        """
        return self.add_documents([content], [metadata or {}])[0]

    def add_documents(
        self,
        contents: Sequence[str],
        metadatas: Sequence[Mapping[str, Any] | None] | None = None,
    ) -> list[Document]:
        """Add several documents as one all-or-nothing batch.

        Every document is validated and split before anything is indexed, and
        all chunks go to the index in a single call.
        """
        if metadatas is not None and len(metadatas) != len(contents):
            raise InvalidParameterError(
                "metadatas must match contents in length",
                context={"contents": len(contents), "metadatas": len(metadatas)},
            )
        if not contents:
            raise EmptyContentError("At least one document is required")

        for content in contents:
            _require_text(content, "content")

        documents = [
            Document(
                doc_id=new_document_id(),
                content=content,
                metadata=dict(metadatas[i] or {}) if metadatas is not None else {},
            )
            for i, content in enumerate(contents)
        ]
        chunks = [chunk for document in documents for chunk in self._chunk(document)]

        self.index.add(chunks)
        logger.info("Added %d documents (%d chunks)", len(documents), len(chunks))
        return documents

    def add_text_file(self, text: str, filename: str) -> Document:
        """Add the contents of a text file, tagging its origin."""
        return self.add_document(
            text,
            {
                "source": "file",
                "filename": filename,
                "type": "text",
                "added_at": datetime.now(UTC).isoformat(),
            },
        )

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def search(self, query: str, k: int | None = None) -> list[SearchResult]:
        """Return the ``k`` most similar chunks (``top_k`` by default).

        Raises:
            EmptyIndexError: If nothing has been indexed.
        """
        return self.index.search(query, self.top_k if k is None else k)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_answer(
        self,
        question: str,
        context: str | None = None,
        use_retrieval: bool = True,
    ) -> str:
        """Answer a question, optionally grounded in retrieved context.

        A non-empty ``context`` is used verbatim and retrieval is skipped.
        Otherwise, when ``use_retrieval`` is set and the index holds entries,
        the top chunks are retrieved. With no context at all the model answers
        from general knowledge.
        """
        _require_text(question, "question")

        if context:
            resolved: str | None = context
        elif use_retrieval and self.index.size > 0:
            resolved = join_context(self.index.search(question, self.top_k))
        else:
            resolved = None

        return self.generator.answer(question, resolved)

    def conversational_rag(
        self,
        question: str,
        history: Sequence[ConversationExchange] | None = None,
        session_id: str | None = None,
    ) -> ConversationalAnswer:
        """Run one conversational turn.

        History comes from the session when ``session_id`` is given, else
        from ``history``. Only the last ``conversation_window`` exchanges are
        used. The session records the exchange only after the answer has
        been generated.

        Raises:
            EmptyIndexError: If nothing has been indexed.
        """
        _require_text(question, "question")

        if session_id is not None:
            exchanges = self.conversations.history(session_id, self.conversation_window)
        else:
            exchanges = list(history or [])

        history_text = render_history(exchanges, self.conversation_window)
        if history_text:
            contextual_query = CONTEXTUAL_QUERY_TEMPLATE.format(
                history=history_text, question=question
            )
        else:
            contextual_query = question

        sources = self.index.search(contextual_query, self.top_k, keywords=question)
        answer = self.generator.converse(question, join_context(sources), history_text)

        if session_id is not None:
            self.conversations.record(session_id, question, answer)

        return ConversationalAnswer(
            answer=answer,
            sources=sources,
            contextual_query=contextual_query,
        )

    def summarize(self, query: str | None = None) -> str:
        """Summarise the indexed content, optionally focused on a query.

        Without a query the first ``summary_top_k`` chunks in insertion order
        are used.
        """
        if self.index.size == 0:
            raise EmptyIndexError("No documents have been added to the index")

        if query:
            chunks = [result.chunk for result in self.index.search(query, self.summary_top_k)]
        else:
            chunks = self.index.sample(self.summary_top_k)

        return self.generator.summarize("\n\n".join(chunk.text for chunk in chunks))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_stats(self) -> IndexStats:
        return self.index.stats()

    def reset(self) -> None:
        """Clear the index. Conversation sessions are kept."""
        self.index.reset()
        logger.info("Knowledge index reset")
