"""Integration tests for FastAPI endpoints.

The application is built around an in-process container: a deterministic
bag-of-words embedder and a scripted LLM for live mode, and the real fixture
strategy for demo mode. Nothing leaves the process.
"""

import pytest
from fastapi.testclient import TestClient

from rag_pipeline.adapters.inbound.api.main import create_app
from rag_pipeline.adapters.outbound.vector_index import InMemoryVectorIndex
from rag_pipeline.composition import ServiceContainer, build_container
from rag_pipeline.config import Settings
from rag_pipeline.core.domain.exceptions import GenerationError, GenerationTimeoutError
from rag_pipeline.core.services import (
    AgentService,
    ConversationManager,
    LiveModelGenerator,
    RAGService,
    TextSplitter,
)

pytestmark = pytest.mark.integration

PYTHON_DOC = "Python is a programming language with readable syntax and a large standard library."
COFFEE_DOC = "Espresso is brewed by forcing hot water through finely ground coffee beans."


@pytest.fixture
def live_llm(recording_llm_cls):
    return recording_llm_cls(["model reply"])


@pytest.fixture
def container(embedder, live_llm):
    generator = LiveModelGenerator(live_llm, temperature=0.3)
    rag = RAGService(
        index=InMemoryVectorIndex(embedder),
        generator=generator,
        splitter=TextSplitter(200, 20),
        conversations=ConversationManager(),
        top_k=2,
    )
    return ServiceContainer(
        settings=Settings(_env_file=None, google_api_key="test-key"),
        rag=rag,
        agents=AgentService(generator),
    )


@pytest.fixture
def client(container):
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client):
    response = client.post(
        "/api/v1/rag/documents/batch",
        json={
            "documents": [
                {"content": PYTHON_DOC, "metadata": {"title": "Python"}},
                {"content": COFFEE_DOC, "metadata": {"title": "Coffee"}},
            ]
        },
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def demo_client(no_api_key):
    container = build_container(Settings(_env_file=None, google_api_key=""))
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


class TestHealthEndpoints:
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["demo_mode"] is False
        assert "version" in data

    def test_readiness_reports_empty_index(self, client):
        data = client.get("/ready").json()

        assert data["status"] == "ready"
        assert data["index"] == "empty"

    def test_readiness_reports_chunk_counts(self, seeded_client):
        data = seeded_client.get("/ready").json()

        assert data["index"] == "ready (2 chunks from 2 documents)"


class TestDocumentEndpoints:
    def test_add_document(self, client):
        response = client.post(
            "/api/v1/rag/documents",
            json={"content": PYTHON_DOC, "metadata": {"source": "notes"}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert len(data["document_ids"]) == 1

        stats = client.get("/api/v1/rag/stats").json()
        assert stats["document_count"] == 1
        assert stats["has_store"] is True

    def test_batch_returns_ids_in_order(self, client):
        response = client.post(
            "/api/v1/rag/documents/batch",
            json={"documents": [{"content": PYTHON_DOC}, {"content": COFFEE_DOC}]},
        )

        ids = response.json()["document_ids"]
        assert len(ids) == 2
        assert len(set(ids)) == 2

    def test_empty_content_is_rejected(self, client):
        response = client.post("/api/v1/rag/documents", json={"content": ""})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "RAG_REQ_001"

    def test_whitespace_content_is_rejected(self, client):
        response = client.post("/api/v1/rag/documents", json={"content": "   \n "})

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "EmptyContentError"

    def test_batch_with_one_bad_document_indexes_nothing(self, client):
        response = client.post(
            "/api/v1/rag/documents/batch",
            json={"documents": [{"content": PYTHON_DOC}, {"content": "  "}]},
        )

        assert response.status_code == 400
        assert client.get("/api/v1/rag/stats").json()["document_count"] == 0


class TestSearchEndpoint:
    def test_search_ranks_matching_document_first(self, seeded_client):
        response = seeded_client.post(
            "/api/v1/rag/search", json={"query": "python programming language", "k": 2}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert data["results"][0]["content"] == PYTHON_DOC
        assert data["results"][0]["metadata"]["title"] == "Python"
        assert data["results"][0]["score"] >= data["results"][1]["score"]

    def test_search_empty_index_conflict(self, client):
        response = client.post("/api/v1/rag/search", json={"query": "anything"})

        assert response.status_code == 409
        data = response.json()
        assert data["error"]["code"] == "RAG_IDX_002"
        assert "location" in data

    def test_invalid_k(self, seeded_client):
        response = seeded_client.post("/api/v1/rag/search", json={"query": "python", "k": 0})

        assert response.status_code == 400

    def test_large_k_returns_every_entry(self, seeded_client):
        response = seeded_client.post("/api/v1/rag/search", json={"query": "python", "k": 500})

        assert response.status_code == 200
        assert response.json()["count"] == 2


class TestAnswerEndpoints:
    def test_answer_uses_retrieved_context(self, seeded_client, live_llm):
        response = seeded_client.post(
            "/api/v1/rag/answer", json={"question": "What is python?"}
        )

        assert response.status_code == 200
        assert response.json()["answer"] == "model reply"
        assert PYTHON_DOC in live_llm.prompts[-1]

    def test_answer_with_supplied_context(self, seeded_client, live_llm):
        seeded_client.post(
            "/api/v1/rag/answer",
            json={"question": "What colour is the sky?", "context": "The sky is green here."},
        )

        assert "The sky is green here." in live_llm.prompts[-1]
        assert PYTHON_DOC not in live_llm.prompts[-1]

    def test_answer_on_empty_index_uses_general_knowledge(self, client):
        response = client.post("/api/v1/rag/answer", json={"question": "What is python?"})

        assert response.status_code == 200

    def test_generation_failure_is_service_unavailable(self, seeded_client, live_llm):
        live_llm.error = GenerationError("provider down")

        response = seeded_client.post("/api/v1/rag/answer", json={"question": "python?"})

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "RAG_GEN_001"

    def test_generation_timeout_is_service_unavailable(self, seeded_client, live_llm):
        live_llm.error = GenerationTimeoutError("slow provider")

        response = seeded_client.post("/api/v1/rag/answer", json={"question": "python?"})

        assert response.status_code == 503
        assert response.json()["error"]["type"] == "GenerationTimeoutError"

    def test_summarize(self, seeded_client):
        response = seeded_client.post("/api/v1/rag/summarize", json={})

        assert response.status_code == 200
        assert response.json()["summary"] == "model reply"
        assert response.json()["query"] is None

    def test_summarize_empty_index_conflict(self, client):
        assert client.post("/api/v1/rag/summarize", json={"query": "x"}).status_code == 409


class TestConversationEndpoint:
    def test_caller_supplied_history(self, seeded_client, live_llm):
        response = seeded_client.post(
            "/api/v1/rag/conversation",
            json={
                "question": "And its syntax?",
                "chat_history": [{"human": "Tell me about python", "ai": "A language."}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["contextual_query"].startswith("Previous conversation:\nHuman: Tell me about python")
        assert data["contextual_query"].endswith("Current question: And its syntax?")
        assert len(data["sources"]) == 2
        assert "AI: A language." in live_llm.prompts[-1]

    def test_server_side_session(self, seeded_client):
        first = seeded_client.post(
            "/api/v1/rag/conversation",
            json={"question": "Tell me about coffee", "session_id": "s1"},
        ).json()
        second = seeded_client.post(
            "/api/v1/rag/conversation",
            json={"question": "How is it brewed?", "session_id": "s1"},
        ).json()

        assert first["contextual_query"] == "Tell me about coffee"
        assert "Human: Tell me about coffee\nAI: model reply" in second["contextual_query"]

    def test_empty_index_conflict(self, client):
        response = client.post("/api/v1/rag/conversation", json={"question": "hi"})

        assert response.status_code == 409


class TestResetEndpoint:
    def test_delete_clears_index(self, seeded_client):
        response = seeded_client.delete("/api/v1/rag")

        assert response.status_code == 200
        stats = seeded_client.get("/api/v1/rag/stats").json()
        assert stats["document_count"] == 0
        assert stats["has_store"] is False
        assert seeded_client.post("/api/v1/rag/search", json={"query": "python"}).status_code == 409


class TestAgentEndpoints:
    def test_chat_and_memory(self, client):
        response = client.post(
            "/api/v1/agents/chat",
            json={"message": "hello", "session_id": "u1", "preset": "data-analyst"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "response": "model reply",
            "session_id": "u1",
            "preset": "data-analyst",
        }

        memory = client.get(
            "/api/v1/agents/memory", params={"session_id": "u1", "preset": "data-analyst"}
        ).json()
        assert memory["memory"] == "Human: hello\nAI: model reply"

        other_preset = client.get("/api/v1/agents/memory", params={"session_id": "u1"}).json()
        assert other_preset["memory"] == ""

    def test_clear_session(self, client):
        client.post("/api/v1/agents/chat", json={"message": "hello", "session_id": "u2"})

        response = client.delete("/api/v1/agents/session", params={"session_id": "u2"})

        assert response.status_code == 200
        memory = client.get("/api/v1/agents/memory", params={"session_id": "u2"}).json()
        assert memory["memory"] == ""

    def test_unknown_preset_is_rejected(self, client):
        response = client.post(
            "/api/v1/agents/chat",
            json={"message": "hello", "session_id": "u3", "preset": "pirate"},
        )

        assert response.status_code == 400


class TestDemoMode:
    def test_health_reports_demo_mode(self, demo_client):
        assert demo_client.get("/health").json()["demo_mode"] is True

    def test_index_is_seeded(self, demo_client):
        stats = demo_client.get("/api/v1/rag/stats").json()

        assert stats["demo_mode"] is True
        assert stats["document_count"] == 4

    def test_canned_answer(self, demo_client):
        response = demo_client.post("/api/v1/rag/answer", json={"question": "What is RAG?"})

        assert response.status_code == 200
        assert response.json()["answer"].startswith("RAG (Retrieval-Augmented Generation)")

    def test_search_matches_keyword(self, demo_client):
        results = demo_client.post("/api/v1/rag/search", json={"query": "TensorFlow"}).json()

        assert results["results"][0]["metadata"]["title"] == "ML Capabilities"
