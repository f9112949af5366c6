"""Unit tests for fixture (demo) mode and strategy selection."""

import pytest

from rag_pipeline.adapters.outbound.fixtures import FixtureModelGenerator, KeywordFixtureIndex
from rag_pipeline.adapters.outbound.fixtures.demo_content import (
    DEMO_AGENT_REPLIES,
    DEMO_ANSWERS,
    DEMO_SUMMARY,
)
from rag_pipeline.adapters.outbound.vector_index import InMemoryVectorIndex
from rag_pipeline.composition import build_container
from rag_pipeline.config import Settings
from rag_pipeline.core.domain import Chunk
from rag_pipeline.core.domain.exceptions import InvalidParameterError, NotConfiguredError
from rag_pipeline.core.services import LiveModelGenerator

pytestmark = pytest.mark.unit


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestKeywordFixtureIndex:
    def test_seeded_with_demo_documents(self):
        stats = KeywordFixtureIndex().stats()

        assert stats.document_count == 4
        assert stats.has_store is True
        assert stats.demo_mode is True

    def test_matches_content(self):
        results = KeywordFixtureIndex().search("authentication", 5)
        assert [r.chunk.metadata["title"] for r in results] == ["Security Features"]

    def test_matches_title(self):
        results = KeywordFixtureIndex().search("capabilities", 5)
        assert [r.chunk.metadata["title"] for r in results] == ["ML Capabilities"]

    def test_no_match_returns_first_k(self):
        results = KeywordFixtureIndex().search("zebra crossings", 2)
        assert [r.chunk.parent_id for r in results] == ["demo-1", "demo-2"]

    def test_reset_restores_seed(self):
        index = KeywordFixtureIndex()
        index.add([Chunk(text="extra", parent_id="doc-x", index=0)])
        assert index.size == 5

        index.reset()
        index.reset()
        assert index.size == 4
        assert index.has_store is True

    def test_rejects_k_below_one(self):
        with pytest.raises(InvalidParameterError):
            KeywordFixtureIndex().search("rag", 0)


class TestFixtureModelGenerator:
    def test_keyword_answer(self):
        generator = FixtureModelGenerator()
        assert generator.answer("So, what is RAG exactly?", None) == DEMO_ANSWERS["what is rag"]

    def test_default_answer_mentions_question(self):
        answer = FixtureModelGenerator().answer("Tell me about pricing", "ignored context")
        assert "Tell me about pricing" in answer

    def test_summary_is_canned(self):
        assert FixtureModelGenerator().summarize("anything") == DEMO_SUMMARY

    def test_agent_reply_by_keyword(self):
        reply = FixtureModelGenerator().chat(None, [], "Can you review my code?")
        assert reply == DEMO_AGENT_REPLIES["code"]


class TestStrategySelection:
    def test_no_key_selects_fixture_pair(self, no_api_key):
        container = build_container(_settings())

        assert container.demo_mode is True
        assert isinstance(container.rag.index, KeywordFixtureIndex)
        assert isinstance(container.rag.generator, FixtureModelGenerator)

    @pytest.mark.parametrize("placeholder", ["your-google-api-key-here", "demo-mode"])
    def test_placeholder_keys_count_as_missing(self, placeholder):
        assert build_container(_settings(google_api_key=placeholder)).demo_mode is True

    def test_key_selects_live_pair(self):
        container = build_container(_settings(google_api_key="real-key"))

        assert container.demo_mode is False
        assert isinstance(container.rag.index, InMemoryVectorIndex)
        assert isinstance(container.rag.generator, LiveModelGenerator)
        assert container.agents.generator is container.rag.generator

    def test_no_key_without_fallback_is_not_configured(self, no_api_key):
        container = build_container(_settings(demo_mode_fallback=False))

        assert container.demo_mode is False
        with pytest.raises(NotConfiguredError):
            container.rag.generate_answer("Anything?")
        with pytest.raises(NotConfiguredError):
            container.rag.add_document("Some content.")


class TestDemoService:
    def test_end_to_end_demo_flow(self, no_api_key):
        rag = build_container(_settings()).rag

        assert rag.generate_answer("What is RAG?") == DEMO_ANSWERS["what is rag"]
        result = rag.conversational_rag("authentication options?", session_id="s")
        assert result.answer == DEMO_ANSWERS["authentication"]
        assert rag.summarize() == DEMO_SUMMARY

        rag.add_document("Custom note about widgets.")
        assert rag.get_stats().document_count == 5
        rag.reset()
        assert rag.get_stats().document_count == 4

    def test_follow_up_turns_keep_keyword_matched_sources(self, no_api_key):
        rag = build_container(_settings()).rag

        first = rag.conversational_rag("Security Features", session_id="s")
        second = rag.conversational_rag("Security Features", session_id="s")

        assert second.contextual_query.startswith("Previous conversation:")
        assert [r.chunk.metadata["title"] for r in first.sources] == ["Security Features"]
        assert [r.chunk.metadata["title"] for r in second.sources] == ["Security Features"]

    def test_keywords_take_precedence_over_query(self):
        results = KeywordFixtureIndex().search(
            "Previous conversation:\nHuman: hi\nAI: hello\n\nCurrent question: tensorflow",
            5,
            keywords="tensorflow",
        )

        assert [r.chunk.metadata["title"] for r in results] == ["ML Capabilities"]
