"""Unit tests for the recursive text splitter."""

import random
from collections.abc import Iterator

import pytest

from rag_pipeline.core.domain.exceptions import ConfigurationError, InvalidChunkingError
from rag_pipeline.core.services.text_splitter import TextSplitter, split_text

pytestmark = pytest.mark.unit

WORDS = ["alpha", "beta", "gamma", "delta", "river", "stone", "lamp", "model", "vector", "index"]


def _sample_text(seed: int, paragraphs: int = 6) -> str:
    rng = random.Random(seed)
    parts = []
    for _ in range(paragraphs):
        sentences = []
        for _ in range(rng.randint(2, 6)):
            words = [rng.choice(WORDS) for _ in range(rng.randint(3, 14))]
            sentences.append(" ".join(words).capitalize() + rng.choice([".", "!", "?"]))
        parts.append(" ".join(sentences))
    return "\n\n".join(parts)


def _reassemble(chunks: list[str], overlap: int) -> str:
    return chunks[0] + "".join(chunk[overlap:] for chunk in chunks[1:])


class TestSplitTextBasics:
    def test_short_content_is_single_chunk(self):
        content = "The sky is blue. Grass is green."
        assert list(split_text(content, 1000, 200)) == [content]

    def test_content_equal_to_size_is_single_chunk(self):
        content = "x" * 50
        assert list(split_text(content, 50, 10)) == [content]

    def test_empty_content_yields_nothing(self):
        assert list(split_text("", 100, 10)) == []

    def test_returns_lazy_iterator(self):
        assert isinstance(split_text("abc", 10, 2), Iterator)

    def test_two_chunk_split_at_whitespace(self):
        content = "a" * 30 + " " + "b" * 40
        chunks = list(split_text(content, 50, 10))

        assert chunks == [content[:31], content[21:]]


class TestSplitTextValidation:
    @pytest.mark.parametrize(
        "size,overlap",
        [(100, 100), (100, 150), (0, 0), (-5, 0), (100, -1)],
    )
    def test_invalid_parameters_raise_eagerly(self, size, overlap):
        """Errors surface at call time, before any chunk is requested."""
        with pytest.raises(InvalidChunkingError):
            split_text("some content", size, overlap)

    def test_invalid_chunking_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            TextSplitter(chunk_size=10, chunk_overlap=10)


class TestBoundaryPreference:
    def test_prefers_paragraph_break(self):
        content = "A" * 60 + "\n\n" + "B" * 60
        chunks = list(split_text(content, 100, 10))

        assert chunks[0] == "A" * 60 + "\n\n"

    def test_prefers_sentence_end_over_whitespace(self):
        first = "Alpha beta gamma delta epsilon zeta. "
        content = first + "Eta theta iota kappa lambda mu nu xi omicron pi rho"
        chunks = list(split_text(content, 60, 5))

        assert chunks[0] == first

    def test_hard_cut_without_separators(self):
        content = "x" * 250
        chunks = list(split_text(content, 100, 20))

        assert [len(c) for c in chunks] == [100, 100, 90]

    def test_boundary_too_early_is_ignored(self):
        """A separator inside the first half of the window would stall progress."""
        content = "ab " + "c" * 200
        chunks = list(split_text(content, 100, 10))

        assert chunks[0] == content[:100]


class TestSplitTextProperties:
    @pytest.mark.parametrize("seed", range(8))
    @pytest.mark.parametrize("size,overlap", [(50, 10), (120, 30), (200, 0), (300, 149)])
    def test_chunk_size_overlap_and_round_trip(self, seed, size, overlap):
        content = _sample_text(seed)
        chunks = list(split_text(content, size, overlap))

        assert all(len(chunk) <= size for chunk in chunks)
        if overlap:
            for previous, current in zip(chunks, chunks[1:], strict=False):
                assert previous[-overlap:] == current[:overlap]
        assert _reassemble(chunks, overlap) == content

    def test_splitter_class_matches_function(self):
        content = _sample_text(42)
        splitter = TextSplitter(chunk_size=80, chunk_overlap=15)

        assert splitter.split(content) == list(split_text(content, 80, 15))
