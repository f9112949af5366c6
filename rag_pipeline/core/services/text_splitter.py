"""Recursive character splitting for document ingestion.

Chunks are exact slices of the source text, so joining the first chunk with
every later chunk minus its leading ``overlap_size`` characters reproduces the
original content.
"""

import re
from collections.abc import Iterator

from ..domain.exceptions import InvalidChunkingError

_SENTENCE_END = re.compile(r"[.!?]\s")
_WHITESPACE = re.compile(r"\s")


def _validate(max_chunk_size: int, overlap_size: int) -> None:
    if max_chunk_size <= 0:
        raise InvalidChunkingError(
            "max_chunk_size must be positive",
            context={"max_chunk_size": max_chunk_size},
        )
    if overlap_size < 0:
        raise InvalidChunkingError(
            "overlap_size must be non-negative",
            context={"overlap_size": overlap_size},
        )
    if overlap_size >= max_chunk_size:
        raise InvalidChunkingError(
            "overlap_size must be less than max_chunk_size",
            context={"max_chunk_size": max_chunk_size, "overlap_size": overlap_size},
        )


def _find_break(content: str, start: int, end: int, min_advance: int) -> int:
    """Return the exclusive end of the best boundary in ``content[start:end]``.

    Falls back to a hard cut at ``end`` when no separator lies at least
    ``min_advance`` characters into the window.
    """
    floor = start + min_advance

    paragraph = content.rfind("\n\n", start, end)
    if paragraph != -1 and paragraph + 2 >= floor:
        return paragraph + 2

    window = content[start:end]
    for pattern in (_SENTENCE_END, _WHITESPACE):
        last = None
        for match in pattern.finditer(window):
            last = match
        if last is not None and start + last.end() >= floor:
            return start + last.end()

    return end


def _iter_chunks(content: str, max_chunk_size: int, overlap_size: int) -> Iterator[str]:
    min_advance = max(overlap_size + 1, max_chunk_size // 2)
    start = 0
    length = len(content)

    while length - start > max_chunk_size:
        end = _find_break(content, start, start + max_chunk_size, min_advance)
        yield content[start:end]
        start = end - overlap_size

    if length:
        yield content[start:]


def split_text(content: str, max_chunk_size: int, overlap_size: int) -> Iterator[str]:
    """Split ``content`` into overlapping chunks of at most ``max_chunk_size``.

    Boundaries are preferred in this order: paragraph break, sentence end,
    whitespace, hard cut. Consecutive chunks share exactly ``overlap_size``
    characters.

    Parameters are validated when this function is called; the chunks
    themselves are produced lazily.

    Args:
        content: Text to split. Empty text yields no chunks.
        max_chunk_size: Upper bound on chunk length in characters.
        overlap_size: Characters shared by consecutive chunks.

    Returns:
        A finite iterator of chunk strings.

    Raises:
        InvalidChunkingError: If the parameters cannot make progress.
    """
    _validate(max_chunk_size, overlap_size)
    return _iter_chunks(content, max_chunk_size, overlap_size)


class TextSplitter:
    """Splitter bound to a validated chunk size and overlap."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200) -> None:
        _validate(chunk_size, chunk_overlap)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def split(self, content: str) -> list[str]:
        return list(_iter_chunks(content, self.chunk_size, self.chunk_overlap))

    def iter_split(self, content: str) -> Iterator[str]:
        return _iter_chunks(content, self.chunk_size, self.chunk_overlap)
