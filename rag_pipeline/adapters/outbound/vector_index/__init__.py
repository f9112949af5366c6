"""Vector index adapters."""

from .in_memory_index import InMemoryVectorIndex

__all__ = ["InMemoryVectorIndex"]
