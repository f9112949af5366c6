"""Embedding adapters."""

from .gemini_embeddings import GeminiEmbeddings
from .sentence_transformer_embeddings import SentenceTransformerEmbeddings

__all__ = ["GeminiEmbeddings", "SentenceTransformerEmbeddings"]
