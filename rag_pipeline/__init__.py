"""Knowledge RAG service: in-memory retrieval-augmented generation."""

__version__ = "0.1.0"
