"""Ports: abstract interfaces the core depends on."""

from .answer_generator_port import AnswerGenerator
from .embedding_port import EmbeddingPort
from .knowledge_index_port import KnowledgeIndexPort
from .llm_port import LLMPort

__all__ = ["AnswerGenerator", "EmbeddingPort", "KnowledgeIndexPort", "LLMPort"]
