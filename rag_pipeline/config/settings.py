"""Configuration management for the knowledge RAG service."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Values shipped in sample .env files that must not count as a real key.
PLACEHOLDER_API_KEYS = frozenset({"your-google-api-key-here", "demo-mode"})


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets pasted into environment variables or mounted from a secret store
    may carry a BOM that breaks HTTP header encoding.
    """
    if not value:
        return value
    return value.lstrip("﻿").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google AI API
    google_api_key: str = ""

    @field_validator("google_api_key", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Model settings
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.3
    agent_temperature: float = 0.7
    llm_requests_per_minute: int | None = 15
    embedding_requests_per_minute: int | None = 60
    request_timeout_seconds: float = 60.0

    # Embeddings
    embedding_backend: Literal["gemini", "local"] = "gemini"
    embedding_model: str = "gemini-embedding-001"
    local_embedding_model: str = "all-MiniLM-L6-v2"

    # RAG settings
    chunk_size: int = 1000
    chunk_overlap: int = 200
    top_k_results: int = 5
    summary_top_k: int = 10
    conversation_window: int = 3

    # Fixture (demo) mode
    demo_mode_fallback: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def has_llm_credentials(self) -> bool:
        """True when a usable Google API key is configured."""
        key = self.google_api_key
        return bool(key) and key not in PLACEHOLDER_API_KEYS

    @property
    def use_demo_mode(self) -> bool:
        """Whether the fixture index and generator replace the live stack."""
        return not self.has_llm_credentials and self.demo_mode_fallback
