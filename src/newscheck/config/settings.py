"""Application settings and configuration management."""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from ..infrastructure.llm.client import (
    DEFAULT_ALTERNATE_URL,
    DEFAULT_MODEL,
    DEFAULT_PRIMARY_URL,
)


class Settings:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Load environment variables from .env file."""
        load_dotenv()

    @property
    def gemini_api_key(self) -> Optional[str]:
        """Gemini API key for remote analysis."""
        return os.getenv("GEMINI_API_KEY")

    @property
    def gemini_model(self) -> str:
        """Gemini model identifier."""
        return os.getenv("GEMINI_MODEL", DEFAULT_MODEL)

    @property
    def gemini_primary_url(self) -> str:
        """Primary generateContent endpoint; may contain a {model} placeholder."""
        return os.getenv("GEMINI_PRIMARY_URL", DEFAULT_PRIMARY_URL)

    @property
    def gemini_alternate_url(self) -> str:
        """Alternate generation endpoint using bearer auth."""
        return os.getenv("GEMINI_ALTERNATE_URL", DEFAULT_ALTERNATE_URL)

    @property
    def http_timeout_seconds(self) -> float:
        """Per-request HTTP timeout in seconds."""
        return float(os.getenv("HTTP_TIMEOUT_SECONDS", "5.0"))

    @property
    def llm_temperature(self) -> float:
        return float(os.getenv("LLM_TEMPERATURE", "0.1"))

    @property
    def llm_max_output_tokens(self) -> int:
        return int(os.getenv("LLM_MAX_OUTPUT_TOKENS", "2048"))

    @property
    def log_level(self) -> str:
        """Root logging level name."""
        return os.getenv("LOG_LEVEL", "WARNING").upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()
