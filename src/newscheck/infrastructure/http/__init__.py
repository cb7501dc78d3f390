"""HTTP client infrastructure."""

from .client import DEFAULT_TIMEOUT_SECONDS, HTTPClientFactory

__all__ = ["DEFAULT_TIMEOUT_SECONDS", "HTTPClientFactory"]
