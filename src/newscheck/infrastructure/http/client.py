"""HTTP client factory with sensible defaults."""

from typing import Optional

from httpx import AsyncBaseTransport, AsyncClient, Limits, Timeout

DEFAULT_TIMEOUT_SECONDS = 5.0


class HTTPClientFactory:
    """Factory for creating HTTP clients with consistent configuration."""

    @staticmethod
    def create(
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[AsyncBaseTransport] = None,
    ) -> AsyncClient:
        """Create a new AsyncClient with sensible defaults.

        Args:
            timeout_seconds: Per-request timeout in seconds.
            transport: Optional transport override, mainly for tests.

        Returns:
            Configured AsyncClient instance. The caller owns it and should
            close it, ideally with ``async with``.
        """
        timeout = Timeout(timeout_seconds)
        limits = Limits(max_keepalive_connections=5, max_connections=10)
        return AsyncClient(timeout=timeout, limits=limits, transport=transport)
