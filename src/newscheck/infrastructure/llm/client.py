"""Remote generative-model client."""

import logging
from typing import Any, Literal, Optional

from httpx import AsyncClient, HTTPError, HTTPStatusError
from pydantic import BaseModel

from ..http.client import DEFAULT_TIMEOUT_SECONDS, HTTPClientFactory

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_PRIMARY_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
)
DEFAULT_ALTERNATE_URL = "https://ai.google.dev/api/generate"


class RemoteResponse(BaseModel):
    """Tagged outcome of a remote generation call.

    ``kind`` is ``"remote"`` with the generated ``text`` and the ``endpoint``
    that produced it, or ``"fallback"`` with a ``reason`` when every endpoint
    failed and the caller should fall back to local analysis.
    """

    kind: Literal["remote", "fallback"]
    text: Optional[str] = None
    endpoint: Optional[Literal["primary", "alternate"]] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == "remote"


class RemoteAnalysisClient:
    """Client for the Gemini generation endpoints.

    Tries the primary ``generateContent`` endpoint (API key as a query
    parameter) and then an alternate endpoint (bearer token). Failures of
    either kind are logged and reported through ``RemoteResponse``; the
    client itself never raises.

    Usage:
        ```python
        client = RemoteAnalysisClient(api_key="your-key")
        response = await client.generate(prompt)
        if response.ok:
            print(response.text)
        ```
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        primary_url: str = DEFAULT_PRIMARY_URL,
        alternate_url: str = DEFAULT_ALTERNATE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        temperature: float = 0.1,
        max_output_tokens: int = 2048,
        http_client: Optional[AsyncClient] = None,
    ) -> None:
        """Initialize the remote client.

        Args:
            api_key: Gemini API key. Not validated; a bad key surfaces as a
                failed request.
            model: Model identifier.
            primary_url: Primary endpoint; ``{model}`` is substituted.
            alternate_url: Alternate endpoint.
            timeout_seconds: Timeout applied to each request.
            temperature: Sampling temperature.
            max_output_tokens: Upper bound on generated tokens.
            http_client: Optional shared client. When omitted a client is
                opened and closed per ``generate`` call.
        """
        self.api_key = api_key
        self.model = model
        self.primary_url = primary_url.replace("{model}", model)
        self.alternate_url = alternate_url
        self.timeout_seconds = float(timeout_seconds)
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._client = http_client

        if not api_key:
            logger.warning("No Gemini API key configured; remote analysis will fail over to heuristics.")

    def _primary_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "topK": 1,
                "topP": 1,
                "maxOutputTokens": self.max_output_tokens,
            },
        }

    def _alternate_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "prompt": prompt,
            "model": self.model,
            "max_tokens": self.max_output_tokens,
            "temperature": self.temperature,
        }

    @staticmethod
    def _primary_text(data: Any) -> Optional[str]:
        """Pull generated text from candidates[0].content.parts[0].text."""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) and text else None

    @staticmethod
    def _alternate_text(data: Any) -> Optional[str]:
        """Pull generated text from the first of response, text or output."""
        if not isinstance(data, dict):
            return None
        for key in ("response", "text", "output"):
            text = data.get(key)
            if isinstance(text, str) and text:
                return text
        return None

    async def _try_primary(self, client: AsyncClient, prompt: str) -> Optional[str]:
        try:
            resp = await client.post(
                self.primary_url,
                params={"key": self.api_key or ""},
                json=self._primary_payload(prompt),
                timeout=self.timeout_seconds,
            )
            resp.raise_for_status()
            data = resp.json()
        except HTTPStatusError as e:
            logger.warning("Primary endpoint returned HTTP %s", e.response.status_code)
            return None
        except HTTPError as e:
            logger.warning("Primary endpoint request failed: %s", type(e).__name__)
            return None
        except ValueError:
            logger.warning("Primary endpoint returned a non-JSON body")
            return None

        text = self._primary_text(data)
        if text is None:
            logger.warning("Primary endpoint response had no candidate text")
        return text

    async def _try_alternate(self, client: AsyncClient, prompt: str) -> Optional[str]:
        headers = {"Authorization": f"Bearer {self.api_key or ''}"}
        try:
            resp = await client.post(
                self.alternate_url,
                headers=headers,
                json=self._alternate_payload(prompt),
                timeout=self.timeout_seconds,
            )
            resp.raise_for_status()
            data = resp.json()
        except HTTPStatusError as e:
            logger.warning("Alternate endpoint returned HTTP %s", e.response.status_code)
            return None
        except HTTPError as e:
            logger.warning("Alternate endpoint request failed: %s", type(e).__name__)
            return None
        except ValueError:
            logger.warning("Alternate endpoint returned a non-JSON body")
            return None

        text = self._alternate_text(data)
        if text is None:
            logger.warning("Alternate endpoint response had no text field")
        return text

    async def _generate_with(self, client: AsyncClient, prompt: str) -> RemoteResponse:
        text = await self._try_primary(client, prompt)
        if text is not None:
            return RemoteResponse(kind="remote", text=text, endpoint="primary")

        logger.info("Primary endpoint failed, trying alternate endpoint")
        text = await self._try_alternate(client, prompt)
        if text is not None:
            return RemoteResponse(kind="remote", text=text, endpoint="alternate")

        return RemoteResponse(kind="fallback", reason="remote_unavailable")

    async def generate(self, prompt: str) -> RemoteResponse:
        """Send a prompt to the primary endpoint, then the alternate one.

        Args:
            prompt: Full prompt text.

        Returns:
            RemoteResponse tagged ``remote`` or ``fallback``.
        """
        if self._client is not None:
            return await self._generate_with(self._client, prompt)

        async with HTTPClientFactory.create(self.timeout_seconds) as client:
            return await self._generate_with(client, prompt)
