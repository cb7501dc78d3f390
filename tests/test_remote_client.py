import json

import httpx
import pytest

from newscheck.infrastructure.http.client import HTTPClientFactory
from newscheck.infrastructure.llm.client import RemoteAnalysisClient

PRIMARY_HOST = "generativelanguage.googleapis.com"
ALTERNATE_HOST = "ai.google.dev"


def gemini_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def make_client(handler, **kwargs):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RemoteAnalysisClient(api_key="test-key", http_client=http_client, **kwargs)


@pytest.mark.asyncio
async def test_primary_success():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=gemini_body("primary text"))

    response = await make_client(handler).generate("hello")

    assert response.ok
    assert response.kind == "remote"
    assert response.text == "primary text"
    assert response.endpoint == "primary"
    assert len(seen) == 1

    request = seen[0]
    assert request.url.host == PRIMARY_HOST
    assert request.url.path.endswith("/models/gemini-1.5-flash:generateContent")
    assert request.url.params["key"] == "test-key"
    body = json.loads(request.content)
    assert body["contents"][0]["parts"][0]["text"] == "hello"
    assert body["generationConfig"] == {
        "temperature": 0.1,
        "topK": 1,
        "topP": 1,
        "maxOutputTokens": 2048,
    }


@pytest.mark.asyncio
async def test_alternate_used_after_primary_error():
    seen = []

    def handler(request):
        seen.append(request)
        if request.url.host == PRIMARY_HOST:
            return httpx.Response(500, json={"error": "boom"})
        return httpx.Response(200, json={"response": "alt text", "text": "ignored"})

    response = await make_client(handler, model="gemini-test").generate("hello")

    assert response.ok
    assert response.text == "alt text"
    assert response.endpoint == "alternate"

    alternate = seen[1]
    assert alternate.url.host == ALTERNATE_HOST
    assert alternate.headers["Authorization"] == "Bearer test-key"
    assert "key" not in alternate.url.params
    body = json.loads(alternate.content)
    assert body == {
        "prompt": "hello",
        "model": "gemini-test",
        "max_tokens": 2048,
        "temperature": 0.1,
    }


@pytest.mark.asyncio
async def test_primary_without_candidates_falls_through():
    def handler(request):
        if request.url.host == PRIMARY_HOST:
            return httpx.Response(200, json={"candidates": []})
        return httpx.Response(200, json={"output": "from output"})

    response = await make_client(handler).generate("hello")
    assert response.text == "from output"
    assert response.endpoint == "alternate"


@pytest.mark.asyncio
async def test_both_endpoints_failing_returns_fallback():
    def handler(request):
        if request.url.host == PRIMARY_HOST:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(503)

    response = await make_client(handler).generate("hello")
    assert not response.ok
    assert response.kind == "fallback"
    assert response.reason == "remote_unavailable"
    assert response.text is None


@pytest.mark.asyncio
async def test_timeouts_are_failures():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    response = await make_client(handler, timeout_seconds=0.5).generate("hello")
    assert response.kind == "fallback"


@pytest.mark.asyncio
async def test_non_json_and_empty_bodies_are_failures():
    def handler(request):
        if request.url.host == PRIMARY_HOST:
            return httpx.Response(200, text="<html>not json</html>")
        return httpx.Response(200, json={"response": ""})

    response = await make_client(handler).generate("hello")
    assert response.kind == "fallback"


@pytest.mark.asyncio
async def test_missing_api_key_still_attempts_requests():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(401)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = RemoteAnalysisClient(api_key=None, http_client=http_client)
    response = await client.generate("hello")

    assert response.kind == "fallback"
    assert len(calls) == 2


def test_custom_primary_url_substitutes_model():
    client = RemoteAnalysisClient(
        api_key="k",
        model="gemini-pro",
        primary_url="https://example.test/{model}:generate",
    )
    assert client.primary_url == "https://example.test/gemini-pro:generate"


@pytest.mark.asyncio
async def test_http_client_factory_defaults():
    client = HTTPClientFactory.create(3.0)
    try:
        assert isinstance(client, httpx.AsyncClient)
        assert client.timeout.read == 3.0
    finally:
        await client.aclose()


def test_primary_url_with_other_braces_is_kept_verbatim():
    client = RemoteAnalysisClient(
        api_key="k",
        model="gemini-pro",
        primary_url="https://example.test/{region}/{model}:generate?{0}",
    )
    assert client.primary_url == "https://example.test/{region}/gemini-pro:generate?{0}"
