import json
import logging

import httpx
import pytest

from chatbot.core.config import Settings
from chatbot.core.gemini import DEFAULT_REPLY, GeminiClient, GeminiError, extract_text


def candidate(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def make_client(handler, api_key="test-key"):
    return GeminiClient(api_key=api_key, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_generate_posts_prompt_and_returns_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["body"] = json.loads(request.content)
        seen["content_type"] = request.headers["content-type"]
        return httpx.Response(200, json=candidate("Paris is the capital of France."))

    reply = await make_client(handler).generate("capital of france?")

    assert reply == "Paris is the capital of France."
    assert seen["url"].path == "/v1beta/models/gemini-1.5-flash-latest:generateContent"
    assert seen["url"].params["key"] == "test-key"
    assert seen["body"] == {"contents": [{"parts": [{"text": "capital of france?"}]}]}
    assert seen["content_type"] == "application/json"


@pytest.mark.asyncio
async def test_empty_candidates_fall_back_to_default_reply():
    def handler(request):
        return httpx.Response(200, json={"candidates": []})

    assert await make_client(handler).generate("hmm") == DEFAULT_REPLY


@pytest.mark.asyncio
async def test_http_error_is_raised_and_logged(caplog):
    def handler(request):
        return httpx.Response(403, json={"error": {"message": "API key not valid"}})

    with caplog.at_level(logging.ERROR):
        with pytest.raises(httpx.HTTPStatusError):
            await make_client(handler).generate("hello")

    assert "API key not valid" in caplog.text


@pytest.mark.asyncio
async def test_missing_api_key_raises_without_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=candidate("never"))

    with pytest.raises(GeminiError):
        await make_client(handler, api_key="").generate("hello")
    assert calls == []


def test_from_settings_uses_configured_model():
    settings = Settings(
        _env_file=None,
        GEMINI_API_KEY="abc",
        GEMINI_MODEL="gemini-2.0-flash",
        GEMINI_API_BASE="https://example.test/v1/",
        GEMINI_TIMEOUT=5,
    )
    client = GeminiClient.from_settings(settings)

    assert client.api_key == "abc"
    assert client.timeout == 5
    assert client.endpoint == "https://example.test/v1/models/gemini-2.0-flash:generateContent"


@pytest.mark.parametrize(
    "data",
    [{}, {"candidates": [{}]}, {"candidates": [{"content": {"parts": []}}]}, {"candidates": None}],
)
def test_extract_text_tolerates_missing_parts(data):
    assert extract_text(data) == ""
