# tests/test_openai_provider.py
"""OpenAI provider error mapping, with the HTTP session replaced."""
import json

import pytest

from devport.core.config import settings
from devport.core.exceptions import LLMError
from devport.llm import openai


class FakeResponse:
    def __init__(self, status=200, body=None, text=""):
        self.status = status
        self.body = body
        self._text = text

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def json(self):
        if self.body is None:
            raise json.JSONDecodeError("Expecting value", self._text, 0)
        return self.body

    async def text(self):
        return self._text


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.requests = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def post(self, url, **kwargs):
        self.requests.append((url, kwargs))
        return self.response


@pytest.fixture
def use_response(monkeypatch):
    monkeypatch.setattr(settings.llm, "openai_api_key", "sk-test")

    def install(response):
        session = FakeSession(response)
        monkeypatch.setattr(openai.aiohttp, "ClientSession", lambda: session)
        return session

    return install


@pytest.mark.anyio
async def test_returns_completion_text(use_response):
    session = use_response(FakeResponse(body={"choices": [{"message": {"content": "hi"}}]}))
    assert await openai.call("hello", system_prompt="be brief") == "hi"

    url, kwargs = session.requests[0]
    assert url.endswith("/chat/completions")
    assert kwargs["json"]["messages"][0] == {"role": "system", "content": "be brief"}


@pytest.mark.anyio
async def test_malformed_json_body_is_llm_error(use_response):
    use_response(FakeResponse(body=None, text="<html>gateway</html>"))
    with pytest.raises(LLMError):
        await openai.call("hello")


@pytest.mark.anyio
async def test_non_200_is_llm_error(use_response):
    use_response(FakeResponse(status=502, text="bad gateway"))
    with pytest.raises(LLMError):
        await openai.call("hello")


@pytest.mark.anyio
async def test_missing_key_is_llm_error(monkeypatch):
    monkeypatch.setattr(settings.llm, "openai_api_key", None)
    with pytest.raises(LLMError):
        await openai.call("hello")


@pytest.mark.anyio
async def test_malformed_reply_becomes_chat_failure(client, project, use_response):
    use_response(FakeResponse(body=None, text="not json"))
    response = await client.post(f"/api/projects/{project['id']}/chat", json={"content": "hi"})
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to process chat message"}
