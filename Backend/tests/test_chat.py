# tests/test_chat.py
"""DevStudio chat passthrough with a substituted completion call."""
import pytest

from devport.core.constants import CHAT_FALLBACK_REPLY, CHAT_SYSTEM_PROMPT
from devport.core.exceptions import LLMError
from devport.llm import get_completion
from devport.main import app


class FakeCompletion:
    def __init__(self, reply="Use a list comprehension.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def __call__(self, prompt, system_prompt="", model=None, max_tokens=None):
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt})
        if self.error:
            raise self.error
        return self.reply


def use_completion(fake):
    app.dependency_overrides[get_completion] = lambda: fake
    return fake


@pytest.mark.anyio
async def test_chat_round_trip(client, project):
    fake = use_completion(FakeCompletion())
    url = f"/api/projects/{project['id']}/chat"

    response = await client.post(url, json={"content": "How do I map a list?"})
    assert response.status_code == 200
    data = response.json()
    assert data["userMessage"]["role"] == "user"
    assert data["userMessage"]["content"] == "How do I map a list?"
    assert data["assistantMessage"]["role"] == "assistant"
    assert data["assistantMessage"]["content"] == "Use a list comprehension."

    assert fake.calls == [{"prompt": "How do I map a list?", "system_prompt": CHAT_SYSTEM_PROMPT}]

    history = (await client.get(url)).json()
    assert [m["role"] for m in history] == ["user", "assistant"]


@pytest.mark.anyio
async def test_empty_reply_uses_fallback(client, project):
    use_completion(FakeCompletion(reply=""))
    response = await client.post(f"/api/projects/{project['id']}/chat", json={"content": "hello"})
    assert response.status_code == 200
    assert response.json()["assistantMessage"]["content"] == CHAT_FALLBACK_REPLY


@pytest.mark.anyio
async def test_provider_failure_keeps_user_message(client, project):
    use_completion(FakeCompletion(error=LLMError("openai", "Rate limited (429)")))
    url = f"/api/projects/{project['id']}/chat"

    response = await client.post(url, json={"content": "hello"})
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to process chat message"}

    history = (await client.get(url)).json()
    assert len(history) == 1
    assert history[0]["role"] == "user"


@pytest.mark.anyio
async def test_blank_message_rejected(client, project):
    fake = use_completion(FakeCompletion())
    response = await client.post(f"/api/projects/{project['id']}/chat", json={"content": "   "})
    assert response.status_code == 400
    assert fake.calls == []


@pytest.mark.anyio
async def test_chat_missing_project(client):
    use_completion(FakeCompletion())
    response = await client.post("/api/projects/999/chat", json={"content": "hi"})
    assert response.status_code == 404
