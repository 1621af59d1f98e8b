# devport/llm/openai.py
"""
OpenAI chat-completions provider.
"""
import asyncio
import aiohttp
from typing import Optional
from devport.core.config import settings
from devport.core.exceptions import LLMError


PROVIDER = "openai"


async def call(
    prompt: str,
    system_prompt: str = "",
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
) -> str:
    """
    Call the chat-completions endpoint once.

    Returns:
        The generated text (may be empty)

    Raises:
        LLMError on missing key, HTTP errors or malformed responses
    """
    api_key = settings.llm.openai_api_key
    if not api_key:
        raise LLMError(PROVIDER, "OPENAI_API_KEY not configured")

    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    payload = {
        "model": model or settings.llm.chat_model,
        "messages": messages,
        "max_tokens": max_tokens or settings.llm.max_tokens,
    }

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    url = settings.llm.base_url.rstrip("/") + "/chat/completions"

    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                url,
                json=payload,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=settings.llm.timeout_seconds)
            ) as response:
                if response.status == 429:
                    raise LLMError(PROVIDER, "Rate limited (429)")

                if response.status != 200:
                    text = await response.text()
                    raise LLMError(PROVIDER, f"API error {response.status}: {text[:200]}")

                data = await response.json()
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise LLMError(PROVIDER, f"Request failed: {e}")

    try:
        return data["choices"][0]["message"]["content"] or ""
    except (KeyError, IndexError, TypeError) as e:
        raise LLMError(PROVIDER, f"Failed to parse response: {e}")
