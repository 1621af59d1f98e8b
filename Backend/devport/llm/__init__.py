# devport/llm/__init__.py
"""
Hosted language-model access.

`Completion` is the call signature the chat service depends on; the
OpenAI provider implements it and tests substitute their own.
"""
from typing import Awaitable, Callable

from . import openai

Completion = Callable[..., Awaitable[str]]


def get_completion() -> Completion:
    """FastAPI dependency returning the active provider call."""
    return openai.call


__all__ = ["Completion", "get_completion", "openai"]
