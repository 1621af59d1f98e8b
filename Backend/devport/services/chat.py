# devport/services/chat.py
"""
AI chat passthrough for the DevStudio sidebar.

One user turn in, one assistant turn out. The user message is stored
before the provider is called, so a failed call still leaves it in the
history.
"""
from devport.core.constants import ChatRole, CHAT_FALLBACK_REPLY, CHAT_SYSTEM_PROMPT
from devport.core.config import settings
from devport.core.logging import log
from devport.llm import Completion
from devport.models import ChatExchange
from devport.storage import PlaygroundStorage


async def send_chat_message(
    storage: PlaygroundStorage,
    project_id: int,
    content: str,
    complete: Completion,
) -> ChatExchange:
    user_message = await storage.create_chat_message(project_id, ChatRole.USER, content)

    log("CHAT", f"Forwarding {len(content)} chars to {settings.llm.chat_model}", project_id=project_id)
    reply = await complete(
        content,
        system_prompt=CHAT_SYSTEM_PROMPT,
        model=settings.llm.chat_model,
        max_tokens=settings.llm.max_tokens,
    )

    assistant_message = await storage.create_chat_message(
        project_id,
        ChatRole.ASSISTANT,
        reply or CHAT_FALLBACK_REPLY,
    )
    return ChatExchange(user_message=user_message, assistant_message=assistant_message)
