# devport/api/chat.py
"""
DevStudio AI chat routes.
"""
from typing import List

from fastapi import APIRouter, Depends

from devport.api.deps import require_project
from devport.core.exceptions import DevPortError, LLMError
from devport.core.logging import log
from devport.llm import Completion, get_completion
from devport.models import ChatExchange, ChatMessage, ChatRequest, Project
from devport.services.chat import send_chat_message
from devport.storage import PlaygroundStorage, get_playground_storage


router = APIRouter(prefix="/api/projects/{project_id}/chat", tags=["Chat"])


@router.get("", response_model=List[ChatMessage])
async def list_chat_messages(
    project: Project = Depends(require_project),
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    """Chat history, oldest first."""
    return await storage.get_chat_messages_by_project_id(project.id)


@router.post("", response_model=ChatExchange)
async def post_chat_message(
    payload: ChatRequest,
    project: Project = Depends(require_project),
    storage: PlaygroundStorage = Depends(get_playground_storage),
    complete: Completion = Depends(get_completion),
):
    try:
        return await send_chat_message(storage, project.id, payload.content, complete)
    except LLMError as e:
        log("ERROR", f"Chat completion failed: {e.message}", project_id=project.id)
        raise DevPortError("Failed to process chat message")
