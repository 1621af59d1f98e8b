# devport/api/user.py
"""
DevStudio acting user.
"""
from fastapi import APIRouter, Depends

from devport.api.deps import get_current_user_id
from devport.core.exceptions import NotFoundError
from devport.models import UserPublic
from devport.storage import PlaygroundStorage, get_playground_storage


router = APIRouter(prefix="/api/user", tags=["User"])


@router.get("", response_model=UserPublic)
async def get_user(
    user_id: int = Depends(get_current_user_id),
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    """The demo user, without its password."""
    user = await storage.get_user(user_id)
    if not user:
        raise NotFoundError("User", user_id)
    return UserPublic.model_validate(user.model_dump())
