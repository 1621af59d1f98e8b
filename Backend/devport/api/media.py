# devport/api/media.py
"""
CreativePort media library.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from devport.api.deps import get_portfolio_user
from devport.core.exceptions import AccessDeniedError, NotFoundError
from devport.models import Media, MessageResponse, PortfolioUser
from devport.services.media import remove_upload, save_upload
from devport.storage import PortfolioStorage, get_portfolio_storage


router = APIRouter(prefix="/api/media", tags=["Media"])


@router.post("", response_model=Media, status_code=status.HTTP_201_CREATED)
async def upload_media(
    file: Optional[UploadFile] = File(default=None),
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    """Store one uploaded file (multipart field `file`) and record it."""
    data = await save_upload(file)
    try:
        return await storage.create_media(user.id, data)
    except Exception:
        remove_upload(data.filename)
        raise


@router.get("", response_model=List[Media])
async def list_media(
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    return await storage.get_user_media(user.id)


@router.delete("/{media_id}", response_model=MessageResponse)
async def delete_media(
    media_id: int,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    media = await storage.get_media(media_id)
    if not media:
        raise NotFoundError("Media", media_id)
    if media.user_id != user.id:
        raise AccessDeniedError()
    await storage.delete_media(media_id)
    remove_upload(media.filename)
    return MessageResponse(message="Media deleted successfully")
