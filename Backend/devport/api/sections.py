# devport/api/sections.py
"""
CreativePort section routes.
"""
from fastapi import APIRouter, Depends

from devport.api.deps import get_portfolio_user, owned_section
from devport.core.exceptions import NotFoundError
from devport.models import MessageResponse, PortfolioUser, Section, SectionUpdate
from devport.storage import PortfolioStorage, get_portfolio_storage


router = APIRouter(prefix="/api/sections", tags=["Sections"])


@router.put("/{section_id}", response_model=Section)
async def update_section(
    section_id: int,
    payload: SectionUpdate,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_section(storage, section_id, user.id)
    section = await storage.update_section(section_id, payload.changes())
    if not section:
        raise NotFoundError("Section", section_id)
    return section


@router.delete("/{section_id}", response_model=MessageResponse)
async def delete_section(
    section_id: int,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_section(storage, section_id, user.id)
    await storage.delete_section(section_id)
    return MessageResponse(message="Section deleted successfully")
