# devport/api/pages.py
"""
CreativePort page routes, including the section list of a page.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from devport.api.deps import get_portfolio_user, owned_page
from devport.core.exceptions import NotFoundError
from devport.models import (
    MessageResponse,
    Page,
    PageUpdate,
    PortfolioUser,
    Section,
    SectionCreate,
    SectionReorder,
)
from devport.storage import PortfolioStorage, get_portfolio_storage


router = APIRouter(prefix="/api/pages", tags=["Pages"])


@router.put("/{page_id}", response_model=Page)
async def update_page(
    page_id: int,
    payload: PageUpdate,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_page(storage, page_id, user.id)
    page = await storage.update_page(page_id, payload.changes())
    if not page:
        raise NotFoundError("Page", page_id)
    return page


@router.delete("/{page_id}", response_model=MessageResponse)
async def delete_page(
    page_id: int,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_page(storage, page_id, user.id)
    await storage.delete_page(page_id)
    return MessageResponse(message="Page deleted successfully")


@router.get("/{page_id}/sections", response_model=List[Section])
async def list_sections(
    page_id: int,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_page(storage, page_id, user.id)
    return await storage.get_page_sections(page_id)


@router.post("/{page_id}/sections", response_model=Section, status_code=status.HTTP_201_CREATED)
async def create_section(
    page_id: int,
    payload: SectionCreate,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_page(storage, page_id, user.id)
    return await storage.create_section(page_id, payload)


@router.post("/{page_id}/sections/reorder", response_model=MessageResponse)
async def reorder_sections(
    page_id: int,
    payload: SectionReorder,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    """Set each listed section's order to its index in `sectionIds`."""
    await owned_page(storage, page_id, user.id)
    await storage.reorder_sections(page_id, payload.section_ids)
    return MessageResponse(message="Sections reordered successfully")
