# devport/api/portfolios.py
"""
CreativePort portfolio routes.

Every route here runs as the forwarded user and only touches that user's
portfolios. A missing portfolio is 404, someone else's is 403.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from devport.api.deps import get_portfolio_user, owned_portfolio
from devport.core.exceptions import NotFoundError
from devport.models import (
    MessageResponse,
    Page,
    PageCreate,
    PageWithSections,
    Portfolio,
    PortfolioCreate,
    PortfolioDetail,
    PortfolioUpdate,
    PortfolioUser,
)
from devport.services.templates import PORTFOLIO_TEMPLATES, PortfolioTemplate, seed_portfolio
from devport.storage import PortfolioStorage, get_portfolio_storage


router = APIRouter(prefix="/api/portfolios", tags=["Portfolios"])


async def build_detail(storage: PortfolioStorage, portfolio: Portfolio) -> PortfolioDetail:
    """Portfolio with its pages and each page's sections, all in order."""
    pages = []
    for page in await storage.get_portfolio_pages(portfolio.id):
        sections = await storage.get_page_sections(page.id)
        pages.append(PageWithSections(**page.model_dump(), sections=sections))
    return PortfolioDetail(**portfolio.model_dump(), pages=pages)


@router.get("", response_model=List[Portfolio])
async def list_portfolios(
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    return await storage.get_user_portfolios(user.id)


@router.post("", response_model=Portfolio, status_code=status.HTTP_201_CREATED)
async def create_portfolio(
    payload: PortfolioCreate,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    """Create a portfolio with a home page built from its template."""
    portfolio = await storage.create_portfolio(user.id, payload)
    await seed_portfolio(storage, portfolio)
    return portfolio


@router.get("/{portfolio_id}", response_model=PortfolioDetail)
async def get_portfolio(
    portfolio_id: int,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    portfolio = await owned_portfolio(storage, portfolio_id, user.id)
    return await build_detail(storage, portfolio)


@router.put("/{portfolio_id}", response_model=Portfolio)
async def update_portfolio(
    portfolio_id: int,
    payload: PortfolioUpdate,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_portfolio(storage, portfolio_id, user.id)
    portfolio = await storage.update_portfolio(portfolio_id, payload.changes())
    if not portfolio:
        raise NotFoundError("Portfolio", portfolio_id)
    return portfolio


@router.delete("/{portfolio_id}", response_model=MessageResponse)
async def delete_portfolio(
    portfolio_id: int,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_portfolio(storage, portfolio_id, user.id)
    await storage.delete_portfolio(portfolio_id)
    return MessageResponse(message="Portfolio deleted successfully")


@router.get("/{portfolio_id}/pages", response_model=List[Page])
async def list_pages(
    portfolio_id: int,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_portfolio(storage, portfolio_id, user.id)
    return await storage.get_portfolio_pages(portfolio_id)


@router.post("/{portfolio_id}/pages", response_model=Page, status_code=status.HTTP_201_CREATED)
async def create_page(
    portfolio_id: int,
    payload: PageCreate,
    user: PortfolioUser = Depends(get_portfolio_user),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    await owned_portfolio(storage, portfolio_id, user.id)
    return await storage.create_page(portfolio_id, payload)


templates_router = APIRouter(prefix="/api/portfolio-templates", tags=["Portfolios"])


@templates_router.get("", response_model=List[PortfolioTemplate])
async def list_portfolio_templates():
    return PORTFOLIO_TEMPLATES
