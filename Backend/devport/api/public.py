# devport/api/public.py
"""
Unauthenticated view of published portfolios.
"""
from fastapi import APIRouter, Depends

from devport.api.portfolios import build_detail
from devport.core.exceptions import NotFoundError
from devport.models import PortfolioDetail
from devport.storage import PortfolioStorage, get_portfolio_storage


router = APIRouter(prefix="/api/public", tags=["Public"])


@router.get("/portfolios/domain/{domain}", response_model=PortfolioDetail)
async def get_public_portfolio(
    domain: str,
    storage: PortfolioStorage = Depends(get_portfolio_storage),
):
    """A published portfolio by domain; drafts look the same as missing ones."""
    portfolio = await storage.get_portfolio_by_domain(domain)
    if not portfolio or not portfolio.is_published:
        raise NotFoundError("Portfolio", domain)
    return await build_detail(storage, portfolio)
