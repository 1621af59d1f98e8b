# devport/api/deps.py
"""
Shared route dependencies: acting user and ownership checks.

The acting user is always passed explicitly through a dependency;
handlers never read it off the request.
"""
from typing import Optional

from fastapi import Depends, Header

from devport.core.config import settings
from devport.core.exceptions import AccessDeniedError, AuthenticationError, NotFoundError
from devport.models import Page, Portfolio, PortfolioUser, PortfolioUserUpsert, Project, Section
from devport.storage import (
    PlaygroundStorage,
    PortfolioStorage,
    get_playground_storage,
    get_portfolio_storage,
)


# ---------------------------------------------------------------------------
# DevStudio
# ---------------------------------------------------------------------------

def get_current_user_id() -> int:
    """DevStudio runs every request as the demo user."""
    return settings.demo_user_id


async def require_project(
    project_id: int,
    storage: PlaygroundStorage = Depends(get_playground_storage),
) -> Project:
    project = await storage.get_project(project_id)
    if not project:
        raise NotFoundError("Project", project_id)
    return project


# ---------------------------------------------------------------------------
# CreativePort
# ---------------------------------------------------------------------------

async def get_portfolio_user(
    x_user_id: Optional[str] = Header(default=None),
    x_user_email: Optional[str] = Header(default=None),
    x_user_first_name: Optional[str] = Header(default=None),
    x_user_last_name: Optional[str] = Header(default=None),
    x_user_profile_image: Optional[str] = Header(default=None),
    storage: PortfolioStorage = Depends(get_portfolio_storage),
) -> PortfolioUser:
    """
    Identity forwarded by the upstream identity provider.

    The user record is upserted on every authenticated request, so the
    first request from a new identity creates it.
    """
    if not x_user_id:
        raise AuthenticationError()
    return await storage.upsert_user(PortfolioUserUpsert(
        id=x_user_id,
        email=x_user_email,
        first_name=x_user_first_name,
        last_name=x_user_last_name,
        profile_image_url=x_user_profile_image,
    ))


async def owned_portfolio(storage: PortfolioStorage, portfolio_id: int, user_id: str) -> Portfolio:
    portfolio = await storage.get_portfolio(portfolio_id)
    if not portfolio:
        raise NotFoundError("Portfolio", portfolio_id)
    if portfolio.user_id != user_id:
        raise AccessDeniedError()
    return portfolio


async def owned_page(storage: PortfolioStorage, page_id: int, user_id: str) -> Page:
    page = await storage.get_page(page_id)
    if not page:
        raise NotFoundError("Page", page_id)
    portfolio = await storage.get_portfolio(page.portfolio_id)
    if not portfolio or portfolio.user_id != user_id:
        raise AccessDeniedError()
    return page


async def owned_section(storage: PortfolioStorage, section_id: int, user_id: str) -> Section:
    section = await storage.get_section(section_id)
    if not section:
        raise NotFoundError("Section", section_id)
    page = await storage.get_page(section.page_id)
    portfolio = await storage.get_portfolio(page.portfolio_id) if page else None
    if not portfolio or portfolio.user_id != user_id:
        raise AccessDeniedError()
    return section
