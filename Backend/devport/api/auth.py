# devport/api/auth.py
"""
CreativePort identity.
"""
from fastapi import APIRouter, Depends

from devport.api.deps import get_portfolio_user
from devport.models import PortfolioUser


router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.get("/user", response_model=PortfolioUser)
async def get_auth_user(user: PortfolioUser = Depends(get_portfolio_user)):
    return user
