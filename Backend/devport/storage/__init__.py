# devport/storage/__init__.py
"""
Storage registry.

Routers resolve the active storage through get_playground_storage /
get_portfolio_storage (FastAPI dependencies). The in-memory pair is
active until devport.db.connect_db swaps in the MongoDB pair.
"""
from .base import PlaygroundStorage, PortfolioStorage
from .memory import MemPlaygroundStorage, MemPortfolioStorage

_playground: PlaygroundStorage = MemPlaygroundStorage()
_portfolio: PortfolioStorage = MemPortfolioStorage()


def get_playground_storage() -> PlaygroundStorage:
    return _playground


def get_portfolio_storage() -> PortfolioStorage:
    return _portfolio


def use_storage(playground: PlaygroundStorage, portfolio: PortfolioStorage) -> None:
    """Swap the active storage pair."""
    global _playground, _portfolio
    _playground = playground
    _portfolio = portfolio


def reset_memory_storage() -> None:
    """Start over with empty in-memory storage (demo user included)."""
    use_storage(MemPlaygroundStorage(), MemPortfolioStorage())


__all__ = [
    "PlaygroundStorage",
    "PortfolioStorage",
    "MemPlaygroundStorage",
    "MemPortfolioStorage",
    "get_playground_storage",
    "get_portfolio_storage",
    "use_storage",
    "reset_memory_storage",
]
