# devport/db/__init__.py
"""
Database module.
"""
from typing import Optional

from devport.core.config import settings
from devport.core.logging import log

# Motor client instance
_client = None
_db = None
_connection_error: Optional[str] = None


async def connect_db():
    """
    Connect to MongoDB and make it the active storage.

    Only runs when STORAGE_BACKEND=mongo. If MongoDB is not available the
    error is kept for /api/health and the in-memory storage stays active.
    """
    global _client, _db, _connection_error

    if settings.storage.backend != "mongo":
        log("DB", "Using in-memory storage")
        return

    mongo_url = settings.storage.mongodb_url
    try:
        from motor.motor_asyncio import AsyncIOMotorClient

        _client = AsyncIOMotorClient(mongo_url, serverSelectionTimeoutMS=5000)

        try:
            _db = _client.get_default_database()
        except Exception:
            _db = _client.devport

        # Fail fast if MongoDB is not running
        await _client.admin.command("ping")
        log("DB", "Connected to MongoDB")

        from beanie import init_beanie
        from devport.storage import use_storage
        from devport.storage.documents import DOCUMENT_MODELS
        from devport.storage.mongo import MongoPlaygroundStorage, MongoPortfolioStorage

        await init_beanie(database=_db, document_models=DOCUMENT_MODELS)
        log("DB", "Beanie ODM initialized")

        playground = MongoPlaygroundStorage()
        await playground.seed_demo_user(settings.demo_user_id)
        use_storage(playground, MongoPortfolioStorage())
        _connection_error = None
    except Exception as e:
        error_msg = str(e)
        log("DB", f"MongoDB not available: {error_msg}")
        log("DB", f"Falling back to in-memory storage; check {mongo_url}")
        _client = None
        _db = None
        _connection_error = error_msg


async def disconnect_db():
    """Disconnect from MongoDB."""
    global _client, _db
    if _client:
        _client.close()
        _client = None
        _db = None
        log("DB", "Disconnected from MongoDB")


def is_connected() -> bool:
    """Check if database is connected."""
    return _db is not None


def get_connection_error() -> Optional[str]:
    """Get connection error message if connection failed."""
    return _connection_error
