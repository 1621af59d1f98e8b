from datetime import datetime
from typing import Any, Dict, Optional

from beanie import Document, Indexed
from pydantic import Field
from pymongo import ASCENDING, IndexModel, ReturnDocument

from devport.core.constants import ChatRole, FileType, SectionType
from devport.models.base import utcnow


class Counter(Document):
    """Per-collection integer id sequence."""
    id: str
    seq: int = 0

    class Settings:
        name = "counters"


async def next_id(collection: str) -> int:
    doc = await Counter.get_motor_collection().find_one_and_update(
        {"_id": collection},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return doc["seq"]


# ---------------------------------------------------------------------------
# Playground
# ---------------------------------------------------------------------------

class UserDoc(Document):
    id: int
    username: Indexed(str, unique=True)
    password: str
    name: str
    email: str
    avatar: Optional[str] = None

    class Settings:
        name = "users"


class ProjectDoc(Document):
    id: int
    user_id: Indexed(int)
    name: str
    description: Optional[str] = None
    template: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "projects"


class FileDoc(Document):
    id: int
    project_id: int
    parent_id: Optional[int] = None
    name: str
    path: str
    type: FileType = FileType.FILE
    content: str = ""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "files"
        indexes = [
            IndexModel([("project_id", ASCENDING), ("path", ASCENDING)], unique=True),
        ]


class ChatMessageDoc(Document):
    id: int
    project_id: Indexed(int)
    role: ChatRole
    content: str
    created_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "chat_messages"


# ---------------------------------------------------------------------------
# Portfolio
# ---------------------------------------------------------------------------

class PortfolioUserDoc(Document):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "portfolio_users"


class PortfolioDoc(Document):
    id: int
    user_id: Indexed(str)
    title: str
    domain: Optional[str] = None
    template: str
    theme: Dict[str, Any] = Field(default_factory=dict)
    is_published: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "portfolios"
        indexes = [
            # unique only among portfolios that actually claim a domain
            IndexModel(
                [("domain", ASCENDING)],
                unique=True,
                partialFilterExpression={"domain": {"$type": "string"}},
            ),
        ]


class PageDoc(Document):
    id: int
    portfolio_id: Indexed(int)
    title: str
    slug: str = ""
    is_home_page: bool = False
    order: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "pages"


class SectionDoc(Document):
    id: int
    page_id: Indexed(int)
    type: SectionType
    content: Dict[str, Any] = Field(default_factory=dict)
    styles: Dict[str, Any] = Field(default_factory=dict)
    order: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "sections"


class MediaDoc(Document):
    id: int
    user_id: Indexed(str)
    filename: str
    original_name: str
    mime_type: str
    size: int
    url: str
    created_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "media"


DOCUMENT_MODELS = [
    Counter,
    UserDoc,
    ProjectDoc,
    FileDoc,
    ChatMessageDoc,
    PortfolioUserDoc,
    PortfolioDoc,
    PageDoc,
    SectionDoc,
    MediaDoc,
]
