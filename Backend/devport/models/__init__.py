from .playground import (
    User,
    UserCreate,
    UserPublic,
    Project,
    ProjectCreate,
    ProjectUpdate,
    File,
    FileCreate,
    FileUpdate,
    ChatMessage,
    ChatRequest,
    ChatExchange,
    RunRequest,
    RunResult,
)
from .portfolio import (
    PortfolioUser,
    PortfolioUserUpsert,
    Portfolio,
    PortfolioCreate,
    PortfolioUpdate,
    PortfolioDetail,
    Page,
    PageCreate,
    PageUpdate,
    PageWithSections,
    Section,
    SectionCreate,
    SectionUpdate,
    SectionReorder,
    Media,
    MediaCreate,
    MessageResponse,
)

__all__ = [
    "User",
    "UserCreate",
    "UserPublic",
    "Project",
    "ProjectCreate",
    "ProjectUpdate",
    "File",
    "FileCreate",
    "FileUpdate",
    "ChatMessage",
    "ChatRequest",
    "ChatExchange",
    "RunRequest",
    "RunResult",
    "PortfolioUser",
    "PortfolioUserUpsert",
    "Portfolio",
    "PortfolioCreate",
    "PortfolioUpdate",
    "PortfolioDetail",
    "Page",
    "PageCreate",
    "PageUpdate",
    "PageWithSections",
    "Section",
    "SectionCreate",
    "SectionUpdate",
    "SectionReorder",
    "Media",
    "MediaCreate",
    "MessageResponse",
]
