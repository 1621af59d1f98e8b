# devport/storage/base.py
"""
Storage interfaces.

Each domain has one abstract interface and two implementations
(in-memory and MongoDB/Beanie). Routers only ever see the interface.

Update methods take a dict of changed fields keyed by Python field name
and return None when the target does not exist. Delete methods return
False when nothing was deleted.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from devport.core.constants import ChatRole
from devport.models import (
    User,
    UserCreate,
    Project,
    ProjectCreate,
    File,
    FileCreate,
    ChatMessage,
    PortfolioUser,
    PortfolioUserUpsert,
    Portfolio,
    PortfolioCreate,
    Page,
    PageCreate,
    Section,
    SectionCreate,
    Media,
    MediaCreate,
)


Changes = Dict[str, Any]


class PlaygroundStorage(ABC):
    """DevStudio persistence."""

    name: str = "abstract"

    # Users
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User: ...

    # Projects
    @abstractmethod
    async def get_project(self, project_id: int) -> Optional[Project]: ...

    @abstractmethod
    async def get_projects_by_user_id(self, user_id: int) -> List[Project]: ...

    @abstractmethod
    async def create_project(self, user_id: int, data: ProjectCreate) -> Project: ...

    @abstractmethod
    async def update_project(self, project_id: int, changes: Changes) -> Optional[Project]: ...

    @abstractmethod
    async def delete_project(self, project_id: int) -> bool:
        """Delete a project together with its files and chat messages."""

    # Files
    @abstractmethod
    async def get_file(self, file_id: int) -> Optional[File]: ...

    @abstractmethod
    async def get_files_by_project_id(self, project_id: int) -> List[File]: ...

    @abstractmethod
    async def get_file_by_path(self, project_id: int, path: str) -> Optional[File]: ...

    @abstractmethod
    async def create_file(self, project_id: int, data: FileCreate) -> File:
        """Raises ValidationError when the path is already taken in the project."""

    @abstractmethod
    async def update_file(self, file_id: int, changes: Changes) -> Optional[File]: ...

    @abstractmethod
    async def delete_file(self, file_id: int) -> bool: ...

    # Chat messages
    @abstractmethod
    async def get_chat_messages_by_project_id(self, project_id: int) -> List[ChatMessage]:
        """Messages in creation order."""

    @abstractmethod
    async def create_chat_message(self, project_id: int, role: ChatRole, content: str) -> ChatMessage: ...


class PortfolioStorage(ABC):
    """CreativePort persistence."""

    name: str = "abstract"

    # Users
    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[PortfolioUser]: ...

    @abstractmethod
    async def upsert_user(self, data: PortfolioUserUpsert) -> PortfolioUser: ...

    # Portfolios
    @abstractmethod
    async def create_portfolio(self, user_id: str, data: PortfolioCreate) -> Portfolio:
        """Raises ValidationError when the domain is already taken."""

    @abstractmethod
    async def get_user_portfolios(self, user_id: str) -> List[Portfolio]:
        """Newest first."""

    @abstractmethod
    async def get_portfolio(self, portfolio_id: int) -> Optional[Portfolio]: ...

    @abstractmethod
    async def get_portfolio_by_domain(self, domain: str) -> Optional[Portfolio]: ...

    @abstractmethod
    async def update_portfolio(self, portfolio_id: int, changes: Changes) -> Optional[Portfolio]: ...

    @abstractmethod
    async def delete_portfolio(self, portfolio_id: int) -> bool:
        """Delete a portfolio together with its pages and their sections."""

    # Pages
    @abstractmethod
    async def create_page(self, portfolio_id: int, data: PageCreate) -> Page:
        """A new home page takes the flag away from its siblings."""

    @abstractmethod
    async def get_portfolio_pages(self, portfolio_id: int) -> List[Page]:
        """Pages by ascending order."""

    @abstractmethod
    async def get_page(self, page_id: int) -> Optional[Page]: ...

    @abstractmethod
    async def update_page(self, page_id: int, changes: Changes) -> Optional[Page]: ...

    @abstractmethod
    async def delete_page(self, page_id: int) -> bool: ...

    # Sections
    @abstractmethod
    async def create_section(self, page_id: int, data: SectionCreate) -> Section: ...

    @abstractmethod
    async def get_page_sections(self, page_id: int) -> List[Section]:
        """Sections by ascending order."""

    @abstractmethod
    async def get_section(self, section_id: int) -> Optional[Section]: ...

    @abstractmethod
    async def update_section(self, section_id: int, changes: Changes) -> Optional[Section]: ...

    @abstractmethod
    async def delete_section(self, section_id: int) -> bool: ...

    @abstractmethod
    async def reorder_sections(self, page_id: int, section_ids: List[int]) -> None:
        """Set each section's order to its index in section_ids; foreign ids are skipped."""

    # Media
    @abstractmethod
    async def create_media(self, user_id: str, data: MediaCreate) -> Media: ...

    @abstractmethod
    async def get_user_media(self, user_id: str) -> List[Media]:
        """Newest first."""

    @abstractmethod
    async def get_media(self, media_id: int) -> Optional[Media]: ...

    @abstractmethod
    async def delete_media(self, media_id: int) -> bool: ...
