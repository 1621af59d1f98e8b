# devport/storage/memory.py
"""
In-memory storage.

Records live in plain dicts keyed by id; ids come from per-entity
counters starting at 1. Everything is lost on restart. Callers always
get copies, so mutating a returned record never touches the store.
"""
from itertools import count
from typing import Dict, List, Optional

from devport.core.constants import ChatRole, DEMO_USER
from devport.core.exceptions import ValidationError
from devport.core.logging import log
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
from devport.models.base import utcnow
from devport.storage.base import Changes, PlaygroundStorage, PortfolioStorage


def _oldest_first(record):
    return (record.created_at, record.id)


class MemPlaygroundStorage(PlaygroundStorage):
    name = "memory"

    def __init__(self, seed_demo_user: bool = True):
        self.users: Dict[int, User] = {}
        self.projects: Dict[int, Project] = {}
        self.files: Dict[int, File] = {}
        self.chat_messages: Dict[int, ChatMessage] = {}
        self._user_ids = count(1)
        self._project_ids = count(1)
        self._file_ids = count(1)
        self._chat_ids = count(1)

        if seed_demo_user:
            self._insert_user(UserCreate(**DEMO_USER))

    def _insert_user(self, data: UserCreate) -> User:
        user = User(id=next(self._user_ids), **data.model_dump())
        self.users[user.id] = user
        return user

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        user = self.users.get(user_id)
        return user.model_copy() if user else None

    async def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self.users.values():
            if user.username == username:
                return user.model_copy()
        return None

    async def create_user(self, data: UserCreate) -> User:
        return self._insert_user(data).model_copy()

    # Projects
    async def get_project(self, project_id: int) -> Optional[Project]:
        project = self.projects.get(project_id)
        return project.model_copy() if project else None

    async def get_projects_by_user_id(self, user_id: int) -> List[Project]:
        return [p.model_copy() for p in self.projects.values() if p.user_id == user_id]

    async def create_project(self, user_id: int, data: ProjectCreate) -> Project:
        now = utcnow()
        project = Project(
            id=next(self._project_ids),
            user_id=user_id,
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self.projects[project.id] = project
        log("STORAGE", f"Created project {project.id} ({project.template})")
        return project.model_copy()

    async def update_project(self, project_id: int, changes: Changes) -> Optional[Project]:
        project = self.projects.get(project_id)
        if not project:
            return None
        updated = project.model_copy(update={**changes, "updated_at": utcnow()})
        self.projects[project_id] = updated
        return updated.model_copy()

    async def delete_project(self, project_id: int) -> bool:
        if self.projects.pop(project_id, None) is None:
            return False
        self.files = {k: f for k, f in self.files.items() if f.project_id != project_id}
        self.chat_messages = {
            k: m for k, m in self.chat_messages.items() if m.project_id != project_id
        }
        return True

    # Files
    async def get_file(self, file_id: int) -> Optional[File]:
        f = self.files.get(file_id)
        return f.model_copy() if f else None

    async def get_files_by_project_id(self, project_id: int) -> List[File]:
        return [f.model_copy() for f in self.files.values() if f.project_id == project_id]

    async def get_file_by_path(self, project_id: int, path: str) -> Optional[File]:
        for f in self.files.values():
            if f.project_id == project_id and f.path == path:
                return f.model_copy()
        return None

    async def create_file(self, project_id: int, data: FileCreate) -> File:
        if await self.get_file_by_path(project_id, data.path):
            raise ValidationError(f"A file already exists at {data.path}")
        now = utcnow()
        f = File(
            id=next(self._file_ids),
            project_id=project_id,
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self.files[f.id] = f
        return f.model_copy()

    async def update_file(self, file_id: int, changes: Changes) -> Optional[File]:
        f = self.files.get(file_id)
        if not f:
            return None
        new_path = changes.get("path")
        if new_path and new_path != f.path:
            clash = await self.get_file_by_path(f.project_id, new_path)
            if clash:
                raise ValidationError(f"A file already exists at {new_path}")
        updated = f.model_copy(update={**changes, "updated_at": utcnow()})
        self.files[file_id] = updated
        return updated.model_copy()

    async def delete_file(self, file_id: int) -> bool:
        return self.files.pop(file_id, None) is not None

    # Chat messages
    async def get_chat_messages_by_project_id(self, project_id: int) -> List[ChatMessage]:
        messages = [m for m in self.chat_messages.values() if m.project_id == project_id]
        return [m.model_copy() for m in sorted(messages, key=_oldest_first)]

    async def create_chat_message(self, project_id: int, role: ChatRole, content: str) -> ChatMessage:
        message = ChatMessage(
            id=next(self._chat_ids),
            project_id=project_id,
            role=role,
            content=content,
        )
        self.chat_messages[message.id] = message
        return message.model_copy()


class MemPortfolioStorage(PortfolioStorage):
    name = "memory"

    def __init__(self):
        self.users: Dict[str, PortfolioUser] = {}
        self.portfolios: Dict[int, Portfolio] = {}
        self.pages: Dict[int, Page] = {}
        self.sections: Dict[int, Section] = {}
        self.media: Dict[int, Media] = {}
        self._portfolio_ids = count(1)
        self._page_ids = count(1)
        self._section_ids = count(1)
        self._media_ids = count(1)

    # Users
    async def get_user(self, user_id: str) -> Optional[PortfolioUser]:
        user = self.users.get(user_id)
        return user.model_copy() if user else None

    async def upsert_user(self, data: PortfolioUserUpsert) -> PortfolioUser:
        existing = self.users.get(data.id)
        if existing:
            user = existing.model_copy(update={**data.model_dump(), "updated_at": utcnow()})
        else:
            user = PortfolioUser(**data.model_dump())
        self.users[user.id] = user
        return user.model_copy()

    # Portfolios
    def _check_domain(self, domain: Optional[str], portfolio_id: Optional[int] = None) -> None:
        if not domain:
            return
        for p in self.portfolios.values():
            if p.domain == domain and p.id != portfolio_id:
                raise ValidationError(f"Domain {domain} is already taken")

    async def create_portfolio(self, user_id: str, data: PortfolioCreate) -> Portfolio:
        self._check_domain(data.domain)
        now = utcnow()
        portfolio = Portfolio(
            id=next(self._portfolio_ids),
            user_id=user_id,
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self.portfolios[portfolio.id] = portfolio
        return portfolio.model_copy(deep=True)

    async def get_user_portfolios(self, user_id: str) -> List[Portfolio]:
        owned = [p for p in self.portfolios.values() if p.user_id == user_id]
        return [p.model_copy(deep=True) for p in sorted(owned, key=_oldest_first, reverse=True)]

    async def get_portfolio(self, portfolio_id: int) -> Optional[Portfolio]:
        p = self.portfolios.get(portfolio_id)
        return p.model_copy(deep=True) if p else None

    async def get_portfolio_by_domain(self, domain: str) -> Optional[Portfolio]:
        domain = domain.strip().lower()
        for p in self.portfolios.values():
            if p.domain == domain:
                return p.model_copy(deep=True)
        return None

    async def update_portfolio(self, portfolio_id: int, changes: Changes) -> Optional[Portfolio]:
        p = self.portfolios.get(portfolio_id)
        if not p:
            return None
        if "domain" in changes:
            self._check_domain(changes["domain"], portfolio_id)
        updated = p.model_copy(update={**changes, "updated_at": utcnow()})
        self.portfolios[portfolio_id] = updated
        return updated.model_copy(deep=True)

    async def delete_portfolio(self, portfolio_id: int) -> bool:
        if self.portfolios.pop(portfolio_id, None) is None:
            return False
        page_ids = {pg.id for pg in self.pages.values() if pg.portfolio_id == portfolio_id}
        self.pages = {k: pg for k, pg in self.pages.items() if k not in page_ids}
        self.sections = {k: s for k, s in self.sections.items() if s.page_id not in page_ids}
        return True

    # Pages
    def _clear_home_page(self, portfolio_id: int, keep_id: int) -> None:
        for pid, pg in self.pages.items():
            if pg.portfolio_id == portfolio_id and pid != keep_id and pg.is_home_page:
                self.pages[pid] = pg.model_copy(update={"is_home_page": False, "updated_at": utcnow()})

    async def create_page(self, portfolio_id: int, data: PageCreate) -> Page:
        now = utcnow()
        page = Page(
            id=next(self._page_ids),
            portfolio_id=portfolio_id,
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self.pages[page.id] = page
        if page.is_home_page:
            self._clear_home_page(portfolio_id, page.id)
        return page.model_copy()

    async def get_portfolio_pages(self, portfolio_id: int) -> List[Page]:
        pages = [pg for pg in self.pages.values() if pg.portfolio_id == portfolio_id]
        return [pg.model_copy() for pg in sorted(pages, key=lambda pg: (pg.order, pg.id))]

    async def get_page(self, page_id: int) -> Optional[Page]:
        pg = self.pages.get(page_id)
        return pg.model_copy() if pg else None

    async def update_page(self, page_id: int, changes: Changes) -> Optional[Page]:
        pg = self.pages.get(page_id)
        if not pg:
            return None
        updated = pg.model_copy(update={**changes, "updated_at": utcnow()})
        self.pages[page_id] = updated
        if updated.is_home_page:
            self._clear_home_page(updated.portfolio_id, page_id)
        return updated.model_copy()

    async def delete_page(self, page_id: int) -> bool:
        if self.pages.pop(page_id, None) is None:
            return False
        self.sections = {k: s for k, s in self.sections.items() if s.page_id != page_id}
        return True

    # Sections
    async def create_section(self, page_id: int, data: SectionCreate) -> Section:
        now = utcnow()
        section = Section(
            id=next(self._section_ids),
            page_id=page_id,
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self.sections[section.id] = section
        return section.model_copy(deep=True)

    async def get_page_sections(self, page_id: int) -> List[Section]:
        sections = [s for s in self.sections.values() if s.page_id == page_id]
        return [s.model_copy(deep=True) for s in sorted(sections, key=lambda s: (s.order, s.id))]

    async def get_section(self, section_id: int) -> Optional[Section]:
        s = self.sections.get(section_id)
        return s.model_copy(deep=True) if s else None

    async def update_section(self, section_id: int, changes: Changes) -> Optional[Section]:
        s = self.sections.get(section_id)
        if not s:
            return None
        updated = s.model_copy(update={**changes, "updated_at": utcnow()})
        self.sections[section_id] = updated
        return updated.model_copy(deep=True)

    async def delete_section(self, section_id: int) -> bool:
        return self.sections.pop(section_id, None) is not None

    async def reorder_sections(self, page_id: int, section_ids: List[int]) -> None:
        for index, section_id in enumerate(section_ids):
            s = self.sections.get(section_id)
            if s is None or s.page_id != page_id:
                continue
            self.sections[section_id] = s.model_copy(update={"order": index})
        log("STORAGE", f"Reordered {len(section_ids)} sections on page {page_id}")

    # Media
    async def create_media(self, user_id: str, data: MediaCreate) -> Media:
        item = Media(id=next(self._media_ids), user_id=user_id, **data.model_dump())
        self.media[item.id] = item
        return item.model_copy()

    async def get_user_media(self, user_id: str) -> List[Media]:
        owned = [m for m in self.media.values() if m.user_id == user_id]
        return [m.model_copy() for m in sorted(owned, key=_oldest_first, reverse=True)]

    async def get_media(self, media_id: int) -> Optional[Media]:
        m = self.media.get(media_id)
        return m.model_copy() if m else None

    async def delete_media(self, media_id: int) -> bool:
        return self.media.pop(media_id, None) is not None
