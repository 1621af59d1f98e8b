# devport/storage/mongo.py
"""
MongoDB storage via Beanie.

Integer ids come from the `counters` collection so that ids look the
same whichever backend is active. Uniqueness (file path per project,
portfolio domain) is enforced by indexes; cascades are issued
explicitly since MongoDB has no foreign keys.
"""
from typing import List, Optional, Type, TypeVar

from beanie import Document
from beanie.operators import Set
from pymongo import UpdateOne
from pymongo.errors import BulkWriteError, DuplicateKeyError

from devport.core.constants import ChatRole, DEMO_USER
from devport.core.exceptions import StorageError, ValidationError
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
from devport.models.base import CamelModel, utcnow
from devport.storage.base import Changes, PlaygroundStorage, PortfolioStorage
from devport.storage.documents import (
    Counter,
    ChatMessageDoc,
    FileDoc,
    MediaDoc,
    PageDoc,
    PortfolioDoc,
    PortfolioUserDoc,
    ProjectDoc,
    SectionDoc,
    UserDoc,
    next_id,
)

R = TypeVar("R", bound=CamelModel)


def _record(model: Type[R], doc: Optional[Document]) -> Optional[R]:
    if doc is None:
        return None
    return model.model_validate(doc.model_dump())


def _records(model: Type[R], docs: List[Document]) -> List[R]:
    return [model.model_validate(d.model_dump()) for d in docs]


class MongoPlaygroundStorage(PlaygroundStorage):
    name = "mongo"

    async def seed_demo_user(self, user_id: int) -> None:
        """Insert the demo user on first start."""
        if await UserDoc.get(user_id) is None:
            await UserDoc(id=user_id, **DEMO_USER).insert()
            await Counter.get_motor_collection().update_one(
                {"_id": "users"}, {"$max": {"seq": user_id}}, upsert=True
            )
            log("DB", f"Seeded demo user {user_id}")

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        return _record(User, await UserDoc.get(user_id))

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return _record(User, await UserDoc.find_one(UserDoc.username == username))

    async def create_user(self, data: UserCreate) -> User:
        doc = UserDoc(id=await next_id("users"), **data.model_dump())
        try:
            await doc.insert()
        except DuplicateKeyError:
            raise ValidationError(f"Username {data.username} is already taken")
        return _record(User, doc)

    # Projects
    async def get_project(self, project_id: int) -> Optional[Project]:
        return _record(Project, await ProjectDoc.get(project_id))

    async def get_projects_by_user_id(self, user_id: int) -> List[Project]:
        docs = await ProjectDoc.find(ProjectDoc.user_id == user_id).sort("+_id").to_list()
        return _records(Project, docs)

    async def create_project(self, user_id: int, data: ProjectCreate) -> Project:
        doc = ProjectDoc(id=await next_id("projects"), user_id=user_id, **data.model_dump())
        await doc.insert()
        log("STORAGE", f"Created project {doc.id} ({doc.template})")
        return _record(Project, doc)

    async def update_project(self, project_id: int, changes: Changes) -> Optional[Project]:
        doc = await ProjectDoc.get(project_id)
        if not doc:
            return None
        await doc.set({**changes, "updated_at": utcnow()})
        return _record(Project, doc)

    async def delete_project(self, project_id: int) -> bool:
        doc = await ProjectDoc.get(project_id)
        if not doc:
            return False
        await FileDoc.find(FileDoc.project_id == project_id).delete()
        await ChatMessageDoc.find(ChatMessageDoc.project_id == project_id).delete()
        await doc.delete()
        return True

    # Files
    async def get_file(self, file_id: int) -> Optional[File]:
        return _record(File, await FileDoc.get(file_id))

    async def get_files_by_project_id(self, project_id: int) -> List[File]:
        docs = await FileDoc.find(FileDoc.project_id == project_id).sort("+_id").to_list()
        return _records(File, docs)

    async def get_file_by_path(self, project_id: int, path: str) -> Optional[File]:
        doc = await FileDoc.find_one(FileDoc.project_id == project_id, FileDoc.path == path)
        return _record(File, doc)

    async def create_file(self, project_id: int, data: FileCreate) -> File:
        doc = FileDoc(id=await next_id("files"), project_id=project_id, **data.model_dump())
        try:
            await doc.insert()
        except DuplicateKeyError:
            raise ValidationError(f"A file already exists at {data.path}")
        return _record(File, doc)

    async def update_file(self, file_id: int, changes: Changes) -> Optional[File]:
        doc = await FileDoc.get(file_id)
        if not doc:
            return None
        try:
            await doc.set({**changes, "updated_at": utcnow()})
        except DuplicateKeyError:
            raise ValidationError(f"A file already exists at {changes.get('path')}")
        return _record(File, doc)

    async def delete_file(self, file_id: int) -> bool:
        doc = await FileDoc.get(file_id)
        if not doc:
            return False
        await doc.delete()
        return True

    # Chat messages
    async def get_chat_messages_by_project_id(self, project_id: int) -> List[ChatMessage]:
        docs = await (
            ChatMessageDoc.find(ChatMessageDoc.project_id == project_id)
            .sort("+created_at", "+_id")
            .to_list()
        )
        return _records(ChatMessage, docs)

    async def create_chat_message(self, project_id: int, role: ChatRole, content: str) -> ChatMessage:
        doc = ChatMessageDoc(
            id=await next_id("chat_messages"),
            project_id=project_id,
            role=role,
            content=content,
        )
        await doc.insert()
        return _record(ChatMessage, doc)


class MongoPortfolioStorage(PortfolioStorage):
    name = "mongo"

    # Users
    async def get_user(self, user_id: str) -> Optional[PortfolioUser]:
        return _record(PortfolioUser, await PortfolioUserDoc.get(user_id))

    async def upsert_user(self, data: PortfolioUserUpsert) -> PortfolioUser:
        doc = await PortfolioUserDoc.get(data.id)
        if doc:
            fields = data.model_dump(exclude={"id"})
            await doc.set({**fields, "updated_at": utcnow()})
        else:
            doc = PortfolioUserDoc(**data.model_dump())
            await doc.insert()
        return _record(PortfolioUser, doc)

    # Portfolios
    async def create_portfolio(self, user_id: str, data: PortfolioCreate) -> Portfolio:
        doc = PortfolioDoc(id=await next_id("portfolios"), user_id=user_id, **data.model_dump())
        try:
            await doc.insert()
        except DuplicateKeyError:
            raise ValidationError(f"Domain {data.domain} is already taken")
        return _record(Portfolio, doc)

    async def get_user_portfolios(self, user_id: str) -> List[Portfolio]:
        docs = await (
            PortfolioDoc.find(PortfolioDoc.user_id == user_id)
            .sort("-created_at", "-_id")
            .to_list()
        )
        return _records(Portfolio, docs)

    async def get_portfolio(self, portfolio_id: int) -> Optional[Portfolio]:
        return _record(Portfolio, await PortfolioDoc.get(portfolio_id))

    async def get_portfolio_by_domain(self, domain: str) -> Optional[Portfolio]:
        doc = await PortfolioDoc.find_one(PortfolioDoc.domain == domain.strip().lower())
        return _record(Portfolio, doc)

    async def update_portfolio(self, portfolio_id: int, changes: Changes) -> Optional[Portfolio]:
        doc = await PortfolioDoc.get(portfolio_id)
        if not doc:
            return None
        try:
            await doc.set({**changes, "updated_at": utcnow()})
        except DuplicateKeyError:
            raise ValidationError(f"Domain {changes.get('domain')} is already taken")
        return _record(Portfolio, doc)

    async def delete_portfolio(self, portfolio_id: int) -> bool:
        doc = await PortfolioDoc.get(portfolio_id)
        if not doc:
            return False
        pages = await PageDoc.find(PageDoc.portfolio_id == portfolio_id).to_list()
        page_ids = [p.id for p in pages]
        if page_ids:
            await SectionDoc.find({"page_id": {"$in": page_ids}}).delete()
            await PageDoc.find(PageDoc.portfolio_id == portfolio_id).delete()
        await doc.delete()
        return True

    # Pages
    async def _clear_home_page(self, portfolio_id: int, keep_id: int) -> None:
        await PageDoc.find(
            PageDoc.portfolio_id == portfolio_id,
            PageDoc.id != keep_id,
            PageDoc.is_home_page == True,  # noqa: E712
        ).update(Set({PageDoc.is_home_page: False, PageDoc.updated_at: utcnow()}))

    async def create_page(self, portfolio_id: int, data: PageCreate) -> Page:
        doc = PageDoc(id=await next_id("pages"), portfolio_id=portfolio_id, **data.model_dump())
        await doc.insert()
        if doc.is_home_page:
            await self._clear_home_page(portfolio_id, doc.id)
        return _record(Page, doc)

    async def get_portfolio_pages(self, portfolio_id: int) -> List[Page]:
        docs = await (
            PageDoc.find(PageDoc.portfolio_id == portfolio_id)
            .sort("+order", "+_id")
            .to_list()
        )
        return _records(Page, docs)

    async def get_page(self, page_id: int) -> Optional[Page]:
        return _record(Page, await PageDoc.get(page_id))

    async def update_page(self, page_id: int, changes: Changes) -> Optional[Page]:
        doc = await PageDoc.get(page_id)
        if not doc:
            return None
        await doc.set({**changes, "updated_at": utcnow()})
        if doc.is_home_page:
            await self._clear_home_page(doc.portfolio_id, doc.id)
        return _record(Page, doc)

    async def delete_page(self, page_id: int) -> bool:
        doc = await PageDoc.get(page_id)
        if not doc:
            return False
        await SectionDoc.find(SectionDoc.page_id == page_id).delete()
        await doc.delete()
        return True

    # Sections
    async def create_section(self, page_id: int, data: SectionCreate) -> Section:
        doc = SectionDoc(id=await next_id("sections"), page_id=page_id, **data.model_dump())
        await doc.insert()
        return _record(Section, doc)

    async def get_page_sections(self, page_id: int) -> List[Section]:
        docs = await (
            SectionDoc.find(SectionDoc.page_id == page_id)
            .sort("+order", "+_id")
            .to_list()
        )
        return _records(Section, docs)

    async def get_section(self, section_id: int) -> Optional[Section]:
        return _record(Section, await SectionDoc.get(section_id))

    async def update_section(self, section_id: int, changes: Changes) -> Optional[Section]:
        doc = await SectionDoc.get(section_id)
        if not doc:
            return None
        await doc.set({**changes, "updated_at": utcnow()})
        return _record(Section, doc)

    async def delete_section(self, section_id: int) -> bool:
        doc = await SectionDoc.get(section_id)
        if not doc:
            return False
        await doc.delete()
        return True

    async def reorder_sections(self, page_id: int, section_ids: List[int]) -> None:
        if not section_ids:
            return
        # One ordered round trip; not a transaction
        ops = [
            UpdateOne({"_id": section_id, "page_id": page_id}, {"$set": {"order": index}})
            for index, section_id in enumerate(section_ids)
        ]
        try:
            await SectionDoc.get_motor_collection().bulk_write(ops, ordered=True)
        except BulkWriteError as e:
            # Updates before the failing one stay applied
            raise StorageError("Failed to reorder sections", {"page_id": page_id, "errors": e.details.get("writeErrors")})
        log("STORAGE", f"Reordered {len(section_ids)} sections on page {page_id}")

    # Media
    async def create_media(self, user_id: str, data: MediaCreate) -> Media:
        doc = MediaDoc(id=await next_id("media"), user_id=user_id, **data.model_dump())
        await doc.insert()
        return _record(Media, doc)

    async def get_user_media(self, user_id: str) -> List[Media]:
        docs = await (
            MediaDoc.find(MediaDoc.user_id == user_id)
            .sort("-created_at", "-_id")
            .to_list()
        )
        return _records(Media, docs)

    async def get_media(self, media_id: int) -> Optional[Media]:
        return _record(Media, await MediaDoc.get(media_id))

    async def delete_media(self, media_id: int) -> bool:
        doc = await MediaDoc.get(media_id)
        if not doc:
            return False
        await doc.delete()
        return True
