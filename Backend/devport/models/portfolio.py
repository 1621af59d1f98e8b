# devport/models/portfolio.py
"""
CreativePort records: users, portfolios, pages, sections and media.
"""
import copy
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from devport.core.constants import SectionType, DEFAULT_PORTFOLIO_TEMPLATE, DEFAULT_THEME
from devport.models.base import CamelModel, UpdateModel, utcnow


def default_theme() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_THEME)


def normalize_domain(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip().lower()
    return v or None


class PortfolioUser(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class PortfolioUserUpsert(CamelModel):
    id: str = Field(..., min_length=1)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class Portfolio(CamelModel):
    id: int
    user_id: str
    title: str
    domain: Optional[str] = None
    template: str = DEFAULT_PORTFOLIO_TEMPLATE
    theme: Dict[str, Any] = Field(default_factory=default_theme)
    is_published: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class PortfolioCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    domain: Optional[str] = Field(default=None, max_length=253)
    template: str = Field(default=DEFAULT_PORTFOLIO_TEMPLATE, min_length=1, max_length=100)
    theme: Dict[str, Any] = Field(default_factory=default_theme)
    is_published: bool = False

    @field_validator("domain")
    @classmethod
    def clean_domain(cls, v: Optional[str]) -> Optional[str]:
        return normalize_domain(v)


class PortfolioUpdate(UpdateModel):
    nullable = frozenset({"domain"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    domain: Optional[str] = Field(default=None, max_length=253)
    template: Optional[str] = Field(default=None, min_length=1, max_length=100)
    theme: Optional[Dict[str, Any]] = None
    is_published: Optional[bool] = None

    @field_validator("domain")
    @classmethod
    def clean_domain(cls, v: Optional[str]) -> Optional[str]:
        return normalize_domain(v)


class Page(CamelModel):
    id: int
    portfolio_id: int
    title: str
    slug: str = ""
    is_home_page: bool = False
    order: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class PageCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    slug: str = Field(default="", max_length=200)
    is_home_page: bool = False
    order: int = 0


class PageUpdate(UpdateModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[str] = Field(default=None, max_length=200)
    is_home_page: Optional[bool] = None
    order: Optional[int] = None


class Section(CamelModel):
    id: int
    page_id: int
    type: SectionType
    content: Dict[str, Any] = Field(default_factory=dict)
    styles: Dict[str, Any] = Field(default_factory=dict)
    order: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class SectionCreate(CamelModel):
    type: SectionType
    content: Dict[str, Any] = Field(default_factory=dict)
    styles: Dict[str, Any] = Field(default_factory=dict)
    order: int = 0


class SectionUpdate(UpdateModel):
    type: Optional[SectionType] = None
    content: Optional[Dict[str, Any]] = None
    styles: Optional[Dict[str, Any]] = None
    order: Optional[int] = None


class SectionReorder(CamelModel):
    section_ids: List[int]


class PageWithSections(Page):
    sections: List[Section] = Field(default_factory=list)


class PortfolioDetail(Portfolio):
    pages: List[PageWithSections] = Field(default_factory=list)


class Media(CamelModel):
    id: int
    user_id: str
    filename: str
    original_name: str
    mime_type: str
    size: int
    url: str
    created_at: datetime = Field(default_factory=utcnow)


class MediaCreate(CamelModel):
    filename: str
    original_name: str
    mime_type: str
    size: int = Field(..., ge=0)
    url: str


class MessageResponse(CamelModel):
    message: str
