# devport/models/playground.py
"""
DevStudio records: users, projects, files and chat messages.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from devport.core.constants import ChatRole, FileType, DEFAULT_PROJECT_TEMPLATE
from devport.models.base import CamelModel, UpdateModel, utcnow


class User(CamelModel):
    id: int
    username: str
    password: str
    name: str
    email: str
    avatar: Optional[str] = None


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=80)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=120)
    avatar: Optional[str] = None


class UserPublic(CamelModel):
    """User without the password field."""
    id: int
    username: str
    name: str
    email: str
    avatar: Optional[str] = None


class Project(CamelModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    template: str = DEFAULT_PROJECT_TEMPLATE
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class ProjectCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2_000)
    template: str = Field(default=DEFAULT_PROJECT_TEMPLATE, min_length=1, max_length=100)


class ProjectUpdate(UpdateModel):
    nullable = frozenset({"description"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2_000)
    template: Optional[str] = Field(default=None, min_length=1, max_length=100)


class File(CamelModel):
    id: int
    project_id: int
    parent_id: Optional[int] = None
    name: str
    path: str
    type: FileType = FileType.FILE
    content: str = ""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class FileCreate(CamelModel):
    parent_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=255)
    path: str = Field(..., min_length=1, max_length=1_024)
    type: FileType = FileType.FILE
    content: str = ""


class FileUpdate(UpdateModel):
    nullable = frozenset({"parent_id"})

    parent_id: Optional[int] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    path: Optional[str] = Field(default=None, min_length=1, max_length=1_024)
    type: Optional[FileType] = None
    content: Optional[str] = None


class ChatMessage(CamelModel):
    id: int
    project_id: int
    role: ChatRole
    content: str
    created_at: datetime = Field(default_factory=utcnow)


class ChatRequest(CamelModel):
    content: str

    @field_validator("content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must not be blank")
        return v


class ChatExchange(CamelModel):
    user_message: ChatMessage
    assistant_message: ChatMessage


class RunRequest(CamelModel):
    file_id: int


class RunResult(CamelModel):
    success: bool
    output: str
    error: Optional[str] = None
    execution_time: float
