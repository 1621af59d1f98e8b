# devport/core/__init__.py
"""
Core module - Application constants, configuration, and shared errors.
"""
from .config import settings
from .constants import (
    FileType,
    ChatRole,
    SectionType,
    WSMessageType,
)
from .exceptions import (
    DevPortError,
    ValidationError,
    AuthenticationError,
    AccessDeniedError,
    NotFoundError,
    PayloadTooLargeError,
    LLMError,
    StorageError,
)

__all__ = [
    # Config
    "settings",
    # Constants
    "FileType",
    "ChatRole",
    "SectionType",
    "WSMessageType",
    # Exceptions
    "DevPortError",
    "ValidationError",
    "AuthenticationError",
    "AccessDeniedError",
    "NotFoundError",
    "PayloadTooLargeError",
    "LLMError",
    "StorageError",
]
