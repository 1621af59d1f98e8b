# devport/core/constants.py
"""
Application constants shared across routers, storage and the relay.
"""
from enum import Enum


class FileType(str, Enum):
    FILE = "file"
    FOLDER = "folder"


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class SectionType(str, Enum):
    HERO = "hero"
    GALLERY = "gallery"
    TEXT = "text"
    CONTACT = "contact"
    VIDEO = "video"


class WSMessageType(str, Enum):
    JOIN_PROJECT = "join_project"
    JOINED = "joined"
    FILE_CHANGE = "file_change"


CHAT_SYSTEM_PROMPT = (
    "You are a helpful coding assistant. Help users with their programming questions, "
    "debugging, and code optimization. Be concise but thorough."
)
CHAT_FALLBACK_REPLY = "I'm sorry, I couldn't generate a response."

DEFAULT_PROJECT_TEMPLATE = "blank"
DEFAULT_PORTFOLIO_TEMPLATE = "minimal"

DEFAULT_THEME = {
    "colors": {"primary": "#2563eb", "background": "#ffffff"},
    "fonts": {"heading": "Inter", "body": "Inter"},
}

# Canned output for the mocked runner
RUN_OUTPUT = (
    "✓ Compiled successfully!\n"
    "Local: http://localhost:3000\n"
    "Network: http://192.168.1.100:3000\n"
    "webpack compiled with 0 warnings"
)
RUN_TIME_MIN_MS = 500
RUN_TIME_SPREAD_MS = 2000

DEMO_USER = {
    "username": "demo",
    "password": "demo",
    "name": "Demo User",
    "email": "demo@example.com",
    "avatar": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?ixlib=rb-4.0.3&auto=format&fit=crop&w=100&h=100",
}
