# devport/core/config.py
"""
Application configuration - single source of truth for all settings.
"""
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()


@dataclass
class LLMSettings:
    """Hosted chat-completion configuration."""
    openai_api_key: Optional[str] = field(default_factory=lambda: os.getenv("OPENAI_API_KEY"))
    base_url: str = field(default_factory=lambda: os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"))
    chat_model: str = field(default_factory=lambda: os.getenv("CHAT_MODEL", "gpt-4o"))
    max_tokens: int = field(default_factory=lambda: int(os.getenv("CHAT_MAX_TOKENS", "500")))
    timeout_seconds: int = 60


@dataclass
class StorageSettings:
    """Storage backend selection."""
    # "memory" keeps everything in process; "mongo" uses Motor + Beanie
    backend: str = field(default_factory=lambda: os.getenv("STORAGE_BACKEND", "memory").lower())
    mongodb_url: str = field(default_factory=lambda: os.getenv("MONGODB_URL", "mongodb://localhost:27017/devport"))


@dataclass
class UploadSettings:
    """Media upload configuration."""
    upload_dir: Path = field(default_factory=lambda: Path(
        os.getenv("UPLOAD_DIR") or str(Path(__file__).parent.parent.parent / "uploads")
    ))
    max_upload_bytes: int = field(default_factory=lambda: int(os.getenv("MAX_UPLOAD_BYTES", 10 * 1024 * 1024)))
    allowed_types: str = "jpeg|jpg|png|gif|mp4|mov|avi|pdf"
    url_prefix: str = "/uploads"


@dataclass
class Settings:
    """Main application settings."""
    llm: LLMSettings = field(default_factory=LLMSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)
    uploads: UploadSettings = field(default_factory=UploadSettings)
    demo_user_id: int = field(default_factory=lambda: int(os.getenv("DEMO_USER_ID", 1)))
    cors_origins: List[str] = field(default_factory=lambda: (
        ["*"] if os.getenv("CORS_ORIGINS", "*") == "*" else os.getenv("CORS_ORIGINS", "").split(",")
    ))
    rate_limit: str = field(default_factory=lambda: os.getenv("RATE_LIMIT", "100/minute"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", 8000)))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    def ensure_directories(self):
        """Ensure required directories exist."""
        self.uploads.upload_dir.mkdir(parents=True, exist_ok=True)


# Singleton instance
settings = Settings()
