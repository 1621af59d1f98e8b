import sys
import os
from datetime import datetime
from typing import Any, Optional


# ═══════════════════════════════════════════════════════════════════════════════
# LOG FILTERING
# ═══════════════════════════════════════════════════════════════════════════════
# Only these scopes are shown at INFO level.
# Everything else is gated behind DEBUG.

INFO_SCOPES = {
    "STARTUP",      # Lifespan
    "DB",           # Storage connect/disconnect
    "CHAT",         # LLM boundary
    "MEDIA",        # Uploads
    "WS",           # Relay connect/disconnect
    "ERROR",        # Unhandled failures
    "MONITORING",
    "SECURITY",
}

# DEBUG-only scopes (hidden by default)
DEBUG_SCOPES = {
    "STORAGE",
    "RELAY",
    "RUNNER",
    "TEMPLATES",
}

# Check if DEBUG mode is enabled
DEBUG_MODE = os.getenv("DEVPORT_DEBUG", "false").lower() == "true"


def log(scope: str, message: str, data: Any = None, project_id: Optional[Any] = None) -> None:
    """
    Unified logging function for DevPort.

    Only INFO_SCOPES are shown by default.
    Set DEVPORT_DEBUG=true to see all scopes.
    """
    if not DEBUG_MODE and scope not in INFO_SCOPES:
        return

    timestamp = datetime.now().strftime("%H:%M:%S")
    prefix = f"[{timestamp}] [{scope}]"

    if project_id is not None:
        prefix += f" [{str(project_id)[:8]}]"

    print(f"{prefix} {message}")

    if data:
        print(f"  Data: {data}")

    sys.stdout.flush()


def log_section(scope: str, title: str) -> None:
    """
    Log a section header with visual separator.
    """
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"\n{'='*60}")
    print(f"[{timestamp}] [{scope}] {title}")
    print(f"{'='*60}")
    sys.stdout.flush()
