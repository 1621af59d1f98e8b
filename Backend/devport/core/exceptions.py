# devport/core/exceptions.py
"""
Custom exceptions for the application.

Every DevPortError carries the HTTP status it is rendered with by the
app-level exception handler in devport.main.
"""
from typing import Optional, Dict, Any


class DevPortError(Exception):
    """Base exception for all DevPort errors."""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(DevPortError):
    """Request data failed validation."""
    status_code = 400


class AuthenticationError(DevPortError):
    """No identity was forwarded for a protected route."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class AccessDeniedError(DevPortError):
    """Caller does not own the resource."""
    status_code = 403

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class NotFoundError(DevPortError):
    """Resource does not exist."""
    status_code = 404

    def __init__(self, resource: str, resource_id: Any = None):
        super().__init__(
            f"{resource} not found",
            {"resource": resource, "id": resource_id}
        )
        self.resource = resource
        self.resource_id = resource_id


class PayloadTooLargeError(DevPortError):
    """Upload exceeded the configured size cap."""
    status_code = 413

    def __init__(self, limit: int):
        super().__init__(
            f"File too large (max {limit // (1024 * 1024)}MB)",
            {"limit": limit}
        )
        self.limit = limit


class LLMError(DevPortError):
    """Hosted completion provider error."""
    def __init__(self, provider: str, message: str):
        super().__init__(
            f"LLM error ({provider}): {message}",
            {"provider": provider}
        )
        self.provider = provider


class StorageError(DevPortError):
    """Storage backend error."""
    pass
