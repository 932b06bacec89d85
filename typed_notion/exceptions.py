"""
Exception classes for the typed Notion SDK.
"""

from typing import Any, Dict, Optional


class NotionError(Exception):
    """Base exception for all Notion SDK errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}


class InvalidArgumentError(NotionError, ValueError):
    """Raised when a model is built with an argument outside its allowed range."""
    pass


class NotionDecodeError(NotionError):
    """Raised when an inbound payload cannot be decoded into a model."""
    pass


class NotionTransportError(NotionError):
    """Raised when the HTTP exchange with Notion fails before a response arrives."""
    pass


class NotionAPIError(NotionError):
    """Raised when Notion answers with an error status."""
    pass


class NotionValidationError(NotionAPIError):
    """Raised when request validation fails (HTTP 400)."""
    pass


class NotionAuthError(NotionAPIError):
    """Raised when authentication fails (HTTP 401)."""
    pass


class NotionPermissionError(NotionAPIError):
    """Raised when the integration lacks access to a resource (HTTP 403)."""
    pass


class NotionObjectNotFoundError(NotionAPIError):
    """Raised when a resource is not found (HTTP 404)."""
    pass


class NotionConflictError(NotionAPIError):
    """Raised when there's a conflict, e.g. a concurrent edit (HTTP 409)."""
    pass


class NotionRateLimitError(NotionAPIError):
    """Raised when the rate limit is exceeded (HTTP 429). Never retried here."""

    def __init__(self, message: str, retry_after: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class NotionServerError(NotionAPIError):
    """Raised when Notion returns a 5xx error."""
    pass
