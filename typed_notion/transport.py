"""
HTTP transport for the Notion REST API.

Performs one verb-based exchange per call and returns the raw JSON text;
decoding into models happens in the service layer. Failed exchanges are
mapped to typed exceptions and never retried.
"""

import logging
import time
from typing import Any, Dict, Optional

import httpx

from . import codec
from .config import NotionSettings
from .exceptions import (
    NotionAPIError,
    NotionAuthError,
    NotionConflictError,
    NotionObjectNotFoundError,
    NotionPermissionError,
    NotionRateLimitError,
    NotionServerError,
    NotionTransportError,
    NotionValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_ERRORS = {
    400: NotionValidationError,
    401: NotionAuthError,
    403: NotionPermissionError,
    404: NotionObjectNotFoundError,
    409: NotionConflictError,
}


class NotionTransport:
    """
    Sends requests to Notion with the integration's auth and version headers.

    The transport owns its ``httpx.AsyncClient`` unless one is passed in.
    """

    def __init__(self, settings: NotionSettings, client: Optional[httpx.AsyncClient] = None):
        """
        Args:
            settings: Base URL, API key, version and timeout
            client: Pre-built HTTP client, e.g. one with a mock transport
        """
        self.settings = settings
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=settings.NOTION_TIMEOUT)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.NOTION_API_KEY}",
            "Notion-Version": self.settings.NOTION_VERSION,
            "Content-Type": "application/json",
        }

    def build_url(self, path: str) -> str:
        return f"{self.settings.NOTION_BASE_URL}/{path.lstrip('/')}"

    async def exchange(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> str:
        """
        Perform one request and return the response body as text.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: Endpoint path relative to the base URL, e.g. ``blocks/{id}``
            params: Query parameters; entries whose value is None are dropped
            body: JSON-serializable request body for POST/PATCH

        Returns:
            Raw JSON response text

        Raises:
            NotionTransportError: If the request could not be sent
            NotionAPIError: For error responses (subclass by status)
        """
        method = method.upper()
        url = self.build_url(path)
        query = {key: value for key, value in (params or {}).items() if value is not None}
        content = codec.encode(body) if body is not None else None

        start_time = time.time()
        try:
            response = await self.client.request(
                method,
                url,
                params=query or None,
                content=content,
                headers=self._build_headers(),
            )
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise NotionTransportError(f"Request failed: {str(e)}") from e

        logger.debug(
            f"{method} {path} - {response.status_code} "
            f"({int((time.time() - start_time) * 1000)}ms)"
        )

        if not response.is_success:
            self._handle_http_error(response, method, path)

        return response.text

    def _handle_http_error(self, response: httpx.Response, method: str, path: str) -> None:
        """Raise the exception matching an error response."""
        try:
            error_data = response.json()
            message = error_data.get("message", f"HTTP {response.status_code}")
            code = error_data.get("code", "unknown_error")
        except (ValueError, AttributeError):
            error_data = {}
            message = response.text or f"HTTP {response.status_code}"
            code = "unknown_error"

        status = response.status_code
        logger.warning(f"{method} {path} - Notion API error {status} {code}: {message}")

        details = error_data if isinstance(error_data, dict) else {}
        if status == 429:
            raise NotionRateLimitError(
                message,
                retry_after=_parse_retry_after(response.headers.get("Retry-After")),
                error_code=code,
                status_code=status,
                details=details,
            )
        error_class = _STATUS_ERRORS.get(status)
        if error_class is None:
            error_class = NotionServerError if status >= 500 else NotionAPIError
        raise error_class(message, error_code=code, status_code=status, details=details)

    async def close(self):
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self.client.aclose()


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
