"""
Shared plumbing for resource services.
"""

from typing import Any, Dict, Optional

from .. import codec
from ..transport import NotionTransport


class BaseService:
    """Base class for services that talk to one group of Notion endpoints."""

    def __init__(self, transport: NotionTransport):
        self.transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """Exchange a request and decode the response object."""
        text = await self.transport.exchange(method, path, params=params, body=body)
        return codec.decode_object(text)
