"""
Notion API client.

Wires settings, transport and the per-resource services together::

    async with NotionClient() as notion:
        page = await notion.pages.get_page(page_id)
        await notion.blocks.append_paragraph(page.id, "Hello")
"""

from typing import Optional

from .config import NotionSettings, get_settings
from .services import BlockService, DatabaseService, PageService, SearchService
from .transport import NotionTransport


class NotionClient:
    """
    Entry point exposing ``pages``, ``databases``, ``blocks`` and ``search``.

    Settings default to the cached environment settings; the transport
    defaults to one built from those settings.
    """

    def __init__(
        self,
        settings: Optional[NotionSettings] = None,
        transport: Optional[NotionTransport] = None,
    ):
        self.settings = settings or (transport.settings if transport else get_settings())
        self.transport = transport or NotionTransport(self.settings)

        self.pages = PageService(self.transport)
        self.databases = DatabaseService(self.transport)
        self.blocks = BlockService(self.transport)
        self.search = SearchService(self.transport)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the underlying transport."""
        await self.transport.close()
