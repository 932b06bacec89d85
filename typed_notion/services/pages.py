"""
Page operations.
"""

from typing import Any, Dict, List, Optional

from ..models import Block, Page, Parent
from .base import BaseService


class PageService(BaseService):
    """Retrieve, create, update and archive pages."""

    async def get_page(self, page_id: str) -> Page:
        """
        Retrieve a page by ID.

        Raises:
            NotionObjectNotFoundError: If page doesn't exist
            NotionPermissionError: If insufficient permissions
        """
        response = await self._request("GET", f"pages/{page_id}")
        return Page.from_dict(response)

    async def create_page(
        self,
        parent: Parent,
        properties: Dict[str, Any],
        children: Optional[List[Block]] = None,
        icon: Optional[Dict[str, Any]] = None,
        cover: Optional[Dict[str, Any]] = None,
    ) -> Page:
        """
        Create a new page.

        Args:
            parent: Parent page, database or workspace
            properties: Page properties in Notion's property format
            children: Initial content blocks
            icon: Page icon
            cover: Page cover

        Returns:
            Created Page
        """
        data: Dict[str, Any] = {
            "parent": parent.to_dict(),
            "properties": properties,
        }

        if children:
            data["children"] = [block.to_request_dict() for block in children]
        if icon:
            data["icon"] = icon
        if cover:
            data["cover"] = cover

        response = await self._request("POST", "pages", body=data)
        return Page.from_dict(response)

    async def update_page(self, page_id: str, properties: Dict[str, Any]) -> Page:
        """Update a page's properties."""
        response = await self._request("PATCH", f"pages/{page_id}", body={"properties": properties})
        return Page.from_dict(response)

    async def archive_page(self, page_id: str) -> Page:
        """Move a page to the trash."""
        response = await self._request("PATCH", f"pages/{page_id}", body={"archived": True})
        return Page.from_dict(response)

    async def unarchive_page(self, page_id: str) -> Page:
        """Restore an archived page."""
        response = await self._request("PATCH", f"pages/{page_id}", body={"archived": False})
        return Page.from_dict(response)
