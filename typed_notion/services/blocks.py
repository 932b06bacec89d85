"""
Block operations, plus helpers that append freshly built blocks.
"""

import logging
from typing import List, Optional

from ..models import Block, PaginatedResponse
from ..models.database import MAX_PAGE_SIZE
from .base import BaseService

logger = logging.getLogger(__name__)


class BlockService(BaseService):
    """Read, update, archive and append blocks."""

    async def get_block(self, block_id: str) -> Block:
        response = await self._request("GET", f"blocks/{block_id}")
        return Block.from_dict(response)

    async def update_block(self, block_id: str, block: Block) -> Block:
        """
        Update a block's content and/or archived flag.

        Args:
            block_id: Block ID to update
            block: Block whose content (and ``archived``, if set) is sent

        Returns:
            Updated Block
        """
        response = await self._request("PATCH", f"blocks/{block_id}", body=block.to_update_dict())
        return Block.from_dict(response)

    async def archive_block(self, block_id: str) -> Block:
        """Archive a block with a partial update carrying only ``archived``."""
        return await self.update_block(block_id, Block(archived=True))

    async def delete_block(self, block_id: str) -> Block:
        """Delete (archive) a block via the DELETE endpoint."""
        response = await self._request("DELETE", f"blocks/{block_id}")
        return Block.from_dict(response)

    async def get_block_children(
        self,
        block_id: str,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse[Block]:
        """
        Get one page of a block's children.

        Args:
            block_id: Parent block or page ID
            start_cursor: Pagination cursor
            page_size: Number of results per page (max 100)
        """
        params = {
            "start_cursor": start_cursor,
            "page_size": min(page_size, MAX_PAGE_SIZE) if page_size else None,
        }
        response = await self._request("GET", f"blocks/{block_id}/children", params=params)
        return PaginatedResponse.from_dict(response, Block.from_dict)

    async def append_block_children(
        self,
        block_id: str,
        children: List[Block],
    ) -> PaginatedResponse[Block]:
        """
        Append children to a block or page.

        Returns:
            The appended blocks as created by Notion
        """
        data = {"children": [child.to_request_dict() for child in children]}
        logger.debug(f"Appending {len(children)} block(s) to {block_id}")
        response = await self._request("PATCH", f"blocks/{block_id}/children", body=data)
        return PaginatedResponse.from_dict(response, Block.from_dict)

    async def append_blocks(self, parent_id: str, *blocks: Block) -> List[Block]:
        result = await self.append_block_children(parent_id, list(blocks))
        return result.results

    async def _append_one(self, parent_id: str, block: Block) -> Optional[Block]:
        results = await self.append_blocks(parent_id, block)
        return results[0] if results else None

    async def append_paragraph(self, parent_id: str, text: str) -> Optional[Block]:
        return await self._append_one(parent_id, Block.paragraph(text))

    async def append_heading(self, parent_id: str, text: str, level: int = 1) -> Optional[Block]:
        return await self._append_one(parent_id, Block.heading(text, level))

    async def append_to_do(self, parent_id: str, text: str, checked: bool = False) -> Optional[Block]:
        return await self._append_one(parent_id, Block.to_do(text, checked))

    async def create_document(
        self,
        parent_id: str,
        title: Optional[str],
        subtitle: Optional[str],
        *paragraphs: str,
    ) -> List[Block]:
        """
        Append a simple document: an H1 title, an H2 subtitle, then paragraphs.

        ``title`` and ``subtitle`` are skipped when None.
        """
        blocks: List[Block] = []
        if title is not None:
            blocks.append(Block.heading(title, 1))
        if subtitle is not None:
            blocks.append(Block.heading(subtitle, 2))
        blocks.extend(Block.paragraph(paragraph) for paragraph in paragraphs)

        return await self.append_blocks(parent_id, *blocks)
