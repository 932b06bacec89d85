"""
Search and user operations.
"""

from typing import Any, Dict, Optional, Union

from ..exceptions import InvalidArgumentError
from ..models import Database, Page, PaginatedResponse, User
from ..models.database import MAX_PAGE_SIZE
from .base import BaseService

SearchResult = Union[Page, Database]


def _decode_search_result(data: Dict[str, Any]) -> Optional[SearchResult]:
    if data.get("object") == "page":
        return Page.from_dict(data)
    if data.get("object") == "database":
        return Database.from_dict(data)
    return None


class SearchService(BaseService):
    """Workspace search and user lookups."""

    async def search(
        self,
        query: Optional[str] = None,
        filter_object: Optional[str] = None,
        sort_direction: Optional[str] = None,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse[SearchResult]:
        """
        Search across pages and databases shared with the integration.

        Args:
            query: Text to match against titles
            filter_object: Restrict results to "page" or "database"
            sort_direction: "ascending" or "descending" by last edit time
            start_cursor: Pagination cursor
            page_size: Number of results per page (max 100)

        Returns:
            Pages and databases with pagination info
        """
        data: Dict[str, Any] = {}

        if query is not None:
            data["query"] = query
        if filter_object is not None:
            if filter_object not in ("page", "database"):
                raise InvalidArgumentError("filter_object must be 'page' or 'database'")
            data["filter"] = {"property": "object", "value": filter_object}
        if sort_direction is not None:
            if sort_direction not in ("ascending", "descending"):
                raise InvalidArgumentError("sort_direction must be 'ascending' or 'descending'")
            data["sort"] = {"direction": sort_direction, "timestamp": "last_edited_time"}
        if start_cursor is not None:
            data["start_cursor"] = start_cursor
        if page_size is not None:
            data["page_size"] = min(page_size, MAX_PAGE_SIZE)

        response = await self._request("POST", "search", body=data)
        return PaginatedResponse.from_dict(response, _decode_search_result)

    async def list_users(
        self,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse[User]:
        """List all users in the workspace."""
        params = {
            "start_cursor": start_cursor,
            "page_size": min(page_size, MAX_PAGE_SIZE) if page_size else None,
        }
        response = await self._request("GET", "users", params=params)
        return PaginatedResponse.from_dict(response, User.from_dict)

    async def get_user(self, user_id: str) -> User:
        response = await self._request("GET", f"users/{user_id}")
        return User.from_dict(response)

    async def get_current_user(self) -> User:
        """Get the bot user behind the integration token."""
        response = await self._request("GET", "users/me")
        return User.from_dict(response)
