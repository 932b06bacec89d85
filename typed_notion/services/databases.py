"""
Database operations.
"""

from typing import Any, Dict, List, Optional

from ..models import Database, DatabaseQuery, Page, PaginatedResponse, Parent, RichText
from .base import BaseService


class DatabaseService(BaseService):
    """Retrieve, create, update and query databases."""

    async def get_database(self, database_id: str) -> Database:
        response = await self._request("GET", f"databases/{database_id}")
        return Database.from_dict(response)

    async def create_database(
        self,
        parent: Parent,
        title: List[RichText],
        properties: Dict[str, Any],
    ) -> Database:
        """
        Create a new database.

        Args:
            parent: Parent page reference
            title: Database title
            properties: Database properties schema

        Returns:
            Created Database
        """
        data = {
            "parent": parent.to_dict(),
            "title": [rt.to_dict() for rt in title],
            "properties": properties,
        }
        response = await self._request("POST", "databases", body=data)
        return Database.from_dict(response)

    async def update_database(
        self,
        database_id: str,
        title: Optional[List[RichText]] = None,
        properties: Optional[Dict[str, Any]] = None,
    ) -> Database:
        """Update a database's title and/or property schema."""
        data: Dict[str, Any] = {}

        if title is not None:
            data["title"] = [rt.to_dict() for rt in title]
        if properties is not None:
            data["properties"] = properties

        response = await self._request("PATCH", f"databases/{database_id}", body=data)
        return Database.from_dict(response)

    async def query_database(
        self,
        database_id: str,
        query: Optional[DatabaseQuery] = None,
    ) -> PaginatedResponse[Page]:
        """
        Query a database.

        Args:
            database_id: Database ID to query
            query: Filter, sorts and pagination; None returns the first page of all rows

        Returns:
            Matching pages and pagination info
        """
        body = query.to_dict() if query else {}
        response = await self._request("POST", f"databases/{database_id}/query", body=body)
        return PaginatedResponse.from_dict(response, Page.from_dict)
