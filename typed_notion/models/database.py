"""
Database models.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..exceptions import InvalidArgumentError
from .common import NotionObject, Parent, parse_parent
from .rich_text import RichText, plain_text_of, rich_text_from_list

MAX_PAGE_SIZE = 100


@dataclass
class Database(NotionObject):
    """Represents a Notion database."""
    object: Optional[str] = "database"
    title: List[RichText] = field(default_factory=list)
    description: Optional[List[RichText]] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    parent: Optional[Parent] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Database':
        """Create Database from Notion API response."""
        description = None
        if data.get("description"):
            description = rich_text_from_list(data["description"])

        parent = parse_parent(data.get("parent"))

        metadata = cls._metadata_from_dict(data)
        metadata["object"] = metadata["object"] or "database"

        return cls(
            **metadata,
            title=rich_text_from_list(data.get("title")),
            description=description,
            properties=data.get("properties") or {},
            parent=parent,
            url=data.get("url"),
        )

    @property
    def plain_title(self) -> str:
        return plain_text_of(self.title)


@dataclass
class DatabaseQuery:
    """Body of a database query request."""
    filter: Optional[Dict[str, Any]] = None
    sorts: Optional[List[Dict[str, Any]]] = None
    start_cursor: Optional[str] = None
    page_size: Optional[int] = None

    def __post_init__(self):
        if self.page_size is not None and not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise InvalidArgumentError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to Notion API format, omitting unset fields."""
        data: Dict[str, Any] = {}
        if self.filter:
            data["filter"] = self.filter
        if self.sorts:
            data["sorts"] = self.sorts
        if self.start_cursor:
            data["start_cursor"] = self.start_cursor
        if self.page_size is not None:
            data["page_size"] = self.page_size
        return data
