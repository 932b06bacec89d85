"""
Shared metadata and parent references for Notion objects.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..exceptions import InvalidArgumentError, NotionDecodeError


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a Notion ISO-8601 timestamp.

    Unparseable values yield None, so the field is omitted when the
    object is encoded again.
    """
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return None


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat().replace('+00:00', 'Z')


@dataclass
class NotionObject:
    """Metadata common to pages, databases and blocks."""
    id: Optional[str] = None
    object: Optional[str] = None
    created_time: Optional[datetime] = None
    last_edited_time: Optional[datetime] = None
    archived: Optional[bool] = None

    @staticmethod
    def _metadata_from_dict(data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": data.get("id"),
            "object": data.get("object"),
            "created_time": parse_datetime(data.get("created_time")),
            "last_edited_time": parse_datetime(data.get("last_edited_time")),
            "archived": data.get("archived"),
        }

    def _metadata_to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.object is not None:
            result["object"] = self.object
        if self.id is not None:
            result["id"] = self.id
        if self.created_time is not None:
            result["created_time"] = format_datetime(self.created_time)
        if self.last_edited_time is not None:
            result["last_edited_time"] = format_datetime(self.last_edited_time)
        if self.archived is not None:
            result["archived"] = self.archived
        return result


# Parent reference kind -> attribute holding the referenced id
_PARENT_ID_FIELDS = {
    "database_id": "database_id",
    "page_id": "page_id",
    "block_id": "block_id",
    "workspace": None,
}


@dataclass(frozen=True)
class Parent:
    """
    Where a page, database or block lives.

    Exactly one alternative is populated: a database, a page, a block or
    the workspace root. Use the factory classmethods to build one.
    """
    type: str
    database_id: Optional[str] = None
    page_id: Optional[str] = None
    block_id: Optional[str] = None

    def __post_init__(self):
        if self.type not in _PARENT_ID_FIELDS:
            raise InvalidArgumentError(f"Unknown parent type: {self.type!r}")
        populated = {
            name for name in ("database_id", "page_id", "block_id")
            if getattr(self, name) is not None
        }
        expected = _PARENT_ID_FIELDS[self.type]
        if populated != ({expected} if expected else set()):
            raise InvalidArgumentError(
                f"Parent of type {self.type!r} must carry exactly its own id"
            )

    @classmethod
    def database(cls, database_id: str) -> 'Parent':
        return cls(type="database_id", database_id=database_id)

    @classmethod
    def page(cls, page_id: str) -> 'Parent':
        return cls(type="page_id", page_id=page_id)

    @classmethod
    def block(cls, block_id: str) -> 'Parent':
        return cls(type="block_id", block_id=block_id)

    @classmethod
    def workspace(cls) -> 'Parent':
        return cls(type="workspace")

    @property
    def id(self) -> Optional[str]:
        """Referenced id, or None for the workspace root."""
        attr = _PARENT_ID_FIELDS[self.type]
        return getattr(self, attr) if attr else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Parent':
        """Create Parent from Notion API response."""
        parent_type = data.get("type")
        if parent_type not in _PARENT_ID_FIELDS:
            raise NotionDecodeError(f"Unknown parent type: {parent_type!r}", details={"parent": data})
        if parent_type == "workspace":
            return cls.workspace()
        try:
            return cls(type=parent_type, **{parent_type: data.get(parent_type)})
        except InvalidArgumentError as e:
            raise NotionDecodeError(str(e), details={"parent": data}) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert to Notion API format."""
        if self.type == "workspace":
            return {"type": "workspace", "workspace": True}
        return {"type": self.type, self.type: self.id}


def parse_parent(data: Optional[Dict[str, Any]]) -> Optional[Parent]:
    """
    Decode the ``parent`` of an inbound object.

    Parent kinds this SDK does not model (such as ``data_source_id``) yield
    None so the rest of the object still decodes. Use ``Parent.from_dict``
    to reject them instead.
    """
    if not isinstance(data, dict) or not data:
        return None
    try:
        return Parent.from_dict(data)
    except NotionDecodeError:
        return None
