"""
Page model.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .common import NotionObject, Parent, parse_parent


@dataclass
class Page(NotionObject):
    """Represents a Notion page."""
    object: Optional[str] = "page"
    parent: Optional[Parent] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    url: Optional[str] = None
    icon: Optional[Dict[str, Any]] = None
    cover: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Page':
        """Create Page from Notion API response."""
        parent = parse_parent(data.get("parent"))

        metadata = cls._metadata_from_dict(data)
        metadata["object"] = metadata["object"] or "page"

        return cls(
            **metadata,
            parent=parent,
            properties=data.get("properties") or {},
            url=data.get("url"),
            icon=data.get("icon"),
            cover=data.get("cover"),
        )

    @property
    def title(self) -> str:
        """Plain text of the page's title property, if it has one."""
        for prop in self.properties.values():
            if isinstance(prop, dict) and prop.get("type") == "title":
                return "".join(rt.get("plain_text", "") for rt in prop.get("title", []))
        return ""
