"""
User model.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class User:
    """Represents a Notion user."""
    id: str
    type: Optional[str] = None  # "person" or "bot"
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        """Create User from Notion API response."""
        person = data.get("person") or {}

        return cls(
            id=data.get("id", ""),
            type=data.get("type"),
            name=data.get("name"),
            avatar_url=data.get("avatar_url"),
            email=person.get("email"),
        )

    @property
    def is_bot(self) -> bool:
        return self.type == "bot"
