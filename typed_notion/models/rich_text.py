"""
Rich text models.

A rich text value is an ordered list of ``RichText`` runs; list order is
display order.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_COLOR = "default"


@dataclass(frozen=True)
class Annotations:
    """Styling flags applied to a rich text run."""
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = DEFAULT_COLOR

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Annotations':
        """Create Annotations from Notion API response."""
        if not data:
            return cls()
        return cls(
            bold=bool(data.get("bold", False)),
            italic=bool(data.get("italic", False)),
            strikethrough=bool(data.get("strikethrough", False)),
            underline=bool(data.get("underline", False)),
            code=bool(data.get("code", False)),
            color=data.get("color") or DEFAULT_COLOR,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bold": self.bold,
            "italic": self.italic,
            "strikethrough": self.strikethrough,
            "underline": self.underline,
            "code": self.code,
            "color": self.color,
        }


@dataclass(frozen=True)
class RichText:
    """Represents one styled run of Notion rich text."""
    type: str = "text"
    content: str = ""
    link_url: Optional[str] = None
    annotations: Annotations = field(default_factory=Annotations)
    plain_text: Optional[str] = None
    href: Optional[str] = None
    # Raw payload of a mention run; Notion resolves mentions server-side.
    mention: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if self.plain_text is None:
            object.__setattr__(self, "plain_text", self.content)

    @classmethod
    def of(cls, text: str) -> 'RichText':
        """Create an unstyled text run."""
        return cls(content=text)

    @classmethod
    def list_of(cls, text: str) -> List['RichText']:
        """Create a one-run rich text list from a plain string."""
        return [cls.of(text)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RichText':
        """Create RichText from Notion API response."""
        run_type = data.get("type", "text")
        link_url = None
        mention = None

        if run_type == "text":
            text_data = data.get("text") or {}
            content = text_data.get("content", "")
            if text_data.get("link"):
                link_url = text_data["link"].get("url")
        elif run_type == "equation":
            content = (data.get("equation") or {}).get("expression", "")
        else:
            mention = data.get(run_type)
            content = data.get("plain_text", "")

        return cls(
            type=run_type,
            content=content,
            link_url=link_url,
            annotations=Annotations.from_dict(data.get("annotations")),
            plain_text=data.get("plain_text"),
            href=data.get("href"),
            mention=mention,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to Notion API format."""
        result: Dict[str, Any] = {"type": self.type}

        if self.type == "text":
            text: Dict[str, Any] = {"content": self.content}
            if self.link_url:
                text["link"] = {"url": self.link_url}
            result["text"] = text
        elif self.type == "equation":
            result["equation"] = {"expression": self.content}
        elif self.mention is not None:
            result[self.type] = self.mention

        result["annotations"] = self.annotations.to_dict()
        if self.plain_text is not None:
            result["plain_text"] = self.plain_text
        if self.href is not None:
            result["href"] = self.href
        return result


def rich_text_from_list(data: Optional[List[Dict[str, Any]]]) -> List[RichText]:
    """Decode a list of wire rich text runs."""
    return [RichText.from_dict(item) for item in data or []]


def rich_text_to_list(runs: Optional[List[RichText]]) -> List[Dict[str, Any]]:
    """Encode a list of rich text runs."""
    return [run.to_dict() for run in runs or []]


def plain_text_of(runs: Optional[List[RichText]]) -> str:
    """Concatenate the plain text of a run list."""
    return "".join(run.plain_text or "" for run in runs or [])
