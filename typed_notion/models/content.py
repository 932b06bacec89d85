"""
Block content variants.

One dataclass per block kind this SDK models. Each variant knows its own
field set and the ``BlockType`` it reports; only the block envelope knows
that Notion stores the payload under a key named after the type.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, ClassVar, Dict, List, Optional

from ..exceptions import InvalidArgumentError, NotionDecodeError
from .block_type import BlockType
from .rich_text import DEFAULT_COLOR, RichText, rich_text_from_list, rich_text_to_list


class BlockContent(ABC):
    """Base class for typed block payloads."""

    @property
    @abstractmethod
    def block_type(self) -> BlockType:
        """Block type implied by this payload."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the payload object stored under the type-named key."""

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BlockContent':
        """Create the variant from its payload object."""


@dataclass
class _ColoredTextContent(BlockContent):
    """Shared shape of paragraph and list item payloads."""
    rich_text: List[RichText] = field(default_factory=list)
    color: Optional[str] = DEFAULT_COLOR

    _type: ClassVar[BlockType]

    @property
    def block_type(self) -> BlockType:
        return self._type

    @classmethod
    def of(cls, text: str, color: str = DEFAULT_COLOR):
        return cls(rich_text=RichText.list_of(text), color=color)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        return cls(
            rich_text=rich_text_from_list(data.get("rich_text")),
            color=data.get("color"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"rich_text": rich_text_to_list(self.rich_text)}
        if self.color is not None:
            result["color"] = self.color
        return result


@dataclass
class Paragraph(_ColoredTextContent):
    """Paragraph block payload."""
    _type: ClassVar[BlockType] = BlockType.PARAGRAPH


@dataclass
class BulletedListItem(_ColoredTextContent):
    """Bulleted list item payload."""
    _type: ClassVar[BlockType] = BlockType.BULLETED_LIST_ITEM


@dataclass
class NumberedListItem(_ColoredTextContent):
    """Numbered list item payload."""
    _type: ClassVar[BlockType] = BlockType.NUMBERED_LIST_ITEM


@dataclass
class Heading(BlockContent):
    """
    Heading payload shared by heading_1, heading_2 and heading_3.

    The reported block type is derived from ``level``. Assigning a level
    other than 1, 2 or 3 raises ``InvalidArgumentError``, both at
    construction and afterwards.
    """
    rich_text: List[RichText] = field(default_factory=list)
    color: Optional[str] = DEFAULT_COLOR
    is_toggleable: Optional[bool] = None
    level: int = 1

    def __setattr__(self, name, value):
        if name == "level":
            BlockType.heading(value)
        super().__setattr__(name, value)

    @property
    def block_type(self) -> BlockType:
        return BlockType.heading(self.level)

    @classmethod
    def of(cls, text: str, level: int = 1) -> 'Heading':
        return cls(rich_text=RichText.list_of(text), level=level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], level: int = 1) -> 'Heading':
        return cls(
            rich_text=rich_text_from_list(data.get("rich_text")),
            color=data.get("color"),
            is_toggleable=data.get("is_toggleable"),
            level=level,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"rich_text": rich_text_to_list(self.rich_text)}
        if self.color is not None:
            result["color"] = self.color
        if self.is_toggleable is not None:
            result["is_toggleable"] = self.is_toggleable
        return result


@dataclass
class ToDo(BlockContent):
    """To-do payload."""
    rich_text: List[RichText] = field(default_factory=list)
    color: Optional[str] = DEFAULT_COLOR
    checked: Optional[bool] = False

    @property
    def block_type(self) -> BlockType:
        return BlockType.TO_DO

    @classmethod
    def of(cls, text: str, checked: bool = False) -> 'ToDo':
        return cls(rich_text=RichText.list_of(text), checked=checked)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ToDo':
        return cls(
            rich_text=rich_text_from_list(data.get("rich_text")),
            color=data.get("color"),
            checked=data.get("checked"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"rich_text": rich_text_to_list(self.rich_text)}
        if self.color is not None:
            result["color"] = self.color
        if self.checked is not None:
            result["checked"] = self.checked
        return result


@dataclass
class Code(BlockContent):
    """Code block payload."""
    rich_text: List[RichText] = field(default_factory=list)
    language: Optional[str] = "plain text"
    caption: Optional[List[RichText]] = None

    @property
    def block_type(self) -> BlockType:
        return BlockType.CODE

    @classmethod
    def of(cls, code: str, language: str = "plain text") -> 'Code':
        return cls(rich_text=RichText.list_of(code), language=language)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Code':
        caption = None
        if "caption" in data:
            caption = rich_text_from_list(data["caption"])
        return cls(
            rich_text=rich_text_from_list(data.get("rich_text")),
            language=data.get("language"),
            caption=caption,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"rich_text": rich_text_to_list(self.rich_text)}
        if self.language is not None:
            result["language"] = self.language
        if self.caption is not None:
            result["caption"] = rich_text_to_list(self.caption)
        return result


@dataclass
class FileObject:
    """Notion-hosted file with a signed, expiring URL."""
    url: str
    expiry_time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"url": self.url}
        if self.expiry_time is not None:
            result["expiry_time"] = self.expiry_time
        return result


@dataclass
class ExternalObject:
    """File hosted outside Notion."""
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url}


@dataclass
class Image(BlockContent):
    """
    Image payload. Exactly one of ``file`` and ``external`` is set.
    """
    file: Optional[FileObject] = None
    external: Optional[ExternalObject] = None
    caption: Optional[List[RichText]] = None

    def __post_init__(self):
        if self.file is None and self.external is None:
            raise InvalidArgumentError("Image needs either a file or an external source")

    def __setattr__(self, name, value):
        other = {"file": "external", "external": "file"}.get(name)
        if other and value is not None and getattr(self, other, None) is not None:
            raise InvalidArgumentError("Image cannot have both a file and an external source")
        super().__setattr__(name, value)

    @property
    def block_type(self) -> BlockType:
        return BlockType.IMAGE

    @classmethod
    def of_external(cls, url: str) -> 'Image':
        return cls(external=ExternalObject(url=url))

    @classmethod
    def of_file(cls, url: str, expiry_time: Optional[str] = None) -> 'Image':
        return cls(file=FileObject(url=url, expiry_time=expiry_time))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Image':
        file_data = data.get("file")
        external_data = data.get("external")
        caption = None
        if "caption" in data:
            caption = rich_text_from_list(data["caption"])

        return cls(
            file=FileObject(url=file_data.get("url", ""), expiry_time=file_data.get("expiry_time"))
            if file_data else None,
            external=ExternalObject(url=external_data.get("url", "")) if external_data else None,
            caption=caption,
        )

    def to_dict(self) -> Dict[str, Any]:
        if self.file is not None:
            result: Dict[str, Any] = {"type": "file", "file": self.file.to_dict()}
        else:
            result = {"type": "external", "external": self.external.to_dict()}
        if self.caption is not None:
            result["caption"] = rich_text_to_list(self.caption)
        return result


RICH_TEXT_VARIANTS = (Paragraph, Heading, BulletedListItem, NumberedListItem, ToDo, Code)

# Wire type string -> payload decoder. Kinds missing here decode to no content.
CONTENT_DECODERS: Dict[str, Callable[[Dict[str, Any]], BlockContent]] = {
    BlockType.PARAGRAPH.value: Paragraph.from_dict,
    BlockType.HEADING_1.value: partial(Heading.from_dict, level=1),
    BlockType.HEADING_2.value: partial(Heading.from_dict, level=2),
    BlockType.HEADING_3.value: partial(Heading.from_dict, level=3),
    BlockType.BULLETED_LIST_ITEM.value: BulletedListItem.from_dict,
    BlockType.NUMBERED_LIST_ITEM.value: NumberedListItem.from_dict,
    BlockType.TO_DO.value: ToDo.from_dict,
    BlockType.CODE.value: Code.from_dict,
    BlockType.IMAGE.value: Image.from_dict,
}


def decode_content(block_type: str, data: Optional[Any]) -> Optional[BlockContent]:
    """
    Decode the payload stored under a block's type-named key.

    Args:
        block_type: Wire type string of the enclosing block
        data: Payload object, or None when the block carries no payload

    Returns:
        The content variant, or None for kinds without a decoder and for
        payloads the variant cannot model, such as an image whose source
        is neither ``file`` nor ``external``

    Raises:
        NotionDecodeError: If the payload is present but not an object
    """
    decoder = CONTENT_DECODERS.get(block_type)
    if decoder is None or data is None:
        return None
    if not isinstance(data, dict):
        raise NotionDecodeError(
            f"Payload for block type '{block_type}' must be an object",
            details={"type": block_type},
        )
    try:
        return decoder(data)
    except InvalidArgumentError:
        return None
