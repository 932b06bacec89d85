"""
Block envelope.

Notion stores a block's payload under a key named after the block type::

    {"object": "block", "id": "...", "type": "to_do",
     "to_do": {"rich_text": [...], "checked": false}}

``Block`` holds the envelope metadata plus at most one typed
``BlockContent``. ``from_dict``/``to_dict`` are the only places that deal
with the type-named sibling key.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, TypeVar

from ..exceptions import InvalidArgumentError, NotionDecodeError
from .block_type import BlockType
from .common import NotionObject, Parent, parse_parent
from .content import (
    RICH_TEXT_VARIANTS,
    BlockContent,
    BulletedListItem,
    Code,
    Heading,
    Image,
    NumberedListItem,
    Paragraph,
    ToDo,
    decode_content,
)
from .rich_text import RichText, plain_text_of

C = TypeVar("C", bound=BlockContent)


@dataclass
class Block(NotionObject):
    """
    Represents a Notion block.

    The wire type is derived from ``content`` whenever content is set.
    ``raw_type`` only carries the type string of blocks decoded without a
    content variant (unknown kinds, or kinds sent without a payload), so
    their metadata survives a round trip.
    """
    object: Optional[str] = "block"
    parent: Optional[Parent] = None
    has_children: Optional[bool] = None
    content: Optional[BlockContent] = None
    raw_type: Optional[str] = None

    def __post_init__(self):
        if self.content is not None:
            self.raw_type = None

    def __setattr__(self, name, value):
        super().__setattr__(name, value)
        if name == "content" and value is not None:
            super().__setattr__("raw_type", None)

    @property
    def type(self) -> Optional[str]:
        """Wire type string; always consistent with ``content`` when set."""
        if self.content is not None:
            return self.content.block_type.to_wire()
        return self.raw_type

    @property
    def block_type(self) -> BlockType:
        return BlockType.from_wire(self.type)

    @property
    def parent_id(self) -> Optional[str]:
        return self.parent.id if self.parent else None

    def content_as(self, content_class: Type[C]) -> Optional[C]:
        """Return the content if it is a ``content_class``, else None."""
        if isinstance(self.content, content_class):
            return self.content
        return None

    def rich_text_of(self) -> Optional[List[RichText]]:
        """
        Rich text of the populated variant.

        Returns None for blocks without content and for kinds that have no
        rich text body, such as images.
        """
        if isinstance(self.content, RICH_TEXT_VARIANTS):
            return self.content.rich_text
        return None

    @property
    def plain_text(self) -> str:
        return plain_text_of(self.rich_text_of())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Block':
        """
        Create Block from Notion API response.

        Raises:
            NotionDecodeError: If the payload has no ``type`` discriminator
        """
        if not isinstance(data, dict):
            raise NotionDecodeError(f"Block payload must be an object, got {type(data).__name__}")

        block_type = data.get("type")
        if not isinstance(block_type, str) or not block_type:
            raise NotionDecodeError(
                "Block payload has no 'type' discriminator",
                details={"id": data.get("id")},
            )

        content = decode_content(block_type, data.get(block_type))

        parent = parse_parent(data.get("parent"))

        metadata = cls._metadata_from_dict(data)
        metadata["object"] = metadata["object"] or "block"

        return cls(
            **metadata,
            parent=parent,
            has_children=data.get("has_children"),
            content=content,
            raw_type=None if content is not None else block_type,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to Notion API format.

        Absent fields are omitted. Without content no payload key is
        emitted, which is what partial updates such as archiving send.
        """
        result: Dict[str, Any] = {}
        block_type = self.type
        if block_type is not None:
            result["type"] = block_type

        result.update(self._metadata_to_dict())
        result.pop("object", None)
        if self.parent is not None:
            result["parent"] = self.parent.to_dict()
        if self.has_children is not None:
            result["has_children"] = self.has_children

        if self.content is not None:
            result[block_type] = self.content.to_dict()
        return result

    def to_request_dict(self) -> Dict[str, Any]:
        """Body of a new child block for create and append requests."""
        if self.content is None:
            raise InvalidArgumentError("Cannot create a block without content")
        block_type = self.content.block_type.to_wire()
        return {"object": "block", "type": block_type, block_type: self.content.to_dict()}

    def to_update_dict(self) -> Dict[str, Any]:
        """Body of an update request: the payload key and/or ``archived``."""
        result: Dict[str, Any] = {}
        if self.content is not None:
            result[self.content.block_type.to_wire()] = self.content.to_dict()
        if self.archived is not None:
            result["archived"] = self.archived
        return result

    @classmethod
    def of(cls, content: BlockContent) -> 'Block':
        return cls(has_children=False, content=content)

    @classmethod
    def paragraph(cls, text: str) -> 'Block':
        """Create a paragraph block."""
        return cls.of(Paragraph.of(text))

    @classmethod
    def heading(cls, text: str, level: int = 1) -> 'Block':
        """Create a heading block. ``level`` must be 1, 2 or 3."""
        return cls.of(Heading.of(text, level))

    @classmethod
    def bulleted_list_item(cls, text: str) -> 'Block':
        """Create a bulleted list item block."""
        return cls.of(BulletedListItem.of(text))

    @classmethod
    def numbered_list_item(cls, text: str) -> 'Block':
        """Create a numbered list item block."""
        return cls.of(NumberedListItem.of(text))

    @classmethod
    def to_do(cls, text: str, checked: bool = False) -> 'Block':
        """Create a to-do block."""
        return cls.of(ToDo.of(text, checked))

    @classmethod
    def code(cls, text: str, language: str = "plain text") -> 'Block':
        """Create a code block."""
        return cls.of(Code.of(text, language))

    @classmethod
    def image_from_url(cls, url: str) -> 'Block':
        """Create an image block pointing at an external URL."""
        return cls.of(Image.of_external(url))


def decode_block(data: Dict[str, Any]) -> Block:
    return Block.from_dict(data)


def encode_block(block: Block) -> Dict[str, Any]:
    return block.to_dict()
