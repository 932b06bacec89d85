"""
Block type taxonomy.

Each member's value is the wire string Notion uses both for the ``type``
field of a block and for the key holding the block's payload.
"""

from enum import Enum

from ..exceptions import InvalidArgumentError


class BlockType(str, Enum):
    """Known Notion block kinds."""

    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TO_DO = "to_do"
    TOGGLE = "toggle"
    CODE = "code"
    CHILD_PAGE = "child_page"
    CHILD_DATABASE = "child_database"
    EMBED = "embed"
    IMAGE = "image"
    VIDEO = "video"
    FILE = "file"
    PDF = "pdf"
    BOOKMARK = "bookmark"
    CALLOUT = "callout"
    QUOTE = "quote"
    EQUATION = "equation"
    DIVIDER = "divider"
    TABLE_OF_CONTENTS = "table_of_contents"
    COLUMN = "column"
    COLUMN_LIST = "column_list"
    LINK_PREVIEW = "link_preview"
    SYNCED_BLOCK = "synced_block"
    TEMPLATE = "template"
    LINK_TO_PAGE = "link_to_page"
    TABLE = "table"
    TABLE_ROW = "table_row"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_wire(cls, value) -> "BlockType":
        """Map a wire string to a member. Unknown strings map to UNSUPPORTED."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNSUPPORTED

    @classmethod
    def heading(cls, level: int) -> "BlockType":
        """Heading member for ``level`` 1, 2 or 3."""
        headings = {1: cls.HEADING_1, 2: cls.HEADING_2, 3: cls.HEADING_3}
        if isinstance(level, bool) or not isinstance(level, int) or level not in headings:
            raise InvalidArgumentError(f"Heading level must be 1, 2, or 3, got {level!r}")
        return headings[level]

    def to_wire(self) -> str:
        """
        Canonical wire string of a known member.

        Raises:
            InvalidArgumentError: For UNSUPPORTED, which has no request form
        """
        if self is BlockType.UNSUPPORTED:
            raise InvalidArgumentError("Unsupported block type cannot be sent to Notion")
        return self.value

    @property
    def is_heading(self) -> bool:
        return self in (BlockType.HEADING_1, BlockType.HEADING_2, BlockType.HEADING_3)
