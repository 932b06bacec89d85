"""
Data models for the typed Notion SDK.
"""

from .block import Block, decode_block, encode_block
from .block_type import BlockType
from .common import NotionObject, Parent
from .content import (
    CONTENT_DECODERS,
    BlockContent,
    BulletedListItem,
    Code,
    ExternalObject,
    FileObject,
    Heading,
    Image,
    NumberedListItem,
    Paragraph,
    ToDo,
    decode_content,
)
from .database import Database, DatabaseQuery
from .page import Page
from .response import PaginatedResponse
from .rich_text import Annotations, RichText
from .user import User

__all__ = [
    "Annotations",
    "Block",
    "BlockContent",
    "BlockType",
    "BulletedListItem",
    "CONTENT_DECODERS",
    "Code",
    "Database",
    "DatabaseQuery",
    "ExternalObject",
    "FileObject",
    "Heading",
    "Image",
    "NotionObject",
    "NumberedListItem",
    "Page",
    "PaginatedResponse",
    "Paragraph",
    "Parent",
    "RichText",
    "ToDo",
    "User",
    "decode_block",
    "decode_content",
    "encode_block",
]
