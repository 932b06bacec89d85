"""
Typed Notion SDK.

This SDK provides:
- Typed block models with type-discriminated (de)serialization
- Page, database, block, search and user operations
- Typed exceptions for Notion API errors
"""

from .client import NotionClient
from .config import NotionSettings, get_settings
from .exceptions import (
    InvalidArgumentError,
    NotionAPIError,
    NotionAuthError,
    NotionConflictError,
    NotionDecodeError,
    NotionError,
    NotionObjectNotFoundError,
    NotionPermissionError,
    NotionRateLimitError,
    NotionServerError,
    NotionTransportError,
    NotionValidationError,
)
from .models import (
    Annotations,
    Block,
    BlockContent,
    BlockType,
    BulletedListItem,
    Code,
    Database,
    DatabaseQuery,
    Heading,
    Image,
    NumberedListItem,
    Page,
    PaginatedResponse,
    Paragraph,
    Parent,
    RichText,
    ToDo,
    User,
    decode_block,
    encode_block,
)
from .logging_config import setup_logging
from .transport import NotionTransport

__version__ = "1.0.0"
__all__ = [
    "NotionClient",
    "NotionSettings",
    "NotionTransport",
    "get_settings",
    "setup_logging",
    "NotionError",
    "InvalidArgumentError",
    "NotionDecodeError",
    "NotionTransportError",
    "NotionAPIError",
    "NotionValidationError",
    "NotionAuthError",
    "NotionPermissionError",
    "NotionObjectNotFoundError",
    "NotionConflictError",
    "NotionRateLimitError",
    "NotionServerError",
    "Annotations",
    "Block",
    "BlockContent",
    "BlockType",
    "BulletedListItem",
    "Code",
    "Database",
    "DatabaseQuery",
    "Heading",
    "Image",
    "NumberedListItem",
    "Page",
    "PaginatedResponse",
    "Paragraph",
    "Parent",
    "RichText",
    "ToDo",
    "User",
    "decode_block",
    "encode_block",
]
