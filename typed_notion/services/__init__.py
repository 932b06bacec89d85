"""
Resource services built on the Notion transport.
"""

from .base import BaseService
from .blocks import BlockService
from .databases import DatabaseService
from .pages import PageService
from .search import SearchService

__all__ = [
    "BaseService",
    "BlockService",
    "DatabaseService",
    "PageService",
    "SearchService",
]
