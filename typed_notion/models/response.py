"""
Paginated list responses.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from ..exceptions import NotionDecodeError

T = TypeVar("T")


@dataclass
class PaginatedResponse(Generic[T]):
    """A page of results from a Notion list endpoint."""
    results: List[T] = field(default_factory=list)
    has_more: bool = False
    next_cursor: Optional[str] = None
    object: str = "list"

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        item_decoder: Callable[[Dict[str, Any]], Optional[T]],
    ) -> 'PaginatedResponse[T]':
        """
        Create PaginatedResponse from Notion API response.

        Args:
            data: Decoded list response
            item_decoder: Converts one raw result; results it maps to None are dropped

        Raises:
            NotionDecodeError: If ``results`` is not a list
        """
        raw_results = data.get("results", [])
        if not isinstance(raw_results, list):
            raise NotionDecodeError("Unexpected Notion API response format: 'results' is not a list.")

        results = []
        for item in raw_results:
            decoded = item_decoder(item)
            if decoded is not None:
                results.append(decoded)

        return cls(
            results=results,
            has_more=bool(data.get("has_more", False)),
            next_cursor=data.get("next_cursor"),
            object=data.get("object", "list"),
        )
