"""
JSON codec for request and response bodies.

Works on generic trees (dicts, lists, scalars) so that callers can look
at raw keys, such as a block's type-named payload key, before choosing a
model. Values exposing ``to_dict()`` are encoded through it.
"""

import json
from typing import Any

from .exceptions import NotionDecodeError


def _default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any) -> str:
    """Serialize ``value`` to JSON text."""
    return json.dumps(value, default=_default, ensure_ascii=False)


def decode(text: str) -> Any:
    """
    Parse JSON text into a generic tree.

    Raises:
        NotionDecodeError: If the text is not valid JSON
    """
    if not text:
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise NotionDecodeError(f"Invalid JSON in Notion response: {e}") from e


def decode_object(text: str) -> dict:
    """Parse JSON text that must hold an object."""
    data = decode(text)
    if not isinstance(data, dict):
        raise NotionDecodeError(f"Expected a JSON object, got {type(data).__name__}")
    return data
