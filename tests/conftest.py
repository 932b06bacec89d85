"""
Pytest configuration and shared fixtures for typed_notion tests.
"""
import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import httpx
import pytest

# Add project root to path so tests run without an installed package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from typed_notion.config import NotionSettings
from typed_notion.transport import NotionTransport


@pytest.fixture
def settings():
    """Settings with a dummy token. Not a real secret."""
    return NotionSettings(
        NOTION_API_KEY="secret_test_token",
        NOTION_BASE_URL="https://api.notion.test/v1",
    )


@pytest.fixture
def mock_http(settings):
    """
    Transport backed by httpx.MockTransport.

    Returns (transport, requests, responder): append captured requests to
    ``requests``; set ``responder["response"]`` to the httpx.Response to return.
    """
    requests = []
    responder = {"response": httpx.Response(200, json={})}

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return responder["response"]

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return NotionTransport(settings, client=client), requests, responder


@pytest.fixture
def mock_transport(settings):
    """Transport whose exchange() is an AsyncMock returning JSON text."""
    transport = AsyncMock(spec=NotionTransport)
    transport.settings = settings
    transport.exchange.return_value = json.dumps({})
    return transport


@pytest.fixture
def paragraph_payload():
    """A paragraph block as returned by GET /blocks/{id}."""
    return {
        "object": "block",
        "id": "c02fc1d3-db8b-45c5-a222-27595b15aea7",
        "parent": {"type": "page_id", "page_id": "59833787-2cf9-4fdf-8782-e53db20768a5"},
        "created_time": "2022-03-01T19:05:00.000Z",
        "last_edited_time": "2022-07-06T19:41:00.000Z",
        "has_children": False,
        "archived": False,
        "type": "paragraph",
        "paragraph": {
            "rich_text": [
                {
                    "type": "text",
                    "text": {"content": "Lacinato kale", "link": None},
                    "annotations": {
                        "bold": True,
                        "italic": False,
                        "strikethrough": False,
                        "underline": False,
                        "code": False,
                        "color": "green",
                    },
                    "plain_text": "Lacinato kale",
                    "href": None,
                }
            ],
            "color": "default",
        },
    }


@pytest.fixture
def toggle_payload():
    """A block kind without a typed content variant."""
    return {
        "object": "block",
        "id": "toggle-block-id",
        "parent": {"type": "block_id", "block_id": "parent-block-id"},
        "created_time": "2023-01-02T03:04:00.000Z",
        "last_edited_time": "2023-01-02T03:05:00.000Z",
        "has_children": True,
        "archived": False,
        "type": "toggle",
        "toggle": {"rich_text": [], "color": "default"},
    }

