"""
Tests for the Block envelope: decode/encode, factories and projections.
"""
from datetime import datetime, timezone

import pytest

from typed_notion.exceptions import InvalidArgumentError, NotionDecodeError
from typed_notion.models import (
    Block,
    BlockType,
    Code,
    Heading,
    Image,
    Paragraph,
    Parent,
    RichText,
    ToDo,
    decode_block,
    encode_block,
)


def _annotations_are_default(run):
    a = run.annotations
    return (
        not a.bold and not a.italic and not a.strikethrough
        and not a.underline and not a.code and a.color == "default"
    )


class TestDecode:
    """Wire JSON to Block."""

    def test_decodes_metadata_and_content(self, paragraph_payload):
        block = Block.from_dict(paragraph_payload)

        assert block.id == "c02fc1d3-db8b-45c5-a222-27595b15aea7"
        assert block.object == "block"
        assert block.type == "paragraph"
        assert block.block_type is BlockType.PARAGRAPH
        assert block.parent == Parent.page("59833787-2cf9-4fdf-8782-e53db20768a5")
        assert block.parent_id == "59833787-2cf9-4fdf-8782-e53db20768a5"
        assert block.has_children is False
        assert block.archived is False
        assert block.created_time == datetime(2022, 3, 1, 19, 5, tzinfo=timezone.utc)

        paragraph = block.content_as(Paragraph)
        assert paragraph is not None
        assert paragraph.color == "default"
        assert paragraph.rich_text[0].annotations.bold is True
        assert paragraph.rich_text[0].annotations.color == "green"
        assert block.plain_text == "Lacinato kale"

    def test_unknown_type_keeps_metadata_without_content(self, toggle_payload):
        block = Block.from_dict(toggle_payload)

        assert block.content is None
        assert block.type == "toggle"
        assert block.block_type is BlockType.TOGGLE
        assert block.id == "toggle-block-id"
        assert block.parent_id == "parent-block-id"
        assert block.has_children is True
        assert block.archived is False
        assert block.last_edited_time == datetime(2023, 1, 2, 3, 5, tzinfo=timezone.utc)
        assert block.rich_text_of() is None
        assert block.content_as(Paragraph) is None

    def test_future_type_maps_to_unsupported(self):
        block = Block.from_dict({"id": "x", "type": "ai_summary", "ai_summary": {}})

        assert block.content is None
        assert block.type == "ai_summary"
        assert block.block_type is BlockType.UNSUPPORTED

    def test_missing_type_is_a_decode_error(self):
        with pytest.raises(NotionDecodeError):
            Block.from_dict({"id": "x"})

    def test_non_string_type_is_a_decode_error(self):
        with pytest.raises(NotionDecodeError):
            Block.from_dict({"id": "x", "type": 42})

    def test_payloadless_block_is_valid(self):
        block = Block.from_dict({"id": "d", "type": "divider"})

        assert block.content is None
        assert block.type == "divider"

    def test_known_type_without_payload_has_no_content(self):
        block = Block.from_dict({"id": "p", "type": "paragraph"})

        assert block.content is None
        assert block.type == "paragraph"

    def test_image_with_unmodelled_source_keeps_metadata(self):
        block = Block.from_dict({
            "id": "img",
            "type": "image",
            "has_children": False,
            "image": {"type": "file_upload", "file_upload": {"id": "upload-1"}},
        })

        assert block.content is None
        assert block.type == "image"
        assert block.block_type is BlockType.IMAGE
        assert block.id == "img"
        assert block.rich_text_of() is None

    def test_unknown_parent_kind_decodes_without_parent(self, paragraph_payload):
        payload = {**paragraph_payload, "parent": {"type": "data_source_id", "data_source_id": "ds-1"}}

        block = Block.from_dict(payload)

        assert block.parent is None
        assert block.parent_id is None
        assert block.id == paragraph_payload["id"]
        assert block.plain_text == "Lacinato kale"

    def test_unparseable_timestamp_is_dropped(self, paragraph_payload):
        block = Block.from_dict({**paragraph_payload, "created_time": "yesterday"})

        assert block.created_time is None
        assert "created_time" not in block.to_dict()
        assert block.last_edited_time is not None

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_heading_level_comes_from_type_suffix(self, level):
        wire = f"heading_{level}"
        block = decode_block({"type": wire, wire: {"rich_text": [], "is_toggleable": False}})

        heading = block.content_as(Heading)
        assert heading.level == level
        assert heading.is_toggleable is False
        assert block.type == wire


class TestEncode:
    """Block to wire JSON."""

    def test_payload_sits_under_type_named_key(self):
        data = Block.to_do("Buy milk", checked=True).to_dict()

        assert data["type"] == "to_do"
        assert data["to_do"]["checked"] is True
        assert data["to_do"]["rich_text"][0]["text"]["content"] == "Buy milk"
        assert "content" not in data
        assert "id" not in data
        assert "created_time" not in data

    def test_archived_only_update_has_no_payload_key(self):
        block = Block(raw_type="paragraph", archived=True)

        assert block.to_dict() == {"type": "paragraph", "archived": True}
        assert block.to_update_dict() == {"archived": True}

    def test_type_follows_heading_level_changes(self):
        block = Block.heading("Intro", 1)
        block.content.level = 2

        data = encode_block(block)
        assert data["type"] == "heading_2"
        assert "heading_2" in data
        assert "heading_1" not in data

    def test_replacing_content_replaces_type(self, toggle_payload):
        block = Block.from_dict(toggle_payload)
        block.content = Paragraph.of("now a paragraph")

        data = block.to_dict()
        assert data["type"] == "paragraph"
        assert "toggle" not in data
        assert block.raw_type is None

    def test_metadata_is_emitted_when_present(self, paragraph_payload):
        data = Block.from_dict(paragraph_payload).to_dict()

        assert data["id"] == paragraph_payload["id"]
        assert data["parent"] == paragraph_payload["parent"]
        assert data["created_time"] == "2022-03-01T19:05:00Z"
        assert data["archived"] is False

    def test_request_dict_for_children(self):
        assert Block.paragraph("hi").to_request_dict() == {
            "object": "block",
            "type": "paragraph",
            "paragraph": {"rich_text": [RichText.of("hi").to_dict()], "color": "default"},
        }

    def test_request_dict_requires_content(self, toggle_payload):
        with pytest.raises(InvalidArgumentError):
            Block.from_dict(toggle_payload).to_request_dict()


class TestRoundTrip:
    """decode(encode(block)) == block for every content variant."""

    @pytest.mark.parametrize("block", [
        Block.paragraph("A paragraph"),
        Block.heading("H1", 1),
        Block.heading("H2", 2),
        Block.heading("H3", 3),
        Block.bulleted_list_item("bullet"),
        Block.numbered_list_item("number"),
        Block.to_do("task", checked=False),
        Block.code("SELECT 1;", "sql"),
        Block.image_from_url("https://example.com/image.png"),
        Block.of(Image.of_file("https://files.example.com/x.png", "2024-05-01T00:00:00.000Z")),
        Block.of(Code(rich_text=RichText.list_of("x = 1"), language="python",
                      caption=RichText.list_of("assignment"))),
    ], ids=lambda block: block.type)
    def test_round_trip(self, block):
        assert Block.from_dict(block.to_dict()) == block

    def test_round_trip_of_decoded_block(self, paragraph_payload):
        block = Block.from_dict(paragraph_payload)
        assert Block.from_dict(block.to_dict()) == block

    def test_round_trip_of_unknown_block(self, toggle_payload):
        block = Block.from_dict(toggle_payload)
        assert Block.from_dict(block.to_dict()).to_dict()["type"] == "toggle"


class TestProjections:
    """rich_text_of and factories."""

    def test_paragraph_rich_text(self):
        rich_text = Block.paragraph("hello").rich_text_of()

        assert len(rich_text) == 1
        assert rich_text[0].plain_text == "hello"
        assert _annotations_are_default(rich_text[0])

    @pytest.mark.parametrize("block", [
        Block.heading("h", 2),
        Block.bulleted_list_item("b"),
        Block.numbered_list_item("n"),
        Block.to_do("t"),
        Block.code("c", "python"),
    ])
    def test_text_kinds_expose_rich_text(self, block):
        assert block.rich_text_of() == block.content.rich_text

    def test_image_has_no_rich_text(self):
        block = Block.image_from_url("https://example.com/a.png")

        assert block.rich_text_of() is None
        assert block.content.file is None
        assert block.content.external.url == "https://example.com/a.png"

    def test_block_without_content_has_no_rich_text(self):
        assert Block().rich_text_of() is None

    def test_factories_build_local_blocks(self):
        block = Block.code("fn main() {}", "rust")

        assert block.id is None
        assert block.has_children is False
        assert block.type == "code"
        assert isinstance(block.content, Code)
        assert block.content.language == "rust"

    def test_to_do_defaults_unchecked(self):
        assert Block.to_do("later").content_as(ToDo).checked is False

    @pytest.mark.parametrize("level", [0, 4])
    def test_heading_factory_rejects_invalid_level(self, level):
        with pytest.raises(InvalidArgumentError):
            Block.heading("bad", level)
