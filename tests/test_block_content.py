"""
Tests for block content variants and the payload decoder table.
"""
import pytest

from typed_notion.exceptions import InvalidArgumentError, NotionDecodeError
from typed_notion.models import (
    CONTENT_DECODERS,
    BlockType,
    BulletedListItem,
    Code,
    Heading,
    Image,
    NumberedListItem,
    Paragraph,
    RichText,
    ToDo,
    decode_content,
)


class TestHeading:
    """Heading level invariant."""

    @pytest.mark.parametrize("level,expected", [
        (1, BlockType.HEADING_1),
        (2, BlockType.HEADING_2),
        (3, BlockType.HEADING_3),
    ])
    def test_reported_type_follows_level(self, level, expected):
        assert Heading.of("Title", level).block_type is expected

    @pytest.mark.parametrize("level", [0, 4, True, 2.0])
    def test_construction_rejects_invalid_level(self, level):
        with pytest.raises(InvalidArgumentError):
            Heading.of("Title", level)

    def test_setting_invalid_level_fails_and_keeps_old_level(self):
        heading = Heading.of("Title", 2)

        with pytest.raises(InvalidArgumentError):
            heading.level = 5

        assert heading.level == 2
        assert heading.block_type is BlockType.HEADING_2

    def test_bool_level_is_rejected_on_assignment(self):
        heading = Heading.of("Title", 3)

        with pytest.raises(InvalidArgumentError):
            heading.level = True

        assert heading.level == 3

    def test_changing_level_changes_reported_type(self):
        heading = Heading.of("Title", 1)
        heading.level = 3
        assert heading.block_type is BlockType.HEADING_3

    def test_is_toggleable_is_omitted_when_unset(self):
        assert "is_toggleable" not in Heading.of("Title").to_dict()
        assert Heading(rich_text=[], is_toggleable=True).to_dict()["is_toggleable"] is True


class TestTextVariants:
    """Paragraph, list items, to-do and code."""

    @pytest.mark.parametrize("variant,expected", [
        (Paragraph, BlockType.PARAGRAPH),
        (BulletedListItem, BlockType.BULLETED_LIST_ITEM),
        (NumberedListItem, BlockType.NUMBERED_LIST_ITEM),
    ])
    def test_of_wraps_single_default_run(self, variant, expected):
        content = variant.of("item")

        assert content.block_type is expected
        assert content.rich_text == [RichText.of("item")]
        assert content.color == "default"

    def test_variants_with_same_fields_are_not_equal(self):
        assert Paragraph.of("x") != BulletedListItem.of("x")

    def test_to_do(self):
        todo = ToDo.of("Ship it", checked=True)

        assert todo.block_type is BlockType.TO_DO
        assert todo.to_dict()["checked"] is True
        assert ToDo.from_dict(todo.to_dict()) == todo

    def test_code_caption_is_optional(self):
        code = Code.of("print('hi')", "python")

        assert code.block_type is BlockType.CODE
        assert code.to_dict() == {
            "rich_text": [RichText.of("print('hi')").to_dict()],
            "language": "python",
        }

        code.caption = RichText.list_of("example")
        assert Code.from_dict(code.to_dict()).caption == RichText.list_of("example")

    def test_from_dict_keeps_absent_color_absent(self):
        paragraph = Paragraph.from_dict({"rich_text": []})

        assert paragraph.color is None
        assert "color" not in paragraph.to_dict()


class TestImage:
    """Image source exclusivity."""

    def test_of_external(self):
        image = Image.of_external("https://example.com/cat.png")

        assert image.file is None
        assert image.external.url == "https://example.com/cat.png"
        assert image.block_type is BlockType.IMAGE
        assert image.to_dict() == {
            "type": "external",
            "external": {"url": "https://example.com/cat.png"},
        }

    def test_of_file(self):
        image = Image.of_file("https://s3.example.com/cat.png", "2024-01-01T00:00:00.000Z")

        assert image.external is None
        assert image.file.expiry_time == "2024-01-01T00:00:00.000Z"
        assert image.to_dict()["type"] == "file"

    def test_requires_a_source(self):
        with pytest.raises(InvalidArgumentError):
            Image()

    def test_rejects_both_sources(self):
        image = Image.of_external("https://example.com/a.png")

        with pytest.raises(InvalidArgumentError):
            image.file = Image.of_file("https://example.com/b.png").file

    def test_switching_source_after_clearing(self):
        image = Image.of_external("https://example.com/a.png")
        new_file = Image.of_file("https://example.com/b.png").file

        image.external = None
        image.file = new_file

        assert image.file == new_file


class TestDecoderTable:
    """Explicit wire type to decoder lookup."""

    def test_table_covers_every_variant_kind(self):
        assert set(CONTENT_DECODERS) == {
            "paragraph",
            "heading_1",
            "heading_2",
            "heading_3",
            "bulleted_list_item",
            "numbered_list_item",
            "to_do",
            "code",
            "image",
        }

    @pytest.mark.parametrize("wire,level", [("heading_1", 1), ("heading_2", 2), ("heading_3", 3)])
    def test_heading_keys_set_level_from_suffix(self, wire, level):
        heading = decode_content(wire, {"rich_text": []})

        assert isinstance(heading, Heading)
        assert heading.level == level

    def test_unknown_kind_decodes_to_none(self):
        assert decode_content("toggle", {"rich_text": []}) is None

    def test_missing_payload_decodes_to_none(self):
        assert decode_content("paragraph", None) is None

    def test_non_object_payload_is_rejected(self):
        with pytest.raises(NotionDecodeError):
            decode_content("paragraph", ["not", "an", "object"])

    def test_image_with_unmodelled_source_decodes_to_none(self):
        payload = {"type": "file_upload", "file_upload": {"id": "upload-1"}, "caption": []}

        assert decode_content("image", payload) is None
