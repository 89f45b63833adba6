"""Tests for tool argument schemas."""

import pydantic
import pytest

from miro_boards.types import BulkItemType, ShapeKind, StickyNoteColor
from mcp_server.schemas import (
    BulkCreateArguments,
    BulkDeleteArguments,
    CreateCardArguments,
    CreateShapeArguments,
    CreateStickyNoteArguments,
    GetAllItemsArguments,
    UpdateConnectorArguments,
)


class TestArgumentDecoding:
    """Tests for decoding camelCase arguments."""

    def test_camel_case_names(self):
        """Wire names should populate snake_case fields."""
        args = CreateCardArguments.model_validate(
            {"boardId": "b1", "title": "T", "assigneeId": "u1", "dueDate": "2024-01-01"}
        )
        assert args.board_id == "b1"
        assert args.assignee_id == "u1"
        assert args.due_date == "2024-01-01"

    def test_defaults(self):
        """Omitted optional fields should get their defaults."""
        note = CreateStickyNoteArguments.model_validate({"boardId": "b", "content": "c"})
        assert note.color is StickyNoteColor.YELLOW
        assert (note.x, note.y) == (0, 0)

        shape = CreateShapeArguments.model_validate({"boardId": "b"})
        assert shape.shape is ShapeKind.RECTANGLE

        page = GetAllItemsArguments.model_validate({"boardId": "b"})
        assert page.limit == 50
        assert page.cursor is None

    def test_type_filter_alias(self):
        """The item type filter should be given as 'type'."""
        args = GetAllItemsArguments.model_validate({"boardId": "b", "type": "frame"})
        assert args.item_type == "frame"

    def test_nested_style_validated(self):
        """Out-of-range nested style values should be rejected."""
        with pytest.raises(pydantic.ValidationError):
            CreateShapeArguments.model_validate(
                {"boardId": "b", "style": {"fontSize": 5}}
            )

    def test_nested_unknown_field_rejected(self):
        """Unknown nested fields should be rejected."""
        with pytest.raises(pydantic.ValidationError):
            UpdateConnectorArguments.model_validate(
                {"boardId": "b", "connectorId": "c", "style": {"strokeColour": "#000"}}
            )

    def test_card_minimum_width(self):
        """Cards narrower than 256 should be rejected."""
        with pytest.raises(pydantic.ValidationError):
            CreateCardArguments.model_validate(
                {"boardId": "b", "title": "T", "geometry": {"width": 100}}
            )


class TestBulkBounds:
    """Tests for bulk batch limits."""

    def test_delete_bounds(self):
        """Bulk delete should accept 1 to 50 ids."""
        BulkDeleteArguments.model_validate({"boardId": "b", "itemIds": ["a"] * 50})
        with pytest.raises(pydantic.ValidationError):
            BulkDeleteArguments.model_validate({"boardId": "b", "itemIds": []})
        with pytest.raises(pydantic.ValidationError):
            BulkDeleteArguments.model_validate({"boardId": "b", "itemIds": ["a"] * 51})

    def test_create_bounds(self):
        """Bulk create should accept 1 to 20 items."""
        items = [{"type": "text"}] * 20
        args = BulkCreateArguments.model_validate({"boardId": "b", "items": items})
        assert args.items[0].item_type is BulkItemType.TEXT
        with pytest.raises(pydantic.ValidationError):
            BulkCreateArguments.model_validate(
                {"boardId": "b", "items": [{"type": "text"}] * 21}
            )

    def test_connector_not_bulk_creatable(self):
        """Connectors are not a bulk item type."""
        with pytest.raises(pydantic.ValidationError):
            BulkCreateArguments.model_validate(
                {"boardId": "b", "items": [{"type": "connector"}]}
            )
