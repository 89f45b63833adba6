"""Pydantic schemas for MCP tool arguments.

One model per tool. The model's JSON schema (by alias) is the tool's
declared input schema, and the same model decodes every invocation, so
required fields, enums, ranges and defaults are enforced in one place.
Argument names are camelCase on the wire (``boardId``, ``itemIds``).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from miro_boards.bulk import MAX_BULK_CREATE, MAX_BULK_DELETE
from miro_boards.client import DEFAULT_PAGE_LIMIT
from miro_boards.models import (
    Caption,
    CardGeometry,
    CardStyle,
    ConnectorEndpoint,
    ConnectorStyle,
    FrameGeometry,
    FrameStyle,
    Parent,
    Position,
    ShapeGeometry,
    ShapeStyle,
    TextGeometry,
    TextStyle,
)
from miro_boards.types import (
    BulkItemType,
    ConnectorShape,
    ShapeKind,
    StickyNoteColor,
)


class ToolArguments(BaseModel):
    """Base for tool arguments: camelCase aliases, unknown fields rejected."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class NoArguments(ToolArguments):
    """Arguments for tools that take none."""


class BoardArguments(ToolArguments):
    """Arguments naming a single board."""

    board_id: str = Field(min_length=1, description="ID of the board")


class ItemArguments(BoardArguments):
    """Arguments naming an item on a board."""

    item_id: str = Field(min_length=1, description="ID of the item")


class ConnectorArguments(BoardArguments):
    """Arguments naming a connector on a board."""

    connector_id: str = Field(min_length=1, description="ID of the connector")


class PageArguments(BoardArguments):
    """Arguments for a paged listing."""

    limit: int = Field(
        default=DEFAULT_PAGE_LIMIT,
        ge=1,
        le=DEFAULT_PAGE_LIMIT,
        description="Maximum number of results to return (default: 50, max: 50)",
    )
    cursor: str | None = Field(default=None, description="Cursor for pagination")


# Generic items


class GetAllItemsArguments(PageArguments):
    """Arguments for get_all_items."""

    item_type: str | None = Field(
        default=None,
        alias="type",
        description="Only return items of this type (e.g. 'sticky_note')",
    )


class UpdateItemPositionArguments(ItemArguments):
    """Arguments for update_item_position."""

    position: Position | None = Field(default=None, description="New position")
    parent: Parent | None = Field(default=None, description="New parent frame")


class BulkDeleteArguments(BoardArguments):
    """Arguments for bulk_delete_items."""

    item_ids: list[str] = Field(
        min_length=1,
        max_length=MAX_BULK_DELETE,
        description="IDs of the items to delete",
    )


class BulkItem(ToolArguments):
    """One item of a bulk creation request.

    The item-specific objects are passed through to the service.
    """

    item_type: BulkItemType = Field(alias="type", description="Type of item")
    data: dict[str, Any] | None = Field(
        default=None, description="Item-specific data configuration"
    )
    style: dict[str, Any] | None = Field(
        default=None, description="Item-specific style configuration"
    )
    position: dict[str, Any] | None = Field(
        default=None, description="Item position configuration"
    )
    geometry: dict[str, Any] | None = Field(
        default=None, description="Item geometry configuration"
    )
    parent: dict[str, Any] | None = Field(
        default=None,
        description="Parent item configuration (not supported for frames)",
    )


class BulkCreateArguments(BoardArguments):
    """Arguments for bulk_create_items."""

    items: list[BulkItem] = Field(
        min_length=1,
        max_length=MAX_BULK_CREATE,
        description="Items to create in a single transaction",
    )


# Sticky notes


class CreateStickyNoteArguments(BoardArguments):
    """Arguments for create_sticky_note."""

    content: str = Field(description="Text content of the sticky note")
    color: StickyNoteColor = Field(
        default=StickyNoteColor.YELLOW, description="Color of the sticky note"
    )
    x: float = Field(default=0, description="X coordinate position")
    y: float = Field(default=0, description="Y coordinate position")
    parent: Parent | None = Field(
        default=None, description="Parent frame to attach the sticky note to"
    )


class UpdateStickyNoteArguments(ItemArguments):
    """Arguments for update_sticky_note."""

    content: str | None = Field(default=None, description="New text content")
    color: StickyNoteColor | None = Field(default=None, description="New color")


# Shapes


class CreateShapeArguments(BoardArguments):
    """Arguments for create_shape."""

    shape: ShapeKind = Field(
        default=ShapeKind.RECTANGLE, description="Type of shape to create"
    )
    content: str | None = Field(
        default=None, description="Text content to display on the shape"
    )
    style: ShapeStyle | None = None
    position: Position | None = None
    geometry: ShapeGeometry | None = None
    parent: Parent | None = Field(
        default=None, description="Parent frame to attach the shape to"
    )


class UpdateShapeArguments(ItemArguments):
    """Arguments for update_shape."""

    shape: ShapeKind | None = None
    content: str | None = None
    style: ShapeStyle | None = None
    position: Position | None = None
    geometry: ShapeGeometry | None = None


# Connectors


class CreateConnectorArguments(BoardArguments):
    """Arguments for create_connector."""

    start_item: ConnectorEndpoint = Field(description="Item the connector starts at")
    end_item: ConnectorEndpoint = Field(description="Item the connector ends at")
    style: ConnectorStyle | None = None
    captions: list[Caption] | None = None
    shape: ConnectorShape = Field(
        default=ConnectorShape.CURVED, description="Shape of the connector line"
    )


class GetConnectorsArguments(PageArguments):
    """Arguments for get_connectors."""


class UpdateConnectorArguments(ConnectorArguments):
    """Arguments for update_connector."""

    start_item: ConnectorEndpoint | None = None
    end_item: ConnectorEndpoint | None = None
    style: ConnectorStyle | None = None
    shape: ConnectorShape | None = None


# Frames, text and cards


class CreateFrameArguments(BoardArguments):
    """Arguments for create_frame."""

    title: str = Field(description="Title of the frame")
    style: FrameStyle | None = None
    position: Position | None = None
    geometry: FrameGeometry | None = None


class ItemsInFrameArguments(BoardArguments):
    """Arguments for get_items_in_frame."""

    frame_id: str = Field(min_length=1, description="ID of the frame")


class CreateTextArguments(BoardArguments):
    """Arguments for create_text."""

    content: str = Field(description="Text content")
    style: TextStyle | None = None
    position: Position | None = None
    geometry: TextGeometry | None = None
    parent: Parent | None = Field(
        default=None, description="Parent frame to attach the text to"
    )


class CreateCardArguments(BoardArguments):
    """Arguments for create_card."""

    title: str = Field(description="Title of the card")
    description: str | None = Field(default=None, description="Description of the card")
    assignee_id: str | None = Field(default=None, description="User ID of the assignee")
    due_date: str | None = Field(
        default=None, description="Due date in ISO 8601 format"
    )
    style: CardStyle | None = None
    position: Position | None = None
    geometry: CardGeometry | None = None
    parent: Parent | None = Field(
        default=None, description="Parent frame to attach the card to"
    )


__all__ = [
    "BoardArguments",
    "BulkCreateArguments",
    "BulkDeleteArguments",
    "BulkItem",
    "ConnectorArguments",
    "CreateCardArguments",
    "CreateConnectorArguments",
    "CreateFrameArguments",
    "CreateShapeArguments",
    "CreateStickyNoteArguments",
    "CreateTextArguments",
    "GetAllItemsArguments",
    "GetConnectorsArguments",
    "ItemArguments",
    "ItemsInFrameArguments",
    "NoArguments",
    "PageArguments",
    "ToolArguments",
    "UpdateConnectorArguments",
    "UpdateItemPositionArguments",
    "UpdateShapeArguments",
    "UpdateStickyNoteArguments",
]
