"""Tool handlers.

Every tool is a thin wrapper: decoded arguments go through a payload
builder (for writes) and one MiroClient call. Mutating tools answer
with a short confirmation sentence, read tools with the service's JSON.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from mcp_server.registry import Content, ToolRegistry, json_block, text_block
from mcp_server.schemas import (
    BoardArguments,
    BulkCreateArguments,
    BulkDeleteArguments,
    ConnectorArguments,
    CreateCardArguments,
    CreateConnectorArguments,
    CreateFrameArguments,
    CreateShapeArguments,
    CreateStickyNoteArguments,
    CreateTextArguments,
    GetAllItemsArguments,
    GetConnectorsArguments,
    ItemArguments,
    ItemsInFrameArguments,
    NoArguments,
    UpdateConnectorArguments,
    UpdateItemPositionArguments,
    UpdateShapeArguments,
    UpdateStickyNoteArguments,
)
from miro_boards import bulk
from miro_boards.models import Board
from miro_boards.payloads import (
    bulk_item_payload,
    card_payload,
    connector_payload,
    connector_update_payload,
    frame_payload,
    item_move_payload,
    shape_payload,
    shape_update_payload,
    sticky_note_payload,
    sticky_note_update_payload,
    text_payload,
)
from miro_boards.types import ItemType

if TYPE_CHECKING:
    from miro_boards.client import MiroClient

registry = ToolRegistry()


# Boards


@registry.tool("list_boards", NoArguments, "List all available Miro boards and their IDs")
async def list_boards(client: MiroClient, args: NoArguments) -> Content:
    boards = [Board.model_validate(raw) for raw in await client.get_boards()]
    return [text_block("Here are the available Miro boards:")] + [
        text_block(f"Board ID: {board.id}, Name: {board.name}") for board in boards
    ]


@registry.tool("get_board", BoardArguments, "Get details of a specific Miro board")
async def get_board(client: MiroClient, args: BoardArguments) -> Content:
    return [json_block(await client.get_board(args.board_id))]


# Generic items


@registry.tool("get_all_items", GetAllItemsArguments, "Get all items from a Miro board")
async def get_all_items(client: MiroClient, args: GetAllItemsArguments) -> Content:
    page = await client.get_items(
        args.board_id,
        limit=args.limit,
        cursor=args.cursor,
        item_type=args.item_type,
    )
    return [json_block(page)]


@registry.tool(
    "get_specific_item",
    ItemArguments,
    "Get a specific item from a Miro board by its ID",
)
async def get_specific_item(client: MiroClient, args: ItemArguments) -> Content:
    return [json_block(await client.get_item(args.board_id, args.item_id))]


@registry.tool(
    "update_item_position",
    UpdateItemPositionArguments,
    "Update the position or parent of an item on a Miro board",
)
async def update_item_position(
    client: MiroClient, args: UpdateItemPositionArguments
) -> Content:
    payload = item_move_payload(args.position, args.parent)
    await client.update_item(args.board_id, args.item_id, payload)
    return [
        text_block(f"Updated item {args.item_id} position/parent on board {args.board_id}")
    ]


@registry.tool("delete_item", ItemArguments, "Delete a specific item from a Miro board")
async def delete_item(client: MiroClient, args: ItemArguments) -> Content:
    await client.delete_item(args.board_id, args.item_id)
    return [text_block(f"Deleted item {args.item_id} from board {args.board_id}")]


# Bulk


@registry.tool(
    "bulk_delete_items",
    BulkDeleteArguments,
    "Delete multiple items from a Miro board (max 50 items). "
    "Failures are reported per item and do not stop the remaining deletes.",
)
async def bulk_delete_items(client: MiroClient, args: BulkDeleteArguments) -> Content:
    outcome = await bulk.bulk_delete_items(client, args.board_id, args.item_ids)
    summary = (
        f"Bulk delete completed. Deleted: {outcome.succeeded} items. "
        f"Errors: {outcome.failed}"
    )
    return [text_block(summary), json_block(outcome.to_dict())]


@registry.tool(
    "bulk_create_items",
    BulkCreateArguments,
    "Create multiple items on a Miro board in a single transaction (max 20 items)",
)
async def bulk_create_items(client: MiroClient, args: BulkCreateArguments) -> Content:
    items = [
        bulk_item_payload(
            item.item_type,
            data=item.data,
            style=item.style,
            position=item.position,
            geometry=item.geometry,
            parent=item.parent,
        )
        for item in args.items
    ]
    created = await bulk.bulk_create_items(client, args.board_id, items)
    return [text_block(f"Created {len(created)} items on board {args.board_id}")]


# Sticky notes


@registry.tool(
    "create_sticky_note",
    CreateStickyNoteArguments,
    "Create a sticky note on a Miro board. By default, sticky notes are 199x228 "
    "and available in these colors: gray, light_yellow, yellow, orange, "
    "light_green, green, dark_green, cyan, light_pink, pink, violet, red, "
    "light_blue, blue, dark_blue, black.",
)
async def create_sticky_note(
    client: MiroClient, args: CreateStickyNoteArguments
) -> Content:
    payload = sticky_note_payload(args.content, args.color, args.x, args.y, args.parent)
    note = await client.create_item(args.board_id, ItemType.STICKY_NOTE, payload)
    return [text_block(f"Created sticky note {note['id']} on board {args.board_id}")]


@registry.tool(
    "get_sticky_note", ItemArguments, "Get a specific sticky note from a Miro board"
)
async def get_sticky_note(client: MiroClient, args: ItemArguments) -> Content:
    note = await client.get_typed_item(args.board_id, ItemType.STICKY_NOTE, args.item_id)
    return [json_block(note)]


@registry.tool(
    "update_sticky_note",
    UpdateStickyNoteArguments,
    "Update an existing sticky note on a Miro board",
)
async def update_sticky_note(
    client: MiroClient, args: UpdateStickyNoteArguments
) -> Content:
    payload = sticky_note_update_payload(args.content, args.color)
    await client.update_typed_item(
        args.board_id, ItemType.STICKY_NOTE, args.item_id, payload
    )
    return [text_block(f"Updated sticky note {args.item_id} on board {args.board_id}")]


@registry.tool("delete_sticky_note", ItemArguments, "Delete a sticky note from a Miro board")
async def delete_sticky_note(client: MiroClient, args: ItemArguments) -> Content:
    await client.delete_typed_item(args.board_id, ItemType.STICKY_NOTE, args.item_id)
    return [text_block(f"Deleted sticky note {args.item_id} from board {args.board_id}")]


# Shapes


@registry.tool(
    "create_shape",
    CreateShapeArguments,
    "Create a shape on a Miro board. Available shapes include basic shapes "
    "(rectangle, circle, etc.) and flowchart shapes (process, decision, etc.). "
    "Standard geometry specs: width and height in pixels (default 200x200)",
)
async def create_shape(client: MiroClient, args: CreateShapeArguments) -> Content:
    payload = shape_payload(
        args.shape,
        content=args.content,
        style=args.style,
        position=args.position,
        geometry=args.geometry,
        parent=args.parent,
    )
    shape = await client.create_item(args.board_id, ItemType.SHAPE, payload)
    return [
        text_block(
            f"Created {args.shape.value} shape with ID {shape['id']} "
            f"on board {args.board_id}"
        )
    ]


@registry.tool("get_shape", ItemArguments, "Get a specific shape from a Miro board")
async def get_shape(client: MiroClient, args: ItemArguments) -> Content:
    shape = await client.get_typed_item(args.board_id, ItemType.SHAPE, args.item_id)
    return [json_block(shape)]


@registry.tool("update_shape", UpdateShapeArguments, "Update an existing shape on a Miro board")
async def update_shape(client: MiroClient, args: UpdateShapeArguments) -> Content:
    payload = shape_update_payload(
        args.shape,
        content=args.content,
        style=args.style,
        position=args.position,
        geometry=args.geometry,
    )
    await client.update_typed_item(args.board_id, ItemType.SHAPE, args.item_id, payload)
    return [text_block(f"Updated shape {args.item_id} on board {args.board_id}")]


@registry.tool("delete_shape", ItemArguments, "Delete a shape from a Miro board")
async def delete_shape(client: MiroClient, args: ItemArguments) -> Content:
    await client.delete_typed_item(args.board_id, ItemType.SHAPE, args.item_id)
    return [text_block(f"Deleted shape {args.item_id} from board {args.board_id}")]


# Connectors


@registry.tool(
    "create_connector",
    CreateConnectorArguments,
    "Create a connector between two items on a Miro board",
)
async def create_connector(client: MiroClient, args: CreateConnectorArguments) -> Content:
    payload = connector_payload(
        args.start_item,
        args.end_item,
        style=args.style,
        captions=args.captions,
        shape=args.shape,
    )
    connector = await client.create_item(args.board_id, ItemType.CONNECTOR, payload)
    return [
        text_block(
            f"Created connector {connector['id']} from {args.start_item.id} "
            f"to {args.end_item.id}"
        )
    ]


@registry.tool("get_connectors", GetConnectorsArguments, "Get all connectors from a Miro board")
async def get_connectors(client: MiroClient, args: GetConnectorsArguments) -> Content:
    page = await client.get_connectors(args.board_id, limit=args.limit, cursor=args.cursor)
    return [json_block(page)]


@registry.tool(
    "get_connector", ConnectorArguments, "Get a specific connector from a Miro board"
)
async def get_connector(client: MiroClient, args: ConnectorArguments) -> Content:
    connector = await client.get_typed_item(
        args.board_id, ItemType.CONNECTOR, args.connector_id
    )
    return [json_block(connector)]


@registry.tool(
    "update_connector",
    UpdateConnectorArguments,
    "Update an existing connector on a Miro board",
)
async def update_connector(client: MiroClient, args: UpdateConnectorArguments) -> Content:
    payload = connector_update_payload(
        start_item=args.start_item,
        end_item=args.end_item,
        style=args.style,
        shape=args.shape,
    )
    await client.update_typed_item(
        args.board_id, ItemType.CONNECTOR, args.connector_id, payload
    )
    return [text_block(f"Updated connector {args.connector_id} on board {args.board_id}")]


@registry.tool("delete_connector", ConnectorArguments, "Delete a connector from a Miro board")
async def delete_connector(client: MiroClient, args: ConnectorArguments) -> Content:
    await client.delete_typed_item(args.board_id, ItemType.CONNECTOR, args.connector_id)
    return [
        text_block(f"Deleted connector {args.connector_id} from board {args.board_id}")
    ]


# Frames


@registry.tool("create_frame", CreateFrameArguments, "Create a frame on a Miro board")
async def create_frame(client: MiroClient, args: CreateFrameArguments) -> Content:
    payload = frame_payload(
        args.title,
        style=args.style,
        position=args.position,
        geometry=args.geometry,
    )
    frame = await client.create_item(args.board_id, ItemType.FRAME, payload)
    return [
        text_block(
            f'Created frame "{args.title}" with ID {frame["id"]} on board {args.board_id}'
        )
    ]


@registry.tool("get_frames", BoardArguments, "Get all frames from a Miro board")
async def get_frames(client: MiroClient, args: BoardArguments) -> Content:
    return [json_block(await client.get_frames(args.board_id))]


@registry.tool(
    "get_items_in_frame",
    ItemsInFrameArguments,
    "Get all items contained within a specific frame on a Miro board",
)
async def get_items_in_frame(client: MiroClient, args: ItemsInFrameArguments) -> Content:
    items = await client.get_items_in_frame(args.board_id, args.frame_id)
    return [json_block(items)]


# Text and cards


@registry.tool("create_text", CreateTextArguments, "Create a text item on a Miro board")
async def create_text(client: MiroClient, args: CreateTextArguments) -> Content:
    payload = text_payload(
        args.content,
        style=args.style,
        position=args.position,
        geometry=args.geometry,
        parent=args.parent,
    )
    text = await client.create_item(args.board_id, ItemType.TEXT, payload)
    return [
        text_block(f"Created text item with ID {text['id']} on board {args.board_id}")
    ]


@registry.tool("create_card", CreateCardArguments, "Create a card item on a Miro board")
async def create_card(client: MiroClient, args: CreateCardArguments) -> Content:
    payload = card_payload(
        args.title,
        description=args.description,
        assignee_id=args.assignee_id,
        due_date=args.due_date,
        style=args.style,
        position=args.position,
        geometry=args.geometry,
        parent=args.parent,
    )
    card = await client.create_item(args.board_id, ItemType.CARD, payload)
    return [
        text_block(
            f'Created card "{args.title}" with ID {card["id"]} on board {args.board_id}'
        )
    ]


def describe_tools(as_json: bool = False) -> str:
    """Render the tool catalog for the ``tools`` CLI command.

    Args:
        as_json: Emit each tool's input schema instead of its description.

    Returns:
        One line per tool, or a JSON object keyed by tool name.
    """
    if as_json:
        return json.dumps(
            {spec.name: spec.input_schema() for spec in registry.specs()}, indent=2
        )
    return "\n".join(f"{spec.name}: {spec.description}" for spec in registry.specs())


__all__ = ["describe_tools", "registry"]
