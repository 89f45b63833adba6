"""Request payload builders for each item variant.

Each builder applies the documented defaults for omitted optional
fields and lays out the body the way the Miro API expects it for that
variant. Two structural quirks matter:

- shapes carry their kind at ``data.shape`` (the API rejects ``data.type``)
- frames are always created as ``data.type = "freeform"``,
  ``data.format = "custom"``
"""

from __future__ import annotations

from typing import Any

from miro_boards.errors import ValidationError
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
    LineStyle,
    ShapeKind,
    StickyNoteColor,
    StrokeCap,
)

DEFAULT_FRAME_STYLE = FrameStyle(fill_color="#ffffff")

DEFAULT_CONNECTOR_STYLE = ConnectorStyle(
    stroke_color="#333333",
    stroke_width=2,
    stroke_style=LineStyle.NORMAL,
    end_stroke_cap=StrokeCap.ROUNDED_STEALTH,
)

FRAME_DATA_TYPE = "freeform"
FRAME_DATA_FORMAT = "custom"


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


def _with_parent(payload: dict[str, Any], parent: Parent | None) -> dict[str, Any]:
    if parent is not None:
        payload["parent"] = parent.to_payload()
    return payload


def sticky_note_payload(
    content: str,
    color: StickyNoteColor = StickyNoteColor.YELLOW,
    x: float = 0,
    y: float = 0,
    parent: Parent | None = None,
) -> dict[str, Any]:
    """Build a sticky note creation body."""
    payload: dict[str, Any] = {
        "data": {"content": content},
        "style": {"fillColor": StickyNoteColor(color).value},
        "position": {"x": x, "y": y},
    }
    return _with_parent(payload, parent)


def sticky_note_update_payload(
    content: str | None = None,
    color: StickyNoteColor | None = None,
) -> dict[str, Any]:
    """Build a sticky note update body with only the given fields.

    Empty content is treated as not given, so an update never blanks a note.
    """
    payload: dict[str, Any] = {}
    if content:
        payload["data"] = {"content": content}
    if color is not None:
        payload["style"] = {"fillColor": StickyNoteColor(color).value}
    return payload


def shape_payload(
    shape: ShapeKind = ShapeKind.RECTANGLE,
    content: str | None = None,
    style: ShapeStyle | None = None,
    position: Position | None = None,
    geometry: ShapeGeometry | None = None,
    parent: Parent | None = None,
) -> dict[str, Any]:
    """Build a shape creation body.

    The shape kind goes under ``data.shape``; content is omitted when
    not given.
    """
    payload: dict[str, Any] = {
        "data": _drop_none({"shape": ShapeKind(shape).value, "content": content}),
        "style": (style or ShapeStyle()).to_payload(),
        "position": (position or Position()).to_payload(),
        "geometry": (geometry or ShapeGeometry()).to_payload(),
    }
    return _with_parent(payload, parent)


def shape_update_payload(
    shape: ShapeKind | None = None,
    content: str | None = None,
    style: ShapeStyle | None = None,
    position: Position | None = None,
    geometry: ShapeGeometry | None = None,
) -> dict[str, Any]:
    """Build a shape update body with only the given fields."""
    payload: dict[str, Any] = {}
    data = _drop_none(
        {
            "shape": ShapeKind(shape).value if shape is not None else None,
            "content": content,
        }
    )
    if data:
        payload["data"] = data
    if style is not None:
        payload["style"] = style.to_payload()
    if position is not None:
        payload["position"] = position.to_payload()
    if geometry is not None:
        payload["geometry"] = geometry.to_payload()
    return payload


def connector_payload(
    start_item: ConnectorEndpoint,
    end_item: ConnectorEndpoint,
    style: ConnectorStyle | None = None,
    captions: list[Caption] | None = None,
    shape: ConnectorShape = ConnectorShape.CURVED,
) -> dict[str, Any]:
    """Build a connector creation body."""
    return {
        "startItem": start_item.to_payload(),
        "endItem": end_item.to_payload(),
        "shape": ConnectorShape(shape).value,
        "style": (style or DEFAULT_CONNECTOR_STYLE).to_payload(),
        "captions": [caption.to_payload() for caption in captions or []],
    }


def connector_update_payload(
    start_item: ConnectorEndpoint | None = None,
    end_item: ConnectorEndpoint | None = None,
    style: ConnectorStyle | None = None,
    shape: ConnectorShape | None = None,
) -> dict[str, Any]:
    """Build a connector update body with only the given fields."""
    payload: dict[str, Any] = {}
    if start_item is not None:
        payload["startItem"] = start_item.to_payload()
    if end_item is not None:
        payload["endItem"] = end_item.to_payload()
    if style is not None:
        payload["style"] = style.to_payload()
    if shape is not None:
        payload["shape"] = ConnectorShape(shape).value
    return payload


def frame_payload(
    title: str,
    style: FrameStyle | None = None,
    position: Position | None = None,
    geometry: FrameGeometry | None = None,
) -> dict[str, Any]:
    """Build a frame creation body (always a custom freeform frame)."""
    return {
        "data": {
            "title": title,
            "type": FRAME_DATA_TYPE,
            "format": FRAME_DATA_FORMAT,
        },
        "style": (style or DEFAULT_FRAME_STYLE).to_payload(),
        "position": (position or Position()).to_payload(),
        "geometry": (geometry or FrameGeometry()).to_payload(),
    }


def text_payload(
    content: str,
    style: TextStyle | None = None,
    position: Position | None = None,
    geometry: TextGeometry | None = None,
    parent: Parent | None = None,
) -> dict[str, Any]:
    """Build a text item creation body."""
    payload: dict[str, Any] = {
        "data": {"content": content},
        "style": (style or TextStyle()).to_payload(),
        "position": (position or Position()).to_payload(),
        "geometry": (geometry or TextGeometry()).to_payload(),
    }
    return _with_parent(payload, parent)


def card_payload(
    title: str,
    description: str | None = None,
    assignee_id: str | None = None,
    due_date: str | None = None,
    style: CardStyle | None = None,
    position: Position | None = None,
    geometry: CardGeometry | None = None,
    parent: Parent | None = None,
) -> dict[str, Any]:
    """Build a card creation body."""
    payload: dict[str, Any] = {
        "data": _drop_none(
            {
                "title": title,
                "description": description,
                "assigneeId": assignee_id,
                "dueDate": due_date,
            }
        ),
        "style": (style or CardStyle()).to_payload(),
        "position": (position or Position()).to_payload(),
        "geometry": (geometry or CardGeometry()).to_payload(),
    }
    return _with_parent(payload, parent)


def item_move_payload(
    position: Position | None = None,
    parent: Parent | None = None,
) -> dict[str, Any]:
    """Build a generic item update body (position and/or parent)."""
    payload: dict[str, Any] = {}
    if position is not None:
        payload["position"] = position.to_payload()
    return _with_parent(payload, parent)


def bulk_item_payload(
    item_type: BulkItemType,
    data: dict[str, Any] | None = None,
    style: dict[str, Any] | None = None,
    position: dict[str, Any] | None = None,
    geometry: dict[str, Any] | None = None,
    parent: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build one entry of a bulk creation request.

    The item-specific objects are passed through, except for the
    variant quirks: a shape's kind given as ``data.type`` is moved to
    ``data.shape``, and frames default to a custom freeform frame and
    may not have a parent.

    Raises:
        ValidationError: If a frame is given a parent.
    """
    kind = BulkItemType(item_type)
    item_data = dict(data or {})

    if kind is BulkItemType.SHAPE and "shape" not in item_data and "type" in item_data:
        item_data["shape"] = item_data.pop("type")
    elif kind is BulkItemType.FRAME:
        if parent is not None:
            raise ValidationError("Frames cannot be created with a parent")
        item_data.setdefault("type", FRAME_DATA_TYPE)
        item_data.setdefault("format", FRAME_DATA_FORMAT)

    payload: dict[str, Any] = {"type": kind.value}
    if item_data:
        payload["data"] = item_data
    payload.update(
        _drop_none(
            {
                "style": style,
                "position": position,
                "geometry": geometry,
                "parent": parent,
            }
        )
    )
    return payload


__all__ = [
    "DEFAULT_CONNECTOR_STYLE",
    "DEFAULT_FRAME_STYLE",
    "FRAME_DATA_FORMAT",
    "FRAME_DATA_TYPE",
    "bulk_item_payload",
    "card_payload",
    "connector_payload",
    "connector_update_payload",
    "frame_payload",
    "item_move_payload",
    "shape_payload",
    "shape_update_payload",
    "sticky_note_payload",
    "sticky_note_update_payload",
    "text_payload",
]
