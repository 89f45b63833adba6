"""Pydantic models for Miro boards and item payload components.

Field names are snake_case in Python and camelCase on the wire
(``fill_color`` <-> ``fillColor``). Component models forbid unknown
fields so malformed style/geometry objects are rejected before any
request is made. Dump with ``by_alias=True, exclude_none=True``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from miro_boards.types import (
    LineStyle,
    StrokeCap,
    TextAlign,
    TextAlignVertical,
)


class MiroModel(BaseModel):
    """Base for payload components: camelCase aliases, no extra fields."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """Dump to the wire shape (aliases, None values omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Board(BaseModel):
    """A board as returned by ``GET /boards``.

    Only the fields the bridge relies on are declared; anything else the
    service returns is kept as extra data.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: str | None = None


class Position(MiroModel):
    """Item position on the board canvas."""

    x: float = Field(default=0, description="X coordinate")
    y: float = Field(default=0, description="Y coordinate")
    origin: str | None = Field(
        default=None, description="Anchor point of the position (e.g. 'center')"
    )


class Parent(MiroModel):
    """Reference to a parent frame."""

    id: str = Field(description="ID of the parent frame")


class ShapeGeometry(MiroModel):
    """Size and rotation of a shape."""

    width: float = Field(default=200, gt=0)
    height: float = Field(default=200, gt=0)
    rotation: float = Field(default=0)


class FrameGeometry(MiroModel):
    """Size of a frame."""

    width: float = Field(default=800, gt=0)
    height: float = Field(default=600, gt=0)


class CardGeometry(MiroModel):
    """Size of a card."""

    width: float = Field(default=320, ge=256)
    height: float = Field(default=176, gt=0)


class TextGeometry(MiroModel):
    """Width of a text item (height follows the content)."""

    width: float = Field(default=200, gt=0)


class ShapeStyle(MiroModel):
    """Style of a shape."""

    border_color: str | None = None
    border_opacity: float | None = Field(default=None, ge=0, le=1)
    border_style: LineStyle | None = None
    border_width: float | None = Field(default=None, ge=1, le=24)
    color: str | None = None
    fill_color: str | None = None
    fill_opacity: float | None = Field(default=None, ge=0, le=1)
    font_family: str | None = None
    font_size: float | None = Field(default=None, ge=10, le=288)
    text_align: TextAlign | None = None
    text_align_vertical: TextAlignVertical | None = None


class FrameStyle(MiroModel):
    """Style of a frame."""

    fill_color: str | None = None


class TextStyle(MiroModel):
    """Style of a text item."""

    color: str | None = None
    font_size: float | None = Field(default=None, ge=10, le=288)
    text_align: TextAlign | None = None


class CardStyle(MiroModel):
    """Style of a card."""

    fill_color: str | None = None
    text_color: str | None = None


class ConnectorStyle(MiroModel):
    """Stroke style of a connector."""

    stroke_color: str | None = None
    stroke_width: float | None = Field(default=None, ge=1, le=24)
    stroke_style: LineStyle | None = None
    start_stroke_cap: StrokeCap | None = None
    end_stroke_cap: StrokeCap | None = None


class RelativePosition(MiroModel):
    """Attachment point on an item, as percentages (e.g. '50%')."""

    x: str | None = Field(default=None, description="X position as percentage")
    y: str | None = Field(default=None, description="Y position as percentage")


class ConnectorEndpoint(MiroModel):
    """One end of a connector."""

    id: str = Field(description="ID of the connected item")
    position: RelativePosition | None = None


class Caption(MiroModel):
    """Text label placed along a connector."""

    content: str | None = Field(default=None, description="Caption text")
    position: str | None = Field(
        default=None, description="Position along the line as percentage"
    )
    text_align_vertical: TextAlignVertical = TextAlignVertical.MIDDLE


__all__ = [
    "Board",
    "Caption",
    "CardGeometry",
    "CardStyle",
    "ConnectorEndpoint",
    "ConnectorStyle",
    "FrameGeometry",
    "FrameStyle",
    "MiroModel",
    "Parent",
    "Position",
    "RelativePosition",
    "ShapeGeometry",
    "ShapeStyle",
    "TextGeometry",
    "TextStyle",
]
