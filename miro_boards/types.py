"""Shared type definitions for miro_boards.

Enumerations for the item variants and the enumerated style values
accepted by the Miro API. Kept in one module to avoid circular imports
between the client, payload builders and the MCP schemas.
"""

from enum import Enum


class ItemType(str, Enum):
    """Board item variants and their REST collections."""

    ITEM = "item"
    STICKY_NOTE = "sticky_note"
    SHAPE = "shape"
    CONNECTOR = "connector"
    FRAME = "frame"
    TEXT = "text"
    CARD = "card"
    APP_CARD = "app_card"
    DOCUMENT = "document"
    IMAGE = "image"
    EMBED = "embed"

    @property
    def collection(self) -> str:
        """REST collection segment, e.g. ``sticky_notes``."""
        return f"{self.value}s"


class BulkItemType(str, Enum):
    """Item variants accepted by the bulk creation endpoint."""

    APP_CARD = "app_card"
    TEXT = "text"
    SHAPE = "shape"
    STICKY_NOTE = "sticky_note"
    IMAGE = "image"
    DOCUMENT = "document"
    CARD = "card"
    FRAME = "frame"
    EMBED = "embed"


class StickyNoteColor(str, Enum):
    """Fill colors available for sticky notes."""

    GRAY = "gray"
    LIGHT_YELLOW = "light_yellow"
    YELLOW = "yellow"
    ORANGE = "orange"
    LIGHT_GREEN = "light_green"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    CYAN = "cyan"
    LIGHT_PINK = "light_pink"
    PINK = "pink"
    VIOLET = "violet"
    RED = "red"
    LIGHT_BLUE = "light_blue"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    BLACK = "black"


class ShapeKind(str, Enum):
    """Basic and flowchart shapes."""

    RECTANGLE = "rectangle"
    ROUND_RECTANGLE = "round_rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RHOMBUS = "rhombus"
    PARALLELOGRAM = "parallelogram"
    TRAPEZOID = "trapezoid"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    OCTAGON = "octagon"
    WEDGE_ROUND_RECTANGLE_CALLOUT = "wedge_round_rectangle_callout"
    STAR = "star"
    FLOW_CHART_PREDEFINED_PROCESS = "flow_chart_predefined_process"
    CLOUD = "cloud"
    CROSS = "cross"
    CAN = "can"
    RIGHT_ARROW = "right_arrow"
    LEFT_ARROW = "left_arrow"
    LEFT_RIGHT_ARROW = "left_right_arrow"
    LEFT_BRACE = "left_brace"
    RIGHT_BRACE = "right_brace"
    FLOW_CHART_CONNECTOR = "flow_chart_connector"
    FLOW_CHART_MAGNETIC_DISK = "flow_chart_magnetic_disk"
    FLOW_CHART_INPUT_OUTPUT = "flow_chart_input_output"
    FLOW_CHART_DECISION = "flow_chart_decision"
    FLOW_CHART_DELAY = "flow_chart_delay"
    FLOW_CHART_DISPLAY = "flow_chart_display"
    FLOW_CHART_DOCUMENT = "flow_chart_document"
    FLOW_CHART_MAGNETIC_DRUM = "flow_chart_magnetic_drum"
    FLOW_CHART_INTERNAL_STORAGE = "flow_chart_internal_storage"
    FLOW_CHART_MANUAL_INPUT = "flow_chart_manual_input"
    FLOW_CHART_MANUAL_OPERATION = "flow_chart_manual_operation"
    FLOW_CHART_MERGE = "flow_chart_merge"
    FLOW_CHART_MULTIDOCUMENTS = "flow_chart_multidocuments"
    FLOW_CHART_NOTE_CURLY_LEFT = "flow_chart_note_curly_left"
    FLOW_CHART_NOTE_CURLY_RIGHT = "flow_chart_note_curly_right"
    FLOW_CHART_NOTE_SQUARE = "flow_chart_note_square"
    FLOW_CHART_OFFPAGE_CONNECTOR = "flow_chart_offpage_connector"
    FLOW_CHART_OR = "flow_chart_or"
    FLOW_CHART_PREDEFINED_PROCESS_2 = "flow_chart_predefined_process_2"
    FLOW_CHART_PREPARATION = "flow_chart_preparation"
    FLOW_CHART_PROCESS = "flow_chart_process"
    FLOW_CHART_ONLINE_STORAGE = "flow_chart_online_storage"
    FLOW_CHART_SUMMING_JUNCTION = "flow_chart_summing_junction"
    FLOW_CHART_TERMINATOR = "flow_chart_terminator"


class ConnectorShape(str, Enum):
    """Path style of a connector line."""

    STRAIGHT = "straight"
    CURVED = "curved"
    ELBOWED = "elbowed"


class StrokeCap(str, Enum):
    """Decoration at either end of a connector."""

    NONE = "none"
    STEALTH = "stealth"
    ROUNDED_STEALTH = "rounded_stealth"
    DIAMOND = "diamond"
    DIAMOND_FILLED = "diamond_filled"
    OVAL = "oval"
    OVAL_FILLED = "oval_filled"
    ARROW = "arrow"
    TRIANGLE = "triangle"
    TRIANGLE_FILLED = "triangle_filled"
    CIRCLE = "circle"
    CIRCLE_FILLED = "circle_filled"
    SQUARE = "square"
    SQUARE_FILLED = "square_filled"
    ERD_ONE = "erd_one"
    ERD_MANY = "erd_many"
    ERD_ONE_OR_MANY = "erd_one_or_many"
    ERD_ZERO_OR_ONE = "erd_zero_or_one"
    ERD_ONE_AND_ONLY_ONE = "erd_one_and_only_one"
    ERD_ZERO_OR_MANY = "erd_zero_or_many"


class LineStyle(str, Enum):
    """Border or stroke pattern."""

    NORMAL = "normal"
    DOTTED = "dotted"
    DASHED = "dashed"


class TextAlign(str, Enum):
    """Horizontal text alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextAlignVertical(str, Enum):
    """Vertical text alignment."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


__all__ = [
    "BulkItemType",
    "ConnectorShape",
    "ItemType",
    "LineStyle",
    "ShapeKind",
    "StickyNoteColor",
    "StrokeCap",
    "TextAlign",
    "TextAlignVertical",
]
