"""Board resource catalog.

Each board is addressable as ``miro://board/<board_id>``. Reading a
board resource returns the board's items (first page) as JSON text.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from miro_boards.errors import ValidationError
from miro_boards.models import Board

if TYPE_CHECKING:
    from miro_boards.client import MiroClient

logger = logging.getLogger(__name__)

RESOURCE_SCHEME = "miro"
BOARD_URI_PREFIX = f"{RESOURCE_SCHEME}://board/"
RESOURCE_MIME_TYPE = "application/json"


@dataclass(frozen=True)
class BoardResource:
    """A board exposed as a readable resource."""

    uri: str
    name: str
    description: str
    mime_type: str = RESOURCE_MIME_TYPE


def board_uri(board_id: str) -> str:
    """Return the resource URI for a board."""
    return f"{BOARD_URI_PREFIX}{board_id}"


def parse_board_uri(uri: str) -> str:
    """Extract the board id from a board resource URI.

    Args:
        uri: Resource URI, e.g. ``miro://board/uXjVO123=``.

    Returns:
        The board id.

    Raises:
        ValidationError: If the URI does not use the board prefix or has
            no id.
    """
    if not uri.startswith(BOARD_URI_PREFIX):
        raise ValidationError(
            f"Invalid Miro resource URI - must start with {BOARD_URI_PREFIX}"
        )
    board_id = uri[len(BOARD_URI_PREFIX) :].strip("/")
    if not board_id:
        raise ValidationError(f"Missing board id in resource URI: {uri}")
    return board_id


def board_resource(board: Board) -> BoardResource:
    """Describe a board as a resource."""
    return BoardResource(
        uri=board_uri(board.id),
        name=board.name,
        description=board.description or f"Miro board: {board.name}",
    )


async def list_board_resources(client: MiroClient) -> list[BoardResource]:
    """List every visible board as a resource."""
    boards = [Board.model_validate(raw) for raw in await client.get_boards()]
    logger.debug("Listing %d board resources", len(boards))
    return [board_resource(board) for board in boards]


async def read_board_resource(client: MiroClient, uri: str) -> str:
    """Read a board resource.

    The URI is validated before any request is made.

    Args:
        client: Miro API client.
        uri: Board resource URI.

    Returns:
        The board's items serialized as indented JSON.

    Raises:
        ValidationError: If the URI is malformed.
        RemoteError: If the items cannot be fetched.
    """
    board_id = parse_board_uri(uri)
    items = await client.get_board_items(board_id)
    return json.dumps(items, indent=2)


__all__ = [
    "BOARD_URI_PREFIX",
    "RESOURCE_MIME_TYPE",
    "RESOURCE_SCHEME",
    "BoardResource",
    "board_resource",
    "board_uri",
    "list_board_resources",
    "parse_board_uri",
    "read_board_resource",
]
