"""Async client for the Miro v2 REST API.

This module handles:
- Authenticated JSON request/response round trips
- Normalizing non-success responses into RemoteError
- Typed board and item operations (thin wrappers over request())

Pagination cursors returned by list endpoints are passed back verbatim
and never interpreted here.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from miro_boards.config import ClientConfig
from miro_boards.errors import RemoteError, ValidationError
from miro_boards.types import ItemType

logger = logging.getLogger(__name__)

# Page size used by the single-page list helpers
DEFAULT_PAGE_LIMIT = 50

# Fallback when the service gives neither a message nor a reason phrase
GENERIC_ERROR_MESSAGE = "Unknown error"

JSON = dict[str, Any] | list[Any]


class MiroClient:
    """Authenticated wrapper around the Miro REST API.

    Args:
        config: Immutable token and base URL.
        http: Optional pre-built httpx client (tests, custom transports).
            When omitted the client creates and owns one.
    """

    def __init__(
        self,
        config: ClientConfig,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(base_url=config.base_url)
        self._http.headers.update(
            {
                "Authorization": f"Bearer {config.token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

    async def __aenter__(self) -> MiroClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_http:
            await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        body: JSON | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Perform one API round trip.

        Args:
            method: HTTP method.
            path: Path relative to the API root, e.g. ``/boards``.
            body: JSON body to send.
            params: Query parameters; None values are dropped.

        Returns:
            Decoded JSON body, or None for 204 / empty responses.

        Raises:
            RemoteError: On non-success status or transport failure.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        logger.debug("%s %s params=%s", method, path, query)

        try:
            response = await self._http.request(
                method,
                path,
                json=body,
                params=query or None,
            )
        except httpx.TimeoutException as e:
            raise RemoteError(
                None, f"Timeout calling {method} {path}", code="timeout"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteError(
                None, f"Network error calling {method} {path}: {e}", code="network_error"
            ) from e

        logger.debug("%s %s -> %d", method, path, response.status_code)

        if response.status_code == 204:
            return None

        if not response.is_success:
            raise RemoteError(response.status_code, _error_message(response))

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(
                response.status_code,
                f"Invalid JSON in response to {method} {path}",
                code="invalid_response",
            ) from e

    # Boards

    async def get_boards(self) -> list[dict[str, Any]]:
        """List boards visible to the token."""
        return _page_data(await self.request("GET", "/boards"))

    async def get_board(self, board_id: str) -> dict[str, Any]:
        """Fetch a single board."""
        return await self.request(  # type: ignore[no-any-return]
            "GET", f"/boards/{_segment(board_id)}"
        )

    # Generic items

    async def get_items(
        self,
        board_id: str,
        limit: int = DEFAULT_PAGE_LIMIT,
        cursor: str | None = None,
        item_type: str | None = None,
        parent_item_id: str | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of board items.

        Args:
            board_id: Board to list.
            limit: Page size.
            cursor: Opaque cursor from a previous page.
            item_type: Restrict to one item variant.
            parent_item_id: Restrict to children of a frame.

        Returns:
            The page as returned by the API (``data``, ``cursor``, ...).
        """
        return await self.request(  # type: ignore[no-any-return]
            "GET",
            f"/boards/{_segment(board_id)}/items",
            params={
                "limit": limit,
                "cursor": cursor,
                "type": item_type,
                "parent_item_id": parent_item_id,
            },
        )

    async def get_board_items(self, board_id: str) -> list[dict[str, Any]]:
        """Fetch the first page of items on a board."""
        return _page_data(await self.get_items(board_id))

    async def get_frames(self, board_id: str) -> list[dict[str, Any]]:
        """Fetch the first page of frames on a board."""
        return _page_data(
            await self.get_items(board_id, item_type=ItemType.FRAME.value)
        )

    async def get_items_in_frame(
        self, board_id: str, frame_id: str
    ) -> list[dict[str, Any]]:
        """Fetch the first page of items whose parent is ``frame_id``."""
        return _page_data(await self.get_items(board_id, parent_item_id=frame_id))

    async def get_item(self, board_id: str, item_id: str) -> dict[str, Any]:
        """Fetch any item by ID."""
        return await self.get_typed_item(board_id, ItemType.ITEM, item_id)

    async def update_item(
        self, board_id: str, item_id: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        """Update position or parent of any item."""
        return await self.update_typed_item(board_id, ItemType.ITEM, item_id, payload)

    async def delete_item(self, board_id: str, item_id: str) -> None:
        """Delete any item by ID."""
        await self.delete_typed_item(board_id, ItemType.ITEM, item_id)

    # Per-variant CRUD

    async def create_item(
        self, board_id: str, item_type: ItemType, payload: dict[str, Any]
    ) -> dict[str, Any]:
        """Create an item in the variant's collection."""
        return await self.request(  # type: ignore[no-any-return]
            "POST",
            f"/boards/{_segment(board_id)}/{item_type.collection}",
            body=payload,
        )

    async def get_typed_item(
        self, board_id: str, item_type: ItemType, item_id: str
    ) -> dict[str, Any]:
        """Fetch an item from the variant's collection."""
        return await self.request(  # type: ignore[no-any-return]
            "GET", _item_path(board_id, item_type, item_id)
        )

    async def update_typed_item(
        self,
        board_id: str,
        item_type: ItemType,
        item_id: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Patch an item in the variant's collection."""
        return await self.request(  # type: ignore[no-any-return]
            "PATCH",
            _item_path(board_id, item_type, item_id),
            body=payload,
        )

    async def delete_typed_item(
        self, board_id: str, item_type: ItemType, item_id: str
    ) -> None:
        """Delete an item from the variant's collection."""
        await self.request("DELETE", _item_path(board_id, item_type, item_id))

    async def get_connectors(
        self,
        board_id: str,
        limit: int = DEFAULT_PAGE_LIMIT,
        cursor: str | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of connectors."""
        return await self.request(  # type: ignore[no-any-return]
            "GET",
            f"/boards/{_segment(board_id)}/{ItemType.CONNECTOR.collection}",
            params={"limit": limit, "cursor": cursor},
        )

    # Bulk

    async def bulk_create_items(
        self, board_id: str, items: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        """Create several items in one upstream request.

        The service treats the batch as a unit: either every item is
        created or the request fails.
        """
        response = await self.request(
            "POST", f"/boards/{_segment(board_id)}/items/bulk", body=items
        )
        return _page_data(response)


def _segment(value: str) -> str:
    """Percent-encode one path segment.

    Reserved characters (``/``, ``?``, ``#``) are escaped so an id can never
    reach another path or add a query. Dot-only ids are escaped too, since
    ``.`` and ``..`` segments would otherwise be collapsed.

    Raises:
        ValidationError: If the id is empty.
    """
    if not value:
        raise ValidationError("Path segment must not be empty")
    segment = quote(value, safe="")
    if segment.strip(".") == "":
        segment = segment.replace(".", "%2E")
    return segment


def _item_path(board_id: str, item_type: ItemType, item_id: str) -> str:
    return f"/boards/{_segment(board_id)}/{item_type.collection}/{_segment(item_id)}"


def _page_data(response: Any) -> list[dict[str, Any]]:
    """Return the ``data`` list of a page, or an empty list."""
    if not isinstance(response, dict):
        return []
    return list(response.get("data") or [])


def _error_message(response: httpx.Response) -> str:
    """Extract the service-provided message from an error response."""
    message: Any = None
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    return response.reason_phrase or GENERIC_ERROR_MESSAGE


__all__ = [
    "DEFAULT_PAGE_LIMIT",
    "GENERIC_ERROR_MESSAGE",
    "MiroClient",
]
