"""Bulk item operations.

The two bulk operations follow different policies:

- bulk_delete_items(): best-effort. Ids are deleted one at a time, in
  order; a failed delete, whatever raised it, is recorded and the
  remaining ids are still attempted. The Miro API has no multi-item delete endpoint.
- bulk_create_items(): all-or-nothing. The whole batch goes to the
  upstream bulk endpoint in one request; if the service rejects it the
  call fails as a unit and nothing is retried per item.

Deletes run strictly one after another, never concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from miro_boards.errors import ValidationError

if TYPE_CHECKING:
    from miro_boards.client import MiroClient

logger = logging.getLogger(__name__)

MAX_BULK_DELETE = 50
MAX_BULK_CREATE = 20


@dataclass(frozen=True)
class BulkDeleteFailure:
    """A single item that could not be deleted."""

    item_id: str
    error: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"itemId": self.item_id, "error": self.error}


@dataclass(frozen=True)
class BulkDeleteOutcome:
    """Result of a best-effort bulk delete.

    Attributes:
        deleted: Ids deleted successfully, in request order.
        errors: Ids that failed, in request order, with the error text.
    """

    deleted: tuple[str, ...] = ()
    errors: tuple[BulkDeleteFailure, ...] = ()

    @property
    def succeeded(self) -> int:
        return len(self.deleted)

    @property
    def failed(self) -> int:
        return len(self.errors)

    @property
    def attempted(self) -> int:
        return self.succeeded + self.failed

    def with_success(self, item_id: str) -> BulkDeleteOutcome:
        """Return a new outcome with ``item_id`` appended to ``deleted``."""
        return BulkDeleteOutcome(self.deleted + (item_id,), self.errors)

    def with_failure(self, item_id: str, error: str) -> BulkDeleteOutcome:
        """Return a new outcome with a failure appended to ``errors``."""
        return BulkDeleteOutcome(
            self.deleted, self.errors + (BulkDeleteFailure(item_id, error),)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "deleted": list(self.deleted),
            "errors": [failure.to_dict() for failure in self.errors],
        }


def _check_batch_size(count: int, maximum: int, what: str) -> None:
    if count < 1:
        raise ValidationError(f"{what} requires at least 1 item")
    if count > maximum:
        raise ValidationError(f"{what} accepts at most {maximum} items, got {count}")


async def bulk_delete_items(
    client: MiroClient,
    board_id: str,
    item_ids: list[str],
) -> BulkDeleteOutcome:
    """Delete items one by one, continuing past failures.

    Args:
        client: Miro API client.
        board_id: Board containing the items.
        item_ids: Ids to delete (1 to MAX_BULK_DELETE).

    Returns:
        BulkDeleteOutcome listing deleted ids and per-item failures.

    Raises:
        ValidationError: If the batch size is out of bounds.
    """
    _check_batch_size(len(item_ids), MAX_BULK_DELETE, "bulk delete")

    outcome = BulkDeleteOutcome()
    for item_id in item_ids:
        try:
            await client.delete_item(board_id, item_id)
        except Exception as e:
            logger.warning(
                "Failed to delete item %s on board %s: %s", item_id, board_id, e
            )
            outcome = outcome.with_failure(item_id, str(e))
        else:
            outcome = outcome.with_success(item_id)

    logger.info(
        "Bulk delete on board %s: %d deleted, %d failed",
        board_id,
        outcome.succeeded,
        outcome.failed,
    )
    return outcome


async def bulk_create_items(
    client: MiroClient,
    board_id: str,
    items: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """Create items with a single upstream bulk request.

    Args:
        client: Miro API client.
        board_id: Board to create the items on.
        items: Item payloads (1 to MAX_BULK_CREATE).

    Returns:
        Created items as returned by the API.

    Raises:
        ValidationError: If the batch size is out of bounds.
        RemoteError: If the service rejects the batch.
    """
    _check_batch_size(len(items), MAX_BULK_CREATE, "bulk create")
    created = await client.bulk_create_items(board_id, items)
    logger.info("Bulk created %d items on board %s", len(created), board_id)
    return created


__all__ = [
    "MAX_BULK_CREATE",
    "MAX_BULK_DELETE",
    "BulkDeleteFailure",
    "BulkDeleteOutcome",
    "bulk_create_items",
    "bulk_delete_items",
]
