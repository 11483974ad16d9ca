"""
Service helpers shared by the resource packages.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import NotFoundError
from .repository import TableRepository

logger = logging.getLogger(__name__)


async def apply_partial_update(
    repo: TableRepository,
    row_id: int,
    changes: dict[str, Any],
    *,
    resource: str,
) -> dict[str, Any]:
    """
    Update only `changes` on one row and return it.

    With no changes the current row is returned untouched. A missing row
    raises NotFoundError either way.
    """
    if changes:
        row = await repo.update(row_id, changes)
    else:
        row = await repo.get(row_id)

    if row is None:
        logger.warning("%s %d not found for update", resource, row_id)
        raise NotFoundError(resource, row_id)

    if changes:
        logger.info("Updated %s %d (%s)", resource, row_id, ", ".join(sorted(changes)))
    return row


async def delete_row(repo: TableRepository, row_id: int, *, resource: str) -> bool:
    deleted = await repo.delete(row_id)
    if deleted:
        logger.info("Deleted %s %d", resource, row_id)
    else:
        logger.info("Delete skipped, %s %d does not exist", resource, row_id)
    return deleted
