"""
Contact-info business logic.

Contact info is a singleton kept as "the newest row". `update_contact_info`
is an upsert on that convention:
1) no row yet -> insert one, filling required fields with fallbacks
2) row exists -> partial update of that row, refreshing `updated_at`

Two first-time updates racing on an empty table can both insert; no
uniqueness constraint guards against it. Readers only see the newest row.
"""

from __future__ import annotations

import logging

from core.errors import NotFoundError
from core.repository import TableRepository
from core.schemas import changed_fields

from . import repository, schemas

RESOURCE = "ContactInfo"

DEFAULT_NAME = "John Doe"
DEFAULT_TITLE = "Software Developer"
DEFAULT_EMAIL = "contact@example.com"

logger = logging.getLogger(__name__)


def _initial_values(changes: dict) -> dict:
    values = {column: changes.get(column) for column in repository.CONTACT_INFO.columns}
    values["name"] = changes.get("name") or DEFAULT_NAME
    values["title"] = changes.get("title") or DEFAULT_TITLE
    values["email"] = changes.get("email") or DEFAULT_EMAIL
    return values


async def get_contact_info(repo: TableRepository) -> schemas.ContactInfo | None:
    row = await repo.latest()
    if row is None:
        return None
    return schemas.ContactInfo.model_validate(row)


async def update_contact_info(
    repo: TableRepository,
    payload: schemas.UpdateContactInfoRequest,
) -> schemas.ContactInfo:
    changes = changed_fields(payload)
    current = await repo.latest()

    if current is None:
        row = await repo.insert(_initial_values(changes))
        logger.info("Created contact info %d", row["id"])
        return schemas.ContactInfo.model_validate(row)

    # The table touches updated_at on every UPDATE, so an empty change set
    # still goes through the update path.
    row_id = int(current["id"])
    row = await repo.update(row_id, changes)
    if row is None:
        # Deleted between the read and the write.
        raise NotFoundError(RESOURCE, row_id)
    logger.info("Updated contact info %d (%s)", row["id"], ", ".join(sorted(changes)) or "touch")
    return schemas.ContactInfo.model_validate(row)
