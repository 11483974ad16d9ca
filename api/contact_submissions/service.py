"""
Contact-form intake.

A submission is created unread and can only move to read. There is no way
back to unread and no delete.
"""

from __future__ import annotations

import logging

from core.repository import TableRepository
from core.service import apply_partial_update

from . import schemas

RESOURCE = "Contact submission"

logger = logging.getLogger(__name__)


async def create_contact_submission(
    repo: TableRepository,
    payload: schemas.CreateContactSubmissionRequest,
) -> schemas.ContactSubmission:
    values = payload.model_dump()
    values["is_read"] = False
    row = await repo.insert(values)
    logger.info("Received contact submission %d from %s", row["id"], row["email"])
    return schemas.ContactSubmission.model_validate(row)


async def list_contact_submissions(repo: TableRepository) -> list[schemas.ContactSubmission]:
    rows = await repo.list_rows()
    return [schemas.ContactSubmission.model_validate(row) for row in rows]


async def list_unread_contact_submissions(repo: TableRepository) -> list[schemas.ContactSubmission]:
    rows = await repo.list_rows(where={"is_read": False})
    return [schemas.ContactSubmission.model_validate(row) for row in rows]


async def mark_submission_read(repo: TableRepository, submission_id: int) -> schemas.ContactSubmission:
    # Marking an already-read submission rewrites the same value.
    row = await apply_partial_update(repo, submission_id, {"is_read": True}, resource=RESOURCE)
    return schemas.ContactSubmission.model_validate(row)
