"""
Education business logic.
"""

from __future__ import annotations

import logging

from core.repository import TableRepository
from core.schemas import changed_fields
from core.service import apply_partial_update, delete_row

from . import schemas

RESOURCE = "Education"

logger = logging.getLogger(__name__)


async def list_education(repo: TableRepository) -> list[schemas.Education]:
    rows = await repo.list_rows()
    return [schemas.Education.model_validate(row) for row in rows]


async def create_education(
    repo: TableRepository,
    payload: schemas.CreateEducationRequest,
) -> schemas.Education:
    row = await repo.insert(payload.model_dump())
    logger.info("Created education %d (%s, %s)", row["id"], row["degree"], row["institution"])
    return schemas.Education.model_validate(row)


async def update_education(
    repo: TableRepository,
    payload: schemas.UpdateEducationRequest,
) -> schemas.Education:
    changes = changed_fields(payload, exclude={"id"})
    row = await apply_partial_update(repo, payload.id, changes, resource=RESOURCE)
    return schemas.Education.model_validate(row)


async def delete_education(repo: TableRepository, education_id: int) -> bool:
    return await delete_row(repo, education_id, resource=RESOURCE)
