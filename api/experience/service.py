"""
Work-experience business logic.
"""

from __future__ import annotations

import logging

from core.repository import TableRepository
from core.schemas import changed_fields
from core.service import apply_partial_update, delete_row

from . import schemas

RESOURCE = "Experience"

logger = logging.getLogger(__name__)


async def list_experience(repo: TableRepository) -> list[schemas.Experience]:
    rows = await repo.list_rows()
    return [schemas.Experience.model_validate(row) for row in rows]


async def create_experience(
    repo: TableRepository,
    payload: schemas.CreateExperienceRequest,
) -> schemas.Experience:
    row = await repo.insert(payload.model_dump())
    logger.info("Created experience %d (%s at %s)", row["id"], row["position"], row["company_name"])
    return schemas.Experience.model_validate(row)


async def update_experience(
    repo: TableRepository,
    payload: schemas.UpdateExperienceRequest,
) -> schemas.Experience:
    changes = changed_fields(payload, exclude={"id"})
    row = await apply_partial_update(repo, payload.id, changes, resource=RESOURCE)
    return schemas.Experience.model_validate(row)


async def delete_experience(repo: TableRepository, experience_id: int) -> bool:
    return await delete_row(repo, experience_id, resource=RESOURCE)
