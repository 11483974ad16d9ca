"""
Skill business logic.
"""

from __future__ import annotations

import logging

from core.repository import TableRepository
from core.schemas import changed_fields
from core.service import apply_partial_update, delete_row

from . import repository, schemas

RESOURCE = "Skill"

logger = logging.getLogger(__name__)


async def list_skills(repo: TableRepository) -> list[schemas.Skill]:
    rows = await repo.list_rows()
    return [schemas.Skill.model_validate(row) for row in rows]


async def list_featured_skills(repo: TableRepository) -> list[schemas.Skill]:
    rows = await repo.list_rows(where={"is_featured": True}, order_by=repository.FEATURED_ORDER)
    return [schemas.Skill.model_validate(row) for row in rows]


async def create_skill(repo: TableRepository, payload: schemas.CreateSkillRequest) -> schemas.Skill:
    row = await repo.insert(payload.model_dump())
    logger.info("Created skill %d (%s)", row["id"], row["name"])
    return schemas.Skill.model_validate(row)


async def update_skill(repo: TableRepository, payload: schemas.UpdateSkillRequest) -> schemas.Skill:
    changes = changed_fields(payload, exclude={"id"})
    row = await apply_partial_update(repo, payload.id, changes, resource=RESOURCE)
    return schemas.Skill.model_validate(row)


async def delete_skill(repo: TableRepository, skill_id: int) -> bool:
    return await delete_row(repo, skill_id, resource=RESOURCE)
