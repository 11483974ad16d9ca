"""
Project business logic.
"""

from __future__ import annotations

import logging

from core.repository import TableRepository
from core.schemas import changed_fields
from core.service import apply_partial_update, delete_row

from . import schemas

RESOURCE = "Project"

logger = logging.getLogger(__name__)


async def list_projects(repo: TableRepository) -> list[schemas.Project]:
    rows = await repo.list_rows()
    return [schemas.Project.model_validate(row) for row in rows]


async def list_featured_projects(repo: TableRepository) -> list[schemas.Project]:
    rows = await repo.list_rows(where={"is_featured": True})
    return [schemas.Project.model_validate(row) for row in rows]


async def create_project(repo: TableRepository, payload: schemas.CreateProjectRequest) -> schemas.Project:
    row = await repo.insert(payload.model_dump())
    logger.info("Created project %d (%s)", row["id"], row["title"])
    return schemas.Project.model_validate(row)


async def update_project(repo: TableRepository, payload: schemas.UpdateProjectRequest) -> schemas.Project:
    changes = changed_fields(payload, exclude={"id"})
    row = await apply_partial_update(repo, payload.id, changes, resource=RESOURCE)
    return schemas.Project.model_validate(row)


async def delete_project(repo: TableRepository, project_id: int) -> bool:
    return await delete_row(repo, project_id, resource=RESOURCE)
