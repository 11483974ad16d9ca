"""
Skill API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.repository import TableRepository
from core.schemas import DeleteResponse, IdRequest

from . import repository, schemas, service

router = APIRouter(prefix="/skills")


@router.get("/list")
async def list_skills(
    repo: TableRepository = Depends(repository.get_repository),
) -> list[schemas.Skill]:
    return await service.list_skills(repo)


@router.get("/list-featured")
async def list_featured_skills(
    repo: TableRepository = Depends(repository.get_repository),
) -> list[schemas.Skill]:
    return await service.list_featured_skills(repo)


@router.post("/create")
async def create_skill(
    request: schemas.CreateSkillRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.Skill:
    return await service.create_skill(repo, request)


@router.post("/update")
async def update_skill(
    request: schemas.UpdateSkillRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.Skill:
    return await service.update_skill(repo, request)


@router.post("/delete")
async def delete_skill(
    request: IdRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> DeleteResponse:
    success = await service.delete_skill(repo, request.id)
    return DeleteResponse(success=success)
