"""
Work-experience API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.repository import TableRepository
from core.schemas import DeleteResponse, IdRequest

from . import repository, schemas, service

router = APIRouter(prefix="/experience")


@router.get("/list")
async def list_experience(
    repo: TableRepository = Depends(repository.get_repository),
) -> list[schemas.Experience]:
    return await service.list_experience(repo)


@router.post("/create")
async def create_experience(
    request: schemas.CreateExperienceRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.Experience:
    return await service.create_experience(repo, request)


@router.post("/update")
async def update_experience(
    request: schemas.UpdateExperienceRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.Experience:
    return await service.update_experience(repo, request)


@router.post("/delete")
async def delete_experience(
    request: IdRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> DeleteResponse:
    success = await service.delete_experience(repo, request.id)
    return DeleteResponse(success=success)
