"""
Education API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.repository import TableRepository
from core.schemas import DeleteResponse, IdRequest

from . import repository, schemas, service

router = APIRouter(prefix="/education")


@router.get("/list")
async def list_education(
    repo: TableRepository = Depends(repository.get_repository),
) -> list[schemas.Education]:
    return await service.list_education(repo)


@router.post("/create")
async def create_education(
    request: schemas.CreateEducationRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.Education:
    return await service.create_education(repo, request)


@router.post("/update")
async def update_education(
    request: schemas.UpdateEducationRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.Education:
    return await service.update_education(repo, request)


@router.post("/delete")
async def delete_education(
    request: IdRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> DeleteResponse:
    success = await service.delete_education(repo, request.id)
    return DeleteResponse(success=success)
