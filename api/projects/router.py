"""
Project API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.repository import TableRepository
from core.schemas import DeleteResponse, IdRequest

from . import repository, schemas, service

router = APIRouter(prefix="/projects")


@router.get("/list")
async def list_projects(
    repo: TableRepository = Depends(repository.get_repository),
) -> list[schemas.Project]:
    return await service.list_projects(repo)


@router.get("/list-featured")
async def list_featured_projects(
    repo: TableRepository = Depends(repository.get_repository),
) -> list[schemas.Project]:
    return await service.list_featured_projects(repo)


@router.post("/create")
async def create_project(
    request: schemas.CreateProjectRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.Project:
    return await service.create_project(repo, request)


@router.post("/update")
async def update_project(
    request: schemas.UpdateProjectRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.Project:
    return await service.update_project(repo, request)


@router.post("/delete")
async def delete_project(
    request: IdRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> DeleteResponse:
    success = await service.delete_project(repo, request.id)
    return DeleteResponse(success=success)
