"""
Contact-info API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.repository import TableRepository

from . import repository, schemas, service

router = APIRouter(prefix="/contact-info")


@router.get("/get")
async def get_contact_info(
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.ContactInfo | None:
    return await service.get_contact_info(repo)


@router.post("/update")
async def update_contact_info(
    request: schemas.UpdateContactInfoRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.ContactInfo:
    return await service.update_contact_info(repo, request)
