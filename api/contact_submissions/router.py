"""
Contact-form submission endpoints.

`create` is what the public contact form posts to.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.repository import TableRepository
from core.schemas import IdRequest

from . import repository, schemas, service

router = APIRouter(prefix="/contact-submissions")


@router.post("/create")
async def create_contact_submission(
    request: schemas.CreateContactSubmissionRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.ContactSubmission:
    return await service.create_contact_submission(repo, request)


@router.get("/list")
async def list_contact_submissions(
    repo: TableRepository = Depends(repository.get_repository),
) -> list[schemas.ContactSubmission]:
    return await service.list_contact_submissions(repo)


@router.get("/list-unread")
async def list_unread_contact_submissions(
    repo: TableRepository = Depends(repository.get_repository),
) -> list[schemas.ContactSubmission]:
    return await service.list_unread_contact_submissions(repo)


@router.post("/mark-read")
async def mark_submission_read(
    request: IdRequest,
    repo: TableRepository = Depends(repository.get_repository),
) -> schemas.ContactSubmission:
    return await service.mark_submission_read(repo, request.id)
