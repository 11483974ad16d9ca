"""
Contact-form submission schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from core.schemas import Email, Text


class ContactSubmission(BaseModel):
    id: int
    name: str
    email: str
    subject: str | None
    message: str
    is_read: bool
    created_at: datetime


class CreateContactSubmissionRequest(BaseModel):
    # Unknown keys (e.g. a client-sent is_read) are ignored.
    name: Text
    email: Email
    subject: str | None = None
    message: Text
