"""
Contact-info API schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, field_validator

from core.schemas import Email, Text, Url, reject_null


class ContactInfo(BaseModel):
    id: int
    name: str
    title: str
    email: str
    phone: str | None
    location: str | None
    website: str | None
    linkedin: str | None
    github: str | None
    bio: str | None
    profile_image_url: str | None
    created_at: datetime
    updated_at: datetime


class UpdateContactInfoRequest(BaseModel):
    """
    Every field is optional; only the fields sent are written.
    """

    name: Text | None = None
    title: Text | None = None
    email: Email | None = None
    phone: str | None = None
    location: str | None = None
    website: Url | None = None
    linkedin: Url | None = None
    github: Url | None = None
    bio: str | None = None
    profile_image_url: Url | None = None

    @field_validator("name", "title", "email")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)
