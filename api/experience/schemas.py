"""
Work-experience API schemas.

`is_current` and `end_date` are independent fields. Entering a current
position without an end date is a data-entry convention and is not checked.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from core.schemas import Text, Timestamp, Url, reject_null


class Experience(BaseModel):
    id: int
    company_name: str
    position: str
    description: str | None
    start_date: datetime
    end_date: datetime | None
    is_current: bool
    location: str | None
    company_url: str | None
    created_at: datetime


class CreateExperienceRequest(BaseModel):
    company_name: Text
    position: Text
    description: str | None = None
    start_date: Timestamp
    end_date: Timestamp | None = None
    is_current: bool = False
    location: str | None = None
    company_url: Url | None = None


class UpdateExperienceRequest(BaseModel):
    id: int = Field(..., ge=1)
    company_name: Text | None = None
    position: Text | None = None
    description: str | None = None
    start_date: Timestamp | None = None
    end_date: Timestamp | None = None
    is_current: bool | None = None
    location: str | None = None
    company_url: Url | None = None

    @field_validator("company_name", "position", "start_date", "is_current")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)
