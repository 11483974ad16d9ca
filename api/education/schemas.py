"""
Education API schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from core.schemas import Text, Timestamp, reject_null


class Education(BaseModel):
    id: int
    institution: str
    degree: str
    field_of_study: str | None
    start_date: datetime
    end_date: datetime | None
    gpa: float | None
    description: str | None
    created_at: datetime


class CreateEducationRequest(BaseModel):
    institution: Text
    degree: Text
    field_of_study: str | None = None
    start_date: Timestamp
    end_date: Timestamp | None = None
    gpa: float | None = Field(default=None, ge=0)
    description: str | None = None


class UpdateEducationRequest(BaseModel):
    id: int = Field(..., ge=1)
    institution: Text | None = None
    degree: Text | None = None
    field_of_study: str | None = None
    start_date: Timestamp | None = None
    end_date: Timestamp | None = None
    gpa: float | None = Field(default=None, ge=0)
    description: str | None = None

    @field_validator("institution", "degree", "start_date")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)
