"""
Skill API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from core.schemas import Text, reject_null


class Skill(BaseModel):
    id: int
    name: str
    category: str
    proficiency_level: int
    is_featured: bool
    created_at: datetime


class CreateSkillRequest(BaseModel):
    name: Text
    category: Text
    proficiency_level: int = Field(..., ge=1, le=10)
    is_featured: bool = False


class UpdateSkillRequest(BaseModel):
    id: int = Field(..., ge=1)
    name: Text | None = None
    category: Text | None = None
    proficiency_level: int | None = Field(default=None, ge=1, le=10)
    is_featured: bool | None = None

    @field_validator("name", "category", "proficiency_level", "is_featured")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)
