"""
Project API schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from core.schemas import Text, Url, reject_null


class Project(BaseModel):
    id: int
    title: str
    description: str
    technologies: list[str]
    project_url: str | None
    github_url: str | None
    image_url: str | None
    is_featured: bool
    created_at: datetime


class CreateProjectRequest(BaseModel):
    title: Text
    description: Text
    # Display order is the order given here.
    technologies: list[str]
    project_url: Url | None = None
    github_url: Url | None = None
    image_url: Url | None = None
    is_featured: bool = False


class UpdateProjectRequest(BaseModel):
    id: int = Field(..., ge=1)
    title: Text | None = None
    description: Text | None = None
    technologies: list[str] | None = None
    project_url: Url | None = None
    github_url: Url | None = None
    image_url: Url | None = None
    is_featured: bool | None = None

    @field_validator("title", "description", "technologies", "is_featured")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)
