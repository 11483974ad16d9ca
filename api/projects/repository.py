"""
Project persistence.

`technologies` is a jsonb array; the pool's json codec hands it over as a
Python list in both directions.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database, get_db
from core.repository import Table, TableRepository

PROJECTS = Table(
    name="projects",
    columns=(
        "title",
        "description",
        "technologies",
        "project_url",
        "github_url",
        "image_url",
        "is_featured",
    ),
    order_by=(("created_at", "DESC"), ("id", "DESC")),
)


def get_repository(db: Database = Depends(get_db)) -> TableRepository:
    return TableRepository(db, PROJECTS)
