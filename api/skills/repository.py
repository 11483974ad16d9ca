"""
Skill persistence.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database, get_db
from core.repository import Table, TableRepository

SKILLS = Table(
    name="skills",
    columns=("name", "category", "proficiency_level", "is_featured"),
    order_by=(("category", "ASC"), ("proficiency_level", "DESC"), ("id", "ASC")),
)

# Featured skills are shown as a single strongest-first strip.
FEATURED_ORDER = (("proficiency_level", "DESC"), ("id", "ASC"))


def get_repository(db: Database = Depends(get_db)) -> TableRepository:
    return TableRepository(db, SKILLS)
