"""
Education persistence.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database, get_db
from core.repository import Table, TableRepository

EDUCATION = Table(
    name="education",
    columns=(
        "institution",
        "degree",
        "field_of_study",
        "start_date",
        "end_date",
        "gpa",
        "description",
    ),
    order_by=(("start_date", "DESC"), ("id", "DESC")),
)


def get_repository(db: Database = Depends(get_db)) -> TableRepository:
    return TableRepository(db, EDUCATION)
