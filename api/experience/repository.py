"""
Work-experience persistence.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database, get_db
from core.repository import Table, TableRepository

EXPERIENCE = Table(
    name="experience",
    columns=(
        "company_name",
        "position",
        "description",
        "start_date",
        "end_date",
        "is_current",
        "location",
        "company_url",
    ),
    order_by=(("start_date", "DESC"), ("id", "DESC")),
)


def get_repository(db: Database = Depends(get_db)) -> TableRepository:
    return TableRepository(db, EXPERIENCE)
