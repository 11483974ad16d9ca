"""
Contact-submission persistence.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database, get_db
from core.repository import Table, TableRepository

CONTACT_SUBMISSIONS = Table(
    name="contact_submissions",
    columns=("name", "email", "subject", "message", "is_read"),
    order_by=(("created_at", "DESC"), ("id", "DESC")),
)


def get_repository(db: Database = Depends(get_db)) -> TableRepository:
    return TableRepository(db, CONTACT_SUBMISSIONS)
