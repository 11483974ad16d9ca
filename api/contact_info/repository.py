"""
Contact-info persistence.

The table holds one live row by convention; nothing in the schema enforces
it. Readers always take the most recently created row.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database, get_db
from core.repository import Table, TableRepository

CONTACT_INFO = Table(
    name="contact_info",
    columns=(
        "name",
        "title",
        "email",
        "phone",
        "location",
        "website",
        "linkedin",
        "github",
        "bio",
        "profile_image_url",
    ),
    order_by=(("created_at", "DESC"), ("id", "DESC")),
    touch_column="updated_at",
)


def get_repository(db: Database = Depends(get_db)) -> TableRepository:
    return TableRepository(db, CONTACT_INFO)
