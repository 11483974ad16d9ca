"""
Domain errors shared by the resource services.

Services raise these; `main.py` turns them into HTTP responses.
"""

from __future__ import annotations

import asyncpg


class NotFoundError(LookupError):
    def __init__(self, resource: str, row_id: int) -> None:
        super().__init__(f"{resource} with id {row_id} not found")
        self.resource = resource
        self.row_id = row_id


# Store failures are re-raised unchanged by `core.db`; this is the set the
# application maps to "database unavailable".
STORE_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
)
