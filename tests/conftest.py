"""
Shared fixtures.

HTTP and service tests run against `MemoryRepository`, an in-process stand-in
for `core.repository.TableRepository` that follows the same `Table`
descriptor (columns, ordering, touched column).
"""

import copy
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from contact_info import repository as contact_info_repository
from contact_submissions import repository as contact_submissions_repository
from core.repository import Table
from education import repository as education_repository
from experience import repository as experience_repository
from main import create_app
from projects import repository as projects_repository
from skills import repository as skills_repository


class MemoryRepository:
    def __init__(self, table: Table):
        self.table = table
        self.rows = {}
        self._next_id = 1
        self._last_ts = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _now(self):
        # Strictly increasing so created_at ordering is deterministic.
        now = datetime.now(timezone.utc)
        if now <= self._last_ts:
            now = self._last_ts + timedelta(microseconds=1)
        self._last_ts = now
        return now

    async def list_rows(self, *, where=None, order_by=None, limit=None):
        if where:
            self.table.check_columns(where)
        rows = [
            row
            for row in self.rows.values()
            if all(row[column] == value for column, value in (where or {}).items())
        ]
        for column, direction in reversed(order_by or self.table.order_by):
            rows.sort(key=lambda row: row[column], reverse=direction.upper() == "DESC")
        if limit is not None:
            rows = rows[:limit]
        return copy.deepcopy(rows)

    async def get(self, row_id):
        row = self.rows.get(row_id)
        return copy.deepcopy(row) if row is not None else None

    async def latest(self):
        rows = await self.list_rows(order_by=(("created_at", "DESC"), ("id", "DESC")), limit=1)
        return rows[0] if rows else None

    async def insert(self, values):
        self.table.check_columns(values)
        now = self._now()
        row = {"id": self._next_id, **{c: None for c in self.table.columns}}
        row.update(copy.deepcopy(values))
        row["created_at"] = now
        if self.table.touch_column:
            row[self.table.touch_column] = now
        self.rows[row["id"]] = row
        self._next_id += 1
        return copy.deepcopy(row)

    async def update(self, row_id, values):
        self.table.check_columns(values)
        row = self.rows.get(row_id)
        if row is None:
            return None
        row.update(copy.deepcopy(values))
        if self.table.touch_column:
            row[self.table.touch_column] = self._now()
        return copy.deepcopy(row)

    async def delete(self, row_id):
        return self.rows.pop(row_id, None) is not None


RESOURCE_MODULES = {
    "contact_info": contact_info_repository,
    "skills": skills_repository,
    "experience": experience_repository,
    "projects": projects_repository,
    "education": education_repository,
    "contact_submissions": contact_submissions_repository,
}


def _provide(repo):
    def dependency():
        return repo

    return dependency


@pytest.fixture
def repos():
    return {
        "contact_info": MemoryRepository(contact_info_repository.CONTACT_INFO),
        "skills": MemoryRepository(skills_repository.SKILLS),
        "experience": MemoryRepository(experience_repository.EXPERIENCE),
        "projects": MemoryRepository(projects_repository.PROJECTS),
        "education": MemoryRepository(education_repository.EDUCATION),
        "contact_submissions": MemoryRepository(contact_submissions_repository.CONTACT_SUBMISSIONS),
    }


@pytest.fixture
def app(repos):
    app = create_app()
    for name, module in RESOURCE_MODULES.items():
        app.dependency_overrides[module.get_repository] = _provide(repos[name])
    return app


@pytest.fixture
def client(app):
    # No context manager: the lifespan (real database) is not started.
    return TestClient(app)
