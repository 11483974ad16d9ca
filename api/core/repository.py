"""
Generic single-table persistence (raw SQL).

Each resource package describes its table with a `Table` and gets a
`TableRepository` bound to the request's `Database`. Statements always touch
exactly one row (or read many), so there are no transactions here.

The `build_*` helpers only produce SQL text plus arguments; they never run
anything and are safe to unit test without a database.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .db import Database

OrderBy = tuple[tuple[str, str], ...]

_DIRECTIONS = {"ASC", "DESC"}


@dataclass(frozen=True)
class Table:
    name: str
    # Columns a caller may write. `id` and timestamps are generated.
    columns: tuple[str, ...]
    order_by: OrderBy
    # Refreshed with now() on every update when set.
    touch_column: str | None = None

    @property
    def generated_columns(self) -> tuple[str, ...]:
        extra = (self.touch_column,) if self.touch_column else ()
        return ("id", "created_at") + extra

    @property
    def select_columns(self) -> tuple[str, ...]:
        return ("id",) + self.columns + tuple(c for c in self.generated_columns if c != "id")

    @property
    def returning(self) -> str:
        return ", ".join(self.select_columns)

    def check_columns(self, names: Any) -> None:
        unknown = [n for n in names if n not in self.columns]
        if unknown:
            raise ValueError(f"Unknown column(s) for {self.name}: {', '.join(sorted(unknown))}")


def _order_clause(table: Table, order_by: OrderBy) -> str:
    known = set(table.select_columns)
    parts = []
    for column, direction in order_by:
        direction = direction.upper()
        if column not in known or direction not in _DIRECTIONS:
            raise ValueError(f"Invalid ordering for {table.name}: {column} {direction}")
        parts.append(f"{column} {direction}")
    return ", ".join(parts)


def _where_clause(table: Table, where: dict[str, Any], start: int) -> tuple[str, list[Any]]:
    table.check_columns(where)
    conditions = []
    args: list[Any] = []
    for offset, (column, value) in enumerate(where.items()):
        conditions.append(f"{column} = ${start + offset}")
        args.append(value)
    return " AND ".join(conditions), args


def build_select(
    table: Table,
    *,
    where: dict[str, Any] | None = None,
    order_by: OrderBy | None = None,
    limit: int | None = None,
) -> tuple[str, list[Any]]:
    sql = f"SELECT {table.returning} FROM {table.name}"
    args: list[Any] = []
    if where:
        condition, args = _where_clause(table, where, start=1)
        sql += f" WHERE {condition}"
    sql += f" ORDER BY {_order_clause(table, order_by or table.order_by)}"
    if limit is not None:
        args.append(int(limit))
        sql += f" LIMIT ${len(args)}"
    return sql, args


def build_get(table: Table) -> str:
    return f"SELECT {table.returning} FROM {table.name} WHERE id = $1"


def build_insert(table: Table, values: dict[str, Any]) -> tuple[str, list[Any]]:
    if not values:
        raise ValueError(f"Nothing to insert into {table.name}.")
    table.check_columns(values)
    columns = list(values)
    placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
    sql = (
        f"INSERT INTO {table.name} ({', '.join(columns)}) "
        f"VALUES ({placeholders}) "
        f"RETURNING {table.returning}"
    )
    return sql, [values[c] for c in columns]


def build_update(table: Table, row_id: int, values: dict[str, Any]) -> tuple[str, list[Any]]:
    """
    UPDATE only the given columns. `$1` is always the row id.
    """
    table.check_columns(values)
    assignments = [f"{column} = ${i}" for i, column in enumerate(values, start=2)]
    if table.touch_column:
        assignments.append(f"{table.touch_column} = now()")
    if not assignments:
        raise ValueError(f"Nothing to update in {table.name}.")
    sql = (
        f"UPDATE {table.name} SET {', '.join(assignments)} "
        f"WHERE id = $1 "
        f"RETURNING {table.returning}"
    )
    return sql, [row_id, *values.values()]


def build_delete(table: Table) -> str:
    return f"DELETE FROM {table.name} WHERE id = $1 RETURNING id"


class TableRepository:
    def __init__(self, db: Database, table: Table) -> None:
        self.db = db
        self.table = table

    async def list_rows(
        self,
        *,
        where: dict[str, Any] | None = None,
        order_by: OrderBy | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        sql, args = build_select(self.table, where=where, order_by=order_by, limit=limit)
        return await self.db.fetch_all(sql, *args)

    async def get(self, row_id: int) -> dict[str, Any] | None:
        return await self.db.fetch_one(build_get(self.table), row_id)

    async def latest(self) -> dict[str, Any] | None:
        rows = await self.list_rows(order_by=(("created_at", "DESC"), ("id", "DESC")), limit=1)
        return rows[0] if rows else None

    async def insert(self, values: dict[str, Any]) -> dict[str, Any]:
        sql, args = build_insert(self.table, values)
        row = await self.db.fetch_one(sql, *args)
        if row is None:
            raise RuntimeError(f"Failed to insert into {self.table.name}.")
        return row

    async def update(self, row_id: int, values: dict[str, Any]) -> dict[str, Any] | None:
        """
        Returns the updated row, or None when `row_id` does not exist.
        """
        sql, args = build_update(self.table, row_id, values)
        return await self.db.fetch_one(sql, *args)

    async def delete(self, row_id: int) -> bool:
        row = await self.db.fetch_one(build_delete(self.table), row_id)
        return row is not None
