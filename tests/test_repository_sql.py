"""
SQL text produced for the generic table repository.
"""

import pytest

from contact_info.repository import CONTACT_INFO
from core.repository import (
    Table,
    build_delete,
    build_get,
    build_insert,
    build_select,
    build_update,
)
from skills.repository import FEATURED_ORDER, SKILLS

SKILL_COLUMNS = "id, name, category, proficiency_level, is_featured, created_at"


def test_select_uses_table_ordering():
    sql, args = build_select(SKILLS)

    assert sql == (
        f"SELECT {SKILL_COLUMNS} FROM skills "
        "ORDER BY category ASC, proficiency_level DESC, id ASC"
    )
    assert args == []


def test_select_with_filter_ordering_and_limit():
    sql, args = build_select(SKILLS, where={"is_featured": True}, order_by=FEATURED_ORDER, limit=3)

    assert sql == (
        f"SELECT {SKILL_COLUMNS} FROM skills WHERE is_featured = $1 "
        "ORDER BY proficiency_level DESC, id ASC LIMIT $2"
    )
    assert args == [True, 3]


def test_select_rejects_unknown_filter_column():
    with pytest.raises(ValueError, match="Unknown column"):
        build_select(SKILLS, where={"password": "x"})


@pytest.mark.parametrize(
    "order_by",
    [
        (("name; DROP TABLE skills", "ASC"),),
        (("name", "SIDEWAYS"),),
    ],
)
def test_select_rejects_invalid_ordering(order_by):
    with pytest.raises(ValueError, match="Invalid ordering"):
        build_select(SKILLS, order_by=order_by)


def test_get_and_delete_target_one_id():
    assert build_get(SKILLS) == f"SELECT {SKILL_COLUMNS} FROM skills WHERE id = $1"
    assert build_delete(SKILLS) == "DELETE FROM skills WHERE id = $1 RETURNING id"


def test_insert_lists_only_given_columns():
    sql, args = build_insert(SKILLS, {"name": "Go", "category": "Backend", "proficiency_level": 4})

    assert sql == (
        "INSERT INTO skills (name, category, proficiency_level) "
        "VALUES ($1, $2, $3) "
        f"RETURNING {SKILL_COLUMNS}"
    )
    assert args == ["Go", "Backend", 4]


def test_insert_requires_values():
    with pytest.raises(ValueError, match="Nothing to insert"):
        build_insert(SKILLS, {})


def test_insert_rejects_generated_columns():
    with pytest.raises(ValueError, match="id"):
        build_insert(SKILLS, {"id": 5, "name": "Go"})


def test_update_sets_only_changed_columns():
    sql, args = build_update(SKILLS, 7, {"proficiency_level": 9, "is_featured": False})

    assert sql == (
        "UPDATE skills SET proficiency_level = $2, is_featured = $3 "
        "WHERE id = $1 "
        f"RETURNING {SKILL_COLUMNS}"
    )
    assert args == [7, 9, False]


def test_update_passes_explicit_null():
    sql, args = build_update(CONTACT_INFO, 1, {"phone": None})

    assert "phone = $2" in sql
    assert args == [1, None]


def test_update_refreshes_touch_column():
    sql, args = build_update(CONTACT_INFO, 1, {"bio": "Hi"})

    assert "SET bio = $2, updated_at = now() WHERE id = $1" in sql
    assert sql.endswith("created_at, updated_at")
    assert args == [1, "Hi"]


def test_empty_update_only_touches():
    sql, args = build_update(CONTACT_INFO, 1, {})

    assert "SET updated_at = now() WHERE id = $1" in sql
    assert args == [1]


def test_empty_update_without_touch_column_is_rejected():
    with pytest.raises(ValueError, match="Nothing to update"):
        build_update(SKILLS, 1, {})


def test_table_select_columns_include_generated():
    table = Table(name="notes", columns=("body",), order_by=(("id", "ASC"),), touch_column="edited_at")

    assert table.select_columns == ("id", "body", "created_at", "edited_at")
    assert table.generated_columns == ("id", "created_at", "edited_at")
