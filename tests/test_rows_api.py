# File: /tests/test_rows_api.py | Title: Add / soft-delete rows
from __future__ import annotations

import pytest

from gridbase.core.errors import NotFoundError
from gridbase.crud.rows import add_row, list_active_columns, soft_delete_row


def test_add_row_creates_empty_cells(grid, db_session):
    table, cols = grid.table([("Name", "text"), ("Age", "number")])
    row, cells = add_row(db_session, table_id=table.id)

    assert row.table_id == table.id
    assert row.is_deleted is False
    by_col = {c.column_id: c for c in cells}
    assert set(by_col) == {cols["Name"].id, cols["Age"].id}
    assert by_col[cols["Name"].id].flattened_value_text == ""
    assert by_col[cols["Age"].id].flattened_value_number is None


def test_add_row_to_missing_table(db_session):
    with pytest.raises(NotFoundError):
        add_row(db_session, table_id="nope")


def test_columns_listed_in_display_order(grid, db_session):
    table, cols = grid.table([("C", "text"), ("A", "number"), ("B", "text")])
    cols["C"].order = 5
    cols["B"].is_deleted = True
    db_session.commit()
    assert [c.name for c in list_active_columns(db_session, table.id)] == ["A", "C"]


def test_soft_delete_twice(grid, db_session):
    table, cols = grid.table([("Name", "text")])
    row = grid.row(table, cols, {"Name": "x"})
    assert soft_delete_row(db_session, row_id=row.id).is_deleted is True
    with pytest.raises(NotFoundError):
        soft_delete_row(db_session, row_id=row.id)


def test_row_endpoints_roundtrip(client, grid):
    table, _ = grid.table([("Name", "text")])

    r = client.post(f"/tables/{table.id}/rows")
    assert r.status_code == 200, r.text
    created = r.json()
    assert created["tableId"] == table.id
    assert len(created["cells"]) == 1

    page = client.post(f"/tables/{table.id}/rows/query", json={}).json()
    assert [row["id"] for row in page["rows"]] == [created["id"]]

    r = client.delete(f"/rows/{created['id']}")
    assert r.status_code == 200
    assert r.json()["detail"] == "Row deleted"

    page = client.post(f"/tables/{table.id}/rows/query", json={}).json()
    assert page["rows"] == []
    assert page["totalCount"] == 0

    assert client.delete(f"/rows/{created['id']}").status_code == 404


def test_add_row_unknown_table_is_404(client):
    assert client.post("/tables/nope/rows").status_code == 404
