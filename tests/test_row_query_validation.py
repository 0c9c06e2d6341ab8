# File: /tests/test_row_query_validation.py | Title: Row query rejects bad columns, cursors, views and storage failures
from __future__ import annotations

import pydantic
import pytest
from sqlalchemy.exc import OperationalError

from gridbase.core.errors import InfrastructureError, NotFoundError, ValidationError
from gridbase.crud.row_query import query_rows
from gridbase.models import View
from gridbase.schemas.rows import RowQuery


def _post(client, table_id, payload):
    return client.post(f"/tables/{table_id}/rows/query", json=payload)


def test_sort_type_mismatch_is_400(client, people):
    age = people["cols"]["Age"]
    r = _post(
        client,
        people["table"].id,
        {"sorts": [{"columnId": age.id, "columnType": "text", "direction": "asc"}]},
    )
    assert r.status_code == 400
    assert "type" in r.json()["detail"]


def test_filter_type_mismatch_raises(db_session, people):
    name = people["cols"]["Name"]
    with pytest.raises(ValidationError):
        query_rows(
            db_session,
            people["table"].id,
            RowQuery(
                filters=[
                    {"columnId": name.id, "columnType": "number", "operator": "equals", "value": 1}
                ]
            ),
        )


def test_unknown_column_is_400(client, people):
    r = _post(
        client,
        people["table"].id,
        {"sorts": [{"columnId": "no-such-column", "columnType": "text"}]},
    )
    assert r.status_code == 400


def test_column_of_another_table_is_rejected(grid, db_session, people):
    _, other_cols = grid.table([("Name", "text")], name="Other")
    foreign = other_cols["Name"]
    with pytest.raises(ValidationError):
        query_rows(
            db_session,
            people["table"].id,
            RowQuery(sorts=[{"columnId": foreign.id, "columnType": "text"}]),
        )


def test_deleted_column_is_rejected(db_session, people):
    age = people["cols"]["Age"]
    age.is_deleted = True
    db_session.commit()
    with pytest.raises(ValidationError):
        query_rows(
            db_session,
            people["table"].id,
            RowQuery(sorts=[{"columnId": age.id, "columnType": "number"}]),
        )


def test_operator_not_valid_for_column_type_is_422(client, people):
    name = people["cols"]["Name"]
    r = _post(
        client,
        people["table"].id,
        {
            "filters": [
                {"columnId": name.id, "columnType": "text", "operator": "greater_than", "value": "a"}
            ]
        },
    )
    assert r.status_code == 422


@pytest.mark.parametrize("limit", [0, 101])
def test_limit_out_of_range_is_422(client, people, limit):
    r = _post(client, people["table"].id, {"limit": limit})
    assert r.status_code == 422


def test_limit_bounds_on_the_model():
    assert RowQuery().limit == 50
    assert RowQuery(limit=100).limit == 100
    with pytest.raises(pydantic.ValidationError):
        RowQuery(limit=101)


def test_unknown_cursor_is_400(client, people):
    r = _post(client, people["table"].id, {"cursor": "no-such-row"})
    assert r.status_code == 400


def test_cursor_from_another_table_is_rejected(grid, db_session, people):
    other, other_cols = grid.table([("Name", "text")], name="Other")
    stranger = grid.row(other, other_cols, {"Name": "x"})
    with pytest.raises(ValidationError):
        query_rows(db_session, people["table"].id, RowQuery(cursor=stranger.id))


def test_unknown_table_is_404(client):
    r = _post(client, "no-such-table", {})
    assert r.status_code == 404


def test_deleted_table_is_not_found(db_session, people):
    people["table"].is_deleted = True
    db_session.commit()
    with pytest.raises(NotFoundError):
        query_rows(db_session, people["table"].id, RowQuery())


def test_unknown_view_is_404(client, people):
    r = _post(client, people["table"].id, {"viewId": "no-such-view"})
    assert r.status_code == 404


def test_view_of_another_table_is_404(client, grid, people):
    other, _ = grid.table([("Name", "text")], name="Other")
    view = client.post(f"/tables/{other.id}/views", json={"name": "V"}).json()
    r = _post(client, people["table"].id, {"viewId": view["id"]})
    assert r.status_code == 404


def test_corrupt_view_config_is_400(client, db_session, people):
    table_id = people["table"].id
    view = View(
        table_id=table_id,
        name="Broken",
        column_order=[],
        hidden_columns=[],
        filters=[{"columnId": "x", "columnType": "date", "operator": "equals"}],
        sorts=[],
    )
    db_session.add(view)
    db_session.commit()

    r = _post(client, table_id, {"viewId": view.id})
    assert r.status_code == 400

    # explicit filters replace the stored ones, so the broken list is never read
    name = people["cols"]["Name"]
    ok = _post(
        client,
        table_id,
        {
            "viewId": view.id,
            "filters": [{"columnId": name.id, "columnType": "text", "operator": "is_not_empty"}],
        },
    )
    assert ok.status_code == 200, ok.text


def test_storage_failure_becomes_infrastructure_error(db_session, people, monkeypatch):
    def _boom(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is gone"))

    # read the id before patching; an expired instance reloads through execute
    table_id = people["table"].id
    monkeypatch.setattr(db_session, "execute", _boom)
    with pytest.raises(InfrastructureError):
        query_rows(db_session, table_id, RowQuery())


def test_storage_failure_is_503_over_http(client, db_session, people, monkeypatch):
    def _boom(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is gone"))

    table_id = people["table"].id
    monkeypatch.setattr(db_session, "execute", _boom)
    r = _post(client, table_id, {})
    assert r.status_code == 503
