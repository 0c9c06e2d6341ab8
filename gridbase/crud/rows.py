# File: /gridbase/crud/rows.py | Version: 1.0 | Title: Row primitives (add / soft delete / column listing)
from __future__ import annotations

from typing import List, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from gridbase.core.errors import NotFoundError
from gridbase.crud.cells import flatten_value
from gridbase.models.core_entities import Cell, Column, Row, Table


def get_active_table(db: Session, table_id: str) -> Table:
    table = db.get(Table, table_id)
    if table is None or table.is_deleted:
        raise NotFoundError("Table not found")
    return table


def list_active_columns(db: Session, table_id: str) -> List[Column]:
    return list(
        db.execute(
            select(Column)
            .where(Column.table_id == table_id, Column.is_deleted == False)  # noqa: E712
            .order_by(Column.order.asc(), Column.id.asc())
        )
        .scalars()
        .all()
    )


def add_row(db: Session, *, table_id: str) -> Tuple[Row, List[Cell]]:
    """
    Create one row with an empty cell for every active column.
    """
    get_active_table(db, table_id)
    columns = list_active_columns(db, table_id)
    try:
        row = Row(table_id=table_id)
        db.add(row)
        db.flush()
        cells = []
        for col in columns:
            text, number = flatten_value(col.type, "")
            cells.append(
                Cell(
                    row_id=row.id,
                    column_id=col.id,
                    value="",
                    flattened_value_text=text,
                    flattened_value_number=number,
                )
            )
        db.add_all(cells)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(row)
    return row, cells


def soft_delete_row(db: Session, *, row_id: str) -> Row:
    row = db.get(Row, row_id)
    if row is None or row.is_deleted:
        raise NotFoundError("Row not found")
    row.is_deleted = True
    db.commit()
    db.refresh(row)
    return row
