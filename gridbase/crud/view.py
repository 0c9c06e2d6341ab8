# File: /gridbase/crud/view.py | Version: 1.0 | Title: CRUD helpers for Saved Views
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from gridbase.crud.rows import get_active_table, list_active_columns
from gridbase.models.view import View


def create_view(db: Session, table_id: str, data) -> View:
    get_active_table(db, table_id)
    v = View(
        table_id=table_id,
        name=data.name,
        type=data.type or "grid",
        column_order=[c.id for c in list_active_columns(db, table_id)],
        hidden_columns=[],
        filters=[],
        sorts=[],
    )
    db.add(v)
    db.commit()
    db.refresh(v)
    return v


def get_view(db: Session, view_id: str) -> Optional[View]:
    return db.query(View).filter(View.id == view_id).first()


def list_views(db: Session, table_id: str) -> List[View]:
    return (
        db.query(View)
        .filter(View.table_id == table_id)
        .order_by(View.created_at.asc(), View.id.asc())
        .all()
    )


def update_view_config(db: Session, v: View, data) -> View:
    """
    data: schemas.view.ViewConfigUpdate (filters/sorts already validated)
    """
    if data.column_order is not None:
        v.column_order = list(data.column_order)
    if data.hidden_columns is not None:
        v.hidden_columns = list(data.hidden_columns)
    if data.filters is not None:
        v.filters = [f.model_dump(mode="json", by_alias=True) for f in data.filters]
    if data.sorts is not None:
        v.sorts = [s.model_dump(mode="json", by_alias=True) for s in data.sorts]
    if data.search_term is not None:
        v.search_term = data.search_term
    db.commit()
    db.refresh(v)
    return v
