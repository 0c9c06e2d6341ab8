# File: /gridbase/routers/rows.py | Version: 1.0 | Title: Rows Router (query, add/delete, bulk generate + progress)
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gridbase.crud import bulk_generate as crud_bulk
from gridbase.crud import row_query as crud_query
from gridbase.crud import rows as crud_rows
from gridbase.crud.progress import progress_store
from gridbase.db.session import get_db
from gridbase.schemas.bulk import BulkCreate, BulkProgressOut, BulkResult
from gridbase.schemas.rows import CellOut, RowPage, RowQuery, RowWithCells

router = APIRouter(tags=["Rows"])


@router.post(
    "/tables/{table_id}/rows/query",
    response_model=RowPage,
    summary="Page through a table's rows with an optional view, filter and sort",
)
def query_rows(
    table_id: str,
    payload: RowQuery,
    db: Session = Depends(get_db),
):
    return crud_query.query_rows(db, table_id, payload)


@router.post("/tables/{table_id}/rows", response_model=RowWithCells)
def add_row(table_id: str, db: Session = Depends(get_db)):
    row, cells = crud_rows.add_row(db, table_id=table_id)
    return RowWithCells(
        id=row.id,
        table_id=row.table_id,
        created_at=row.created_at,
        is_deleted=row.is_deleted,
        cells=[CellOut.model_validate(c) for c in cells],
    )


@router.delete("/rows/{row_id}")
def delete_row(row_id: str, db: Session = Depends(get_db)):
    crud_rows.soft_delete_row(db, row_id=row_id)
    return {"detail": "Row deleted"}


@router.post(
    "/tables/{table_id}/rows/bulk",
    response_model=BulkResult,
    summary="Generate rows with synthetic cell values in batches",
)
def bulk_create_rows(
    table_id: str,
    payload: BulkCreate,
    db: Session = Depends(get_db),
):
    # sync handler: runs in the threadpool so progress polls are served meanwhile
    return crud_bulk.generate_rows(db, table_id=table_id, count=payload.count)


@router.get(
    "/tables/{table_id}/rows/bulk/progress",
    response_model=Optional[BulkProgressOut],
)
def bulk_progress(table_id: str):
    record = progress_store.latest_for_table(table_id)
    if record is None:
        return None
    return BulkProgressOut(current=record.current, total=record.total, table_id=record.table_id)
