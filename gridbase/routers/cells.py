# File: /gridbase/routers/cells.py | Version: 1.0 | Title: Cells Router (point update + flattened backfill)
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gridbase.crud import cells as crud_cells
from gridbase.db.session import get_db
from gridbase.schemas.cells import BackfillRequest, BackfillResult, CellUpdate
from gridbase.schemas.rows import CellOut

router = APIRouter(tags=["Cells"])


@router.put("/rows/{row_id}/cells/{column_id}", response_model=CellOut)
def update_cell(
    row_id: str,
    column_id: str,
    data: CellUpdate,
    db: Session = Depends(get_db),
):
    return crud_cells.set_cell_value(db, row_id=row_id, column_id=column_id, value=data.value)


@router.post("/cells/backfill", response_model=BackfillResult)
def backfill_flattened_values(
    data: BackfillRequest,
    db: Session = Depends(get_db),
):
    processed = crud_cells.backfill_flattened_values(db, table_id=data.table_id)
    return BackfillResult(success=True, processed_cells=processed)
