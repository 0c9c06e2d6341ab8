# File: /gridbase/crud/cells.py | Version: 1.0 | Title: Cell writes + flattened value maintenance
from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from gridbase.core.config import settings
from gridbase.core.errors import NotFoundError
from gridbase.models.core_entities import Cell, Column, Row

logger = logging.getLogger(__name__)


def parse_number(raw: str) -> Optional[float]:
    text = (raw or "").strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def flatten_value(column_type: str, raw: str) -> Tuple[Optional[str], Optional[float]]:
    """
    Returns (flattened_value_text, flattened_value_number) for a raw value
    written into a column of the given type.
    """
    if column_type == "number":
        return None, parse_number(raw)
    return raw, None


def set_cell_value(db: Session, *, row_id: str, column_id: str, value: str) -> Cell:
    column = db.get(Column, column_id)
    if column is None or column.is_deleted:
        raise NotFoundError("Column not found")
    row = db.get(Row, row_id)
    if row is None or row.is_deleted or row.table_id != column.table_id:
        raise NotFoundError("Row not found")

    text, number = flatten_value(column.type, value)
    cell = db.get(Cell, (row_id, column_id))
    try:
        if cell is None:
            cell = Cell(row_id=row_id, column_id=column_id)
            db.add(cell)
        cell.value = value
        cell.flattened_value_text = text
        cell.flattened_value_number = number
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(cell)
    return cell


def reflatten_column(db: Session, column: Column, *, batch_size: Optional[int] = None) -> int:
    """
    Recompute both flattened fields for every cell of ``column`` from its raw
    value, e.g. after the column changed type. Commits once per batch.
    """
    batch_size = batch_size or settings.REFLATTEN_BATCH_SIZE
    processed = 0
    last_row_id = ""
    while True:
        batch = db.execute(
            select(Cell.row_id, Cell.value)
            .where(Cell.column_id == column.id, Cell.row_id > last_row_id)
            .order_by(Cell.row_id)
            .limit(batch_size)
        ).all()
        if not batch:
            break

        updates = []
        for row_id, raw in batch:
            text, number = flatten_value(column.type, raw)
            updates.append(
                {
                    "row_id": row_id,
                    "column_id": column.id,
                    "flattened_value_text": text,
                    "flattened_value_number": number,
                }
            )
        # bulk UPDATE by primary key: one executemany per batch
        db.execute(update(Cell), updates)
        db.commit()

        processed += len(batch)
        last_row_id = batch[-1].row_id
        logger.info("Re-flattened %d cells of column %s", processed, column.id)
    return processed


def backfill_flattened_values(db: Session, *, table_id: Optional[str] = None) -> int:
    q = select(Column).order_by(Column.table_id, Column.order)
    if table_id is not None:
        q = q.where(Column.table_id == table_id)
    columns = list(db.execute(q).scalars().all())
    logger.info("Backfilling flattened values for %d columns", len(columns))

    total = 0
    for column in columns:
        total += reflatten_column(db, column)
    logger.info("Backfilled %d cells with flattened values", total)
    return total
