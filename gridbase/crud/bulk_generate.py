# File: /gridbase/crud/bulk_generate.py | Version: 1.0 | Title: Batched bulk row generation with progress
"""
Creates ``count`` rows for a table, each with one synthetic cell per active
column, committing one batch of rows at a time.

Batches are independent commits. Readers can see a partially filled table
while a run is in flight, and a failure leaves earlier batches in place.
Progress is published to the process-wide store after every committed batch.
"""
from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gridbase.core.config import settings
from gridbase.core.errors import (
    InfrastructureError,
    PartialCompletionError,
    PreconditionError,
    ValidationError,
)
from gridbase.crud.progress import ProgressStore, progress_store
from gridbase.crud.rows import get_active_table, list_active_columns
from gridbase.crud.synthetic import cell_value_factory
from gridbase.models.core_entities import Cell, Column, Row, gen_uuid, utcnow
from gridbase.schemas.bulk import BulkResult

logger = logging.getLogger(__name__)


def _chunks(items: List[dict], size: int) -> Iterator[List[dict]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


def _insert_batch(
    db: Session,
    *,
    table_id: str,
    n_rows: int,
    columns: List[Column],
    factories: list,
    rng: random.Random,
    cell_batch_size: int,
) -> None:
    now = utcnow()
    row_records = [
        {"id": gen_uuid(), "table_id": table_id, "created_at": now, "is_deleted": False}
        for _ in range(n_rows)
    ]
    db.execute(insert(Row), row_records)

    cell_records = []
    for row in row_records:
        for col, make in zip(columns, factories):
            value, text, number = make(rng)
            cell_records.append(
                {
                    "row_id": row["id"],
                    "column_id": col.id,
                    "value": value,
                    "flattened_value_text": text,
                    "flattened_value_number": number,
                }
            )
    for chunk in _chunks(cell_records, cell_batch_size):
        db.execute(insert(Cell), chunk)


def generate_rows(
    db: Session,
    *,
    table_id: str,
    count: int,
    store: ProgressStore = progress_store,
    rng: Optional[random.Random] = None,
    row_batch_size: Optional[int] = None,
    cell_batch_size: Optional[int] = None,
    grace_seconds: Optional[float] = None,
) -> BulkResult:
    if not 1 <= count <= settings.BULK_MAX_ROWS:
        raise ValidationError(f"count must be between 1 and {settings.BULK_MAX_ROWS}")

    get_active_table(db, table_id)
    columns = list_active_columns(db, table_id)
    if not columns:
        raise PreconditionError("table has no columns")

    rng = rng or random.Random()
    row_batch_size = row_batch_size or settings.BULK_ROW_BATCH_SIZE
    cell_batch_size = cell_batch_size or settings.BULK_CELL_BATCH_SIZE
    grace = settings.BULK_PROGRESS_GRACE_SECONDS if grace_seconds is None else grace_seconds
    factories = [cell_value_factory(c.type, c.name) for c in columns]

    run = store.start(table_id, count)
    logger.info(
        "Bulk run %s: %d rows x %d columns into table %s",
        run.run_id,
        count,
        len(columns),
        table_id,
    )

    committed = 0
    try:
        while committed < count:
            n_rows = min(row_batch_size, count - committed)
            _insert_batch(
                db,
                table_id=table_id,
                n_rows=n_rows,
                columns=columns,
                factories=factories,
                rng=rng,
                cell_batch_size=cell_batch_size,
            )
            db.commit()
            committed += n_rows
            store.advance(run.run_id, committed)
            logger.info("Bulk run %s: %d/%d rows committed", run.run_id, committed, count)
    except Exception as exc:
        db.rollback()
        store.fail(run.run_id)
        logger.warning(
            "Bulk run %s failed after %d/%d rows", run.run_id, committed, count, exc_info=True
        )
        if committed:
            raise PartialCompletionError(committed, count) from exc
        if isinstance(exc, SQLAlchemyError):
            raise InfrastructureError("Bulk create failed; storage unavailable") from exc
        raise

    store.complete(run.run_id)
    store.discard_later(run.run_id, grace)
    return BulkResult(success=True, count=count)
