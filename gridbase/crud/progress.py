# File: /gridbase/crud/progress.py | Version: 1.0 | Title: In-memory bulk run progress store
"""
Process-wide progress records for bulk row generation, keyed by run id so
concurrent runs on different tables never overwrite each other.

Nothing here is persisted: a restart loses in-flight progress. A deployment
with several server processes needs a shared store exposing the same methods.
"""
from __future__ import annotations

import itertools
import threading
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Optional

from gridbase.core.config import settings
from gridbase.models.core_entities import gen_uuid


class BulkRunState(str, Enum):
    pending = "pending"
    batches_in_flight = "batches_in_flight"
    completed = "completed"
    failed_partial = "failed_partial"


@dataclass(frozen=True)
class BulkProgress:
    run_id: str
    table_id: str
    current: int
    total: int
    state: BulkRunState
    started_at: float
    seq: int
    completed_at: Optional[float] = None


class ProgressStore:
    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        expiry_seconds: Optional[float] = None,
    ):
        self._clock = clock
        self._expiry = (
            settings.BULK_PROGRESS_EXPIRY_SECONDS if expiry_seconds is None else expiry_seconds
        )
        self._records: Dict[str, BulkProgress] = {}
        self._lock = threading.Lock()
        self._seq = itertools.count()

    def start(self, table_id: str, total: int) -> BulkProgress:
        with self._lock:
            record = BulkProgress(
                run_id=gen_uuid(),
                table_id=table_id,
                current=0,
                total=total,
                state=BulkRunState.pending,
                started_at=self._clock(),
                seq=next(self._seq),
            )
            self._records[record.run_id] = record
            return record

    def advance(self, run_id: str, current: int) -> Optional[BulkProgress]:
        with self._lock:
            record = self._records.get(run_id)
            if record is None:
                return None
            # never moves backwards, never passes total
            current = max(record.current, min(current, record.total))
            record = replace(record, current=current, state=BulkRunState.batches_in_flight)
            self._records[run_id] = record
            return record

    def complete(self, run_id: str) -> Optional[BulkProgress]:
        with self._lock:
            record = self._records.get(run_id)
            if record is None:
                return None
            record = replace(
                record,
                current=record.total,
                state=BulkRunState.completed,
                completed_at=self._clock(),
            )
            self._records[run_id] = record
            return record

    def fail(self, run_id: str) -> Optional[BulkProgress]:
        """Drop the record of a failed run; returns its final snapshot."""
        with self._lock:
            record = self._records.pop(run_id, None)
        if record is None:
            return None
        return replace(record, state=BulkRunState.failed_partial)

    def discard(self, run_id: str) -> None:
        with self._lock:
            self._records.pop(run_id, None)

    def discard_later(self, run_id: str, delay: float) -> threading.Timer:
        timer = threading.Timer(delay, self.discard, args=(run_id,))
        timer.daemon = True
        timer.start()
        return timer

    def get(self, run_id: str) -> Optional[BulkProgress]:
        with self._lock:
            return self._records.get(run_id)

    def latest_for_table(self, table_id: str) -> Optional[BulkProgress]:
        """
        Most recently started run for the table, unless it finished more than
        ``expiry_seconds`` ago.
        """
        with self._lock:
            candidates = [r for r in self._records.values() if r.table_id == table_id]
        if not candidates:
            return None
        latest = max(candidates, key=lambda r: (r.started_at, r.seq))
        if latest.current >= latest.total and self._is_expired(latest):
            return None
        return latest

    def _is_expired(self, record: BulkProgress) -> bool:
        # only runs that have called complete() can expire
        if record.completed_at is None:
            return False
        return self._clock() - record.completed_at > self._expiry

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


progress_store = ProgressStore()
