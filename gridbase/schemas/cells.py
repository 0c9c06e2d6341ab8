# File: /gridbase/schemas/cells.py | Version: 1.0 | Title: Cell write schemas
from __future__ import annotations

from typing import Optional

from gridbase.schemas._base import BaseSchema


class CellUpdate(BaseSchema):
    value: str


class BackfillRequest(BaseSchema):
    table_id: Optional[str] = None


class BackfillResult(BaseSchema):
    success: bool = True
    processed_cells: int
