# File: /gridbase/schemas/rows.py | Version: 1.0 | Title: Row query request/response schemas
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from gridbase.core.config import settings
from gridbase.schemas._base import BaseSchema
from gridbase.schemas.filters import Filter, Sort


class RowQuery(BaseSchema):
    view_id: Optional[str] = None
    limit: int = Field(
        default=settings.ROW_QUERY_DEFAULT_LIMIT, ge=1, le=settings.ROW_QUERY_MAX_LIMIT
    )
    cursor: Optional[str] = None
    filters: List[Filter] = Field(default_factory=list)
    sorts: List[Sort] = Field(default_factory=list)


class CellOut(BaseSchema):
    row_id: str
    column_id: str
    value: str
    flattened_value_text: Optional[str] = None
    flattened_value_number: Optional[float] = None


class RowWithCells(BaseSchema):
    id: str
    table_id: str
    created_at: Optional[datetime] = None
    is_deleted: bool = False
    cells: List[CellOut] = Field(default_factory=list)


class RowPage(BaseSchema):
    rows: List[RowWithCells]
    next_cursor: Optional[str] = None
    total_count: int
