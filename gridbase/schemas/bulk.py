# File: /gridbase/schemas/bulk.py | Version: 1.0 | Title: Bulk row generation schemas
from __future__ import annotations

from pydantic import Field

from gridbase.core.config import settings
from gridbase.schemas._base import BaseSchema


class BulkCreate(BaseSchema):
    count: int = Field(ge=1, le=settings.BULK_MAX_ROWS)


class BulkResult(BaseSchema):
    success: bool = True
    count: int


class BulkProgressOut(BaseSchema):
    current: int
    total: int
    table_id: str
