# File: /gridbase/schemas/view.py | Version: 1.0 | Title: Pydantic v2 schema for Saved Views
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from gridbase.schemas._base import BaseSchema
from gridbase.schemas.filters import Filter, Sort


class ViewCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=200)
    type: Optional[str] = None


class ViewConfigUpdate(BaseSchema):
    """Each supplied field replaces the stored one wholesale."""

    column_order: Optional[List[str]] = None
    hidden_columns: Optional[List[str]] = None
    filters: Optional[List[Filter]] = None
    sorts: Optional[List[Sort]] = None
    search_term: Optional[str] = None


class ViewOut(BaseSchema):
    id: str
    table_id: str
    name: str
    type: Optional[str] = None
    column_order: List[str] = Field(default_factory=list)
    hidden_columns: List[str] = Field(default_factory=list)
    filters: List[Filter] = Field(default_factory=list)
    sorts: List[Sort] = Field(default_factory=list)
    search_term: Optional[str] = None
    created_at: Optional[datetime] = None
