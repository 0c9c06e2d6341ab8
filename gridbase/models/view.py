# File: /gridbase/models/view.py | Version: 1.0 | Title: SQLAlchemy model for Saved Views
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from gridbase.db.base_class import Model
from gridbase.models.core_entities import gen_uuid, utcnow


class View(Model):
    __tablename__ = "views"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    table_id: Mapped[str] = mapped_column(ForeignKey("data_table.id"), nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    # Display mode (grid, gallery, ...); stored for the UI only
    type: Mapped[Optional[str]] = mapped_column(String, nullable=True, default="grid")

    # Saved configuration, replaced wholesale by the UI
    column_order: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    hidden_columns: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    filters: Mapped[List[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    sorts: Mapped[List[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    # Free-text search box contents; saved for the UI, not applied by row queries
    search_term: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    __table_args__ = (Index("ix_views_table", "table_id"),)
