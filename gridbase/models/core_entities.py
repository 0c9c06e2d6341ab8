# File: /gridbase/models/core_entities.py | Version: 1.0 | Path: /gridbase/models/core_entities.py
from __future__ import annotations

from datetime import datetime, UTC
from typing import List as TList, Optional
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gridbase.db.base_class import Model

COLUMN_TYPES = ("text", "number")


def gen_uuid() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(Model):
    """A container of tables, owned by one user."""

    __tablename__ = "base"
    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    owner_id: Mapped[str] = mapped_column(String, index=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    tables: Mapped[TList["Table"]] = relationship(back_populates="base")


class Table(Model):
    __tablename__ = "data_table"
    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    base_id: Mapped[str] = mapped_column(ForeignKey("base.id"), index=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    base: Mapped["Base"] = relationship(back_populates="tables")
    columns: Mapped[TList["Column"]] = relationship(back_populates="table")
    rows: Mapped[TList["Row"]] = relationship(back_populates="table")


class Column(Model):
    __tablename__ = "data_column"
    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    table_id: Mapped[str] = mapped_column(ForeignKey("data_table.id"), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)  # 'text' | 'number'
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    table: Mapped["Table"] = relationship(back_populates="columns")


class Row(Model):
    __tablename__ = "data_row"
    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    table_id: Mapped[str] = mapped_column(ForeignKey("data_table.id"), index=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    table: Mapped["Table"] = relationship(back_populates="rows")


class Cell(Model):
    """
    One (row, column) fact. ``value`` is the raw string as typed; the two
    flattened columns hold a typed copy so filters and sorts compare natively.
    Exactly one of them is populated, chosen by the column type at write time
    (a number cell whose raw value does not parse keeps both NULL).
    """

    __tablename__ = "cell"
    row_id: Mapped[str] = mapped_column(ForeignKey("data_row.id"), primary_key=True)
    column_id: Mapped[str] = mapped_column(ForeignKey("data_column.id"), primary_key=True)
    value: Mapped[str] = mapped_column(Text, default="", nullable=False)
    flattened_value_text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    flattened_value_number: Mapped[Optional[float]] = mapped_column(Float, nullable=True)


# Typed lookups used by the row query planner
Index("ix_cell_column_text", Cell.column_id, Cell.flattened_value_text)
Index("ix_cell_column_number", Cell.column_id, Cell.flattened_value_number)
Index("ix_data_row_table_deleted", Row.table_id, Row.is_deleted)
Index("ix_data_column_table_order", Column.table_id, Column.order)
