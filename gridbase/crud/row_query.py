# File: /gridbase/crud/row_query.py | Version: 1.0 | Title: Row Query Planner (EAV pivot joins + keyset cursor)
"""
Builds the row query for a table from an optional saved view, ad-hoc
filters/sorts and a cursor.

Cells live in one EAV table, so every column a query touches is pivoted in
with its own LEFT JOIN on (row_id, column_id). Only columns referenced by the
active filter or sort are joined; the rest of the row's cells are fetched in a
single follow-up query for the rows on the page.

Exactly one filter and one sort take part: the first entry of each effective
list. Further entries are ignored.

Ordering is (empty-rank, sort value, row id). Empties are the empty string for
text (a missing cell counts as empty) and NULL for numbers; they sort first
ascending and last descending. Row id breaks every tie, so (value, id) is a
total order and the cursor only needs the id of the last row seen.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Text, and_, case, distinct, func, not_, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from gridbase.core.errors import InfrastructureError, NotFoundError, ValidationError
from gridbase.crud.rows import get_active_table
from gridbase.crud.view import get_view
from gridbase.models.core_entities import Cell, Column, Row
from gridbase.schemas.filters import (
    ColumnType,
    Filter,
    FilterList,
    NumberOperator,
    Sort,
    SortDirection,
    SortList,
    TextFilter,
    TextOperator,
)
from gridbase.schemas.rows import CellOut, RowPage, RowQuery, RowWithCells

logger = logging.getLogger(__name__)

TEXT_SENTINEL = ""


# ----------------------
# Effective configuration
# ----------------------
def resolve_query_config(
    db: Session, table_id: str, params: RowQuery
) -> Tuple[Optional[Filter], Optional[Sort]]:
    """
    Explicit filters (sorts) win over the view's stored ones; an empty list
    falls back to the view. Returns the single active filter and sort.
    """
    filters: List[Filter] = list(params.filters)
    sorts: List[Sort] = list(params.sorts)

    if params.view_id:
        view = get_view(db, params.view_id)
        if view is None or view.table_id != table_id:
            raise NotFoundError("View not found")
        try:
            if not filters:
                filters = FilterList.validate_python(view.filters or [])
            if not sorts:
                sorts = SortList.validate_python(view.sorts or [])
        except PydanticValidationError as exc:
            raise ValidationError(f"View {view.id} has an invalid saved configuration") from exc

    return (filters[0] if filters else None), (sorts[0] if sorts else None)


def _check_columns(db: Session, table_id: str, refs: List[Union[Filter, Sort]]) -> None:
    if not refs:
        return
    wanted = {r.column_id for r in refs}
    found: Dict[str, Column] = {
        c.id: c
        for c in db.execute(
            select(Column).where(
                Column.id.in_(wanted),
                Column.table_id == table_id,
                Column.is_deleted == False,  # noqa: E712
            )
        ).scalars()
    }
    for ref in refs:
        col = found.get(ref.column_id)
        if col is None:
            raise ValidationError(f"Unknown column {ref.column_id}")
        declared = ColumnType(ref.column_type).value
        if col.type != declared:
            raise ValidationError(
                f"Column {col.id} has type {col.type}, request says {declared}"
            )


# ----------------------
# Expression helpers
# ----------------------
def _sort_key(cell, column_type):
    if ColumnType(column_type) == ColumnType.text:
        return func.coalesce(cell.flattened_value_text, TEXT_SENTINEL)
    return cell.flattened_value_number


def _is_empty(key, column_type):
    if ColumnType(column_type) == ColumnType.text:
        return key == TEXT_SENTINEL
    return key.is_(None)


def _is_sentinel(value, column_type) -> bool:
    if ColumnType(column_type) == ColumnType.text:
        return value is None or value == TEXT_SENTINEL
    return value is None


def _filter_expr(flt: Filter, key):
    op = flt.operator
    val = flt.operand

    if isinstance(flt, TextFilter):
        if op == TextOperator.contains:
            return func.lower(key, type_=Text).contains(val.lower(), autoescape=True)
        if op == TextOperator.not_contains:
            return not_(func.lower(key, type_=Text).contains(val.lower(), autoescape=True))
        if op == TextOperator.equals:
            return key == val
        if op == TextOperator.is_empty:
            return key == TEXT_SENTINEL
        if op == TextOperator.is_not_empty:
            return key != TEXT_SENTINEL
    else:
        if op == NumberOperator.equals:
            return key == val
        if op == NumberOperator.greater_than:
            return key > val
        if op == NumberOperator.less_than:
            return key < val
        if op == NumberOperator.greater_equal:
            return key >= val
        if op == NumberOperator.less_equal:
            return key <= val
        if op == NumberOperator.is_empty:
            return key.is_(None)
        if op == NumberOperator.is_not_empty:
            return key.is_not(None)

    raise ValidationError(f"Unsupported operator {op}")


def _cursor_expr(db: Session, table_id: str, sort: Optional[Sort], key, cursor: str):
    probe = aliased(Cell, name="cursor_cell")
    lookup = select(Row.id).where(Row.id == cursor, Row.table_id == table_id)
    if sort is not None:
        lookup = (
            select(Row.id, _sort_key(probe, sort.column_type))
            .select_from(Row)
            .outerjoin(probe, and_(probe.row_id == Row.id, probe.column_id == sort.column_id))
            .where(Row.id == cursor, Row.table_id == table_id)
        )
    found = db.execute(lookup).first()
    if found is None:
        raise ValidationError("Cursor does not reference a row of this table")

    if sort is None:
        return Row.id > cursor

    value = found[1]
    empty = _is_empty(key, sort.column_type)
    descending = sort.direction == SortDirection.desc

    if _is_sentinel(value, sort.column_type):
        rest_of_empties = and_(empty, Row.id > cursor)
        if descending:
            # empties are the tail in descending order
            return rest_of_empties
        return or_(rest_of_empties, not_(empty))

    tie = and_(key == value, Row.id > cursor)
    if descending:
        return or_(key < value, tie, empty)
    return or_(key > value, tie)


def _order_by(sort: Optional[Sort], key) -> list:
    if sort is None:
        return [Row.id.asc()]
    empty_rank = case((_is_empty(key, sort.column_type), 0), else_=1)
    if sort.direction == SortDirection.desc:
        return [empty_rank.desc(), key.desc(), Row.id.asc()]
    return [empty_rank.asc(), key.asc(), Row.id.asc()]


def _load_cells(db: Session, row_ids: List[str]) -> Dict[str, List[CellOut]]:
    grouped: Dict[str, List[CellOut]] = defaultdict(list)
    if not row_ids:
        return grouped
    cells = db.execute(
        select(Cell).where(Cell.row_id.in_(row_ids)).order_by(Cell.row_id, Cell.column_id)
    ).scalars()
    for cell in cells:
        grouped[cell.row_id].append(CellOut.model_validate(cell))
    return grouped


# -----------------------------
# Query + response shaping
# -----------------------------
def _query_rows(db: Session, table_id: str, params: RowQuery) -> RowPage:
    get_active_table(db, table_id)
    flt, sort = resolve_query_config(db, table_id, params)
    refs = [r for r in (flt, sort) if r is not None]
    _check_columns(db, table_id, refs)

    # one pivot per distinct referenced column
    pivots = {}
    for ref in refs:
        if ref.column_id not in pivots:
            pivots[ref.column_id] = aliased(Cell, name=f"pivot_{len(pivots)}")

    def _with_pivots(stmt):
        for column_id, cell in pivots.items():
            stmt = stmt.outerjoin(
                cell, and_(cell.row_id == Row.id, cell.column_id == column_id)
            )
        return stmt

    conds = [Row.table_id == table_id, Row.is_deleted == False]  # noqa: E712
    if flt is not None:
        conds.append(_filter_expr(flt, _sort_key(pivots[flt.column_id], flt.column_type)))
    key = _sort_key(pivots[sort.column_id], sort.column_type) if sort is not None else None

    count_stmt = _with_pivots(
        select(func.count(distinct(Row.id))).select_from(Row)
    ).where(*conds)

    page_conds = list(conds)
    if params.cursor:
        page_conds.append(_cursor_expr(db, table_id, sort, key, params.cursor))
    rows_stmt = (
        _with_pivots(select(Row))
        .where(*page_conds)
        .order_by(*_order_by(sort, key))
        .limit(params.limit)
    )

    rows = list(db.execute(rows_stmt).scalars().all())
    total = db.execute(count_stmt).scalar_one()
    cells = _load_cells(db, [r.id for r in rows])

    return RowPage(
        rows=[
            RowWithCells(
                id=r.id,
                table_id=r.table_id,
                created_at=r.created_at,
                is_deleted=r.is_deleted,
                cells=cells.get(r.id, []),
            )
            for r in rows
        ],
        next_cursor=rows[-1].id if len(rows) == params.limit else None,
        total_count=total,
    )


def query_rows(db: Session, table_id: str, params: RowQuery) -> RowPage:
    try:
        return _query_rows(db, table_id, params)
    except SQLAlchemyError as exc:
        logger.warning("Row query failed for table %s", table_id, exc_info=True)
        raise InfrastructureError("Row query failed; storage unavailable") from exc
