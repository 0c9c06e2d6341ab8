# File: /gridbase/routers/views.py | Version: 1.0 | Title: Saved Views Router (per table)
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from gridbase.crud.rows import get_active_table
from gridbase.crud.view import create_view, get_view, list_views, update_view_config
from gridbase.db.session import get_db
from gridbase.schemas.view import ViewConfigUpdate, ViewCreate, ViewOut

router = APIRouter(tags=["Views"])


@router.get("/tables/{table_id}/views", response_model=List[ViewOut])
def list_table_views(table_id: str, db: Session = Depends(get_db)):
    get_active_table(db, table_id)
    return list_views(db, table_id)


@router.post("/tables/{table_id}/views", response_model=ViewOut)
def create_table_view(
    table_id: str,
    data: ViewCreate,
    db: Session = Depends(get_db),
):
    return create_view(db, table_id, data)


@router.get("/views/{view_id}", response_model=ViewOut)
def get_view_endpoint(view_id: str, db: Session = Depends(get_db)):
    v = get_view(db, view_id)
    if not v:
        raise HTTPException(status_code=404, detail="View not found")
    return v


@router.patch("/views/{view_id}/config", response_model=ViewOut)
def update_view_config_endpoint(
    view_id: str,
    data: ViewConfigUpdate,
    db: Session = Depends(get_db),
):
    v = get_view(db, view_id)
    if not v:
        raise HTTPException(status_code=404, detail="View not found")
    return update_view_config(db, v, data)
