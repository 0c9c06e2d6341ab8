# File: gridbase/routers/health.py | Version: 2.0 | Title: Health & readiness endpoints
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gridbase.db.session import get_db

router = APIRouter(tags=["Health"])

# Tables the row query and bulk paths cannot work without
REQUIRED_TABLES = ("data_table", "data_column", "data_row", "cell", "views")


@router.get("/healthz")
def healthz() -> dict:
    """
    Liveness probe: returns 200 if the app can serve requests.
    """
    return {"status": "ok"}


@router.get("/readyz")
def readyz(db: Session = Depends(get_db)):
    """
    Readiness probe: 200 once the DB answers and the schema is migrated,
    else 503.
    """
    try:
        db.execute(text("SELECT 1"))
        existing = set(inspect(db.get_bind()).get_table_names())
    except SQLAlchemyError:
        return JSONResponse({"status": "degraded", "db": "error"}, status_code=503)

    missing = [t for t in REQUIRED_TABLES if t not in existing]
    if missing:
        return JSONResponse(
            {"status": "degraded", "db": "ok", "missingTables": missing}, status_code=503
        )
    return {"status": "ok", "db": "ok"}
