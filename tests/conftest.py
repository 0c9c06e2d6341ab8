# ruff: noqa: E402
# File: /tests/conftest.py
import pathlib
import sys
from typing import Dict, List, Optional, Tuple

# Make repo root importable as "gridbase"
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from gridbase.crud.cells import flatten_value
from gridbase.crud.progress import progress_store
from gridbase.db import Model
from gridbase.db.session import configure_sqlite
from gridbase.main import app
from gridbase.models import Base, Cell, Column, Row, Table

TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
configure_sqlite(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def _create_schema():
    Model.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Model.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    # Bulk runs commit batch by batch, so tests run on a plain session and
    # wipe every table afterwards instead of rolling back one transaction.
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        with engine.begin() as conn:
            for table in reversed(Model.metadata.sorted_tables):
                conn.execute(table.delete())


@pytest.fixture(autouse=True)
def _clear_progress():
    progress_store.clear()
    yield
    progress_store.clear()


@pytest.fixture()
def client(db_session):
    from gridbase.db.session import get_db  # late import to avoid circulars

    def _override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class GridFactory:
    """Seeds bases/tables/columns/rows straight through the ORM."""

    def __init__(self, db: Session):
        self.db = db

    def table(self, columns: List[Tuple[str, str]], name: str = "T") -> Tuple[Table, Dict[str, Column]]:
        base = Base(name="B", owner_id="owner-1")
        self.db.add(base)
        self.db.flush()
        table = Table(name=name, base_id=base.id)
        self.db.add(table)
        self.db.flush()
        cols: Dict[str, Column] = {}
        for order, (col_name, col_type) in enumerate(columns):
            col = Column(table_id=table.id, name=col_name, type=col_type, order=order)
            self.db.add(col)
            cols[col_name] = col
        self.db.commit()
        return table, cols

    def row(
        self,
        table: Table,
        cols: Dict[str, Column],
        values: Dict[str, Optional[str]],
        *,
        is_deleted: bool = False,
    ) -> Row:
        """
        values maps column name -> raw value; a None value leaves the cell out.
        """
        row = Row(table_id=table.id, is_deleted=is_deleted)
        self.db.add(row)
        self.db.flush()
        for col_name, raw in values.items():
            if raw is None:
                continue
            col = cols[col_name]
            text, number = flatten_value(col.type, raw)
            self.db.add(
                Cell(
                    row_id=row.id,
                    column_id=col.id,
                    value=raw,
                    flattened_value_text=text,
                    flattened_value_number=number,
                )
            )
        self.db.commit()
        return row


@pytest.fixture()
def grid(db_session):
    return GridFactory(db_session)


@pytest.fixture()
def people(grid):
    """
    Name:text, Age:number with (Alice, 30), (Bob, empty), (Carol, 25).
    """
    table, cols = grid.table([("Name", "text"), ("Age", "number")])
    alice = grid.row(table, cols, {"Name": "Alice", "Age": "30"})
    bob = grid.row(table, cols, {"Name": "Bob", "Age": ""})
    carol = grid.row(table, cols, {"Name": "Carol", "Age": "25"})
    return {
        "table": table,
        "cols": cols,
        "alice": alice.id,
        "bob": bob.id,
        "carol": carol.id,
    }
