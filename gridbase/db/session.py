# File: /gridbase/db/session.py | Version: 2.1 | Title: SQLAlchemy Session using Central Settings
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from gridbase.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL
IS_SQLITE = SQLALCHEMY_DATABASE_URL.startswith("sqlite")


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if isinstance(value, str) else value


def _on_sqlite_connect(dbapi_connection, _record):
    # SQLite's built-in lower() only folds ASCII; filters lower the operand in Python
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)
    # WAL lets row queries and progress reads run while a bulk batch is being written
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


def configure_sqlite(target: Engine) -> None:
    event.listen(target, "connect", _on_sqlite_connect)


connect_args = {"check_same_thread": False} if IS_SQLITE else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
if IS_SQLITE:
    configure_sqlite(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
