# File: gridbase/db/__init__.py | Version: 1.0 | Path: /gridbase/db/__init__.py
# Re-export commonly used items so tests can do: from gridbase.db import Model, get_db
# Import models so the declarative metadata knows about every table
import gridbase.models  # noqa: F401

from .base_class import Model
from .session import SessionLocal, engine, get_db

__all__ = ["Model", "get_db", "SessionLocal", "engine"]
