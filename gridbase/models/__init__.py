# File: /gridbase/models/__init__.py | Version: 1.0 | Title: Models Package Exports
from .core_entities import Base, Cell, Column, Row, Table
from .view import View

__all__ = [
    "Base",
    "Table",
    "Column",
    "Row",
    "Cell",
    "View",
]
