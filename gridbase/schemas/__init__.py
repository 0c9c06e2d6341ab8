# File: /gridbase/schemas/__init__.py | Version: 1.0 | Path: /gridbase/schemas/__init__.py
from . import bulk, cells, filters, rows, view

__all__ = ["bulk", "cells", "filters", "rows", "view"]
