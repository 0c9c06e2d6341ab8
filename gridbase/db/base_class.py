# File: gridbase/db/base_class.py | Version: 2.0 | Path: /gridbase/db/base_class.py
from sqlalchemy.orm import DeclarativeBase


class Model(DeclarativeBase):
    """
    Declarative base for every table. Named Model so the ``Base`` entity
    (a container of tables) keeps its domain name.
    """
