# File: /gridbase/schemas/filters.py | Version: 1.0 | Title: Filter & Sort Schemas (typed by column type)
from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from gridbase.schemas._base import BaseSchema


class ColumnType(str, Enum):
    text = "text"
    number = "number"


class TextOperator(str, Enum):
    contains = "contains"
    equals = "equals"
    not_contains = "not_contains"
    is_empty = "is_empty"
    is_not_empty = "is_not_empty"


class NumberOperator(str, Enum):
    equals = "equals"
    greater_than = "greater_than"
    less_than = "less_than"
    greater_equal = "greater_equal"
    less_equal = "less_equal"
    is_empty = "is_empty"
    is_not_empty = "is_not_empty"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


class TextFilter(BaseSchema):
    column_id: str
    column_type: Literal["text"]
    operator: TextOperator
    value: Optional[str] = None

    @property
    def operand(self) -> str:
        return "" if self.value is None else self.value


class NumberFilter(BaseSchema):
    column_id: str
    column_type: Literal["number"]
    operator: NumberOperator
    value: Optional[float] = None

    @property
    def operand(self) -> float:
        return 0 if self.value is None else self.value


Filter = Annotated[Union[TextFilter, NumberFilter], Field(discriminator="column_type")]


class Sort(BaseSchema):
    column_id: str
    column_type: ColumnType
    direction: SortDirection = SortDirection.asc


# Views store filters/sorts as plain JSON; these re-validate them on read
FilterList = TypeAdapter(List[Filter])
SortList = TypeAdapter(List[Sort])
