"""Column metadata types used to build INSERT/UPDATE fragments."""

from .column import NOT_SET, Column
from .column_set import ColumnSet
from .table_name import TableName

__all__ = [
    "NOT_SET",
    "Column",
    "ColumnSet",
    "TableName",
]
