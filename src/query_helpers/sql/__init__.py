"""
SQL module for column-driven fragment generation.

This module provides the Column/ColumnSet metadata types together with the
identifier quoting and placeholder utilities they are built on.
"""

from .core.identifier import qualify_table, quote_identifier
from .core.parameters import placeholder_for
from .exceptions import InvalidArgumentError, QueryHelpersError
from .helpers import NOT_SET, Column, ColumnSet, TableName

__all__ = [
    "quote_identifier",
    "qualify_table",
    "placeholder_for",
    "InvalidArgumentError",
    "QueryHelpersError",
    "NOT_SET",
    "Column",
    "ColumnSet",
    "TableName",
]
