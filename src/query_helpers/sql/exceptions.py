"""
Exception hierarchy for query-helpers.

Every error raised by the package is a contract violation detected while a
Column, ColumnSet or TableName is being constructed; nothing is retried and
no partially built object is returned.
"""

from typing import Optional


class QueryHelpersError(Exception):
    """Base exception for all query-helpers errors."""

    pass


class InvalidArgumentError(QueryHelpersError, TypeError):
    """
    Raised when a constructor receives an argument of the wrong shape.

    Subclasses ``TypeError`` so callers treating bad input as a type error
    keep working.

    Args:
        message: Error description
        argument: Name of the offending parameter (optional)
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        self.argument = argument

        if argument:
            full_message = f"{message} (argument='{argument}')"
        else:
            full_message = message

        super().__init__(full_message)
