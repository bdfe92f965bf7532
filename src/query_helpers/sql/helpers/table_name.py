"""
Table name reference.

Holds a table name with an optional schema and the escaped, qualified form
used in SQL text.
"""

from dataclasses import dataclass, field
from typing import Optional

from query_helpers.sql.core.formatting import EOL, format_value, message_gap
from query_helpers.sql.core.identifier import qualify_table
from query_helpers.sql.exceptions import InvalidArgumentError


@dataclass(frozen=True, repr=False)
class TableName:
    """
    Immutable, optionally schema-qualified table reference.

    Examples:
        >>> TableName("users", schema="public").name
        '"public"."users"'
        >>> str(TableName("users"))
        '"users"'
    """

    table: str
    schema: Optional[str] = None
    dialect: str = field(default="postgresql", compare=False)
    name: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.table, str) or not self.table.strip():
            raise InvalidArgumentError(
                f"Invalid table name: {self.table!r}", argument="table"
            )
        if self.schema is not None and (
            not isinstance(self.schema, str) or not self.schema.strip()
        ):
            raise InvalidArgumentError(
                f"Invalid schema name: {self.schema!r}", argument="schema"
            )
        object.__setattr__(
            self, "name", qualify_table(self.table, self.schema, self.dialect)
        )

    def to_string(self, level: int = 0) -> str:
        gap0 = message_gap(level)
        gap1 = message_gap(level + 1)
        lines = [gap0 + "TableName {"]
        if self.schema:
            lines.append(gap1 + "schema: " + format_value(self.schema))
        lines.append(gap1 + "table: " + format_value(self.table))
        lines.append(gap0 + "}")
        return EOL.join(lines)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.to_string()
