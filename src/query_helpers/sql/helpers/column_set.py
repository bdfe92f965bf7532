"""
Column set.

An ordered, immutable collection of Columns plus an optional table name. The
comma-joined ``names``, ``variables`` and ``updates`` fragments consumed by
INSERT/UPDATE statement builders are computed once, at construction, and
``prepare`` projects source rows into the value mappings those fragments bind.

Example:
    >>> cs = ColumnSet(["id", {"name": "qty", "def": 0}], {"table": "orders"})
    >>> cs.names
    '"id","qty"'
    >>> cs.variables
    '%(id)s,%(qty)s'
    >>> cs.prepare({"id": 7})
    {'id': 7, 'qty': 0}
"""

from collections.abc import Iterable, KeysView, Mapping, Set
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from query_helpers.config import get_settings
from query_helpers.sql.core.formatting import EOL, format_value, message_gap
from query_helpers.sql.core.parameters import PLACEHOLDER_FORMATS
from query_helpers.sql.core.records import get_property, has_property, property_names
from query_helpers.sql.exceptions import InvalidArgumentError
from query_helpers.sql.helpers.column import IDENTIFIER_DIALECTS, Column
from query_helpers.sql.helpers.table_name import TableName
from query_helpers.utils.logging import get_logger

logger = get_logger(__name__)

_SCALARS = (str, bytes, bytearray, int, float, complex)


@dataclass(frozen=True, init=False, repr=False, eq=False)
class ColumnSet:
    """
    Information about all query-formatting columns.

    Args:
        columns: Either an ordered iterable of column specs (names,
            descriptor mappings or Column objects) such as a list, tuple,
            generator or ``dict.keys()``, or a mapping/object whose property
            names become the column names. Sets are rejected.
        options: Optional mapping with ``table``, ``inherit``, ``dialect``
            and ``param_style``.
        table: Destination table name; overrides ``options["table"]``.
        inherit: Include inherited property names when enumerating an
            object; overrides ``options["inherit"]``.

    Raises:
        InvalidArgumentError: If ``columns`` or ``options`` has the wrong shape,
            or a column spec is invalid.
    """

    columns: Tuple[Column, ...]
    table: Optional[Union[str, TableName]]
    dialect: str
    param_style: str
    names: str
    variables: str
    updates: str

    def __init__(
        self,
        columns: Any,
        options: Optional[Mapping] = None,
        *,
        table: Optional[Union[str, TableName]] = None,
        inherit: Optional[bool] = None,
    ) -> None:
        if columns is None or isinstance(columns, _SCALARS):
            raise InvalidArgumentError(
                "Invalid parameter 'columns' specified.", argument="columns"
            )
        if options is not None and not isinstance(options, Mapping):
            raise InvalidArgumentError(
                "Invalid parameter 'options' specified.", argument="options"
            )

        options = dict(options or {})
        if table is not None:
            options["table"] = table
        if inherit is not None:
            options["inherit"] = inherit

        settings = get_settings()
        dialect = options.get("dialect") or settings.identifier_dialect
        param_style = options.get("param_style") or settings.param_style

        if dialect not in IDENTIFIER_DIALECTS:
            raise InvalidArgumentError(
                f"Unknown identifier dialect: {dialect!r}", argument="dialect"
            )
        if param_style not in PLACEHOLDER_FORMATS:
            raise InvalidArgumentError(
                f"Unknown placeholder style: {param_style!r}", argument="param_style"
            )

        table_value = options.get("table")
        if isinstance(table_value, TableName) or (
            isinstance(table_value, str) and table_value.strip()
        ):
            resolved_table = table_value
        else:
            resolved_table = None

        if isinstance(columns, Set) and not isinstance(columns, KeysView):
            raise InvalidArgumentError(
                "Unordered collections cannot define column order.",
                argument="columns",
            )

        built = []
        if isinstance(columns, Iterable) and not isinstance(columns, Mapping):
            for spec in columns:
                built.append(Column.from_spec(spec, dialect, param_style))
        else:
            for name in property_names(columns, bool(options.get("inherit"))):
                built.append(Column(name, dialect=dialect, param_style=param_style))

        frozen_columns = tuple(built)
        object.__setattr__(self, "columns", frozen_columns)
        object.__setattr__(self, "table", resolved_table)
        object.__setattr__(self, "dialect", dialect)
        object.__setattr__(self, "param_style", param_style)
        object.__setattr__(
            self, "names", ",".join(c.escaped_name for c in frozen_columns)
        )
        object.__setattr__(
            self, "variables", ",".join(c.variable for c in frozen_columns)
        )
        object.__setattr__(
            self,
            "updates",
            ",".join(f"{c.escaped_name}={c.variable}" for c in frozen_columns),
        )

        logger.debug(
            "column_set.created",
            columns=len(frozen_columns),
            table=str(resolved_table) if resolved_table else None,
            dialect=dialect,
            param_style=param_style,
        )

    def prepare(self, source: Any) -> Dict[str, Any]:
        """
        Project a source record into a mapping of values ready for binding.

        For each column, keyed by ``prop`` when set and ``name`` otherwise:

        - a key present in the source (inherited included) takes the source
          value, passed through ``init`` when the column has one;
        - a missing key takes the column default, if any, and ``init`` always
          runs on that default (``None`` when there is no default);
        - a missing key with neither default nor ``init`` is left out.

        The source is never modified.

        Args:
            source: Mapping or object holding the row values

        Returns:
            New dict of key -> value

        Raises:
            InvalidArgumentError: If ``source`` is None

        Examples:
            >>> cs = ColumnSet([{"name": "n", "def": 5, "init": lambda v, src: v + 1}])
            >>> cs.prepare({})
            {'n': 6}
        """
        if source is None:
            raise InvalidArgumentError(
                "Invalid parameter 'source' specified.", argument="source"
            )

        target: Dict[str, Any] = {}
        for column in self.columns:
            key = column.key
            if has_property(source, key):
                value = get_property(source, key)
                target[key] = column.init(value, source) if column.init else value
            else:
                value = None
                if column.has_default:
                    target[key] = value = column.default
                if column.init:
                    target[key] = column.init(value, source)
        return target

    def to_string(self, level: int = 0) -> str:
        """
        Create a well-formatted multi-line string that represents the set.

        Args:
            level: Nested output level, to provide visual offset

        Returns:
            Rendered text; identical input always renders identically
        """
        level = max(int(level), 0)
        gap0 = message_gap(level)
        gap1 = message_gap(level + 1)
        lines = ["ColumnSet {"]
        if isinstance(self.table, TableName):
            lines.append(gap1 + "table: " + self.table.name)
        elif self.table:
            lines.append(gap1 + "table: " + format_value(self.table))
        if self.columns:
            lines.append(gap1 + "columns: [")
            for column in self.columns:
                lines.append(column.to_string(level + 2))
            lines.append(gap1 + "]")
        else:
            lines.append(gap1 + "columns: []")
        lines.append(gap0 + "}")
        return EOL.join(lines)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __repr__(self) -> str:
        return self.to_string()
