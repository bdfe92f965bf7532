"""
Column mapping.

A Column maps one source property to one destination SQL column, with an
optional default value, initializer and type cast. The escaped name and the
placeholder variable are derived once, at construction.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from query_helpers.sql.core.formatting import EOL, format_value, message_gap
from query_helpers.sql.core.identifier import quote_identifier
from query_helpers.sql.core.parameters import (
    PLACEHOLDER_FORMATS,
    normalize_cast,
    placeholder_for,
)
from query_helpers.sql.exceptions import InvalidArgumentError

IDENTIFIER_DIALECTS = ("postgresql", "mysql")


class _NotSet:
    """Marker for a column without a default value."""

    _instance = None

    def __new__(cls) -> "_NotSet":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_SET"

    def __bool__(self) -> bool:
        return False


NOT_SET: Any = _NotSet()

Initializer = Callable[[Any, Any], Any]

# Keys accepted in a column descriptor mapping; "def" and "default" are aliases.
DESCRIPTOR_KEYS = frozenset({"name", "prop", "def", "default", "init", "cast"})


def _require_text(value: Any, argument: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            f"Invalid column {argument}: expected a non-empty string, got {value!r}",
            argument=argument,
        )
    return value


@dataclass(frozen=True, repr=False)
class Column:
    """
    Immutable description of one column.

    Args:
        name: Destination column name
        prop: Source property name, when it differs from ``name``
        default: Value used when the source lacks the property
        init: Initializer ``(value, source) -> value``; always applied when set
        cast: SQL type cast appended to the placeholder as ``::cast``
        dialect: Identifier quoting dialect for ``escaped_name``
        param_style: Placeholder style for ``variable``

    Examples:
        >>> col = Column("id", cast="int")
        >>> col.escaped_name
        '"id"'
        >>> col.variable
        '%(id)s::int'
        >>> Column(name="first_name", prop="firstName").key
        'firstName'
    """

    name: str
    prop: Optional[str] = None
    default: Any = field(default=NOT_SET, hash=False)
    init: Optional[Initializer] = None
    cast: Optional[str] = None
    dialect: str = field(default="postgresql", compare=False)
    param_style: str = field(default="pyformat", compare=False)
    escaped_name: str = field(init=False, compare=False)
    variable: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        _require_text(self.name, "name")
        if self.prop is not None:
            _require_text(self.prop, "prop")
        if self.init is not None and not callable(self.init):
            raise InvalidArgumentError(
                f"Invalid column init: expected a callable, got {self.init!r}",
                argument="init",
            )
        if self.cast is not None:
            if not isinstance(self.cast, str) or not normalize_cast(self.cast):
                raise InvalidArgumentError(
                    f"Invalid column cast: {self.cast!r}", argument="cast"
                )
            object.__setattr__(self, "cast", normalize_cast(self.cast))
        if self.dialect not in IDENTIFIER_DIALECTS:
            raise InvalidArgumentError(
                f"Unknown identifier dialect: {self.dialect!r}", argument="dialect"
            )
        if self.param_style not in PLACEHOLDER_FORMATS:
            raise InvalidArgumentError(
                f"Unknown placeholder style: {self.param_style!r}",
                argument="param_style",
            )

        object.__setattr__(
            self, "escaped_name", quote_identifier(self.name, self.dialect)
        )
        object.__setattr__(self, "variable", placeholder_for(self, self.param_style))

    @property
    def key(self) -> str:
        """Property name used in source records and prepared mappings."""
        return self.prop or self.name

    @property
    def has_default(self) -> bool:
        return self.default is not NOT_SET

    @classmethod
    def from_spec(
        cls,
        spec: Union[str, Mapping, "Column"],
        dialect: str = "postgresql",
        param_style: str = "pyformat",
    ) -> "Column":
        """
        Build a Column from a bare name or a descriptor mapping.

        An existing Column is always rebuilt, so the result is never shared
        with the caller.

        Args:
            spec: Column name, descriptor mapping or Column
            dialect: Identifier quoting dialect
            param_style: Placeholder style

        Returns:
            Column instance

        Raises:
            InvalidArgumentError: If the spec cannot produce a valid column

        Examples:
            >>> Column.from_spec({"name": "qty", "def": 0}).default
            0
        """
        if isinstance(spec, Column):
            return cls(
                spec.name,
                prop=spec.prop,
                default=spec.default,
                init=spec.init,
                cast=spec.cast,
                dialect=dialect,
                param_style=param_style,
            )

        if isinstance(spec, str):
            return cls(spec, dialect=dialect, param_style=param_style)

        if isinstance(spec, Mapping):
            unknown = set(spec) - DESCRIPTOR_KEYS
            if unknown:
                raise InvalidArgumentError(
                    f"Unknown column descriptor keys: {', '.join(sorted(map(str, unknown)))}",
                    argument="columns",
                )
            if "def" in spec and "default" in spec:
                raise InvalidArgumentError(
                    "Column descriptor cannot specify both 'def' and 'default'",
                    argument="columns",
                )
            if "name" not in spec:
                raise InvalidArgumentError(
                    "Column descriptor is missing 'name'", argument="name"
                )
            return cls(
                spec["name"],
                prop=spec.get("prop"),
                default=spec.get("def", spec.get("default", NOT_SET)),
                init=spec.get("init"),
                cast=spec.get("cast"),
                dialect=dialect,
                param_style=param_style,
            )

        raise InvalidArgumentError(
            f"Invalid column details: {spec!r}", argument="columns"
        )

    def to_string(self, level: int = 0) -> str:
        """
        Render the column as an indented multi-line block.

        Only the attributes that are set are listed.
        """
        gap0 = message_gap(level)
        gap1 = message_gap(level + 1)
        lines = [gap0 + "Column {", gap1 + "name: " + format_value(self.name)]
        if self.prop:
            lines.append(gap1 + "prop: " + format_value(self.prop))
        if self.cast:
            lines.append(gap1 + "cast: " + format_value(self.cast))
        if self.has_default:
            lines.append(gap1 + "def: " + format_value(self.default))
        if self.init:
            lines.append(gap1 + "init: " + format_value(self.init))
        lines.append(gap0 + "}")
        return EOL.join(lines)

    def __repr__(self) -> str:
        return self.to_string()
