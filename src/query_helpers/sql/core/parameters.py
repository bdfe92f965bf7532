"""
SQL parameter placeholder utilities.

Builds the parameter-binding token for a column. The token is keyed by the
column's source key (``prop`` when set, otherwise ``name``) so that it lines
up with the mapping produced by ``ColumnSet.prepare``.
"""

from typing import Optional, Protocol

PLACEHOLDER_FORMATS = {
    # psycopg / DB-API "pyformat"
    "pyformat": "%({key})s",
    # SQLAlchemy text() style
    "named": ":{key}",
    "template": "${{{key}}}",
}


class ColumnLike(Protocol):
    """Anything exposing the source key and optional cast of a column."""

    key: str
    cast: Optional[str]


def normalize_cast(cast: str) -> str:
    """
    Strip surrounding whitespace and leading ``::`` from a cast annotation.

    Examples:
        >>> normalize_cast("::int")
        'int'
        >>> normalize_cast(" numeric(10,2) ")
        'numeric(10,2)'
    """
    return cast.strip().lstrip(":").strip()


def placeholder_for(column: ColumnLike, style: str = "pyformat") -> str:
    """
    Build the placeholder token for a column.

    Args:
        column: Column (or compatible object) with ``key`` and ``cast``
        style: Placeholder style ("pyformat", "named", "template")

    Returns:
        Placeholder text, suffixed with ``::cast`` when the column has a cast

    Raises:
        ValueError: If the style is unknown

    Examples:
        >>> from types import SimpleNamespace
        >>> placeholder_for(SimpleNamespace(key="id", cast=None))
        '%(id)s'
        >>> placeholder_for(SimpleNamespace(key="id", cast="int"), style="named")
        ':id::int'
        >>> placeholder_for(SimpleNamespace(key="id", cast=None), style="template")
        '${id}'
    """
    try:
        template = PLACEHOLDER_FORMATS[style]
    except KeyError:
        raise ValueError(
            f"Unknown placeholder style '{style}', expected one of "
            f"{', '.join(PLACEHOLDER_FORMATS)}"
        ) from None

    token = template.format(key=column.key)
    if column.cast:
        return f"{token}::{column.cast}"
    return token
