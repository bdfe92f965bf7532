"""Text rendering helpers shared by the debug ``to_string`` methods."""

import json
from typing import Any

INDENT = "    "
EOL = "\n"


def message_gap(level: int) -> str:
    """Return the indentation for a nesting level (negative levels clamp to 0)."""
    return INDENT * max(int(level), 0)


def format_value(value: Any) -> str:
    """
    Render a value the way it appears in debug output.

    JSON-compatible values render as JSON; callables by qualified name;
    anything else by ``repr``.

    Examples:
        >>> format_value("users")
        '"users"'
        >>> format_value(None)
        'null'
        >>> format_value(lambda v, src: v)
        '<lambda>'
    """
    if callable(value):
        return getattr(value, "__qualname__", None) or repr(value)
    try:
        return json.dumps(value, ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)
