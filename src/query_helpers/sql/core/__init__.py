"""Core SQL utilities package."""

from .identifier import qualify_table, quote_identifier
from .parameters import PLACEHOLDER_FORMATS, normalize_cast, placeholder_for
from .records import get_property, has_property, property_names

__all__ = [
    "quote_identifier",
    "qualify_table",
    "PLACEHOLDER_FORMATS",
    "normalize_cast",
    "placeholder_for",
    "property_names",
    "has_property",
    "get_property",
]
