"""
Source record lookup.

Column sets read values from either mappings or plain objects. Python has no
prototype chain, so "inherited" names are modelled explicitly:

- ``ChainMap``: own names live in the first map, inherited names in the
  parent maps.
- Other mappings: every key is an own name.
- Other objects: own names are the instance ``__dict__`` keys, inherited
  names are public, non-callable class attributes along the MRO (properties
  included).
"""

from collections import ChainMap
from collections.abc import Mapping
from typing import Any, Iterator, List


def _object_names(obj: Any, inherit: bool) -> Iterator[str]:
    yield from vars(obj) if hasattr(obj, "__dict__") else ()
    if not inherit:
        return
    for cls in type(obj).__mro__:
        if cls is object:
            continue
        for name, attr in vars(cls).items():
            if name.startswith("_"):
                continue
            if isinstance(attr, property) or not (
                callable(attr) or isinstance(attr, (classmethod, staticmethod))
            ):
                yield name


def _mapping_names(mapping: Mapping, inherit: bool) -> Iterator[str]:
    if isinstance(mapping, ChainMap):
        maps = mapping.maps if inherit else mapping.maps[:1]
        for m in maps:
            yield from m
    else:
        yield from mapping


def property_names(record: Any, inherit: bool = False) -> List[str]:
    """
    List the property names of a record in enumeration order.

    Args:
        record: Mapping or object to enumerate
        inherit: Include inherited names as well as own names

    Returns:
        Unique names, own names first

    Examples:
        >>> property_names({"a": 1, "b": 2})
        ['a', 'b']
        >>> property_names(ChainMap({"a": 1}, {"b": 2}), inherit=True)
        ['a', 'b']
    """
    if isinstance(record, Mapping):
        names = _mapping_names(record, inherit)
    else:
        names = _object_names(record, inherit)
    return list(dict.fromkeys(str(name) for name in names))


def has_property(record: Any, key: str) -> bool:
    """Report whether ``key`` is reachable on the record, inherited included."""
    if isinstance(record, Mapping):
        return key in record
    return hasattr(record, key)


def get_property(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record[key]
    return getattr(record, key)
