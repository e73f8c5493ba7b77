"""
Runtime tagging of host values.

Provides the coarse ``typeof``-style tags used by the array classifier and
the structural fingerprints used to tell records apart.
"""

import dataclasses
from typing import Any, Dict, Iterator, Tuple

# Largest integer a TypeScript ``number`` represents exactly.
MAX_SAFE_INTEGER = 2 ** 53 - 1


class _Undefined:
    """Marker for an absent value, rendered as ``unknown`` or ``undefined``."""

    __slots__ = ()

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def is_record(value: Any) -> bool:
    """A plain record is a dict whose keys are all strings."""
    return isinstance(value, dict) and all(isinstance(k, str) for k in value)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_symbol(value: Any) -> bool:
    # bare object() instances are Python's unique-token idiom
    return type(value) is object


def is_big_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and abs(value) > MAX_SAFE_INTEGER


def is_class_instance(value: Any) -> bool:
    """Objects carrying their own attributes, e.g. plain class or dataclass instances."""
    if isinstance(value, (type, dict, list, tuple, set, frozenset, str, bytes)) or callable(value):
        return False
    if dataclasses.is_dataclass(value):
        return True
    return hasattr(value, "__dict__") and type(value).__module__ != "builtins"


def instance_items(value: Any) -> Iterator[Tuple[str, Any]]:
    """Yields the public attributes of a class instance in declaration order."""
    if dataclasses.is_dataclass(value):
        for f in dataclasses.fields(value):
            yield f.name, getattr(value, f.name)
        return
    for key, item in vars(value).items():
        if not key.startswith("_"):
            yield key, item


def record_items(value: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(value, dict):
        return iter(value.items())
    return instance_items(value)


def type_tag(value: Any) -> str:
    """
    Coarse tag mirroring JavaScript's ``typeof``.
    Null, records, arrays and every other container report ``object``.
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "bigint" if is_big_integer(value) else "number"
    if isinstance(value, str):
        return "string"
    if is_symbol(value):
        return "symbol"
    if callable(value):
        return "function"
    return "object"


def element_tag(value: Any) -> str:
    """Finer tag separating ``null`` and ``array`` from other objects."""
    if value is None:
        return "null"
    if is_array(value):
        return "array"
    return type_tag(value)


def shape_fingerprint(value: Any) -> Tuple[Tuple[str, str], ...]:
    """Shallow structural identity: sorted field names with their element tags."""
    fields: Dict[str, str] = {key: element_tag(item) for key, item in record_items(value)}
    return tuple(sorted(fields.items()))


class IdentityRegistry:
    """
    Set of values keyed by identity, with an optional token per value.
    Entered values are held so their ids stay unique for the registry's lifetime.
    """

    def __init__(self):
        self._entries: Dict[int, Tuple[Any, Any]] = {}

    def enter(self, value: Any, token: Any = True):
        self._entries[id(value)] = (value, token)

    def leave(self, value: Any):
        self._entries.pop(id(value), None)

    def get(self, value: Any) -> Any:
        entry = self._entries.get(id(value))
        return None if entry is None else entry[1]

    def __contains__(self, value: Any) -> bool:
        return id(value) in self._entries
