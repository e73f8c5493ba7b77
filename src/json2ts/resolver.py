"""
Type resolution for single values.

``TypeResolver`` walks the fixed resolution order shared by both converter
strategies. Records, class instances and arrays are delegated to the
strategy hooks; everything else is resolved here.
"""

import array
import datetime
import enum
import inspect
import json
import re
import weakref
from collections.abc import Iterable, Mapping
from typing import Any, Callable, List, Optional, Tuple

from .descriptors import (
    NULL,
    OBJECT,
    UNDEFINED_TYPE,
    UNKNOWN,
    GenericContainer,
    LiteralUnion,
    Primitive,
    TypeDescriptor,
)
from .errors import MaxDepthExceededError
from .options import ConvertOptions
from .values import UNDEFINED, is_array, is_big_integer, is_class_instance, is_record, is_symbol, type_tag

_SIGNED_BUFFERS = {1: "Int8Array", 2: "Int16Array", 4: "Int32Array", 8: "BigInt64Array"}
_UNSIGNED_BUFFERS = {1: "Uint8Array", 2: "Uint16Array", 4: "Uint32Array", 8: "BigUint64Array"}
_FLOAT_BUFFERS = {4: "Float32Array", 8: "Float64Array"}


def _buffer_name(code: str, itemsize: int) -> str:
    code = code.lstrip("@=<>!")
    if code in ("b", "h", "i", "l", "q"):
        return _SIGNED_BUFFERS.get(itemsize, "ArrayBufferView")
    if code in ("B", "H", "I", "L", "Q", "c"):
        return _UNSIGNED_BUFFERS.get(itemsize, "ArrayBufferView")
    if code in ("f", "d"):
        return _FLOAT_BUFFERS.get(itemsize, "ArrayBufferView")
    return "ArrayBufferView"


def _describe_buffer(value: Any, any_type: str) -> TypeDescriptor:
    if isinstance(value, bytes):
        return Primitive("ArrayBuffer")
    if isinstance(value, bytearray):
        return Primitive("Uint8Array")
    if isinstance(value, array.array):
        return Primitive(_buffer_name(value.typecode, value.itemsize))
    return Primitive(_buffer_name(value.format, value.itemsize))


def _describe_function(value: Any, any_type: str) -> TypeDescriptor:
    if inspect.iscoroutinefunction(value):
        return Primitive(f"(...args: {any_type}[]) => Promise<{any_type}>")
    return Primitive(f"(...args: {any_type}[]) => any")


def _is_iterable(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, dict))


# Host values with a fixed TypeScript counterpart, in order of specificity.
SPECIAL_TYPES: List[Tuple[Callable[[Any], bool], Callable[[Any, str], TypeDescriptor]]] = [
    (lambda v: isinstance(v, (datetime.date, datetime.time)), lambda v, a: Primitive("Date")),
    (lambda v: isinstance(v, re.Pattern), lambda v, a: Primitive("RegExp")),
    (lambda v: isinstance(v, BaseException), lambda v, a: Primitive("Error")),
    (inspect.isawaitable, lambda v, a: GenericContainer("Promise", (Primitive(a),))),
    (lambda v: isinstance(v, (bytes, bytearray, array.array, memoryview)), _describe_buffer),
    (callable, _describe_function),
    (is_symbol, lambda v, a: Primitive("symbol")),
    (is_big_integer, lambda v, a: Primitive("bigint")),
    (_is_iterable, lambda v, a: GenericContainer("Iterable", (Primitive(a),))),
]


def describe_special(value: Any, any_type: str = "any") -> Optional[TypeDescriptor]:
    """Returns the fixed type of a special host value, or None for anything else."""
    for predicate, describe in SPECIAL_TYPES:
        if predicate(value):
            return describe(value, any_type)
    return None


def describe_enum(member: enum.Enum) -> LiteralUnion:
    """Union of the literal values of the member's enum class."""
    values = [m.value for m in type(member)]
    if all(isinstance(v, (str, int, float, bool)) for v in values):
        return LiteralUnion(tuple(values))
    return LiteralUnion(tuple(m.name for m in type(member)))


def literal_key(value: Any) -> str:
    """Spelling of a scalar when used as a type map key."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool)) and not isinstance(value, enum.Enum)


class TypeResolver:
    """
    Resolves values to type descriptors.

    Subclasses decide how records, class instances and arrays are
    represented by implementing the ``_resolve_*`` hooks.
    """

    def __init__(self, options: Optional[ConvertOptions] = None):
        self.options = options or ConvertOptions()

    def resolve(self, value: Any, hint: str, depth: int = 0) -> TypeDescriptor:
        if depth > self.options.max_depth:
            raise MaxDepthExceededError(self.options.max_depth)

        override = self._override_for_value(value)
        if override is not None:
            return Primitive(override)

        if isinstance(value, enum.Enum):
            return describe_enum(value)

        collection = self._describe_collection(value, hint, depth)
        if collection is not None:
            return collection

        if is_array(value):
            return self._resolve_array(value, hint, depth + 1)

        special = describe_special(value, self.options.any_type)
        if special is not None:
            return special

        if is_class_instance(value):
            return self._resolve_instance(value, hint, depth + 1)

        if is_record(value):
            return self._resolve_record(value, hint, depth + 1)

        if value is None:
            return NULL
        if value is UNDEFINED:
            return UNDEFINED_TYPE if self.options.strict else UNKNOWN

        tag = type_tag(value)
        if tag == "object":
            # attribute-less objects such as __slots__ only classes
            return OBJECT
        return Primitive(tag)

    def resolve_property(self, key: str, value: Any, depth: int) -> TypeDescriptor:
        """Resolves a record field, honoring property-name overrides."""
        type_map = self.options.type_map
        if type_map and key in type_map:
            return Primitive(type_map[key])
        return self.resolve(value, key, depth)

    def is_instance_value(self, value: Any) -> bool:
        """True for class instances that are not one of the special host types."""
        return (
            is_class_instance(value)
            and not isinstance(value, enum.Enum)
            and describe_special(value) is None
        )

    def _override_for_value(self, value: Any) -> Optional[str]:
        type_map = self.options.type_map
        if not type_map or value is None or not is_scalar(value):
            return None
        key = literal_key(value)
        if key in type_map:
            return type_map[key]
        return type_map.get(type_tag(value))

    def _describe_collection(self, value: Any, hint: str, depth: int) -> Optional[TypeDescriptor]:
        """Keyed collections are typed from their first entry only."""
        any_type = self.options.any_type
        if isinstance(value, (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)):
            return GenericContainer("WeakMap", (OBJECT, Primitive(any_type)))
        if isinstance(value, weakref.WeakSet):
            return GenericContainer("WeakSet", (OBJECT,))
        if isinstance(value, (set, frozenset)):
            for item in value:
                return GenericContainer("Set", (self.resolve(item, hint, depth + 1),))
            return GenericContainer("Set", (UNKNOWN,))
        if isinstance(value, Mapping) and not is_record(value):
            for key, item in value.items():
                return GenericContainer(
                    "Map",
                    (self.resolve(key, hint, depth + 1), self.resolve(item, hint, depth + 1)),
                )
            return GenericContainer("Map", (UNKNOWN, UNKNOWN))
        return None

    def _resolve_array(self, values: Any, hint: str, depth: int) -> TypeDescriptor:
        raise NotImplementedError()

    def _resolve_record(self, value: Any, hint: str, depth: int) -> TypeDescriptor:
        raise NotImplementedError()

    def _resolve_instance(self, value: Any, hint: str, depth: int) -> TypeDescriptor:
        raise NotImplementedError()
