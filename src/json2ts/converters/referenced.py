"""
Converter emitting one named interface per nested record.
"""

from typing import Any

from ..descriptors import ArrayOf, NamedRecordRef, TypeDescriptor
from ..naming import to_type_name
from ..values import is_record, shape_fingerprint
from .base import ConverterBase


class JsonToTsConverter(ConverterBase):
    """
    Converts JSON data into cross-referenced TypeScript interfaces.

    Every nested record becomes its own declaration, named after the key
    that holds it, and the parent refers to it by name. Output lists child
    declarations before the declarations using them.

    A record object is only walked once per conversion. Reaching it again,
    through a cycle or a second path, yields a reference to the name it was
    first declared under.

    Usage: JsonToTsConverter.convert('{"user": {"name": "John"}}', "Person", "all")
    """

    def _declare_root_record(self, data: Any, root_name: str):
        self.declarations.reserve(root_name, shape_fingerprint(data))
        self.visited.enter(data, root_name)
        self._fill(root_name, data, 1)

    def _resolve_record(self, value: Any, hint: str, depth: int, suffix: str = "") -> TypeDescriptor:
        seen = self.visited.get(value)
        if seen is not None:
            return NamedRecordRef(seen)

        base = to_type_name(hint) + suffix
        name, created = self.declarations.claim(base, shape_fingerprint(value))
        self.visited.enter(value, name)
        if created:
            self._fill(name, value, depth)
        return NamedRecordRef(name)

    def _resolve_instance(self, value: Any, hint: str, depth: int) -> TypeDescriptor:
        return self._resolve_record(value, hint, depth, suffix="Instance")

    def _resolve_array(self, values: Any, hint: str, depth: int) -> TypeDescriptor:
        # mixed arrays collapse to the shape of their first record
        first = next((v for v in values if is_record(v)), None)
        if first is not None:
            return ArrayOf(self._resolve_record(first, hint, depth))
        return self._classify(values, hint, depth)

    def _fill(self, name: str, value: Any, depth: int):
        self._complete(name, fields=self.build_fields(value, depth))
