"""
Converter emitting a single interface with nested records inlined.
"""

from typing import Any

from ..descriptors import ANY, ArrayOf, InlineRecordBody, TypeDescriptor
from ..values import is_record
from .base import ConverterBase


class JsonToFlattenedTsConverter(ConverterBase):
    """
    Converts JSON data into one flattened TypeScript interface.

    Nested records are embedded as inline bodies instead of separate
    declarations, e.g. ``{"user": {"id": 1}}`` becomes::

        export interface RootObject {
          user: {
            id: number;
          };
        }

    A record is tracked only while its body is being built, so an object
    shared by two sibling properties is rendered in full at both places
    while an object containing itself renders its inner occurrence as ``any``.
    """

    def _declare_root_record(self, data: Any, root_name: str):
        self.declarations.reserve(root_name)
        body = self._inline_body(data, 1)
        self._complete(root_name, fields=body.fields)

    def _resolve_record(self, value: Any, hint: str, depth: int) -> TypeDescriptor:
        if value in self.visited:
            return ANY
        return self._inline_body(value, depth)

    _resolve_instance = _resolve_record

    def _resolve_array(self, values: Any, hint: str, depth: int) -> TypeDescriptor:
        first = next((v for v in values if is_record(v)), None)
        if first is not None:
            return ArrayOf(self._resolve_record(first, hint, depth))
        return self._classify(values, hint, depth)

    def _inline_body(self, value: Any, depth: int) -> InlineRecordBody:
        self.visited.enter(value)
        fields = tuple(self.build_fields(value, depth))
        self.visited.leave(value)
        return InlineRecordBody(fields)
