"""
Type descriptors and declarations.

A descriptor is the inferred type of one value. Descriptors render
themselves as TypeScript type expressions; declarations render as
``interface`` or ``type`` statements.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

INDENT = "  "


def indent(level: int) -> str:
    return INDENT * level


class TypeDescriptor:
    """Base class of all inferred types."""

    def render(self, level: int = 0) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Primitive(TypeDescriptor):
    name: str

    def render(self, level: int = 0) -> str:
        return self.name


ANY = Primitive("any")
UNKNOWN = Primitive("unknown")
NULL = Primitive("null")
UNDEFINED_TYPE = Primitive("undefined")
OBJECT = Primitive("object")


@dataclass(frozen=True)
class LiteralUnion(TypeDescriptor):
    values: Tuple[Any, ...]

    def render(self, level: int = 0) -> str:
        if not self.values:
            return "never"
        return " | ".join(_literal(v) for v in self.values)


def _literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return repr(value)
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


@dataclass(frozen=True)
class ArrayOf(TypeDescriptor):
    element: TypeDescriptor

    def render(self, level: int = 0) -> str:
        inner = self.element.render(level)
        if _needs_parens(self.element, inner):
            inner = f"({inner})"
        return f"{inner}[]"


def _needs_parens(element: TypeDescriptor, text: str) -> bool:
    if isinstance(element, LiteralUnion):
        return len(element.values) > 1
    return isinstance(element, Primitive) and ("=>" in text or " | " in text)


@dataclass(frozen=True)
class TupleOf(TypeDescriptor):
    elements: Tuple[TypeDescriptor, ...]

    def render(self, level: int = 0) -> str:
        return "[" + ", ".join(e.render(level) for e in self.elements) + "]"


@dataclass(frozen=True)
class NamedRecordRef(TypeDescriptor):
    name: str

    def render(self, level: int = 0) -> str:
        return self.name


@dataclass(frozen=True)
class GenericContainer(TypeDescriptor):
    name: str
    params: Tuple[TypeDescriptor, ...] = ()

    def render(self, level: int = 0) -> str:
        if not self.params:
            return self.name
        return f"{self.name}<" + ", ".join(p.render(level) for p in self.params) + ">"


@dataclass(frozen=True)
class Field:
    """One property line; ``name`` is already cased and quoted."""
    name: str
    type: TypeDescriptor
    readonly: bool = False
    optional: bool = False

    def render(self, level: int) -> str:
        readonly = "readonly " if self.readonly else ""
        optional = "?" if self.optional else ""
        return f"{indent(level)}{readonly}{self.name}{optional}: {self.type.render(level)};"


@dataclass(frozen=True)
class InlineRecordBody(TypeDescriptor):
    fields: Tuple[Field, ...] = ()

    def render(self, level: int = 0) -> str:
        if not self.fields:
            return "{}"
        lines = [f.render(level + 1) for f in self.fields]
        return "{\n" + "\n".join(lines) + f"\n{indent(level)}}}"


INDEX_SIGNATURE = Field(name="[p: string]", type=UNKNOWN)


@dataclass
class Declaration:
    """
    A named output block. Records carry ``fields``; aliases carry ``alias``.
    """
    name: str
    fields: List[Field] = field(default_factory=list)
    alias: Optional[TypeDescriptor] = None
    exported: bool = False

    def render(self, exported: Optional[bool] = None) -> str:
        if exported is None:
            exported = self.exported
        prefix = "export " if exported else ""
        if self.alias is not None:
            return f"{prefix}type {self.name} = {self.alias.render(0)};"
        body = InlineRecordBody(tuple(self.fields)).render(0)
        return f"{prefix}interface {self.name} {body}"
