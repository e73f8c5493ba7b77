"""
Shared conversion flow for both converter strategies.
"""

from typing import Any, List, Optional

from rich.console import Console
from rich.markup import escape

from ..arrays import classify_array
from ..assembler import DeclarationTable, assemble
from ..descriptors import INDEX_SIGNATURE, ArrayOf, Declaration, Field, TypeDescriptor
from ..errors import InvalidRootNameError, Json2TsError
from ..naming import check_identifier, format_case, to_field_name
from ..options import EXPORT_TYPES, ConvertOptions, ExportType, coerce_options
from ..parser import parse_json
from ..resolver import TypeResolver
from ..values import IdentityRegistry, is_array, is_record, record_items

console = Console(stderr=True)


class ConverterBase(TypeResolver):
    """
    Template for converting a JSON value into TypeScript declarations.

    ``convert`` validates the root name, parses the input and runs a fresh
    converter instance, so no state is shared between calls. Subclasses
    provide the record and array hooks of ``TypeResolver``.
    """

    def __init__(self, options: Optional[ConvertOptions] = None):
        super().__init__(options)
        self.declarations = DeclarationTable()
        self.visited = IdentityRegistry()
        self.export_all = False

    @classmethod
    def convert(
        cls,
        json_data: Any,
        root_name: str = "RootObject",
        export_type: ExportType = "root",
        options: Any = None,
    ) -> Optional[str]:
        """
        Converts JSON text or an already parsed value into declarations.

        Returns None when the input cannot be parsed or converted; the reason
        is reported on stderr. A malformed ``root_name`` is a caller error and
        raises ``InvalidRootNameError``.
        """
        cls._check_arguments(root_name, export_type)

        parsed = parse_json(json_data)
        if not parsed.ok:
            console.print(f"[bold red]Conversion failed:[/bold red] {escape(parsed.describe())}")
            return None

        return cls.convert_value(parsed.data, root_name, export_type, options)

    @classmethod
    def convert_value(
        cls,
        data: Any,
        root_name: str = "RootObject",
        export_type: ExportType = "root",
        options: Any = None,
    ) -> Optional[str]:
        """Like ``convert``, but ``data`` is always taken as a value, never as JSON text."""
        cls._check_arguments(root_name, export_type)
        options = coerce_options(options)
        try:
            return cls(options).convert_json(data, root_name, export_type)
        except (Json2TsError, RecursionError) as e:
            console.print(f"[bold red]Conversion failed:[/bold red] {escape(str(e))}")
            return None

    @staticmethod
    def _check_arguments(root_name: str, export_type: str):
        if not check_identifier(root_name):
            raise InvalidRootNameError(root_name)
        if export_type not in EXPORT_TYPES:
            raise ValueError(f"Unknown export type {export_type!r}, expected one of {', '.join(EXPORT_TYPES)}")

    def convert_json(self, data: Any, root_name: str, export_type: ExportType = "root") -> str:
        self.declarations = DeclarationTable()
        self.visited = IdentityRegistry()
        self.export_all = export_type == "all"

        if is_record(data) or self.is_instance_value(data):
            self._declare_root_record(data, root_name)
        elif is_array(data):
            self.declarations.reserve(root_name)
            alias = self._resolve_array(data, f"{root_name}Item", 1)
            self._complete(root_name, alias=alias)
        elif self.options.strict:
            self.declarations.reserve(root_name)
            self._complete(root_name, alias=self.resolve(data, root_name))
        else:
            self._complete(root_name, fields=[INDEX_SIGNATURE])

        return assemble(self.declarations, root_name, export_type)

    def field_name(self, key: str) -> str:
        return to_field_name(format_case(key, self.options.property_case))

    def build_fields(self, value: Any, depth: int) -> List[Field]:
        """
        Resolves every property of a record or instance into a field.

        A key whose cased name repeats an earlier field is skipped, since
        TypeScript rejects duplicate property names.
        """
        fields: List[Field] = []
        seen = set()
        for key, item in record_items(value):
            name = self.field_name(key)
            if name in seen:
                console.print(
                    f"[yellow]Skipping property {escape(repr(key))}: "
                    f"{escape(name)} is already defined[/yellow]"
                )
                continue
            seen.add(name)
            fields.append(self.make_field(name, self.resolve_property(key, item, depth)))
        return fields

    def make_field(self, name: str, type_: TypeDescriptor) -> Field:
        return Field(
            name=name,
            type=type_,
            readonly=self.options.readonly_properties,
            optional=self.options.optional_properties,
        )

    def _classify(self, values: Any, hint: str, depth: int) -> TypeDescriptor:
        # arrays of arrays take the type of their first row
        if values and is_array(values[0]):
            return ArrayOf(self.resolve(values[0], hint, depth))
        return classify_array(values, self.options.array_max_tuple_size, self.options.array_min_tuple_size)

    def _complete(self, name: str, fields=None, alias: Optional[TypeDescriptor] = None):
        self.declarations.complete(
            Declaration(name=name, fields=list(fields or []), alias=alias, exported=self.export_all)
        )

    def _declare_root_record(self, data: Any, root_name: str):
        raise NotImplementedError()
