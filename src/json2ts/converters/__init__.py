"""
Converter strategies and the ``convert`` entry point.
"""

from typing import Any, Optional

from ..options import ExportType
from .base import ConverterBase
from .flattened import JsonToFlattenedTsConverter
from .referenced import JsonToTsConverter

__all__ = ["ConverterBase", "JsonToTsConverter", "JsonToFlattenedTsConverter", "convert"]


def convert(
    json_data: Any,
    root_name: str = "RootObject",
    export_type: ExportType = "root",
    options: Any = None,
    flat: bool = False,
) -> Optional[str]:
    """
    Converts JSON into TypeScript declarations.

    Args:
        json_data: JSON text, or an already parsed value
        root_name: Name of the root declaration
        export_type: "all", "root" or "none"
        options: ConvertOptions, or a mapping of option names to values
        flat: Inline nested records into a single interface

    Returns:
        The declarations, or None when the input could not be converted
    """
    converter = JsonToFlattenedTsConverter if flat else JsonToTsConverter
    return converter.convert(json_data, root_name, export_type, options)
