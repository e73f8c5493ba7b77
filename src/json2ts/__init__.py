"""
json2ts - Generate TypeScript interfaces from JSON data.

Infers structural types from JSON documents or Python values and renders
them as TypeScript declarations, either as cross-referenced interfaces or
as a single flattened interface.
"""

from .arrays import classify_array
from .converters import JsonToFlattenedTsConverter, JsonToTsConverter, convert
from .errors import InvalidRootNameError, Json2TsError, MaxDepthExceededError, SampleReadError, WriteFailure
from .naming import check_identifier, format_case, suggest_type_name, to_field_name, to_type_name
from .options import CaseType, ConvertOptions, ExportType
from .parser import JsonParseError, ParseResult, parse_json
from .sampling import read_sample
from .values import UNDEFINED

__version__ = "0.1.0"

__all__ = [
    "convert",
    "JsonToTsConverter",
    "JsonToFlattenedTsConverter",
    "ConvertOptions",
    "CaseType",
    "ExportType",
    "parse_json",
    "ParseResult",
    "JsonParseError",
    "classify_array",
    "to_type_name",
    "to_field_name",
    "format_case",
    "suggest_type_name",
    "check_identifier",
    "read_sample",
    "UNDEFINED",
    "Json2TsError",
    "InvalidRootNameError",
    "MaxDepthExceededError",
    "SampleReadError",
    "WriteFailure",
    "__version__",
]
