"""
Conversion options.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Literal, Mapping, Optional, get_args

# Supported naming conventions for property names:
# - camel: camelCase
# - lower_snake: snake_case
# - original: unchanged
# - pascal: PascalCase
# - upper_snake: UPPER_SNAKE_CASE
# - kebab: kebab-case
CaseType = Literal["camel", "lower_snake", "original", "pascal", "upper_snake", "kebab"]

# Which declarations receive the ``export`` keyword.
ExportType = Literal["all", "root", "none"]

CASE_TYPES = get_args(CaseType)
EXPORT_TYPES = get_args(ExportType)

# camelCase spellings accepted by ConvertOptions.from_mapping
_CAMEL_KEYS = {
    "arrayMaxTupleSize": "array_max_tuple_size",
    "arrayMinTupleSize": "array_min_tuple_size",
    "typeMap": "type_map",
    "propertyCase": "property_case",
    "readonlyProperties": "readonly_properties",
    "optionalProperties": "optional_properties",
    "maxDepth": "max_depth",
}


@dataclass(frozen=True)
class ConvertOptions:
    """Immutable configuration snapshot for one conversion call."""
    # Arrays longer than this never become tuples
    array_max_tuple_size: int = 10
    # Arrays shorter than this never become tuples
    array_min_tuple_size: int = 2
    # null/undefined map to literal types instead of ``unknown``
    strict: bool = False
    # Overrides keyed by property name, literal value or runtime type tag
    type_map: Optional[Dict[str, str]] = field(default=None, hash=False)
    property_case: CaseType = "original"
    readonly_properties: bool = False
    optional_properties: bool = False
    max_depth: int = 100

    def __post_init__(self):
        if self.property_case not in CASE_TYPES:
            raise ValueError(
                f"Unknown property case {self.property_case!r}, expected one of {', '.join(CASE_TYPES)}"
            )
        for name in ("array_max_tuple_size", "array_min_tuple_size", "max_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if self.type_map is not None:
            # options own their copy of the map
            object.__setattr__(self, "type_map", {str(k): str(v) for k, v in self.type_map.items()})

    @property
    def any_type(self) -> str:
        """Catch-all used inside special generic types."""
        return "unknown" if self.strict else "any"

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "ConvertOptions":
        """Builds options from snake_case or camelCase keys; unknown keys are rejected."""
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in values.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown conversion option: {key!r}")
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)


def coerce_options(options: Any) -> ConvertOptions:
    if isinstance(options, ConvertOptions):
        return options
    return ConvertOptions.from_mapping(options)
