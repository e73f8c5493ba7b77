"""
Normalizes converter input into an in-memory value.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .values import UNDEFINED

# Characters that can open a JSON value
JSON_START_CHARS = frozenset('{["tfn-0123456789')

SNIPPET_LIMIT = 100


class JsonParseError(str, Enum):
    INVALID_INPUT = "Invalid input: provided value cannot be parsed"
    INVALID_FORMAT = "Invalid JSON format: input does not appear to be valid JSON"
    PARSE_FAILED = "JSON parsing failed"
    UNDEFINED_RESULT = "Invalid JSON: parsed result is undefined"


@dataclass
class ParseResult:
    """Parsed data, or the reason parsing failed."""
    data: Any = None
    error: Optional[JsonParseError] = None
    details: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        if self.error is None:
            return "ok"
        if self.details:
            return f"{self.error.value} - {self.details}"
        return self.error.value


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"Unexpected token {name}")


def snippet(text: str) -> str:
    if len(text) > SNIPPET_LIMIT:
        return f"{text[:SNIPPET_LIMIT - 3]}..."
    return text


def parse_json(raw: Any) -> ParseResult:
    """
    Parses JSON text, or returns an already structured value as-is.

    Text is trimmed and checked for a plausible first character before
    being decoded. Failures carry the offending position and a snippet
    of the input.
    """
    if raw is None:
        return ParseResult(error=JsonParseError.INVALID_INPUT, details="Input is null or undefined")

    if not isinstance(raw, str):
        return ParseResult(data=raw)

    trimmed = raw.strip()
    if not trimmed:
        return ParseResult(error=JsonParseError.INVALID_INPUT, details="Input is empty or whitespace")

    if trimmed[0] not in JSON_START_CHARS:
        return ParseResult(
            error=JsonParseError.INVALID_FORMAT,
            details=f"Input starts with '{trimmed[0]}', expected JSON value",
        )

    try:
        parsed = json.loads(trimmed, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        return ParseResult(
            error=JsonParseError.PARSE_FAILED,
            details=f"at position {e.pos}: {e.msg}\nInput: {snippet(trimmed)}",
        )
    except (ValueError, RecursionError) as e:
        return ParseResult(
            error=JsonParseError.PARSE_FAILED,
            details=f"at position unknown: {e}\nInput: {snippet(trimmed)}",
        )

    # json.loads never produces UNDEFINED, so this only guards the
    # JsonParseError contract for callers matching on every kind
    if parsed is UNDEFINED:
        return ParseResult(error=JsonParseError.UNDEFINED_RESULT)

    return ParseResult(data=parsed)
