"""
Identifier synthesis for declarations and properties.

Turns arbitrary object keys into TypeScript type names and property names,
and applies the property casing policies.
"""

import json
import re
from typing import Any, List, Optional

from .options import CASE_TYPES, CaseType

# JavaScript keywords plus TypeScript-specific keywords
TS_RESERVED_WORDS = frozenset([
    "break", "case", "catch", "class", "const", "continue", "debugger", "default",
    "delete", "do", "else", "export", "extends", "false", "finally", "for", "function",
    "if", "import", "in", "instanceof", "let", "new", "null", "return", "super",
    "switch", "this", "throw", "true", "try", "typeof", "var", "void", "while", "with",
    "as", "implements", "interface", "package", "private", "protected", "public",
    "static", "yield", "abstract", "async", "await", "constructor", "declare",
    "get", "module", "namespace", "require", "set", "type", "from", "of", "keyof",
    "readonly", "unique", "unknown", "never", "any", "boolean", "number", "object",
    "string", "symbol", "asserts", "is", "infer", "out", "satisfies",
])

# Built-in type names a generated declaration must not shadow
RESERVED_TYPE_NAMES = frozenset([
    "String", "Number", "Boolean", "Object", "Array", "Function", "Date", "RegExp",
    "Error", "Promise", "Map", "Set", "WeakMap", "WeakSet", "Symbol", "BigInt",
    "any", "unknown", "never", "void", "null", "undefined",
])

DEFAULT_TYPE_FALLBACK = "UnnamedInterface"
UNNAMED_PROPERTY = "unnamedProperty"

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
PASCAL_RE = re.compile(r"^[A-Z][A-Za-z0-9]*$")
LOWER_CAMEL_RE = re.compile(r"^[a-z][A-Za-z0-9_$]*$")
SAFE_FIELD_RE = re.compile(r"^[a-z][a-zA-Z0-9_$]*$")
NON_IDENTIFIER_CHARS_RE = re.compile(r"[^A-Za-z0-9_$]")
# Runs of Unicode letters and digits; everything else separates words
WORD_CHUNK_RE = re.compile(r"[^\W_]+")

# Keys that usually wrap the interesting payload
WRAPPER_KEYS = ("data", "result", "items", "list")


def capitalize(text: str) -> str:
    if not text:
        return ""
    return text[0].upper() + text[1:]


def _is_reserved(name: str) -> bool:
    return name in TS_RESERVED_WORDS or name in RESERVED_TYPE_NAMES


def _with_type_suffix(name: str) -> str:
    return f"{capitalize(name)}Type"


def to_type_name(raw: Optional[str], fallback: str = DEFAULT_TYPE_FALLBACK) -> str:
    """
    Synthesizes a PascalCase declaration name from an arbitrary string.

    Already valid PascalCase names are returned unchanged, lowerCamel names
    are capitalized and anything else is rebuilt word by word. Names that
    would shadow a keyword or built-in type get a ``Type`` suffix; names that
    cannot be made valid fall back to ``fallback``.
    """
    if raw is None:
        return fallback
    text = str(raw).strip()
    if not text:
        return fallback

    if text in RESERVED_TYPE_NAMES:
        return _with_type_suffix(text)

    if PASCAL_RE.match(text) and not _is_reserved(text):
        return text

    if LOWER_CAMEL_RE.match(text):
        candidate = capitalize(text)
        if not _is_reserved(text) and not _is_reserved(candidate):
            return candidate

    words = NON_IDENTIFIER_CHARS_RE.sub(" ", text).split()
    name = "".join(w[0].upper() + w[1:].lower() for w in words).rstrip("_$")
    if not name or name[0].isdigit() or not IDENTIFIER_RE.match(name):
        return fallback
    if _is_reserved(name):
        return _with_type_suffix(name)
    return name


def check_identifier(name: Any) -> bool:
    """True for a usable identifier: not reserved, no leading digit, not only ``_``/``$``."""
    if not isinstance(name, str) or not name:
        return False
    if name in TS_RESERVED_WORDS:
        return False
    if not IDENTIFIER_RE.match(name):
        return False
    return name.strip("_$") != ""


def to_field_name(raw: Optional[str]) -> str:
    """Property name, quoted unless it is a plain lowerCamel-style identifier."""
    if raw is None:
        return UNNAMED_PROPERTY
    name = str(raw)
    if name and SAFE_FIELD_RE.match(name) and name not in TS_RESERVED_WORDS:
        return name
    return json.dumps(name, ensure_ascii=False)


def _is_hump(prev: str, current: str, following: str) -> bool:
    if prev.isdigit() != current.isdigit():
        return True
    if prev.islower() and current.isupper():
        return True
    # last capital of an acronym starts the next word, as in HTTPServer
    return prev.isupper() and current.isupper() and following.islower()


def split_words(text: str) -> List[str]:
    """Splits on case transitions, digits runs and any separator."""
    words: List[str] = []
    for chunk in WORD_CHUNK_RE.findall(text):
        start = 0
        for i in range(1, len(chunk)):
            following = chunk[i + 1] if i + 1 < len(chunk) else ""
            if _is_hump(chunk[i - 1], chunk[i], following):
                words.append(chunk[start:i])
                start = i
        words.append(chunk[start:])
    return words


def format_case(raw: str, policy: CaseType = "original") -> str:
    if policy not in CASE_TYPES:
        raise ValueError(f"Unknown property case {policy!r}")
    if policy == "original":
        return raw
    words = split_words(raw)
    if not words:
        return raw
    if policy == "camel":
        return words[0].lower() + "".join(w.capitalize() for w in words[1:])
    if policy == "pascal":
        return "".join(w.capitalize() for w in words)
    if policy == "lower_snake":
        return "_".join(w.lower() for w in words)
    if policy == "upper_snake":
        return "_".join(w.upper() for w in words)
    return "-".join(w.lower() for w in words)


def suggest_type_name(data: Any, default: str = "RootObject") -> str:
    """
    Suggests a declaration name from the structure of ``data``.

    Looks at the first record of a list, single wrapper keys such as
    ``data`` or ``items``, and keys sharing one singular base.
    """
    if isinstance(data, (list, tuple)):
        if not data:
            return default
        first = data[0]
        if isinstance(first, dict):
            if first:
                return to_type_name(next(iter(first)), default)
        return "Item"

    if not isinstance(data, dict) or not data:
        return default

    keys = [str(k) for k in data]
    if len(keys) == 1:
        key = keys[0]
        value = data[key]
        if key in WRAPPER_KEYS and isinstance(value, dict) and value:
            return to_type_name(str(next(iter(value))), default)
        return to_type_name(key, default)

    bases = {re.sub(r"s$", "", k) for k in keys}
    if len(bases) == 1:
        return to_type_name(bases.pop(), default)

    if len(keys) <= 3:
        return "Data"
    return "RootObject"
