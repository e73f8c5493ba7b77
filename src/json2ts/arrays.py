"""
Array and tuple classification.
"""

from typing import Any, List, Sequence

from .descriptors import ANY, OBJECT, ArrayOf, Primitive, TupleOf, TypeDescriptor
from .values import element_tag, type_tag

DEFAULT_MAX_TUPLE_SIZE = 10
DEFAULT_MIN_TUPLE_SIZE = 2


# typeof tags that are not TypeScript type names
_TAG_NAMES = {"function": "Function"}


def _primitive(tag: str) -> Primitive:
    return Primitive(_TAG_NAMES.get(tag, tag))


def _tag_type(tag: str) -> TypeDescriptor:
    if tag == "array":
        return ArrayOf(ANY)
    if tag == "object":
        return OBJECT
    return _primitive(tag)


def classify_array(
    values: Sequence[Any],
    max_tuple_size: int = DEFAULT_MAX_TUPLE_SIZE,
    min_tuple_size: int = DEFAULT_MIN_TUPLE_SIZE,
) -> TypeDescriptor:
    """
    Detects the type of an array from its elements.

    Arrays outside the tuple-size band are typed by their primitive elements
    alone: one distinct primitive type gives ``T[]``, anything else ``any[]``.
    Inside the band, a homogeneous primitive array is still ``T[]``; mixed
    arrays become positional tuples such as ``[number, string, boolean]``.
    """
    if not values:
        return ArrayOf(ANY)

    if len(values) > max_tuple_size or len(values) < min_tuple_size:
        tags: List[str] = []
        for value in values:
            tag = type_tag(value)
            if tag != "object" and tag not in tags:
                tags.append(tag)
        if len(tags) == 1:
            return ArrayOf(_primitive(tags[0]))
        return ArrayOf(ANY)

    tags = [element_tag(value) for value in values]
    unique = set(tags)
    if len(unique) == 1 and not unique & {"object", "array"}:
        return ArrayOf(_primitive(tags[0]))

    return TupleOf(tuple(_tag_type(tag) for tag in tags))
