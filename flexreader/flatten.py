"""
Flattening of nested JSON values into header paths and string records.

Objects are always walked in sorted key order, at every nesting level, so the
layout of a record does not depend on how its source object happened to order
its keys. Headers are the union of leaf paths across all objects in first-seen
order; each record lists the leaf values of its own object. Records of objects
that share the same key set line up with each other field for field.
"""

import json
import logging
import math
from decimal import Decimal
from typing import Any, Iterable, List, Set

from .constants import (
    NESTED_KEY_DELIMITER,
    JSON_COMPACT_SEPARATORS,
    TRUE_TEXT,
    FALSE_TEXT,
    NULL_TEXT,
    DECIMAL_NOTATION_MAX_EXPONENT,
    DECIMAL_NOTATION_MIN_EXPONENT,
)
from .exceptions import InvalidStructureError

logger = logging.getLogger(__name__)


def format_number(value: Any) -> str:
    """
    Render a JSON number in its shortest round-tripping form.

    Integers keep all their digits. Floats always carry a fraction or an
    exponent, and exponents are written without a ``+`` sign or zero padding.

    Examples:
        >>> format_number(30)
        '30'
        >>> format_number(30.0)
        '30.0'
        >>> format_number(1e20)
        '1e20'
        >>> format_number(1.5e-7)
        '1.5e-7'
    """
    if isinstance(value, int) or not math.isfinite(value):
        return json.dumps(value)
    if value == 0:
        return repr(value)

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    # Position of the decimal point relative to the first digit
    point = len(digits) + exponent
    if exponent >= 0 and point <= DECIMAL_NOTATION_MAX_EXPONENT:
        text = f"{digits}{'0' * exponent}.0"
    elif 0 < point <= DECIMAL_NOTATION_MAX_EXPONENT:
        text = f"{digits[:point]}.{digits[point:]}"
    elif DECIMAL_NOTATION_MIN_EXPONENT < point <= 0:
        text = f"0.{'0' * -point}{digits}"
    elif len(digits) == 1:
        text = f"{digits}e{point - 1}"
    else:
        text = f"{digits[0]}.{digits[1:]}e{point - 1}"

    return f"-{text}" if sign else text


def to_compact_json(value: Any) -> str:
    """
    Serialize a value as compact JSON with object keys sorted.

    Numbers go through ``format_number``; values JSON has no form for fall
    back to their ``str()`` as a JSON string.

    Examples:
        >>> to_compact_json({"b": [1.0, None], "a": "x"})
        '{"a":"x","b":[1.0,null]}'
    """
    item_separator, key_separator = JSON_COMPACT_SEPARATORS
    if isinstance(value, dict):
        members = (
            f"{to_compact_json(str(key))}{key_separator}{to_compact_json(item)}"
            for key, item in sorted(value.items())
        )
        return "{" + item_separator.join(members) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + item_separator.join(to_compact_json(item) for item in value) + "]"
    if isinstance(value, float):
        return format_number(value)
    return json.dumps(value, ensure_ascii=False, default=str)


def render_value(value: Any) -> str:
    """
    Render a single decoded value as a string.

    Rendering is total: every value maps to exactly one string.

    Examples:
        >>> render_value("John")
        'John'
        >>> render_value(30)
        '30'
        >>> render_value(["dog", "cat"])
        '["dog","cat"]'
        >>> render_value(None)
        'null'
    """
    if isinstance(value, str):
        return value
    if value is None:
        return NULL_TEXT
    # bool before int: True is an int
    if isinstance(value, bool):
        return TRUE_TEXT if value else FALSE_TEXT
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple, dict)):
        return to_compact_json(value)
    return str(value)


def collect_object_headers(obj: dict, headers: List[str], seen: Set[str], parent_key: str = '') -> None:
    """
    Append the flattened leaf paths of one object to ``headers``.

    Args:
        obj: The JSON object to walk
        headers: Header list being built, in first-seen order
        seen: Paths already present in ``headers``
        parent_key: Dotted path of the enclosing object (used in recursion)
    """
    for key, value in sorted(obj.items()):
        new_key = f"{parent_key}{NESTED_KEY_DELIMITER}{key}" if parent_key else key
        if isinstance(value, dict):
            collect_object_headers(value, headers, seen, new_key)
        elif new_key not in seen:
            # Arrays and scalars are leaves
            seen.add(new_key)
            headers.append(new_key)


def flatten_record(value: Any) -> List[str]:
    """
    Flatten one JSON value into a list of strings, depth first.

    Objects contribute their leaf values inline in sorted key order; arrays are not
    expanded and become a single compact JSON field.

    Examples:
        >>> flatten_record({"age": 30, "bank": {"account": "123456"}, "pets": []})
        ['30', '123456', '[]']
    """
    if isinstance(value, dict):
        fields = []
        for _, nested in sorted(value.items()):
            fields.extend(flatten_record(nested))
        return fields
    return [render_value(value)]


def _top_level_arrays(documents: Iterable[Any], strict: bool) -> Iterable[list]:
    for position, document in enumerate(documents):
        if isinstance(document, list):
            yield document
        elif strict:
            raise InvalidStructureError(
                f"Expected a JSON array at top-level document {position}, got {type(document).__name__}"
            )
        else:
            logger.warning(f"Top-level document {position} is not a JSON array, skipping")


def collect_headers(documents: Iterable[Any], strict: bool = False) -> List[str]:
    """
    Discover the flattened header paths across all objects of all top-level arrays.

    Args:
        documents: Top-level decoded JSON values of a file
        strict: Raise instead of skipping values of an unexpected shape

    Returns:
        Header paths, deduplicated, in first-seen order

    Raises:
        InvalidStructureError: In strict mode, if a document is not an array
            or an array element is not an object
    """
    headers: List[str] = []
    seen: Set[str] = set()

    for array in _top_level_arrays(documents, strict):
        for index, item in enumerate(array):
            if isinstance(item, dict):
                collect_object_headers(item, headers, seen)
            elif strict:
                raise InvalidStructureError(f"Array element {index} is not a JSON object")

    return headers


def flatten_records(documents: Iterable[Any], strict: bool = False) -> List[List[str]]:
    """
    Flatten every element of every top-level array into a record.

    In permissive mode a non-object element still yields a one-field record.

    Raises:
        InvalidStructureError: In strict mode, if a document is not an array
            or an array element is not an object
    """
    records = []
    for array in _top_level_arrays(documents, strict):
        for index, item in enumerate(array):
            if strict and not isinstance(item, dict):
                raise InvalidStructureError(f"Array element {index} is not a JSON object")
            records.append(flatten_record(item))
    return records

