"""JSON text rendering for tree values."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

import simplejson

from .types import JsonTag, classify


def _encode_extra(o: Any) -> Any:
    """Fallback for the non-JSON values a tree may hold."""
    if isinstance(o, Decimal):
        if not o.is_finite():
            return None
        # Exact decimal text, never through float
        return simplejson.RawJSON(str(o))
    if isinstance(o, (datetime, date, time)):
        return o.isoformat()
    if isinstance(o, (set, frozenset)):
        return list(o)
    return str(o)


def dumps(value: Any, indent: int = 0) -> str:
    """
    Serialize a tree value to JSON text.

    NaN and infinite floats are written as null; Decimals keep every digit.

    Args:
        value: Object, array or scalar from the tree
        indent: Spaces per nesting level; 0 or less gives compact output

    Returns:
        JSON text

    Raises:
        ValueError: If the tree contains a circular reference
    """
    if indent > 0:
        options = {"indent": " " * indent, "separators": (",", ": ")}
    else:
        options = {"separators": (",", ":")}
    return simplejson.dumps(
        value,
        default=_encode_extra,
        use_decimal=False,
        ensure_ascii=False,
        allow_nan=False,
        ignore_nan=True,
        **options
    )


def display_string(value: Any) -> str:
    """
    Render a value for display.

    Strings come back unchanged; booleans as "true"/"false"; containers as
    compact JSON; everything else through str().
    """
    tag = classify(value)
    if tag is JsonTag.STRING:
        return value
    if tag is JsonTag.BOOLEAN:
        return "true" if value else "false"
    if tag is JsonTag.NULL:
        return "null"
    if tag in (JsonTag.OBJECT, JsonTag.ARRAY):
        return dumps(value, 0)
    return str(value)
