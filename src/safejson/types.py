"""Core type definitions for SafeJson."""

from decimal import Decimal
from enum import Enum
from typing import Any


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Presence(Enum):
    """Whether a path resolved to a value."""
    PRESENT = "present"
    MISSING = "missing"


class JsonTag(Enum):
    """Runtime tag of a value held in the underlying tree."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    BIG_INTEGER = "big_integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    NULL = "null"
    OTHER = "other"


NUMERIC_TAGS = frozenset({
    JsonTag.INTEGER,
    JsonTag.LONG,
    JsonTag.BIG_INTEGER,
    JsonTag.FLOAT,
    JsonTag.DECIMAL,
})


def classify(value: Any) -> JsonTag:
    """
    Determine the tag of a native tree value.

    Integers are split by the width they fit in, mirroring the way JSON
    numbers are usually bucketed into int32/int64/arbitrary precision.

    Args:
        value: Value taken from the underlying tree

    Returns:
        JsonTag for the value
    """
    if value is None:
        return JsonTag.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return JsonTag.BOOLEAN
    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return JsonTag.INTEGER
        if INT64_MIN <= value <= INT64_MAX:
            return JsonTag.LONG
        return JsonTag.BIG_INTEGER
    if isinstance(value, float):
        return JsonTag.FLOAT
    if isinstance(value, Decimal):
        return JsonTag.DECIMAL
    if isinstance(value, str):
        return JsonTag.STRING
    if isinstance(value, dict):
        return JsonTag.OBJECT
    if isinstance(value, list):
        return JsonTag.ARRAY
    return JsonTag.OTHER


class SafeJsonError(Exception):
    """Base exception for SafeJson errors."""


class ConfigurationError(SafeJsonError):
    """Raised when a SafeJsonConfig holds invalid options."""

    def __init__(self, message: str, option: str):
        super().__init__(message)
        self.option = option
