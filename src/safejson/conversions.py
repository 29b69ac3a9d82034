"""Typed conversions from tree values to native results.

Every helper takes the raw value together with its JsonTag and returns
None when the value cannot be converted. None of them raise for data
coming out of a JSON tree.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .types import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    JsonTag,
)


# Plain decimal literal: sign, digits, optional fraction, optional exponent.
_DECIMAL_TEXT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_INTEGRAL_TAGS = (JsonTag.INTEGER, JsonTag.LONG, JsonTag.BIG_INTEGER)


def parse_decimal_text(text: str) -> Optional[Decimal]:
    """
    Parse plain decimal text into a Decimal.

    Whitespace, underscores and the NaN/Infinity spellings that Decimal()
    would otherwise accept are rejected.

    Args:
        text: Candidate decimal text

    Returns:
        Parsed Decimal, or None if the text is not a decimal literal
    """
    if not _DECIMAL_TEXT.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def _wrap(value: int, bits: int) -> int:
    """Keep the low ``bits`` bits of ``value`` as a signed integer."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _saturate(value: float, lower: int, upper: int) -> int:
    """Truncate a float toward zero, clamping to the given range."""
    if math.isnan(value):
        return 0
    if value >= upper:
        return upper
    if value <= lower:
        return lower
    return math.trunc(value)


def _decimal_low_bits(value: Decimal, bits: int) -> int:
    """Truncate a finite Decimal toward zero and wrap it to ``bits`` bits."""
    sign, digits, exponent = value.as_tuple()
    if exponent >= 0:
        # Avoid materialising huge powers of ten.
        coefficient = int("".join(str(d) for d in digits) or "0")
        magnitude = coefficient * pow(10, exponent, 1 << bits)
        return _wrap(-magnitude if sign else magnitude, bits)
    return _wrap(int(value), bits)


def _to_fixed_width(value: Any, tag: JsonTag, bits: int, lower: int, upper: int,
                    native_tags) -> Optional[int]:
    if tag in native_tags:
        return value
    if tag in _INTEGRAL_TAGS:
        return _wrap(value, bits)
    if tag is JsonTag.FLOAT:
        return _saturate(value, lower, upper)
    if tag is JsonTag.DECIMAL:
        if value.is_finite():
            return _decimal_low_bits(value, bits)
        return _saturate(float(value), lower, upper)
    if tag is JsonTag.STRING:
        number = parse_decimal_text(value)
        if number is None:
            return None
        # Too large for any supported width
        if number.adjusted() > 20:
            return None
        if number != number.to_integral_value():
            return None
        result = int(number)
        if lower <= result <= upper:
            return result
    return None


def to_integer(value: Any, tag: JsonTag) -> Optional[int]:
    """
    Convert a value to a signed 32-bit integer.

    Numeric values are narrowed: integers wrap, floats truncate toward
    zero and saturate. Strings must hold an exactly representable value,
    so "3.5" and out-of-range text give None.
    """
    return _to_fixed_width(value, tag, 32, INT32_MIN, INT32_MAX,
                           (JsonTag.INTEGER,))


def to_long(value: Any, tag: JsonTag) -> Optional[int]:
    """Convert a value to a signed 64-bit integer. Same rules as to_integer."""
    return _to_fixed_width(value, tag, 64, INT64_MIN, INT64_MAX,
                           (JsonTag.INTEGER, JsonTag.LONG))


def to_double(value: Any, tag: JsonTag) -> Optional[float]:
    """Convert a numeric value or numeric text to float."""
    if tag is JsonTag.FLOAT:
        return value
    if tag in _INTEGRAL_TAGS:
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if tag is JsonTag.DECIMAL:
        return float(value)
    if tag is JsonTag.STRING:
        # float() alone would also take "1_000", "inf" and "nan"
        if not _DECIMAL_TEXT.fullmatch(value):
            return None
        return float(value)
    return None


def to_decimal(value: Any, tag: JsonTag) -> Optional[Decimal]:
    """
    Convert a value to Decimal.

    Floats go through their shortest text form so that 54.321 becomes
    Decimal("54.321") rather than the exact binary expansion.
    """
    if tag is JsonTag.DECIMAL:
        return value
    if tag is JsonTag.STRING:
        return parse_decimal_text(value)
    if tag in _INTEGRAL_TAGS:
        return Decimal(value)
    if tag is JsonTag.FLOAT:
        if not math.isfinite(value):
            return None
        return Decimal(repr(value))
    return None


def to_boolean(value: Any, tag: JsonTag) -> Optional[bool]:
    """Return booleans as-is and match "true"/"false" text case-insensitively."""
    if tag is JsonTag.BOOLEAN:
        return value
    if tag is JsonTag.STRING:
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return None
