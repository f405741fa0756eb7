"""
Range-checked string to number parsing.

Python integers never overflow, so each parser checks the value against the
fixed-width type it stands in for and returns None when it does not fit.
"""

import math
import re
from typing import Optional

from kansuji.constants import (
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT16_MAX,
    UINT32_MAX,
    UINT64_MAX,
)

# Optional surrounding ASCII whitespace, optional sign, ASCII digits.
_INTEGER_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)[ \t\n\v\f\r]*")
# Decimal or exponent notation, plus the nan/inf spellings float() accepts.
_FLOAT_PATTERN = re.compile(
    r"[ \t\n\v\f\r]*[+-]?"
    r"(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf(?:inity)?)"
    r"[ \t\n\v\f\r]*",
    re.IGNORECASE,
)


def _parse_integer(text: str, low: int, high: int) -> Optional[int]:
    """Parse ``text`` as an integer within [low, high]."""
    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None:
        return None
    sign, digits = match.groups()
    if sign == '-' and low == 0:
        return None
    value = int(digits)
    if sign == '-':
        value = -value
    return _safe_cast(value, low, high)


def _safe_cast(value: Optional[int], low: int, high: int) -> Optional[int]:
    if value is None or value < low or value > high:
        return None
    return value


def simple_atoi(text: str) -> int:
    """Parse a 32-bit signed integer, returning 0 on any failure."""
    value = _parse_integer(text, INT32_MIN, INT32_MAX)
    return 0 if value is None else value


# 16-bit values go through a 32-bit parse first, then a range check.
def safe_str_to_int16(text: str) -> Optional[int]:
    return _safe_cast(_parse_integer(text, INT32_MIN, INT32_MAX), INT16_MIN, INT16_MAX)


def safe_str_to_uint16(text: str) -> Optional[int]:
    return _safe_cast(_parse_integer(text, 0, UINT32_MAX), 0, UINT16_MAX)


def safe_str_to_int32(text: str) -> Optional[int]:
    return _parse_integer(text, INT32_MIN, INT32_MAX)


def safe_str_to_uint32(text: str) -> Optional[int]:
    return _parse_integer(text, 0, UINT32_MAX)


def safe_str_to_int64(text: str) -> Optional[int]:
    return _parse_integer(text, INT64_MIN, INT64_MAX)


def safe_str_to_uint64(text: str) -> Optional[int]:
    return _parse_integer(text, 0, UINT64_MAX)


def safe_str_to_double(text: str) -> Optional[float]:
    """
    Parse a finite floating point number.

    "nan", "inf" and values too large for a double parse as valid floats,
    but are rejected here.

    Returns:
        The parsed value, or None if malformed, NaN or infinite
    """
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value
