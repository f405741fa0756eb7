"""
Roman numerals, circled numbers and other radixes.
"""

import logging
from typing import List

from kansuji.constants import (
    DESC_BIN,
    DESC_CIRCLED,
    DESC_HEX,
    DESC_OCT,
    DESC_ROMAN_CAPITAL,
    DESC_ROMAN_SMALL,
    GOOGOL,
)
from kansuji.number_types import NumberString, NumberStyle
from kansuji.safe_parse import safe_str_to_uint64
from kansuji.tables import CIRCLED_NUMBERS, ROMAN_NUMBERS_CAPITAL, ROMAN_NUMBERS_SMALL, glyph_at
from kansuji.variations import NumberStringVariation, is_decimal_integer

logger = logging.getLogger(__name__)

# Roman numerals stop at 12 while circled numbers go up to 50.
SPECIAL_NUMERIC_VARIATIONS = (
    NumberStringVariation(ROMAN_NUMBERS_CAPITAL, DESC_ROMAN_CAPITAL, NumberStyle.NUMBER_ROMAN_CAPITAL),
    NumberStringVariation(ROMAN_NUMBERS_SMALL, DESC_ROMAN_SMALL, NumberStyle.NUMBER_ROMAN_SMALL),
    NumberStringVariation(CIRCLED_NUMBERS, DESC_CIRCLED, NumberStyle.NUMBER_CIRCLED),
)


def arabic_to_other_forms(input_num: str) -> List[NumberString]:
    """
    Convert a number to Roman numerals, circled numbers or "Googol".

    Example:
        >>> [s.value for s in arabic_to_other_forms("3")]
        ['Ⅲ', 'ⅲ', '③']
    """
    if not is_decimal_integer(input_num):
        logger.debug("Not a decimal integer: %r", input_num)
        return []

    output = []

    # 10^100 does not fit in 64 bits, so it is matched as text.
    if input_num == GOOGOL:
        output.append(NumberString("Googol", "", NumberStyle.DEFAULT_STYLE))

    n = safe_str_to_uint64(input_num)
    if n is None:
        return output

    for variation in SPECIAL_NUMERIC_VARIATIONS:
        glyph = glyph_at(variation.digits, n)
        if glyph is not None:
            output.append(NumberString(glyph, variation.description, variation.style))

    return output


def _to_binary(n: int) -> str:
    bits = []
    while n:
        bits.append('1' if n & 1 else '0')
        n >>= 1
    return "0b" + ''.join(reversed(bits))


def arabic_to_other_radixes(input_num: str) -> List[NumberString]:
    """
    Convert a number to hexadecimal, octal and binary.

    Each radix is emitted only when its rendering differs from the decimal
    one: hex above 9, octal above 7, binary above 1.

    Example:
        >>> [s.value for s in arabic_to_other_radixes("255")]
        ['0xff', '0377', '0b11111111']
    """
    if not is_decimal_integer(input_num):
        logger.debug("Not a decimal integer: %r", input_num)
        return []

    n = safe_str_to_uint64(input_num)
    if n is None:
        logger.debug("Out of uint64 range: %r", input_num)
        return []

    output = []
    if n > 9:
        output.append(NumberString(f"0x{n:x}", DESC_HEX, NumberStyle.NUMBER_HEX))
    if n > 7:
        output.append(NumberString(f"0{n:o}", DESC_OCT, NumberStyle.NUMBER_OCT))
    if n > 1:
        output.append(NumberString(_to_binary(n), DESC_BIN, NumberStyle.NUMBER_BIN))
    return output
