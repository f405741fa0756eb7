"""
Digit-for-digit script conversions.

These converters never insert rank characters: every input digit maps to
exactly one glyph (plus thousands separators for the separated styles).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from kansuji.constants import DESC_ARABIC, DESC_KANJI, DESC_OLD_KANJI
from kansuji.number_types import NumberString, NumberStyle
from kansuji.tables import (
    FULLWIDTH_DIGITS,
    GlyphTable,
    HALFWIDTH_DIGITS,
    KANJI_DIGITS,
    OLD_KANJI_DIGITS,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Predicates
# ============================================================================

def _is_ascii_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_arabic_digit(char: str) -> bool:
    """Half-width or full-width Arabic digit."""
    return _is_ascii_digit(char) or '０' <= char <= '９'


def is_decimal_integer(text: str) -> bool:
    """True if text is non-empty and made of ASCII digits only."""
    return bool(text) and all(_is_ascii_digit(c) for c in text)


def is_decimal_number(text: str) -> bool:
    """
    True if text is ASCII digits with at most one decimal point.

    A trailing point ("123456.") is accepted.
    """
    if not text:
        return False
    points = 0
    for char in text:
        if char == '.':
            points += 1
            if points >= 2:
                return False
        elif not _is_ascii_digit(char):
            return False
    return True


def is_arabic_number(text: str) -> bool:
    """True if text is non-empty and made of half/full-width digits only."""
    return bool(text) and all(_is_arabic_digit(c) for c in text)


# ============================================================================
# Style Variations
# ============================================================================

@dataclass(frozen=True, slots=True)
class NumberStringVariation:
    """A digit table with the style it renders and its punctuation."""
    digits: GlyphTable
    description: str
    style: NumberStyle
    separator: Optional[str] = None
    point: Optional[str] = None


SCRIPT_VARIATIONS = (
    NumberStringVariation(HALFWIDTH_DIGITS, DESC_ARABIC, NumberStyle.NUMBER_ARABIC_AND_KANJI_HALFWIDTH),
    NumberStringVariation(FULLWIDTH_DIGITS, DESC_ARABIC, NumberStyle.NUMBER_ARABIC_AND_KANJI_FULLWIDTH),
    NumberStringVariation(KANJI_DIGITS, DESC_KANJI, NumberStyle.NUMBER_KANJI_ARABIC),
    NumberStringVariation(OLD_KANJI_DIGITS, DESC_OLD_KANJI, NumberStyle.NUMBER_OLD_KANJI),
)

# Half/full-width forms of a plain number are left to the caller's
# character form handling, so full-width is the default style here.
SINGLE_DIGITS_VARIATIONS = (
    NumberStringVariation(KANJI_DIGITS, DESC_KANJI, NumberStyle.NUMBER_KANJI_ARABIC),
    NumberStringVariation(FULLWIDTH_DIGITS, DESC_ARABIC, NumberStyle.DEFAULT_STYLE),
)

SEPARATED_VARIATIONS = (
    NumberStringVariation(HALFWIDTH_DIGITS, DESC_ARABIC,
                          NumberStyle.NUMBER_SEPARATED_ARABIC_HALFWIDTH, ",", "."),
    NumberStringVariation(FULLWIDTH_DIGITS, DESC_ARABIC,
                          NumberStyle.NUMBER_SEPARATED_ARABIC_FULLWIDTH, "，", "．"),
)


def _map_digits(digits: str, table: GlyphTable) -> Optional[str]:
    """Map each ASCII digit through table; None if any glyph is absent."""
    glyphs = []
    for char in digits:
        glyph = table[ord(char) - ord('0')]
        if glyph is None:
            return None
        glyphs.append(glyph)
    return ''.join(glyphs)


# ============================================================================
# Converters
# ============================================================================

def script_variants(input_num: str) -> List[NumberString]:
    """
    Render each digit in half-width, full-width, Kanji and 大字 scripts.

    A script lacking a glyph for one of the digits (大字 has no zero) is
    left out.

    Example:
        >>> [s.value for s in script_variants("12")]
        ['12', '１２', '一二', '壱弐']
    """
    if not is_decimal_integer(input_num):
        logger.debug("Not a decimal integer: %r", input_num)
        return []

    output = []
    for variation in SCRIPT_VARIATIONS:
        value = _map_digits(input_num, variation.digits)
        if value is not None:
            output.append(NumberString(value, variation.description, variation.style))
    return output


def arabic_to_wide_arabic(input_num: str) -> List[NumberString]:
    """Convert "123" to "一二三" and "１２３"."""
    if not is_decimal_integer(input_num):
        logger.debug("Not a decimal integer: %r", input_num)
        return []

    output = []
    for variation in SINGLE_DIGITS_VARIATIONS:
        value = _map_digits(input_num, variation.digits)
        if value:
            output.append(NumberString(value, variation.description, variation.style))
    return output


def arabic_to_separated_arabic(input_num: str) -> List[NumberString]:
    """
    Insert thousands separators, e.g. "1234567.89" -> "1,234,567.89".

    Numbers whose integral part starts with '0' are not converted.

    Returns:
        A half-width and a full-width NumberString, or [] on failure
    """
    if not is_decimal_number(input_num):
        logger.debug("Not a decimal number: %r", input_num)
        return []

    integer, point, fraction = input_num.partition('.')
    if not integer or integer[0] == '0':
        logger.debug("Integral part is empty or starts with zero: %r", input_num)
        return []

    output = []
    for variation in SEPARATED_VARIATIONS:
        parts = []
        for i, char in enumerate(integer):
            if i != 0 and (len(integer) - i) % 3 == 0:
                parts.append(variation.separator)
            parts.append(variation.digits[ord(char) - ord('0')])

        if point:
            parts.append(variation.point)
            parts.extend(variation.digits[ord(c) - ord('0')] for c in fraction)

        output.append(NumberString(''.join(parts), variation.description, variation.style))
    return output
