"""
Arabic to Kanji numeral conversion with rank characters.

    "12345" -> "1万2345", "１万２３４５", "一万二千三百四十五",
               "壱萬弐阡参百四拾五"

The number is split into 4-digit groups from the right; each group is
rendered with the ones-ranks (十, 百, 千) and followed by its bigger-rank
(万, 億, 兆, 京).
"""

import logging
from typing import List

from kansuji.constants import DESC_OLD_KANJI, DIGITS_IN_BIG_RANK
from kansuji.errors import InvalidNumeralInput, NumeralError, UnsupportedNumeral
from kansuji.number_types import NumberString, NumberStyle
from kansuji.tables import (
    GlyphTable,
    KANJI_BIGGER_RANKS,
    KANJI_RANKS,
    KANJI_ZERO,
    OLD_KANJI_BIGGER_RANKS,
    OLD_KANJI_RANKS,
    OLD_TEN,
    OLD_THOUSAND,
    OLD_TWENTY,
    OLD_TWO_TEN,
)
from kansuji.variations import SCRIPT_VARIATIONS, NumberStringVariation, is_decimal_integer

logger = logging.getLogger(__name__)

# Styles that keep Arabic digits and only add bigger-ranks.
_ARABIC_STYLES = frozenset([
    NumberStyle.NUMBER_ARABIC_AND_KANJI_HALFWIDTH,
    NumberStyle.NUMBER_ARABIC_AND_KANJI_FULLWIDTH,
])

# Same tables as the digit-for-digit script variations, but the Kanji digit
# style is rendered with ranks here.
_KANJI_STYLE_OVERRIDES = {
    NumberStyle.NUMBER_KANJI_ARABIC: NumberStyle.NUMBER_KANJI,
}


def split_into_rank_groups(input_num: str) -> List[str]:
    """
    Split a decimal integer into 4-digit groups, lowest group first.

    "123456" -> ["3456", "0012"]

    Raises:
        InvalidNumeralInput: If input is not a decimal integer
        UnsupportedNumeral: If the number needs a rank beyond 京
    """
    if not is_decimal_integer(input_num):
        raise InvalidNumeralInput(f"not a decimal integer: {input_num!r}")
    if len(input_num) > len(KANJI_BIGGER_RANKS) * DIGITS_IN_BIG_RANK:
        raise UnsupportedNumeral(f"too many digits for Kanji ranks: {len(input_num)}")

    filled_zero_num = -len(input_num) % DIGITS_IN_BIG_RANK
    padded = '0' * filled_zero_num + input_num
    return [
        padded[i - DIGITS_IN_BIG_RANK:i]
        for i in range(len(padded), 0, -DIGITS_IN_BIG_RANK)
    ]


def _render_group(segment: str, variation: NumberStringVariation, ranks: GlyphTable) -> str:
    style = variation.style
    digits = variation.digits
    parts = []
    leading = True
    for i, char in enumerate(segment):
        if leading and char == '0':
            continue
        leading = False
        digit = ord(char) - ord('0')

        if style in _ARABIC_STYLES:
            parts.append(digits[digit])
            continue

        if digit == 0:
            continue
        # In 大字 style, "壱" is written on every rank.
        if (style == NumberStyle.NUMBER_OLD_KANJI
                or i == DIGITS_IN_BIG_RANK - 1 or digit != 1):
            parts.append(digits[digit])
        parts.append(ranks[DIGITS_IN_BIG_RANK - i])
    return ''.join(parts)


def arabic_to_kanji(input_num: str) -> List[NumberString]:
    """
    Convert an Arabic number string to Kanji numerals with ranks.

    Args:
        input_num: ASCII decimal digits, e.g. "1234"

    Returns:
        List of NumberString; empty if the input is not a decimal integer
        or is too large to render

    Example:
        >>> [s.value for s in arabic_to_kanji("20")]
        ['二十', '弐拾', '廿']
    """
    # A number made only of zeros is written as 零.
    if is_decimal_integer(input_num) and input_num.strip('0') == '':
        return [NumberString(KANJI_ZERO, DESC_OLD_KANJI, NumberStyle.NUMBER_OLD_KANJI)]

    try:
        groups = split_into_rank_groups(input_num)
    except NumeralError as e:
        logger.debug("Cannot convert to Kanji: %s", e)
        return []

    output = []
    for variation in SCRIPT_VARIATIONS:
        style = _KANJI_STYLE_OVERRIDES.get(variation.style, variation.style)

        # 1-4 digit numbers have no bigger-rank to show.
        if len(groups) == 1 and style in _ARABIC_STYLES:
            continue

        if style == NumberStyle.NUMBER_OLD_KANJI:
            ranks, bigger_ranks = OLD_KANJI_RANKS, OLD_KANJI_BIGGER_RANKS
        else:
            ranks, bigger_ranks = KANJI_RANKS, KANJI_BIGGER_RANKS

        result = ''
        for rank in range(len(groups) - 1, -1, -1):
            segment_result = _render_group(groups[rank], variation, ranks)
            if segment_result:
                result += segment_result + bigger_ranks[rank]

        description = variation.description
        output.append(NumberString(result, description, style))

        if style != NumberStyle.NUMBER_OLD_KANJI:
            continue

        if OLD_TWO_TEN in result:
            output.append(NumberString(result.replace(OLD_TWO_TEN, OLD_TWENTY), description, style))

        # Single kanji forms
        if groups == ["0010"]:
            output.append(NumberString(OLD_TEN, description, style))
        if groups == ["1000"]:
            output.append(NumberString(OLD_THOUSAND, description, style))

    return output
