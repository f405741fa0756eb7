"""
Lightweight data structures returned by the kansuji converters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple


class NumberStyle(Enum):
    """Rendering style of a converted number."""
    DEFAULT_STYLE = "default"
    # 123,456,789
    NUMBER_SEPARATED_ARABIC_HALFWIDTH = "separated_halfwidth"
    # １２３，４５６，７８９
    NUMBER_SEPARATED_ARABIC_FULLWIDTH = "separated_fullwidth"
    # 1億2345万6789
    NUMBER_ARABIC_AND_KANJI_HALFWIDTH = "arabic_kanji_halfwidth"
    # １億２３４５万６７８９
    NUMBER_ARABIC_AND_KANJI_FULLWIDTH = "arabic_kanji_fullwidth"
    # 一億二千三百四十五万六千七百八十九
    NUMBER_KANJI = "kanji"
    # 壱億弐阡参百四拾五萬六阡七百八拾九
    NUMBER_OLD_KANJI = "old_kanji"
    # Ⅲ
    NUMBER_ROMAN_CAPITAL = "roman_capital"
    # ⅲ
    NUMBER_ROMAN_SMALL = "roman_small"
    # ③
    NUMBER_CIRCLED = "circled"
    # 一二三四五六七八九
    NUMBER_KANJI_ARABIC = "kanji_arabic"
    # 0x4d2
    NUMBER_HEX = "hex"
    # 02322
    NUMBER_OCT = "oct"
    # 0b10011010010
    NUMBER_BIN = "bin"


@dataclass(frozen=True, slots=True)
class NumberString:
    """
    One rendering of a number.

    Attributes:
        value: The rendered text (e.g., "二十")
        description: Human-readable name of the style (e.g., "漢数字")
        style: The NumberStyle tag
    """
    value: str
    description: str
    style: NumberStyle


class NormalizedNumber(NamedTuple):
    """
    Result of reading a Kanji numeral back into Arabic digits.

    ``kanji`` echoes the consumed input with Arabic digits rewritten as
    Kanji digits; ``suffix`` holds the unconsumed tail (empty if none).
    """
    kanji: str
    arabic: str
    suffix: str = ""


@dataclass(slots=True)
class NumeralTokens:
    """Token values read from a numeral string, one per character."""
    tokens: List[int] = field(default_factory=list)
    kanji: str = ""
    suffix: str = ""
