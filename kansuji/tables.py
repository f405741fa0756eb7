"""
Glyph tables for number rendering and reading.

Every table is an immutable tuple indexed by digit (or rank) value. A
``None`` entry means no glyph exists at that index; callers treat it as a
skip or a failure, never as an empty string.
"""

from typing import Dict, Optional, Sequence, Tuple

GlyphTable = Tuple[Optional[str], ...]


# ============================================================================
# Digit Tables
# ============================================================================

HALFWIDTH_DIGITS: GlyphTable = (
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
)

FULLWIDTH_DIGITS: GlyphTable = (
    "０", "１", "２", "３", "４", "５", "６", "７", "８", "９",
)

KANJI_DIGITS: GlyphTable = (
    "〇", "一", "二", "三", "四", "五", "六", "七", "八", "九",
)

# 大字 has no glyph for zero.
OLD_KANJI_DIGITS: GlyphTable = (
    None, "壱", "弐", "参", "四", "五", "六", "七", "八", "九",
)


# ============================================================================
# Rank Tables
# ============================================================================
# Ones-ranks are indexed by digit position counted from 1 at the right end
# of a 4-digit group: [1] = ones, [2] = tens, [3] = hundreds, [4] = thousands.

KANJI_RANKS: GlyphTable = (None, "", "十", "百", "千")
OLD_KANJI_RANKS: GlyphTable = (None, "", "拾", "百", "阡")

# Bigger-ranks are indexed by 4-digit group, 0 being the lowest group.
KANJI_BIGGER_RANKS: GlyphTable = ("", "万", "億", "兆", "京")
OLD_KANJI_BIGGER_RANKS: GlyphTable = ("", "萬", "億", "兆", "京")

KANJI_ZERO = "零"

OLD_TWO_TEN = "弐拾"
OLD_TWENTY = "廿"
OLD_TEN = "拾"
OLD_THOUSAND = "阡"


# ============================================================================
# Special Form Tables
# ============================================================================

ROMAN_NUMBERS_CAPITAL: GlyphTable = (
    None, "Ⅰ", "Ⅱ", "Ⅲ", "Ⅳ", "Ⅴ", "Ⅵ", "Ⅶ", "Ⅷ", "Ⅸ", "Ⅹ", "Ⅺ", "Ⅻ", None,
)

ROMAN_NUMBERS_SMALL: GlyphTable = (
    None, "ⅰ", "ⅱ", "ⅲ", "ⅳ", "ⅴ", "ⅵ", "ⅶ", "ⅷ", "ⅸ", "ⅹ", "ⅺ", "ⅻ", None,
)

CIRCLED_NUMBERS: GlyphTable = (
    None, "①", "②", "③", "④", "⑤", "⑥", "⑦", "⑧", "⑨", "⑩",
    "⑪", "⑫", "⑬", "⑭", "⑮", "⑯", "⑰", "⑱", "⑲", "⑳",
    "㉑", "㉒", "㉓", "㉔", "㉕", "㉖", "㉗", "㉘", "㉙", "㉚",
    "㉛", "㉜", "㉝", "㉞", "㉟", "㊱", "㊲", "㊳", "㊴", "㊵",
    "㊶", "㊷", "㊸", "㊹", "㊺", "㊻", "㊼", "㊽", "㊾", "㊿",
    None,
)


def glyph_at(table: Sequence[Optional[str]], index: int) -> Optional[str]:
    """Get the glyph at ``index``, or None if absent or out of range."""
    if 0 <= index < len(table):
        return table[index]
    return None


# ============================================================================
# Reading Table
# ============================================================================

# Character to token value. Digits map to 0-9, ranks to their value.
KANJI_NUMBER_VALUES: Dict[str, int] = {
    '〇': 0, '零': 0,
    '一': 1, '壱': 1,
    '二': 2, '弐': 2,
    '三': 3, '参': 3,
    '四': 4,
    '五': 5,
    '六': 6,
    '七': 7,
    '八': 8,
    '九': 9,
    '十': 10, '拾': 10,
    '廿': 20,
    '百': 100,
    '千': 1000, '阡': 1000,
    '万': 10 ** 4, '萬': 10 ** 4,
    '億': 10 ** 8,
    '兆': 10 ** 12,
    '京': 10 ** 16,
}

# Arabic digits (both half-width and full-width)
for _digit, (_half, _full) in enumerate(zip(HALFWIDTH_DIGITS, FULLWIDTH_DIGITS)):
    KANJI_NUMBER_VALUES[_half] = _digit
    KANJI_NUMBER_VALUES[_full] = _digit
del _digit, _half, _full
