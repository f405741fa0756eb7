"""
Numeral tokenizer.

Maps a numeral string to one token value per character, e.g.
"二百十一" -> [2, 100, 10, 1]. Digits become 0-9 and rank characters their
value (十 -> 10, 万 -> 10000).
"""

import logging
from typing import Optional

from kansuji.number_trie import lookup_value
from kansuji.number_types import NumeralTokens
from kansuji.tables import KANJI_DIGITS

logger = logging.getLogger(__name__)


def _kanji_echo(char: str) -> str:
    """Rewrite a half/full-width Arabic digit as a Kanji digit."""
    if '0' <= char <= '9':
        return KANJI_DIGITS[ord(char) - ord('0')]
    if '０' <= char <= '９':
        return KANJI_DIGITS[ord(char) - ord('０')]
    return char


def tokenize_numerals(text: str, allow_suffix: bool = False) -> Optional[NumeralTokens]:
    """
    Tokenize a numeral string.

    Reading stops at the first character that is not a numeral. If
    ``allow_suffix`` is set, the rest of the text becomes the suffix;
    otherwise the whole call fails.

    Args:
        text: Numeral text, e.g. "二十三" or "５万"
        allow_suffix: Accept trailing non-numeral text

    Returns:
        NumeralTokens, or None if no token was read or a suffix was found
        without ``allow_suffix``
    """
    result = NumeralTokens()
    echo = []
    pos = 0

    for pos, char in enumerate(text):
        value = lookup_value(char)
        if value is None:
            break
        echo.append(_kanji_echo(char))
        result.tokens.append(value)
    else:
        pos = len(text)

    if pos < len(text):
        if not allow_suffix:
            logger.debug("Non-numeral character %r at %d in %r", text[pos], pos, text)
            return None
        result.suffix = text[pos:]

    if not result.tokens:
        return None

    result.kanji = ''.join(echo)
    return result
