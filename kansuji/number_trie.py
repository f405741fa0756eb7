"""
Reading dictionary for Kanji numerals.

Maps every numeral character (Kanji digits, Daiji, rank characters and
half/full-width Arabic digits) to its token value. The mapping is stored as
a marisa_trie.RecordTrie, built once on first use and shared read-only
afterwards.
"""

import logging
import threading
from typing import Optional

import marisa_trie

from kansuji.tables import KANJI_NUMBER_VALUES

logger = logging.getLogger(__name__)

# ============================================================================
# Record Schema
# ============================================================================
# Each entry stores a single unsigned 64-bit token value.

RECORD_FORMAT = "<Q"


# ============================================================================
# Trie Loading
# ============================================================================

# Module-level singleton
_NUMBER_TRIE: Optional[marisa_trie.RecordTrie] = None
_NUMBER_TRIE_LOCK = threading.Lock()


def is_number_trie_loaded() -> bool:
    """Check if the reading trie has been built."""
    return _NUMBER_TRIE is not None


def load_number_trie() -> marisa_trie.RecordTrie:
    """
    Build (or return the already built) reading trie.

    Returns:
        The RecordTrie mapping numeral characters to token values
    """
    global _NUMBER_TRIE

    if _NUMBER_TRIE is not None:
        return _NUMBER_TRIE

    with _NUMBER_TRIE_LOCK:
        if _NUMBER_TRIE is None:
            records = [(char, (value,)) for char, value in KANJI_NUMBER_VALUES.items()]
            _NUMBER_TRIE = marisa_trie.RecordTrie(RECORD_FORMAT, records)
            logger.debug("Built numeral reading trie with %d entries", len(_NUMBER_TRIE))

    return _NUMBER_TRIE


def lookup_value(char: str) -> Optional[int]:
    """
    Look up the token value of a single numeral character.

    Args:
        char: One character, e.g. "十" or "５"

    Returns:
        The token value, or None if the character is not a numeral
    """
    trie = load_number_trie()
    records = trie.get(char)
    if not records:
        return None
    return records[0][0]


def get_number_trie_size() -> int:
    """Get the number of entries in the reading trie (0 if not built)."""
    if _NUMBER_TRIE is None:
        return 0
    return len(_NUMBER_TRIE)


def unload_number_trie():
    """Drop the reading trie; it is rebuilt on next use."""
    global _NUMBER_TRIE
    with _NUMBER_TRIE_LOCK:
        _NUMBER_TRIE = None
