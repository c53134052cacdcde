"""
Orthographic normalizer for Amharic.

Amharic keeps several letters that are pronounced identically in the modern
language. Each of these families is folded onto one canonical letter per
vowel order so that spelling variants index as the same term:

- ሐ (U+1210) and ኀ (U+1280) series  → ሀ (U+1200) series
- ሠ (U+1220) series                 → ሰ (U+1230) series
- ዐ (U+12D0) series                 → አ (U+12A0) series
- ጸ (U+1338) series                 → ፀ (U+1340) series

Examples:
- "ሐዲስ" → "ሀዲስ"
- "ሠላም" → "ሰላም"
- "ዓለም" → "ኣለም"
- "ጸሀይ" → "ፀሀይ"

Normalization is done in place on a term buffer and never changes the word
length.
"""

from types import MappingProxyType
from typing import Dict, MutableSequence

from .buffer import check_bounds

# Every Ethiopic syllable series has seven vowel orders in consecutive codepoints
VOWEL_ORDERS = 7

# (alternate series base, canonical series base)
_FAMILIES = (
    (0x1210, 0x1200),  # ሐ → ሀ
    (0x1280, 0x1200),  # ኀ → ሀ
    (0x1220, 0x1230),  # ሠ → ሰ
    (0x12D0, 0x12A0),  # ዐ → አ
    (0x1338, 0x1340),  # ጸ → ፀ
)


def _build_canonical_map() -> Dict[str, str]:
    mapping = {}
    for alternate, canonical in _FAMILIES:
        for order in range(VOWEL_ORDERS):
            mapping[chr(alternate + order)] = chr(canonical + order)
    return mapping


CANONICAL_MAP = MappingProxyType(_build_canonical_map())

_TRANSLATION = str.maketrans(dict(CANONICAL_MAP))


def normalize(buffer: MutableSequence[str], length: int) -> int:
    """
    Normalize buffer[0:length] in place.

    Args:
        buffer: Mutable sequence of single-codepoint strings
        length: Logical length of the word in buffer

    Returns:
        Length after normalization (always equal to length)

    Raises:
        BufferBoundsError: If length exceeds the buffer capacity
    """
    check_bounds(buffer, length)
    for i in range(length):
        canonical = CANONICAL_MAP.get(buffer[i])
        if canonical is not None:
            buffer[i] = canonical
    return length


def normalize_word(word: str) -> str:
    """
    Normalize a whole string.

    Examples:
        >>> normalize_word("ሠላም")
        'ሰላም'
        >>> normalize_word("English")
        'English'
    """
    return word.translate(_TRANSLATION)
