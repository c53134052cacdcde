"""
Light affix stemmer for Amharic.

Removes at most one suffix and then at most one prefix from an already
normalized word, using the tiered rule tables in rules.py. Tiers are tried
longest affix first and the first match wins, so a word carrying several
stacked affixes only loses the outermost one on each side.

Examples (after normalization):
- "ልጊአችኋለሁ" → "ልጊ"    (5-codepoint suffix)
- "አልሰራችሁ"  → "ሰራ"    (prefix "አል" + suffix "ችሁ")
- "ረቂቅ"      → "ረቂቅ"  (no rule matches)

Implements NLTK's StemmerI so it can stand in for any NLTK stemmer.
"""

from typing import MutableSequence, Sequence

from nltk.stem.api import StemmerI

from .buffer import check_bounds, delete_n, ends_with, starts_with
from .rules import PREFIX_TIERS, SUFFIX_TIERS, AffixTier


class AmharicStemmer(StemmerI):
    """
    Suffix-then-prefix affix stripper.

    The stemmer holds no per-call state; one instance can be shared across
    threads as long as each call gets its own buffer.
    """

    def __init__(
        self,
        prefix_tiers: Sequence[AffixTier] = PREFIX_TIERS,
        suffix_tiers: Sequence[AffixTier] = SUFFIX_TIERS,
    ):
        self.prefix_tiers = tuple(prefix_tiers)
        self.suffix_tiers = tuple(suffix_tiers)

    def stem_buffer(self, buffer: MutableSequence[str], length: int) -> int:
        """
        Stem buffer[0:length] in place.

        Args:
            buffer: Normalized word as single-codepoint strings
            length: Logical length of the word

        Returns:
            New logical length (<= length)

        Raises:
            BufferBoundsError: If length exceeds the buffer capacity
        """
        length = self.stem_suffix(buffer, length)
        length = self.stem_prefix(buffer, length)
        return length

    def stem_suffix(self, buffer: MutableSequence[str], length: int) -> int:
        """Remove the longest matching suffix, if any"""
        check_bounds(buffer, length)
        for tier in self.suffix_tiers:
            if not tier.applies_to(length):
                continue
            for affix in tier.affixes:
                if ends_with(buffer, length, affix):
                    return length - tier.length
        return length

    def stem_prefix(self, buffer: MutableSequence[str], length: int) -> int:
        """Remove the longest matching prefix, if any"""
        check_bounds(buffer, length)
        for tier in self.prefix_tiers:
            if not tier.applies_to(length):
                continue
            for affix in tier.affixes:
                if starts_with(buffer, length, affix):
                    return delete_n(buffer, 0, length, tier.length)
        return length

    def stem(self, token: str) -> str:
        """
        Stem a single normalized word.

        Examples:
            >>> AmharicStemmer().stem("ቤቶች")
            'ቤቶ'
        """
        buffer = list(token)
        length = self.stem_buffer(buffer, len(buffer))
        return "".join(buffer[:length])

    def __repr__(self) -> str:
        return "<AmharicStemmer>"


# Shared default instance (rule tables are immutable)
_stemmer = AmharicStemmer()


def stem(buffer: MutableSequence[str], length: int) -> int:
    """Stem buffer[0:length] in place with the default rule tables"""
    return _stemmer.stem_buffer(buffer, length)
