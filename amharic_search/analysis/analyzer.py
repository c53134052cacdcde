"""
Amharic analyzer: raw text in, indexable terms out.

Pipeline:
1. Tokenize (letters/digits; Ethiopic punctuation separates words)
2. Lowercase
3. Fold Unicode decimal digits to ASCII
4. Remove stopwords
5. Normalize orthographic variants (ሐ/ኀ → ሀ, ሠ → ሰ, ዐ → አ, ጸ → ፀ)
6. Mark stem exclusions as keywords (only when exclusions are configured)
7. Strip one suffix and one prefix from non-keyword tokens

Queries should go through the same analyzer as documents so that both sides
produce identical terms.
"""

import logging
from typing import TYPE_CHECKING, AbstractSet, Iterable, List, Optional

from .filters import (
    decimal_digit_filter,
    fold_digits,
    keyword_marker_filter,
    lowercase_filter,
    normalization_filter,
    stem_filter,
    stop_filter,
)
from .normalizer import normalize_word
from .stemmer import AmharicStemmer
from .stopwords import get_default_stopwords, load_word_list
from .tokenizer import Token, iter_tokens

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)


class AmharicAnalyzer:
    """
    Analyzer for Amharic text.

    Non-Amharic input is handled like a simple analyzer: split on non-word
    characters and lowercased, with no affix rule ever matching Latin text.
    """

    def __init__(
        self,
        stopwords: Optional[Iterable[str]] = None,
        stem_exclusions: Iterable[str] = (),
        stemmer: Optional[AmharicStemmer] = None,
    ):
        """
        Args:
            stopwords: Words removed before normalization
                None: use the default Amharic stopword set
                Empty: keep every token

            stem_exclusions: Words never stemmed (names, pinned terms)
                Matched after normalization; entries are normalized here
                so either spelling of a foldable letter works

            stemmer: Custom stemmer (default: AmharicStemmer with the
                shipped rule tables)
        """
        if stopwords is None:
            self.stopwords = get_default_stopwords()
        else:
            self.stopwords = frozenset(stopwords)

        self.stem_exclusions = frozenset(
            normalize_word(fold_digits(word.lower())) for word in stem_exclusions
        )
        self.stemmer = stemmer or AmharicStemmer()

        logger.debug(
            f"AmharicAnalyzer ready: {len(self.stopwords)} stopwords, "
            f"{len(self.stem_exclusions)} stem exclusions"
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AmharicAnalyzer":
        """Build an analyzer from environment-derived settings"""
        stopwords: Optional[AbstractSet[str]] = None
        if settings.stopwords_file:
            stopwords = load_word_list(settings.stopwords_file)
            logger.info(f"Using custom stopwords: {settings.stopwords_file} ({len(stopwords)} words)")

        exclusions: AbstractSet[str] = frozenset()
        if settings.stem_exclusions_file:
            exclusions = load_word_list(settings.stem_exclusions_file)
            logger.info(f"Using stem exclusions: {settings.stem_exclusions_file} ({len(exclusions)} words)")

        return cls(stopwords=stopwords, stem_exclusions=exclusions)

    def analyze_tokens(self, text: str) -> List[Token]:
        """Run the full pipeline, keeping token offsets and keyword flags"""
        tokens = iter_tokens(text)
        tokens = lowercase_filter(tokens)
        tokens = decimal_digit_filter(tokens)
        tokens = stop_filter(tokens, self.stopwords)
        tokens = normalization_filter(tokens)
        if self.stem_exclusions:
            tokens = keyword_marker_filter(tokens, self.stem_exclusions)
        tokens = stem_filter(tokens, self.stemmer)
        return list(tokens)

    def analyze(self, text: str) -> List[str]:
        """
        Analyze text into index terms.

        Examples:
            >>> AmharicAnalyzer().analyze("ግን ይህ ረቂቅ ነው")
            ['ረቂቅ']

            >>> AmharicAnalyzer().analyze("English text.")
            ['english', 'text']
        """
        if not text:
            return []
        return [token.text for token in self.analyze_tokens(text)]

    def normalize(self, text: str) -> str:
        """
        Normalize a query string without tokenizing or stemming.

        Applies lowercasing, digit folding and orthographic normalization,
        for matching against terms that were indexed unstemmed.
        """
        return normalize_word(fold_digits(text.lower()))
