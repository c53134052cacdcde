"""
Amharic text analysis for search indexing.

Components:
- normalizer: folds letters with identical modern pronunciation to one form
- stemmer: strips one known suffix and one known prefix per word
- rules: tiered affix tables with length guards (data/affixes.yaml)
- tokenizer: splits text on non-word characters and Ethiopic punctuation
- filters: lowercase, digit folding, stopwords, keyword marking
- analyzer: the full text → terms pipeline
- index_builder: document-level term frequencies

The normalizer and stemmer work in place on a word buffer (list of
codepoints) plus a logical length and return the new length.
"""

from .analyzer import AmharicAnalyzer
from .buffer import BufferBoundsError, TermBuffer
from .index_builder import build_term_index
from .normalizer import CANONICAL_MAP, normalize, normalize_word
from .rules import PREFIX_TIERS, SUFFIX_TIERS, AffixTier, RuleTableError
from .stemmer import AmharicStemmer, stem
from .stopwords import get_default_stopwords
from .tokenizer import Token, tokenize

__all__ = [
    "AmharicAnalyzer",
    "AmharicStemmer",
    "AffixTier",
    "BufferBoundsError",
    "CANONICAL_MAP",
    "PREFIX_TIERS",
    "RuleTableError",
    "SUFFIX_TIERS",
    "TermBuffer",
    "Token",
    "build_term_index",
    "get_default_stopwords",
    "normalize",
    "normalize_word",
    "stem",
    "tokenize",
]
