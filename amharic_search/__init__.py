"""
Amharic search analysis: orthographic normalization and affix stemming
for indexing Amharic text.
"""

from .analysis import (
    AmharicAnalyzer,
    AmharicStemmer,
    build_term_index,
    normalize,
    normalize_word,
    stem,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "AmharicAnalyzer",
    "AmharicStemmer",
    "build_term_index",
    "normalize",
    "normalize_word",
    "stem",
    "tokenize",
]
